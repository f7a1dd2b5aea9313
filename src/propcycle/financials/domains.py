# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cost domains: acquisition, subdivision and handover.

A domain is a fixed, ordered category list with display labels and the cost
types that belong to each category. The category order is the display order
used by every summary.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import Field, model_validator

from ..core.primitives.enums import (
    AcquisitionCostCategory,
    HandoverCostCategory,
    SubdivisionCostCategory,
)
from ..core.primitives.model import Model


class CostType(Model):
    """A selectable kind of cost within one category."""

    id: str
    category: str
    label: str
    description: Optional[str] = None


class CostDomain(Model):
    """
    Category vocabulary of one cost domain.

    Attributes:
        name: Domain name (acquisition, subdivision, handover)
        categories: Category keys in display order
        labels: Display label per category key
        cost_types: Cost types, each assigned to one category
    """

    name: str
    categories: Tuple[str, ...]
    labels: Dict[str, str]
    cost_types: Tuple[CostType, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def check_vocabulary(self) -> "CostDomain":
        if len(set(self.categories)) != len(self.categories):
            raise ValueError(f"{self.name}: duplicate cost categories")
        missing = [category for category in self.categories if category not in self.labels]
        if missing:
            raise ValueError(f"{self.name}: categories without labels {missing}")

        ids = [cost_type.id for cost_type in self.cost_types]
        if len(set(ids)) != len(ids):
            raise ValueError(f"{self.name}: duplicate cost type ids")
        stray = sorted({ct.category for ct in self.cost_types} - set(self.categories))
        if stray:
            raise ValueError(f"{self.name}: cost types reference unknown categories {stray}")
        return self

    def has_category(self, category: Optional[str]) -> bool:
        return category in self.categories

    def label_for(self, category: str) -> str:
        return self.labels.get(category, category)

    def get_cost_type(self, cost_type_id: Optional[str]) -> Optional[CostType]:
        for cost_type in self.cost_types:
            if cost_type.id == cost_type_id:
                return cost_type
        return None

    def cost_types_for(self, category: str) -> List[CostType]:
        return [cost_type for cost_type in self.cost_types if cost_type.category == category]


def _cost_types(category: str, *pairs: Tuple[str, str]) -> Tuple[CostType, ...]:
    return tuple(CostType(id=cost_type_id, category=category, label=label) for cost_type_id, label in pairs)


_ACQ = AcquisitionCostCategory
ACQUISITION_COST_DOMAIN = CostDomain(
    name="acquisition",
    categories=tuple(category.value for category in _ACQ),
    labels={
        _ACQ.PRE_PURCHASE.value: "Pre-Purchase Costs",
        _ACQ.AGREEMENT_LEGAL.value: "Agreement & Legal Costs",
        _ACQ.LCB_PROCESS.value: "Land Control Board Process",
        _ACQ.PAYMENTS.value: "Payment Tracking",
        _ACQ.TRANSFER_REGISTRATION.value: "Transfer & Registration Costs",
        _ACQ.OTHER.value: "Other Costs",
    },
    cost_types=(
        *_cost_types(
            _ACQ.PRE_PURCHASE.value,
            ("site_visit_costs", "Site Visit Costs"),
            ("broker_meeting_costs", "Broker Meeting Costs"),
            ("due_diligence_costs", "Due Diligence Costs"),
            ("legal_consultation", "Legal Consultation"),
        ),
        *_cost_types(
            _ACQ.AGREEMENT_LEGAL.value,
            ("paperwork_preparation", "Paperwork Preparation"),
            ("contract_review_fees", "Contract Review Fees"),
            ("initial_deposit", "Initial Deposit"),
            ("broker_commission", "Broker Commission"),
        ),
        *_cost_types(
            _ACQ.LCB_PROCESS.value,
            ("lcb_application_fees", "LCB Application Fees"),
            ("lcb_transport_costs", "LCB Transport Costs"),
            ("lcb_meeting_costs", "LCB Meeting Costs"),
        ),
        *_cost_types(
            _ACQ.TRANSFER_REGISTRATION.value,
            ("transfer_forms_prep", "Transfer Forms Preparation"),
            ("property_valuation", "Property Valuation"),
            ("stamp_duty", "Stamp Duty"),
            ("lra_33_forms", "LRA 33 Forms"),
            ("registration_legal_fees", "Registration Legal Fees"),
            ("registry_submission", "Registry Submission"),
            ("registry_facilitation", "Registry Facilitation"),
            ("title_deed_collection", "Title Deed Collection"),
        ),
        *_cost_types(_ACQ.OTHER.value, ("other_cost", "Other Cost")),
    ),
)

_SUB = SubdivisionCostCategory
SUBDIVISION_COST_DOMAIN = CostDomain(
    name="subdivision",
    categories=tuple(category.value for category in _SUB),
    labels={
        _SUB.STATUTORY_BOARD_FEES.value: "Statutory & Board Fees",
        _SUB.SURVEY_PLANNING_FEES.value: "Survey & Planning Fees",
        _SUB.REGISTRATION_TITLE_FEES.value: "Registration & Title Fees",
        _SUB.LEGAL_COMPLIANCE.value: "Legal & Compliance",
        _SUB.OTHER_CHARGES.value: "Other Charges",
    },
    cost_types=(
        *_cost_types(
            _SUB.STATUTORY_BOARD_FEES.value,
            ("lcb_normal_fee", "Land Control Board (Normal)"),
            ("lcb_special_fee", "Land Control Board (Special)"),
            ("board_application_fee", "Board Application Fee"),
        ),
        *_cost_types(
            _SUB.SURVEY_PLANNING_FEES.value,
            ("scheme_plan_preparation", "Scheme Plan Preparation"),
            ("mutation_drawing", "Mutation Drawing"),
            ("mutation_checking", "Mutation Checking"),
            ("surveyor_professional_fees", "Surveyor Professional Fees"),
            ("map_amendment", "Map Amendment"),
            ("rim_update", "RIM Update"),
            ("new_parcel_numbers", "New Parcel Numbers"),
        ),
        *_cost_types(
            _SUB.REGISTRATION_TITLE_FEES.value,
            ("new_title_registration", "New Title Registration"),
            ("registrar_fees", "Registrar Fees"),
            ("title_printing", "Title Printing"),
        ),
        *_cost_types(
            _SUB.LEGAL_COMPLIANCE.value,
            ("compliance_certificate", "Compliance Certificate"),
            ("development_fee", "Development Fee"),
            ("admin_costs", "Administrative Costs"),
            ("search_fee", "Search Fee"),
            ("land_rates_clearance", "Land Rates Clearance"),
            ("stamp_duty", "Stamp Duty"),
        ),
        *_cost_types(
            _SUB.OTHER_CHARGES.value,
            ("county_planning_fees", "County Planning Fees"),
            ("professional_legal_fees", "Professional/Legal Fees"),
            ("miscellaneous_disbursements", "Miscellaneous Disbursements"),
        ),
    ),
)

_HND = HandoverCostCategory
HANDOVER_COST_DOMAIN = CostDomain(
    name="handover",
    categories=tuple(category.value for category in _HND),
    labels={
        _HND.PRE_HANDOVER.value: "Pre-Handover Costs",
        _HND.AGREEMENT_LEGAL.value: "Agreement & Legal Costs",
        _HND.LCB_PROCESS.value: "Land Control Board Process",
        _HND.PAYMENT_TRACKING.value: "Payment Tracking",
        _HND.TRANSFER_REGISTRATION.value: "Transfer & Registration Costs",
        _HND.OTHER.value: "Other Costs",
    },
    cost_types=(
        *_cost_types(
            _HND.PRE_HANDOVER.value,
            ("property_valuation", "Property Valuation"),
            ("property_inspection", "Property Inspection"),
            ("marketing_preparation", "Marketing Preparation"),
        ),
        *_cost_types(
            _HND.AGREEMENT_LEGAL.value,
            ("contract_preparation", "Contract Preparation"),
            ("legal_fees", "Legal Fees"),
        ),
        *_cost_types(_HND.LCB_PROCESS.value, ("lcb_application_fee", "LCB Application Fee")),
        *_cost_types(_HND.PAYMENT_TRACKING.value, ("bank_charges", "Bank Charges")),
        *_cost_types(
            _HND.TRANSFER_REGISTRATION.value,
            ("transfer_fee", "Transfer Fee"),
            ("stamp_duty", "Stamp Duty"),
        ),
        *_cost_types(_HND.OTHER.value, ("other_handover_expense", "Other Handover Expense")),
    ),
)


class CostDomainSettings(Model):
    """The three cost domains, addressable by name."""

    acquisition: CostDomain = ACQUISITION_COST_DOMAIN
    subdivision: CostDomain = SUBDIVISION_COST_DOMAIN
    handover: CostDomain = HANDOVER_COST_DOMAIN

    def get(self, name: str) -> CostDomain:
        if name not in type(self).model_fields:
            raise KeyError(f"Unknown cost domain '{name}'")
        return getattr(self, name)


DEFAULT_COST_DOMAINS = CostDomainSettings()
