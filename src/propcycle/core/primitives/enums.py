# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class PropertySource(str, Enum):
    """How a property entered the portfolio."""

    DIRECT_ADDITION = "DIRECT_ADDITION"
    PURCHASE_PIPELINE = "PURCHASE_PIPELINE"
    SUBDIVISION_PROCESS = "SUBDIVISION_PROCESS"


class SubdivisionStatus(str, Enum):
    """Persisted subdivision flag of a property."""

    NOT_STARTED = "NOT_STARTED"
    SUB_DIVISION_STARTED = "SUB_DIVISION_STARTED"
    SUBDIVIDED = "SUBDIVIDED"


class HandoverStatus(str, Enum):
    """
    Persisted handover flag of a property.

    Several generations of values coexist in stored rows: PENDING/IN_PROGRESS,
    HANDOVER_STARTED, and the coarse pipeline labels written back by the
    handover pipeline. Only NOT_STARTED means no handover has been opened.
    """

    NOT_STARTED = "NOT_STARTED"
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    HANDOVER_STARTED = "HANDOVER_STARTED"
    COMPLETED = "COMPLETED"

    # Pipeline labels persisted by the handover pipeline
    IDENTIFIED = "IDENTIFIED"
    NEGOTIATING = "NEGOTIATING"
    DUE_DILIGENCE = "DUE_DILIGENCE"
    UNDER_CONTRACT = "UNDER_CONTRACT"
    FINANCING = "FINANCING"
    CLOSING = "CLOSING"
    CANCELLED = "CANCELLED"


class WorkflowType(str, Enum):
    """
    The mutually-exclusive lifecycle track a property is on.

    Derived from the persisted flags on every evaluation; never stored.
    """

    DIRECT_ADDITION = "direct_addition"
    PURCHASE_PIPELINE = "purchase_pipeline"
    HANDOVER = "handover"
    SUBDIVISION = "subdivision"

    @classmethod
    def from_value(cls, value: str) -> Optional["WorkflowType"]:
        """Look up enum member by its string value."""
        for member in cls:
            if member.value == value:
                return member
        return None

    @property
    def is_regular(self) -> bool:
        """True for the workflows sharing the 1-10 stage space."""
        return self is not WorkflowType.SUBDIVISION


class PropertyStatusFilter(str, Enum):
    """Coarse status vocabulary used by property list filters."""

    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    COMPLETED = "completed"


class LifecycleStatusLabel(str, Enum):
    """Coarse status labels derived from purchase and handover pipelines."""

    IDENTIFIED = "IDENTIFIED"
    NEGOTIATING = "NEGOTIATING"
    DUE_DILIGENCE = "DUE_DILIGENCE"
    UNDER_CONTRACT = "UNDER_CONTRACT"
    FINANCING = "FINANCING"
    CLOSING = "CLOSING"
    COMPLETED = "COMPLETED"


class AcquisitionCostCategory(str, Enum):
    """Cost categories for the purchase of a property."""

    PRE_PURCHASE = "PRE_PURCHASE"
    AGREEMENT_LEGAL = "AGREEMENT_LEGAL"
    LCB_PROCESS = "LCB_PROCESS"
    PAYMENTS = "PAYMENTS"
    TRANSFER_REGISTRATION = "TRANSFER_REGISTRATION"
    OTHER = "OTHER"


class SubdivisionCostCategory(str, Enum):
    """Cost categories for subdividing a parcel."""

    STATUTORY_BOARD_FEES = "STATUTORY_BOARD_FEES"
    SURVEY_PLANNING_FEES = "SURVEY_PLANNING_FEES"
    REGISTRATION_TITLE_FEES = "REGISTRATION_TITLE_FEES"
    LEGAL_COMPLIANCE = "LEGAL_COMPLIANCE"
    OTHER_CHARGES = "OTHER_CHARGES"


class HandoverCostCategory(str, Enum):
    """Cost categories for handing a property over to a buyer."""

    PRE_HANDOVER = "PRE_HANDOVER"
    AGREEMENT_LEGAL = "AGREEMENT_LEGAL"
    LCB_PROCESS = "LCB_PROCESS"
    PAYMENT_TRACKING = "PAYMENT_TRACKING"
    TRANSFER_REGISTRATION = "TRANSFER_REGISTRATION"
    OTHER = "OTHER"


class CostPaymentStatus(str, Enum):
    """Settlement state of a single cost entry."""

    PENDING = "PENDING"
    PAID = "PAID"
    PARTIALLY_PAID = "PARTIALLY_PAID"


class PaymentMethod(str, Enum):
    """How a receipt or installment was paid."""

    CASH = "CASH"
    BANK_TRANSFER = "BANK_TRANSFER"
    CHEQUE = "CHEQUE"
    MOBILE_MONEY = "MOBILE_MONEY"
    OTHER = "OTHER"


def enum_to_string(value) -> str:
    """
    Convert enum values to their string representation.

    Args:
        value: Any value, but primarily expected to be enum instances

    Returns:
        String representation of the enum value, or str(value) for non-enums
    """
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
