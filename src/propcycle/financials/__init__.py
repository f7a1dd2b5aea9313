# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cost, receipt and margin aggregation across the acquisition, subdivision and
handover cost domains.
"""

from .aggregation import (
    CategorySummary,
    category_summaries,
    resolve_category,
    totals_by_category,
)
from .calculations import FinancialCalculations
from .domains import (
    ACQUISITION_COST_DOMAIN,
    DEFAULT_COST_DOMAINS,
    HANDOVER_COST_DOMAIN,
    SUBDIVISION_COST_DOMAIN,
    CostDomain,
    CostDomainSettings,
    CostType,
)
from .entries import CostEntry, PaymentInstallment, PaymentReceipt
from .summaries import (
    AcquisitionFinancialSummary,
    HandoverFinancialSummary,
    SubdivisionCostSummary,
    summarize_acquisition,
    summarize_handover,
    summarize_subdivision_costs,
)

__all__ = [
    # Domains
    "ACQUISITION_COST_DOMAIN",
    "DEFAULT_COST_DOMAINS",
    "HANDOVER_COST_DOMAIN",
    "SUBDIVISION_COST_DOMAIN",
    "CostDomain",
    "CostDomainSettings",
    "CostType",
    # Entries
    "CostEntry",
    "PaymentInstallment",
    "PaymentReceipt",
    # Aggregation
    "CategorySummary",
    "FinancialCalculations",
    "category_summaries",
    "resolve_category",
    "totals_by_category",
    # Summaries
    "AcquisitionFinancialSummary",
    "HandoverFinancialSummary",
    "SubdivisionCostSummary",
    "summarize_acquisition",
    "summarize_handover",
    "summarize_subdivision_costs",
]
