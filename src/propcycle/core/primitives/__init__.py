# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core primitives for the property lifecycle engine.

Enums, immutable base models, constrained types and the stage layout table.
"""

from .enums import (
    AcquisitionCostCategory,
    CostPaymentStatus,
    HandoverCostCategory,
    HandoverStatus,
    LifecycleStatusLabel,
    PaymentMethod,
    PropertySource,
    PropertyStatusFilter,
    SubdivisionCostCategory,
    SubdivisionStatus,
    WorkflowType,
    enum_to_string,
)
from .model import BoundaryModel, Model
from .settings import (
    KNOWN_DISCREPANCIES,
    REGULAR_STAGE_LAYOUT,
    SUBDIVISION_STAGE_LAYOUT,
    ConfigurationDiscrepancy,
    StageLayout,
    StageLayoutSettings,
    StageRange,
)
from .summary import ProgressSummary
from .types import NonNegativeInt, PositiveInt, StageNumber

__all__ = [
    # Models
    "BoundaryModel",
    "ProgressSummary",
    "Model",
    # Enums
    "AcquisitionCostCategory",
    "CostPaymentStatus",
    "HandoverCostCategory",
    "HandoverStatus",
    "LifecycleStatusLabel",
    "PaymentMethod",
    "PropertySource",
    "PropertyStatusFilter",
    "SubdivisionCostCategory",
    "SubdivisionStatus",
    "WorkflowType",
    "enum_to_string",
    # Settings
    "KNOWN_DISCREPANCIES",
    "REGULAR_STAGE_LAYOUT",
    "SUBDIVISION_STAGE_LAYOUT",
    "ConfigurationDiscrepancy",
    "StageLayout",
    "StageLayoutSettings",
    "StageRange",
    # Types
    "NonNegativeInt",
    "PositiveInt",
    "StageNumber",
]
