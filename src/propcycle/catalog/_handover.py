# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.primitives.enums import LifecycleStatusLabel as Label
from .stages import StageCatalog, StageDefinition

HANDOVER_PIPELINE_STAGES = (
    StageDefinition(
        id=1,
        name="Initial Handover Preparation",
        description="Property preparation and buyer identification",
        status_options=("Not Started", "In Progress", "Completed", "On Hold"),
        estimated_days=7,
    ),
    StageDefinition(
        id=2,
        name="Property Documentation & Survey",
        description="Document preparation and property survey verification",
        status_options=("Not Started", "Scheduled", "In Progress", "Completed", "Issues Found"),
        estimated_days=14,
    ),
    StageDefinition(
        id=3,
        name="Legal Clearance & Verification",
        description="Legal verification and clearance documentation",
        status_options=(
            "Not Started",
            "Documents Requested",
            "Under Review",
            "Verified",
            "Issues Found",
        ),
        estimated_days=21,
    ),
    StageDefinition(
        id=4,
        name="Handover Agreement & Documentation",
        description="Sale agreement preparation and signing",
        status_options=(
            "Not Started",
            "Draft Prepared",
            "Under Review",
            "Signed",
            "Amendments Needed",
        ),
        estimated_days=10,
    ),
    StageDefinition(
        id=5,
        name="Payment Processing",
        description="Initial payment and deposit processing",
        status_options=("Not Started", "Pending", "Partial", "Completed", "Issues"),
        estimated_days=5,
    ),
    StageDefinition(
        id=6,
        name="Final Payment Processing",
        description="Balance payment and final settlement",
        status_options=("Not Started", "Pending", "Partial", "Completed", "Issues"),
        estimated_days=7,
    ),
    StageDefinition(
        id=7,
        name="LCB & Transfer Forms Processing",
        description="Land Control Board approval and transfer forms",
        status_options=("Not Started", "Submitted", "Under Review", "Approved", "Forms Pending"),
        estimated_days=30,
    ),
    StageDefinition(
        id=8,
        name="Title Transfer & Registration",
        description="Final title transfer and registration completion",
        status_options=("Not Started", "In Progress", "Registered", "Completed"),
        estimated_days=14,
    ),
)

# Restricted to values that exist in this catalog's vocabulary
HANDOVER_TERMINAL_STATUSES = frozenset(
    {"Completed", "Verified", "Signed", "Approved", "Registered"}
)

HANDOVER_STATUS_LABELS = {
    1: Label.IDENTIFIED.value,
    2: Label.NEGOTIATING.value,
    3: Label.DUE_DILIGENCE.value,
    4: Label.UNDER_CONTRACT.value,
    5: Label.FINANCING.value,
    6: Label.FINANCING.value,
    7: Label.CLOSING.value,
    8: Label.CLOSING.value,
}

HANDOVER_CATALOG = StageCatalog(
    name="handover",
    stages=HANDOVER_PIPELINE_STAGES,
    terminal_statuses=HANDOVER_TERMINAL_STATUSES,
    status_labels=HANDOVER_STATUS_LABELS,
    completed_label=Label.COMPLETED.value,
)
