# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.primitives.enums import LifecycleStatusLabel as Label
from .stages import StageCatalog, StageDefinition

PURCHASE_PIPELINE_STAGES = (
    StageDefinition(
        id=1,
        name="Initial Search & Evaluation",
        description="Property identification, photos, location and seller contact",
        status_options=("Not Started", "In Progress", "Completed", "On Hold"),
        estimated_days=7,
    ),
    StageDefinition(
        id=2,
        name="Survey & Mapping",
        description="Professional land survey, survey map and deed plan",
        status_options=("Not Started", "Scheduled", "In Progress", "Completed", "Issues Found"),
        estimated_days=14,
    ),
    StageDefinition(
        id=3,
        name="Legal Verification",
        description="Title deed verification, witness statements and legal opinion",
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
        name="Agreement & Documentation",
        description="Purchase agreement and sale contract signing",
        status_options=(
            "Not Started",
            "Draft Prepared",
            "Under Review",
            "Partially Signed",
            "Fully Signed",
            "Amendments Needed",
        ),
        estimated_days=10,
    ),
    StageDefinition(
        id=5,
        name="Financial Processing (Down Payment)",
        description="Down payment and deposit receipts",
        status_options=("Not Started", "Pending", "Partial", "Processed", "Issues"),
        estimated_days=5,
    ),
    StageDefinition(
        id=6,
        name="Financial Processing (Subsequent Payments)",
        description="Installments against the agreed payment schedule",
        status_options=("Not Started", "Pending", "Partial", "Processed", "Issues"),
        estimated_days=30,
    ),
    StageDefinition(
        id=7,
        name="LCB Consent & Final Documentation",
        description="Land Control Board consent, transfer forms and compliance certificates",
        status_options=(
            "Not Started",
            "Submitted",
            "Under Review",
            "Approved",
            "LCB Approved & Forms Signed",
            "Forms Pending",
        ),
        estimated_days=30,
    ),
    StageDefinition(
        id=8,
        name="Property Transfer & Handover",
        description="Title registration, keys and handover certificate",
        status_options=("Not Started", "In Progress", "Registered", "Finalized", "Completed"),
        estimated_days=14,
    ),
)

PURCHASE_TERMINAL_STATUSES = frozenset(
    {
        "Completed",
        "Verified",
        "Finalized",
        "Processed",
        "Approved",
        "Fully Signed",
        "Registered",
        "LCB Approved & Forms Signed",
    }
)

PURCHASE_STATUS_LABELS = {
    1: Label.IDENTIFIED.value,
    2: Label.NEGOTIATING.value,
    3: Label.DUE_DILIGENCE.value,
    4: Label.UNDER_CONTRACT.value,
    5: Label.FINANCING.value,
    6: Label.FINANCING.value,
    7: Label.CLOSING.value,
    8: Label.CLOSING.value,
}

PURCHASE_CATALOG = StageCatalog(
    name="purchase_pipeline",
    stages=PURCHASE_PIPELINE_STAGES,
    terminal_statuses=PURCHASE_TERMINAL_STATUSES,
    status_labels=PURCHASE_STATUS_LABELS,
    completed_label=Label.COMPLETED.value,
)
