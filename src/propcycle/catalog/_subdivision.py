# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.primitives.enums import SubdivisionStatus
from .stages import StageCatalog, StageDefinition

# Stage ids are workflow-local (1-7); they occupy actual stage numbers 10-16
SUBDIVISION_PIPELINE_STAGES = (
    StageDefinition(
        id=1,
        name="Registered Title Confirmation",
        description="Confirm the mother title is registered before subdividing",
        status_options=("Not Started", "In Progress", "Verified", "Issues Found"),
        estimated_days=7,
    ),
    StageDefinition(
        id=2,
        name="Subdivision Decision & Minutes",
        description="Minutes recording the decision to subdivide",
        status_options=("Not Started", "In Progress", "Pending Review", "Approved"),
        estimated_days=7,
    ),
    StageDefinition(
        id=3,
        name="Official Search",
        description="Search certificate for the parcel to be subdivided",
        status_options=("Not Started", "Requested", "In Progress", "Completed"),
        estimated_days=14,
    ),
    StageDefinition(
        id=4,
        name="LCB Consent",
        description="Land Control Board consent to subdivide",
        status_options=("Not Started", "Submitted", "Under Review", "Approved", "Rejected"),
        estimated_days=30,
    ),
    StageDefinition(
        id=5,
        name="Mutation Forms",
        description="Mutation drawing, checking and approval",
        status_options=("Not Started", "In Progress", "Under Review", "Approved"),
        estimated_days=21,
    ),
    StageDefinition(
        id=6,
        name="Survey Beaconing",
        description="Placement of beacons for the new parcels",
        status_options=("Not Started", "Scheduled", "In Progress", "Completed"),
        estimated_days=14,
    ),
    StageDefinition(
        id=7,
        name="New Title Registration",
        description="Registration and collection of titles for the new parcels",
        status_options=("Not Started", "Submitted", "In Progress", "Registered", "Finalized"),
        estimated_days=30,
    ),
)

SUBDIVISION_TERMINAL_STATUSES = frozenset(
    {"Completed", "Approved", "Finalized", "Verified", "Registered"}
)

SUBDIVISION_STATUS_LABELS = {
    stage.id: SubdivisionStatus.SUB_DIVISION_STARTED.value
    for stage in SUBDIVISION_PIPELINE_STAGES
}

SUBDIVISION_CATALOG = StageCatalog(
    name="subdivision",
    stages=SUBDIVISION_PIPELINE_STAGES,
    terminal_statuses=SUBDIVISION_TERMINAL_STATUSES,
    status_labels=SUBDIVISION_STATUS_LABELS,
    completed_label=SubdivisionStatus.SUBDIVIDED.value,
)
