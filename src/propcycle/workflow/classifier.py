# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Workflow classification.

Maps a property's persisted flags to exactly one WorkflowType. Evaluated
top-down, first match wins:

1. subdivision_status set and not NOT_STARTED -> subdivision
2. handover_status set and not NOT_STARTED -> handover
3. property_source == PURCHASE_PIPELINE -> purchase_pipeline
4. otherwise -> direct_addition
"""

from __future__ import annotations

import logging
from typing import Dict

from ..core.base.property import PropertyLike, PropertyRecord
from ..core.primitives.enums import (
    HandoverStatus,
    PropertySource,
    SubdivisionStatus,
    WorkflowType,
)

logger = logging.getLogger(__name__)

WORKFLOW_LABELS: Dict[WorkflowType, str] = {
    WorkflowType.DIRECT_ADDITION: "Direct Addition",
    WorkflowType.PURCHASE_PIPELINE: "Purchase Pipeline",
    WorkflowType.HANDOVER: "Property Handover",
    WorkflowType.SUBDIVISION: "Subdivision Process",
}


def classify(property: PropertyLike) -> WorkflowType:
    """
    Determine which workflow a property is in.

    Args:
        property: A PropertyRecord or a raw persistence row

    Returns:
        The property's single active WorkflowType
    """
    record = PropertyRecord.parse(property)

    if record.subdivision_status is not SubdivisionStatus.NOT_STARTED:
        workflow = WorkflowType.SUBDIVISION
    elif record.handover_status is not HandoverStatus.NOT_STARTED:
        workflow = WorkflowType.HANDOVER
    elif record.property_source is PropertySource.PURCHASE_PIPELINE:
        workflow = WorkflowType.PURCHASE_PIPELINE
    else:
        workflow = WorkflowType.DIRECT_ADDITION

    logger.debug(f"Property {record.id} classified as {workflow.value}")
    return workflow


def get_pipeline_name(workflow_type: WorkflowType) -> str:
    """Pipeline name used by persistence collaborators for a workflow."""
    return WorkflowType(workflow_type).value


def get_workflow_label(workflow_type: WorkflowType) -> str:
    return WORKFLOW_LABELS[WorkflowType(workflow_type)]
