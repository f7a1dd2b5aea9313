# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Workflow classification and per-workflow stage/document visibility.
"""

from .classifier import (
    WORKFLOW_LABELS,
    classify,
    get_pipeline_name,
    get_workflow_label,
)
from .stages import (
    DEFAULT_STAGE_LAYOUTS,
    DocumentState,
    StageConfig,
    calculate_workflow_progress,
    get_actual_stage_number,
    get_display_stage_number,
    get_filtered_doc_types,
    get_stage_config,
    get_stage_filtering_summary,
    get_stage_numbers,
    get_stage_range,
    is_doc_type_allowed_for_workflow,
    is_stage_visible,
)

__all__ = [
    # Classification
    "WORKFLOW_LABELS",
    "classify",
    "get_pipeline_name",
    "get_workflow_label",
    # Stage ranges and documents
    "DEFAULT_STAGE_LAYOUTS",
    "DocumentState",
    "StageConfig",
    "calculate_workflow_progress",
    "get_actual_stage_number",
    "get_display_stage_number",
    "get_filtered_doc_types",
    "get_stage_config",
    "get_stage_filtering_summary",
    "get_stage_numbers",
    "get_stage_range",
    "is_doc_type_allowed_for_workflow",
    "is_stage_visible",
]
