# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Progress and current-stage resolution for stage pipelines.
"""

from .resolver import (
    PipelineProgress,
    apply_status_update,
    calculate_progress_percentage,
    count_completed_stages,
    determine_status_label,
    get_current_stage,
    initialize_pipeline_stages,
    is_pipeline_complete,
    resolve_pipeline,
)

__all__ = [
    "PipelineProgress",
    "apply_status_update",
    "calculate_progress_percentage",
    "count_completed_stages",
    "determine_status_label",
    "get_current_stage",
    "initialize_pipeline_stages",
    "is_pipeline_complete",
    "resolve_pipeline",
]
