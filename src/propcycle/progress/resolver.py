# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Pipeline progress and current-stage resolution.

All read-side functions take the stage rows of one pipeline, the terminal
status set of that pipeline's catalog and the catalog length N. A status
outside the catalog vocabulary is never rejected here; it simply never
matches the terminal set and therefore reads as "in progress".

`initialize_pipeline_stages` and `apply_status_update` form the write side:
they validate against the catalog before producing new rows.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Collection, Iterable, List, Mapping, Optional, Union

from ..catalog.stages import (
    IN_PROGRESS,
    NOT_STARTED,
    PipelineStageData,
    StageCatalog,
)
from ..core.primitives.model import Model
from ..core.primitives.types import NonNegativeInt
from ..utils.rounding import round_half_up

logger = logging.getLogger(__name__)

StageLike = Union[PipelineStageData, Mapping[str, Any]]


class PipelineProgress(Model):
    """Derived progress view of one property's pipeline."""

    current_stage: NonNegativeInt
    completed: NonNegativeInt
    total: NonNegativeInt
    percentage: NonNegativeInt
    status_label: str
    is_complete: bool


def parse_stages(stages: Iterable[StageLike]) -> List[PipelineStageData]:
    return [
        stage if isinstance(stage, PipelineStageData) else PipelineStageData.model_validate(dict(stage))
        for stage in stages
    ]


def count_completed_stages(stages: Iterable[StageLike], terminal: Collection[str]) -> int:
    return sum(1 for stage in parse_stages(stages) if stage.status in terminal)


def get_current_stage(stages: Iterable[StageLike], terminal: Collection[str], total: int) -> int:
    """
    Stage id of the first stage whose status is not terminal.

    Stages are read in the order given, which must be ascending stage_id.
    When every stage is terminal the pipeline is complete and `total` is
    returned. An empty row list is a pipeline that has not been opened yet
    and reads as stage 1 (0 for an empty catalog).
    """
    rows = parse_stages(stages)
    if not rows:
        return min(1, total)
    for stage in rows:
        if stage.status not in terminal:
            return stage.stage_id
    return total


def calculate_progress_percentage(
    stages: Iterable[StageLike], terminal: Collection[str], total: int
) -> int:
    """Whole-number share of terminal stages, rounded half up; 0 for an empty catalog."""
    if total <= 0:
        return 0
    completed = count_completed_stages(stages, terminal)
    return round_half_up(100 * completed / total)


def is_pipeline_complete(stages: Iterable[StageLike], terminal: Collection[str], total: int) -> bool:
    return total > 0 and count_completed_stages(stages, terminal) >= total


def determine_status_label(stages: Iterable[StageLike], catalog: StageCatalog) -> str:
    """
    Coarse lifecycle label for a pipeline.

    The completed label wins whenever every stage is terminal. Otherwise the
    current stage is looked up in the catalog's label table, falling back to
    the table's first label for unmapped stage ids.
    """
    rows = parse_stages(stages)
    terminal = catalog.terminal_statuses
    total = catalog.stage_count

    if is_pipeline_complete(rows, terminal, total):
        return catalog.completed_label
    return catalog.label_for_stage(get_current_stage(rows, terminal, total))


def resolve_pipeline(stages: Iterable[StageLike], catalog: StageCatalog) -> PipelineProgress:
    rows = parse_stages(stages)
    terminal = catalog.terminal_statuses
    total = catalog.stage_count

    progress = PipelineProgress(
        current_stage=get_current_stage(rows, terminal, total),
        completed=count_completed_stages(rows, terminal),
        total=total,
        percentage=calculate_progress_percentage(rows, terminal, total),
        status_label=determine_status_label(rows, catalog),
        is_complete=is_pipeline_complete(rows, terminal, total),
    )
    logger.debug(
        f"{catalog.name}: stage {progress.current_stage}/{total}, "
        f"{progress.percentage}% ({progress.status_label})"
    )
    return progress


def initialize_pipeline_stages(catalog: StageCatalog) -> List[PipelineStageData]:
    """Fresh rows for a new pipeline: stage 1 in progress, the rest not started."""
    return [
        PipelineStageData(
            stage_id=stage.id,
            status=IN_PROGRESS if stage.id == 1 else NOT_STARTED,
        )
        for stage in catalog.stages
    ]


def apply_status_update(
    stages: Iterable[StageLike],
    stage_id: int,
    new_status: str,
    catalog: StageCatalog,
    notes: Optional[str] = None,
    at: Optional[datetime] = None,
) -> List[PipelineStageData]:
    """
    Return a copy of `stages` with one stage moved to `new_status`.

    Date bookkeeping on the updated stage:
    - `started_date` is stamped the first time it leaves "Not Started"
    - `completed_date` is stamped on a terminal status and cleared otherwise
    - both dates are cleared when it goes back to "Not Started"

    Args:
        stages: Current rows of the pipeline
        stage_id: Stage to update
        new_status: Target status; must be in that stage's status options
        catalog: Catalog the rows belong to
        notes: Replacement notes; None or empty keeps the existing ones
        at: Timestamp to stamp, defaults to now

    Returns:
        New list of rows; the input rows are left untouched

    Raises:
        ValueError: If the stage is not in the catalog or the rows, or the
            status is not in the stage's vocabulary
    """
    rows = parse_stages(stages)
    stage = catalog.get_stage_by_id(stage_id)
    if stage is None:
        raise ValueError(f"{catalog.name}: unknown stage {stage_id}")

    index = next((i for i, row in enumerate(rows) if row.stage_id == stage_id), None)
    if index is None:
        raise ValueError(f"{catalog.name}: no row for stage {stage_id}")

    current = rows[index]
    if not catalog.can_transition_to_status(current.status, new_status, stage_id):
        raise ValueError(
            f"'{new_status}' is not a valid status for stage {stage_id} ({stage.name}); "
            f"expected one of {list(stage.status_options)}"
        )

    timestamp = at or datetime.now()
    update: dict = {"status": new_status}
    if notes:
        update["notes"] = notes

    if new_status == NOT_STARTED:
        update["started_date"] = None
        update["completed_date"] = None
    else:
        if current.started_date is None:
            update["started_date"] = timestamp
        if catalog.is_terminal(new_status):
            update["completed_date"] = current.completed_date or timestamp
        else:
            update["completed_date"] = None

    logger.debug(f"{catalog.name}: stage {stage_id} '{current.status}' -> '{new_status}'")
    return [*rows[:index], current.model_copy(update=update), *rows[index + 1 :]]
