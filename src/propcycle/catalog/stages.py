# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Stage definitions and per-pipeline stage catalogs.

Each catalog owns its own status vocabulary. Vocabularies are never shared
across catalogs: "Processed" is terminal in the purchase pipeline but does not
exist in the handover pipeline.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, FrozenSet, List, Optional, Tuple

from pydantic import Field, field_validator, model_validator

from ..core.primitives.model import BoundaryModel, Model
from ..core.primitives.types import PositiveInt, StageNumber

NOT_STARTED = "Not Started"
IN_PROGRESS = "In Progress"


class StageDefinition(Model):
    """One ordered step within a pipeline catalog."""

    id: StageNumber
    name: str
    description: str = ""
    status_options: Tuple[str, ...]
    estimated_days: Optional[PositiveInt] = None

    @model_validator(mode="after")
    def check_status_options(self) -> "StageDefinition":
        if not self.status_options:
            raise ValueError(f"Stage {self.id} ({self.name}) has no status options")
        if len(set(self.status_options)) != len(self.status_options):
            raise ValueError(f"Stage {self.id} ({self.name}) repeats a status option")
        return self


class PipelineStageData(BoundaryModel):
    """Persisted state of one stage of one property's pipeline."""

    stage_id: StageNumber
    status: str = NOT_STARTED
    started_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    notes: str = ""
    documents: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("status", "notes", "documents", mode="before")
    @classmethod
    def null_to_default(cls, value, info):
        if value is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return value


class StageCatalog(Model):
    """
    Ordered stage definitions for one pipeline plus its progress vocabulary.

    Attributes:
        name: Pipeline name (purchase_pipeline, handover, subdivision)
        stages: Stage definitions with contiguous ids 1..N
        terminal_statuses: Status values that mark a stage as done
        status_labels: Coarse lifecycle label per current stage id. The first
            entry is the fallback for stage ids missing from the table.
        completed_label: Label reported once every stage is terminal
    """

    name: str
    stages: Tuple[StageDefinition, ...]
    terminal_statuses: FrozenSet[str]
    status_labels: Dict[int, str]
    completed_label: str

    @model_validator(mode="after")
    def check_catalog_invariants(self) -> "StageCatalog":
        ids = [stage.id for stage in self.stages]
        if ids != list(range(1, len(ids) + 1)):
            raise ValueError(f"{self.name}: stage ids must be contiguous from 1, got {ids}")

        vocabulary = {option for stage in self.stages for option in stage.status_options}
        unknown_terminal = self.terminal_statuses - vocabulary
        if unknown_terminal:
            raise ValueError(
                f"{self.name}: terminal statuses {sorted(unknown_terminal)} "
                "are not in any stage's status options"
            )

        if not self.status_labels:
            raise ValueError(f"{self.name}: status_labels must not be empty")
        unknown_ids = set(self.status_labels) - set(ids)
        if unknown_ids:
            raise ValueError(f"{self.name}: status_labels reference unknown stages {sorted(unknown_ids)}")

        for stage in self.stages:
            if NOT_STARTED not in stage.status_options:
                raise ValueError(f"{self.name}: stage {stage.id} lacks '{NOT_STARTED}'")
        if self.stages and IN_PROGRESS not in self.stages[0].status_options:
            raise ValueError(f"{self.name}: stage 1 lacks '{IN_PROGRESS}'")
        return self

    @property
    def stage_count(self) -> int:
        return len(self.stages)

    @property
    def stage_ids(self) -> List[int]:
        return [stage.id for stage in self.stages]

    @property
    def fallback_label(self) -> str:
        return next(iter(self.status_labels.values()))

    def get_stage_by_id(self, stage_id: int) -> Optional[StageDefinition]:
        """Return the stage definition, or None if the id is outside the catalog."""
        for stage in self.stages:
            if stage.id == stage_id:
                return stage
        return None

    def is_terminal(self, status: str) -> bool:
        return status in self.terminal_statuses

    def can_transition_to_status(
        self, current_status: Optional[str], new_status: str, stage_id: int
    ) -> bool:
        """
        Check whether a stage may be moved to `new_status`.

        Transitions are set membership, not a graph: any status in the stage's
        vocabulary is reachable from any other, backwards included.
        `current_status` is accepted for call-site symmetry and not inspected.
        """
        stage = self.get_stage_by_id(stage_id)
        if stage is None:
            return False
        return new_status in stage.status_options

    def get_next_recommended_status(self, current_status: str, stage_id: int) -> Optional[str]:
        """Return the status listed after `current_status`, or None if last or unknown."""
        stage = self.get_stage_by_id(stage_id)
        if stage is None or current_status not in stage.status_options:
            return None
        index = stage.status_options.index(current_status)
        if index + 1 >= len(stage.status_options):
            return None
        return stage.status_options[index + 1]

    def label_for_stage(self, stage_id: int) -> str:
        return self.status_labels.get(stage_id, self.fallback_label)
