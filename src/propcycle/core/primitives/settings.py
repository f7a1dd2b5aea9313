# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List, Tuple

from pydantic import Field, model_validator

from .enums import WorkflowType
from .model import Model
from .types import NonNegativeInt, StageNumber


class StageRange(Model):
    """Inclusive range of stage numbers, serialised as {min, max}."""

    min: StageNumber
    max: StageNumber

    @model_validator(mode="after")
    def check_ordering(self) -> "StageRange":
        if self.max < self.min:
            raise ValueError(f"Stage range max ({self.max}) is below min ({self.min})")
        return self

    def contains(self, stage_number: int) -> bool:
        return self.min <= stage_number <= self.max

    def numbers(self) -> List[int]:
        return list(range(self.min, self.max + 1))

    def __len__(self) -> int:
        return self.max - self.min + 1

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


class StageLayout(Model):
    """
    Where a workflow's stages sit in the shared stage-number space.

    Actual stage numbers are what documents and persisted rows use. Display
    numbers are what users see: `display = actual - display_offset`.
    """

    stage_range: StageRange
    display_offset: NonNegativeInt = 0

    @model_validator(mode="after")
    def check_display_range(self) -> "StageLayout":
        if self.stage_range.min - self.display_offset < 1:
            raise ValueError(
                f"display_offset {self.display_offset} maps stage {self.stage_range.min} "
                "below display number 1"
            )
        return self

    @property
    def display_range(self) -> StageRange:
        return StageRange(
            min=self.stage_range.min - self.display_offset,
            max=self.stage_range.max - self.display_offset,
        )

    def to_display(self, actual_stage: int) -> int:
        return actual_stage - self.display_offset

    def to_actual(self, display_stage: int) -> int:
        return display_stage + self.display_offset


REGULAR_STAGE_LAYOUT = StageLayout(stage_range=StageRange(min=1, max=10))
SUBDIVISION_STAGE_LAYOUT = StageLayout(
    stage_range=StageRange(min=10, max=16), display_offset=9
)


class StageLayoutSettings(Model):
    """Canonical stage layout table, one entry per workflow type."""

    direct_addition: StageLayout = REGULAR_STAGE_LAYOUT
    purchase_pipeline: StageLayout = REGULAR_STAGE_LAYOUT
    handover: StageLayout = REGULAR_STAGE_LAYOUT
    subdivision: StageLayout = SUBDIVISION_STAGE_LAYOUT

    def for_workflow(self, workflow_type: WorkflowType) -> StageLayout:
        return getattr(self, WorkflowType(workflow_type).value)


class ConfigurationDiscrepancy(Model):
    """
    A constant that the source system defines more than once with different
    values. The canonical value is what this library uses; the alternatives
    are kept so product owners can resolve the conflict explicitly.
    """

    setting: str
    canonical: str
    alternatives: Tuple[str, ...] = Field(default_factory=tuple)
    note: str = ""


KNOWN_DISCREPANCIES: Tuple[ConfigurationDiscrepancy, ...] = (
    ConfigurationDiscrepancy(
        setting="stage_layouts.subdivision.stage_range",
        canonical="10-16",
        alternatives=("11-16",),
        note="10-16 includes the registered title prerequisite as display stage 1.",
    ),
    ConfigurationDiscrepancy(
        setting="stage_layouts.subdivision.display_offset",
        canonical="9",
        alternatives=("10",),
        note="Offset 10 pairs with the 11-16 range and hides the title prerequisite.",
    ),
    ConfigurationDiscrepancy(
        setting="cost_domains.handover.labels",
        canonical="Pre-Handover Costs / Land Control Board Process / Payment Tracking",
        alternatives=("Pre-Handover Expenses / LCB Process Costs / Payment Receipts",),
        note="Two label tables exist for the same handover categories.",
    ),
)
