# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for stage ranges, layouts and the layout table."""

import pytest
from pydantic import ValidationError

from propcycle.core import (
    KNOWN_DISCREPANCIES,
    StageLayout,
    StageLayoutSettings,
    StageRange,
    WorkflowType,
)
from propcycle.utils import round_half_up


class TestStageRange:
    def test_numbers_are_inclusive(self):
        assert StageRange(min=10, max=16).numbers() == [10, 11, 12, 13, 14, 15, 16]

    def test_contains(self):
        stage_range = StageRange(min=1, max=10)
        assert stage_range.contains(1)
        assert stage_range.contains(10)
        assert not stage_range.contains(11)

    def test_len_and_str(self):
        stage_range = StageRange(min=10, max=16)
        assert len(stage_range) == 7
        assert str(stage_range) == "10-16"

    def test_inverted_range_is_rejected(self):
        with pytest.raises(ValidationError, match="below min"):
            StageRange(min=5, max=4)

    def test_stage_numbers_start_at_one(self):
        with pytest.raises(ValidationError):
            StageRange(min=0, max=4)


class TestStageLayout:
    def test_display_range_applies_offset(self):
        layout = StageLayout(stage_range=StageRange(min=10, max=16), display_offset=9)
        assert layout.display_range == StageRange(min=1, max=7)

    def test_offset_cannot_push_display_below_one(self):
        with pytest.raises(ValidationError, match="below display number 1"):
            StageLayout(stage_range=StageRange(min=10, max=16), display_offset=10)

    def test_alternative_subdivision_layout_is_expressible(self):
        layout = StageLayout(stage_range=StageRange(min=11, max=16), display_offset=10)
        assert layout.display_range == StageRange(min=1, max=6)


class TestStageLayoutSettings:
    @pytest.mark.parametrize(
        "workflow_type",
        [WorkflowType.DIRECT_ADDITION, WorkflowType.PURCHASE_PIPELINE, WorkflowType.HANDOVER],
    )
    def test_regular_workflows_share_one_to_ten(self, workflow_type):
        layout = StageLayoutSettings().for_workflow(workflow_type)
        assert layout.stage_range == StageRange(min=1, max=10)
        assert layout.display_offset == 0

    def test_subdivision_defaults(self):
        layout = StageLayoutSettings().for_workflow("subdivision")
        assert layout.stage_range == StageRange(min=10, max=16)
        assert layout.display_offset == 9

    def test_discrepancies_are_recorded(self):
        settings = {d.setting for d in KNOWN_DISCREPANCIES}
        assert "stage_layouts.subdivision.stage_range" in settings
        assert "stage_layouts.subdivision.display_offset" in settings


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            (12.5, 0, 13),
            (37.5, 0, 38),
            (62.5, 0, 63),
            (0.0, 0, 0),
            (33.335, 2, 33.34),
            (2.675, 2, 2.68),
        ],
    )
    def test_halves_round_up(self, value, digits, expected):
        assert round_half_up(value, digits) == expected

    def test_whole_number_result_is_int(self):
        assert isinstance(round_half_up(12.5), int)
