# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for stage catalogs and status transitions."""

import pytest
from pydantic import ValidationError

from propcycle.catalog import (
    DEFAULT_PIPELINE_CATALOGS,
    HANDOVER_CATALOG,
    PURCHASE_CATALOG,
    SUBDIVISION_CATALOG,
    PipelineStageData,
    StageCatalog,
    StageDefinition,
    get_pipeline_catalog,
)
from propcycle.core import WorkflowType

ALL_CATALOGS = [PURCHASE_CATALOG, HANDOVER_CATALOG, SUBDIVISION_CATALOG]


def _stage(id, options=("Not Started", "In Progress", "Completed")):
    return StageDefinition(id=id, name=f"Stage {id}", status_options=options)


class TestDefaultCatalogs:
    def test_stage_counts(self):
        assert PURCHASE_CATALOG.stage_count == 8
        assert HANDOVER_CATALOG.stage_count == 8
        assert SUBDIVISION_CATALOG.stage_count == 7

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.name)
    def test_stage_ids_are_contiguous(self, catalog):
        assert catalog.stage_ids == list(range(1, catalog.stage_count + 1))

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.name)
    def test_terminal_statuses_belong_to_the_vocabulary(self, catalog):
        vocabulary = {opt for stage in catalog.stages for opt in stage.status_options}
        assert catalog.terminal_statuses <= vocabulary

    def test_vocabularies_are_per_catalog(self):
        assert PURCHASE_CATALOG.is_terminal("Processed")
        assert not HANDOVER_CATALOG.is_terminal("Processed")

    def test_purchase_labels(self):
        assert PURCHASE_CATALOG.label_for_stage(1) == "IDENTIFIED"
        assert PURCHASE_CATALOG.label_for_stage(4) == "UNDER_CONTRACT"
        assert PURCHASE_CATALOG.label_for_stage(6) == "FINANCING"
        assert PURCHASE_CATALOG.label_for_stage(8) == "CLOSING"
        assert PURCHASE_CATALOG.completed_label == "COMPLETED"

    def test_unmapped_stage_falls_back_to_first_label(self):
        assert PURCHASE_CATALOG.label_for_stage(99) == "IDENTIFIED"


class TestStageLookup:
    def test_get_stage_by_id(self):
        stage = PURCHASE_CATALOG.get_stage_by_id(3)
        assert stage is not None
        assert stage.name == "Legal Verification"

    @pytest.mark.parametrize("stage_id", [0, 9, -1])
    def test_out_of_range_is_not_found(self, stage_id):
        assert PURCHASE_CATALOG.get_stage_by_id(stage_id) is None


class TestTransitions:
    def test_any_status_in_the_vocabulary_is_allowed(self):
        assert PURCHASE_CATALOG.can_transition_to_status("Not Started", "Verified", 3)

    def test_backwards_transitions_are_allowed(self):
        assert PURCHASE_CATALOG.can_transition_to_status("Verified", "Not Started", 3)

    def test_status_from_another_stage_is_rejected(self):
        assert not PURCHASE_CATALOG.can_transition_to_status("Not Started", "Processed", 1)

    def test_unknown_stage_is_rejected(self):
        assert not PURCHASE_CATALOG.can_transition_to_status("Not Started", "Completed", 42)

    def test_next_recommended_status(self):
        assert PURCHASE_CATALOG.get_next_recommended_status("Not Started", 1) == "In Progress"

    def test_no_recommendation_after_last_option(self):
        last = PURCHASE_CATALOG.get_stage_by_id(1).status_options[-1]
        assert PURCHASE_CATALOG.get_next_recommended_status(last, 1) is None

    def test_no_recommendation_for_unknown_status(self):
        assert PURCHASE_CATALOG.get_next_recommended_status("Bogus", 1) is None
        assert PURCHASE_CATALOG.get_next_recommended_status("Not Started", 42) is None


class TestCatalogValidation:
    def test_non_contiguous_ids_are_rejected(self):
        with pytest.raises(ValidationError, match="contiguous"):
            StageCatalog(
                name="broken",
                stages=(_stage(1), _stage(3)),
                terminal_statuses=frozenset({"Completed"}),
                status_labels={1: "IDENTIFIED"},
                completed_label="COMPLETED",
            )

    def test_terminal_outside_vocabulary_is_rejected(self):
        with pytest.raises(ValidationError, match="terminal statuses"):
            StageCatalog(
                name="broken",
                stages=(_stage(1),),
                terminal_statuses=frozenset({"Completed", "Processed"}),
                status_labels={1: "IDENTIFIED"},
                completed_label="COMPLETED",
            )

    def test_labels_for_unknown_stages_are_rejected(self):
        with pytest.raises(ValidationError, match="unknown stages"):
            StageCatalog(
                name="broken",
                stages=(_stage(1),),
                terminal_statuses=frozenset({"Completed"}),
                status_labels={1: "IDENTIFIED", 5: "CLOSING"},
                completed_label="COMPLETED",
            )

    def test_stage_without_not_started_is_rejected(self):
        with pytest.raises(ValidationError, match="lacks 'Not Started'"):
            StageCatalog(
                name="broken",
                stages=(_stage(1, ("In Progress", "Completed")),),
                terminal_statuses=frozenset({"Completed"}),
                status_labels={1: "IDENTIFIED"},
                completed_label="COMPLETED",
            )

    def test_duplicate_status_options_are_rejected(self):
        with pytest.raises(ValidationError, match="repeats"):
            _stage(1, ("Not Started", "Completed", "Completed"))


class TestPipelineCatalogs:
    def test_direct_addition_has_no_pipeline(self):
        assert get_pipeline_catalog(WorkflowType.DIRECT_ADDITION) is None

    @pytest.mark.parametrize(
        "workflow_type, catalog",
        [
            (WorkflowType.PURCHASE_PIPELINE, PURCHASE_CATALOG),
            (WorkflowType.HANDOVER, HANDOVER_CATALOG),
            (WorkflowType.SUBDIVISION, SUBDIVISION_CATALOG),
        ],
    )
    def test_workflow_catalogs(self, workflow_type, catalog):
        assert DEFAULT_PIPELINE_CATALOGS.for_workflow(workflow_type) == catalog


class TestPipelineStageData:
    def test_null_columns_take_defaults(self):
        row = PipelineStageData.model_validate(
            {"stage_id": 2, "status": None, "notes": None, "documents": None, "property_id": "p1"}
        )
        assert row.status == "Not Started"
        assert row.notes == ""
        assert row.documents == ()
