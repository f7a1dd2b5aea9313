# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for property list filters, search and counts."""

import pytest
from pydantic import ValidationError

from propcycle.core import PropertyStatusFilter, WorkflowType
from propcycle.filtering import (
    PropertyFilters,
    apply_property_filters,
    filter_by_pipeline,
    filter_by_property_types,
    filter_by_search_term,
    filter_by_status,
    get_filter_counts,
    get_property_status_for_filter,
)
from tests.conftest import make_property


def _ids(properties):
    return [prop["id"] for prop in properties]


class TestStatusForFilter:
    @pytest.mark.parametrize(
        "flags, expected",
        [
            ({"subdivision_status": "SUB_DIVISION_STARTED"}, PropertyStatusFilter.ACTIVE),
            ({"handover_status": "IN_PROGRESS"}, PropertyStatusFilter.ACTIVE),
            ({"handover_status": "HANDOVER_STARTED"}, PropertyStatusFilter.ACTIVE),
            ({"subdivision_status": "SUBDIVIDED"}, PropertyStatusFilter.COMPLETED),
            ({"handover_status": "COMPLETED"}, PropertyStatusFilter.COMPLETED),
            ({"lifecycle_status": "PENDING_PURCHASE"}, PropertyStatusFilter.PENDING),
            ({}, PropertyStatusFilter.ACTIVE),
        ],
    )
    def test_status_derivation(self, flags, expected):
        assert get_property_status_for_filter(make_property(**flags)) is expected

    def test_active_subdivision_beats_completed_handover(self):
        prop = make_property(subdivision_status="SUB_DIVISION_STARTED", handover_status="COMPLETED")
        assert get_property_status_for_filter(prop) is PropertyStatusFilter.ACTIVE


class TestIndividualFilters:
    def test_pipeline(self, portfolio):
        assert _ids(filter_by_pipeline(portfolio, WorkflowType.HANDOVER)) == ["handover-1"]
        assert _ids(filter_by_pipeline(portfolio, "purchase_pipeline")) == ["purchase-1"]
        assert filter_by_pipeline(portfolio, "all") == portfolio

    def test_status(self, portfolio):
        done = make_property(id="done-1", handover_status="COMPLETED")
        result = filter_by_status([*portfolio, done], PropertyStatusFilter.COMPLETED)
        assert _ids(result) == ["done-1"]
        assert filter_by_status(portfolio, "") == portfolio

    def test_inactive_matches_nothing(self, portfolio):
        assert filter_by_status(portfolio, "inactive") == []

    def test_property_types(self, portfolio):
        assert _ids(filter_by_property_types(portfolio, ["RESIDENTIAL"])) == ["handover-1"]
        assert filter_by_property_types(portfolio, []) == portfolio

    def test_search_is_case_insensitive(self, portfolio):
        assert _ids(filter_by_search_term(portfolio, "RUIRU")) == ["purchase-1"]

    def test_search_covers_address_type_and_notes(self, portfolio):
        assert _ids(filter_by_search_term(portfolio, "kiambu")) == ["purchase-1"]
        assert _ids(filter_by_search_term(portfolio, "eighths")) == ["subdivision-1"]
        assert _ids(filter_by_search_term(portfolio, "residential")) == ["handover-1"]

    def test_search_covers_acquisition_notes(self):
        prop = make_property(id="acq-1", acquisition_notes="Negotiated via broker Wanjiru")
        assert _ids(filter_by_search_term([prop], "wanjiru")) == ["acq-1"]

    def test_blank_search_is_a_no_op(self, portfolio):
        assert filter_by_search_term(portfolio, "   ") == portfolio
        assert filter_by_search_term(portfolio, None) == portfolio

    def test_search_term_is_matched_with_its_spaces(self):
        props = [
            make_property(id="a", name="Juja Farm"),
            make_property(id="b", name="JujaFarm"),
        ]
        assert _ids(filter_by_search_term(props, "juja ")) == ["a"]
        assert _ids(filter_by_search_term(props, " farm")) == ["a"]


class TestApplyFilters:
    def test_defaults_keep_everything(self, portfolio):
        assert apply_property_filters(portfolio) == portfolio

    def test_filters_combine_with_and(self, portfolio):
        filters = PropertyFilters(pipeline="subdivision", property_types=("LAND",), search_term="juja")
        assert _ids(apply_property_filters(portfolio, filters)) == ["subdivision-1"]

        filters = PropertyFilters(pipeline="subdivision", property_types=("RESIDENTIAL",))
        assert apply_property_filters(portfolio, filters) == []

    def test_order_is_preserved(self, portfolio):
        filters = PropertyFilters(property_types=("LAND",))
        assert _ids(apply_property_filters(portfolio, filters)) == ["direct-1", "purchase-1", "subdivision-1"]

    def test_unknown_pipeline_is_rejected(self):
        with pytest.raises(ValidationError):
            PropertyFilters(pipeline="leasing")


class TestFilterCounts:
    def test_counts(self, portfolio):
        counts = get_filter_counts(portfolio)
        assert counts == {
            "all": 4,
            "direct_addition": 1,
            "purchase_pipeline": 1,
            "handover": 1,
            "subdivision": 1,
        }

    def test_every_key_present_when_empty(self):
        counts = get_filter_counts([])
        assert set(counts) == {"all", *(workflow.value for workflow in WorkflowType)}
        assert all(value == 0 for value in counts.values())

    def test_counts_sum_to_all(self, portfolio):
        counts = get_filter_counts(portfolio * 3)
        assert sum(value for key, value in counts.items() if key != "all") == counts["all"] == 12


class TestMalformedRows:
    def test_counts_survive_unknown_flags_and_missing_ids(self):
        rows = [
            {"id": "a"},
            {"id": "b", "handover_status": "ON_HOLD"},
            {"subdivision_status": "SUBDIVISION_COMPLETE"},
        ]
        counts = get_filter_counts(rows)
        assert counts["all"] == 3
        assert counts["direct_addition"] == 1
        assert counts["handover"] == 1
        assert counts["subdivision"] == 1

    def test_pipeline_filter_keeps_legacy_rows(self):
        legacy = {"id": "b", "handover_status": "ON_HOLD"}
        assert filter_by_pipeline([{"id": "a"}, legacy], "handover") == [legacy]

    def test_unknown_flags_fall_through_to_lifecycle_status(self):
        prop = make_property(subdivision_status="SUBDIVISION_COMPLETE", lifecycle_status="PENDING_PURCHASE")
        assert get_property_status_for_filter(prop) is PropertyStatusFilter.PENDING
        assert get_property_status_for_filter({"handover_status": "ON_HOLD"}) is PropertyStatusFilter.ACTIVE
