# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for tabular reporting views."""

import pandas as pd

from propcycle.catalog import PURCHASE_CATALOG
from propcycle.financials import SUBDIVISION_COST_DOMAIN
from propcycle.reporting import (
    PIPELINE_COLUMNS,
    category_breakdown_table,
    filter_counts_series,
    pipeline_table,
)
from tests.conftest import stages_with


class TestPipelineTable:
    def test_one_row_per_stage(self, fresh_purchase_stages):
        table = pipeline_table(fresh_purchase_stages, PURCHASE_CATALOG)
        assert isinstance(table, pd.DataFrame)
        assert list(table.index) == list(range(1, 9))
        assert list(table.columns) == PIPELINE_COLUMNS[1:]
        assert table.loc[1, "status"] == "In Progress"
        assert table.loc[3, "name"] == "Legal Verification"

    def test_missing_rows_read_as_not_started(self):
        rows = stages_with(PURCHASE_CATALOG, {1: "Completed"})[:2]
        table = pipeline_table(rows, PURCHASE_CATALOG)
        assert len(table) == 8
        assert table.loc[8, "status"] == "Not Started"
        assert bool(table.loc[1, "is_terminal"])
        assert not bool(table.loc[2, "is_terminal"])


class TestCategoryBreakdown:
    def test_full_domain_with_shares(self):
        entries = [
            {"cost_category": "STATUTORY_BOARD_FEES", "amount_kes": 750},
            {"cost_category": "SURVEY_PLANNING_FEES", "amount_kes": 250},
        ]
        table = category_breakdown_table(entries, SUBDIVISION_COST_DOMAIN)
        assert list(table.index) == list(SUBDIVISION_COST_DOMAIN.categories)
        assert table.loc["STATUTORY_BOARD_FEES", "share"] == 0.75
        assert table.loc["OTHER_CHARGES", "total"] == 0
        assert table["total"].sum() == 1_000

    def test_empty_has_zero_shares(self):
        table = category_breakdown_table([], SUBDIVISION_COST_DOMAIN)
        assert (table["share"] == 0).all()


class TestFilterCountsSeries:
    def test_counts(self, portfolio):
        series = filter_counts_series(portfolio)
        assert series["all"] == 4
        assert series["subdivision"] == 1
        assert series.name == "properties"
