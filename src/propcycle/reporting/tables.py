# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of pipelines, cost breakdowns and filter counts.

Presentation only: every figure comes from the progress, financial and
filtering functions; these helpers just lay them out as pandas objects.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from ..catalog.stages import NOT_STARTED, StageCatalog
from ..core.base.property import PropertyLike
from ..filtering import get_filter_counts
from ..financials.aggregation import totals_by_category
from ..financials.domains import CostDomain
from ..financials.entries import CostEntryLike
from ..progress.resolver import StageLike, parse_stages

PIPELINE_COLUMNS = ["stage", "name", "status", "is_terminal", "started_date", "completed_date", "notes"]


def pipeline_table(stages: Iterable[StageLike], catalog: StageCatalog) -> pd.DataFrame:
    """
    One row per catalog stage, in catalog order.

    Stages without a persisted row are shown as not started. Rows for stage
    ids outside the catalog are left out.

    Returns:
        DataFrame indexed by stage number with PIPELINE_COLUMNS
    """
    by_id = {row.stage_id: row for row in parse_stages(stages)}

    records = []
    for definition in catalog.stages:
        row = by_id.get(definition.id)
        status = row.status if row is not None else NOT_STARTED
        records.append(
            {
                "stage": definition.id,
                "name": definition.name,
                "status": status,
                "is_terminal": catalog.is_terminal(status),
                "started_date": row.started_date if row is not None else None,
                "completed_date": row.completed_date if row is not None else None,
                "notes": row.notes if row is not None else "",
            }
        )

    return pd.DataFrame.from_records(records, columns=PIPELINE_COLUMNS).set_index("stage")


def category_breakdown_table(
    entries: Iterable[CostEntryLike], domain: CostDomain
) -> pd.DataFrame:
    """
    Totals per category with each category's share of the grand total.

    Every category of the domain appears, in display order. Shares are 0
    when nothing has been recorded.
    """
    totals = totals_by_category(entries, domain)
    frame = pd.DataFrame(
        {
            "label": [domain.label_for(category) for category in domain.categories],
            "total": [totals[category] for category in domain.categories],
        },
        index=pd.Index(list(domain.categories), name="category"),
    )
    grand_total = frame["total"].sum()
    frame["share"] = frame["total"] / grand_total if grand_total else 0.0
    return frame


def filter_counts_series(
    properties: Iterable[PropertyLike], name: Optional[str] = "properties"
) -> pd.Series:
    """Per-workflow property counts as an integer Series, 'all' first."""
    counts = get_filter_counts(properties)
    return pd.Series(counts, name=name, dtype="int64")
