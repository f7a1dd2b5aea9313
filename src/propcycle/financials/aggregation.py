# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Category aggregation shared by every cost domain.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.primitives.model import Model
from ..core.primitives.types import NonNegativeInt
from .domains import CostDomain
from .entries import CostEntry, CostEntryLike, parse_cost_entries, parse_cost_entry

logger = logging.getLogger(__name__)


class CategorySummary(Model):
    """Entries of one category with their label and total."""

    category: str
    label: str
    total: float
    count: NonNegativeInt
    entries: Tuple[CostEntry, ...]


def resolve_category(entry: CostEntryLike, domain: CostDomain) -> Optional[str]:
    """
    Category of an entry within a domain.

    An explicit category wins when the domain knows it. Otherwise the entry's
    cost type is looked up. Returns None when neither resolves.
    """
    entry = parse_cost_entry(entry)
    if domain.has_category(entry.category):
        return entry.category
    cost_type = domain.get_cost_type(entry.cost_type_id)
    if cost_type is not None:
        return cost_type.category
    return None


def totals_by_category(entries: Iterable[CostEntryLike], domain: CostDomain) -> Dict[str, float]:
    """
    Sum entry amounts per category.

    Every category of the domain is present in the result, zero when empty.
    Entries that fail validation or whose category cannot be resolved are
    skipped.
    """
    totals = {category: 0.0 for category in domain.categories}
    for entry in parse_cost_entries(entries):
        category = resolve_category(entry, domain)
        if category is None:
            logger.warning(
                f"{domain.name}: skipping cost entry {entry.id or '<new>'} with "
                f"unknown category {entry.category!r} / cost type {entry.cost_type_id!r}"
            )
            continue
        totals[category] += entry.amount
    return totals


def category_summaries(entries: Iterable[CostEntryLike], domain: CostDomain) -> List[CategorySummary]:
    """Per-category groups in the domain's display order, omitting empty categories."""
    grouped: Dict[str, List[CostEntry]] = {category: [] for category in domain.categories}
    for entry in parse_cost_entries(entries):
        category = resolve_category(entry, domain)
        if category is not None:
            grouped[category].append(entry)

    return [
        CategorySummary(
            category=category,
            label=domain.label_for(category),
            total=sum((entry.amount for entry in members), 0.0),
            count=len(members),
            entries=tuple(members),
        )
        for category, members in grouped.items()
        if members
    ]
