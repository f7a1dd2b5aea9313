# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property list filtering and search.

Filters are pure and combine with logical AND; the value 'all' (or an empty
value) disables a filter. Input order is preserved and inputs are returned
as given, never re-serialised.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import Field, field_validator

from ..core.base.property import PropertyLike, PropertyRecord
from ..core.primitives.enums import (
    HandoverStatus,
    PropertyStatusFilter,
    SubdivisionStatus,
    WorkflowType,
)
from ..core.primitives.model import Model
from ..workflow.classifier import classify

logger = logging.getLogger(__name__)

ALL = "all"
PENDING_PURCHASE = "PENDING_PURCHASE"

SEARCH_FIELDS: Tuple[str, ...] = (
    "name",
    "physical_address",
    "property_type",
    "notes",
    "acquisition_notes",
)

P = TypeVar("P", bound=PropertyLike)


class PropertyFilters(Model):
    """Filter state of a property list view."""

    pipeline: Union[WorkflowType, str] = ALL
    status: PropertyStatusFilter = PropertyStatusFilter.ALL
    property_types: Tuple[str, ...] = Field(default_factory=tuple)
    search_term: str = ""

    @field_validator("pipeline", mode="before")
    @classmethod
    def check_pipeline(cls, value):
        if value in (None, "", ALL):
            return ALL
        return WorkflowType(value)

    @field_validator("status", mode="before")
    @classmethod
    def blank_status_is_all(cls, value):
        return PropertyStatusFilter.ALL if value in (None, "") else value


def get_property_status_for_filter(property: PropertyLike) -> PropertyStatusFilter:
    """
    Coarse list-filter status of a property.

    Subdivision and handover flags take precedence. A property still waiting
    on its purchase reads as pending; everything else is active. INACTIVE is
    part of the filter vocabulary but no flag combination produces it.
    """
    record = PropertyRecord.parse(property)

    if record.subdivision_status is SubdivisionStatus.SUB_DIVISION_STARTED:
        return PropertyStatusFilter.ACTIVE
    if record.handover_status in (HandoverStatus.IN_PROGRESS, HandoverStatus.HANDOVER_STARTED):
        return PropertyStatusFilter.ACTIVE
    if record.subdivision_status is SubdivisionStatus.SUBDIVIDED:
        return PropertyStatusFilter.COMPLETED
    if record.handover_status is HandoverStatus.COMPLETED:
        return PropertyStatusFilter.COMPLETED
    if record.lifecycle_status == PENDING_PURCHASE:
        return PropertyStatusFilter.PENDING
    return PropertyStatusFilter.ACTIVE


def filter_by_pipeline(properties: Iterable[P], pipeline: Union[WorkflowType, str]) -> List[P]:
    properties = list(properties)
    if pipeline in (None, "", ALL):
        return properties
    target = WorkflowType(pipeline)
    return [prop for prop in properties if classify(prop) is target]


def filter_by_status(properties: Iterable[P], status: Union[PropertyStatusFilter, str]) -> List[P]:
    properties = list(properties)
    if status in (None, "", ALL):
        return properties
    target = PropertyStatusFilter(status)
    return [prop for prop in properties if get_property_status_for_filter(prop) is target]


def filter_by_property_types(properties: Iterable[P], property_types: Sequence[str]) -> List[P]:
    properties = list(properties)
    if not property_types:
        return properties
    wanted = set(property_types)
    return [prop for prop in properties if PropertyRecord.parse(prop).property_type in wanted]


def _matches(record: PropertyRecord, term: str) -> bool:
    for field_name in SEARCH_FIELDS:
        value = getattr(record, field_name)
        if value and term in value.lower():
            return True
    return False


def filter_by_search_term(properties: Iterable[P], search_term: Optional[str]) -> List[P]:
    """Case-insensitive substring match across name, address, type and notes."""
    properties = list(properties)
    if not search_term or not search_term.strip():
        return properties
    term = search_term.lower()
    return [prop for prop in properties if _matches(PropertyRecord.parse(prop), term)]


def apply_property_filters(properties: Iterable[P], filters: Optional[PropertyFilters] = None) -> List[P]:
    filters = filters or PropertyFilters()
    result = list(properties)
    total = len(result)

    result = filter_by_pipeline(result, filters.pipeline)
    result = filter_by_status(result, filters.status)
    result = filter_by_property_types(result, filters.property_types)
    result = filter_by_search_term(result, filters.search_term)

    logger.debug(f"Property filters kept {len(result)} of {total}")
    return result


def get_filter_counts(properties: Iterable[PropertyLike]) -> Dict[str, int]:
    """
    Number of properties per workflow type, plus the overall count under 'all'.

    Every workflow type key is present, zero when no property is in it.
    """
    counts = {ALL: 0, **{workflow.value: 0 for workflow in WorkflowType}}
    for prop in properties:
        counts[ALL] += 1
        counts[classify(prop).value] += 1
    return counts
