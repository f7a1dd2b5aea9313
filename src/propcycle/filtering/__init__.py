# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .properties import (
    ALL,
    SEARCH_FIELDS,
    PropertyFilters,
    apply_property_filters,
    filter_by_pipeline,
    filter_by_property_types,
    filter_by_search_term,
    filter_by_status,
    get_filter_counts,
    get_property_status_for_filter,
)

__all__ = [
    "ALL",
    "SEARCH_FIELDS",
    "PropertyFilters",
    "apply_property_filters",
    "filter_by_pipeline",
    "filter_by_property_types",
    "filter_by_search_term",
    "filter_by_status",
    "get_filter_counts",
    "get_property_status_for_filter",
]
