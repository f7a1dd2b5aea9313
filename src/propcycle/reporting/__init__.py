# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .tables import (
    PIPELINE_COLUMNS,
    category_breakdown_table,
    filter_counts_series,
    pipeline_table,
)

__all__ = [
    "PIPELINE_COLUMNS",
    "category_breakdown_table",
    "filter_counts_series",
    "pipeline_table",
]
