# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core framework: primitives and the boundary property record.
"""

from . import base, primitives
from .base import PropertyLike, PropertyRecord
from .primitives import (
    KNOWN_DISCREPANCIES,
    HandoverStatus,
    Model,
    PropertySource,
    PropertyStatusFilter,
    StageLayout,
    StageLayoutSettings,
    StageRange,
    SubdivisionStatus,
    WorkflowType,
)

__all__ = [
    "KNOWN_DISCREPANCIES",
    "HandoverStatus",
    "Model",
    "PropertyLike",
    "PropertyRecord",
    "PropertySource",
    "PropertyStatusFilter",
    "StageLayout",
    "StageLayoutSettings",
    "StageRange",
    "SubdivisionStatus",
    "WorkflowType",
]
