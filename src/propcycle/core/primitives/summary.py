# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from .model import Model
from .types import NonNegativeInt


class ProgressSummary(Model):
    """A {completed, total, percentage} progress triple."""

    completed: NonNegativeInt
    total: NonNegativeInt
    percentage: NonNegativeInt
