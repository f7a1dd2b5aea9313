# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .rounding import round_half_up

__all__ = ["round_half_up"]
