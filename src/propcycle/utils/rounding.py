# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def round_half_up(value: Union[int, float], digits: int = 0) -> Union[int, float]:
    """
    Round half away from zero (12.5 -> 13, 33.335 -> 33.34).

    Unlike the built-in round(), halves never round to even: 1 of 8 stages
    done is 13%, not 12%.

    Returns:
        int when digits == 0, otherwise float
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)
