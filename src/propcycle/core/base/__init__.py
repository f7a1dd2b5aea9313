# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .property import PropertyLike, PropertyRecord

__all__ = [
    "PropertyLike",
    "PropertyRecord",
]
