# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable records: catalogs, property snapshots and derived results are
    never mutated in place. Updates produce new instances via `model_copy`.
    """

    model_config = ConfigDict(
        frozen=True,  # Derived state is recomputed, never written back
        extra="forbid",  # Catches typos in catalog definitions immediately
    )


class BoundaryModel(Model):
    """
    Model for records arriving from the persistence layer.

    Persistence rows carry many more columns than the engine needs, so unknown
    keys are dropped instead of rejected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
