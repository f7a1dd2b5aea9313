# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for propcycle tests.

Property fixtures are plain dicts shaped like persistence rows, since that is
what callers hand to the engine.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from propcycle.catalog import PURCHASE_CATALOG, PipelineStageData, StageCatalog


def make_property(
    id: str = "prop-1",
    name: str = "Test Plot",
    property_source: Optional[str] = "DIRECT_ADDITION",
    subdivision_status: Optional[str] = "NOT_STARTED",
    handover_status: Optional[str] = "NOT_STARTED",
    **extra,
) -> Dict:
    """Build a persistence-shaped property row."""
    return {
        "id": id,
        "name": name,
        "property_source": property_source,
        "subdivision_status": subdivision_status,
        "handover_status": handover_status,
        **extra,
    }


def stages_with(catalog: StageCatalog, statuses: Dict[int, str]) -> List[PipelineStageData]:
    """Rows for every catalog stage; stages not listed are 'Not Started'."""
    return [
        PipelineStageData(stage_id=stage.id, status=statuses.get(stage.id, "Not Started"))
        for stage in catalog.stages
    ]


def all_terminal(catalog: StageCatalog) -> List[PipelineStageData]:
    """Rows with every stage at a terminal status from its own vocabulary."""
    rows = []
    for stage in catalog.stages:
        status = next(opt for opt in stage.status_options if opt in catalog.terminal_statuses)
        rows.append(PipelineStageData(stage_id=stage.id, status=status))
    return rows


@pytest.fixture
def direct_property() -> Dict:
    return make_property(id="direct-1", name="Kitengela Plot", property_type="LAND")


@pytest.fixture
def purchase_property() -> Dict:
    return make_property(
        id="purchase-1",
        name="Ruiru Parcel",
        property_source="PURCHASE_PIPELINE",
        property_type="LAND",
        physical_address="Ruiru, Kiambu County",
    )


@pytest.fixture
def handover_property() -> Dict:
    return make_property(
        id="handover-1",
        name="Syokimau Residence",
        handover_status="IN_PROGRESS",
        property_type="RESIDENTIAL",
    )


@pytest.fixture
def subdivision_property() -> Dict:
    return make_property(
        id="subdivision-1",
        name="Juja Farm",
        subdivision_status="SUB_DIVISION_STARTED",
        property_type="LAND",
        notes="Ten acre block, splitting into eighths",
    )


@pytest.fixture
def portfolio(direct_property, purchase_property, handover_property, subdivision_property) -> List[Dict]:
    return [direct_property, purchase_property, handover_property, subdivision_property]


@pytest.fixture
def fresh_purchase_stages() -> List[PipelineStageData]:
    return stages_with(PURCHASE_CATALOG, {1: "In Progress"})
