# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Configured entry point to the lifecycle engine.

`LifecycleEngine` binds one `EngineSettings` to the module-level functions so
callers can swap stage layouts, catalogs or cost domains without touching
global state. Every method delegates; no logic lives here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import Field

from .catalog import DEFAULT_PIPELINE_CATALOGS, PipelineCatalogs
from .catalog.documents import DEFAULT_DOCUMENT_CATALOG, DocumentCatalog, DocumentTypeDefinition
from .catalog.stages import StageCatalog
from .core.base.property import PropertyLike
from .core.primitives.enums import WorkflowType
from .core.primitives.model import Model
from .core.primitives.settings import StageLayoutSettings
from .core.primitives.summary import ProgressSummary
from .filtering import PropertyFilters, apply_property_filters, get_filter_counts
from .financials import DEFAULT_COST_DOMAINS, CostDomainSettings, totals_by_category
from .financials.entries import CostEntryLike
from .progress import PipelineProgress, resolve_pipeline
from .progress.resolver import StageLike
from .workflow import classifier, stages

logger = logging.getLogger(__name__)


class EngineSettings(Model):
    """All static configuration of the engine, immutable once built."""

    stage_layouts: StageLayoutSettings = Field(default_factory=StageLayoutSettings)
    documents: DocumentCatalog = DEFAULT_DOCUMENT_CATALOG
    pipelines: PipelineCatalogs = DEFAULT_PIPELINE_CATALOGS
    cost_domains: CostDomainSettings = DEFAULT_COST_DOMAINS


class LifecycleEngine:
    """
    Façade over the lifecycle functions with injected configuration.

    Example:
        ```python
        engine = LifecycleEngine()
        engine.classify({"id": "p1", "property_source": "PURCHASE_PIPELINE"})
        # WorkflowType.PURCHASE_PIPELINE
        ```
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self.settings = settings or EngineSettings()

    def classify(self, property: PropertyLike) -> WorkflowType:
        return classifier.classify(property)

    def stage_config(self, property: PropertyLike) -> stages.StageConfig:
        return stages.get_stage_config(
            property, self.settings.stage_layouts, self.settings.documents
        )

    def filtered_doc_types(self, workflow_type: WorkflowType) -> List[DocumentTypeDefinition]:
        return stages.get_filtered_doc_types(workflow_type, self.settings.documents)

    def display_stage_number(self, actual_stage: int, workflow_type: WorkflowType) -> int:
        return stages.get_display_stage_number(actual_stage, workflow_type, self.settings.stage_layouts)

    def actual_stage_number(self, display_stage: int, workflow_type: WorkflowType) -> int:
        return stages.get_actual_stage_number(display_stage, workflow_type, self.settings.stage_layouts)

    def document_progress(
        self, document_states: Mapping[str, Any], workflow_type: WorkflowType
    ) -> ProgressSummary:
        return stages.calculate_workflow_progress(document_states, workflow_type, self.settings.documents)

    def pipeline_catalog(self, workflow_type: WorkflowType) -> Optional[StageCatalog]:
        return self.settings.pipelines.for_workflow(workflow_type)

    def pipeline_progress(
        self, property: PropertyLike, stage_rows: Iterable[StageLike]
    ) -> Optional[PipelineProgress]:
        """
        Progress of a property's pipeline, or None for direct additions,
        which have no stage pipeline.
        """
        workflow_type = self.classify(property)
        catalog = self.pipeline_catalog(workflow_type)
        if catalog is None:
            logger.debug(f"No stage pipeline for {workflow_type.value}")
            return None
        return resolve_pipeline(stage_rows, catalog)

    def totals_by_category(
        self, domain_name: str, entries: Iterable[CostEntryLike]
    ) -> Dict[str, float]:
        return totals_by_category(entries, self.settings.cost_domains.get(domain_name))

    def filter_properties(
        self, properties: Iterable[PropertyLike], filters: Optional[PropertyFilters] = None
    ) -> List[PropertyLike]:
        return apply_property_filters(properties, filters)

    def filter_counts(self, properties: Iterable[PropertyLike]) -> Dict[str, int]:
        return get_filter_counts(properties)
