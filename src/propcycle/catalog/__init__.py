# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Static catalogs: pipeline stages, status vocabularies and document types.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..core.primitives.enums import WorkflowType
from ..core.primitives.model import Model
from ._handover import HANDOVER_CATALOG, HANDOVER_PIPELINE_STAGES
from ._purchase import PURCHASE_CATALOG, PURCHASE_PIPELINE_STAGES
from ._subdivision import SUBDIVISION_CATALOG, SUBDIVISION_PIPELINE_STAGES
from .documents import (
    DEFAULT_DOCUMENT_CATALOG,
    DOC_TYPES,
    REGISTERED_TITLE,
    REGULAR_DOC_KEYS,
    SUBDIVISION_DOC_KEYS,
    DocumentCatalog,
    DocumentTypeDefinition,
)
from .stages import (
    IN_PROGRESS,
    NOT_STARTED,
    PipelineStageData,
    StageCatalog,
    StageDefinition,
)


class PipelineCatalogs(Model):
    """The three stage catalogs, keyed by the workflow that uses them."""

    purchase_pipeline: StageCatalog = Field(default=PURCHASE_CATALOG)
    handover: StageCatalog = Field(default=HANDOVER_CATALOG)
    subdivision: StageCatalog = Field(default=SUBDIVISION_CATALOG)

    def for_workflow(self, workflow_type: WorkflowType) -> Optional[StageCatalog]:
        """Return the workflow's stage catalog; direct additions have no pipeline."""
        workflow_type = WorkflowType(workflow_type)
        if workflow_type is WorkflowType.DIRECT_ADDITION:
            return None
        return getattr(self, workflow_type.value)


DEFAULT_PIPELINE_CATALOGS = PipelineCatalogs()


def get_pipeline_catalog(
    workflow_type: WorkflowType, catalogs: Optional[PipelineCatalogs] = None
) -> Optional[StageCatalog]:
    return (catalogs or DEFAULT_PIPELINE_CATALOGS).for_workflow(workflow_type)


__all__ = [
    # Stages
    "IN_PROGRESS",
    "NOT_STARTED",
    "PipelineStageData",
    "StageCatalog",
    "StageDefinition",
    # Catalogs
    "HANDOVER_CATALOG",
    "HANDOVER_PIPELINE_STAGES",
    "PURCHASE_CATALOG",
    "PURCHASE_PIPELINE_STAGES",
    "SUBDIVISION_CATALOG",
    "SUBDIVISION_PIPELINE_STAGES",
    "DEFAULT_PIPELINE_CATALOGS",
    "PipelineCatalogs",
    "get_pipeline_catalog",
    # Documents
    "DEFAULT_DOCUMENT_CATALOG",
    "DOC_TYPES",
    "REGISTERED_TITLE",
    "REGULAR_DOC_KEYS",
    "SUBDIVISION_DOC_KEYS",
    "DocumentCatalog",
    "DocumentTypeDefinition",
]
