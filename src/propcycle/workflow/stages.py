# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Stage ranges, display numbering and document visibility per workflow.

Regular workflows (direct addition, purchase pipeline, handover) see stages
1-10. Subdivision sees stages 10-16, displayed to users as 1-7. Document
visibility follows the same split with `registered_title` visible in both.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import Field, model_validator

from ..catalog.documents import (
    DEFAULT_DOCUMENT_CATALOG,
    DocumentCatalog,
    DocumentTypeDefinition,
)
from ..core.base.property import PropertyLike
from ..core.primitives.enums import WorkflowType
from ..core.primitives.model import BoundaryModel, Model
from ..core.primitives.settings import StageLayoutSettings, StageRange
from ..core.primitives.summary import ProgressSummary
from ..utils.rounding import round_half_up
from .classifier import classify

logger = logging.getLogger(__name__)

DEFAULT_STAGE_LAYOUTS = StageLayoutSettings()


class StageConfig(Model):
    """Everything a pipeline view needs to render one property's stages."""

    workflow_type: WorkflowType
    stage_range: StageRange
    display_range: StageRange
    doc_types: Tuple[DocumentTypeDefinition, ...]
    stage_numbers: Tuple[int, ...]
    visible_stage_count: int


class DocumentState(BoundaryModel):
    """Upload state of one document type for one property."""

    is_na: bool = False
    documents: Tuple[Any, ...] = Field(default_factory=tuple)

    @model_validator(mode="before")
    @classmethod
    def lift_nested_status(cls, data: Any) -> Any:
        # Rows store the N/A flag as {"status": {"is_na": ...}}
        if isinstance(data, Mapping) and "is_na" not in data:
            status = data.get("status")
            if isinstance(status, Mapping) and "is_na" in status:
                data = {**data, "is_na": bool(status["is_na"])}
        if isinstance(data, Mapping) and data.get("documents") is None:
            data = {**data, "documents": ()}
        return data


def get_stage_range(
    workflow_type: WorkflowType, layouts: Optional[StageLayoutSettings] = None
) -> StageRange:
    return (layouts or DEFAULT_STAGE_LAYOUTS).for_workflow(workflow_type).stage_range


def get_stage_numbers(
    workflow_type: WorkflowType, layouts: Optional[StageLayoutSettings] = None
) -> List[int]:
    return get_stage_range(workflow_type, layouts).numbers()


def is_stage_visible(
    stage_number: int,
    workflow_type: WorkflowType,
    layouts: Optional[StageLayoutSettings] = None,
) -> bool:
    return get_stage_range(workflow_type, layouts).contains(stage_number)


def get_display_stage_number(
    actual_stage: int,
    workflow_type: WorkflowType,
    layouts: Optional[StageLayoutSettings] = None,
) -> int:
    """Map an actual stage number to the number shown to users (subdivision 10-16 -> 1-7)."""
    return (layouts or DEFAULT_STAGE_LAYOUTS).for_workflow(workflow_type).to_display(actual_stage)


def get_actual_stage_number(
    display_stage: int,
    workflow_type: WorkflowType,
    layouts: Optional[StageLayoutSettings] = None,
) -> int:
    """Inverse of get_display_stage_number."""
    return (layouts or DEFAULT_STAGE_LAYOUTS).for_workflow(workflow_type).to_actual(display_stage)


def get_filtered_doc_types(
    workflow_type: WorkflowType, documents: Optional[DocumentCatalog] = None
) -> List[DocumentTypeDefinition]:
    """
    Document types visible in a workflow.

    Subdivision sees exactly the subdivision keys. Regular workflows see every
    document except the subdivision-only ones, so the shared registered title
    appears in both.
    """
    catalog = documents or DEFAULT_DOCUMENT_CATALOG
    if WorkflowType(workflow_type) is WorkflowType.SUBDIVISION:
        return catalog.subdivision_doc_types()
    return catalog.regular_doc_types()


def is_doc_type_allowed_for_workflow(
    doc_type_key: str,
    workflow_type: WorkflowType,
    documents: Optional[DocumentCatalog] = None,
) -> bool:
    return any(doc.key == doc_type_key for doc in get_filtered_doc_types(workflow_type, documents))


def get_stage_config(
    property: PropertyLike,
    layouts: Optional[StageLayoutSettings] = None,
    documents: Optional[DocumentCatalog] = None,
) -> StageConfig:
    workflow_type = classify(property)
    layout = (layouts or DEFAULT_STAGE_LAYOUTS).for_workflow(workflow_type)
    stage_numbers = layout.stage_range.numbers()

    return StageConfig(
        workflow_type=workflow_type,
        stage_range=layout.stage_range,
        display_range=layout.display_range,
        doc_types=tuple(get_filtered_doc_types(workflow_type, documents)),
        stage_numbers=tuple(stage_numbers),
        visible_stage_count=len(stage_numbers),
    )


def get_stage_filtering_summary(
    property: PropertyLike,
    layouts: Optional[StageLayoutSettings] = None,
    documents: Optional[DocumentCatalog] = None,
) -> Dict[str, Any]:
    """Visible and hidden document keys for a property, with its ranges as strings."""
    catalog = documents or DEFAULT_DOCUMENT_CATALOG
    config = get_stage_config(property, layouts, catalog)
    visible = [doc.key for doc in config.doc_types]
    hidden = [key for key in catalog.keys if key not in visible]

    return {
        "workflow_type": config.workflow_type,
        "stage_range": str(config.stage_range),
        "display_range": str(config.display_range),
        "document_count": len(config.doc_types),
        "hidden_documents": hidden,
        "visible_documents": visible,
    }


def calculate_workflow_progress(
    document_states: Mapping[str, Any],
    workflow_type: WorkflowType,
    documents: Optional[DocumentCatalog] = None,
) -> ProgressSummary:
    """
    Document completion for a workflow.

    Every visible document counts, required or optional. A document is done
    when marked N/A or when at least one file is attached.
    """
    visible = get_filtered_doc_types(workflow_type, documents)
    completed = 0
    for doc in visible:
        state = document_states.get(doc.key)
        if state is None:
            continue
        state = DocumentState.model_validate(state)
        if state.is_na or state.documents:
            completed += 1

    total = len(visible)
    percentage = round_half_up(100 * completed / total) if total > 0 else 0
    logger.debug(f"Document progress for {WorkflowType(workflow_type).value}: {completed}/{total}")
    return ProgressSummary(completed=completed, total=total, percentage=percentage)
