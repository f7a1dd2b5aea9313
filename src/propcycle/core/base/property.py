# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import field_validator

from ..primitives.enums import HandoverStatus, PropertySource, SubdivisionStatus
from ..primitives.model import BoundaryModel

logger = logging.getLogger(__name__)

_FLAG_ENUMS: Dict[str, Type] = {
    "property_source": PropertySource,
    "subdivision_status": SubdivisionStatus,
    "handover_status": HandoverStatus,
}


class PropertyRecord(BoundaryModel):
    """
    Read-only snapshot of a property as the lifecycle engine sees it.

    Only the lifecycle flags and the descriptive fields used by search are
    carried. Missing or blank flags take their "not started" default. A flag
    value outside its vocabulary is kept as a plain string (and logged), so
    legacy rows still classify: any set value other than NOT_STARTED counts
    as started.
    """

    # Identity
    id: Optional[str] = None
    name: str = ""

    # Lifecycle flags
    property_source: Union[PropertySource, str] = PropertySource.DIRECT_ADDITION
    subdivision_status: Union[SubdivisionStatus, str] = SubdivisionStatus.NOT_STARTED
    handover_status: Union[HandoverStatus, str] = HandoverStatus.NOT_STARTED
    lifecycle_status: Optional[str] = None

    # Descriptive fields (search only)
    property_type: Optional[str] = None
    physical_address: Optional[str] = None
    notes: Optional[str] = None
    acquisition_notes: Optional[str] = None

    @field_validator("property_source", "subdivision_status", "handover_status", mode="before")
    @classmethod
    def normalize_flag(cls, value: Any, info) -> Any:
        enum_cls = _FLAG_ENUMS[info.field_name]
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        if isinstance(value, enum_cls):
            return value
        text = str(value).strip().upper()
        try:
            return enum_cls(text)
        except ValueError:
            logger.warning(f"Unrecognised {info.field_name} value {text!r}; keeping it as is")
            return text

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        # Row ids arrive as UUID objects or integers depending on the driver
        if value is not None and not isinstance(value, str):
            return str(value)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def none_name_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def parse(cls, data: Union["PropertyRecord", Mapping[str, Any]]) -> "PropertyRecord":
        """Parse a persistence row into a PropertyRecord."""
        if isinstance(data, cls):
            return data
        return cls.model_validate(dict(data))


PropertyLike = Union[PropertyRecord, Mapping[str, Any]]
