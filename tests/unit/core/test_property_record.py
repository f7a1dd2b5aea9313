# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the boundary property record."""

import logging
import uuid

import pytest
from pydantic import ValidationError

from propcycle.core import (
    HandoverStatus,
    PropertyRecord,
    PropertySource,
    SubdivisionStatus,
)


class TestPropertyRecordParsing:
    def test_missing_flags_default_to_not_started(self):
        record = PropertyRecord.parse({"id": "p1"})
        assert record.property_source is PropertySource.DIRECT_ADDITION
        assert record.subdivision_status is SubdivisionStatus.NOT_STARTED
        assert record.handover_status is HandoverStatus.NOT_STARTED

    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_blank_flags_default_to_not_started(self, blank):
        record = PropertyRecord.parse(
            {"id": "p1", "subdivision_status": blank, "handover_status": blank, "property_source": blank}
        )
        assert record.subdivision_status is SubdivisionStatus.NOT_STARTED
        assert record.handover_status is HandoverStatus.NOT_STARTED
        assert record.property_source is PropertySource.DIRECT_ADDITION

    def test_flags_are_normalised(self):
        record = PropertyRecord.parse({"id": "p1", "handover_status": " in_progress "})
        assert record.handover_status is HandoverStatus.IN_PROGRESS

    def test_unknown_columns_are_ignored(self):
        record = PropertyRecord.parse({"id": "p1", "created_at": "2024-01-01", "lat": -1.28})
        assert record.id == "p1"

    def test_non_string_ids_are_coerced(self):
        row_id = uuid.uuid4()
        assert PropertyRecord.parse({"id": row_id}).id == str(row_id)
        assert PropertyRecord.parse({"id": 42}).id == "42"

    def test_null_name_reads_as_blank(self):
        assert PropertyRecord.parse({"id": "p1", "name": None}).name == ""

    def test_unknown_flag_value_is_kept_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="propcycle.core.base.property"):
            record = PropertyRecord.parse({"id": "p1", "subdivision_status": "half_done"})
        assert record.subdivision_status == "HALF_DONE"
        assert not isinstance(record.subdivision_status, SubdivisionStatus)
        assert "HALF_DONE" in caplog.text

    def test_id_is_optional(self):
        assert PropertyRecord.parse({"subdivision_status": "SUBDIVIDED"}).id is None

    def test_parse_returns_existing_record_unchanged(self):
        record = PropertyRecord(id="p1")
        assert PropertyRecord.parse(record) is record

    def test_record_is_immutable(self):
        record = PropertyRecord(id="p1")
        with pytest.raises(ValidationError):
            record.name = "changed"
