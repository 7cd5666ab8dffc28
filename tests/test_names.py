"""Tests for operation/status/enum name tables."""
import json

import pytest

from ippdecode.rendering import NameTables, default_name_tables, load_name_tables


def test_packaged_tables():
    tables = default_name_tables()
    assert tables.operation_name(0x0002) == "Print-Job"
    assert tables.operation_name(0x000B) == "Get-Printer-Attributes"
    assert tables.status_name(0x0000) == "successful-ok"
    assert tables.status_name(0x0508) == "server-error-job-canceled"
    assert tables.enum_label("printer-state", 4) == "processing"
    assert tables.operation_name(0x4000) is None
    assert tables.enum_label("finishings", 3) is None


def test_from_dict_accepts_hex_and_decimal_keys():
    tables = NameTables.from_dict({"operations": {"0x0039": "Create-Job-Subscriptions", "60": "Get-Notifications"}})
    assert tables.operation_name(0x39) == "Create-Job-Subscriptions"
    assert tables.operation_name(60) == "Get-Notifications"
    assert NameTables.from_dict(None) == NameTables()


def test_merged_overrides_and_extends():
    base = NameTables.from_dict({"enums": {"printer-state": {"3": "idle", "4": "processing"}}})
    extra = NameTables.from_dict({"enums": {"printer-state": {"3": "ready"}, "finishings": {"3": "none"}}})
    merged = base.merged(extra)
    assert merged.enum_label("printer-state", 3) == "ready"
    assert merged.enum_label("printer-state", 4) == "processing"
    assert merged.enum_label("finishings", 3) == "none"
    assert base.enum_label("printer-state", 3) == "idle"


def test_load_name_tables_with_user_file(tmp_path):
    path = tmp_path / "names.json"
    path.write_text(json.dumps({"statuses": {"0x0400": "bad-request"}}), encoding="utf-8")
    tables = load_name_tables(path)
    assert tables.status_name(0x0400) == "bad-request"
    assert tables.status_name(0x0000) == "successful-ok"


def test_load_name_tables_rejects_non_object(tmp_path):
    path = tmp_path / "names.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_name_tables(path)
