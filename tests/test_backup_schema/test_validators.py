"""Tests for the per-entity backup validators."""

import json

import pytest

from conftest import make_group, make_session, make_tab
from tabflow_api.backup_schema import (
    is_backup_document,
    is_group,
    is_session,
    is_tab_snapshot,
    validate_with_diagnostics,
)


def test_minimal_valid_document_accepted(valid_document):
    assert is_backup_document(valid_document)


def test_empty_sessions_list_is_valid(valid_document):
    valid_document["sessions"] = []
    assert is_backup_document(valid_document)


def test_empty_groups_and_tabs_are_valid():
    assert is_session(make_session(groups=[]))
    assert is_group(make_group(tabs=[]))


def test_extra_fields_are_ignored(valid_document):
    valid_document["sessions"][0]["pinned"] = True
    valid_document["exportedBy"] = "tabflow"
    assert is_backup_document(valid_document)


@pytest.mark.parametrize("field", ["title", "url", "domain", "favicon", "lastAccessed"])
def test_tab_requires_every_field(field):
    tab = make_tab()
    del tab[field]
    assert not is_tab_snapshot(tab)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), "1700000000000", None, True])
def test_tab_last_accessed_must_be_finite_number(value):
    assert not is_tab_snapshot(make_tab(lastAccessed=value))


def test_tab_must_be_object():
    assert not is_tab_snapshot(["title", "url"])
    assert not is_tab_snapshot(None)


@pytest.mark.parametrize("overrides", [{"id": 1}, {"name": None}, {"tabs": {}}, {"tabs": None}])
def test_group_field_types(overrides):
    assert not is_group(make_group(**overrides))


def test_group_invalid_if_any_tab_invalid():
    assert not is_group(make_group(tabs=[make_tab(), make_tab(url=None)]))


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": None},
        {"name": "   "},
        {"name": ""},
        {"name": "x" * 51},
        {"createdAt": "2024-01-01"},
        {"createdAt": float("nan")},
        {"createdAt": 1700000000000.5},
        {"groups": "none"},
    ],
)
def test_session_field_rules(overrides):
    assert not is_session(make_session(**overrides))


def test_session_invalid_if_nested_tab_invalid():
    bad_group = make_group(tabs=[make_tab(lastAccessed=float("nan"))])
    assert not is_session(make_session(groups=[make_group(), bad_group]))


def test_session_name_checked_after_trim():
    assert is_session(make_session(name="  " + "n" * 50 + " "))


@pytest.mark.parametrize(
    "overrides",
    [
        {"version": 99},
        {"version": "1"},
        {"version": None},
        {"timestamp": 1700000000},
        {"sessions": {}},
    ],
)
def test_document_top_level_rules(valid_document, overrides):
    valid_document.update(overrides)
    assert not is_backup_document(valid_document)


def test_document_must_be_object():
    for value in (None, [], "backup", 1):
        assert not is_backup_document(value)


def test_deeply_nested_input_terminates():
    nested = []
    for _ in range(10000):
        nested = [nested]
    doc = {"version": 1, "timestamp": "t", "sessions": nested}
    assert not is_backup_document(doc)
    assert validate_with_diagnostics(doc).errors == ("Invalid session at index 0",)


def test_document_decoded_from_json_with_nan_literal(valid_document):
    raw = json.dumps(valid_document).replace("1700000000000}", "NaN}", 1)
    assert not is_backup_document(json.loads(raw))


@pytest.mark.parametrize(
    "document",
    [
        None,
        {},
        {"version": 1, "timestamp": "t", "sessions": []},
        {"version": 99, "timestamp": "t", "sessions": []},
        {"version": 1, "timestamp": 5, "sessions": [make_session()]},
        {"version": 1, "timestamp": "t", "sessions": [make_session(), make_session(id=None)]},
        {"version": 1, "timestamp": "t", "sessions": "abc"},
        {"version": 1, "timestamp": "t", "sessions": [make_session(groups=[make_group(tabs=[{}])])]},
    ],
)
def test_guard_and_diagnostics_agree(document):
    assert is_backup_document(document) == validate_with_diagnostics(document).valid


def test_integer_beyond_float_range_does_not_crash(valid_document):
    huge = "1" + "0" * 400
    raw = json.dumps(valid_document).replace("1700000000000}", huge + "}", 1)
    doc = json.loads(raw)
    assert is_backup_document(doc)
    assert validate_with_diagnostics(doc).valid

    doc["sessions"][0]["createdAt"] = 10**400
    assert is_backup_document(doc)

    doc["version"] = 10**400
    assert not is_backup_document(doc)
    assert not validate_with_diagnostics(doc).valid
