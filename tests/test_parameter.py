from datetime import datetime

import pytest

from devdesk.parameter import (
    ParameterError,
    ParameterField,
    ParameterNotFoundError,
    ParameterRequest,
    ParameterStore,
    is_valid_field_type,
    is_valid_field_value,
)


def fixed_clock():
    return datetime(2024, 1, 2, 3, 4, 5)


def make_request(name="limits", type_="game", fields=None):
    if fields is None:
        fields = [
            ParameterField("max", "number", 10),
            ParameterField("title", "string", "hello"),
            ParameterField("on", "boolean", True),
        ]
    return ParameterRequest(type=type_, name=name, parameters=fields)


def test_create_and_get_round_trip():
    store = ParameterStore(clock=fixed_clock)
    created = store.create(make_request(), 7)
    fetched = store.get(created.id)
    assert fetched.name == "limits"
    assert fetched.type == "game"
    assert fetched.parameters == make_request().parameters
    assert fetched.created_by == 7 and fetched.updated_by == 7


def test_timestamps_are_formatted():
    store = ParameterStore(clock=fixed_clock)
    record = store.create(make_request(), 1)
    assert record.created_at == "2024-01-02 03:04:05"
    assert record.updated_at == record.created_at


def test_list_orders_newest_first_and_paginates():
    store = ParameterStore()
    ids = [store.create(make_request(name=f"p{i}"), 1).id for i in range(5)]
    page1, total = store.list(2, 1, "")
    assert total == 5
    assert [r.id for r in page1] == sorted(ids, reverse=True)[:2]
    page3, _ = store.list(2, 3, "")
    assert [r.id for r in page3] == [min(ids)]


def test_list_search_matches_name_or_type():
    store = ParameterStore()
    store.create(make_request(name="Alpha", type_="x"), 1)
    store.create(make_request(name="beta", type_="alphabet"), 1)
    store.create(make_request(name="gamma", type_="y"), 1)
    records, total = store.list(10, 1, "alpha")
    assert total == 2
    assert {r.name for r in records} == {"Alpha", "beta"}


def test_update_changes_content_and_updater():
    store = ParameterStore()
    created = store.create(make_request(), 1)
    new_fields = [ParameterField("rate", "number", 1.5)]
    updated = store.update(created.id, make_request(name="renamed", fields=new_fields), 2)
    assert updated.name == "renamed"
    assert updated.created_by == 1 and updated.updated_by == 2
    assert store.get(created.id).parameters == new_fields


def test_delete_and_missing():
    store = ParameterStore()
    created = store.create(make_request(), 1)
    store.delete(created.id)
    assert len(store) == 0
    with pytest.raises(ParameterNotFoundError):
        store.get(created.id)
    with pytest.raises(ParameterNotFoundError):
        store.delete(created.id)
    with pytest.raises(ParameterNotFoundError):
        store.update(99, make_request(), 1)


@pytest.mark.parametrize(
    "request_",
    [
        make_request(name=""),
        make_request(type_=""),
        make_request(fields=[ParameterField("", "string", "a")]),
        make_request(fields=[ParameterField("a", "string", "x"), ParameterField("a", "string", "y")]),
        make_request(fields=[ParameterField("a", "date", "x")]),
        make_request(fields=[ParameterField("a", "number", "x")]),
    ],
)
def test_create_rejects_invalid_requests(request_):
    store = ParameterStore()
    with pytest.raises(ParameterError):
        store.create(request_, 1)
    assert len(store) == 0


def test_field_type_check_is_case_insensitive():
    assert is_valid_field_type("NUMBER") is True
    assert is_valid_field_type("date") is False


@pytest.mark.parametrize(
    "kind,value,expected",
    [
        ("string", "a", True),
        ("string", 1, False),
        ("number", 3, True),
        ("number", 2.5, True),
        ("number", True, False),
        ("boolean", False, True),
        ("boolean", "true", False),
        ("string", None, True),
        ("other", "x", False),
    ],
)
def test_field_value_check(kind, value, expected):
    assert is_valid_field_value(kind, value) is expected