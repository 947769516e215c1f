from datetime import datetime

import pytest

from devdesk.dictionary import (
    DictData,
    DictDataNotFoundError,
    DictError,
    DictStore,
    DictType,
    DictTypeExistsError,
    DictTypeNotFoundError,
)

T0 = datetime(2024, 1, 1, 8, 0, 0)
T1 = datetime(2024, 1, 2, 9, 30, 0)


class _Clock:
    def __init__(self):
        self.now = T0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return _Clock()


@pytest.fixture
def store(clock):
    return DictStore(clock=clock)


def _add_type(store, code, name="Name"):
    return store.add_type(DictType(name=name, type=code))


def test_add_and_get_type(store):
    added = _add_type(store, "gender", "Gender")
    fetched = store.get_type("gender")
    assert fetched.id == added.id
    assert fetched.name == "Gender"
    assert fetched.created_at == T0
    assert fetched.updated_at == T0


def test_add_type_duplicate_code(store):
    _add_type(store, "gender")
    with pytest.raises(DictTypeExistsError):
        _add_type(store, "gender")


def test_error_messages(store):
    with pytest.raises(DictTypeNotFoundError, match="字典类型不存在"):
        store.get_type("missing")
    _add_type(store, "a")
    with pytest.raises(DictTypeExistsError, match="字典类型已存在"):
        _add_type(store, "a")
    with pytest.raises(DictDataNotFoundError, match="字典数据不存在"):
        store.delete_data(42)


def test_errors_share_base(store):
    with pytest.raises(DictError):
        store.get_type("nope")
    with pytest.raises(LookupError):
        store.get_type("nope")


def test_list_types_newest_first_and_paged(store):
    ids = [_add_type(store, f"t{i}").id for i in range(5)]
    rows, total = store.list_types(1, 2)
    assert total == len(ids)
    assert [r.id for r in rows] == sorted(ids, reverse=True)[:2]
    rows, _ = store.list_types(3, 2)
    assert [r.id for r in rows] == [min(ids)]


def test_list_types_without_paging_returns_all(store):
    for i in range(3):
        _add_type(store, f"t{i}")
    rows, total = store.list_types(0, 0)
    assert len(rows) == total == 3


def test_update_type(store, clock):
    added = _add_type(store, "color", "Color")
    clock.now = T1
    updated = store.update_type(DictType(id=added.id, name="Colour", type="colour", remark="r"))
    assert updated.name == "Colour"
    assert updated.updated_at == T1
    assert updated.created_at == T0
    assert store.get_type("colour").remark == "r"
    with pytest.raises(DictTypeNotFoundError):
        store.get_type("color")


def test_update_type_missing(store):
    with pytest.raises(DictTypeNotFoundError):
        store.update_type(DictType(id=99, name="x", type="x"))


def test_update_type_code_conflict(store):
    _add_type(store, "a")
    b = _add_type(store, "b")
    with pytest.raises(DictTypeExistsError):
        store.update_type(DictType(id=b.id, name="B", type="a"))
    # keeping its own code is allowed
    assert store.update_type(DictType(id=b.id, name="B2", type="b")).name == "B2"


def test_delete_type_removes_its_data(store):
    a = _add_type(store, "a")
    _add_type(store, "b")
    store.add_data(DictData(type="a", label="x", value="1"))
    kept = store.add_data(DictData(type="b", label="y", value="2"))
    store.delete_type(a.id)
    assert store.all_data("a") == []
    assert [d.id for d in store.all_data("b")] == [kept.id]
    with pytest.raises(DictTypeNotFoundError):
        store.delete_type(a.id)


def test_add_data_requires_type(store):
    with pytest.raises(DictTypeNotFoundError):
        store.add_data(DictData(type="ghost", label="x", value="1"))


def test_data_ordered_by_sort(store):
    _add_type(store, "level")
    store.add_data(DictData(type="level", label="high", value="h", sort=3))
    store.add_data(DictData(type="level", label="low", value="l", sort=1))
    store.add_data(DictData(type="level", label="mid", value="m", sort=2))
    labels = [d.label for d in store.all_data("level")]
    assert labels == ["low", "mid", "high"]
    page, total = store.list_data("level", 2, 2)
    assert total == 3
    assert [d.label for d in page] == ["high"]


def test_list_data_only_for_type(store):
    _add_type(store, "a")
    _add_type(store, "b")
    store.add_data(DictData(type="a", label="x", value="1"))
    rows, total = store.list_data("b", 1, 10)
    assert rows == [] and total == 0


def test_update_data(store, clock):
    _add_type(store, "a")
    added = store.add_data(DictData(type="a", label="x", value="1", sort=5))
    clock.now = T1
    updated = store.update_data(
        DictData(id=added.id, type="a", label="y", value="2", sort=0, remark="note")
    )
    assert (updated.label, updated.value, updated.sort, updated.remark) == ("y", "2", 0, "note")
    assert updated.updated_at == T1
    assert store.all_data("a")[0].label == "y"


def test_update_data_missing(store):
    with pytest.raises(DictDataNotFoundError):
        store.update_data(DictData(id=7, type="a", label="x", value="1"))


def test_delete_data(store):
    _add_type(store, "a")
    added = store.add_data(DictData(type="a", label="x", value="1"))
    store.delete_data(added.id)
    assert store.all_data("a") == []
    with pytest.raises(DictDataNotFoundError):
        store.delete_data(added.id)


def test_returned_records_are_copies(store):
    _add_type(store, "a")
    fetched = store.get_type("a")
    fetched.name = "changed"
    assert store.get_type("a").name == "Name"