"""Dictionary types and their entries: labelled values grouped under a type code."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Callable


class DictError(ValueError):
    """Raised when a dictionary operation is invalid."""


class DictTypeNotFoundError(DictError, LookupError):
    """Raised when no dictionary type matches."""

    def __init__(self, message: str = "字典类型不存在") -> None:
        super().__init__(message)


class DictTypeExistsError(DictError):
    """Raised when a dictionary type code is already taken."""

    def __init__(self, message: str = "字典类型已存在") -> None:
        super().__init__(message)


class DictDataNotFoundError(DictError, LookupError):
    """Raised when no dictionary entry matches."""

    def __init__(self, message: str = "字典数据不存在") -> None:
        super().__init__(message)


@dataclass
class DictType:
    """A dictionary type, identified by its unique type code."""

    id: int = 0
    name: str = ""
    type: str = ""
    remark: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class DictData:
    """One labelled value belonging to a dictionary type."""

    id: int = 0
    type: str = ""
    label: str = ""
    value: str = ""
    sort: int = 0
    remark: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


def _paginate(rows: list, page: int, limit: int) -> list:
    if page > 0 and limit > 0:
        offset = (page - 1) * limit
        return rows[offset:offset + limit]
    return rows


class DictStore:
    """In-memory store of dictionary types and their entries."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or datetime.now
        self._types: dict[int, DictType] = {}
        self._data: dict[int, DictData] = {}
        self._next_type_id = 1
        self._next_data_id = 1

    def _find_type(self, type_id: int) -> DictType:
        row = self._types.get(type_id)
        if row is None:
            raise DictTypeNotFoundError()
        return row

    def _find_data(self, data_id: int) -> DictData:
        row = self._data.get(data_id)
        if row is None:
            raise DictDataNotFoundError()
        return row

    def _type_in_use(self, type_code: str, exclude_id: int | None = None) -> bool:
        return any(
            row.type == type_code and row.id != exclude_id for row in self._types.values()
        )

    def _sorted_data(self, type_code: str) -> list[DictData]:
        rows = [row for row in self._data.values() if row.type == type_code]
        rows.sort(key=lambda row: (row.sort, row.id))
        return rows

    def list_types(self, page: int, limit: int) -> tuple[list[DictType], int]:
        """Return one page of types, newest id first, and the total count."""
        rows = sorted(self._types.values(), key=lambda row: row.id, reverse=True)
        total = len(rows)
        return [dataclasses.replace(r) for r in _paginate(rows, page, limit)], total

    def get_type(self, type_code: str) -> DictType:
        """Return the type with the given code; raises DictTypeNotFoundError."""
        for row in self._types.values():
            if row.type == type_code:
                return dataclasses.replace(row)
        raise DictTypeNotFoundError()

    def add_type(self, dict_type: DictType) -> DictType:
        """Store a new type; raises DictTypeExistsError when its code is taken."""
        if self._type_in_use(dict_type.type):
            raise DictTypeExistsError()
        now = self._clock()
        dict_type.id = self._next_type_id
        dict_type.created_at = now
        dict_type.updated_at = now
        self._types[dict_type.id] = dataclasses.replace(dict_type)
        self._next_type_id += 1
        return dict_type

    def update_type(self, dict_type: DictType) -> DictType:
        """Update name, code and remark of an existing type."""
        row = self._find_type(dict_type.id)
        if self._type_in_use(dict_type.type, exclude_id=dict_type.id):
            raise DictTypeExistsError()
        row.name = dict_type.name
        row.type = dict_type.type
        row.remark = dict_type.remark
        row.updated_at = self._clock()
        return dataclasses.replace(row)

    def delete_type(self, type_id: int) -> None:
        """Remove a type together with all of its entries."""
        row = self._find_type(type_id)
        self._data = {k: v for k, v in self._data.items() if v.type != row.type}
        del self._types[type_id]

    def list_data(self, type_code: str, page: int, limit: int) -> tuple[list[DictData], int]:
        """Return one page of a type's entries, ordered by sort, and their total count."""
        rows = self._sorted_data(type_code)
        total = len(rows)
        return [dataclasses.replace(r) for r in _paginate(rows, page, limit)], total

    def all_data(self, type_code: str) -> list[DictData]:
        """Return every entry of a type, ordered by sort."""
        return [dataclasses.replace(r) for r in self._sorted_data(type_code)]

    def add_data(self, dict_data: DictData) -> DictData:
        """Store a new entry; its type must exist."""
        if not self._type_in_use(dict_data.type):
            raise DictTypeNotFoundError()
        now = self._clock()
        dict_data.id = self._next_data_id
        dict_data.created_at = now
        dict_data.updated_at = now
        self._data[dict_data.id] = dataclasses.replace(dict_data)
        self._next_data_id += 1
        return dict_data

    def update_data(self, dict_data: DictData) -> DictData:
        """Update type, label, value, sort and remark of an existing entry."""
        row = self._find_data(dict_data.id)
        row.type = dict_data.type
        row.label = dict_data.label
        row.value = dict_data.value
        row.sort = dict_data.sort
        row.remark = dict_data.remark
        row.updated_at = self._clock()
        return dataclasses.replace(row)

    def delete_data(self, data_id: int) -> None:
        """Remove an entry; raises DictDataNotFoundError."""
        self._find_data(data_id)
        del self._data[data_id]