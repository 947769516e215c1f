"""Typed parameter sets: named groups of string, number and boolean fields."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_VALID_TYPES = frozenset({"string", "number", "boolean"})


class ParameterError(ValueError):
    """Raised when a parameter request is invalid."""


class ParameterNotFoundError(ParameterError, LookupError):
    """Raised when no parameter has the requested id."""

    def __init__(self, message: str = "参数不存在") -> None:
        super().__init__(message)


@dataclass
class ParameterField:
    """One typed field of a parameter set."""

    name: str = ""
    type: str = ""
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParameterField":
        return cls(name=data.get("name", ""), type=data.get("type", ""), value=data.get("value"))


@dataclass
class ParameterRequest:
    """The data needed to create or update a parameter set."""

    type: str = ""
    name: str = ""
    parameters: list[ParameterField] = field(default_factory=list)


@dataclass
class ParameterRecord:
    """A stored parameter set as returned to callers."""

    id: int
    type: str
    name: str
    parameters: list[ParameterField]
    created_at: str
    updated_at: str
    created_by: int
    updated_by: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "parameters": [f.to_dict() for f in self.parameters],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "created_by": self.created_by,
            "updated_by": self.updated_by,
        }


@dataclass
class _Row:
    id: int
    type: str
    name: str
    parameters: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int


def is_valid_field_type(field_type: str) -> bool:
    """Return True for string, number or boolean, in any letter case."""
    return field_type.lower() in _VALID_TYPES


def is_valid_field_value(field_type: str, value: Any) -> bool:
    """Return True when value fits the declared field type; None always fits."""
    if value is None:
        return True
    kind = field_type.lower()
    if kind == "string":
        return isinstance(value, str)
    if kind == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind == "boolean":
        return isinstance(value, bool)
    return False


def _validate(request: ParameterRequest) -> None:
    if not request.name:
        raise ParameterError("参数名称不能为空")
    if not request.type:
        raise ParameterError("参数类型不能为空")
    seen: set[str] = set()
    for item in request.parameters:
        if not item.name:
            raise ParameterError("字段名称不能为空")
        if item.name in seen:
            raise ParameterError(f"字段名称 '{item.name}' 重复")
        seen.add(item.name)
        if not is_valid_field_type(item.type):
            raise ParameterError(
                f"字段 '{item.name}' 的类型无效，必须是 string, number 或 boolean"
            )
        if not is_valid_field_value(item.type, item.value):
            raise ParameterError(f"字段 '{item.name}' 的值类型与声明的类型不匹配")


def _encode_fields(fields: list[ParameterField]) -> str:
    return json.dumps([f.to_dict() for f in fields], ensure_ascii=False, separators=(",", ":"))


def _decode_fields(text: str) -> list[ParameterField]:
    """Decode stored fields; anything malformed yields an empty list."""
    if not text:
        return []
    try:
        data = json.loads(text)
    except ValueError:
        return []
    if data is None:
        return []
    if not isinstance(data, list):
        return []
    fields = []
    for entry in data:
        if not isinstance(entry, dict):
            return []
        name, kind = entry.get("name", ""), entry.get("type", "")
        if not isinstance(name, str) or not isinstance(kind, str):
            return []
        fields.append(ParameterField.from_dict(entry))
    return fields


def _copy_fields(fields: list[ParameterField]) -> list[ParameterField]:
    return [ParameterField(f.name, f.type, f.value) for f in fields]


class ParameterStore:
    """In-memory store of parameter sets."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or datetime.now
        self._rows: dict[int, _Row] = {}
        self._next_id = 1

    @staticmethod
    def _record(row: _Row, fields: list[ParameterField] | None = None) -> ParameterRecord:
        return ParameterRecord(
            id=row.id,
            type=row.type,
            name=row.name,
            parameters=_decode_fields(row.parameters) if fields is None else _copy_fields(fields),
            created_at=row.created_at.strftime(_TIME_FORMAT),
            updated_at=row.updated_at.strftime(_TIME_FORMAT),
            created_by=row.created_by,
            updated_by=row.updated_by,
        )

    def _find(self, parameter_id: int) -> _Row:
        row = self._rows.get(parameter_id)
        if row is None:
            raise ParameterNotFoundError()
        return row

    def list(self, limit: int, page: int, search: str = "") -> tuple[list[ParameterRecord], int]:
        """Return one page of records, newest id first, and the total match count."""
        rows = list(self._rows.values())
        if search:
            needle = search.casefold()
            rows = [r for r in rows if needle in r.name.casefold() or needle in r.type.casefold()]
        total = len(rows)
        rows.sort(key=lambda r: r.id, reverse=True)
        offset = max(0, (page - 1) * limit)
        rows = rows[offset:]
        if limit > 0:
            rows = rows[:limit]
        return [self._record(r) for r in rows], total

    def get(self, parameter_id: int) -> ParameterRecord:
        """Return one record; raises ParameterNotFoundError."""
        return self._record(self._find(parameter_id))

    def create(self, request: ParameterRequest, user_id: int) -> ParameterRecord:
        """Validate and store a new parameter set."""
        _validate(request)
        now = self._clock()
        row = _Row(
            id=self._next_id,
            type=request.type,
            name=request.name,
            parameters=_encode_fields(request.parameters),
            created_at=now,
            updated_at=now,
            created_by=user_id,
            updated_by=user_id,
        )
        self._rows[row.id] = row
        self._next_id += 1
        return self._record(row, request.parameters)

    def update(self, parameter_id: int, request: ParameterRequest, user_id: int) -> ParameterRecord:
        """Validate and replace the content of an existing parameter set."""
        row = self._find(parameter_id)
        _validate(request)
        row.type = request.type
        row.name = request.name
        row.parameters = _encode_fields(request.parameters)
        row.updated_by = user_id
        row.updated_at = self._clock()
        return self._record(row, request.parameters)

    def delete(self, parameter_id: int) -> None:
        """Remove a parameter set; raises ParameterNotFoundError."""
        self._find(parameter_id)
        del self._rows[parameter_id]

    def __len__(self) -> int:
        return len(self._rows)