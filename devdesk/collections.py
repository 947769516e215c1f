"""Generic container types: priority queues, a FIFO queue, a stack and an ordered map."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class EmptyCollectionError(IndexError):
    """Raised when an element is requested from an empty collection."""


@dataclass(eq=False)
class PriorityItem(Generic[T]):
    """An entry held by a priority queue."""

    value: T
    priority: int
    _index: int = field(default=-1, init=False, repr=False)


class PriorityQueue(Generic[T]):
    """Priority queue in which the highest priority comes out first."""

    _descending = True

    def __init__(self) -> None:
        self._items: list[PriorityItem[T]] = []

    def _before(self, a: PriorityItem[T], b: PriorityItem[T]) -> bool:
        if self._descending:
            return a.priority > b.priority
        return a.priority < b.priority

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        items[i]._index = i
        items[j]._index = j

    def _sift_up(self, j: int) -> None:
        items = self._items
        while j > 0:
            parent = (j - 1) // 2
            if not self._before(items[j], items[parent]):
                break
            self._swap(parent, j)
            j = parent

    def _sift_down(self, start: int) -> bool:
        items = self._items
        n = len(items)
        i = start
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and self._before(items[right], items[left]):
                child = right
            if not self._before(items[child], items[i]):
                break
            self._swap(i, child)
            i = child
        return i > start

    def enqueue(self, value: T, priority: int) -> PriorityItem[T]:
        """Add a value with the given priority and return its entry."""
        item = PriorityItem(value, priority)
        item._index = len(self._items)
        self._items.append(item)
        self._sift_up(item._index)
        return item

    def dequeue(self) -> tuple[T, int]:
        """Remove and return the first (value, priority) pair."""
        if not self._items:
            raise EmptyCollectionError("priority queue is empty")
        last = len(self._items) - 1
        self._swap(0, last)
        item = self._items.pop()
        if self._items:
            self._sift_down(0)
        item._index = -1
        return item.value, item.priority

    def peek(self) -> tuple[T, int]:
        """Return the first (value, priority) pair without removing it."""
        if not self._items:
            raise EmptyCollectionError("priority queue is empty")
        item = self._items[0]
        return item.value, item.priority

    def update_priority(self, item: PriorityItem[T], priority: int) -> None:
        """Change the priority of an entry that is still in the queue."""
        idx = item._index
        if idx < 0 or idx >= len(self._items) or self._items[idx] is not item:
            raise ValueError("item is not in this priority queue")
        item.priority = priority
        if not self._sift_down(idx):
            self._sift_up(idx)

    def clear(self) -> None:
        """Remove every entry."""
        for item in self._items:
            item._index = -1
        self._items = []

    def to_list(self) -> list[T]:
        """Return the values in the order they would be dequeued."""
        return [value for value, _ in self]

    def from_items(self, items: Iterable[T], priorities: Iterable[int]) -> None:
        """Replace the contents with values paired with priorities."""
        values = list(items)
        prios = list(priorities)
        if len(values) != len(prios):
            raise ValueError("items and priorities length mismatch")
        self.clear()
        for value, priority in zip(values, prios):
            self.enqueue(value, priority)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[T, int]]:
        """Yield (value, priority) pairs in dequeue order, leaving the queue intact."""
        ordered = sorted(self._items, key=lambda it: it.priority, reverse=self._descending)
        for item in ordered:
            yield item.value, item.priority

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class MinPriorityQueue(PriorityQueue[T]):
    """Priority queue in which the lowest priority comes out first."""

    _descending = False


class Queue(Generic[T]):
    """First-in, first-out queue."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, item: T) -> None:
        """Append an item at the back."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if not self._items:
            raise EmptyCollectionError("queue is empty")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the item at the front without removing it."""
        if not self._items:
            raise EmptyCollectionError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def to_list(self) -> list[T]:
        """Return the items from front to back."""
        return list(self._items)

    def from_items(self, items: Iterable[T]) -> None:
        """Replace the contents with the given items."""
        self._items = deque(items)

    def to_json(self) -> str:
        """Serialise the items as a JSON array."""
        return json.dumps(list(self._items), separators=(",", ":"))

    def from_json(self, data: str | bytes) -> None:
        """Replace the contents with the items of a JSON array."""
        loaded = json.loads(data)
        if loaded is None:
            loaded = []
        if not isinstance(loaded, list):
            raise ValueError("JSON data is not an array")
        self._items = deque(loaded)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack(Generic[T]):
    """Last-in, first-out stack."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, item: T) -> None:
        """Put an item on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyCollectionError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyCollectionError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items = []

    def to_list(self) -> list[T]:
        """Return a copy of the items, bottom first."""
        return list(self._items)

    def from_items(self, items: Iterable[T]) -> None:
        """Replace the contents with the given items, the last on top."""
        self._items = list(items)

    def to_json(self) -> str:
        """Serialise the items, bottom first, as a JSON array."""
        return json.dumps(self._items, separators=(",", ":"))

    def from_json(self, data: str | bytes) -> None:
        """Replace the contents with the items of a JSON array."""
        loaded = json.loads(data)
        if loaded is None:
            loaded = []
        if not isinstance(loaded, list):
            raise ValueError("JSON data is not an array")
        self._items = loaded

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class OrderedMap(Generic[K, V]):
    """Mapping that remembers the order in which keys were first set."""

    def __init__(self) -> None:
        self._data: dict[K, V] = {}

    def set(self, key: K, value: V) -> None:
        """Set a value; an existing key keeps its position."""
        self._data[key] = value

    def get(self, key: K, default: Any = None) -> Any:
        """Return the value for key, or default when it is absent."""
        return self._data.get(key, default)

    def delete(self, key: K) -> None:
        """Remove a key if it is present."""
        self._data.pop(key, None)

    def keys(self) -> list[K]:
        """Return the keys in insertion order."""
        return list(self._data)

    def values(self) -> list[V]:
        """Return the values in key insertion order."""
        return list(self._data.values())

    def items(self) -> list[tuple[K, V]]:
        """Return (key, value) pairs in insertion order."""
        return list(self._data.items())

    def first(self) -> tuple[K, V]:
        """Return the first (key, value) pair."""
        if not self._data:
            raise EmptyCollectionError("map is empty")
        key = next(iter(self._data))
        return key, self._data[key]

    def last(self) -> tuple[K, V]:
        """Return the last (key, value) pair."""
        if not self._data:
            raise EmptyCollectionError("map is empty")
        key = next(reversed(self._data))
        return key, self._data[key]

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    def to_json(self) -> str:
        """Serialise as a JSON array of {"Key": ..., "Value": ...} objects."""
        entries = [{"Key": k, "Value": v} for k, v in self._data.items()]
        return json.dumps(entries, separators=(",", ":"))

    def from_json(self, data: str | bytes) -> None:
        """Replace the contents from a JSON array of Key/Value objects."""
        loaded = json.loads(data)
        if loaded is None:
            loaded = []
        if not isinstance(loaded, list):
            raise ValueError("JSON data is not an array")
        entries = []
        for entry in loaded:
            if not isinstance(entry, dict):
                raise ValueError("JSON entry is not an object")
            entries.append((entry.get("Key"), entry.get("Value")))
        self.clear()
        for key, value in entries:
            self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"OrderedMap({self.items()!r})"