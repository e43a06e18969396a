"""
Building blocks for the editable document trees.

Every node is a dataclass with explicit ``from_record`` / ``to_document``
mappings between Python attribute names and the stored camelCase keys.
List-valued nodes are ``ItemList`` instances: items may be appended or
removed at any index, never reordered.
"""
from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Callable, Generic, Iterator, List, Mapping, Optional, TypeVar

T = TypeVar("T")


def text(record: Optional[Mapping[str, Any]], key: str, default: str = "") -> str:
    """Read a string field, falling back to ``default`` for missing or empty values."""
    if not isinstance(record, Mapping):
        return default
    value = record.get(key)
    if value is None or value == "":
        return default
    return str(value)


def child(record: Optional[Mapping[str, Any]], key: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        return {}
    value = record.get(key)
    return value if isinstance(value, Mapping) else {}


def children(record: Optional[Mapping[str, Any]], key: str) -> List[Mapping[str, Any]]:
    if not isinstance(record, Mapping):
        return []
    value = record.get(key)
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, Mapping) else {} for item in value]


def set_fields(node: Any, **changes: Any) -> Any:
    """
    Explicit update for one node of a document tree.

    Only declared string fields can be set this way; nested nodes and lists
    have their own update functions.
    """
    if not is_dataclass(node):
        raise TypeError(f"{type(node).__name__} is not a document node")

    declared = {f.name for f in fields(node)}
    for name, value in changes.items():
        if name not in declared:
            raise AttributeError(f"{type(node).__name__} has no field {name!r}")
        if not isinstance(getattr(node, name), str):
            raise TypeError(f"{type(node).__name__}.{name} is not a text field")
        setattr(node, name, "" if value is None else str(value))
    return node


class ItemList(Generic[T]):
    """Ordered list node with append/remove at arbitrary index."""

    def __init__(self, factory: Callable[[], T], items: Optional[List[T]] = None):
        self._factory = factory
        self._items: List[T] = list(items or [])

    @classmethod
    def seeded(cls, factory: Callable[[], T], items: Optional[List[T]] = None) -> "ItemList[T]":
        """A list holding ``items``, or a single blank item when there are none."""
        return cls(factory, items or [factory()])

    def append(self, item: Optional[T] = None) -> T:
        item = self._factory() if item is None else item
        self._items.append(item)
        return item

    def remove(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"No item at index {index}")
        return self._items.pop(index)

    def update(self, index: int, **changes: Any) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"No item at index {index}")
        return set_fields(self._items[index], **changes)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ItemList({self._items!r})"

    def to_list(self) -> List[Any]:
        return [item.to_document() for item in self._items]
