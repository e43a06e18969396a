# dashboard/utils/search.py
from typing import Any, Callable, Iterable, List, Mapping, Sequence, Union

SearchValue = Union[None, str, int, Iterable[Any]]
SearchField = Callable[[Mapping[str, Any]], SearchValue]


def path(*keys: str) -> SearchField:
    """
    Build a field accessor for a nested key path.

    Missing keys and non-dict intermediates resolve to None.
    """
    def getter(record: Mapping[str, Any]) -> SearchValue:
        value: Any = record
        for key in keys:
            if not isinstance(value, Mapping):
                return None
            value = value.get(key)
        return value

    return getter


def each(list_path: SearchField, key: str) -> SearchField:
    """Accessor yielding ``item[key]`` for every item of a list field."""
    def getter(record: Mapping[str, Any]) -> SearchValue:
        items = list_path(record) or []
        return [item.get(key) for item in items if isinstance(item, Mapping)]

    return getter


def _matches(value: SearchValue, needle: str) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, int)):
        return needle in str(value).lower()
    return any(_matches(v, needle) for v in value)


def filter_records(
    records: Sequence[Mapping[str, Any]],
    query: str,
    fields: Sequence[SearchField],
) -> List[Mapping[str, Any]]:
    """
    Case-insensitive substring search, OR across ``fields``.

    Order is preserved. An empty query returns every record.
    """
    if not query:
        return list(records)

    needle = query.lower()
    return [
        record for record in records
        if any(_matches(field(record), needle) for field in fields)
    ]
