# dashboard/utils/pagination.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence, TypeVar

from werkzeug.exceptions import BadRequest

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """
    Offset pagination over an in-memory collection.

    Returns ``items[page * page_size : page * page_size + page_size]``.
    Pages past the end are empty, not an error.
    """
    if page < 0:
        raise BadRequest("Page must not be negative")
    if page_size <= 0:
        raise BadRequest("Page size must be greater than zero")

    start = page * page_size
    return list(items[start:start + page_size])


@dataclass
class ListViewState:
    """
    Per-user state of one list view: zero-based page, page size, search query.

    Changing the page size always returns to the first page.
    """
    page: int = 0
    page_size: int = 10
    query: str = ""

    def set_page(self, page: int) -> None:
        if page < 0:
            raise BadRequest("Page must not be negative")
        self.page = page

    def set_page_size(self, page_size: int) -> None:
        if page_size <= 0:
            raise BadRequest("Page size must be greater than zero")
        if page_size != self.page_size:
            self.page = 0
        self.page_size = page_size

    def set_query(self, query: str) -> None:
        self.query = query or ""

    def apply(
        self,
        *,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        query: Optional[str] = None,
    ) -> "ListViewState":
        """
        Apply request parameters: search, page, then page size.

        A page size change resets to the first page even when a page is given.
        """
        if query is not None:
            self.set_query(query)
        if page is not None:
            self.set_page(page)
        if page_size is not None:
            self.set_page_size(page_size)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], default_page_size: int = 10) -> "ListViewState":
        data = data or {}
        return cls(
            page=int(data.get("page", 0)),
            page_size=int(data.get("page_size", default_page_size)),
            query=str(data.get("query", "")),
        )
