from typing import Any, Dict, List, Optional

from dashboard.normalizers.pagination import normalize_pagination
from dashboard.utils.pagination import ListViewState, paginate
from dashboard.utils.search import filter_records
from .record_types import RecordType


def list_records(
    *,
    documents,
    record_type: RecordType,
    state: ListViewState,
    records: Optional[List[Dict[str, Any]]] = None,
    normalize_fn=None,
) -> Dict[str, Any]:
    """
    Fetch a whole collection, filter it by the search query, then slice one page.

    Pagination runs over the filtered collection; stats cover the full one.
    Pass ``records`` to reuse a fetch that already happened.
    """
    if records is None:
        records = documents.select_all(record_type.collection)
    filtered = filter_records(records, state.query, record_type.search_fields)
    page_items = paginate(filtered, state.page, state.page_size)

    response = normalize_pagination(
        page_items,
        normalize_fn or dict,
        page=state.page,
        per_page=state.page_size,
        total=len(filtered),
    )
    response["query"] = state.query
    response["stats"] = record_type.stats(records)
    return response
