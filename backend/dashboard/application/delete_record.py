import logging
from typing import Any, Dict, List

from .record_types import RecordType

logger = logging.getLogger(__name__)


def delete_record(
    *,
    documents,
    record_type: RecordType,
    record_id: Any,
) -> List[Dict[str, Any]]:
    """
    Hard-delete one record and return the re-fetched collection.

    Notes:
    - No soft delete, no cascade
    - Local state is never patched; the caller gets a fresh fetch
    """
    documents.delete(record_type.collection, record_id)
    logger.info(f"{record_type.label} {record_id} deleted")
    return documents.select_all(record_type.collection)
