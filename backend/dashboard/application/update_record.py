import logging
from typing import Any, Dict

from .create_record import build_document
from .record_types import RecordType

logger = logging.getLogger(__name__)


def update_record(
    *,
    documents,
    record_type: RecordType,
    record_id: Any,
    payload: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Replace a record with a submitted form.

    Design rules:
    - Full-document update, no partial patch
    - Validation runs before the remote call
    - Concurrent edits are not detected; the last write wins
    """
    document = build_document(record_type, payload)
    updated = documents.update(record_type.collection, record_id, document)
    logger.info(f"{record_type.label} {record_id} updated")
    return updated
