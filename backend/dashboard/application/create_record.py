import logging
from typing import Any, Dict

from dashboard.exceptions import DashboardError, ValidationFailed
from .record_types import RecordType

logger = logging.getLogger(__name__)


def build_document(record_type: RecordType, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse, validate and strip a submitted form.

    Raises ValidationFailed with per-field errors before any remote call.
    """
    if not record_type.editable:
        raise DashboardError(f"{record_type.label} records are read-only")

    form = record_type.form.from_record(payload or {}, seed_lists=False)
    errors = record_type.validator(form)
    if errors:
        raise ValidationFailed(errors)
    return form.to_document()


def create_record(
    *,
    documents,
    record_type: RecordType,
    payload: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Insert a new record from a submitted form.

    Edge cases handled:
    - Validation errors block the insert entirely
    - Unselected portfolio galleries are dropped before writing
    """
    document = build_document(record_type, payload)
    created = documents.insert(record_type.collection, document)
    logger.info(f"{record_type.label} {created.get('id')} created")
    return created
