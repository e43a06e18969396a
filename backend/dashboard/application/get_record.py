from typing import Any

from dashboard.exceptions import DashboardError
from .record_types import RecordType


def new_form(record_type: RecordType):
    """Blank form state for a create screen."""
    if not record_type.editable:
        raise DashboardError(f"{record_type.label} records cannot be created here")
    return record_type.form.empty()


def get_form(*, documents, record_type: RecordType, record_id: Any):
    """
    Load a record into its form tree for editing.

    Missing keys fall back to the same defaults a new form uses.
    """
    if not record_type.editable:
        raise DashboardError(f"{record_type.label} records cannot be edited")
    record = documents.select_one(record_type.collection, record_id)
    return record_type.form.from_record(record)


def get_record(*, documents, record_type: RecordType, record_id: Any):
    return documents.select_one(record_type.collection, record_id)
