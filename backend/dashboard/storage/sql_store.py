import logging
from typing import Any, List

from sqlalchemy.exc import SQLAlchemyError

from dashboard.exceptions import DocumentNotFound, DocumentStoreError
from dashboard.models.document import StoredDocument
from dashboard.utils.transaction import transactional
from .base import Document, strip_reserved

logger = logging.getLogger(__name__)

ORDERABLE_COLUMNS = {"created_at", "updated_at", "id"}


class SqlDocumentStore:
    """
    Document Store over the local ``documents`` table.

    Updates replace the whole document body; there is no partial patch.
    """

    def _get(self, collection: str, document_id: Any) -> StoredDocument:
        try:
            key = int(document_id)
        except (TypeError, ValueError):
            raise DocumentNotFound(collection, document_id) from None

        record = StoredDocument.query.filter_by(collection=collection, id=key).first()
        if record is None:
            raise DocumentNotFound(collection, document_id)
        return record

    def select_all(self, collection: str, order_by: str = "created_at", descending: bool = True) -> List[Document]:
        if order_by not in ORDERABLE_COLUMNS:
            raise DocumentStoreError(f"Cannot order {collection} by {order_by}")

        column = getattr(StoredDocument, order_by)
        tiebreak = StoredDocument.id
        ordering = (column.desc(), tiebreak.desc()) if descending else (column.asc(), tiebreak.asc())

        records = (
            StoredDocument.query
            .filter_by(collection=collection)
            .order_by(*ordering)
            .all()
        )
        return [record.to_dict() for record in records]

    def select_one(self, collection: str, document_id: Any) -> Document:
        return self._get(collection, document_id).to_dict()

    def insert(self, collection: str, document: Document) -> Document:
        record = StoredDocument()
        record.collection = collection
        record.data = strip_reserved(document)

        try:
            with transactional() as session:
                session.add(record)
        except SQLAlchemyError as exc:
            logger.error(f"Error creating {collection}: {exc}")
            raise DocumentStoreError(str(exc)) from exc

        return record.to_dict()

    def update(self, collection: str, document_id: Any, document: Document) -> Document:
        record = self._get(collection, document_id)

        try:
            with transactional():
                record.data = strip_reserved(document)
        except SQLAlchemyError as exc:
            logger.error(f"Error updating {collection} {document_id}: {exc}")
            raise DocumentStoreError(str(exc)) from exc

        return record.to_dict()

    def delete(self, collection: str, document_id: Any) -> None:
        record = self._get(collection, document_id)

        try:
            with transactional() as session:
                session.delete(record)
        except SQLAlchemyError as exc:
            logger.error(f"Error deleting {collection} {document_id}: {exc}")
            raise DocumentStoreError(str(exc)) from exc
