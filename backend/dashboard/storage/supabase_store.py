import logging
from typing import Any, List

from postgrest.exceptions import APIError
from supabase import Client

from dashboard.exceptions import DocumentNotFound, DocumentStoreError
from .base import Document, strip_reserved

logger = logging.getLogger(__name__)


class SupabaseDocumentStore:
    """Document Store over Supabase tables; one call per operation, no retries."""

    def __init__(self, client: Client):
        self.client = client

    def _execute(self, action: str, collection: str, builder):
        try:
            return builder.execute()
        except APIError as exc:
            logger.error(f"Error {action} {collection}: {exc.message}")
            raise DocumentStoreError(exc.message or f"Failed {action} {collection}") from exc

    def select_all(self, collection: str, order_by: str = "created_at", descending: bool = True) -> List[Document]:
        query = self.client.table(collection).select("*").order(order_by, desc=descending)
        response = self._execute("fetching", collection, query)
        return list(response.data or [])

    def select_one(self, collection: str, document_id: Any) -> Document:
        query = self.client.table(collection).select("*").eq("id", document_id).limit(1)
        response = self._execute("fetching", collection, query)
        if not response.data:
            raise DocumentNotFound(collection, document_id)
        return response.data[0]

    def insert(self, collection: str, document: Document) -> Document:
        query = self.client.table(collection).insert(strip_reserved(document))
        response = self._execute("creating", collection, query)
        if not response.data:
            raise DocumentStoreError(f"Insert into {collection} returned no record")
        return response.data[0]

    def update(self, collection: str, document_id: Any, document: Document) -> Document:
        query = self.client.table(collection).update(strip_reserved(document)).eq("id", document_id)
        response = self._execute("updating", collection, query)
        if not response.data:
            raise DocumentNotFound(collection, document_id)
        return response.data[0]

    def delete(self, collection: str, document_id: Any) -> None:
        query = self.client.table(collection).delete().eq("id", document_id)
        self._execute("deleting", collection, query)
