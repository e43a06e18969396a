from dashboard.extensions import db
from .base import BaseModel


class StoredDocument(BaseModel):
    """A JSON document in a named collection, used by the SQL document store."""
    __tablename__ = "documents"

    __table_args__ = (
        db.Index("ix_documents_collection_created", "collection", "created_at", "id"),
    )

    collection = db.Column(db.String(64), nullable=False, index=True)
    data = db.Column(db.JSON, nullable=False, default=dict)

    def to_dict(self):
        document = dict(self.data or {})
        document["id"] = self.id
        document["created_at"] = self.created_at.isoformat() if self.created_at else None
        document["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return document
