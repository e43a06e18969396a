from .base import (
    BLOGS,
    COLLECTIONS,
    CONTACT_SUBMISSIONS,
    PORTFOLIOS,
    SEO_BANNERS,
    Document,
    DocumentStore,
)
from .sql_store import SqlDocumentStore
from .supabase_store import SupabaseDocumentStore

__all__ = [
    "BLOGS",
    "COLLECTIONS",
    "CONTACT_SUBMISSIONS",
    "PORTFOLIOS",
    "SEO_BANNERS",
    "Document",
    "DocumentStore",
    "SqlDocumentStore",
    "SupabaseDocumentStore",
]
