from typing import Any, Dict, List, Protocol

Document = Dict[str, Any]

BLOGS = "blogs"
SEO_BANNERS = "seo_banners"
PORTFOLIOS = "portfolio"
CONTACT_SUBMISSIONS = "contact_us"

COLLECTIONS = (BLOGS, SEO_BANNERS, PORTFOLIOS, CONTACT_SUBMISSIONS)

# Keys owned by the store; never part of a written document body
RESERVED_KEYS = ("id", "created_at", "updated_at")


def strip_reserved(document: Document) -> Document:
    return {k: v for k, v in document.items() if k not in RESERVED_KEYS}


class DocumentStore(Protocol):
    def select_all(self, collection: str, order_by: str = "created_at", descending: bool = True) -> List[Document]:
        ...

    def select_one(self, collection: str, document_id: Any) -> Document:
        ...

    def insert(self, collection: str, document: Document) -> Document:
        ...

    def update(self, collection: str, document_id: Any, document: Document) -> Document:
        ...

    def delete(self, collection: str, document_id: Any) -> None:
        ...
