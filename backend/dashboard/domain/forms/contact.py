from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .common import text


@dataclass
class ContactSubmission:
    """Read-only view of a contact-form entry."""
    id: Any
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    message: str = ""
    phone: Optional[str] = None
    created_at: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ContactSubmission":
        return cls(
            id=record.get("id"),
            first_name=text(record, "firstName"),
            last_name=text(record, "lastName"),
            email=text(record, "email"),
            message=text(record, "message"),
            phone=record.get("phone") or None,
            created_at=record.get("created_at"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "message": self.message,
            "phone": self.phone,
            "created_at": self.created_at,
            "fullName": self.full_name,
        }
