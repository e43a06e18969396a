from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .common import child
from .seo import BannerFields, SeoFields


@dataclass
class SeoBannerForm:
    seo: SeoFields = field(default_factory=SeoFields)
    banner: BannerFields = field(default_factory=BannerFields)

    @classmethod
    def empty(cls) -> "SeoBannerForm":
        return cls()

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]], seed_lists: bool = True) -> "SeoBannerForm":
        return cls(
            seo=SeoFields.from_record(child(record, "seo")),
            banner=BannerFields.from_record(child(record, "banner")),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "seo": self.seo.to_document(),
            "banner": self.banner.to_document(),
        }

    def editing_state(self) -> Dict[str, Any]:
        return self.to_document()
