from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .common import child, text

DEFAULT_META_ROBOTS = "index, follow"
DEFAULT_META_VIEWPORT = "width=device-width, initial-scale=1"
DEFAULT_OG_TYPE = "website"


@dataclass
class OpenGraphFields:
    title: str = ""
    description: str = ""
    url: str = ""
    type: str = DEFAULT_OG_TYPE
    image: str = ""

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "OpenGraphFields":
        return cls(
            title=text(record, "title"),
            description=text(record, "description"),
            url=text(record, "url"),
            type=text(record, "type", DEFAULT_OG_TYPE),
            image=text(record, "image"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "type": self.type,
            "image": self.image,
        }


@dataclass
class SeoFields:
    title: str = ""
    description: str = ""
    keywords: str = ""
    meta_robots: str = DEFAULT_META_ROBOTS
    meta_viewport: str = DEFAULT_META_VIEWPORT
    canonical_url: str = ""
    open_graph: OpenGraphFields = field(default_factory=OpenGraphFields)

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "SeoFields":
        return cls(
            title=text(record, "title"),
            description=text(record, "description"),
            keywords=text(record, "keywords"),
            meta_robots=text(record, "metaRobots", DEFAULT_META_ROBOTS),
            meta_viewport=text(record, "metaViewport", DEFAULT_META_VIEWPORT),
            canonical_url=text(record, "canonicalURL"),
            open_graph=OpenGraphFields.from_record(child(record, "openGraph")),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "keywords": self.keywords,
            "metaRobots": self.meta_robots,
            "metaViewport": self.meta_viewport,
            "canonicalURL": self.canonical_url,
            "openGraph": self.open_graph.to_document(),
        }


@dataclass
class BannerFields:
    title: str = ""
    description: str = ""
    video_url: str = ""
    poster: str = ""

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "BannerFields":
        return cls(
            title=text(record, "title"),
            description=text(record, "description"),
            video_url=text(record, "videoUrl"),
            poster=text(record, "poster"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "videoUrl": self.video_url,
            "poster": self.poster,
        }
