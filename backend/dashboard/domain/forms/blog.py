from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Mapping, Optional

from .common import ItemList, child, children, text
from .seo import BannerFields, SeoFields


def today() -> str:
    return date.today().isoformat()


@dataclass
class Paragraph:
    text: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Paragraph":
        return cls(text=text(record, "text"))

    def to_document(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass
class Tag:
    text: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Tag":
        return cls(text=text(record, "text"))

    def to_document(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass
class Link:
    text: str = ""
    href: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Link":
        return cls(text=text(record, "text"), href=text(record, "href"))

    def to_document(self) -> Dict[str, Any]:
        return {"text": self.text, "href": self.href}


@dataclass
class CallToAction:
    slug: str = ""
    text: str = ""

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "CallToAction":
        return cls(slug=text(record, "slug"), text=text(record, "text"))

    def to_document(self) -> Dict[str, Any]:
        return {"slug": self.slug, "text": self.text}


@dataclass
class BlogContent:
    title: str = ""
    thumb_image: str = ""
    created_date: str = field(default_factory=today)
    cta: CallToAction = field(default_factory=CallToAction)
    description: ItemList[Paragraph] = field(default_factory=lambda: ItemList.seeded(Paragraph))
    tags_label: str = "Tags"
    tags: ItemList[Tag] = field(default_factory=lambda: ItemList.seeded(Tag))
    urls_label: str = "Urls"
    urls: ItemList[Link] = field(default_factory=lambda: ItemList.seeded(Link))

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]], seed_lists: bool = True) -> "BlogContent":
        make = ItemList.seeded if seed_lists else ItemList
        tags = child(record, "tags")
        urls = child(record, "urls")
        return cls(
            title=text(record, "title"),
            thumb_image=text(record, "thumbImage"),
            created_date=text(record, "createdDate", today()),
            cta=CallToAction.from_record(child(record, "cta")),
            description=make(Paragraph, [Paragraph.from_record(p) for p in children(record, "description")]),
            tags_label=text(tags, "text", "Tags"),
            tags=make(Tag, [Tag.from_record(t) for t in children(tags, "list")]),
            urls_label=text(urls, "text", "Urls"),
            urls=make(Link, [Link.from_record(u) for u in children(urls, "list")]),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "thumbImage": self.thumb_image,
            "createdDate": self.created_date,
            "cta": self.cta.to_document(),
            "description": self.description.to_list(),
            "tags": {"text": self.tags_label, "list": self.tags.to_list()},
            "urls": {"text": self.urls_label, "list": self.urls.to_list()},
        }


@dataclass
class BlogForm:
    seo: SeoFields = field(default_factory=SeoFields)
    banner: BannerFields = field(default_factory=BannerFields)
    content: BlogContent = field(default_factory=BlogContent)

    @classmethod
    def empty(cls) -> "BlogForm":
        return cls()

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]], seed_lists: bool = True) -> "BlogForm":
        """
        Map a stored blog (or a submitted payload) onto the form tree.

        ``seed_lists`` puts one blank item into empty lists, as the edit
        screen does; submissions are parsed without it so that an empty
        list still fails its minimum-length rule.
        """
        return cls(
            seo=SeoFields.from_record(child(record, "seo")),
            banner=BannerFields.from_record(child(record, "banner")),
            content=BlogContent.from_record(child(record, "content"), seed_lists=seed_lists),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "seo": self.seo.to_document(),
            "banner": self.banner.to_document(),
            "content": self.content.to_document(),
        }

    def editing_state(self) -> Dict[str, Any]:
        return self.to_document()
