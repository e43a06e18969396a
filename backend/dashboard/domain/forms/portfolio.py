"""
Portfolio form tree.

A portfolio shows exactly one gallery variant, selected by ``key``. While
editing, all three variants are kept so switching back and forth loses
nothing; ``to_document`` persists the card plus the selected variant only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from .common import ItemList, child, children, text
from .seo import BannerFields, SeoFields

IMAGE_GALLERY = "imageGallery"
VIDEO_GALLERY = "videoGallery"
TABS_GALLERY = "imageVideoTabsGallery"
GALLERY_KEYS = (IMAGE_GALLERY, VIDEO_GALLERY, TABS_GALLERY)

TAB_IMAGE = "image"
TAB_VIDEO = "video"
TAB_KINDS = (TAB_IMAGE, TAB_VIDEO)


@dataclass
class ImageItem:
    image: str = ""
    alt: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ImageItem":
        return cls(image=text(record, "image"), alt=text(record, "alt"))

    def to_document(self) -> Dict[str, Any]:
        return {"image": self.image, "alt": self.alt}


@dataclass
class VideoItem:
    video: str = ""
    poster: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "VideoItem":
        return cls(video=text(record, "video"), poster=text(record, "poster"))

    def to_document(self) -> Dict[str, Any]:
        return {"video": self.video, "poster": self.poster}


ITEM_TYPES = {TAB_IMAGE: ImageItem, TAB_VIDEO: VideoItem}


@dataclass
class Tab:
    tab_title: str = ""
    key: str = TAB_IMAGE
    list: ItemList[Union[ImageItem, VideoItem]] = field(
        default_factory=lambda: ItemList.seeded(ImageItem)
    )

    def set_kind(self, kind: str) -> None:
        """Switch the tab between image and video; a new kind starts from one blank item."""
        if kind not in TAB_KINDS:
            raise ValueError(f"Unknown tab type: {kind!r}")
        if kind != self.key:
            self.key = kind
            self.list = ItemList.seeded(ITEM_TYPES[kind])

    @classmethod
    def from_record(cls, record: Mapping[str, Any], seed_lists: bool = True) -> "Tab":
        # Unknown tab types keep their key so validation can reject them
        kind = text(record, "key", TAB_IMAGE if seed_lists else "")
        item_type = ITEM_TYPES.get(kind, ImageItem)
        items = [item_type.from_record(i) for i in children(record, "list")]
        make = ItemList.seeded if seed_lists else ItemList
        return cls(
            tab_title=text(record, "tabTitle"),
            key=kind,
            list=make(item_type, items),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "tabTitle": self.tab_title,
            "key": self.key,
            "list": self.list.to_list(),
        }


@dataclass
class ImageGallery:
    items: ItemList[ImageItem] = field(default_factory=lambda: ItemList.seeded(ImageItem))
    kind = IMAGE_GALLERY

    def to_document(self):
        return self.items.to_list()


@dataclass
class VideoGallery:
    items: ItemList[VideoItem] = field(default_factory=lambda: ItemList.seeded(VideoItem))
    kind = VIDEO_GALLERY

    def to_document(self):
        return self.items.to_list()


@dataclass
class TabsGallery:
    tabs: ItemList[Tab] = field(default_factory=lambda: ItemList.seeded(Tab))
    kind = TABS_GALLERY

    def to_document(self):
        return self.tabs.to_list()


GalleryVariant = Union[ImageGallery, VideoGallery, TabsGallery]


@dataclass
class CardFields:
    card_title: str = ""
    cta_text: str = ""
    page_url: str = ""
    card_background_image: str = ""

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "CardFields":
        return cls(
            card_title=text(record, "cardTitle"),
            cta_text=text(record, "ctaText"),
            page_url=text(record, "pageUrl"),
            card_background_image=text(record, "cardBackgroundImage"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "cardTitle": self.card_title,
            "ctaText": self.cta_text,
            "pageUrl": self.page_url,
            "cardBackgroundImage": self.card_background_image,
        }


@dataclass
class PortfolioContent:
    card: CardFields = field(default_factory=CardFields)
    image_gallery: ImageGallery = field(default_factory=ImageGallery)
    video_gallery: VideoGallery = field(default_factory=VideoGallery)
    tabs_gallery: TabsGallery = field(default_factory=TabsGallery)

    def variant(self, key: str) -> Optional[GalleryVariant]:
        return {
            IMAGE_GALLERY: self.image_gallery,
            VIDEO_GALLERY: self.video_gallery,
            TABS_GALLERY: self.tabs_gallery,
        }.get(key)

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]], seed_lists: bool = True) -> "PortfolioContent":
        make = ItemList.seeded if seed_lists else ItemList
        return cls(
            card=CardFields.from_record(child(record, "card")),
            image_gallery=ImageGallery(make(
                ImageItem, [ImageItem.from_record(i) for i in children(record, IMAGE_GALLERY)]
            )),
            video_gallery=VideoGallery(make(
                VideoItem, [VideoItem.from_record(i) for i in children(record, VIDEO_GALLERY)]
            )),
            tabs_gallery=TabsGallery(make(
                Tab, [Tab.from_record(t, seed_lists) for t in children(record, TABS_GALLERY)]
            )),
        )


@dataclass
class PortfolioForm:
    seo: SeoFields = field(default_factory=SeoFields)
    banner: BannerFields = field(default_factory=BannerFields)
    key: str = ""
    content: PortfolioContent = field(default_factory=PortfolioContent)

    @classmethod
    def empty(cls) -> "PortfolioForm":
        return cls()

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]], seed_lists: bool = True) -> "PortfolioForm":
        return cls(
            seo=SeoFields.from_record(child(record, "seo")),
            banner=BannerFields.from_record(child(record, "banner")),
            key=text(record, "key"),
            content=PortfolioContent.from_record(child(record, "content"), seed_lists=seed_lists),
        )

    def select(self, key: str) -> GalleryVariant:
        if key not in GALLERY_KEYS:
            raise ValueError(f"Unknown gallery type: {key!r}")
        self.key = key
        return self.content.variant(key)

    @property
    def gallery(self) -> Optional[GalleryVariant]:
        return self.content.variant(self.key)

    def editing_state(self) -> Dict[str, Any]:
        """Every branch, including the unselected scratch galleries. Never persisted."""
        return {
            "seo": self.seo.to_document(),
            "banner": self.banner.to_document(),
            "key": self.key,
            "content": {
                "card": self.content.card.to_document(),
                IMAGE_GALLERY: self.content.image_gallery.to_document(),
                VIDEO_GALLERY: self.content.video_gallery.to_document(),
                TABS_GALLERY: self.content.tabs_gallery.to_document(),
            },
        }

    def to_document(self) -> Dict[str, Any]:
        gallery = self.gallery
        if gallery is None:
            raise ValueError(f"Unknown gallery type: {self.key!r}")

        return {
            "seo": self.seo.to_document(),
            "banner": self.banner.to_document(),
            "key": self.key,
            "content": {
                "card": self.content.card.to_document(),
                self.key: gallery.to_document(),
            },
        }
