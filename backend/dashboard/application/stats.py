"""
Statistics derived on read from whole collections. Nothing here is stored.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from dateutil.parser import parse

from dashboard.domain.forms.portfolio import (
    IMAGE_GALLERY,
    TAB_IMAGE,
    TAB_VIDEO,
    TABS_GALLERY,
    VIDEO_GALLERY,
)
from dashboard.storage.base import BLOGS, PORTFOLIOS, SEO_BANNERS

Record = Mapping[str, Any]


def _get(record: Any, *keys: str) -> Any:
    value = record
    for key in keys:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _count(value: Any) -> int:
    return len(value) if isinstance(value, list) else 0


def _created_at(record: Record) -> Optional[datetime]:
    raw = record.get("created_at")
    if not raw:
        return None
    if isinstance(raw, datetime):
        created = raw
    else:
        try:
            created = parse(str(raw))
        except (ValueError, OverflowError):
            return None
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created


def count_recent(records: Iterable[Record], since: datetime) -> int:
    count = 0
    for record in records:
        created = _created_at(record)
        if created is not None and created > since:
            count += 1
    return count


# -------------------------------------------------
# Per-collection stats (list views)
# -------------------------------------------------

def blog_stats(blogs: List[Record]) -> Dict[str, int]:
    return {
        "totalBlogs": len(blogs),
        "totalTags": sum(_count(_get(b, "content", "tags", "list")) for b in blogs),
        "totalUrls": sum(_count(_get(b, "content", "urls", "list")) for b in blogs),
        "totalParagraphs": sum(_count(_get(b, "content", "description")) for b in blogs),
    }


def seo_banner_stats(banners: List[Record]) -> Dict[str, int]:
    og_images = sum(1 for b in banners if _get(b, "seo", "openGraph", "image"))
    videos = sum(1 for b in banners if _get(b, "banner", "videoUrl"))
    posters = sum(1 for b in banners if _get(b, "banner", "poster"))
    return {
        "totalBanners": len(banners),
        "totalImages": og_images + posters,
        "totalVideos": videos,
        "totalOGImages": og_images,
        "totalPosters": posters,
    }


def portfolio_stats(portfolios: List[Record]) -> Dict[str, int]:
    """
    Count gallery media per portfolio, reading only the branch its key selects.
    """
    images = videos = tabs = cards = 0

    for portfolio in portfolios:
        if _get(portfolio, "content", "card", "cardBackgroundImage"):
            cards += 1

        key = portfolio.get("key")
        if key == IMAGE_GALLERY:
            images += _count(_get(portfolio, "content", IMAGE_GALLERY))
        elif key == VIDEO_GALLERY:
            videos += _count(_get(portfolio, "content", VIDEO_GALLERY))
        elif key == TABS_GALLERY:
            gallery = _get(portfolio, "content", TABS_GALLERY)
            tabs += _count(gallery)
            for tab in gallery or []:
                if not isinstance(tab, Mapping):
                    continue
                if tab.get("key") == TAB_IMAGE:
                    images += _count(tab.get("list"))
                elif tab.get("key") == TAB_VIDEO:
                    videos += _count(tab.get("list"))

    return {
        "totalPortfolios": len(portfolios),
        "totalImages": images,
        "totalVideos": videos,
        "totalTabs": tabs,
        "totalCards": cards,
    }


def contact_stats(entries: List[Record]) -> Dict[str, int]:
    return {
        "totalEntries": len(entries),
        "withPhone": sum(1 for e in entries if e.get("phone")),
    }


# -------------------------------------------------
# Dashboard overview
# -------------------------------------------------

def dashboard_stats(documents, *, recent_days: int = 7, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Fetch blogs, SEO banners and portfolios once each and summarise them.

    The first failing fetch aborts the whole overview.
    """
    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=recent_days)

    blogs = documents.select_all(BLOGS)
    banners = documents.select_all(SEO_BANNERS)
    portfolios = documents.select_all(PORTFOLIOS)

    blog = blog_stats(blogs)
    blog["recentBlogs"] = count_recent(blogs, since)

    banner = seo_banner_stats(banners)
    banner["recentBanners"] = count_recent(banners, since)

    portfolio = portfolio_stats(portfolios)
    portfolio["recentPortfolios"] = count_recent(portfolios, since)

    all_images = banner["totalOGImages"] + banner["totalPosters"] + portfolio["totalImages"]
    all_videos = banner["totalVideos"] + portfolio["totalVideos"]

    return {
        "blogs": blog,
        "seoBanners": {
            "totalBanners": banner["totalBanners"],
            "totalOGImages": banner["totalOGImages"],
            "totalVideos": banner["totalVideos"],
            "totalPosters": banner["totalPosters"],
            "recentBanners": banner["recentBanners"],
        },
        "portfolios": portfolio,
        "media": {
            "totalImages": all_images,
            "totalVideos": all_videos,
            "totalMedia": all_images + all_videos,
        },
    }
