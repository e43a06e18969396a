"""
Tests for statistics derived on read.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from dashboard.application.stats import (
    blog_stats,
    count_recent,
    dashboard_stats,
    portfolio_stats,
    seo_banner_stats,
)

NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


def _iso(days_ago):
    return (NOW - timedelta(days=days_ago)).isoformat()


BLOGS = [
    {"created_at": _iso(1), "content": {"description": [{}, {}], "tags": {"list": [{}]}, "urls": {"list": [{}, {}]}}},
    {"created_at": _iso(30), "content": {"description": [{}], "tags": {"list": []}}},
]

BANNERS = [
    {"created_at": _iso(2), "seo": {"openGraph": {"image": "og.png"}}, "banner": {"videoUrl": "v.mp4", "poster": "p.png"}},
    {"created_at": _iso(3), "seo": {"openGraph": {"image": ""}}, "banner": {"videoUrl": "", "poster": "p.png"}},
]

PORTFOLIOS = [
    {
        "created_at": _iso(0),
        "key": "imageGallery",
        "content": {"card": {"cardBackgroundImage": "bg.png"}, "imageGallery": [{}, {}, {}]},
    },
    {
        "created_at": _iso(10),
        "key": "imageVideoTabsGallery",
        "content": {
            "card": {},
            "imageVideoTabsGallery": [
                {"key": "image", "list": [{}]},
                {"key": "video", "list": [{}, {}]},
            ],
            # stale branch from an older save; never counted
            "videoGallery": [{}, {}, {}, {}],
        },
    },
]


class TestCollectionStats:

    def test_blog_stats(self):
        assert blog_stats(BLOGS) == {"totalBlogs": 2, "totalTags": 1, "totalUrls": 2, "totalParagraphs": 3}

    def test_seo_banner_stats(self):
        assert seo_banner_stats(BANNERS) == {
            "totalBanners": 2,
            "totalImages": 3,
            "totalVideos": 1,
            "totalOGImages": 1,
            "totalPosters": 2,
        }

    def test_portfolio_stats_read_selected_branch(self):
        assert portfolio_stats(PORTFOLIOS) == {
            "totalPortfolios": 2,
            "totalImages": 4,
            "totalVideos": 2,
            "totalTabs": 2,
            "totalCards": 1,
        }

    def test_count_recent_skips_unparseable_dates(self):
        records = [{"created_at": _iso(1)}, {"created_at": "garbage"}, {}]
        assert count_recent(records, NOW - timedelta(days=7)) == 1

    def test_naive_timestamps_are_utc(self):
        naive = (NOW - timedelta(days=1)).replace(tzinfo=None).isoformat()
        assert count_recent([{"created_at": naive}], NOW - timedelta(days=7)) == 1


class TestDashboardStats:

    def test_overview(self):
        documents = MagicMock()
        documents.select_all.side_effect = lambda collection: {
            "blogs": BLOGS,
            "seo_banners": BANNERS,
            "portfolio": PORTFOLIOS,
        }[collection]

        stats = dashboard_stats(documents, recent_days=7, now=NOW)

        assert stats["blogs"]["recentBlogs"] == 1
        assert stats["seoBanners"] == {
            "totalBanners": 2,
            "totalOGImages": 1,
            "totalVideos": 1,
            "totalPosters": 2,
            "recentBanners": 2,
        }
        assert stats["portfolios"]["recentPortfolios"] == 1
        assert stats["media"] == {"totalImages": 7, "totalVideos": 3, "totalMedia": 10}
