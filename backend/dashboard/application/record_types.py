from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from dashboard.domain.forms import BlogForm, PortfolioForm, SeoBannerForm
from dashboard.domain.validation import validate_blog, validate_portfolio, validate_seo_banner
from dashboard.storage.base import BLOGS, CONTACT_SUBMISSIONS, PORTFOLIOS, SEO_BANNERS
from dashboard.utils.search import SearchField, each, path
from .stats import blog_stats, contact_stats, portfolio_stats, seo_banner_stats


@dataclass(frozen=True)
class RecordType:
    """
    Everything the generic list/form use cases need to know about one collection.

    Read-only collections have no ``form`` and no ``validator``.
    """
    collection: str
    label: str
    search_fields: Sequence[SearchField]
    stats: Callable[[List[Dict[str, Any]]], Dict[str, int]]
    form: Optional[type] = None
    validator: Optional[Callable[[Any], Dict[str, str]]] = None
    upload_folder: Optional[str] = None

    @property
    def editable(self) -> bool:
        return self.form is not None


BLOG = RecordType(
    collection=BLOGS,
    label="Blog",
    search_fields=(
        path("seo", "title"),
        path("content", "title"),
        path("banner", "title"),
        path("seo", "keywords"),
        path("id"),
        each(path("content", "tags", "list"), "text"),
        path("seo", "description"),
    ),
    stats=blog_stats,
    form=BlogForm,
    validator=validate_blog,
    upload_folder="blogs",
)

SEO_BANNER = RecordType(
    collection=SEO_BANNERS,
    label="SEO Banner",
    search_fields=(
        path("seo", "title"),
        path("banner", "title"),
        path("seo", "keywords"),
        path("id"),
        path("seo", "description"),
    ),
    stats=seo_banner_stats,
    form=SeoBannerForm,
    validator=validate_seo_banner,
    upload_folder="seo_banners",
)

PORTFOLIO = RecordType(
    collection=PORTFOLIOS,
    label="Portfolio",
    search_fields=(
        path("seo", "title"),
        path("banner", "title"),
        path("seo", "keywords"),
        path("id"),
        path("content", "card", "ctaText"),
        path("seo", "description"),
        path("key"),
    ),
    stats=portfolio_stats,
    form=PortfolioForm,
    validator=validate_portfolio,
    upload_folder="portfolio",
)

CONTACT_SUBMISSION = RecordType(
    collection=CONTACT_SUBMISSIONS,
    label="Contact entry",
    search_fields=(
        path("firstName"),
        path("lastName"),
        path("email"),
        path("message"),
        path("id"),
    ),
    stats=contact_stats,
)

RECORD_TYPES = {rt.collection: rt for rt in (BLOG, SEO_BANNER, PORTFOLIO, CONTACT_SUBMISSION)}
UPLOAD_FOLDERS = {rt.upload_folder for rt in RECORD_TYPES.values() if rt.upload_folder}
