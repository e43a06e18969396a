from dashboard.domain.forms.seo import BannerFields, SeoFields
from .rules import ErrorMap, field_path, require, require_url


def validate_seo(seo: SeoFields, prefix: str = "seo") -> ErrorMap:
    errors: ErrorMap = {}
    require(errors, field_path(prefix, "title"), seo.title)
    require(errors, field_path(prefix, "description"), seo.description)
    require(errors, field_path(prefix, "keywords"), seo.keywords)
    require_url(errors, field_path(prefix, "canonicalURL"), seo.canonical_url)

    og = seo.open_graph
    og_prefix = field_path(prefix, "openGraph")
    require(errors, field_path(og_prefix, "title"), og.title)
    require(errors, field_path(og_prefix, "description"), og.description)
    require_url(errors, field_path(og_prefix, "url"), og.url)
    require_url(errors, field_path(og_prefix, "image"), og.image)
    return errors


def validate_banner(banner: BannerFields, prefix: str = "banner") -> ErrorMap:
    errors: ErrorMap = {}
    require(errors, field_path(prefix, "title"), banner.title)
    require(errors, field_path(prefix, "description"), banner.description)
    require_url(errors, field_path(prefix, "videoUrl"), banner.video_url)
    require_url(errors, field_path(prefix, "poster"), banner.poster)
    return errors
