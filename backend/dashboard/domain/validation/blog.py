from dashboard.domain.forms.blog import BlogForm
from .rules import ErrorMap, optional_url, require, require_items
from .seo import validate_banner, validate_seo


def validate_blog(form: BlogForm) -> ErrorMap:
    errors: ErrorMap = {}
    errors.update(validate_seo(form.seo))
    errors.update(validate_banner(form.banner))

    content = form.content
    require(errors, "content.title", content.title)
    require(errors, "content.createdDate", content.created_date)
    require(errors, "content.cta.slug", content.cta.slug)
    require(errors, "content.cta.text", content.cta.text)
    optional_url(errors, "content.thumbImage", content.thumb_image)

    if require_items(errors, "content.description", content.description,
                     "At least one description paragraph is required"):
        for index, paragraph in enumerate(content.description):
            require(errors, f"content.description.{index}.text", paragraph.text)

    if require_items(errors, "content.tags.list", content.tags, "At least one tag is required"):
        for index, tag in enumerate(content.tags):
            require(errors, f"content.tags.list.{index}.text", tag.text, "Tag is required")

    if require_items(errors, "content.urls.list", content.urls, "At least one URL is required"):
        for index, link in enumerate(content.urls):
            optional_url(errors, f"content.urls.list.{index}.href", link.href)

    return errors
