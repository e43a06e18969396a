from dashboard.domain.forms.portfolio import (
    GALLERY_KEYS,
    IMAGE_GALLERY,
    TAB_IMAGE,
    TAB_KINDS,
    TABS_GALLERY,
    VIDEO_GALLERY,
    PortfolioForm,
)
from .rules import ErrorMap, require, require_caption
from .seo import validate_banner, validate_seo

ALT_REQUIRED = "Alt text is required when image is provided"
POSTER_REQUIRED = "Poster is required when video is provided"


def validate_image_item(errors: ErrorMap, path: str, item) -> None:
    require_caption(errors, f"{path}.alt", item.image, item.alt, ALT_REQUIRED)


def validate_video_item(errors: ErrorMap, path: str, item) -> None:
    require_caption(errors, f"{path}.poster", item.video, item.poster, POSTER_REQUIRED)


def validate_tab(errors: ErrorMap, path: str, tab) -> None:
    require(errors, f"{path}.tabTitle", tab.tab_title, "Tab title is required")
    if tab.key not in TAB_KINDS:
        errors[f"{path}.key"] = "Tab type is required"
        return

    check = validate_image_item if tab.key == TAB_IMAGE else validate_video_item
    for index, item in enumerate(tab.list):
        check(errors, f"{path}.list.{index}", item)


def validate_portfolio(form: PortfolioForm) -> ErrorMap:
    """
    Validate a portfolio submission.

    Only the gallery selected by ``key`` is checked; scratch data in the
    other variants is ignored because it is never persisted.
    """
    errors: ErrorMap = {}
    errors.update(validate_seo(form.seo))
    errors.update(validate_banner(form.banner))

    card = form.content.card
    require(errors, "content.card.cardTitle", card.card_title, "Card Title is required")
    require(errors, "content.card.ctaText", card.cta_text, "CTA Text is required")
    require(errors, "content.card.pageUrl", card.page_url, "Page slug is required")
    require(errors, "content.card.cardBackgroundImage", card.card_background_image,
            "Background Image is required")

    if not require(errors, "key", form.key):
        return errors
    if form.key not in GALLERY_KEYS:
        errors["key"] = "Invalid selection"
        return errors

    if form.key == IMAGE_GALLERY:
        for index, item in enumerate(form.content.image_gallery.items):
            validate_image_item(errors, f"content.{IMAGE_GALLERY}.{index}", item)
    elif form.key == VIDEO_GALLERY:
        for index, item in enumerate(form.content.video_gallery.items):
            validate_video_item(errors, f"content.{VIDEO_GALLERY}.{index}", item)
    elif form.key == TABS_GALLERY:
        for index, tab in enumerate(form.content.tabs_gallery.tabs):
            validate_tab(errors, f"content.{TABS_GALLERY}.{index}", tab)

    return errors
