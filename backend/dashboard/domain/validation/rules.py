"""
Field rules shared by every validator.

Validators collect problems into an ``ErrorMap`` keyed by dotted field path
(``content.imageGallery.0.alt``) and never raise; an empty map means valid.
"""
import re
from typing import Any, Dict, Optional
from urllib.parse import urlparse

ErrorMap = Dict[str, str]

REQUIRED = "Required"
INVALID_URL = "Must be a valid URL"
INVALID_EMAIL = "Invalid email address"

URL_SCHEMES = {"http", "https", "ftp"}
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def field_path(*parts: Any) -> str:
    return ".".join(str(p) for p in parts if p != "")


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def is_url(value: str) -> bool:
    if " " in value.strip():
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme in URL_SCHEMES and bool(parsed.netloc)


def is_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value.strip()))


def require(errors: ErrorMap, path: str, value: Optional[str], message: str = REQUIRED) -> bool:
    if is_blank(value):
        errors[path] = message
        return False
    return True


def require_url(errors: ErrorMap, path: str, value: Optional[str]) -> None:
    if require(errors, path, value) and not is_url(value):
        errors[path] = INVALID_URL


def optional_url(errors: ErrorMap, path: str, value: Optional[str]) -> None:
    """Blank is fine; anything else must be a URL."""
    if not is_blank(value) and not is_url(value):
        errors[path] = INVALID_URL


def caption_required(media: Optional[str]) -> bool:
    """A caption is required exactly when its media field holds a non-blank value."""
    return not is_blank(media)


def require_caption(errors: ErrorMap, path: str, media: Optional[str], caption: Optional[str], message: str) -> None:
    if caption_required(media):
        require(errors, path, caption, message)


def require_items(errors: ErrorMap, path: str, items, message: str) -> bool:
    if len(items) == 0:
        errors[path] = message
        return False
    return True
