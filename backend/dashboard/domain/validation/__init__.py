from .auth import validate_login, validate_registration
from .blog import validate_blog
from .portfolio import validate_portfolio
from .rules import ErrorMap
from .seo_banner import validate_seo_banner

__all__ = [
    "ErrorMap",
    "validate_blog",
    "validate_login",
    "validate_portfolio",
    "validate_registration",
    "validate_seo_banner",
]
