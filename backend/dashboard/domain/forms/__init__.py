from .blog import BlogForm
from .contact import ContactSubmission
from .portfolio import GALLERY_KEYS, PortfolioForm
from .seo_banner import SeoBannerForm

__all__ = [
    "BlogForm",
    "ContactSubmission",
    "GALLERY_KEYS",
    "PortfolioForm",
    "SeoBannerForm",
]
