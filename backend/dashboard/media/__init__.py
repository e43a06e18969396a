from .base import IMAGE, RESOURCE_KINDS, VIDEO, ObjectStore
from .cloudinary_store import CloudinaryObjectStore
from .local_store import LocalObjectStore
from .uploads import UploadTracker

__all__ = [
    "IMAGE",
    "RESOURCE_KINDS",
    "VIDEO",
    "CloudinaryObjectStore",
    "LocalObjectStore",
    "ObjectStore",
    "UploadTracker",
]
