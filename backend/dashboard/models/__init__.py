from .user import User
from .document import StoredDocument

__all__ = ["User", "StoredDocument"]
