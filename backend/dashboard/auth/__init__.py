from .base import AuthSessionProvider, Session, Subscription, User
from .local_provider import LocalAuthProvider
from .supabase_provider import SupabaseAuthProvider

__all__ = [
    "AuthSessionProvider",
    "LocalAuthProvider",
    "Session",
    "Subscription",
    "SupabaseAuthProvider",
    "User",
]
