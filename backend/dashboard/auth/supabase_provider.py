import logging
from typing import Any, Callable, Dict, Optional

from supabase import AuthError, Client

from dashboard.exceptions import AuthenticationError
from .base import BaseAuthProvider, Session, User

logger = logging.getLogger(__name__)


def _to_user(remote_user) -> User:
    return User(
        id=str(remote_user.id),
        email=remote_user.email or "",
        metadata=dict(remote_user.user_metadata or {}),
    )


def _to_session(remote_session) -> Session:
    return Session(
        access_token=remote_session.access_token,
        refresh_token=remote_session.refresh_token,
        expires_at=remote_session.expires_at,
        user=_to_user(remote_session.user),
    )


class SupabaseAuthProvider(BaseAuthProvider):
    """
    Auth Session Provider backed by Supabase Auth.

    Every auth call runs on a fresh client from ``client_factory``. A
    Supabase client rewrites its own Authorization header whenever it signs
    in or refreshes, so the client the document store uses never sees an
    auth call. Tokens are always passed explicitly.
    """

    def __init__(self, client_factory: Callable[[], Client], login_url: str):
        self.client_factory = client_factory
        self.login_url = login_url

    def _client(self) -> Client:
        return self.client_factory()

    def get_current_session(self) -> Optional[Session]:
        stored = self._load_stored_session()
        if stored is None:
            return None

        try:
            response = self._client().auth.get_user(stored.access_token)
        except AuthError as exc:
            logger.info(f"Access token rejected, refreshing session: {exc}")
            return self._refresh(stored)

        if response is None or response.user is None:
            return self._refresh(stored)

        stored.user = _to_user(response.user)
        return stored

    def _refresh(self, stored: Session) -> Optional[Session]:
        try:
            response = self._client().auth.refresh_session(stored.refresh_token)
        except AuthError as exc:
            logger.warning(f"Session refresh failed: {exc}")
            response = None

        if response is None or response.session is None:
            self._clear_session()
            self._notify(None)
            return None

        refreshed = _to_session(response.session)
        self._store_session(refreshed)
        self._notify(refreshed)
        return refreshed

    def sign_in(self, email: str, password: str) -> Session:
        try:
            response = self._client().auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            logger.error(f"Login error: {exc}")
            raise AuthenticationError(str(exc)) from exc

        if response.session is None:
            raise AuthenticationError("Login failed. Please check your credentials.")

        new_session = _to_session(response.session)
        self._store_session(new_session)
        self._notify(new_session)
        return new_session

    def sign_up(self, email: str, password: str, profile_fields: Dict[str, Any]) -> User:
        try:
            response = self._client().auth.sign_up({
                "email": email,
                "password": password,
                "options": {
                    "data": profile_fields,
                    "email_redirect_to": self.login_url,
                },
            })
        except AuthError as exc:
            logger.error(f"Registration error: {exc}")
            raise AuthenticationError(str(exc)) from exc

        if response.user is None:
            raise AuthenticationError("Registration failed. Please try again.")
        return _to_user(response.user)

    def sign_out(self) -> None:
        stored = self._load_stored_session()
        self._clear_session()
        self._notify(None)
        if stored is None:
            return

        try:
            self._client().auth.admin.sign_out(stored.access_token)
        except AuthError as exc:
            # The local session is gone either way
            logger.warning(f"Remote sign out failed: {exc}")

    def send_password_reset(self, email: str, redirect_to: str) -> None:
        try:
            self._client().auth.reset_password_for_email(email, {"redirect_to": redirect_to})
        except AuthError as exc:
            logger.error(f"Password reset error: {exc}")
            raise AuthenticationError(str(exc)) from exc
