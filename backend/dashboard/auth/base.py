"""
Auth Session Provider interface.

Sessions are persisted per browser in the signed Flask cookie session.
Change listeners live on ``flask.g`` so a subscription never outlives the
request that created it and never sees another user's session changes.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional, Protocol

from flask import g, session as cookie_session

SESSION_KEY = "auth_session"

SessionCallback = Callable[[Optional["Session"]], None]


@dataclass
class User:
    id: str
    email: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        name = self.metadata.get("full_name")
        if name:
            return name
        parts = [self.metadata.get("first_name"), self.metadata.get("last_name")]
        return " ".join(p for p in parts if p) or self.email

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["full_name"] = self.full_name
        return data


@dataclass
class Session:
    access_token: str
    refresh_token: str
    user: User
    expires_at: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_at": self.expires_at,
            "user": asdict(self.user),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        user = data.get("user") or {}
        return cls(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token") or "",
            expires_at=data.get("expires_at"),
            user=User(
                id=str(user.get("id", "")),
                email=user.get("email", ""),
                metadata=user.get("metadata") or {},
            ),
        )


class Subscription:
    """Handle returned by ``on_session_change``; release it with ``unsubscribe``."""

    def __init__(self, listeners: List[SessionCallback], callback: SessionCallback):
        self._listeners = listeners
        self._callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        if self._callback in self._listeners:
            self._listeners.remove(self._callback)


class AuthSessionProvider(Protocol):
    def get_current_session(self) -> Optional[Session]:
        ...

    def get_current_user(self) -> Optional[User]:
        ...

    def on_session_change(self, callback: SessionCallback) -> Subscription:
        ...

    def sign_in(self, email: str, password: str) -> Session:
        ...

    def sign_up(self, email: str, password: str, profile_fields: Dict[str, Any]) -> User:
        ...

    def sign_out(self) -> None:
        ...

    def send_password_reset(self, email: str, redirect_to: str) -> None:
        ...


class BaseAuthProvider:
    """Cookie persistence and change notification shared by every provider."""

    def get_current_user(self) -> Optional[User]:
        current = self.get_current_session()
        return current.user if current else None

    def get_current_session(self) -> Optional[Session]:
        raise NotImplementedError

    # -------------------------------------------------
    # Change notification
    # -------------------------------------------------
    def _listeners(self) -> List[SessionCallback]:
        if not hasattr(g, "_session_listeners"):
            g._session_listeners = []
        return g._session_listeners

    def on_session_change(self, callback: SessionCallback) -> Subscription:
        listeners = self._listeners()
        listeners.append(callback)
        return Subscription(listeners, callback)

    def _notify(self, new_session: Optional[Session]) -> None:
        for callback in list(self._listeners()):
            callback(new_session)

    # -------------------------------------------------
    # Cookie persistence
    # -------------------------------------------------
    def _load_stored_session(self) -> Optional[Session]:
        data = cookie_session.get(SESSION_KEY)
        if not data or not data.get("access_token"):
            return None
        return Session.from_dict(data)

    def _store_session(self, new_session: Session) -> None:
        cookie_session[SESSION_KEY] = new_session.to_dict()

    def _clear_session(self) -> None:
        cookie_session.pop(SESSION_KEY, None)
