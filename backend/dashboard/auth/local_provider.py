import logging
import secrets
from typing import Any, Dict, Optional

from dashboard.exceptions import AuthenticationError, ConfigurationError
from dashboard.extensions import db
from dashboard.models.user import User as UserRecord
from dashboard.utils.transaction import transactional
from .base import BaseAuthProvider, Session, User

logger = logging.getLogger(__name__)


def _to_user(record: UserRecord) -> User:
    return User(id=str(record.id), email=record.email, metadata=dict(record.profile or {}))


class LocalAuthProvider(BaseAuthProvider):
    """Auth Session Provider over the local ``users`` table, for self-hosting and tests."""

    def get_current_session(self) -> Optional[Session]:
        stored = self._load_stored_session()
        if stored is None:
            return None

        record = db.session.get(UserRecord, int(stored.user.id)) if stored.user.id.isdigit() else None
        if record is None or not record.is_active:
            self._clear_session()
            self._notify(None)
            return None

        stored.user = _to_user(record)
        return stored

    def sign_in(self, email: str, password: str) -> Session:
        record = UserRecord.query.filter_by(email=email.strip().lower()).first()
        if not record or not record.check_password(password):
            raise AuthenticationError("Invalid login credentials")
        if not record.is_active:
            raise AuthenticationError("User account disabled")

        new_session = Session(
            access_token=secrets.token_urlsafe(32),
            refresh_token=secrets.token_urlsafe(32),
            user=_to_user(record),
        )
        self._store_session(new_session)
        self._notify(new_session)
        logger.info(f"User {record.id} signed in")
        return new_session

    def sign_up(self, email: str, password: str, profile_fields: Dict[str, Any]) -> User:
        email = email.strip().lower()
        if UserRecord.query.filter_by(email=email).first():
            raise AuthenticationError("User already registered")

        record = UserRecord()
        record.email = email
        record.profile = dict(profile_fields)
        record.set_password(password)

        with transactional() as session:
            session.add(record)

        return _to_user(record)

    def sign_out(self) -> None:
        self._clear_session()
        self._notify(None)

    def send_password_reset(self, email: str, redirect_to: str) -> None:
        raise ConfigurationError("Password reset emails require the hosted auth provider")
