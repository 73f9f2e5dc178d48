"""Signup, login and session resolution."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core import AuthError, ConflictError, ValidationError, utcnow
from ..models import AuthSession, User
from .security import generate_token, hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


def normalize_email(email: Any) -> str:
    if not isinstance(email, str):
        return ""
    return email.strip().lower()


def user_to_public(user: User) -> Dict[str, Any]:
    """Public view of a user; the password digest is never exposed."""

    return {"id": user.id, "username": user.username, "email": user.email}


def _find_user_by_email(session: Session, email: str) -> Optional[User]:
    return session.exec(select(User).where(User.email == email)).first()


def find_session(session: Session, token: Optional[str]) -> Optional[AuthSession]:
    if not token:
        return None
    return session.exec(select(AuthSession).where(AuthSession.token == token)).first()


def _open_session(session: Session, user: User) -> AuthSession:
    now = utcnow()
    auth_session = AuthSession(
        token=generate_token(),
        user_id=user.id,
        created_at=now,
        last_seen_at=now,
    )
    session.add(auth_session)
    return auth_session


def signup(
    session: Session, *, username: Any, email: Any, password: Any
) -> Dict[str, Any]:
    """Create an account and return a fresh session for it."""

    username = username.strip() if isinstance(username, str) else ""
    normalized_email = normalize_email(email)

    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError("Username must be at least 2 characters")
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("Password must be at least 6 characters")

    if _find_user_by_email(session, normalized_email):
        raise ConflictError("Email already exists")

    user = User(
        username=username,
        email=normalized_email,
        password_hash=hash_password(password),
    )
    session.add(user)
    try:
        session.flush()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email.
        session.rollback()
        raise ConflictError("Email already exists") from None

    auth_session = _open_session(session, user)
    token = auth_session.token
    session.commit()
    session.refresh(user)

    logger.info("signup user_id=%s username=%s", user.id, user.username)
    return {"success": True, "sessionToken": token, "user": user_to_public(user)}


def login(session: Session, *, email: Any, password: Any) -> Dict[str, Any]:
    """Verify credentials and open an additional session."""

    normalized_email = normalize_email(email)
    user = _find_user_by_email(session, normalized_email)

    # The digest is computed even for unknown emails; both failures look the same.
    password_ok = isinstance(password, str) and verify_password(
        password, user.password_hash if user else ""
    )
    if not user or not password_ok:
        logger.warning("login failed")
        raise AuthError("Invalid credentials")

    auth_session = _open_session(session, user)
    token = auth_session.token
    session.commit()
    session.refresh(user)

    logger.info("login user_id=%s", user.id)
    return {"success": True, "sessionToken": token, "user": user_to_public(user)}


def resolve_user(session: Session, token: Optional[str]) -> Optional[User]:
    """Return the user owning ``token`` or None for unknown tokens."""

    auth_session = find_session(session, token)
    if not auth_session:
        return None
    return session.get(User, auth_session.user_id)


def get_session_user(session: Session, token: Optional[str]) -> Optional[Dict[str, Any]]:
    user = resolve_user(session, token)
    if not user:
        return None
    return user_to_public(user)


def touch_session(session: Session, token: Optional[str]) -> Dict[str, bool]:
    """Refresh a session's last-seen time; unknown tokens are not an error."""

    auth_session = find_session(session, token)
    if not auth_session:
        return {"ok": False}

    auth_session.last_seen_at = utcnow()
    session.add(auth_session)
    session.commit()
    return {"ok": True}


__all__ = [
    "find_session",
    "get_session_user",
    "login",
    "normalize_email",
    "resolve_user",
    "signup",
    "touch_session",
    "user_to_public",
]
