"""Account and session endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import auth as auth_service
from ..deps import bearer_token

router = APIRouter(tags=["auth"])


@router.post("/auth/signup", status_code=201)
def signup(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Register a player and open their first session."""

    return auth_service.signup(
        session,
        username=body.get("username"),
        email=body.get("email"),
        password=body.get("password"),
    )


@router.post("/auth/login")
def login(body: Dict[str, Any], session: Session = Depends(get_session)):
    return auth_service.login(
        session, email=body.get("email"), password=body.get("password")
    )


@router.get("/auth/session")
def session_user(
    token: Optional[str] = Depends(bearer_token),
    session: Session = Depends(get_session),
):
    """Resolve the caller's token; unknown tokens yield ``user: null``."""

    return {"user": auth_service.get_session_user(session, token)}


@router.post("/auth/session/touch")
def touch_session(
    token: Optional[str] = Depends(bearer_token),
    session: Session = Depends(get_session),
):
    return auth_service.touch_session(session, token)


__all__ = ["router"]
