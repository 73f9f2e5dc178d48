"""Score submission endpoint."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import scores as score_service
from ..deps import bearer_token

router = APIRouter(tags=["scores"])


@router.post("/scores")
def submit_score(
    body: Dict[str, Any],
    token: Optional[str] = Depends(bearer_token),
    session: Session = Depends(get_session),
):
    """Submit a score to the daily, weekly and all-time boards."""

    return score_service.submit(session, token, body.get("score"))


__all__ = ["router"]
