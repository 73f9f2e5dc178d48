"""Leaderboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import leaderboard as leaderboard_service

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard/high-score")
def global_high_score(session: Session = Depends(get_session)):
    return {"highScore": leaderboard_service.get_global_high_score(session)}


@router.get("/leaderboard/players/current")
def current_players(session: Session = Depends(get_session)):
    """Recently active players with their best all-time score."""

    return {"players": leaderboard_service.get_current_players(session)}


@router.get("/leaderboard/{period}")
def top_scores(period: str, session: Session = Depends(get_session)):
    """Get the top ten entries for a period."""

    entries = leaderboard_service.get_top_scores(session, period)
    return {
        "period": period,
        "entries": [leaderboard_service.score_to_dict(entry) for entry in entries],
    }


__all__ = ["router"]
