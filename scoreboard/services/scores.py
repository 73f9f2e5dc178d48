"""Score submission."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from sqlmodel import Session

from ..core import AuthError, ValidationError, utcnow
from ..models import Period, ScoreEntry
from .auth import resolve_user

logger = logging.getLogger(__name__)


def validate_score(score: Any) -> float:
    """Return ``score`` as a float or raise ValidationError."""

    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValidationError("Invalid score")
    try:
        value = float(score)
    except OverflowError:
        raise ValidationError("Invalid score") from None
    if not math.isfinite(value) or value < 0:
        raise ValidationError("Invalid score")
    return value


def submit(session: Session, token: Optional[str], score: Any) -> Dict[str, bool]:
    """Record ``score`` once per period for the caller."""

    value = validate_score(score)

    user = resolve_user(session, token)
    if not user:
        raise AuthError("Invalid session")

    achieved_at = utcnow()
    for period in Period:
        session.add(
            ScoreEntry(
                user_id=user.id,
                username=user.username,
                score=value,
                period=period.value,
                achieved_at=achieved_at,
            )
        )
    session.commit()

    logger.info("score submitted user_id=%s score=%s", user.id, value)
    return {"success": True}


__all__ = ["submit", "validate_score"]
