"""Domain errors raised by the service layer."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse


class ScoreboardError(Exception):
    """Base error; ``status_code`` is used when the error reaches HTTP."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ScoreboardError):
    """Malformed or out-of-range input."""

    status_code = 400


class ConflictError(ScoreboardError):
    """Unique constraint would be violated (duplicate email)."""

    status_code = 409


class AuthError(ScoreboardError):
    """Bad credentials or unknown session; deliberately uninformative."""

    status_code = 401


async def scoreboard_error_handler(request: Request, exc: ScoreboardError) -> JSONResponse:
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


__all__ = [
    "AuthError",
    "ConflictError",
    "ScoreboardError",
    "ValidationError",
    "scoreboard_error_handler",
]
