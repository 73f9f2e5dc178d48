"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    LOG_LEVEL,
    ScoreboardError,
    engine,
    scoreboard_error_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if DB_RESET:
        logger.warning("DB_RESET set, dropping all tables")
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


def create_app() -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Scoreboard API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ScoreboardError, scoreboard_error_handler)

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("scoreboard.app:app", host="127.0.0.1", port=3000, reload=True)
