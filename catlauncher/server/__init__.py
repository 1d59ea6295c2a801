# catlauncher/server/__init__.py
"""Cat Launcher session server - drives one headless game for a browser renderer."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catlauncher.config import GameConfig, ViewportConfig
from catlauncher.env.session import GameSession

from .config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("catlauncher.server")

_server_start_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    global _server_start_time
    _server_start_time = time.time()
    logger.info(f"Cat Launcher server starting on {settings.HOST}:{settings.PORT}")
    yield
    logger.info("Cat Launcher server shutting down...")


def default_config() -> GameConfig:
    return GameConfig(
        viewport=ViewportConfig(width=settings.VIEWPORT_WIDTH, height=settings.VIEWPORT_HEIGHT),
        seed=settings.SEED,
        record_replay=settings.RECORD_REPLAY,
    )


def create_app(*, config: GameConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Game configuration for the initial session. Defaults to the
            environment-driven settings.
    """
    from .models import HealthResponse
    from .routes import session as session_routes

    session = GameSession(config if config is not None else default_config())
    session_routes.init_session_routes(session)

    app = FastAPI(lifespan=lifespan, title="Cat Launcher Server")
    app.include_router(session_routes.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        current = session_routes.current_session()
        return HealthResponse(
            status="ok",
            state=current.state.value if current is not None else "none",
            uptime_s=time.time() - _server_start_time,
        )

    return app
