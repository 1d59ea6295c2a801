# catlauncher/server/routes/session.py
"""Live session endpoints: inputs, ticks and snapshots for a browser renderer."""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Any

from fastapi import APIRouter, HTTPException

from catlauncher.actions import InputEvent
from catlauncher.config import GameConfig
from catlauncher.env.session import GameSession

from ..config import settings
from ..models import InputPayload, ResetRequest, ResizeRequest, TickRequest, TickResponse

logger = logging.getLogger("catlauncher.server")

router = APIRouter(prefix="/api/session", tags=["session"])

# Module-level state set by init_session_routes
_session: GameSession | None = None
_lock = threading.Lock()


def init_session_routes(session: GameSession) -> None:
    """Initialize routes with a session instance."""
    global _session
    with _lock:
        _session = session


def _require_session() -> GameSession:
    if _session is None:
        raise HTTPException(503, "Session not initialized")
    return _session


def _to_event(payload: InputPayload) -> InputEvent:
    try:
        return InputEvent(payload.kind, payload.x, payload.y)
    except ValueError as e:
        raise HTTPException(400, str(e)) from e


@router.get("")
def get_snapshot() -> dict[str, Any]:
    """Current frame: state, projectile, obstacles, camera, score, aim."""
    with _lock:
        return _require_session().snapshot()


@router.post("/input")
def post_input(payload: InputPayload) -> dict[str, Any]:
    """Apply one input immediately (without advancing a tick)."""
    event = _to_event(payload)
    with _lock:
        session = _require_session()
        events = session.handle_input(event)
        return {"events": events, "snapshot": session.snapshot()}


@router.post("/tick", response_model=TickResponse)
def post_tick(request: TickRequest) -> TickResponse:
    """Advance `ticks` ticks; `inputs` are queued into the first one."""
    if request.ticks > settings.MAX_TICKS_PER_REQUEST:
        raise HTTPException(400, f"ticks must be <= {settings.MAX_TICKS_PER_REQUEST}")
    inputs = [_to_event(p) for p in request.inputs]
    with _lock:
        session = _require_session()
        events = session.tick(inputs)
        for _ in range(request.ticks - 1):
            events.extend(session.tick())
        return TickResponse(ticks=request.ticks, events=events, snapshot=session.snapshot())


@router.post("/reset")
def post_reset(request: ResetRequest) -> dict[str, Any]:
    """Replace the session with a fresh one (back to the instructions screen)."""
    global _session
    with _lock:
        base = _session.config if _session is not None else None
        try:
            config = _build_config(base, request)
        except ValueError as e:
            raise HTTPException(400, str(e)) from e
        _session = GameSession(config)
        vp = config.viewport
        logger.info(f"Session reset (seed={config.seed}, viewport={vp.width:.0f}x{vp.height:.0f})")
        return _session.snapshot()


@router.post("/resize")
def post_resize(request: ResizeRequest) -> dict[str, Any]:
    with _lock:
        session = _require_session()
        try:
            session.resize(request.width, request.height)
        except ValueError as e:
            raise HTTPException(400, str(e)) from e
        return session.snapshot()


@router.get("/replay")
def get_replay() -> dict[str, Any]:
    """Recorded frames of the current run (needs record_replay)."""
    with _lock:
        replay = _require_session().get_replay()
    if replay is None:
        raise HTTPException(404, "Replay recording is disabled for this session")
    return replay


def _build_config(base: GameConfig | None, request: ResetRequest) -> GameConfig:
    config = base if base is not None else GameConfig()
    viewport = config.viewport
    if request.width is not None or request.height is not None:
        viewport = dataclasses.replace(
            viewport,
            width=request.width if request.width is not None else viewport.width,
            height=request.height if request.height is not None else viewport.height,
        )
    seed = config.seed if request.seed is None else request.seed
    record = config.record_replay if request.record_replay is None else request.record_replay
    return dataclasses.replace(config, viewport=viewport, seed=seed, record_replay=record)


def current_session() -> GameSession | None:
    return _session
