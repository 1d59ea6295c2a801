# catlauncher/server/models.py
"""Pydantic models for API requests/responses."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from catlauncher.actions import InputKind
from catlauncher.config import MAX_VIEWPORT_DIM


class InputPayload(BaseModel):
    """One input event from the renderer."""

    kind: InputKind
    x: float | None = None
    y: float | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _kind_by_name(cls, v: Any) -> Any:
        # Accept "gesture_begin" as well as 1.
        if isinstance(v, str) and not v.isdigit():
            try:
                return InputKind[v.upper()]
            except KeyError:
                raise ValueError(f"unknown input kind {v!r}") from None
        return v


class TickRequest(BaseModel):
    """Advance the session. Inputs are applied before the first tick."""

    ticks: int = Field(default=1, ge=1)
    inputs: list[InputPayload] = Field(default_factory=list)


class TickResponse(BaseModel):
    ticks: int
    events: list[dict[str, Any]]
    snapshot: dict[str, Any]


class ResetRequest(BaseModel):
    """Start a fresh session (high score is dropped)."""

    seed: int | None = None
    width: float | None = Field(default=None, gt=0, le=MAX_VIEWPORT_DIM, allow_inf_nan=False)
    height: float | None = Field(default=None, gt=0, le=MAX_VIEWPORT_DIM, allow_inf_nan=False)
    record_replay: bool | None = None


class ResizeRequest(BaseModel):
    width: float = Field(gt=0, le=MAX_VIEWPORT_DIM, allow_inf_nan=False)
    height: float = Field(gt=0, le=MAX_VIEWPORT_DIM, allow_inf_nan=False)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    state: str
    uptime_s: float
