from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class InputKind(IntEnum):
    """Discrete input events a renderer feeds into a session."""

    PRIMARY = 0  # Generic "click/tap": start game, play again
    GESTURE_BEGIN = 1  # Pointer down (starts aiming)
    GESTURE_UPDATE = 2  # Pointer moved while down
    GESTURE_END = 3  # Pointer up (launches)


# Inputs that count as a "press" for advancing Instructions/GameOver.
PRESS_KINDS = frozenset({InputKind.PRIMARY, InputKind.GESTURE_BEGIN})


@dataclass(frozen=True)
class InputEvent:
    kind: InputKind
    x: float | None = None  # Pointer position, screen coordinates
    y: float | None = None

    def __post_init__(self) -> None:
        if self.kind in (InputKind.GESTURE_BEGIN, InputKind.GESTURE_UPDATE) and (self.x is None or self.y is None):
            raise ValueError(f"{self.kind.name} requires pointer coordinates")

    @classmethod
    def primary(cls) -> InputEvent:
        return cls(InputKind.PRIMARY)

    @classmethod
    def begin(cls, x: float, y: float) -> InputEvent:
        return cls(InputKind.GESTURE_BEGIN, float(x), float(y))

    @classmethod
    def update(cls, x: float, y: float) -> InputEvent:
        return cls(InputKind.GESTURE_UPDATE, float(x), float(y))

    @classmethod
    def end(cls) -> InputEvent:
        return cls(InputKind.GESTURE_END)
