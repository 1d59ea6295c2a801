from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Projectile:
    x: float  # Centre, screen coordinates
    y: float
    vx: float = 0.0  # Units per tick
    vy: float = 0.0
    size: float = 20.0  # Full edge length of the bounding box
    rotation: float = 0.0  # radians, follows the velocity direction
    on_ground: bool = True

    @property
    def half_size(self) -> float:
        return self.size * 0.5

    @property
    def bottom(self) -> float:
        return self.y + self.half_size

    def bounds(self) -> tuple[float, float, float, float]:
        """(left, top, right, bottom) of the axis-aligned bounding box."""
        h = self.half_size
        return self.x - h, self.y - h, self.x + h, self.y + h

    def is_at_rest(self) -> bool:
        return self.on_ground and self.vx == 0.0 and self.vy == 0.0
