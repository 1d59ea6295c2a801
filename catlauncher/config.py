from __future__ import annotations

import math
from dataclasses import dataclass, field

# Largest accepted viewport side, in world units.
MAX_VIEWPORT_DIM = 100_000.0


@dataclass(frozen=True)
class ViewportConfig:
    width: float = 960.0
    height: float = 540.0
    # Layout fractions of the viewport (ground line and launcher base).
    ground_level_frac: float = 0.85
    launcher_x_frac: float = 0.1

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(value) or not (0.0 < value <= MAX_VIEWPORT_DIM):
                raise ValueError(f"viewport {name} must be in (0, {MAX_VIEWPORT_DIM:g}], got {value}")
        if not (0.0 < self.ground_level_frac <= 1.0):
            raise ValueError(f"ground_level_frac must be in (0, 1], got {self.ground_level_frac}")
        if not (0.0 <= self.launcher_x_frac < 1.0):
            raise ValueError(f"launcher_x_frac must be in [0, 1), got {self.launcher_x_frac}")

    @property
    def ground_level(self) -> float:
        return self.height * self.ground_level_frac

    @property
    def launcher_x(self) -> float:
        return self.width * self.launcher_x_frac

    @property
    def launcher_y(self) -> float:
        # The cat starts on the ground at the launcher.
        return self.ground_level


@dataclass(frozen=True)
class PhysicsConfig:
    gravity: float = 0.35
    air_resistance: float = 0.995  # Velocity multiplier per tick
    ground_friction: float = 0.9  # vx multiplier on a ground bounce
    bounce_factor: float = 0.6  # |vy| multiplier on a ground bounce
    projectile_size: float = 20.0

    def __post_init__(self) -> None:
        if not (0.0 < self.air_resistance <= 1.0):
            raise ValueError(f"air_resistance must be in (0, 1], got {self.air_resistance}")
        if not (0.0 <= self.ground_friction <= 1.0):
            raise ValueError(f"ground_friction must be in [0, 1], got {self.ground_friction}")
        if not (0.0 <= self.bounce_factor < 1.0):
            raise ValueError(f"bounce_factor must be in [0, 1), got {self.bounce_factor}")
        if self.projectile_size <= 0.0:
            raise ValueError(f"projectile_size must be positive, got {self.projectile_size}")


@dataclass(frozen=True)
class ObstacleConfig:
    density: float = 0.0025  # Spawn chance per unit of cursor travel
    min_dist: float = 200.0  # Min horizontal gap between obstacles
    width: float = 50.0
    height_min: float = 30.0
    height_max: float = 100.0
    boost_probability: float = 0.4
    boost_power_x: float = 10.0  # Forward impulse (additive)
    boost_power_y: float = 25.0  # Upward speed (absolute set)

    def __post_init__(self) -> None:
        if self.min_dist <= 0.0:
            raise ValueError(f"min_dist must be positive, got {self.min_dist}")
        if self.density < 0.0:
            raise ValueError(f"density must be non-negative, got {self.density}")
        if self.width <= 0.0:
            raise ValueError(f"width must be positive, got {self.width}")
        if not (0.0 < self.height_min <= self.height_max):
            raise ValueError(f"height range [{self.height_min}, {self.height_max}] is invalid")
        if not (0.0 <= self.boost_probability <= 1.0):
            raise ValueError(f"boost_probability must be in [0, 1], got {self.boost_probability}")


@dataclass(frozen=True)
class AimConfig:
    # Degrees, screen coordinates (negative is upward).
    min_angle_deg: float = -85.0
    max_angle_deg: float = -5.0
    initial_angle_deg: float = -45.0
    min_power: float = 10.0
    max_power: float = 50.0  # Max initial speed
    # Drag distance (as a fraction of viewport width) that maps to max_power.
    power_drag_frac: float = 1.0 / 3.0

    def __post_init__(self) -> None:
        if self.min_angle_deg > self.max_angle_deg:
            raise ValueError(f"min_angle_deg {self.min_angle_deg} > max_angle_deg {self.max_angle_deg}")
        if not (self.min_angle_deg <= self.initial_angle_deg <= self.max_angle_deg):
            raise ValueError(f"initial_angle_deg {self.initial_angle_deg} outside the angle range")
        if not (0.0 <= self.min_power <= self.max_power):
            raise ValueError(f"power range [{self.min_power}, {self.max_power}] is invalid")
        if self.power_drag_frac <= 0.0:
            raise ValueError(f"power_drag_frac must be positive, got {self.power_drag_frac}")


@dataclass(frozen=True)
class GameConfig:
    viewport: ViewportConfig = field(default_factory=ViewportConfig)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    obstacles: ObstacleConfig = field(default_factory=ObstacleConfig)
    aim: AimConfig = field(default_factory=AimConfig)
    seed: int | None = None
    # Keep per-tick snapshots in memory (see GameSession.get_replay).
    record_replay: bool = False
