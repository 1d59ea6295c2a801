from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

import numpy as np

from ..actions import PRESS_KINDS, InputEvent, InputKind
from ..config import GameConfig
from ..constants import PROJECTILE_SPAWN_OFFSET_Y
from ..gen.spawner import ObstacleSpawner
from ..sim.collision import resolve_collision
from ..sim.kinematics import integrate
from ..sim.obstacle import Obstacle, ObstacleType
from ..sim.projectile import Projectile
from .aim import AimVector, compute_aim, initial_aim
from .tracker import compute_camera_x, compute_score

logger = logging.getLogger("catlauncher.session")


class GameState(str, Enum):
    INSTRUCTIONS = "instructions"
    AIMING = "aiming"
    FLYING = "flying"
    GAME_OVER = "gameOver"


class GameSession:
    """
    One player's game: projectile, obstacles, camera, score and high score.

    The renderer drives it with discrete inputs and one `tick()` per frame:

      session = GameSession(GameConfig(seed=0))
      session.tick([InputEvent.primary()])              # instructions -> aiming
      session.tick([InputEvent.begin(x, y)])            # start aiming
      session.tick([InputEvent.update(x2, y2)])         # drag
      events = session.tick([InputEvent.end()])         # launch
      frame = session.snapshot()

    Each tick handles its queued inputs first, then runs, in order: state
    dispatch, integrator, spawner (extend + evict), collision, camera/score.
    `tick()` returns the events emitted during that tick (dicts with a "type").

    `reset()` discards every piece of run state except `high_score`.
    """

    def __init__(self, config: GameConfig | None = None, *, seed: int | None = None):
        self.config = config if config is not None else GameConfig()
        self.viewport = self.config.viewport
        self.seed = seed if seed is not None else self.config.seed
        self.rng = np.random.default_rng(self.seed)
        self.spawner = ObstacleSpawner(self.config.obstacles, self.rng)

        self.state = GameState.INSTRUCTIONS
        self.high_score = 0
        self.tick_count = 0
        self.last_outcome: dict[str, Any] | None = None
        self._replay: list[dict[str, Any]] | None = [] if self.config.record_replay else None

        # Run state (populated by reset()).
        self.projectile = self._new_projectile()
        self.camera_x = 0.0
        self.score = 0
        self.aim = initial_aim(self.config.aim)

        # Gesture state: written by input handling, read by the aiming tick.
        self.is_aiming = False
        self._gesture_start: tuple[float, float] | None = None
        self._pointer: tuple[float, float] | None = None

        self.reset()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    @property
    def ground_level(self) -> float:
        return self.viewport.ground_level

    @property
    def launcher_x(self) -> float:
        return self.viewport.launcher_x

    @property
    def launcher_y(self) -> float:
        return self.viewport.launcher_y

    @property
    def obstacles(self) -> list[Obstacle]:
        return self.spawner.obstacles

    def resize(self, width: float, height: float) -> None:
        """Follow a viewport resize: ground line and launcher move with it."""
        self.viewport = dataclasses.replace(self.viewport, width=float(width), height=float(height))
        logger.debug(f"Viewport resized to {self.viewport.width:.0f}x{self.viewport.height:.0f}")

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------

    def _new_projectile(self) -> Projectile:
        return Projectile(
            x=self.launcher_x,
            y=self.launcher_y - PROJECTILE_SPAWN_OFFSET_Y,
            size=self.config.physics.projectile_size,
        )

    def reset(self) -> None:
        # Replay frames are kept per run.
        self._replay = [] if self.config.record_replay else None
        self.projectile = self._new_projectile()
        self.spawner.reset(self.viewport)
        self.camera_x = 0.0
        self.score = 0
        self.aim = initial_aim(self.config.aim)
        self.is_aiming = False
        self._gesture_start = None
        self._pointer = None

    def _start_aiming(self, events: list[dict[str, Any]]) -> None:
        prev = self.state
        self.reset()
        self.state = GameState.AIMING
        events.append({"type": "reset", "from": prev.value})
        logger.debug(f"{prev.value} -> aiming")

    def launch(self, aim: AimVector | None = None) -> list[dict[str, Any]]:
        """Fire the projectile with `aim` (clamped) or the current aim. No-op unless aiming."""
        events: list[dict[str, Any]] = []
        if self.state is not GameState.AIMING:
            return events
        if aim is not None:
            cfg = self.config.aim
            self.aim = AimVector(
                angle_deg=float(np.clip(aim.angle_deg, cfg.min_angle_deg, cfg.max_angle_deg)),
                power=float(np.clip(aim.power, cfg.min_power, cfg.max_power)),
            )
        self._launch(events)
        return events

    def _launch(self, events: list[dict[str, Any]]) -> None:
        vx, vy = self.aim.velocity()
        p = self.projectile
        p.vx = vx
        p.vy = vy
        p.on_ground = False
        self.is_aiming = False
        self._gesture_start = None
        self.state = GameState.FLYING
        events.append({"type": "launch", "vx": float(vx), "vy": float(vy), **self.aim.to_dict()})
        logger.debug(f"Launch angle={self.aim.angle_deg:.1f} power={self.aim.power:.1f}")

    def _game_over(self, reason: str, events: list[dict[str, Any]]) -> None:
        self.state = GameState.GAME_OVER
        new_high = self.score > self.high_score
        if new_high:
            self.high_score = self.score
        self.last_outcome = {"reason": reason, "score": self.score, "new_high_score": new_high}
        events.append({"type": "game_over", **self.last_outcome})
        logger.info(f"Game over ({reason}): score={self.score} high_score={self.high_score}")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, event: InputEvent) -> list[dict[str, Any]]:
        """Apply one input event. Inputs the current state does not expect are ignored."""
        events: list[dict[str, Any]] = []
        state = self.state
        kind = event.kind

        if state in (GameState.INSTRUCTIONS, GameState.GAME_OVER):
            if kind in PRESS_KINDS:
                self._start_aiming(events)
            return events

        if state is not GameState.AIMING:
            return events

        if kind is InputKind.GESTURE_BEGIN:
            assert event.x is not None and event.y is not None
            self.is_aiming = True
            self._gesture_start = (event.x, event.y)
            self._pointer = (event.x, event.y)
            self._update_aim()
        elif kind is InputKind.GESTURE_UPDATE and self.is_aiming:
            assert event.x is not None and event.y is not None
            self._pointer = (event.x, event.y)
            self._update_aim()
        elif kind is InputKind.GESTURE_END and self.is_aiming:
            self._launch(events)
        return events

    def _update_aim(self) -> None:
        if self._pointer is None or self._gesture_start is None:
            return
        px, py = self._pointer
        sx, sy = self._gesture_start
        self.aim = compute_aim(px, py, sx, sy, self.viewport, self.config.aim)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self, inputs: Iterable[InputEvent] = ()) -> list[dict[str, Any]]:
        events: list[dict[str, Any]] = []
        for event in inputs:
            events.extend(self.handle_input(event))

        self.tick_count += 1
        if self.state is GameState.AIMING:
            if self.is_aiming:
                self._update_aim()
        elif self.state is GameState.FLYING:
            self._tick_flying(events)

        if self._replay is not None:
            self._replay.append({**self.snapshot(), "events": events})
        return events

    def _tick_flying(self, events: list[dict[str, Any]]) -> None:
        p = self.projectile
        step = integrate(p, self.config.physics, self.ground_level)
        if step.bounced:
            events.append({"type": "bounce", "x": float(p.x), "vx": float(p.vx), "vy": float(p.vy)})

        if step.rested:
            self._update_tracker()
            events.append({"type": "rest", "x": float(p.x)})
            self._game_over("rest", events)
            return

        for obs in self.spawner.extend(self.camera_x, self.viewport):
            events.append({"type": "spawn", **obs.to_dict()})
        self.spawner.evict(self.camera_x, self.viewport)

        cfg = self.config.obstacles
        hit, ended = resolve_collision(p, self.obstacles, boost_x=cfg.boost_power_x, boost_y=cfg.boost_power_y)
        if hit is not None:
            events.append({"type": hit.kind.value, "obstacle": hit.to_dict(), "vx": float(p.vx), "vy": float(p.vy)})

        self._update_tracker()
        if ended:
            assert hit is not None and hit.kind is ObstacleType.STOP
            self._game_over("stop", events)

    def _update_tracker(self) -> None:
        self.score = compute_score(self.projectile.x, self.launcher_x)
        self.camera_x = compute_camera_x(self.projectile.x, self.viewport)

    # ------------------------------------------------------------------
    # Rendering / replay
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        p = self.projectile
        return {
            "tick": int(self.tick_count),
            "state": self.state.value,
            "projectile": {
                "x": float(p.x),
                "y": float(p.y),
                "vx": float(p.vx),
                "vy": float(p.vy),
                "size": float(p.size),
                "rotation": float(p.rotation),
                "on_ground": bool(p.on_ground),
            },
            "obstacles": [obs.to_dict() for obs in self.obstacles],
            "camera_x": float(self.camera_x),
            "score": int(self.score),
            "high_score": int(self.high_score),
            "aim": self.aim.to_dict(),
            "is_aiming": bool(self.is_aiming),
            "viewport": {
                "width": float(self.viewport.width),
                "height": float(self.viewport.height),
                "ground_level": float(self.ground_level),
                "launcher_x": float(self.launcher_x),
                "launcher_y": float(self.launcher_y),
            },
        }

    def get_replay(self) -> dict[str, Any] | None:
        if self._replay is None:
            return None
        return {"seed": self.seed, "config": dataclasses.asdict(self.config), "frames": self._replay}
