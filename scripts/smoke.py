# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catlauncher import GameConfig, GameSession, GameState, InputEvent, ViewportConfig
from catlauncher.env.aim import AimVector


def run_episode(session: GameSession, rng: np.random.Generator, max_ticks: int) -> dict:
    # Instructions/GameOver -> Aiming
    session.tick([InputEvent.primary()])
    cfg = session.config.aim
    aim = AimVector(
        angle_deg=float(rng.uniform(cfg.min_angle_deg, cfg.max_angle_deg)),
        power=float(rng.uniform(cfg.min_power, cfg.max_power)),
    )
    session.launch(aim)

    counts: dict[str, int] = {}
    ticks = 0
    while session.state is GameState.FLYING and ticks < max_ticks:
        for event in session.tick():
            counts[event["type"]] = counts.get(event["type"], 0) + 1
        ticks += 1

    outcome = session.last_outcome if session.state is GameState.GAME_OVER else None
    outcome = outcome or {"reason": "timeout", "score": session.score}
    return {
        "angle_deg": round(aim.angle_deg, 1),
        "power": round(aim.power, 1),
        "ticks": ticks,
        "reason": outcome["reason"],
        "score": outcome["score"],
        "events": counts,
    }


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--episodes", type=int, default=5)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--width", type=float, default=960.0)
    parser.add_argument("--height", type=float, default=540.0)
    parser.add_argument("--max-ticks", type=int, default=5000)
    parser.add_argument("--record", action="store_true", help="Record replay frames to JSON")
    parser.add_argument("--out", type=str, default="runs/smoke", help="Output directory for replays")
    args = parser.parse_args()

    cfg = GameConfig(
        viewport=ViewportConfig(width=args.width, height=args.height),
        seed=args.seed,
        record_replay=args.record,
    )
    session = GameSession(cfg)
    rng = np.random.default_rng(args.seed)

    for ep in range(args.episodes):
        result = run_episode(session, rng, args.max_ticks)
        print(f"episode {ep}: {result}")

    print(f"high score: {session.high_score}")

    replay = session.get_replay()
    if args.record and replay is not None:
        out_dir = Path(args.out)
        out_dir.mkdir(parents=True, exist_ok=True)
        p = out_dir / f"replay_seed_{args.seed}.json"
        p.write_text(json.dumps(replay), encoding="utf-8")
        print(f"wrote {p}")


if __name__ == "__main__":
    main()
