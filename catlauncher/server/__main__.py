# catlauncher/server/__main__.py
"""Entry point: python -m catlauncher.server"""

from __future__ import annotations

import argparse
import dataclasses

import uvicorn

from .config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Cat Launcher Session Server")
    parser.add_argument("--host", type=str, default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--seed", type=int, default=settings.SEED, help="Obstacle layout seed")
    parser.add_argument("--record", action="store_true", help="Record replay frames in memory")
    args = parser.parse_args()

    from . import create_app, default_config

    config = dataclasses.replace(default_config(), seed=args.seed, record_replay=args.record or settings.RECORD_REPLAY)
    app = create_app(config=config)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
