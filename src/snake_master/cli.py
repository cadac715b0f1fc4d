"""CLI launcher for the Snake Master 3D game server."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from snake_master.config import Difficulty, GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-master",
        description="Snake Master 3D game engine server and tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the game server.")
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags below override it.",
    )
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument("--grid-size", type=int, default=None)
    serve_p.add_argument("--seed", type=int, default=None)
    serve_p.add_argument(
        "--difficulty", type=str, default=None,
        choices=[d.value for d in Difficulty.ordered()],
    )

    # --- difficulties ---
    sub.add_parser(
        "difficulties", help="List difficulty levels and tick intervals.",
    )

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    overrides: dict = {}
    if args.grid_size is not None:
        overrides["grid_size"] = args.grid_size
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.difficulty is not None:
        overrides["difficulty"] = Difficulty.parse(args.difficulty)
    return dataclasses.replace(config, **overrides) if overrides else config


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from snake_master.server.app import create_app

    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    logger.info(
        "Serving on %s:%d (grid %d, difficulty %s).",
        args.host, args.port, config.grid_size, config.difficulty.value,
    )
    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def _run_difficulties(args: argparse.Namespace) -> int:
    config = GameConfig()
    for level in Difficulty.ordered():
        print(f"{level.value:<8} {config.interval_for(level):>5} ms")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-master`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "difficulties": _run_difficulties,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
