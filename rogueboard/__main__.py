"""Entry point: ``python -m rogueboard``.

Supports two modes:
  - ``python -m rogueboard``            → Launch the FastAPI server
  - ``python -m rogueboard cli``        → Headless game driven by a move list or seeded random input
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_MOVE_CODES = {"U": "UP", "R": "RIGHT", "D": "DOWN", "L": "LEFT"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based grid board game core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Play headless from a move list or seeded random input")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--moves", type=str, default="",
                     help="Comma-separated moves: U, R, D, L, or W to wait")
    cli.add_argument("--turns", type=int, default=200,
                     help="Random inputs to play when --moves is not given")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    cli.add_argument("--quiet-ticks", action="store_true",
                     help="Keep per-turn scheduler logging at WARNING")

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from rogueboard.api.app import create_app
    from rogueboard.config import GameConfig

    config = GameConfig(seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _parse_moves(raw: str) -> list[str]:
    moves = [m.strip().upper() for m in raw.split(",") if m.strip()]
    for m in moves:
        if m != "W" and m not in _MOVE_CODES:
            raise SystemExit(f"Unknown move {m!r}; use U, R, D, L or W")
    return moves


def _run_cli(args: argparse.Namespace) -> None:
    from rogueboard.config import GameConfig
    from rogueboard.core.enums import Direction, Domain, MoveOutcome
    from rogueboard.engine.session import GameSession
    from rogueboard.systems.rng import DeterministicRNG
    from rogueboard.utils.logging import setup_logging

    config = GameConfig(seed=args.seed, log_level=args.log_level, realtime_clock=False)
    setup_logging(config.log_level, quiet_ticks=args.quiet_ticks)

    session = GameSession(config)
    session.new_game()

    if args.moves:
        inputs = _parse_moves(args.moves)
    else:
        rng = DeterministicRNG(config.seed)
        codes = ("U", "R", "D", "L", "W")
        inputs = [rng.choice(Domain.AUTOPLAY, 0, i, codes) for i in range(args.turns)]

    for code in inputs:
        if session.game_over:
            break
        if code == "W":
            result = session.wait()
        else:
            result = session.attempt_player_move(Direction[_MOVE_CODES[code]])
        if result.outcome == MoveOutcome.ATTACKED:
            session.finish_attack()
        logger.debug("%s -> %s at %s (food=%d)", code, result.outcome.name, session.player_cell, session.food)

    logger.info(
        "Done. level=%d food=%d turn=%d game_over=%s",
        session.level, session.food, session.turn_count, session.game_over,
    )
    if session.game_over:
        logger.info("Levels survived: %d", session.levels_survived)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
