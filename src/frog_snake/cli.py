"""Command-line launcher for Frog Snake tools."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frog-snake",
        description="Frog Snake configuration and headless simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- config ---
    config_p = sub.add_parser("config", help="Print or save the default config.")
    config_p.add_argument(
        "--output", type=str, default=None,
        help="Write the config JSON to this path instead of stdout.",
    )

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a headless game with random input.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--ticks", type=int, default=500)
    sim_p.add_argument("--grid-size", type=int, default=None)
    sim_p.add_argument(
        "--show", action="store_true",
        help="Print the board after every tick.",
    )

    return parser


def _run_config(args: argparse.Namespace) -> int:
    from frog_snake.config import GameConfig

    config = GameConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def _run_simulate(args: argparse.Namespace) -> int:
    from frog_snake.config import GameConfig
    from frog_snake.simulate import run_simulation

    config = GameConfig.load(args.config) if args.config else GameConfig()
    try:
        config = config.replace(grid_size=args.grid_size)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    result = run_simulation(
        config,
        seed=args.seed,
        max_ticks=args.ticks,
        stream=sys.stdout,
        show_board=args.show,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``frog-snake`` CLI."""
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
        "config": _run_config,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
