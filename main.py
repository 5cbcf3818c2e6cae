"""Main entry point for the moon lander game (thin wrapper)."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from core.config import RESULTS_PATH, GameConfig
from game import LanderGame


@dataclass
class RunConfig:
    display_delta_v: bool
    seed: int | None
    results_path: str
    verbose: bool


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Moon Lander - turn-based lunar descent with landing radar",
    )
    parser.add_argument(
        "--delta-v",
        "-d",
        action="store_true",
        help="Display velocity changes as Delta V",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--results",
        default=None,
        help=f"Results log to append to (default: {RESULTS_PATH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _parse_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        display_delta_v=args.delta_v,
        seed=args.seed,
        results_path=RESULTS_PATH if args.results is None else args.results,
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = _build_parser()
    config = _parse_args(parser.parse_args(argv))

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    game = LanderGame(
        config=GameConfig(display_delta_v=config.display_delta_v),
        seed=config.seed,
        results_path=config.results_path,
    )
    game.run()


if __name__ == "__main__":
    main()
