from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import GenerationSettings
from .dungeon import generate
from .errors import DiggerError, InvalidArguments
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def _dimension(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="digger",
        description="Dig a connected room-and-corridor map and print it as text.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("width", type=_dimension, help="Map width in tiles")
    parser.add_argument("height", type=_dimension, help="Map height in tiles")
    parser.add_argument("--seed", default=None, help="Integer or string seed for a reproducible map")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with generation settings")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def build_settings(args: argparse.Namespace) -> GenerationSettings:
    """Layer command-line values over config file, environment and defaults."""
    settings = GenerationSettings.load(args.config)
    settings.width = args.width
    settings.height = args.height
    if args.seed is not None:
        settings.seed = args.seed
    return settings.validate()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = build_settings(args)
        grid, _report = generate(settings)
    except InvalidArguments as exc:
        logger.error("Invalid arguments: %s", exc)
        print(f"digger: error: {exc}", file=sys.stderr)
        return 1
    except DiggerError as exc:
        logger.exception("Generation failed")
        print(f"digger: error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(grid.to_text())
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
