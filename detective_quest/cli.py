from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from .console import Console
from .session import GameSession
from .settings import GameSettings


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="detective-quest",
        description="Explore the mansion, collect clues and accuse a suspect.",
    )
    parser.add_argument(
        "--threshold",
        type=positive_int,
        default=None,
        help="Clues needed for a supported accusation (default 2)",
    )
    parser.add_argument("--buckets", type=positive_int, default=None, help="Suspect index bucket count")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {"verbose": args.verbose}
    if args.threshold is not None:
        overrides["support_threshold"] = args.threshold
    if args.buckets is not None:
        overrides["bucket_count"] = args.buckets
    try:
        settings = GameSettings(**overrides)
    except ValidationError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=logging.DEBUG if settings.verbose else logging.WARNING)

    console = console or Console(max_input=settings.max_input)
    session = GameSession.new(settings)
    try:
        console.play(session)
    finally:
        session.close()

    console.write("\nObrigado por jogar Detective Quest!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
