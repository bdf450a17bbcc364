"""Command line interface for emitting key/value log lines from a shell."""

from __future__ import annotations

import argparse
from typing import List, Tuple

from kvlog.builder import LogEntryBuilder
from kvlog.core.logging import configure_logging
from kvlog.models.levels import Level

LEVEL_CHOICES = [level.value for level in Level]


def parse_pair(text: str) -> Tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kvlog", description="Key/value structured logger")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    emit = subparsers.add_parser("emit", help="Emit one key/value log line to stderr")
    emit.add_argument(
        "--level",
        "-l",
        type=str.upper,
        choices=LEVEL_CHOICES,
        default=Level.INFO.value,
        help="Level to emit at",
    )
    emit.add_argument("--category", "-c", default="kvlog.cli", help="Category tag for the record")
    emit.add_argument("pairs", nargs="*", type=parse_pair, metavar="KEY=VALUE", help="Fields, in order")
    return parser


def build_entry(category: str, pairs: List[Tuple[str, str]]) -> LogEntryBuilder:
    builder = LogEntryBuilder.create(category)
    for key, value in pairs:
        builder = builder.add(key, value)
    return builder


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    # Let the threshold follow the requested level so the line is always shown.
    configure_logging(args.level)
    if args.command == "emit":
        build_entry(args.category, args.pairs).emit(args.level)
