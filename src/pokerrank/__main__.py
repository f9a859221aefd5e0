"""CLI entry point: python -m pokerrank [showdown.yaml] [--hand NAME=CARDS ...]"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from pokerrank.config import ShowdownConfig, build_hands, load_config
from pokerrank.errors import PokerRankError
from pokerrank.results import RankedHand, ResultsWriter, rank_showdown

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_hand_arg(value: str) -> tuple[str, str]:
    name, sep, cards = value.partition("=")
    if not sep or not name.strip() or not cards.strip():
        raise argparse.ArgumentTypeError(
            f"expected NAME=CARDS (e.g. alice='AS KS QS JS TS'), got {value!r}"
        )
    return name.strip(), cards


def _print_results(name: str, ranked: list[RankedHand]) -> None:
    print("=" * 60)
    print(f"SHOWDOWN: {name}")
    print("=" * 60)
    print()
    for entry in ranked:
        cards = " ".join(entry.cards)
        print(f"  {entry.position:>2}. {entry.name:20s} {cards:16s} {entry.category}")
    print()

    winners = [r.name for r in ranked if r.position == 1]
    if len(winners) > 1:
        print(f"Split pot: {', '.join(winners)}")
    else:
        print(f"Winner: {winners[0]}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="pokerrank",
        description="Rank 5-card poker hands, strongest first",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help="Path to showdown YAML file",
    )
    parser.add_argument(
        "--hand",
        dest="hands",
        action="append",
        type=_parse_hand_arg,
        default=[],
        metavar="NAME=CARDS",
        help="Add a hand, e.g. --hand alice='AS KS QS JS TS' (repeatable)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Directory for JSONL results (default: from config, else none)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=os.environ.get("POKERRANK_LOG_LEVEL", "WARNING").upper(),
        help="Logging level (default: $POKERRANK_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)
    if args.log_level not in _LOG_LEVELS:
        parser.error(
            f"unknown log level {args.log_level!r} "
            f"(choose from {', '.join(_LOG_LEVELS)})"
        )

    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config is None and not args.hands:
        parser.error("give a showdown file or at least one --hand")

    if args.config is not None and not args.config.exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        if args.config is not None:
            config = load_config(args.config)
        else:
            config = ShowdownConfig(name="cli")
        if args.hands:
            config.hands.update(build_hands(
                dict(args.hands), reject_duplicates=config.reject_duplicates
            ))
        ranked = rank_showdown(config.hands)
    except PokerRankError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        config.output_dir = args.output

    _print_results(config.name, ranked)

    if config.output_dir is not None:
        try:
            writer = ResultsWriter(config.output_dir, config.name)
        except PokerRankError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        path = writer.write_all(ranked)
        print(f"Results: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
