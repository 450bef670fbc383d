#!/usr/bin/env python
"""Command line showdown between two five-card poker hands.

Each hand is written as "<Name>: <c1> <c2> <c3> <c4> <c5>" where a card
is a rank (2-9, T or 10, J, Q, K, A) followed by a suit letter (C, D, H, S).

Usage:
    python -m poker_hands.scripts.evaluate "Black: 2H 3D 5S 9C KD" "White: 2C 3H 4S 8C AH"
    python -m poker_hands.scripts.evaluate --file showdowns.txt
    cat showdowns.txt | python -m poker_hands.scripts.evaluate --file -
    python -m poker_hands.scripts.evaluate --help
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from poker_hands.evaluator import EvaluatorConfig, Showdown, evaluate_hands, evaluate_showdowns
from poker_hands.rules import ParseError, parse_hand

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poker-hands",
        description="Decide the winner between two five-card poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  poker-hands "Black: 2H 4S 4C 3D 4H" "White: 2S 8S AS QS 3S"
  poker-hands --verbose "Black: 3H 3D 5S 5C KD" "White: 2D 2H 5C 5S KH"
  poker-hands --file showdowns.txt
        """,
    )

    parser.add_argument(
        "hands",
        nargs="*",
        metavar="HAND",
        help='Two hand lines, each quoted, e.g. "Black: 2H 3D 5S 9C KD"',
    )

    parser.add_argument(
        "--file",
        "-f",
        type=str,
        default=None,
        help="File of hand lines, evaluated in consecutive pairs ('-' reads stdin)",
    )

    parser.add_argument(
        "--five-high-wheel",
        action="store_true",
        help="Report A-2-3-4-5 straights as five-high (default: six-high)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show how each hand was classified"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def read_lines(path: str) -> List[str]:
    if path == "-":
        return sys.stdin.read().splitlines()
    return Path(path).read_text(encoding="utf-8").splitlines()


def showdown_table(showdown: Showdown) -> Table:
    """Render both classifications of a showdown as a table."""
    table = Table()
    table.add_column("Player")
    table.add_column("Cards")
    table.add_column("Category")
    table.add_column("Groups", justify="right")
    table.add_column("High card", justify="right")

    for hand, classification in zip(showdown.hands, showdown.classifications):
        table.add_row(
            hand.name,
            " ".join(str(card) for card in hand.cards),
            classification.rank_name,
            ", ".join(str(rank) for rank in classification.groups) or "-",
            classification.high_card.name,
        )
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is None and len(args.hands) != 2:
        parser.error("expected exactly two hands, or --file")
    if args.file is not None and args.hands:
        parser.error("hands and --file cannot be combined")

    console = Console(soft_wrap=True)
    err_console = Console(stderr=True, soft_wrap=True)
    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )

    config = EvaluatorConfig(five_high_wheel=args.five_high_wheel)

    try:
        if args.file is not None:
            showdowns = evaluate_showdowns(read_lines(args.file), config)
        else:
            first, second = (parse_hand(line.strip()) for line in args.hands)
            showdowns = [evaluate_hands(first, second, config)]
    except (ParseError, OSError) as e:
        logger.debug("Evaluation failed", exc_info=True)
        err_console.print(f"Error: {e}", markup=False, highlight=False)
        return 1

    for showdown in showdowns:
        console.print(showdown.result, markup=False, highlight=False)
        if args.verbose:
            console.print(showdown_table(showdown))
    return 0


if __name__ == "__main__":
    sys.exit(main())
