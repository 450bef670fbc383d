"""Two-hand showdown: parse, classify, compare, format.

Usage:
    >>> from poker_hands import evaluate
    >>> evaluate("Black: 2H 4S 4C 3D 4H", "White: 2S 8S AS QS 3S")
    'White wins - Flush'
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from poker_hands.rules import (
    Classification,
    Comparison,
    Hand,
    ParseError,
    classify_hand,
    compare_classifications,
    parse_hand,
)

logger = logging.getLogger(__name__)

TIE_RESULT = "Tie"


@dataclass
class EvaluatorConfig:
    """Evaluation configuration."""

    # Report A-2-3-4-5 straights as five-high instead of six-high
    five_high_wheel: bool = False


@dataclass(frozen=True)
class Showdown:
    """Everything derived while evaluating a pair of hands."""

    hands: Tuple[Hand, Hand]
    classifications: Tuple[Classification, Classification]
    comparison: Comparison

    @property
    def winner(self) -> Optional[Hand]:
        index = self.comparison.winner_index
        return None if index is None else self.hands[index]

    @property
    def result(self) -> str:
        winner = self.winner
        if winner is None:
            return TIE_RESULT
        return f"{winner.name} wins - {self.comparison.reason}"


def classify(hand: Hand, config: Optional[EvaluatorConfig] = None) -> Classification:
    config = config or EvaluatorConfig()
    classification = classify_hand(hand, five_high_wheel=config.five_high_wheel)
    logger.debug(
        "%s classified as %s groups=%s high_card=%s",
        hand,
        classification.rank_name,
        classification.groups,
        classification.high_card.name,
    )
    return classification


def evaluate_hands(
    first: Hand, second: Hand, config: Optional[EvaluatorConfig] = None
) -> Showdown:
    """Classify and compare two parsed hands.

    Args:
        first: First player's hand
        second: Second player's hand
        config: Evaluation options, defaults to EvaluatorConfig()

    Returns:
        Showdown holding both classifications and the comparison
    """
    classifications = (classify(first, config), classify(second, config))
    comparison = compare_classifications(*classifications)
    logger.debug("Comparison outcome %s (%s)", comparison.outcome.name, comparison.reason)
    return Showdown(
        hands=(first, second),
        classifications=classifications,
        comparison=comparison,
    )


def evaluate(line1: str, line2: str, config: Optional[EvaluatorConfig] = None) -> str:
    """Evaluate two hand lines and describe the winner.

    Args:
        line1: First hand, e.g. "Black: 2H 3D 5S 9C KD"
        line2: Second hand, e.g. "White: 2C 3H 4S 8C AH"
        config: Evaluation options

    Returns:
        "Tie" or "<Name> wins - <Reason>"

    Raises:
        ParseError: If either line is malformed
    """
    return evaluate_hands(parse_hand(line1), parse_hand(line2), config).result


def evaluate_showdowns(
    lines: Iterable[str], config: Optional[EvaluatorConfig] = None
) -> List[Showdown]:
    """Evaluate consecutive pairs of non-blank lines into showdowns.

    Raises:
        ParseError: If a line is malformed or a hand is left without an opponent
    """
    hand_lines = [line.strip() for line in lines if line.strip()]
    if len(hand_lines) % 2 != 0:
        raise ParseError(f"Odd number of hand lines ({len(hand_lines)})")

    showdowns = []
    for i in range(0, len(hand_lines), 2):
        first, second = parse_hand(hand_lines[i]), parse_hand(hand_lines[i + 1])
        showdowns.append(evaluate_hands(first, second, config))
    logger.debug("Evaluated %d showdowns", len(showdowns))
    return showdowns


def evaluate_lines(lines: Iterable[str], config: Optional[EvaluatorConfig] = None) -> List[str]:
    """Result strings for consecutive pairs of non-blank lines."""
    return [showdown.result for showdown in evaluate_showdowns(lines, config)]
