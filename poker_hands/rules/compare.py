"""Comparison of classified hands.

Rules, first applicable decides:
1. Higher category wins; reason is the category name
2. Higher designated high card wins; reason is "High card: <Name>"
3. Higher tie-break groups win; reason is the category name
4. Otherwise the hands tie

Two pair and four of a kind swap rules 2 and 3.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .hands import Classification, HandCategory


class Outcome(IntEnum):
    """Which side a comparison favours."""

    TIE = 0
    FIRST = 1
    SECOND = 2


@dataclass(frozen=True)
class Comparison:
    """Result of comparing two classifications.

    Attributes:
        outcome: The winning side, or TIE
        reason: Human-readable reason, None for a tie
    """

    outcome: Outcome
    reason: Optional[str] = None

    @property
    def winner_index(self) -> Optional[int]:
        """0 for the first hand, 1 for the second, None for a tie."""
        if self.outcome == Outcome.TIE:
            return None
        return int(self.outcome) - 1


TIE = Comparison(Outcome.TIE)

# Kicker is a bare single card here; the repeated groups decide first
GROUPS_BEFORE_KICKER = frozenset({HandCategory.TWO_PAIR, HandCategory.FOUR_OF_A_KIND})


def compare_classifications(first: Classification, second: Classification) -> Comparison:
    """Decide which of two classified hands wins.

    Args:
        first: Classification of the first hand
        second: Classification of the second hand

    Returns:
        Comparison naming the winner and the reason
    """
    if first.category != second.category:
        if first.category > second.category:
            return Comparison(Outcome.FIRST, first.rank_name)
        return Comparison(Outcome.SECOND, second.rank_name)

    if first.category in GROUPS_BEFORE_KICKER:
        return _compare_groups(first, second) or _compare_high_card(first, second) or TIE
    return _compare_high_card(first, second) or _compare_groups(first, second) or TIE


def _compare_high_card(first: Classification, second: Classification) -> Optional[Comparison]:
    if first.high_card.rank == second.high_card.rank:
        return None
    if first.high_card.rank > second.high_card.rank:
        return Comparison(Outcome.FIRST, f"High card: {first.high_card.name}")
    return Comparison(Outcome.SECOND, f"High card: {second.high_card.name}")


def _compare_groups(first: Classification, second: Classification) -> Optional[Comparison]:
    if first.groups == second.groups:
        return None
    if first.groups > second.groups:
        return Comparison(Outcome.FIRST, first.rank_name)
    return Comparison(Outcome.SECOND, second.rank_name)


def compare_hands(first: Classification, second: Classification) -> int:
    """Compare two classifications.

    Returns:
        Positive if first wins
        Negative if second wins
        Zero on a tie
    """
    outcome = compare_classifications(first, second).outcome
    if outcome == Outcome.FIRST:
        return 1
    if outcome == Outcome.SECOND:
        return -1
    return 0
