"""Poker rules implementations.

This module provides:
- Card and rank definitions, the card parser (ranks.py)
- Hand parsing and classification (hands.py)
- Comparison of classified hands (compare.py)
"""

from .ranks import (
    Card,
    ParseError,
    SUITS,
    RANK_SYMBOLS,
    RANK_NAMES,
    MIN_RANK,
    MAX_RANK,
    parse_card,
    get_number,
    rank_name,
    are_consecutive,
    get_rank_counts,
    sort_cards,
)

from .hands import (
    HAND_SIZE,
    HandCategory,
    HighCard,
    Hand,
    Classification,
    ClassificationError,
    parse_cards,
    parse_hand,
    is_flush,
    is_straight,
    high_card,
    classify_hand,
)

from .compare import (
    Outcome,
    Comparison,
    compare_classifications,
    compare_hands,
)

__all__ = [
    # Ranks
    "Card",
    "ParseError",
    "SUITS",
    "RANK_SYMBOLS",
    "RANK_NAMES",
    "MIN_RANK",
    "MAX_RANK",
    "parse_card",
    "get_number",
    "rank_name",
    "are_consecutive",
    "get_rank_counts",
    "sort_cards",
    # Hands
    "HAND_SIZE",
    "HandCategory",
    "HighCard",
    "Hand",
    "Classification",
    "ClassificationError",
    "parse_cards",
    "parse_hand",
    "is_flush",
    "is_straight",
    "high_card",
    "classify_hand",
    # Comparison
    "Outcome",
    "Comparison",
    "compare_classifications",
    "compare_hands",
]
