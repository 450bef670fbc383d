"""Card rank definitions and the card parser.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit tables
- Card representation and parsing
- Display names for ranks
- Counting and ordering utilities
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List

MIN_RANK = 2
MAX_RANK = 14

# Suits are unordered for scoring and stored verbatim.
SUITS = ("C", "D", "H", "S")

# Face symbols accepted in card tokens
RANK_SYMBOLS = {
    "A": 14,
    "K": 13,
    "Q": 12,
    "J": 11,
    "T": 10,
}

# Display names for ranks above ten
RANK_NAMES = {
    11: "Jack",
    12: "Queen",
    13: "King",
    14: "Ace",
}

# Rank to token symbol, for rendering cards back to text
SYMBOL_FOR_RANK = {v: k for k, v in RANK_SYMBOLS.items()}


class ParseError(ValueError):
    """Raised when a card token or hand line is malformed."""

    pass


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Immutable and hashable. Rank is 2-14 (14 = Ace); the suit is the
    single character that closed the input token.
    """

    rank: int
    suit: str

    def __str__(self) -> str:
        return f"{SYMBOL_FOR_RANK.get(self.rank, str(self.rank))}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like 'AH', 'TD' or '10S'.

        Args:
            s: Card token in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ParseError: If the rank portion cannot be parsed
        """
        if len(s) < 2:
            raise ParseError(f"Invalid card: {s!r}")
        return cls(rank=get_number(s), suit=s[-1])


def get_number(token: str) -> int:
    """Return the rank encoded in a card token, ignoring the suit.

    >>> get_number("2H")
    2
    >>> get_number("TD")
    10
    """
    symbol = token[:-1]
    if symbol in RANK_SYMBOLS:
        return RANK_SYMBOLS[symbol]
    if not symbol.isdecimal():
        raise ParseError(f"Invalid rank {symbol!r} in card {token!r}")
    rank = int(symbol)
    if not MIN_RANK <= rank <= MAX_RANK:
        raise ParseError(f"Rank out of range in card {token!r}")
    return rank


def parse_card(token: str) -> Card:
    """Parse a single card token. See Card.from_string."""
    return Card.from_string(token)


def rank_name(rank: int) -> str:
    """Display name of a rank: Jack, Queen, King, Ace or the numeral."""
    return RANK_NAMES.get(rank, str(rank))


def are_consecutive(ranks: List[int]) -> bool:
    """Check if a sorted list of ranks increases by exactly one each step.

    Args:
        ranks: List of ranks, sorted ascending

    Returns:
        True if all ranks are consecutive
    """
    for i in range(1, len(ranks)):
        if ranks[i] - ranks[i - 1] != 1:
            return False
    return True


def get_rank_counts(cards: Iterable[Card]) -> Dict[int, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping rank to count, in order of first appearance
    """
    counts: Dict[int, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank ascending. Equal ranks keep their input order."""
    return sorted(cards, key=lambda card: card.rank)
