"""Hand parsing and classification.

Hand categories, weakest to strongest:
- High card: five distinct ranks, no straight, no flush
- One pair: two cards of the same rank
- Two pair: two different pairs
- Three of a kind: three cards of the same rank
- Straight: five consecutive ranks (A-2-3-4-5 counts, Ace playing low)
- Flush: five cards of the same suit
- Full house: three of a kind plus a pair
- Four of a kind: four cards of the same rank
- Straight flush: straight and flush at once

Each classification carries the tie-break groups (ranks of the repeated
cards that make the category) and a designated high card used as the
kicker.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union

from .ranks import (
    Card,
    ParseError,
    are_consecutive,
    get_rank_counts,
    parse_card,
    rank_name,
    sort_cards,
)

HAND_SIZE = 5

# Ace plays low in this one run only
WHEEL_RANKS = [2, 3, 4, 5, 14]


class HandCategory(IntEnum):
    """Poker hand categories ordered by strength."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        """Display name used in results."""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High card",
    HandCategory.ONE_PAIR: "One pair",
    HandCategory.TWO_PAIR: "Two pair",
    HandCategory.THREE_OF_A_KIND: "Three of a kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full house",
    HandCategory.FOUR_OF_A_KIND: "Four of a kind",
    HandCategory.STRAIGHT_FLUSH: "Straight flush",
}


class HighCard(NamedTuple):
    """A kicker rank together with its display name."""

    rank: int
    name: str


@dataclass(frozen=True)
class Hand:
    """A player's five cards.

    Attributes:
        name: Player label taken from the input line
        cards: Cards sorted ascending by rank
    """

    name: str
    cards: Tuple[Card, ...]

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.name}: {cards_str}"

    @property
    def ranks(self) -> List[int]:
        return [card.rank for card in self.cards]


@dataclass(frozen=True)
class Classification:
    """The result of classifying a hand.

    Attributes:
        category: The hand category
        groups: Ranks of the repeated-card groups forming the category
            (the top rank for straights and flushes, empty for high card)
        high_card: The designated kicker
    """

    category: HandCategory
    groups: Tuple[int, ...]
    high_card: HighCard

    @property
    def rank_value(self) -> int:
        return int(self.category)

    @property
    def rank_name(self) -> str:
        return self.category.label


class ClassificationError(RuntimeError):
    """Raised when cards reach the classifier in an impossible shape."""

    pass


def parse_cards(text: str) -> Tuple[Card, ...]:
    """Parse space-separated card tokens and sort them by rank.

    Args:
        text: Tokens like "2H 3D 5S 9C KD"

    Returns:
        Tuple of cards sorted ascending by rank (stable for equal ranks)

    Raises:
        ParseError: If any token is malformed
    """
    return tuple(sort_cards(parse_card(token) for token in text.split(" ")))


def parse_hand(line: str) -> Hand:
    """Parse an input line like "Black: 2H 4S 4C 3D 4H" into a Hand.

    Every colon is removed from the name token, not only a trailing one.

    Raises:
        ParseError: If the line does not hold exactly five cards or a
            card token is malformed
    """
    name, *tokens = line.split(" ")
    if len(tokens) != HAND_SIZE:
        raise ParseError(f"Expected {HAND_SIZE} cards, got {len(tokens)}: {line!r}")
    cards = sort_cards(parse_card(token) for token in tokens)
    return Hand(name=name.replace(":", ""), cards=tuple(cards))


def is_flush(cards: Sequence[Card]) -> bool:
    """Check whether all cards share one suit."""
    return len({card.suit for card in cards}) == 1


def is_straight(cards: Sequence[Card]) -> bool:
    """Check whether rank-sorted cards form a run of consecutive ranks.

    A-2-3-4-5 is the only run in which the Ace plays low.
    """
    ranks = [card.rank for card in cards]
    if len(ranks) != HAND_SIZE:
        return False
    return are_consecutive(ranks) or ranks == WHEEL_RANKS


def high_card(ranks: Iterable[int]) -> HighCard:
    """Return the highest of the given ranks with its display name."""
    top = max(ranks)
    return HighCard(top, rank_name(top))


def _straight_high_card(ranks: List[int], five_high_wheel: bool) -> HighCard:
    if ranks == WHEEL_RANKS:
        return high_card([5 if five_high_wheel else 6])
    return high_card(ranks)


def classify_hand(
    hand: Union[Hand, Sequence[Card]], five_high_wheel: bool = False
) -> Classification:
    """Classify five cards into a category with tie-break data.

    Args:
        hand: A Hand, or five cards
        five_high_wheel: Report A-2-3-4-5 straights as five-high. When
            False the wheel reports a high card of six.

    Returns:
        Classification for the hand

    Raises:
        ClassificationError: If the input does not hold five cards
    """
    cards = sort_cards(hand.cards if isinstance(hand, Hand) else hand)
    if len(cards) != HAND_SIZE:
        raise ClassificationError(f"Expected {HAND_SIZE} cards, got {len(cards)}")

    ranks = [card.rank for card in cards]
    straight = is_straight(cards)
    flush = is_flush(cards)

    if straight:
        top = _straight_high_card(ranks, five_high_wheel)
        category = HandCategory.STRAIGHT_FLUSH if flush else HandCategory.STRAIGHT
        return Classification(category=category, groups=(top.rank,), high_card=top)

    if flush:
        top = high_card(ranks)
        return Classification(category=HandCategory.FLUSH, groups=(top.rank,), high_card=top)

    return _classify_groups(cards)


def _classify_groups(cards: List[Card]) -> Classification:
    """Classify by the multiset of same-rank group sizes."""
    # (rank, count) pairs ordered by count, then rank
    pattern = sorted(get_rank_counts(cards).items(), key=lambda item: (item[1], item[0]))
    sizes = tuple(count for _, count in pattern)
    singles = [rank for rank, count in pattern if count == 1]
    ranks = [card.rank for card in cards]

    if sizes == (1, 1, 1, 1, 1):
        return Classification(HandCategory.HIGH_CARD, (), high_card(ranks))

    if sizes == (1, 1, 1, 2):
        pair = pattern[-1][0]
        return Classification(HandCategory.ONE_PAIR, (pair,), high_card(singles))

    if sizes == (1, 2, 2):
        low_pair, high_pair = pattern[1][0], pattern[2][0]
        return Classification(HandCategory.TWO_PAIR, (high_pair, low_pair), high_card(singles))

    if sizes == (1, 1, 3):
        triple = pattern[-1][0]
        return Classification(HandCategory.THREE_OF_A_KIND, (triple,), high_card(singles))

    if sizes == (2, 3):
        pair, triple = pattern[0][0], pattern[1][0]
        return Classification(HandCategory.FULL_HOUSE, (pair, triple), high_card(ranks))

    if sizes == (1, 4):
        quad = pattern[-1][0]
        return Classification(HandCategory.FOUR_OF_A_KIND, (quad,), high_card(singles))

    raise ClassificationError(f"Unrecognized rank pattern {sizes} in {cards}")
