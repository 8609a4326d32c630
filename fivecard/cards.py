from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Sequence, Union

from .errors import ConstructionError, InvalidRank, InvalidSuit


class Suit(str, Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def symbol(self) -> str:
        return RANKS[self.value]

    @property
    def label(self) -> str:
        return _RANK_WORDS[self.value][0]

    @property
    def plural(self) -> str:
        return _RANK_WORDS[self.value][1]


RANKS = "23456789TJQKA"
SUITS = "".join(suit.value for suit in Suit)

_RANK_WORDS = [
    ("deuce", "deuces"),
    ("three", "threes"),
    ("four", "fours"),
    ("five", "fives"),
    ("six", "sixes"),
    ("seven", "sevens"),
    ("eight", "eights"),
    ("nine", "nines"),
    ("ten", "tens"),
    ("jack", "jacks"),
    ("queen", "queens"),
    ("king", "kings"),
    ("ace", "aces"),
]

SuitLike = Union[Suit, str]
RankLike = Union[Rank, str]


def _coerce_suit(value: SuitLike) -> Suit:
    if isinstance(value, Suit):
        return value
    if isinstance(value, str) and value.lower() in SUITS and len(value) == 1:
        return Suit(value.lower())
    raise InvalidSuit(f"Invalid suit: {value!r}")


def _coerce_rank(value: RankLike) -> Rank:
    if isinstance(value, Rank):
        return value
    if isinstance(value, str):
        symbol = "T" if value == "10" else value.upper()
        if len(symbol) == 1 and symbol in RANKS:
            return Rank(RANKS.index(symbol))
    raise InvalidRank(f"Invalid rank: {value!r}")


@dataclass(frozen=True)
class Card:
    """A playing card. Equality needs suit and rank to match, ordering looks at rank only."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", _coerce_suit(self.suit))
        object.__setattr__(self, "rank", _coerce_rank(self.rank))

    def rank_index(self) -> int:
        return int(self.rank)

    @property
    def label(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    def __str__(self) -> str:
        return self.label

    # dataclass(order=True) would fold suit into the comparison, so these are explicit.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank_index() < other.rank_index()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank_index() <= other.rank_index()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank_index() > other.rank_index()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank_index() >= other.rank_index()


def build_cards() -> List[Card]:
    """All 52 cards: suits in Suit order, ranks ascending within each suit."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if not isinstance(label, str) or len(label) not in (2, 3):
        raise ConstructionError(f"Invalid card label: {label!r}")
    return Card(label[-1], label[:-1])


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
