from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence, Tuple

from .cards import Card, Rank


class HandCategory(str, Enum):
    ROYAL_FLUSH = "royal_flush"
    STRAIGHT_FLUSH = "straight_flush"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three_of_a_kind"
    TWO_PAIR = "two_pair"
    ONE_PAIR = "one_pair"
    HIGH_CARD = "high_card"


# Strongest first. Hand strength is compared by index into this list.
HAND_ORDER: List[HandCategory] = [
    HandCategory.ROYAL_FLUSH,
    HandCategory.STRAIGHT_FLUSH,
    HandCategory.FOUR_OF_A_KIND,
    HandCategory.FULL_HOUSE,
    HandCategory.FLUSH,
    HandCategory.STRAIGHT,
    HandCategory.THREE_OF_A_KIND,
    HandCategory.TWO_PAIR,
    HandCategory.ONE_PAIR,
    HandCategory.HIGH_CARD,
]


class Outcome(str, Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


Score = Tuple[HandCategory, Rank]


def is_straight(cards: Sequence[Card]) -> bool:
    """Every neighbour in rank order is exactly one rank apart.

    The ace always ranks high, so A-2-3-4-5 does not count.
    """
    ordered = sorted(cards)
    return all(
        ordered[idx + 1].rank_index() - ordered[idx].rank_index() == 1 for idx in range(len(ordered) - 1)
    )


def is_flush(cards: Sequence[Card]) -> bool:
    ordered = sorted(cards)
    return all(card.suit == ordered[0].suit for card in ordered)


def rank_group_counts(cards: Sequence[Card]) -> Dict[Rank, int]:
    """Count cards per rank, keyed in ascending rank order."""
    counts: Dict[Rank, int] = {}
    for card in sorted(cards):
        counts.setdefault(card.rank, 0)
        counts[card.rank] += 1
    return counts


def group_sizes(cards: Sequence[Card]) -> List[int]:
    return sorted(rank_group_counts(cards).values())


def _largest_group_rank(counts: Dict[Rank, int]) -> Rank:
    # Equal-size groups resolve to the higher rank.
    ordered = sorted(counts.items(), key=lambda item: (item[1], item[0]))
    return ordered[-1][0]


def _two_pair_high(counts: Dict[Rank, int]) -> Rank:
    return max(rank for rank, count in counts.items() if count == 2)


def classify(cards: Sequence[Card]) -> Score:
    """Return ``(category, tiebreak_rank)`` for a five-card hand.

    Categories are checked strongest first and the first match wins.
    """
    ordered = sorted(cards)
    high = ordered[-1].rank
    flush = is_flush(ordered)
    straight = is_straight(ordered)
    counts = rank_group_counts(ordered)
    sizes = sorted(counts.values())

    if flush and straight and high == Rank.ACE:
        return HandCategory.ROYAL_FLUSH, Rank.ACE
    if flush and straight:
        return HandCategory.STRAIGHT_FLUSH, high
    if sizes[-1] == 4:
        return HandCategory.FOUR_OF_A_KIND, _largest_group_rank(counts)
    if sizes == [2, 3]:
        return HandCategory.FULL_HOUSE, _largest_group_rank(counts)
    if flush:
        return HandCategory.FLUSH, high
    if straight:
        return HandCategory.STRAIGHT, high
    if sizes[-1] == 3:
        return HandCategory.THREE_OF_A_KIND, _largest_group_rank(counts)
    if sizes == [1, 2, 2]:
        return HandCategory.TWO_PAIR, _two_pair_high(counts)
    if sizes == [1, 1, 1, 2]:
        return HandCategory.ONE_PAIR, _largest_group_rank(counts)
    return HandCategory.HIGH_CARD, high


def compare_scores(score: Score, other: Score) -> Outcome:
    """Decide ``score`` against ``other``: category first, tiebreak rank second."""
    category, tiebreak = score
    other_category, other_tiebreak = other
    position = HAND_ORDER.index(category)
    other_position = HAND_ORDER.index(other_category)
    if position != other_position:
        return Outcome.WIN if position < other_position else Outcome.LOSE
    if tiebreak != other_tiebreak:
        return Outcome.WIN if tiebreak > other_tiebreak else Outcome.LOSE
    return Outcome.DRAW


def describe_score(score: Score) -> str:
    category, rank = score
    if category == HandCategory.ROYAL_FLUSH:
        return "royal flush"
    if category == HandCategory.STRAIGHT_FLUSH:
        return f"straight flush, {rank.label} high"
    if category == HandCategory.FOUR_OF_A_KIND:
        return f"four of a kind, {rank.plural}"
    if category == HandCategory.FULL_HOUSE:
        return f"full house, {rank.plural} full"
    if category == HandCategory.FLUSH:
        return f"flush, {rank.label} high"
    if category == HandCategory.STRAIGHT:
        return f"straight, {rank.label} high"
    if category == HandCategory.THREE_OF_A_KIND:
        return f"three of a kind, {rank.plural}"
    if category == HandCategory.TWO_PAIR:
        return f"two pair, {rank.plural} up"
    if category == HandCategory.ONE_PAIR:
        return f"pair of {rank.plural}"
    return f"{rank.label} high"
