from __future__ import annotations

from typing import List

from .evaluator import HandCategory, rank_group_counts
from .hand import MAX_REPLACE, Hand

# Made hands that already use all five cards; drawing can only hurt them.
_PAT_HANDS = {
    HandCategory.ROYAL_FLUSH,
    HandCategory.STRAIGHT_FLUSH,
    HandCategory.FOUR_OF_A_KIND,
    HandCategory.FULL_HOUSE,
    HandCategory.FLUSH,
    HandCategory.STRAIGHT,
}


def choose_discards(hand: Hand) -> List[int]:
    """Baseline draw: keep every paired rank and dump the lowest loose cards.

    Returns 1-based positions into the sorted hand, at most three of them.
    """
    category, _ = hand.classify()
    if category in _PAT_HANDS:
        return []

    counts = rank_group_counts(hand.cards)
    loose = [idx for idx, card in enumerate(hand.cards, start=1) if counts[card.rank] == 1]
    if category == HandCategory.HIGH_CARD:
        # Hold the top card as a kicker and draw to it.
        loose = loose[:-1]
    return loose[:MAX_REPLACE]
