from __future__ import annotations

from collections import Counter
from typing import List, Sequence, Tuple

from .cards import Card
from .deck import Deck
from .errors import InsufficientCards, InvalidHandSize, InvalidIndex, TooManyCards
from .evaluator import Outcome, Score, classify, compare_scores, describe_score

HAND_SIZE = 5
MAX_REPLACE = 3


class Hand:
    """Five cards kept in ascending rank order, plus the deck they came from.

    The deck is only borrowed: replacements are drawn from it and discards go
    back to it, but the surrounding game owns its lifetime.
    """

    def __init__(self, deck: Deck, cards: Sequence[Card]) -> None:
        if len(cards) != HAND_SIZE:
            raise InvalidHandSize(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        self.deck = deck
        self._cards: List[Card] = sorted(cards)

    @classmethod
    def deal(cls, deck: Deck) -> "Hand":
        return cls(deck, deck.take(HAND_SIZE))

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def classify(self) -> Score:
        return classify(self._cards)

    def compare(self, other: "Hand") -> Outcome:
        return compare_scores(self.classify(), other.classify())

    def describe(self) -> str:
        return describe_score(self.classify())

    def replace(self, indices: Sequence[int]) -> List[Card]:
        """Swap the cards at the given 1-based positions for fresh ones off the deck.

        Positions refer to the current sorted hand. Everything is validated
        before the hand or deck is touched. Replacements are drawn first and
        the discards go to the bottom of the deck afterwards, so a discard can
        never come straight back. Returns the discarded cards.
        """
        indices = list(indices)
        if len(indices) > MAX_REPLACE:
            raise TooManyCards(f"Cannot replace more than {MAX_REPLACE} cards, got {len(indices)}")
        for index in indices:
            if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= HAND_SIZE:
                raise InvalidIndex(f"Invalid index {index!r}: expected 1 to {HAND_SIZE}")
        if len(set(indices)) != len(indices):
            raise InvalidIndex(f"Duplicate index in {indices}")
        if len(indices) > self.deck.count():
            raise InsufficientCards(f"Not enough cards left in deck to replace {len(indices)}")

        fresh = self.deck.take(len(indices))
        discarded: List[Card] = []
        for index, card in zip(indices, fresh):
            discarded.append(self._cards[index - 1])
            self._cards[index - 1] = card
        self.deck.return_cards(discarded)
        self._cards.sort()
        return discarded

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return Counter(self._cards) == Counter(other._cards)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return " ".join(card.label for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand({self})"
