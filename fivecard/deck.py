from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from .cards import Card, build_cards
from .errors import DeckError, InsufficientCards


class Deck:
    """Ordered stack of cards. The front of the list is the top of the deck.

    Cards only move between a deck and the hands dealt from it, so the deck
    never checks for duplicates on return.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None, seed: Optional[int] = None) -> None:
        self._cards: List[Card] = build_cards() if cards is None else list(cards)
        self._rng = random.Random(seed)

    @classmethod
    def full_shuffled(cls, seed: Optional[int] = None) -> "Deck":
        deck = cls(seed=seed)
        deck.shuffle()
        return deck

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def take(self, n: int) -> List[Card]:
        if n < 0:
            raise DeckError(f"Cannot take a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientCards(f"Not enough cards left in deck: wanted {n}, have {len(self._cards)}")
        taken = self._cards[:n]
        del self._cards[:n]
        return taken

    def return_cards(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)
