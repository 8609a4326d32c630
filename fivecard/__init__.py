"""Five-card poker primitives: cards, decks, hand ranking and a draw-poker table."""

from .cards import Card, RANKS, SUITS, Rank, Suit, cards_to_labels, parse_cards, parse_label
from .deck import Deck
from .errors import (
    BankrollError,
    ConstructionError,
    DeckError,
    HandError,
    InsufficientBankroll,
    InsufficientCards,
    InvalidHandSize,
    InvalidIndex,
    InvalidRank,
    InvalidSuit,
    NegativeBet,
    PokerError,
    TooManyCards,
)
from .evaluator import HAND_ORDER, HandCategory, Outcome, classify
from .game import Game
from .hand import Hand
from .models import GameConfig, Phase, Player

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "Rank",
    "Suit",
    "cards_to_labels",
    "parse_cards",
    "parse_label",
    "Deck",
    "BankrollError",
    "ConstructionError",
    "DeckError",
    "HandError",
    "InsufficientBankroll",
    "InsufficientCards",
    "InvalidHandSize",
    "InvalidIndex",
    "InvalidRank",
    "InvalidSuit",
    "NegativeBet",
    "PokerError",
    "TooManyCards",
    "HAND_ORDER",
    "HandCategory",
    "Outcome",
    "classify",
    "Game",
    "Hand",
    "GameConfig",
    "Phase",
    "Player",
]
