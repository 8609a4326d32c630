from __future__ import annotations


class PokerError(ValueError):
    """Base class for rule violations raised by the engine."""


class ConstructionError(PokerError):
    pass


class InvalidSuit(ConstructionError):
    pass


class InvalidRank(ConstructionError):
    pass


class DeckError(PokerError):
    pass


class InsufficientCards(DeckError):
    pass


class HandError(PokerError):
    pass


class TooManyCards(HandError):
    pass


class InvalidIndex(HandError):
    pass


class InvalidHandSize(HandError):
    pass


class BankrollError(PokerError):
    pass


class InsufficientBankroll(BankrollError):
    pass


class NegativeBet(BankrollError):
    pass
