from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InsufficientBankroll, NegativeBet
from .hand import Hand


class Phase(str, Enum):
    WAITING = "WAITING"
    DRAW = "DRAW"
    SHOWDOWN = "SHOWDOWN"


@dataclass
class GameConfig:
    starting_bankroll: int = 1_000
    ante: int = 10
    seed: Optional[int] = None


@dataclass
class Player:
    name: str
    bankroll: int
    hand: Optional[Hand] = None
    in_play: bool = True

    def place_bet(self, amount: int) -> int:
        if amount > self.bankroll:
            raise InsufficientBankroll(f"Insufficient bankroll: {self.name} has {self.bankroll}, bet {amount}")
        if amount < 0:
            raise NegativeBet(f"Bet must not be negative: {amount}")
        self.bankroll -= amount
        return amount

    def add_pot(self, amount: int) -> None:
        self.bankroll += amount

    def fold(self) -> None:
        self.in_play = False

    def reset_for_round(self) -> None:
        self.hand = None
        self.in_play = True
