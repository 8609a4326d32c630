from __future__ import annotations

from typing import Optional, Sequence

from fivecard.cards import parse_cards
from fivecard.deck import Deck
from fivecard.game import Game
from fivecard.hand import Hand
from fivecard.models import GameConfig


def stacked_deck(labels: Sequence[str]) -> Deck:
    """Deck holding exactly the given cards, first label on top."""
    return Deck(parse_cards(labels))


def make_hand(labels: Sequence[str], deck: Optional[Deck] = None) -> Hand:
    return Hand(deck if deck is not None else Deck([]), parse_cards(labels))


def create_game(
    *,
    names: Sequence[str] = ("Alpha", "Beta"),
    starting_bankroll: int = 1_000,
    ante: int = 10,
    seed: int = 42,
) -> Game:
    """Instantiate a game with a populated table."""
    config = GameConfig(starting_bankroll=starting_bankroll, ante=ante, seed=seed)
    return Game.with_names(config, names)


def give_hand(game: Game, name: str, labels: Sequence[str]) -> None:
    """Overwrite a player's dealt hand with a scripted one."""
    player = next(p for p in game.players if p.name == name)
    player.hand = Hand(game.deck, parse_cards(labels))
