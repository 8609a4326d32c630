"""Simulate five-card draw rounds between baseline players.

Example:
    python -m fivecard --players Alice Bob Carol --rounds 20 --seed 7
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .game import MAX_PLAYERS, Game
from .models import GameConfig
from .strategy import choose_discards

LOGGER = logging.getLogger("fivecard")


def play_round(game: Game) -> List[dict]:
    """Deal, let every player draw with the baseline strategy, then show down."""
    events = game.start_round()
    for player in game.active_players():
        assert player.hand is not None
        indices = choose_discards(player.hand)
        events.append(game.draw(player, indices))
        game.next_turn()
    events.extend(game.showdown())
    return events


def run(game: Game, rounds: int) -> int:
    played = 0
    for _ in range(rounds):
        if game.is_match_over():
            break
        for event in play_round(game):
            if event["ev"] == "SHOWDOWN":
                LOGGER.info("%s: %s (%s)", event["player"], " ".join(event["hand"]), event["description"])
        played += 1
    return played


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Five-card draw poker simulator")
    parser.add_argument("--players", nargs="+", default=["Alice", "Bob"])
    parser.add_argument("--rounds", type=int, default=10)
    parser.add_argument("--starting-bankroll", type=int, default=1_000)
    parser.add_argument("--ante", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible deals")
    parser.add_argument("--verbose", action="store_true", help="Log every draw and fold")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if len(args.players) < 2:
        parser.error("at least two players are required")
    if len(args.players) > MAX_PLAYERS:
        parser.error(f"at most {MAX_PLAYERS} players fit at one table")

    config = GameConfig(starting_bankroll=args.starting_bankroll, ante=args.ante, seed=args.seed)
    game = Game.with_names(config, args.players)
    played = run(game, args.rounds)

    LOGGER.info("Played %s rounds", played)
    for entry in game.standings():
        LOGGER.info("%s: %s", entry["player"], entry["bankroll"])


if __name__ == "__main__":
    main()
