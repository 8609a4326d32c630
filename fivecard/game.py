from __future__ import annotations

import logging
import random
import time
from typing import Dict, List, Optional, Sequence

from .cards import RANKS, SUITS, Card, cards_to_labels
from .deck import Deck
from .evaluator import Outcome
from .hand import HAND_SIZE, Hand
from .models import GameConfig, Phase, Player

LOGGER = logging.getLogger("fivecard.game")

# Every seat needs a full hand from one deck.
MAX_PLAYERS = len(RANKS) * len(SUITS) // HAND_SIZE

# Game keeps all round state in memory: the deck, the pot and whose turn it
# is. Hand ranking lives in the evaluator; this is chip accounting only.


class Game:
    """Five-card draw for a single table with one pot per round."""

    def __init__(self, config: GameConfig, players: Sequence[Player]) -> None:
        if len(players) > MAX_PLAYERS:
            raise RuntimeError(f"Table is full: at most {MAX_PLAYERS} players")
        self.config = config
        self.players: List[Player] = list(players)
        self.pot = 0
        self.phase = Phase.WAITING
        self.round_counter = 0
        if config.seed is None:
            config_seed = int(time.time() * 1000) & 0xFFFFFFFF
        else:
            config_seed = config.seed
        self._rng = random.Random(config_seed)
        self.deck = Deck.full_shuffled(config_seed)
        self.turn: Optional[Player] = self.players[0] if self.players else None

    @classmethod
    def with_names(cls, config: GameConfig, names: Sequence[str]) -> "Game":
        players = [Player(name=name, bankroll=config.starting_bankroll) for name in names]
        return cls(config, players)

    # Round lifecycle -------------------------------------------------

    def funded_players(self) -> List[Player]:
        return [player for player in self.players if player.bankroll > 0]

    def can_start_round(self) -> bool:
        return len(self.funded_players()) >= 2

    def start_round(self, seed: Optional[int] = None) -> List[Dict[str, object]]:
        if not self.can_start_round():
            raise RuntimeError("Not enough funded players to start a round")
        if self.pot:
            raise RuntimeError("Previous round still has chips in the pot")

        if seed is None:
            seed = self._rng.getrandbits(32)
        self.deck = Deck.full_shuffled(seed)
        self.round_counter += 1

        seated = self.funded_players()
        for player in self.players:
            player.reset_for_round()
            player.in_play = player.bankroll > 0

        self._deal_hands(seated)
        self.phase = Phase.DRAW
        events: List[Dict[str, object]] = [{"ev": "ROUND_START", "round": self.round_counter, "seed": seed}]
        events.extend(self._collect_antes(seated))
        self.turn = seated[0]
        LOGGER.info("Round %s started with %s players (seed=%s)", self.round_counter, len(seated), seed)
        return events

    def _deal_hands(self, seated: List[Player]) -> None:
        # One card at a time around the table, like a live deal.
        dealt: List[List[Card]] = [[] for _ in seated]
        for _ in range(HAND_SIZE):
            for cards in dealt:
                cards.extend(self.deck.take(1))
        for player, cards in zip(seated, dealt):
            player.hand = Hand(self.deck, cards)

    def _collect_antes(self, seated: List[Player]) -> List[Dict[str, object]]:
        events: List[Dict[str, object]] = []
        for player in seated:
            amount = min(self.config.ante, player.bankroll)
            self.take_bet(player, amount)
            events.append({"ev": "ANTE", "player": player.name, "amount": amount})
        return events

    # Actions ---------------------------------------------------------

    def take_bet(self, player: Player, amount: int) -> int:
        if self.phase != Phase.DRAW:
            raise RuntimeError("Round not in progress")
        if not player.in_play:
            raise RuntimeError(f"{player.name} is not in play")
        self.pot += player.place_bet(amount)
        return amount

    def fold(self, player: Player) -> Dict[str, object]:
        if self.phase != Phase.DRAW:
            raise RuntimeError("Round not in progress")
        active = self.active_players()
        if not any(candidate is player for candidate in active):
            raise RuntimeError(f"{player.name} is not in play")
        if len(active) == 1:
            raise RuntimeError("Cannot fold the last player in the round")
        player.fold()
        if self.turn is player:
            self.next_turn()
        LOGGER.debug("%s folds", player.name)
        return {"ev": "FOLD", "player": player.name}

    def draw(self, player: Player, indices: Sequence[int]) -> Dict[str, object]:
        if self.phase != Phase.DRAW:
            raise RuntimeError("Round not in draw phase")
        if not player.in_play or player.hand is None:
            raise RuntimeError(f"{player.name} is not in play")
        discarded = player.hand.replace(indices)
        LOGGER.debug("%s draws %s", player.name, len(discarded))
        return {"ev": "DRAW", "player": player.name, "count": len(discarded)}

    def next_turn(self) -> Optional[Player]:
        active = self.active_players()
        if not active:
            self.turn = None
            return None
        seats = [idx for idx, player in enumerate(self.players) if player is self.turn]
        if not seats:
            self.turn = active[0]
            return self.turn
        start = seats[0]
        for offset in range(1, len(self.players) + 1):
            candidate = self.players[(start + offset) % len(self.players)]
            if candidate.in_play:
                self.turn = candidate
                return candidate
        return self.turn

    def active_players(self) -> List[Player]:
        return [player for player in self.players if player.in_play and player.hand is not None]

    # Showdown --------------------------------------------------------

    def showdown(self) -> List[Dict[str, object]]:
        if self.phase != Phase.DRAW:
            raise RuntimeError("Round not in progress")
        events: List[Dict[str, object]] = []
        contenders = self.active_players()
        if not contenders:
            raise RuntimeError("No players left in the round")

        if len(contenders) == 1:
            winners = contenders
        else:
            for player in contenders:
                assert player.hand is not None
                events.append(
                    {
                        "ev": "SHOWDOWN",
                        "player": player.name,
                        "hand": cards_to_labels(player.hand.cards),
                        "rank": player.hand.classify()[0].value,
                        "description": player.hand.describe(),
                    }
                )
            winners = self._best_hands(contenders)

        share, remainder = divmod(self.pot, len(winners))
        for idx, player in enumerate(winners):
            payout = share + (1 if idx < remainder else 0)
            player.add_pot(payout)
            events.append({"ev": "POT_AWARD", "player": player.name, "amount": payout})
            LOGGER.info("%s wins %s", player.name, payout)
        self.pot = 0
        self.phase = Phase.SHOWDOWN

        # Players who busted earlier were never dealt in, so they have no hand.
        for player in self.players:
            if player.hand is not None and player.bankroll == 0:
                events.append({"ev": "ELIMINATED", "player": player.name})
        return events

    def _best_hands(self, contenders: List[Player]) -> List[Player]:
        best: List[Player] = [contenders[0]]
        for player in contenders[1:]:
            assert player.hand is not None and best[0].hand is not None
            outcome = player.hand.compare(best[0].hand)
            if outcome == Outcome.WIN:
                best = [player]
            elif outcome == Outcome.DRAW:
                best.append(player)
        return best

    def is_match_over(self) -> bool:
        return len(self.funded_players()) <= 1

    def standings(self) -> List[Dict[str, object]]:
        return [{"player": player.name, "bankroll": player.bankroll} for player in self.players]
