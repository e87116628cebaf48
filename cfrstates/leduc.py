"""Two-player Leduc poker."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from .actions import Action, ActionType
from .base import GameState, History
from .cards import (
    COMMUNITY_CARD_AMOUNT,
    MAX_PLAYERS,
    NO_CARD_PLACEHOLDER,
    PRIVATE_CARD_AMOUNT,
    ROUNDS,
    card_from_string,
    card_rank,
    card_to_string,
)

DECK = tuple(card_from_string(name) for name in ("Kh", "Kd", "Qh", "Qd", "Jh", "Jd"))

PRE_FLOP_INDEX = 0
POST_FLOP_INDEX = 1
ANTE = 1
ROUND_BET_SIZES = (2, 4)
MAX_BETS_PER_ROUND = 2

_FOLD = Action(ActionType.FOLD)
_CALL = Action(ActionType.CALL)
_BET = Action(ActionType.BET)

# Lower is stronger: pairs first, then by the higher card.
_HAND_RANKS = {
    frozenset("K"): 1,
    frozenset("Q"): 2,
    frozenset("J"): 3,
    frozenset("KQ"): 4,
    frozenset("KJ"): 5,
    frozenset("QJ"): 6,
}


def _empty_hands() -> list[list[int]]:
    return [[NO_CARD_PLACEHOLDER] * PRIVATE_CARD_AMOUNT for _ in range(MAX_PLAYERS)]


def _empty_board() -> list[int]:
    return [NO_CARD_PLACEHOLDER] * COMMUNITY_CARD_AMOUNT


def _initial_bets() -> list[list[int]]:
    bets = [[0] * MAX_PLAYERS for _ in range(ROUNDS)]
    bets[PRE_FLOP_INDEX][0] = ANTE
    bets[PRE_FLOP_INDEX][1] = ANTE
    return bets


@dataclass
class LeducGameState(GameState):
    """State of a Leduc poker hand: one private card, one board card, two rounds."""

    private_hands: list[list[int]] = field(default_factory=_empty_hands)
    community_cards: list[int] = field(default_factory=_empty_board)
    bets: list[list[int]] = field(default_factory=_initial_bets)
    history: History = ((),) * ROUNDS
    round: int = PRE_FLOP_INDEX
    player_amount: int = 2

    @classmethod
    def new_empty(
        cls, player_amount: int, draw_cards: bool, seed: Optional[int] = None
    ) -> "LeducGameState":
        """Start a hand; the game is always heads-up, whatever ``player_amount``."""
        hands = _empty_hands()
        board = _empty_board()
        if draw_cards:
            first, second, shared = random.Random(seed).sample(DECK, 3)
            hands[0][0] = first
            hands[1][0] = second
            board[0] = shared
        return cls(private_hands=hands, community_cards=board)

    @classmethod
    def total_rounds(cls) -> int:
        return 2

    def current_round_index(self) -> int:
        return self.round

    def current_bet_count(self) -> int:
        return sum(1 for action in self.history[self.round] if action.is_bet_raise())

    def active_player(self) -> int:
        acted = len(self.history[self.round])
        if self.round == POST_FLOP_INDEX:
            return (acted + 1) % 2
        return acted % 2

    def is_leaf_node(self, situation: int) -> bool:
        return False

    def active_player_actions(
        self, bets_in_abstraction: Optional[Sequence[Action]] = None
    ) -> list[Action]:
        bet_count = self.current_bet_count()
        if bet_count > 0:
            if bet_count < MAX_BETS_PER_ROUND:
                return [_FOLD, _CALL, _BET]
            return [_FOLD, _CALL]
        return [_CALL, _BET]

    def is_terminal(self) -> bool:
        if any(_FOLD in round_history for round_history in self.history):
            return True
        return self.round == POST_FLOP_INDEX and self._round_complete()

    def can_proceed_to_next_round(self) -> bool:
        return self.round == PRE_FLOP_INDEX and self._round_complete()

    def payoffs(self) -> list[int]:
        if any(_FOLD in round_history for round_history in self.history):
            return self._fold_payoffs()

        first_rank = card_rank(self.private_hands[0][0])
        if all(
            card_rank(self.private_hands[player][0]) == first_rank
            for player in range(self.player_amount)
        ):
            return [0] * MAX_PLAYERS

        ranks = [self._hand_rank(player) for player in range(self.player_amount)]
        winner = ranks.index(min(ranks))
        result = [0] * MAX_PLAYERS
        for player in range(MAX_PLAYERS):
            if player == winner:
                result[player] = sum(
                    bet
                    for round_bets in self.bets
                    for other, bet in enumerate(round_bets)
                    if other != player
                )
            elif player < 2:
                result[player] = -sum(round_bets[player] for round_bets in self.bets)
        return result

    def handle_action(self, action: Action) -> "LeducGameState":
        bets = [list(round_bets) for round_bets in self.bets]
        player = self.active_player()
        round_bets = bets[self.round]
        if action.action_type is not ActionType.FOLD:
            increase = round_bets[(player + 1) % 2] - round_bets[player]
            if action.action_type is ActionType.BET:
                increase += ROUND_BET_SIZES[self.round]
            round_bets[player] += increase

        history = tuple(
            round_history + (action,) if index == self.round else round_history
            for index, round_history in enumerate(self.history)
        )
        next_state = replace(
            self,
            private_hands=[list(hand) for hand in self.private_hands],
            community_cards=list(self.community_cards),
            bets=bets,
            history=history,
        )
        if next_state.can_proceed_to_next_round():
            next_state.round = POST_FLOP_INDEX
        return next_state

    def _round_complete(self) -> bool:
        return self._all_players_checked() or self._bet_or_raise_finished()

    def _all_players_checked(self) -> bool:
        actions = self.history[self.round]
        checks = sum(1 for action in actions if action == _CALL)
        return checks == self.player_amount and not any(
            action.action_type is ActionType.BET for action in actions
        )

    def _bet_or_raise_finished(self) -> bool:
        actions = self.history[self.round]
        for index in reversed(range(len(actions))):
            if actions[index].action_type is ActionType.BET:
                return len(actions) - index == self.player_amount
        return False

    def _fold_payoffs(self) -> list[int]:
        folded = 0
        for round_index, round_history in enumerate(self.history):
            fold_at = next(
                (i for i, action in enumerate(round_history) if action.action_type is ActionType.FOLD),
                None,
            )
            if fold_at is not None:
                folded = fold_at % 2 if round_index == 0 else (fold_at + 1) % 2

        def committed(player: int) -> int:
            return self.bets[0][player] + self.bets[1][player]

        result = [0] * MAX_PLAYERS
        for player in range(MAX_PLAYERS):
            if player == folded:
                result[player] = -committed(player)
            elif player < 2:
                result[player] = committed((player + 1) % 2)
        return result

    def _hand_rank(self, player: int) -> int:
        cards = (self.private_hands[player][0], self.community_cards[0])
        key = frozenset(card_to_string(card)[0] for card in cards)
        try:
            return _HAND_RANKS[key]
        except KeyError:
            raise ValueError(f"cannot rank Leduc hand of player {player}") from None