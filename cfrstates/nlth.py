"""No-limit Texas hold'em for two to six players, with side pots."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .actions import Action, ActionType
from .base import GameState, History
from .cards import (
    COMMUNITY_CARD_AMOUNT,
    MAX_PLAYERS,
    NO_CARD_PLACEHOLDER,
    PRIVATE_CARD_AMOUNT,
    ROUNDS,
    full_deck,
)
from .rank import rank_hand

ROUND_PREFLOP = 0
ROUND_FLOP = 1
ROUND_TURN = 2
ROUND_RIVER = 3

STACK_SIZE = 10_000
SMALL_BLIND = 50
BIG_BLIND = 100

MIN_PLAYERS = 2
# There can never be more pots than one per all-in plus the main pot.
MAX_POTS = MAX_PLAYERS + 1

_FOLD = Action(ActionType.FOLD)
_CALL = Action(ActionType.CALL)
_ALL_IN = Action(ActionType.ALL_IN)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _scaled(amount: int, raise_amount: int) -> int:
    """``amount`` times a pot multiplier in single precision, truncated."""
    return int(_f32(_f32(float(amount)) * _f32(raise_amount / 100.0)))


def _blinds() -> list[int]:
    blinds = [0] * MAX_PLAYERS
    blinds[0] = SMALL_BLIND
    blinds[1] = BIG_BLIND
    return blinds


@dataclass
class NLTHGameState(GameState):
    """State of a no-limit hold'em hand.

    ``pots`` holds, for every pot, the amount each player put into it. The
    first pot is the main pot; every all-in opens a new one.
    ``all_in_players`` holds for each seat the pot it went all-in at, or -1.
    """

    round: int
    player_amount: int
    private_hands: list[list[int]]
    community_cards: list[int]
    stacks: list[int]
    bets: list[list[int]]
    minimum_raise_amount: int
    history: History
    active_player_index: int
    folded_players: list[bool]
    all_in_players: list[int]
    pots: list[list[int]]
    current_round_pot_all_in_amounts: list[int]
    current_pot: int
    active_player_amount: int

    @classmethod
    def new_empty(
        cls, player_amount: int, draw_cards: bool, seed: Optional[int] = None
    ) -> "NLTHGameState":
        """Start a hand with blinds posted, optionally dealing every card."""
        if not MIN_PLAYERS <= player_amount <= MAX_PLAYERS:
            raise ValueError(
                f"player amount must be between {MIN_PLAYERS} and {MAX_PLAYERS}: {player_amount}"
            )
        hands = [[NO_CARD_PLACEHOLDER] * PRIVATE_CARD_AMOUNT for _ in range(MAX_PLAYERS)]
        board = [NO_CARD_PLACEHOLDER] * COMMUNITY_CARD_AMOUNT
        if draw_cards:
            drawn = random.Random(seed).sample(
                full_deck(), PRIVATE_CARD_AMOUNT * player_amount + COMMUNITY_CARD_AMOUNT
            )
            for seat in range(player_amount):
                start = seat * PRIVATE_CARD_AMOUNT
                hands[seat] = drawn[start:start + PRIVATE_CARD_AMOUNT]
            board = drawn[-COMMUNITY_CARD_AMOUNT:]

        blinds = _blinds()
        pots = [[0] * MAX_PLAYERS for _ in range(MAX_POTS)]
        pots[0] = list(blinds)
        bets = [[0] * MAX_PLAYERS for _ in range(ROUNDS)]
        bets[ROUND_PREFLOP] = list(blinds)
        return cls(
            round=ROUND_PREFLOP,
            player_amount=player_amount,
            private_hands=hands,
            community_cards=board,
            stacks=[STACK_SIZE - blind for blind in blinds],
            bets=bets,
            minimum_raise_amount=BIG_BLIND,
            history=((),) * ROUNDS,
            # Heads-up the small blind acts first preflop; otherwise the seat after the big blind.
            active_player_index=0 if player_amount == 2 else 2,
            folded_players=[False] * MAX_PLAYERS,
            all_in_players=[-1] * MAX_PLAYERS,
            pots=pots,
            current_round_pot_all_in_amounts=[0] * MAX_POTS,
            current_pot=0,
            active_player_amount=player_amount,
        )

    @classmethod
    def total_rounds(cls) -> int:
        return ROUNDS

    def current_round_index(self) -> int:
        return self.round

    def current_bet_count(self) -> int:
        return sum(1 for action in self.history[self.round] if action.is_bet_raise())

    def active_player(self) -> int:
        return self.active_player_index

    def is_leaf_node(self, situation: int) -> bool:
        """Situation 0 never stops, 1 stops once the flop is reached,
        2 stops after the turn or after a second bet in a round."""
        if situation == 1 and self.round > 0:
            return True
        if situation == 2 and (self.round > 2 or self.current_bet_count() > 1):
            return True
        return False

    def total_pot(self) -> int:
        """All chips in all pots."""
        return sum(sum(pot) for pot in self.pots)

    def call_amount(self) -> int:
        """Chips the active player needs to match the highest bet this round."""
        round_bets = self.bets[self.round]
        return max(round_bets) - round_bets[self.active_player_index]

    def all_remaining_players_checked(self) -> bool:
        """True if every remaining player checked and nobody bet or went all-in."""
        actions = self.history[self.round]
        checks = sum(1 for action in actions if action.action_type is ActionType.CALL)
        return checks == self.active_player_amount and not any(
            action.is_bet_raise() or action.action_type is ActionType.ALL_IN
            for action in actions
        )

    def active_player_actions(
        self, bets_in_abstraction: Optional[Sequence[Action]] = None
    ) -> list[Action]:
        candidates = [_FOLD, _CALL, _ALL_IN, *(bets_in_abstraction or ())]
        return [action for action in candidates if self._is_allowed(action)]

    def is_terminal(self) -> bool:
        if self.active_player_amount == 0:
            return True
        if self._folded_count() == self.player_amount - 1:
            return True
        if self.active_player_amount < 2 and self._round_complete():
            return True
        return self.round == ROUND_RIVER and self._round_complete()

    def can_proceed_to_next_round(self) -> bool:
        return (
            self.round < ROUND_RIVER
            and self.active_player_amount > 1
            and self._round_complete()
        )

    def payoffs(self) -> list[int]:
        if self._folded_count() == self.player_amount - 1:
            return self._fold_payoffs()

        result = [0] * MAX_PLAYERS
        participants = [
            player for player in range(self.player_amount) if not self.folded_players[player]
        ]
        if participants:
            ranks = {
                player: rank_hand(self.private_hands[player] + self.community_cards)
                for player in participants
            }
            best = max(ranks.values())
            winners = [player for player in participants if ranks[player] == best]
            for pot in self.pots:
                share = sum(pot) // len(winners)
                for player in participants:
                    if player in winners:
                        result[player] += share - pot[player]
                    else:
                        result[player] -= pot[player]

        for player in range(self.player_amount):
            if self.folded_players[player]:
                result[player] -= sum(pot[player] for pot in self.pots)
        return result

    def handle_action(self, action: Action) -> "NLTHGameState":
        nxt = self._copy()
        player = nxt.active_player_index

        if action.action_type is ActionType.FOLD:
            nxt.folded_players[player] = True
            nxt.active_player_amount -= 1
        else:
            round_bets = nxt.bets[nxt.round]
            current_bets = round_bets[player]
            call = nxt.call_amount()
            stack = nxt.stacks[player]

            if action.action_type is ActionType.ALL_IN:
                extra = stack
                left = nxt._fill_side_pots(player, current_bets, extra)
                pot = nxt.pots[nxt.current_pot]
                nxt.current_round_pot_all_in_amounts[nxt.current_pot] = left + pot[player]
                pot[player] += left

                if call < stack and stack - call > self.minimum_raise_amount:
                    nxt.minimum_raise_amount = stack - call
                else:
                    # Whatever others put in above this all-in moves to the next pot.
                    excess = [max(bet - stack, 0) for bet in pot]
                    nxt.pots[nxt.current_pot] = [bet - over for bet, over in zip(pot, excess)]
                    nxt.pots[nxt.current_pot + 1] = excess

                nxt.all_in_players[player] = nxt.current_pot
                nxt.current_pot += 1
                nxt.active_player_amount -= 1
            else:
                extra = call
                if action.is_bet_raise():
                    target = _scaled(nxt.total_pot() + call, action.raise_amount)
                    extra = target - current_bets
                    if extra < call:
                        raise ValueError(f"{action} does not cover the call amount {call}")
                    nxt.minimum_raise_amount = extra - call
                left = nxt._fill_side_pots(player, current_bets, extra)
                nxt.pots[nxt.current_pot][player] += left

            if extra > stack:
                raise ValueError(
                    f"player {player} cannot afford {extra} with a stack of {stack}"
                )
            nxt.stacks[player] -= extra
            round_bets[player] += extra

        nxt.history = tuple(
            actions + (action,) if index == nxt.round else actions
            for index, actions in enumerate(nxt.history)
        )

        candidate = (player + 1) % nxt.player_amount
        for _ in range(nxt.player_amount):
            if not nxt.folded_players[candidate] and nxt.all_in_players[candidate] == -1:
                break
            candidate = (candidate + 1) % nxt.player_amount
        nxt.active_player_index = candidate

        if nxt.can_proceed_to_next_round():
            nxt.round += 1
            nxt.minimum_raise_amount = BIG_BLIND
            nxt.current_round_pot_all_in_amounts = [0] * MAX_POTS
            # Heads-up the big blind acts first after the flop; otherwise the small blind.
            nxt.active_player_index = 1 if nxt.player_amount == 2 else 0
        return nxt

    def _copy(self) -> "NLTHGameState":
        return replace(
            self,
            private_hands=[list(hand) for hand in self.private_hands],
            community_cards=list(self.community_cards),
            stacks=list(self.stacks),
            bets=[list(round_bets) for round_bets in self.bets],
            folded_players=list(self.folded_players),
            all_in_players=list(self.all_in_players),
            pots=[list(pot) for pot in self.pots],
            current_round_pot_all_in_amounts=list(self.current_round_pot_all_in_amounts),
        )

    def _fill_side_pots(self, player: int, current_bets: int, amount: int) -> int:
        """Pay into the side pots opened this round; return what is left."""
        left = amount
        for index, all_in_amount in enumerate(self.current_round_pot_all_in_amounts):
            if all_in_amount > current_bets:
                share = min(all_in_amount - current_bets, left)
                self.pots[index][player] += share
                left -= share
        return left

    def _is_allowed(self, action: Action) -> bool:
        if action.action_type is ActionType.ALL_IN:
            return True
        call = self.call_amount()
        stack = self.stacks[self.active_player_index]
        if action.action_type is ActionType.FOLD:
            return call != 0
        if action.action_type is ActionType.CALL:
            return stack - call > 0
        current_bets = self.bets[self.round][self.active_player_index]
        extra = _scaled(self.total_pot() + call, action.raise_amount) - current_bets
        if extra < call or extra - call < self.minimum_raise_amount:
            return False
        return stack - extra >= 0

    def _folded_count(self) -> int:
        return sum(self.folded_players)

    def _round_complete(self) -> bool:
        return self.all_remaining_players_checked() or self._bet_or_raise_finished()

    def _bet_or_raise_finished(self) -> bool:
        actions = self.history[self.round]
        for index in reversed(range(len(actions))):
            action = actions[index]
            if action.is_bet_raise() or action.action_type is ActionType.ALL_IN:
                acted = sum(
                    1 for later in actions[index:] if later.action_type is not ActionType.FOLD
                )
                if action.is_bet_raise():
                    return acted == self.active_player_amount
                # An all-in already lowered the active player amount.
                return acted > self.active_player_amount
        return False

    def _fold_payoffs(self) -> list[int]:
        winner = self.folded_players.index(False)
        result = [0] * MAX_PLAYERS
        for player in range(min(self.player_amount, MAX_PLAYERS)):
            if player == winner:
                result[player] = self.total_pot() - sum(
                    round_bets[winner] for round_bets in self.bets
                )
            else:
                result[player] = -sum(pot[player] for pot in self.pots)
        return result