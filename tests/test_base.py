from dataclasses import dataclass, replace

import pytest

from cfrstates.actions import Action, ActionType
from cfrstates.base import GameState


@dataclass
class _CountdownState(GameState):
    remaining: int = 2
    player_amount: int = 2

    @classmethod
    def new_empty(cls, player_amount, draw_cards, seed=None):
        return cls(player_amount=player_amount)

    @classmethod
    def total_rounds(cls):
        return 1

    def current_round_index(self):
        return 0

    def current_bet_count(self):
        return 0

    def active_player(self):
        return self.remaining % self.player_amount

    def is_leaf_node(self, situation):
        return False

    def is_terminal(self):
        return self.remaining == 0

    def payoffs(self):
        return [0] * self.player_amount

    def active_player_actions(self, bets_in_abstraction=None):
        return [Action(ActionType.CALL)]

    def handle_action(self, action):
        return replace(self, remaining=self.remaining - 1)

    def can_proceed_to_next_round(self):
        return False


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GameState()


def test_incomplete_subclass_cannot_be_instantiated():
    class Partial(GameState):
        @classmethod
        def new_empty(cls, player_amount, draw_cards, seed=None):
            return cls()

        def is_terminal(self):
            return True

    assert issubclass(Partial, GameState)
    assert "handle_action" in Partial.__abstractmethods__
    assert "is_terminal" not in Partial.__abstractmethods__
    with pytest.raises(TypeError):
        Partial()

    complete = _CountdownState.new_empty(2, False)
    after = complete.handle_action(Action(ActionType.FOLD))
    assert Action(ActionType.FOLD).is_bet_raise() is False
    assert after.remaining == 1


def test_complete_subclass_is_usable_through_the_interface():
    state: GameState = _CountdownState.new_empty(2, False)
    assert not state.is_terminal()
    for action in state.active_player_actions():
        state = state.handle_action(action)
    state = state.handle_action(Action(ActionType.CALL))
    assert state.is_terminal()
    assert state.payoffs() == [0, 0]