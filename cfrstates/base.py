"""The interface every game state implements, with the parts they share."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .actions import Action
from .cards import COMMUNITY_CARD_AMOUNT, MAX_PLAYERS, NO_CARD_PLACEHOLDER, PRIVATE_CARD_AMOUNT

History = tuple[tuple[Action, ...], ...]


def empty_hands() -> list[list[int]]:
    """Private hands for every seat, all without cards."""
    return [[NO_CARD_PLACEHOLDER] * PRIVATE_CARD_AMOUNT for _ in range(MAX_PLAYERS)]


def empty_board() -> list[int]:
    """Community cards, none dealt yet."""
    return [NO_CARD_PLACEHOLDER] * COMMUNITY_CARD_AMOUNT


def with_action(history: History, round_index: int, action: Action) -> History:
    """Return ``history`` with ``action`` appended to round ``round_index``."""
    return tuple(
        actions + (action,) if index == round_index else actions
        for index, actions in enumerate(history)
    )


class GameState(ABC):
    """A node of a poker game tree; actions produce new nodes.

    Concrete states expose ``player_amount``, ``private_hands``,
    ``community_cards`` and ``history`` (one tuple of actions per betting
    round) as plain attributes.
    """

    history: History

    @classmethod
    @abstractmethod
    def new_empty(cls, player_amount: int, draw_cards: bool, seed: Optional[int] = None) -> "GameState":
        """Create the state at the start of a hand, optionally dealing cards."""

    @classmethod
    @abstractmethod
    def total_rounds(cls) -> int:
        """Number of betting rounds in the game."""

    @abstractmethod
    def current_round_index(self) -> int:
        """Index of the betting round in progress."""

    def current_bet_count(self) -> int:
        """Number of bets and raises made in the current round."""
        return sum(action.is_bet_raise() for action in self.history[self.current_round_index()])

    @abstractmethod
    def active_player(self) -> int:
        """Index of the player to act."""

    def is_leaf_node(self, situation: int) -> bool:
        """True if a search limited by ``situation`` should stop here."""
        return False

    @abstractmethod
    def is_terminal(self) -> bool:
        """True if the hand is over."""

    @abstractmethod
    def payoffs(self) -> list[int]:
        """Net result of the hand for every seat."""

    @abstractmethod
    def active_player_actions(self, bets_in_abstraction: Optional[Sequence[Action]] = None) -> list[Action]:
        """Legal actions for the player to act."""

    @abstractmethod
    def handle_action(self, action: Action) -> "GameState":
        """Return the state that follows ``action``; ``self`` is left unchanged."""

    @abstractmethod
    def can_proceed_to_next_round(self) -> bool:
        """True if the current betting round is complete."""