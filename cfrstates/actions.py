"""Player actions and the predefined action identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

_MAX_RAISE_AMOUNT = 0xFFFF
_IDENTIFIER_PATTERN = re.compile(r"\+?[0-9]+")


class ActionType(Enum):
    """Kind of action a player can take."""

    FOLD = "fold"
    CALL = "call"
    BET = "bet"
    ALL_IN = "all_in"

    @classmethod
    def from_string(cls, text: str) -> "ActionType":
        """Parse ``"fold"``, ``"call"``, ``"bet"`` or ``"all_in"``."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown action type: {text!r}") from None

    @property
    def label(self) -> str:
        """Display name, e.g. ``"AllIn"``."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.value


_LABELS = {
    ActionType.FOLD: "Fold",
    ActionType.CALL: "Call",
    ActionType.BET: "Bet",
    ActionType.ALL_IN: "AllIn",
}


@dataclass(frozen=True)
class Action:
    """An action with an optional pot-relative raise in hundredths."""

    action_type: ActionType
    raise_amount: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.raise_amount <= _MAX_RAISE_AMOUNT:
            raise ValueError(f"raise amount out of range: {self.raise_amount}")

    def __str__(self) -> str:
        if self.raise_amount:
            multiplier = repr(self.multiplier())
            if multiplier.endswith(".0"):
                multiplier = multiplier[:-2]
            return f"{self.action_type.label} x{multiplier}"
        return self.action_type.label

    def multiplier(self) -> float:
        """The raise amount as a multiple of the pot."""
        return self.raise_amount / 100.0

    @classmethod
    def from_string(cls, value: str) -> "Action":
        """Look up a predefined action by its decimal identifier."""
        if _IDENTIFIER_PATTERN.fullmatch(value):
            action = PREDEFINED_ACTIONS.get(int(value))
            if action is not None:
                return action
        raise ValueError(f"no predefined action with identifier {value!r}")

    def identifier(self) -> Optional[int]:
        """The predefined identifier of this action, or None if it has none."""
        return ACTION_IDENTIFIERS.get(self)

    def is_bet_raise(self) -> bool:
        """True if this action is a bet or raise."""
        return self.action_type is ActionType.BET


_BET_AMOUNTS = (0, 25, 50, 75, 80, 100, 134, 150, 200, 400, 700, 800, 1000, 1300, 1500, 2500)

PREDEFINED_ACTIONS: Mapping[int, Action] = MappingProxyType(
    dict(
        enumerate(
            [
                Action(ActionType.FOLD),
                Action(ActionType.CALL),
                Action(ActionType.ALL_IN),
                *(Action(ActionType.BET, amount) for amount in _BET_AMOUNTS),
            ]
        )
    )
)

ACTION_IDENTIFIERS: Mapping[Action, int] = MappingProxyType(
    {action: identifier for identifier, action in PREDEFINED_ACTIONS.items()}
)