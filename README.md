# cfrstates

Game states for two poker variants, written for use in counterfactual regret
minimisation (CFR) solvers:

- `cfrstates.leduc.LeducGameState`: Leduc poker (six cards, two rounds, two players)
- `cfrstates.nlth.NLTHGameState`: no-limit Texas hold'em, two to six players,
  with blinds of 50/100, stacks of 10,000 and side pots

Both state classes implement the abstract interface in
`cfrstates.base.GameState`. Calling `handle_action` leaves the current state as
it is and returns a new state, so a solver can walk the game tree without
copying states itself.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Cards and actions

`cfrstates.cards` encodes cards as integers from 0 to 51 (`rank * 4 + suit`),
with `NO_CARD_PLACEHOLDER` (52) marking an empty slot. Use
`card_from_string("As")` and `card_to_string(card)` to convert between text and
integers, `card_rank` and `card_suit` to read a card's parts, and `full_deck()`
to get all 52 cards. Invalid input raises `ValueError`.

`cfrstates.actions` defines `ActionType` (`FOLD`, `CALL`, `BET`, `ALL_IN`) and
the frozen dataclass `Action`. For a bet, `raise_amount` is a pot multiplier in
hundredths, so `Action(ActionType.BET, 150)` is a bet of 1.5 times the pot and
`str()` of it gives `"Bet x1.5"`. `action.multiplier()` returns the multiplier
as a float and `action.is_bet_raise()` tells whether it is a bet.

Predefined actions are listed in `PREDEFINED_ACTIONS`. Look one up by its
identifier with `Action.from_string("5")` (a `ValueError` is raised for an
unknown identifier); `action.identifier()` gives the identifier back, or `None`
for an action that is not predefined. `ActionType.from_string("all_in")` parses
an action type by name.

## Playing a hold'em hand

```python
from cfrstates.actions import Action, ActionType
from cfrstates.nlth import NLTHGameState

state = NLTHGameState.new_empty(2, True, 42)

raise_options = [Action(ActionType.BET, amount) for amount in (50, 100, 200)]
print(state.active_player_actions(raise_options))

state = state.handle_action(Action(ActionType.BET, 200))
state = state.handle_action(Action(ActionType.CALL, 0))
print(state.current_round_index(), state.total_pot())

while not state.is_terminal():
    state = state.handle_action(Action(ActionType.CALL, 0))

print(state.payoffs())
```

`new_empty(player_amount, draw_cards, seed)` deals cards from a seeded shuffle
when `draw_cards` is true; otherwise the hands and board hold placeholders and
can be set on the `private_hands` and `community_cards` attributes directly. For
hold'em, `player_amount` must be between 2 and 6.

`active_player_actions(bets_in_abstraction)` filters fold, call, all-in and the
given bets down to those that are legal: fold only when there is something to
call, call only when chips remain afterwards, and bets only when they meet the
minimum raise and the player can afford them. `handle_action` raises
`ValueError` for a bet the player cannot afford.

Useful hold'em attributes and helpers include `stacks`, `bets` (per round and
seat), `pots` (per pot and seat; every all-in opens a new pot),
`minimum_raise_amount`, `active_player_index`, `folded_players`,
`all_in_players`, `total_pot()`, `call_amount()` and
`all_remaining_players_checked()`.

`payoffs()` returns one value per seat, for all six seats.

`is_leaf_node(situation)` lets a depth-limited search stop early: in hold'em,
situation 1 stops once the flop is reached, and situation 2 stops at the river or
after a second bet in a round. Leduc states are never leaf nodes.

## Leduc poker

`LeducGameState.new_empty(player_amount, draw_cards, seed)` always starts a
heads-up hand with an ante of 1 from each player, whatever `player_amount` is.
Bets are 2 in the first round and 4 in the second, with at most two bets per
round. A pair with the board card wins, otherwise the higher card; equal private
ranks tie.

## Hand ranking

`cfrstates.rank.rank_hand(cards)` scores the best five-card hand among up to
seven cards; a higher value means a stronger hand and equal values tie. It raises
`ValueError` for more than seven cards or a duplicated card.

## What the package does not do

It provides game states only: there is no solver, no command-line program and no
way to play interactively. Kuhn poker is not included.