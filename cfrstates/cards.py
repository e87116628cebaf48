"""Card encoding and game-wide size constants.

A card is an ``int`` in ``0..51``. It is built as ``rank * 4 + suit``, so the
integer order of cards follows their rank. ``NO_CARD_PLACEHOLDER`` marks an
empty card slot.
"""

from __future__ import annotations

MAX_PLAYERS = 6
ROUNDS = 4
PRIVATE_CARD_AMOUNT = 2
COMMUNITY_CARD_AMOUNT = 5
NO_CARD_PLACEHOLDER = 52

RANK_CHARS = "23456789TJQKA"
SUIT_CHARS = "cdhs"

_DECK_SIZE = len(RANK_CHARS) * len(SUIT_CHARS)


def _check_card(card: int) -> None:
    if not isinstance(card, int) or isinstance(card, bool) or not 0 <= card < _DECK_SIZE:
        raise ValueError(f"not a card: {card!r}")


def card_from_string(text: str) -> int:
    """Parse a two-character card such as ``"Kh"`` into its integer code."""
    if len(text) != 2:
        raise ValueError(f"card must be two characters: {text!r}")
    rank_char, suit_char = text[0], text[1].lower()
    rank = RANK_CHARS.find(rank_char.upper())
    suit = SUIT_CHARS.find(suit_char)
    if rank < 0 or suit < 0:
        raise ValueError(f"unknown card: {text!r}")
    return rank * len(SUIT_CHARS) + suit


def card_to_string(card: int) -> str:
    """Return the two-character name of a card code."""
    _check_card(card)
    return RANK_CHARS[card_rank(card)] + SUIT_CHARS[card_suit(card)]


def card_rank(card: int) -> int:
    """Return the rank index of a card, 0 for a deuce up to 12 for an ace."""
    _check_card(card)
    return card // len(SUIT_CHARS)


def card_suit(card: int) -> int:
    """Return the suit index of a card, an index into ``SUIT_CHARS``."""
    _check_card(card)
    return card % len(SUIT_CHARS)


def full_deck() -> list[int]:
    """Return all 52 cards, ordered by rank and then by suit."""
    return [
        card_from_string(rank + suit) for rank in RANK_CHARS for suit in SUIT_CHARS
    ]