"""Hold'em hand strength."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from .cards import card_rank, card_suit

MAX_HAND_SIZE = 7

HIGH_CARD = 0
ONE_PAIR = 1
TWO_PAIR = 2
THREE_OF_A_KIND = 3
STRAIGHT = 4
FLUSH = 5
FULL_HOUSE = 6
FOUR_OF_A_KIND = 7
STRAIGHT_FLUSH = 8

_ACE = 12
_WHEEL = frozenset({_ACE, 0, 1, 2, 3})


def _score(category: int, ranks: list[int]) -> int:
    padded = ranks[:5] + [-1] * (5 - len(ranks[:5]))
    value = category
    for rank in padded:
        value = value * 16 + rank + 1
    return value


def _straight_high(ranks: set[int]) -> Optional[int]:
    for high in range(_ACE, 3, -1):
        if all(high - offset in ranks for offset in range(5)):
            return high
    if _WHEEL <= ranks:
        return 3
    return None


def rank_hand(cards: Iterable[int]) -> int:
    """Strength of the best five-card hand among up to seven cards.

    A higher value is a stronger hand; equal values tie.
    """
    hand = list(cards)
    if len(hand) > MAX_HAND_SIZE:
        raise ValueError(f"at most {MAX_HAND_SIZE} cards can be ranked, got {len(hand)}")
    if len(set(hand)) != len(hand):
        raise ValueError("hand contains a duplicate card")
    ranks = [card_rank(card) for card in hand]

    by_suit: dict[int, list[int]] = {}
    for card, rank in zip(hand, ranks):
        by_suit.setdefault(card_suit(card), []).append(rank)
    flush_ranks = next(
        (sorted(suited, reverse=True) for suited in by_suit.values() if len(suited) >= 5),
        None,
    )
    if flush_ranks is not None:
        high = _straight_high(set(flush_ranks))
        if high is not None:
            return _score(STRAIGHT_FLUSH, [high])

    counts = Counter(ranks)
    distinct = sorted(counts, reverse=True)

    def of_count(n: int) -> list[int]:
        return [rank for rank in distinct if counts[rank] == n]

    def others(*excluded: int) -> list[int]:
        return [rank for rank in distinct if rank not in excluded]

    quads, trips, pairs = of_count(4), of_count(3), of_count(2)

    if quads:
        return _score(FOUR_OF_A_KIND, [quads[0]] + others(quads[0])[:1])
    if trips and (len(trips) > 1 or pairs):
        return _score(FULL_HOUSE, [trips[0], max(trips[1:] + pairs)])
    if flush_ranks is not None:
        return _score(FLUSH, flush_ranks[:5])
    high = _straight_high(set(distinct))
    if high is not None:
        return _score(STRAIGHT, [high])
    if trips:
        return _score(THREE_OF_A_KIND, [trips[0]] + others(trips[0])[:2])
    if len(pairs) >= 2:
        first, second = pairs[:2]
        return _score(TWO_PAIR, [first, second] + others(first, second)[:1])
    if pairs:
        return _score(ONE_PAIR, [pairs[0]] + others(pairs[0])[:3])
    return _score(HIGH_CARD, distinct[:5])