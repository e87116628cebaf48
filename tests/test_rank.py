import pytest

from cfrstates.cards import NO_CARD_PLACEHOLDER, card_from_string
from cfrstates.rank import rank_hand


def _cards(text):
    return [card_from_string(name) for name in text.split()]


def _rank(text):
    return rank_hand(_cards(text))


CATEGORY_LADDER = [
    "9h Th Jh Qh Kh 2c 3d",  # straight flush
    "9c 9d 9h 9s Kh 2c 3d",  # four of a kind
    "9c 9d 9h Ks Kh 2c 3d",  # full house
    "2h 5h 9h Jh Kh 3c 4d",  # flush
    "5c 6d 7h 8s 9h 2c Kd",  # straight
    "9c 9d 9h 2s 5h Kc Jd",  # three of a kind
    "9c 9d 5h 5s 2h Kc Jd",  # two pair
    "9c 9d 5h 7s 2h Kc Jd",  # one pair
    "9c 4d 5h 7s 2h Kc Jd",  # high card
]


def test_categories_are_strictly_ordered():
    values = [_rank(hand) for hand in CATEGORY_LADDER]
    assert all(stronger > weaker for stronger, weaker in zip(values, values[1:]))


def test_wheel_is_lowest_straight_but_beats_trips():
    wheel = _rank("Ac 2d 3h 4s 5c")
    six_high = _rank("2d 3h 4s 5c 6d")
    trips = _rank("Ac Ad Ah Ks Qc")
    assert six_high > wheel > trips


def test_kicker_decides_between_equal_pairs():
    assert _rank("Ac Ad Kh 7s 2c") > _rank("Ah As Qh 7d 2d")


def test_suits_do_not_matter_without_flush():
    assert _rank("Ac Ad Kh 7s 2c") == _rank("Ah As Kd 7c 2d")


def test_card_order_does_not_matter():
    cards = _cards("9c 9d 5h 5s 2h Kc Jd")
    assert rank_hand(cards) == rank_hand(reversed(cards))


def test_heads_up_example_straight_beats_pair():
    board = "Jd Qh Td 5s 3h"
    assert _rank("As Ks " + board) > _rank("2c 3d " + board)


def test_six_player_example_broadway_wins():
    board = "Qd Kh Ah 2s 3h"
    hands = ["As Ks", "2c 3d", "4h 5s", "6d 7c", "8s 9d", "Th Jh"]
    values = [_rank(hand + " " + board) for hand in hands]
    assert max(range(len(values)), key=values.__getitem__) == 5


def test_placeholder_card_is_rejected():
    with pytest.raises(ValueError):
        rank_hand([card_from_string("As"), NO_CARD_PLACEHOLDER])


def test_duplicate_card_is_rejected():
    with pytest.raises(ValueError):
        _rank("As As Kd")


def test_too_many_cards_are_rejected():
    with pytest.raises(ValueError):
        _rank("2c 3c 4c 5c 6c 7c 8c 9c")