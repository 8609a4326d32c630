import pytest

from fivecard.cards import Rank, parse_cards
from fivecard.evaluator import (
    HAND_ORDER,
    HandCategory,
    Outcome,
    classify,
    compare_scores,
    group_sizes,
    is_flush,
    is_straight,
    rank_group_counts,
)


@pytest.mark.parametrize(
    "labels, expected",
    [
        (["Ad", "Kd", "Qd", "Jd", "Td"], (HandCategory.ROYAL_FLUSH, Rank.ACE)),
        (["Jd", "Td", "9d", "8d", "7d"], (HandCategory.STRAIGHT_FLUSH, Rank.JACK)),
        (["As", "Ah", "Ad", "Ac", "Kd"], (HandCategory.FOUR_OF_A_KIND, Rank.ACE)),
        (["2c", "2d", "2h", "2s", "Kd"], (HandCategory.FOUR_OF_A_KIND, Rank.TWO)),
        (["Qc", "Qd", "Qs", "9h", "9s"], (HandCategory.FULL_HOUSE, Rank.QUEEN)),
        (["2c", "2d", "2s", "Kh", "Ks"], (HandCategory.FULL_HOUSE, Rank.TWO)),
        (["Ah", "Jh", "9h", "6h", "2h"], (HandCategory.FLUSH, Rank.ACE)),
        (["9h", "8d", "7c", "6s", "5h"], (HandCategory.STRAIGHT, Rank.NINE)),
        (["Ad", "Ad", "Ad", "Jd", "Tc"], (HandCategory.THREE_OF_A_KIND, Rank.ACE)),
        (["8h", "8d", "8s", "Qd", "Js"], (HandCategory.THREE_OF_A_KIND, Rank.EIGHT)),
        (["7h", "7d", "4s", "4c", "As"], (HandCategory.TWO_PAIR, Rank.SEVEN)),
        (["6h", "6s", "Qh", "8d", "4c"], (HandCategory.ONE_PAIR, Rank.SIX)),
        (["As", "Kd", "Jh", "9c", "4d"], (HandCategory.HIGH_CARD, Rank.ACE)),
    ],
)
def test_classify_identifies_all_hand_categories(labels, expected):
    assert classify(parse_cards(labels)) == expected


def test_ace_low_straight_is_not_recognised():
    cards = parse_cards(["Ah", "2d", "3c", "4s", "5h"])
    assert not is_straight(cards)
    assert classify(cards) == (HandCategory.HIGH_CARD, Rank.ACE)


def test_ace_low_straight_flush_is_only_a_flush():
    cards = parse_cards(["Ah", "2h", "3h", "4h", "5h"])
    assert classify(cards) == (HandCategory.FLUSH, Rank.ACE)


def test_straight_detection_ignores_input_order():
    assert is_straight(parse_cards(["Kd", "9s", "Qh", "Tc", "Jd"]))
    assert not is_straight(parse_cards(["Kd", "9s", "Qh", "Tc", "Jd"])[:4] + parse_cards(["2c"]))


def test_flush_requires_every_suit_to_match():
    assert is_flush(parse_cards(["2h", "9h", "Kh", "4h", "7h"]))
    assert not is_flush(parse_cards(["2h", "9h", "Kh", "4h", "7d"]))


def test_rank_group_counts_and_sizes():
    cards = parse_cards(["7h", "7d", "4s", "4c", "As"])
    counts = rank_group_counts(cards)
    assert list(counts.items()) == [(Rank.FOUR, 2), (Rank.SEVEN, 2), (Rank.ACE, 1)]
    assert group_sizes(cards) == [1, 2, 2]
    assert group_sizes(parse_cards(["Qc", "Qd", "Qs", "9h", "9s"])) == [2, 3]


def test_hand_order_is_strongest_first():
    assert HAND_ORDER[0] is HandCategory.ROYAL_FLUSH
    assert HAND_ORDER[-1] is HandCategory.HIGH_CARD
    assert len(HAND_ORDER) == len(set(HAND_ORDER)) == 10


def test_compare_scores_uses_category_before_rank():
    straight_flush = (HandCategory.STRAIGHT_FLUSH, Rank.JACK)
    trips = (HandCategory.THREE_OF_A_KIND, Rank.ACE)
    assert compare_scores(straight_flush, trips) is Outcome.WIN
    assert compare_scores(trips, straight_flush) is Outcome.LOSE


def test_compare_scores_breaks_ties_on_rank_only():
    assert compare_scores((HandCategory.ONE_PAIR, Rank.KING), (HandCategory.ONE_PAIR, Rank.SIX)) is Outcome.WIN
    assert compare_scores((HandCategory.ONE_PAIR, Rank.SIX), (HandCategory.ONE_PAIR, Rank.SIX)) is Outcome.DRAW
