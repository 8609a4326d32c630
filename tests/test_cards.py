import pytest

from fivecard.cards import Card, Rank, Suit, build_cards, cards_to_labels, parse_cards, parse_label
from fivecard.errors import ConstructionError, InvalidRank, InvalidSuit


def test_card_accepts_members_and_symbols():
    assert Card(Suit.CLUBS, Rank.KING) == Card("c", "K")
    assert Card("d", "10") == Card(Suit.DIAMONDS, Rank.TEN)
    card = Card("C", "k")
    assert card.suit is Suit.CLUBS
    assert card.rank is Rank.KING


def test_card_validation_rejects_unknown_members():
    with pytest.raises(InvalidSuit, match="Invalid suit"):
        Card("g", "K")
    with pytest.raises(InvalidRank, match="Invalid rank"):
        Card("c", "1")
    with pytest.raises(InvalidRank):
        Card(Suit.CLUBS, 5)  # type: ignore[arg-type]
    with pytest.raises(ConstructionError):
        Card("clubs", "K")


def test_card_is_immutable():
    card = Card("c", "K")
    with pytest.raises(AttributeError):
        card.rank = Rank.ACE  # type: ignore[misc]


def test_rank_index_follows_rank_order():
    assert Card("s", "2").rank_index() == 0
    assert Card("s", "T").rank_index() == 8
    assert Card("s", "A").rank_index() == 12


def test_ordering_ignores_suit_but_equality_does_not():
    clubs_king = Card("c", "K")
    spades_king = Card("s", "K")

    assert clubs_king != spades_king
    assert not clubs_king < spades_king
    assert not clubs_king > spades_king
    assert clubs_king <= spades_king
    assert clubs_king >= spades_king
    assert len({clubs_king, spades_king, Card("c", "K")}) == 2


def test_ordering_is_transitive_by_rank():
    low, mid, high = Card("h", "3"), Card("c", "9"), Card("d", "A")
    assert low < mid < high
    assert low < high
    assert sorted([high, low, mid]) == [low, mid, high]


def test_labels_round_trip_through_parser():
    cards = parse_cards(["Jd", "Tc", "2s", "Ah"])
    assert cards_to_labels(cards) == ["Jd", "Tc", "2s", "Ah"]
    assert parse_label("10h") == Card("h", "T")
    assert str(Card("d", "Q")) == "Qd"


def test_parse_label_rejects_malformed_labels():
    with pytest.raises(ConstructionError, match="Invalid card label"):
        parse_label("X")
    with pytest.raises(InvalidRank):
        parse_label("Zh")


def test_build_cards_is_canonical_order():
    cards = build_cards()
    assert cards[0] == Card("c", "2")
    assert cards[12] == Card("c", "A")
    assert cards[13] == Card("d", "2")
    assert cards[-1] == Card("s", "A")
