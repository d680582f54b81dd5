"""Tests for five-card hand implementation."""
import pytest
from poker_hands.core.card import Card, InvalidCardCode, Rank, Suit
from poker_hands.core.hand import Hand, InvalidHandSize


@pytest.fixture
def sample_cards():
    """Create a set of sample cards for testing."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.DIAMONDS),
        Card(Rank.TWO, Suit.CLUBS),
        Card(Rank.NINE, Suit.SPADES),
    ]


def test_hand_initialization(sample_cards):
    """Test creating a hand from cards."""
    hand = Hand(sample_cards)
    assert hand.size == 5
    assert len(hand) == 5
    assert list(hand) == sample_cards
    assert hand.cards == tuple(sample_cards)


def test_hand_ranks_highest_first(sample_cards):
    hand = Hand(sample_cards)
    assert hand.ranks() == [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.NINE, Rank.TWO]


@pytest.mark.parametrize("count", [0, 4, 6])
def test_hand_requires_five_cards(sample_cards, count):
    cards = (sample_cards * 2)[:count]
    with pytest.raises(InvalidHandSize) as excinfo:
        Hand(cards)
    assert excinfo.value.size == count


def test_hand_from_string():
    """Test parsing a hand string."""
    hand = Hand.from_string("AS AH 2H AD AC")
    assert hand.cards[0] == Card(Rank.ACE, Suit.SPADES)
    assert hand.cards[2] == Card(Rank.TWO, Suit.HEARTS)


def test_hand_from_string_any_whitespace():
    hand = Hand.from_string("  AS\tAH  2H\nAD AC ")
    assert str(hand) == "AS AH 2H AD AC"


@pytest.mark.parametrize("hand_str", [
    "AS AH 2H AD AC",
    "2H 3H 4H 5H 6H",
    "TS JD QC KH AS",
])
def test_string_round_trip(hand_str):
    """Parsing and re-serializing keeps every card."""
    hand = Hand.from_string(hand_str)
    assert str(hand) == hand_str
    assert Hand.from_string(str(hand)) == hand


@pytest.mark.parametrize("hand_str,size", [
    ("", 0),
    ("AS AH 2H AD", 4),
    ("AS AH 2H AD AC KS", 6),
])
def test_hand_from_string_wrong_size(hand_str, size):
    with pytest.raises(InvalidHandSize) as excinfo:
        Hand.from_string(hand_str)
    assert excinfo.value.size == size


def test_hand_from_string_invalid_card():
    with pytest.raises(InvalidCardCode) as excinfo:
        Hand.from_string("AS AH 2X AD AC")
    assert excinfo.value.code == "2X"
    assert "position 3" in str(excinfo.value)


def test_invalid_card_reported_before_size():
    with pytest.raises(InvalidCardCode):
        Hand.from_string("AS 1H")


def test_duplicate_cards_accepted():
    hand = Hand.from_string("AS AS AS AS AS")
    assert hand.size == 5


def test_hand_equality():
    assert Hand.from_string("AS KS QS JS TS") == Hand.from_string("AS KS QS JS TS")
    assert Hand.from_string("AS KS QS JS TS") != Hand.from_string("KS AS QS JS TS")
    assert Hand.from_string("AS KS QS JS TS") != "AS KS QS JS TS"


def test_hand_repr():
    assert repr(Hand.from_string("AS KS QS JS TS")) == "Hand('AS KS QS JS TS')"
