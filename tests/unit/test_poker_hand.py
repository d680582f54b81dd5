"""Tests for the PokerHand object API."""
import pytest

from poker_hands.core.card import InvalidCardCode
from poker_hands.core.hand import InvalidHandSize
from poker_hands.evaluation.comparator import HandComparator, Result
from poker_hands.evaluation.evaluation_config import FullHouseTiebreak, RuleConfig
from poker_hands.evaluation.types import Category
from poker_hands.poker_hand import PokerHand


def test_straight_flush_comparison():
    p1 = PokerHand("2H 3H 4H 5H 6H")
    p2 = PokerHand("KS AS TS QS JS")
    assert p1.compare_with(p2) == Result.LOSS
    assert p2.compare_with(p1) == Result.WIN


def test_hand_is_evaluated_on_construction():
    hand = PokerHand("AS AH 2H AD AC")
    assert hand.category == Category.FOUR_OF_A_KIND
    assert hand.evaluated.four_rank == 14
    assert str(hand) == "AS AH 2H AD AC"
    assert repr(hand) == "PokerHand('AS AH 2H AD AC')"


def test_describe():
    hand = PokerHand("2S AH 2H AS AC")
    assert hand.describe() == "Full House"
    assert hand.describe(detailed=True) == "Full House, Aces over Twos"


def test_custom_comparator():
    strict = HandComparator(RuleConfig(
        id="strict",
        name="Strict",
        description="",
        full_house_tiebreak=FullHouseTiebreak.THREE_THEN_PAIR,
    ))
    hand = PokerHand("AS AH AD 3C 3D", comparator=strict)
    assert hand.compare_with(PokerHand("AS AH AD 2C 2D")) == Result.WIN


def test_invalid_hands_fail_at_construction():
    with pytest.raises(InvalidCardCode):
        PokerHand("AS AH 2H AD 1C")
    with pytest.raises(InvalidHandSize):
        PokerHand("AS AH 2H AD")


def test_unknown_default_rules_fail_at_construction(monkeypatch):
    monkeypatch.setenv("POKER_HANDS_RULES", "no-such-rules")
    with pytest.raises(ValueError, match="no-such-rules"):
        PokerHand("AS AH 2H AD AC")


def test_comparator_keeps_rules_chosen_at_construction(monkeypatch):
    monkeypatch.setenv("POKER_HANDS_RULES", "strict")
    hand = PokerHand("AS AH AD 3C 3D")
    other = PokerHand("AS AH AD 2C 2D")

    monkeypatch.setenv("POKER_HANDS_RULES", "no-such-rules")
    assert hand.compare_with(other) == Result.WIN
