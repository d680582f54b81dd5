"""Five-card poker hand ranking and comparison."""

from poker_hands.core.card import Card, InvalidCardCode, Rank, Suit
from poker_hands.core.hand import Hand, InvalidHandSize
from poker_hands.evaluation.comparator import HandComparator, Result, compare
from poker_hands.evaluation.evaluator import HandEvaluator, evaluate
from poker_hands.evaluation.hand_description import HandDescriber
from poker_hands.evaluation.types import Category, EvaluatedHand
from poker_hands.poker_hand import PokerHand

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "Category",
    "EvaluatedHand",
    "Result",
    "HandEvaluator",
    "HandComparator",
    "HandDescriber",
    "PokerHand",
    "InvalidCardCode",
    "InvalidHandSize",
    "evaluate",
    "compare",
]
