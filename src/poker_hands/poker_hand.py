"""Object-style API for comparing two poker hands."""

from typing import Optional

from poker_hands.core.hand import Hand
from poker_hands.evaluation.comparator import HandComparator, Result
from poker_hands.evaluation.evaluator import evaluator
from poker_hands.evaluation.hand_description import HandDescriber
from poker_hands.evaluation.types import Category, EvaluatedHand


class PokerHand:
    """
    A parsed and evaluated poker hand.

    Example:
        >>> PokerHand("AS AH 2H AD AC").compare_with(PokerHand("JS JD JC JH 3D"))
        <Result.WIN: 1>
    """

    def __init__(self, hand_str: str, comparator: Optional[HandComparator] = None):
        """
        Parse and evaluate a hand.

        Args:
            hand_str: Five whitespace separated card codes
            comparator: Comparator used by compare_with; default rules if omitted

        Raises:
            InvalidCardCode: If a card code is malformed
            InvalidHandSize: If the string does not hold five cards
            ValueError: If comparator is omitted and POKER_HANDS_RULES names an
                        unknown rule set
        """
        self.hand: Hand = Hand.from_string(hand_str)
        self.evaluated: EvaluatedHand = evaluator.evaluate(self.hand)
        self._comparator = comparator or HandComparator(evaluator=evaluator)

    @property
    def category(self) -> Category:
        return self.evaluated.category

    def describe(self, detailed: bool = False) -> str:
        describer = HandDescriber(evaluator)
        if detailed:
            return describer.describe_hand_detailed(self.evaluated)
        return describer.describe_hand(self.evaluated)

    def compare_with(self, other: 'PokerHand') -> Result:
        """Compare this hand with another; the result is from this hand's side."""
        return self._comparator.compare(self.evaluated, other.evaluated)

    def __str__(self) -> str:
        return str(self.hand)

    def __repr__(self) -> str:
        return f"PokerHand('{self.hand}')"
