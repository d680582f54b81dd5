from typing import Optional, Union

from poker_hands.core.card import Rank
from poker_hands.core.hand import Hand
from poker_hands.evaluation.evaluator import HandEvaluator
from poker_hands.evaluation.types import Category, EvaluatedHand


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def __init__(self, evaluator: Optional[HandEvaluator] = None):
        """Initialize with the evaluator used for unevaluated hands."""
        self.evaluator = evaluator or HandEvaluator()

    def describe_hand(self, hand: Union[EvaluatedHand, Hand, str]) -> str:
        """Get a basic description of the hand."""
        return self._describe_hand(hand, detailed=False)

    def describe_hand_detailed(self, hand: Union[EvaluatedHand, Hand, str]) -> str:
        """Get a detailed description of the hand."""
        return self._describe_hand(hand, detailed=True)

    def _describe_hand(self, hand: Union[EvaluatedHand, Hand, str], detailed: bool) -> str:
        """Internal method to describe a hand."""
        if not isinstance(hand, EvaluatedHand):
            hand = self.evaluator.evaluate(hand)

        category = hand.category
        if category == Category.STRAIGHT_FLUSH and hand.straight_high == Rank.ACE:
            return "Royal Flush"

        if not detailed:
            return category.display_name

        if category == Category.HIGH_CARD:
            return f"{hand.high_card.rank.full_name} High"
        elif category == Category.PAIR:
            return f"Pair of {hand.pair_rank.plural_name}"
        elif category == Category.TWO_PAIR:
            high, low = hand.two_pair_ranks
            return f"Two Pair, {high.plural_name} and {low.plural_name}"
        elif category == Category.THREE_OF_A_KIND:
            return f"Three {hand.three_rank.plural_name}"
        elif category == Category.STRAIGHT:
            return f"{hand.straight_high.full_name}-high Straight"
        elif category == Category.FLUSH:
            return f"{hand.high_card.rank.full_name}-high Flush"
        elif category == Category.FULL_HOUSE:
            three, pair = hand.full_house_ranks
            return f"Full House, {three.plural_name} over {pair.plural_name}"
        elif category == Category.FOUR_OF_A_KIND:
            return f"Four {hand.four_rank.plural_name}"
        elif category == Category.STRAIGHT_FLUSH:
            return f"{hand.straight_high.full_name}-high Straight Flush"

        # Default to basic description if no detailed version available
        return category.display_name
