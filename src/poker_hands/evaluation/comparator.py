"""Comparison of two evaluated poker hands."""
from enum import Enum
from typing import Optional, Sequence, Union
import logging

from poker_hands.core.card import Rank
from poker_hands.core.hand import Hand
from poker_hands.evaluation.evaluation_config import FullHouseTiebreak, RuleConfig, get_rule_config
from poker_hands.evaluation.evaluator import HandEvaluator
from poker_hands.evaluation.types import Category, EvaluatedHand

logger = logging.getLogger(__name__)

HandLike = Union[EvaluatedHand, Hand, str]


class Result(Enum):
    """Outcome of a comparison, from the first hand's point of view."""
    WIN = 1
    LOSS = 2
    TIE = 3

    def inverse(self) -> 'Result':
        """The same outcome seen from the other hand."""
        if self is Result.WIN:
            return Result.LOSS
        if self is Result.LOSS:
            return Result.WIN
        return Result.TIE

    def __str__(self) -> str:
        return self.name.capitalize()


def _compare_values(ours, theirs) -> Optional[Result]:
    """WIN/LOSS if the values differ, None if equal."""
    if ours > theirs:
        return Result.WIN
    if ours < theirs:
        return Result.LOSS
    return None


def compare_high_cards(ours: Sequence[Rank], theirs: Sequence[Rank]) -> Result:
    """
    Compare two rank sequences card by card, highest first.

    Both sequences must be sorted in descending order. The highest remaining
    card of each side is compared; on equality one card is consumed from
    each side and the rest are compared.

    Returns:
        WIN if ours is higher, LOSS if theirs is, TIE if both run out together
    """
    if not ours and not theirs:
        return Result.TIE
    if not theirs:
        return Result.WIN
    if not ours:
        return Result.LOSS

    result = _compare_values(ours[0], theirs[0])
    if result is not None:
        return result
    return compare_high_cards(ours[1:], theirs[1:])


class HandComparator:
    """
    Orders two poker hands.

    Hands are ordered by category first. Hands of the same category are
    ordered by that category's witnesses. Pairs, two pairs, flushes and
    high cards are then ordered by their highest cards.
    """

    def __init__(
        self,
        rules: Optional[RuleConfig] = None,
        evaluator: Optional[HandEvaluator] = None
    ):
        """
        Initialize comparator.

        Args:
            rules: Rule set to apply; the default rule set if omitted
            evaluator: Evaluator for hands passed as strings or Hands

        Raises:
            ValueError: If rules is omitted and the default rule set
                        (POKER_HANDS_RULES) names an unknown rule set
        """
        self.rules = rules or get_rule_config()
        self.evaluator = evaluator or HandEvaluator()

    def compare(self, hand1: HandLike, hand2: HandLike) -> Result:
        """
        Compare two poker hands.

        Args:
            hand1: First hand to compare
            hand2: Second hand to compare

        Returns:
            Result for hand1: WIN, LOSS or TIE
        """
        ours = self._evaluated(hand1)
        theirs = self._evaluated(hand2)

        if ours.category != theirs.category:
            result = Result.WIN if ours.category > theirs.category else Result.LOSS
        else:
            result = self._break_tie(ours, theirs)
            if result is None:
                result = compare_high_cards(ours.ranks_descending, theirs.ranks_descending)

        logger.debug(f"Compared {ours} with {theirs}: {result}")
        return result

    def _evaluated(self, hand: HandLike) -> EvaluatedHand:
        if isinstance(hand, EvaluatedHand):
            return hand
        return self.evaluator.evaluate(hand)

    def _break_tie(self, ours: EvaluatedHand, theirs: EvaluatedHand) -> Optional[Result]:
        """
        Apply the category specific tie-break.

        Returns:
            Result if decided, None to fall back to high cards
        """
        category = ours.category

        # Equal straights, quads and trips are ties; kickers are not consulted
        if category in (Category.STRAIGHT_FLUSH, Category.STRAIGHT):
            return _compare_values(ours.straight_high, theirs.straight_high) or Result.TIE
        elif category == Category.FOUR_OF_A_KIND:
            return _compare_values(ours.four_rank, theirs.four_rank) or Result.TIE
        elif category == Category.FULL_HOUSE:
            return self._full_house_tie_break(ours, theirs)
        elif category == Category.FLUSH:
            return None
        elif category == Category.THREE_OF_A_KIND:
            return _compare_values(ours.three_rank, theirs.three_rank) or Result.TIE
        elif category == Category.TWO_PAIR:
            return _compare_values(ours.two_pair_ranks, theirs.two_pair_ranks)
        elif category == Category.PAIR:
            return _compare_values(ours.pair_rank, theirs.pair_rank)
        elif category == Category.HIGH_CARD:
            return None

        raise ValueError(f"No tie-break for category {category}")

    def _full_house_tie_break(self, ours: EvaluatedHand, theirs: EvaluatedHand) -> Result:
        result = _compare_values(ours.full_house_ranks.three, theirs.full_house_ranks.three)
        if result is None and self.rules.full_house_tiebreak == FullHouseTiebreak.THREE_THEN_PAIR:
            result = _compare_values(ours.full_house_ranks.pair, theirs.full_house_ranks.pair)
        return result or Result.TIE


def compare(hand1: HandLike, hand2: HandLike) -> Result:
    """
    Convenience function to compare two hands under the default rule set.

    Raises:
        ValueError: If POKER_HANDS_RULES names an unknown rule set
    """
    return HandComparator().compare(hand1, hand2)
