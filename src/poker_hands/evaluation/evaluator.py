"""Five-card hand classification."""
from collections import Counter
from typing import Iterable, Optional, Union
import logging

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.core.hand import Hand
from poker_hands.evaluation.types import Category, EvaluatedHand, FullHouseRanks

logger = logging.getLogger(__name__)


def _flush_suit(cards: Iterable[Card]) -> Optional[Suit]:
    """Return the common suit if all cards share one."""
    suits = {card.suit for card in cards}
    if len(suits) == 1:
        return suits.pop()
    return None


def _straight_ranks(cards: Iterable[Card]) -> Optional[tuple[Rank, ...]]:
    """
    Check if the ranks form a straight.

    Each rank, sorted ascending, must be exactly one more than its
    predecessor. The ace only plays high.

    Returns:
        The ranks in ascending order, or None if not a straight
    """
    ranks = sorted(card.rank for card in cards)
    for lower, higher in zip(ranks, ranks[1:]):
        if higher != lower + 1:
            return None
    return tuple(ranks)


def _find_group(ranks: Iterable[Rank], size: int, at_least: bool = False) -> Optional[Rank]:
    """
    Find the highest rank appearing exactly `size` times.

    Args:
        ranks: Ranks to search
        size: Multiplicity to look for
        at_least: Accept any multiplicity of `size` or more

    Returns:
        Matching rank, or None if no rank has that multiplicity
    """
    counts = Counter(ranks)
    matches = [
        rank for rank, count in counts.items()
        if count == size or (at_least and count > size)
    ]
    return max(matches) if matches else None


class HandEvaluator:
    """
    Classifies five-card hands.

    Evaluation is a pure function of the hand: every applicable category is
    collected and the strongest one is assigned.
    """

    def evaluate(self, hand: Union[Hand, str]) -> EvaluatedHand:
        """
        Evaluate a poker hand.

        Args:
            hand: Hand to evaluate, or its string representation

        Returns:
            EvaluatedHand with category and tie-break witnesses

        Raises:
            InvalidCardCode: If a string hand has a malformed card
            InvalidHandSize: If a string hand does not have five cards
        """
        if isinstance(hand, str):
            hand = Hand.from_string(hand)

        cards = hand.cards
        high_card = max(cards, key=lambda card: card.rank)
        flush_suit = _flush_suit(cards)
        straight_ranks = _straight_ranks(cards)

        if flush_suit and straight_ranks:
            return self._result(
                hand, Category.STRAIGHT_FLUSH, high_card,
                straight_ranks=straight_ranks, flush_suit=flush_suit,
            )

        ranks = [card.rank for card in cards]
        four_rank = _find_group(ranks, 4, at_least=True)
        if four_rank is not None:
            return self._result(
                hand, Category.FOUR_OF_A_KIND, high_card,
                four_rank=four_rank, flush_suit=flush_suit,
            )

        candidates = {Category.HIGH_CARD}
        witnesses = {}
        if flush_suit:
            candidates.add(Category.FLUSH)
            witnesses['flush_suit'] = flush_suit
        if straight_ranks:
            candidates.add(Category.STRAIGHT)
            witnesses['straight_ranks'] = straight_ranks

        three_rank = _find_group(ranks, 3)
        if three_rank is not None:
            witnesses['three_rank'] = three_rank
            remaining = [rank for rank in ranks if rank != three_rank]
            pair_rank = _find_group(remaining, 2)
            if pair_rank is not None:
                candidates.add(Category.FULL_HOUSE)
                witnesses['pair_rank'] = pair_rank
                witnesses['full_house_ranks'] = FullHouseRanks(three=three_rank, pair=pair_rank)
            else:
                candidates.add(Category.THREE_OF_A_KIND)
        else:
            pair_rank = _find_group(ranks, 2)
            if pair_rank is not None:
                witnesses['pair_rank'] = pair_rank
                remaining = [rank for rank in ranks if rank != pair_rank]
                second_pair = _find_group(remaining, 2)
                if second_pair is not None:
                    candidates.add(Category.TWO_PAIR)
                    witnesses['two_pair_ranks'] = (pair_rank, second_pair)
                else:
                    candidates.add(Category.PAIR)

        return self._result(hand, max(candidates), high_card, **witnesses)

    def _result(self, hand: Hand, category: Category, high_card: Card, **witnesses) -> EvaluatedHand:
        evaluated = EvaluatedHand(hand=hand, category=category, high_card=high_card, **witnesses)
        logger.debug(f"Evaluated '{hand}' as {category.display_name}")
        return evaluated


# Global evaluator instance
evaluator = HandEvaluator()


def evaluate(hand: Union[Hand, str]) -> EvaluatedHand:
    """Convenience function to evaluate a hand with the global evaluator."""
    return evaluator.evaluate(hand)
