"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.core.hand import Hand


class Category(IntEnum):
    """Hand categories ordered from weakest to strongest."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        """Name as shown to players, e.g. 'Three of a Kind'."""
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    Category.HIGH_CARD: 'High Card',
    Category.PAIR: 'Pair',
    Category.TWO_PAIR: 'Two Pair',
    Category.THREE_OF_A_KIND: 'Three of a Kind',
    Category.STRAIGHT: 'Straight',
    Category.FLUSH: 'Flush',
    Category.FULL_HOUSE: 'Full House',
    Category.FOUR_OF_A_KIND: 'Four of a Kind',
    Category.STRAIGHT_FLUSH: 'Straight Flush',
}


class FullHouseRanks(NamedTuple):
    """Ranks making up a full house."""
    three: Rank
    pair: Rank


@dataclass(frozen=True)
class EvaluatedHand:
    """
    Result of evaluating a five-card hand.

    Attributes:
        hand: The hand that was evaluated
        category: Hand category (straight flush, four of a kind, ...)
        high_card: Highest ranked card in the hand
        pair_rank: Rank of the pair (higher pair for two pair)
        three_rank: Rank of the three of a kind
        four_rank: Rank of the four of a kind
        two_pair_ranks: Both pair ranks, higher first
        full_house_ranks: Three and pair ranks of a full house
        straight_ranks: Straight ranks in ascending order
        flush_suit: Common suit of a flush
    """
    hand: Hand
    category: Category
    high_card: Card
    pair_rank: Optional[Rank] = None
    three_rank: Optional[Rank] = None
    four_rank: Optional[Rank] = None
    two_pair_ranks: Optional[tuple[Rank, Rank]] = None
    full_house_ranks: Optional[FullHouseRanks] = None
    straight_ranks: Optional[tuple[Rank, ...]] = None
    flush_suit: Optional[Suit] = None

    @property
    def straight_high(self) -> Optional[Rank]:
        """Top card of the straight, if any."""
        if not self.straight_ranks:
            return None
        return self.straight_ranks[-1]

    @property
    def ranks_descending(self) -> tuple[Rank, ...]:
        """All five ranks, highest first."""
        return tuple(self.hand.ranks())

    def __str__(self) -> str:
        return f"{self.category.display_name} ({self.hand})"
