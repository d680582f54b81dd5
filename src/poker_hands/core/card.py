"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, IntEnum


class InvalidCardCode(ValueError):
    """Exception raised when a card code cannot be parsed."""

    def __init__(self, code: str, reason: str = "invalid card code"):
        self.code = code
        super().__init__(f"{reason}: {code!r}")


class Suit(Enum):
    """Card suits."""
    SPADES = 'S'
    HEARTS = 'H'
    DIAMONDS = 'D'
    CLUBS = 'C'

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """Card ranks, valued 2 (deuce) through 14 (ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def code(self) -> str:
        """Single character used in card codes ('T' for ten)."""
        return _CODE_BY_RANK[self]

    @property
    def full_name(self) -> str:
        """Name as used in hand descriptions, e.g. 'Ace'."""
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        """Plural name, e.g. 'Aces' or 'Sixes'."""
        if self is Rank.SIX:
            return 'Sixes'
        return f"{self.full_name}s"

    def __str__(self) -> str:
        return self.code


_RANK_BY_CODE = {
    '2': Rank.TWO,
    '3': Rank.THREE,
    '4': Rank.FOUR,
    '5': Rank.FIVE,
    '6': Rank.SIX,
    '7': Rank.SEVEN,
    '8': Rank.EIGHT,
    '9': Rank.NINE,
    'T': Rank.TEN,
    'J': Rank.JACK,
    'Q': Rank.QUEEN,
    'K': Rank.KING,
    'A': Rank.ACE,
}
_CODE_BY_RANK = {rank: code for code, rank in _RANK_BY_CODE.items()}
_SUIT_BY_CODE = {suit.value: suit for suit in Suit}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values; two cards are equal when rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (spades, hearts, diamonds, clubs)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'AS' for Ace of spades."""
        return f"{self.rank.code}{self.suit.value}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'AS' for Ace of spades

        Returns:
            Card instance

        Raises:
            InvalidCardCode: If string format is invalid
        """
        if len(card_str) != 2:
            raise InvalidCardCode(card_str, "card code must be two characters")

        rank_str, suit_str = card_str[0], card_str[1]
        if rank_str not in _RANK_BY_CODE:
            raise InvalidCardCode(card_str, "invalid rank")
        if suit_str not in _SUIT_BY_CODE:
            raise InvalidCardCode(card_str, "invalid suit")

        return cls(rank=_RANK_BY_CODE[rank_str], suit=_SUIT_BY_CODE[suit_str])
