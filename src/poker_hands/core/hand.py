"""Five-card hand implementation."""

import logging
from typing import Iterable, Iterator

from .card import Card, InvalidCardCode, Rank

logger = logging.getLogger(__name__)

HAND_SIZE = 5


class InvalidHandSize(ValueError):
    """Exception raised when a hand does not hold exactly five cards."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"A hand requires exactly {HAND_SIZE} cards, got {size}")


class Hand:
    """
    A five-card poker hand.

    Hands are immutable: the cards are fixed at construction and kept in the
    order they were given.

    Attributes:
        cards: Tuple of the five cards in the hand
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]):
        """
        Initialize a hand.

        Args:
            cards: The five cards making up the hand

        Raises:
            InvalidHandSize: If there are not exactly five cards
        """
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandSize(len(cards))
        self._cards = cards

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self._cards)

    def ranks(self) -> list[Rank]:
        """Ranks of the cards, highest first."""
        return sorted((card.rank for card in self._cards), reverse=True)

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """
        Create a Hand from a string representation.

        Args:
            hand_str: Whitespace separated card codes (e.g., "AS AH 2H AD AC").
                      Each card is 2 characters: rank (2-9, T, J, Q, K, A)
                      followed by suit (S, H, D, C).

        Returns:
            Hand instance with the parsed cards

        Raises:
            InvalidCardCode: If any card code is malformed
            InvalidHandSize: If the string does not hold exactly five cards
        """
        cards = []
        for i, card_str in enumerate(hand_str.split()):
            try:
                card = Card.from_string(card_str)
            except InvalidCardCode as e:
                raise InvalidCardCode(
                    card_str, f"invalid card at position {i + 1} in hand '{hand_str}'"
                ) from e
            cards.append(card)

        hand = cls(cards)
        logger.debug(f"Created hand from string '{hand_str}': {hand}")
        return hand

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(self._cards)

    def __str__(self) -> str:
        """Card codes separated by single spaces."""
        return ' '.join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand('{self}')"
