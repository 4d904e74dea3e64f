"""
Playing card element type used by the demo and the tests.

Cards order by suit first (Clubs < Diamonds < Hearts < Spades) and by rank
within a suit (Two < ... < Ace), so a full deck inserted into a tree comes
back out suit by suit.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List

from src.common.comparable import ComparablePlus


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Suit(IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


DECK_COUNT = len(Rank) * len(Suit)


@dataclass(frozen=True, eq=True)
class Card(ComparablePlus):
    """
    A playing card.

    Attributes:
        rank: Face value of the card.
        suit: Suit of the card.
    """
    rank: Rank
    suit: Suit

    @classmethod
    def from_ordinals(cls, rank: int, suit: int) -> "Card":
        """Build a card from zero-based rank and suit ordinals."""
        return cls(Rank(rank), Suit(suit))

    def compare_to(self, other: "Card") -> int:
        if self.suit == other.suit:
            return self.rank - other.rank
        return self.suit - other.suit

    def __str__(self) -> str:
        return f"{self.rank.name.title()} of {self.suit.name.title()}"


def full_deck() -> List[Card]:
    """Return the 52 cards in ascending order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]
