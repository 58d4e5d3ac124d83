"""Card abstractions for the whistbot engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Iterable, List, Tuple

__all__ = ["Suit", "Rank", "Card", "DECK_SIZE", "create_deck", "sort_cards"]


class Suit(str, Enum):
    """Enumeration of the four suits, declared from lowest to highest."""

    HEARTS = "♥"
    CLUBS = "♣"
    DIAMONDS = "♦"
    SPADES = "♠"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Suit({self.value})"

    @property
    def ordinal(self) -> int:
        """Return the position of the suit in the fixed suit order."""

        return _SUIT_ORDINALS[self]


class Rank(str, Enum):
    """Enumeration of the ranks in order from lowest to highest."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Rank({self.value})"

    @property
    def ordinal(self) -> int:
        """Return the position of the rank in the fixed rank order."""

        return _RANK_ORDINALS[self]


_SUIT_ORDINALS = {suit: idx for idx, suit in enumerate(Suit)}
_RANK_ORDINALS = {rank: idx for idx, rank in enumerate(Rank)}

# Must exceed the number of ranks so that suit stays the primary key.
_SUIT_WEIGHT = 14

DECK_SIZE = len(Suit) * len(Rank)

_SUIT_NAMES = {
    Suit.HEARTS: "Hearts",
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.SPADES: "Spades",
}

_RANK_NAMES = {
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}


@total_ordering
@dataclass(frozen=True)
class Card:
    """Immutable representation of a single card.

    Cards compare in their natural order: suit first, then rank.
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            msg = f"Unknown suit: {self.suit!r}"
            raise ValueError(msg)
        if not isinstance(self.rank, Rank):
            msg = f"Unknown rank: {self.rank!r}"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"Card({self.rank.value}{self.suit.value})"

    def __str__(self) -> str:
        rank_name = _RANK_NAMES.get(self.rank, self.rank.value)
        return f"{rank_name} of {_SUIT_NAMES[self.suit]}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def sort_key(self) -> int:
        """Return the integer key of the natural order."""

        return self.suit.ordinal * _SUIT_WEIGHT + self.rank.ordinal


def create_deck() -> Tuple[Card, ...]:
    """Create a tuple representing the standard 52-card deck in natural order."""

    return tuple(Card(suit=suit, rank=rank) for suit in Suit for rank in Rank)


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Return cards sorted by suit then rank."""

    return sorted(cards)
