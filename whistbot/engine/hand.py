"""Hand container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Set

from .cards import Card, Suit
from .exceptions import InvalidActionError

__all__ = ["Hand"]


@dataclass
class Hand:
    """Unordered collection of cards held by one seat."""

    cards: Set[Card] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.cards = set(self.cards)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Hand({sorted(self.cards)})"

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    @classmethod
    def of(cls, cards: Iterable[Card]) -> "Hand":
        """Build a hand from any iterable of cards."""

        return cls(cards=set(cards))

    def matching(self, suit: Optional[Suit]) -> Set[Card]:
        """Return the cards of ``suit``; no suit matches nothing."""

        if suit is None:
            return set()
        return {card for card in self.cards if card.suit == suit}

    def add(self, card: Card) -> None:
        """Add a dealt card to the hand."""

        if card in self.cards:
            msg = f"{card!r} is already in the hand"
            raise InvalidActionError(msg)
        self.cards.add(card)

    def remove(self, card: Card) -> None:
        """Remove a played card from the hand."""

        if card not in self.cards:
            msg = f"{card!r} is not in the hand"
            raise InvalidActionError(msg)
        self.cards.remove(card)
