"""Fixture helpers for tests."""

from __future__ import annotations

from typing import Optional, Tuple

from ...engine.cards import Card, Rank, Suit
from ...engine.hand import Hand
from ...engine.state import Seat
from ...engine.trick import Trick


def card(text: str) -> Card:
    """Parse a short card name such as ``"Q♠"`` or ``"10♥"``."""

    return Card(Suit(text[-1]), Rank(text[:-1]))


def hand(*texts: str) -> Hand:
    return Hand.of(card(text) for text in texts)


def trick(lead: Seat, trumps: Optional[Suit], *plays: Tuple[Seat, str], seats: int = 4) -> Trick:
    """Build a trick from ``(seat, card text)`` pairs in play order."""

    result = Trick(lead=lead, trumps=trumps, seats=seats)
    for seat, text in plays:
        result.play(seat, card(text))
    return result
