"""Trick bookkeeping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .cards import Card, Suit
from .exceptions import InconsistentTrickError
from .rules import RulesConfig
from .state import Seat, table_order

__all__ = ["Trick"]

logger = logging.getLogger(__name__)


@dataclass
class Trick:
    """One round of plays, one card per seat, in play order."""

    lead: Seat
    trumps: Optional[Suit] = None
    seats: int = 4
    plays: List[Tuple[Seat, Card]] = field(default_factory=list)

    def __post_init__(self) -> None:
        try:
            table_order(self.lead, self.seats)
        except ValueError as exc:
            raise InconsistentTrickError(str(exc)) from exc

    def __repr__(self) -> str:  # pragma: no cover - trivial
        cards = ", ".join(f"{seat.value}:{card!r}" for seat, card in self.plays)
        return f"Trick(lead={self.lead.name}, trumps={self.trumps}, plays=[{cards}])"

    @classmethod
    def start(cls, lead: Seat, trumps: Optional[Suit], rules: RulesConfig) -> "Trick":
        """Open an empty trick sized for the configured table."""

        return cls(lead=lead, trumps=trumps, seats=rules.table.seats)

    @property
    def lead_seat(self) -> Seat:
        return self.lead

    @property
    def lead_suit(self) -> Optional[Suit]:
        """Suit of the lead card, or ``None`` before the lead has played."""

        card = self.card_played_by(self.lead)
        return card.suit if card is not None else None

    @property
    def order(self) -> List[Seat]:
        """Seats in the order they are due to play."""

        return table_order(self.lead, self.seats)

    def card_played_by(self, seat: Seat) -> Optional[Card]:
        for played_seat, card in self.plays:
            if played_seat == seat:
                return card
        return None

    def cards_played(self) -> List[Card]:
        """Return the cards played so far, in play order."""

        return [card for _, card in self.plays]

    def expected_seat(self) -> Optional[Seat]:
        """Return the seat due to play next, or ``None`` once complete."""

        if self.is_complete():
            return None
        return self.order[len(self.plays)]

    def is_complete(self) -> bool:
        return len(self.plays) >= self.seats

    def play(self, seat: Seat, card: Card) -> None:
        """Record ``card`` as played by ``seat``."""

        if self.is_complete():
            msg = f"Trick already holds {self.seats} cards"
            raise InconsistentTrickError(msg)
        if seat not in self.order:
            msg = f"{seat!r} is not seated at a {self.seats}-seat table"
            raise InconsistentTrickError(msg)
        if self.card_played_by(seat) is not None:
            msg = f"{seat!r} has already played to this trick"
            raise InconsistentTrickError(msg)
        self.plays.append((seat, card))
        if self.is_complete():
            logger.debug("Trick complete: %r", self)

    def winner(self) -> Seat:
        """Determine the winner of a complete trick."""

        if not self.is_complete():
            msg = f"Trick has {len(self.plays)} of {self.seats} cards"
            raise InconsistentTrickError(msg)
        lead_suit = self.lead_suit
        best_seat, best_card = self.plays[0]
        for seat, card in self.plays[1:]:
            if _is_better(card, best_card, lead_suit, self.trumps):
                best_seat, best_card = seat, card
        return best_seat


def _is_better(candidate: Card, current: Card, lead_suit: Optional[Suit], trump: Optional[Suit]) -> bool:
    """Compare two cards to identify the winner."""

    if trump is not None and candidate.suit == trump:
        if current.suit != trump:
            return True
        return candidate.rank.ordinal > current.rank.ordinal
    if current.suit == trump and candidate.suit != trump:
        return False
    if candidate.suit != lead_suit:
        return False
    if current.suit != lead_suit:
        return True
    return candidate.rank.ordinal > current.rank.ordinal
