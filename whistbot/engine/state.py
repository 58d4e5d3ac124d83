"""Seat and player models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .hand import Hand

__all__ = ["Seat", "Player", "table_order"]


class Seat(str, Enum):
    """The four table positions, listed clockwise."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Seat({self.value})"

    def next(self) -> "Seat":
        """Return the seat to the left (clockwise)."""

        seats = list(Seat)
        return seats[(seats.index(self) + 1) % len(seats)]


def table_order(lead: Seat, seats: int = 4) -> List[Seat]:
    """Return the play order of a trick led by ``lead`` at a table of ``seats``.

    Tables smaller than four use the first ``seats`` positions clockwise from
    NORTH.
    """

    occupied = list(Seat)[:seats]
    if lead not in occupied:
        msg = f"{lead!r} is not seated at a {seats}-seat table"
        raise ValueError(msg)
    start = occupied.index(lead)
    return occupied[start:] + occupied[:start]


@dataclass
class Player:
    """A seat together with the hand it owns."""

    seat: Seat
    hand: Hand = field(default_factory=Hand)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Player(seat={self.seat.name}, cards={len(self.hand)})"
