"""Action utilities for the whistbot engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .cards import Card, sort_cards
from .exceptions import InvalidActionError
from .hand import Hand
from .state import Seat
from .trick import Trick

__all__ = ["ActionMask", "legal_cards", "mask_playable_cards"]


@dataclass
class ActionMask:
    """Binary mask describing which actions are available."""

    values: List[int]

    def __post_init__(self) -> None:
        if any(val not in {0, 1} for val in self.values):
            msg = "Action masks must contain only 0 or 1 entries"
            raise ValueError(msg)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ActionMask(values={self.values})"

    def as_numpy(self) -> np.ndarray:
        """Return the mask as a numpy array."""

        return np.array(self.values, dtype=np.int8)


def legal_cards(hand: Hand, trick: Trick, seat: Seat) -> List[Card]:
    """Return the cards ``seat`` may play to ``trick``, in natural order.

    A following seat that holds the lead suit must play it.
    """

    if seat != trick.lead_seat:
        following = hand.matching(trick.lead_suit)
        if following:
            return sort_cards(following)
    return sort_cards(hand)


def mask_playable_cards(hand: Iterable[Card], legal: Iterable[Card]) -> ActionMask:
    """Create an action mask for cards that can legally be played."""

    legal_set = set(legal)
    mask = [1 if card in legal_set else 0 for card in hand]
    if not any(mask):
        raise InvalidActionError("No legal cards available")
    return ActionMask(values=mask)
