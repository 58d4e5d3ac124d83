"""Human-driven player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from ..engine.actions import legal_cards
from ..engine.cards import Card
from ..engine.exceptions import InvalidActionError, InvalidHandError
from ..engine.state import Player
from ..engine.trick import Trick
from .base_bot import BotBase

__all__ = ["HumanBot", "Chooser"]

Chooser = Callable[[List[Card], Trick], Card]


@dataclass
class HumanBot(BotBase):
    """Defers the decision to ``chooser``, typically a UI prompt.

    The chooser receives the legal cards in natural order and the trick.
    """

    chooser: Chooser
    name: str = "human"

    def select_card(self, player: Player, trick: Trick) -> Card:
        if len(player.hand) == 0:
            msg = f"{player.seat!r} has no cards to play"
            raise InvalidHandError(msg)
        options = legal_cards(player.hand, trick, player.seat)
        card = self.chooser(options, trick)
        if card not in options:
            msg = f"{card!r} is not a legal play; choose one of {options}"
            raise InvalidActionError(msg)
        return card
