"""Random baseline bot."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

import numpy as np

from ..engine.actions import legal_cards, mask_playable_cards
from ..engine.cards import Card, sort_cards
from ..engine.exceptions import InvalidHandError
from ..engine.state import Player
from ..engine.trick import Trick
from .base_bot import BotBase

__all__ = ["RandomBot"]


@dataclass
class RandomBot(BotBase):
    """Randomly selects a legal card."""

    name: str = "random"
    rng: random.Random = field(default_factory=random.Random)

    def select_card(self, player: Player, trick: Trick) -> Card:
        """Choose a random card index among those allowed by the action mask."""

        if len(player.hand) == 0:
            msg = f"{player.seat!r} has no cards to play"
            raise InvalidHandError(msg)
        cards = sort_cards(player.hand)
        mask = mask_playable_cards(cards, legal_cards(player.hand, trick, player.seat)).as_numpy()
        index = self.rng.choice(np.flatnonzero(mask).tolist())
        return cards[index]
