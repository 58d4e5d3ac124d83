"""Bot interface for whistbot."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..engine.cards import Card
from ..engine.state import Player
from ..engine.trick import Trick

__all__ = ["BotBase"]


class BotBase(ABC):
    """Anything that can produce the next card for a seat given a trick."""

    name: str = "bot"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return self.name

    @abstractmethod
    def select_card(self, player: Player, trick: Trick) -> Card:
        """Return the card ``player`` plays to ``trick``."""

    def reset(self) -> None:
        """Reset internal state if any."""
