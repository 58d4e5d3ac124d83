"""whistbot package."""

from __future__ import annotations

from .bots.simple_bot import SimpleBot, choose_card
from .engine.cards import Card, Rank, Suit
from .engine.hand import Hand
from .engine.rules import load_rules
from .engine.state import Player, Seat
from .engine.trick import Trick

__all__ = ["Card", "Hand", "Player", "Rank", "Seat", "SimpleBot", "Suit", "Trick", "choose_card", "load_rules"]
