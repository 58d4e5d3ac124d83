"""Tests for legal play helpers."""

from __future__ import annotations

import numpy as np
import pytest

from ...engine.actions import legal_cards, mask_playable_cards
from ...engine.cards import Suit, sort_cards
from ...engine.exceptions import InvalidActionError
from ...engine.state import Seat
from ..fixtures.hands import card, hand, trick


def test_follower_must_follow_suit() -> None:
    t = trick(Seat.NORTH, Suit.SPADES, (Seat.NORTH, "5♣"))
    assert legal_cards(hand("A♠", "9♣", "2♣"), t, Seat.EAST) == [card("2♣"), card("9♣")]


def test_void_follower_may_play_anything() -> None:
    t = trick(Seat.NORTH, Suit.SPADES, (Seat.NORTH, "5♣"))
    assert legal_cards(hand("A♠", "2♥"), t, Seat.EAST) == [card("2♥"), card("A♠")]


def test_leader_may_play_anything() -> None:
    t = trick(Seat.SOUTH, None)
    cards = hand("A♠", "2♥", "3♣")
    assert legal_cards(cards, t, Seat.SOUTH) == sort_cards(cards)


def test_mask_playable_cards() -> None:
    cards = [card("2♥"), card("9♣"), card("A♠")]
    mask = mask_playable_cards(cards, [card("9♣")])
    assert mask.values == [0, 1, 0]
    assert mask.as_numpy().dtype == np.int8


def test_mask_without_legal_cards_raises() -> None:
    with pytest.raises(InvalidActionError):
        mask_playable_cards([card("2♥")], [card("9♣")])


def test_mask_values_validated() -> None:
    from ...engine.actions import ActionMask

    with pytest.raises(ValueError):
        ActionMask(values=[0, 2])
