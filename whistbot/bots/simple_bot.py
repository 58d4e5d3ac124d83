"""Simple computer player.

Plays the highest card available when the trick can still be won, otherwise
discards the lowest card available. When it is the last seat to play and can
win, it plays the least card needed to win.

The policy only looks at the current trick and its own hand; it keeps no
state between decisions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..engine.cards import Card, sort_cards
from ..engine.exceptions import InconsistentTrickError, InvalidHandError
from ..engine.hand import Hand
from ..engine.rules import RulesConfig, load_rules
from ..engine.state import Player, Seat
from ..engine.trick import Trick
from .base_bot import BotBase

__all__ = ["SimpleBot", "choose_card", "lowest_card", "highest_by_rank"]

logger = logging.getLogger(__name__)


@dataclass
class SimpleBot(BotBase):
    """Greedy one-trick lookahead player."""

    name: str = "simple"
    rules: RulesConfig = field(default_factory=load_rules)

    def select_card(self, player: Player, trick: Trick) -> Card:
        return choose_card(player.hand, trick, player.seat, self.rules)


def choose_card(hand: Hand, trick: Trick, seat: Seat, rules: Optional[RulesConfig] = None) -> Card:
    """Return the card ``seat`` should play from ``hand`` to ``trick``.

    Neither ``hand`` nor ``trick`` is modified. The returned card is always
    in ``hand`` and follows the lead suit whenever ``hand`` holds it.

    Raises:
        InvalidHandError: ``hand`` is empty.
        InconsistentTrickError: ``trick`` cannot be waiting on ``seat``.
    """

    cfg = rules or RulesConfig()
    if len(hand) == 0:
        msg = f"{seat!r} has no cards to play"
        raise InvalidHandError(msg)
    _check_trick(trick, seat, cfg)

    if seat == trick.lead_seat:
        card = _lead(hand, trick)
        logger.debug("%s leads %r (trumps=%s)", seat.name, card, trick.trumps)
        return card

    last_to_play = len(trick.plays) == trick.seats - 1
    matches_lead = sort_cards(hand.matching(trick.lead_suit))
    if matches_lead:
        card = _follow_suit(matches_lead, trick, last_to_play)
        logger.debug("%s follows with %r (last=%s)", seat.name, card, last_to_play)
    else:
        card = _cannot_follow(hand, trick, last_to_play)
        logger.debug("%s cannot follow, plays %r (last=%s)", seat.name, card, last_to_play)
    return card


def _check_trick(trick: Trick, seat: Seat, rules: RulesConfig) -> None:
    if trick.seats != rules.table.seats:
        msg = f"Trick is sized for {trick.seats} seats but the table has {rules.table.seats}"
        raise InconsistentTrickError(msg)
    plays = len(trick.plays)
    if plays >= trick.seats:
        msg = f"Trick already holds {plays} of {trick.seats} cards"
        raise InconsistentTrickError(msg)
    played_by = [played_seat for played_seat, _ in trick.plays]
    if len(set(played_by)) != plays:
        msg = f"A seat played twice to {trick!r}"
        raise InconsistentTrickError(msg)
    if seat in played_by:
        msg = f"{seat!r} has already played to {trick!r}"
        raise InconsistentTrickError(msg)
    if rules.trick_rules.check_turn_order:
        order = trick.order
        if seat not in order:
            msg = f"{seat!r} is not seated at a {trick.seats}-seat table"
            raise InconsistentTrickError(msg)
        if played_by != order[:plays]:
            msg = f"Plays are out of turn: {trick!r}"
            raise InconsistentTrickError(msg)
        if order[plays] != seat:
            msg = f"{seat!r} is not due to play; expected {order[plays]!r}"
            raise InconsistentTrickError(msg)
    if seat != trick.lead_seat and trick.lead_suit is None:
        msg = f"{trick.lead_seat!r} has not led yet"
        raise InconsistentTrickError(msg)


def _lead(hand: Hand, trick: Trick) -> Card:
    trump_cards = hand.matching(trick.trumps)
    if trump_cards:
        return max(trump_cards)
    # Rank first, higher suit breaks ties.
    return max(hand, key=lambda card: (card.rank.ordinal, card.suit.ordinal))


def _follow_suit(matches_lead: List[Card], trick: Trick, last_to_play: bool) -> Card:
    """Beat the best card of the lead suit if possible, else throw the lowest.

    ``matches_lead`` is sorted by ascending rank.
    """

    lead_card = trick.card_played_by(trick.lead_seat)
    best_played = max(
        (card for card in trick.cards_played() if card.suit == lead_card.suit),
        key=lambda card: card.rank.ordinal,
        default=lead_card,
    )
    best_owned = best_played
    for card in matches_lead:
        if card.rank.ordinal > best_owned.rank.ordinal:
            best_owned = card
            # Ascending scan: the first winner is the cheapest one.
            if last_to_play:
                break
    if best_owned != best_played:
        return best_owned
    return matches_lead[0]


def _cannot_follow(hand: Hand, trick: Trick, last_to_play: bool) -> Card:
    matches_trump = sort_cards(hand.matching(trick.trumps))
    if not matches_trump:
        return lowest_card(hand)

    trick_trump_high = highest_by_rank(card for card in trick.cards_played() if card.suit == trick.trumps)
    hand_trump_high = matches_trump[-1]
    if trick_trump_high is not None and trick_trump_high.rank.ordinal > hand_trump_high.rank.ordinal:
        return lowest_card(hand)
    if not last_to_play:
        return hand_trump_high
    if trick_trump_high is None:
        return matches_trump[0]
    for card in matches_trump:
        if card.rank.ordinal > trick_trump_high.rank.ordinal:
            return card
    # Only reachable when the hand ties the played trump.
    return lowest_card(hand)


def lowest_card(cards: Iterable[Card]) -> Card:
    """Return the lowest card in natural order."""

    return min(cards)


def highest_by_rank(cards: Iterable[Card]) -> Optional[Card]:
    """Return the highest-ranked card, the first one seen on ties, or ``None``."""

    return max(cards, key=lambda card: card.rank.ordinal, default=None)
