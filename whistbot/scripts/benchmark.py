"""Simple benchmarking script."""

from __future__ import annotations

import argparse
import logging
import random
import time
from collections import Counter
from typing import Dict, List

from ..bots.simple_bot import SimpleBot
from ..engine.cards import Suit, create_deck
from ..engine.hand import Hand
from ..engine.rules import RulesConfig, load_rules
from ..engine.state import Player, Seat, table_order
from ..engine.trick import Trick

logger = logging.getLogger(__name__)


def deal(rng: random.Random, rules: RulesConfig) -> Dict[Seat, Player]:
    """Shuffle a deck and deal one hand per seated player."""

    deck = list(create_deck())
    rng.shuffle(deck)
    size = rules.table.hand_size
    seats = table_order(Seat.NORTH, rules.table.seats)
    return {
        seat: Player(seat=seat, hand=Hand.of(deck[idx * size : (idx + 1) * size]))
        for idx, seat in enumerate(seats)
    }


def play_trick(players: Dict[Seat, Player], bot: SimpleBot, trick: Trick) -> Seat:
    """Let ``bot`` play every seat in turn and return the winning seat."""

    for seat in trick.order:
        player = players[seat]
        card = bot.select_card(player, trick)
        player.hand.remove(card)
        trick.play(seat, card)
    return trick.winner()


def main(argv: List[str] | None = None) -> None:
    """Run benchmark deals and report decision throughput."""

    parser = argparse.ArgumentParser()
    parser.add_argument("--deals", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--rules", default=None, help="path to a rules YAML file")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rules = load_rules(args.rules)
    rng = random.Random(args.seed)
    bot = SimpleBot(rules=rules)
    trump_choices = [None, *Suit]
    wins: Counter = Counter()
    decisions = 0
    start = time.perf_counter()
    for _ in range(args.deals):
        players = deal(rng, rules)
        trick = Trick.start(rng.choice(list(players)), rng.choice(trump_choices), rules)
        wins[play_trick(players, bot, trick)] += 1
        decisions += len(trick.plays)
    duration = time.perf_counter() - start
    logger.info("Rules: %s", rules.model_dump())
    print(f"Made {decisions} decisions over {args.deals} deals in {duration:.2f}s")
    for seat in sorted(wins, key=list(Seat).index):
        print(f"{seat.name}: {wins[seat]} tricks")


if __name__ == "__main__":
    main()
