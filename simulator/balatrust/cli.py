"""Command-line entry point.

Usage:
    balatrust score A♠ A♦ 4♣ 7♥ 9♥ -a "Jolly Joker" -a "The Duo"
    balatrust score "Q♠ Q♣ Q♥ 7♥ 7♦" --boss "The Goad" --ante 2
    balatrust blind boss 3 --seed 7
    balatrust abilities
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional

from .enums import BlindType, ANTES
from .cards import parse_cards, format_cards
from .abilities import AbilitySlots, ABILITY_FACTORIES
from .blinds import Blind, BOSS_ABILITIES
from .rounds import Round, RoundStatus
from .config import Settings, configure_logging
from .play_log import PlayLogger
from .errors import BalatrustError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="balatrust", description="Poker hand scoring rules engine")
    sub = parser.add_subparsers(dest="command", required=True)

    p_score = sub.add_parser("score", help="Classify and score played cards")
    p_score.add_argument("cards", nargs="+", help="cards, e.g. 'A♠ A♦ 4♣' or Ah Ad 4c")
    p_score.add_argument("-a", "--ability", action="append", default=[],
                         help="held ability by name, in firing order (repeatable)")
    p_score.add_argument("--boss", help="boss debuff to apply, e.g. 'The Goad'")
    p_score.add_argument("--ante", type=int, default=1, help="ante for the blind target (default 1)")
    p_score.add_argument("--run-id", type=int, default=0, help="record the play under this run id")

    p_blind = sub.add_parser("blind", help="Show the blind for a type and ante")
    p_blind.add_argument("type", choices=[t.value.lower() for t in BlindType])
    p_blind.add_argument("ante", type=int)
    p_blind.add_argument("--seed", type=int, default=None, help="seed for boss selection")

    sub.add_parser("abilities", help="List registered abilities and boss debuffs")
    return parser


def _cmd_score(args, settings: Settings) -> int:
    cards = parse_cards(" ".join(args.cards))
    slots = AbilitySlots(args.ability, strict=settings.strict_abilities)

    if args.boss:
        base = Blind.create(BlindType.BOSS, args.ante, boss=args.boss)
    else:
        base = Blind.create(BlindType.SMALL, args.ante)
    round_ = Round(blind=base)
    result = round_.play(cards, slots)

    scoring = [cards[i] for i in result.scoring_indices]
    print(f"Blind:     {base}")
    print(f"Played:    {format_cards(cards)}")
    if len(slots):
        print(f"Abilities: {', '.join(slots.names())}")
    print(f"Hand type: {result.hand_type.value}")
    print(f"Scoring:   {format_cards(scoring)} {list(result.scoring_indices)}")
    print(f"Score:     {result.chips} x {result.mult} = {result.total}")
    print(f"Blind {'beaten' if round_.status == RoundStatus.WON else 'not beaten'} "
          f"({round_.score}/{base.score})")

    if args.run_id:
        play_logger = PlayLogger(args.run_id, settings)
        play_logger.ensure_table()
        play_logger.log_blind(base)
        play_logger.log_play(round_, cards, result, slots)
    return 0


def _cmd_blind(args) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    blind = Blind.create(BlindType(args.type.capitalize()), args.ante, rng=rng)
    print(blind)
    return 0


def _cmd_abilities() -> int:
    print("Abilities:")
    for name, factory in ABILITY_FACTORIES.items():
        print(f"  {name:<18} {factory().description}")
    print("\nBoss debuffs:")
    for name, boss in BOSS_ABILITIES.items():
        print(f"  {name:<18} {boss.description}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    settings = Settings.from_env()
    configure_logging(settings)
    parser = _build_parser()
    args = parser.parse_args(argv)

    ante = getattr(args, "ante", None)
    if ante is not None and not 0 <= ante < len(ANTES):
        print(f"error: ante out of range (0-{len(ANTES) - 1})", file=sys.stderr)
        return 2

    try:
        if args.command == "score":
            return _cmd_score(args, settings)
        if args.command == "blind":
            return _cmd_blind(args)
        return _cmd_abilities()
    except BalatrustError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
