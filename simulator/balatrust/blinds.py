"""Blind definitions and boss debuffs.

A blind is the per-round challenge: a score target taken from the ante table
and, for boss blinds, one debuff that zeroes matching cards during scoring.
Only one debuff is active at a time.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Optional

from .enums import BlindType, Suit, ANTES
from .cards import Card

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BossAbility:
    """A boss debuff: cards of `debuff_suit` contribute nothing when scored."""
    name: str                   # e.g. "The Goad"
    description: str            # Player-facing description
    debuff_suit: Suit

    def is_card_debuffed(self, card: Card) -> bool:
        return card.suit == self.debuff_suit


# ============================================================
# Boss Ability Registry
# ============================================================

BOSS_ABILITIES: dict[str, BossAbility] = {}

DEFAULT_BOSS_ABILITY = "The Club"


def _register(name: str, desc: str, debuff_suit: Suit) -> BossAbility:
    b = BossAbility(name=name, description=desc, debuff_suit=debuff_suit)
    BOSS_ABILITIES[name] = b
    return b


_register("The Club", "All Club cards are debuffed", Suit.CLUBS)
_register("The Goad", "All Spade cards are debuffed", Suit.SPADES)
_register("The Window", "All Diamond cards are debuffed", Suit.DIAMONDS)
_register("The Head", "All Heart cards are debuffed", Suit.HEARTS)


def create_boss_ability(name: str) -> BossAbility:
    """Look up a boss ability by name, falling back to the default boss."""
    ability = BOSS_ABILITIES.get(name)
    if ability is None:
        logger.warning("unknown boss ability %r, using %s", name, DEFAULT_BOSS_ABILITY)
        ability = BOSS_ABILITIES[DEFAULT_BOSS_ABILITY]
    return ability


def select_boss_ability(rng: Optional[Any] = None) -> BossAbility:
    """Pick a boss ability uniformly. `rng` is anything with a choice() method."""
    pool = list(BOSS_ABILITIES)
    chooser = rng if rng is not None else random
    return create_boss_ability(chooser.choice(pool))


# ============================================================
# Blind
# ============================================================

@dataclass(frozen=True)
class Blind:
    """The active challenge for one round."""
    name: str
    score: int
    description: str = ""
    boss_ability: Optional[BossAbility] = None
    blind_type: BlindType = BlindType.SMALL
    ante: int = 1

    @classmethod
    def create(cls, blind_type: BlindType, ante: int,
               rng: Optional[Any] = None, ante_table: tuple[int, ...] = ANTES,
               boss: Optional[str] = None) -> "Blind":
        """Build the blind for `blind_type` at `ante`.

        Small takes the table value, Big 1.5x rounded down, Boss 2x plus a
        randomly chosen debuff, or the one named by `boss`. An ante outside
        the table is a caller error and raises IndexError.
        """
        if ante < 0:
            raise IndexError(f"ante {ante} out of range")
        base = ante_table[ante]
        if blind_type == BlindType.SMALL:
            return cls(name=blind_type.label, score=base,
                       blind_type=blind_type, ante=ante)
        if blind_type == BlindType.BIG:
            return cls(name=blind_type.label, score=base * 3 // 2,
                       blind_type=blind_type, ante=ante)
        ability = create_boss_ability(boss) if boss else select_boss_ability(rng)
        return cls(
            name=f"{blind_type.label} - {ability.name}",
            score=base * 2,
            description=ability.description,
            boss_ability=ability,
            blind_type=blind_type,
            ante=ante,
        )

    def is_card_debuffed(self, card: Card) -> bool:
        return self.boss_ability is not None and self.boss_ability.is_card_debuffed(card)

    def __str__(self) -> str:
        if self.description:
            return f"{self.name} ({self.score} chips): {self.description}"
        return f"{self.name} ({self.score} chips)"
