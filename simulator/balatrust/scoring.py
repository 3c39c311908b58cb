"""Scoring engine — the chips/mult trigger pipeline.

Pipeline:
1. Base chips & mult from the hand type
2. on_play hooks (held order)
3. Per scoring card (ascending index): skip if debuffed by the blind,
   else + face value, then on_score hooks (held order)
4. end_of_round hooks (held order)
5. Return (chips, mult); the caller multiplies them
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .enums import HandType
from .cards import Card
from .hands import classify
from .blinds import Blind
from .abilities import Ability

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Accumulator, shared by every hook of one play
# ---------------------------------------------------------------------------

class ScoreAccumulator:
    __slots__ = ("chips", "mult")

    def __init__(self, chips: int, mult: int):
        self.chips = chips
        self.mult = mult

    def add_chips(self, n: int):
        self.chips += n

    def add_mult(self, n: int):
        self.mult += n

    def x_mult(self, n: int):
        self.mult *= n

    def as_tuple(self) -> tuple[int, int]:
        return self.chips, self.mult

    def __repr__(self) -> str:
        return f"ScoreAccumulator(chips={self.chips}, mult={self.mult})"


@dataclass(frozen=True)
class ScoreResult:
    """Result of scoring a hand."""
    hand_type: HandType
    chips: int
    mult: int
    scoring_indices: tuple[int, ...]

    @property
    def total(self) -> int:
        return self.chips * self.mult

    def __str__(self) -> str:
        return f"{self.hand_type.value}: {self.chips} × {self.mult} = {self.total}"


# ---------------------------------------------------------------------------
# Main scoring function
# ---------------------------------------------------------------------------

def score(
    cards: Sequence[Card],
    hand_type: HandType,
    scoring_indices: Iterable[int],
    blind: Optional[Blind] = None,
    abilities: Iterable[Ability] = (),
) -> tuple[int, int]:
    """Score a classified hand.

    Args:
        cards: The played cards.
        hand_type: Category returned by classify().
        scoring_indices: Indices into `cards` that score; repeats count once.
        blind: Active blind; its debuff zeroes matching cards.
        abilities: Held abilities in firing order.

    Returns:
        (chips, mult). An out-of-range index raises IndexError.
    """
    played = tuple(cards)
    scoring = tuple(sorted(set(scoring_indices)))
    held = list(abilities)

    acc = ScoreAccumulator(*hand_type.base)
    logger.debug("%s gives %d x %d", hand_type.value, acc.chips, acc.mult)

    for ability in held:
        ability.on_play(acc, played, scoring)

    for i in scoring:
        card = played[i]
        if blind is not None and blind.is_card_debuffed(card):
            logger.debug("%s is debuffed", card)
            continue
        acc.add_chips(card.chip_value)
        logger.debug("%s scores %d", card, card.chip_value)
        for ability in held:
            ability.on_score(acc, card)

    for ability in held:
        ability.end_of_round(acc, played, scoring)

    return acc.as_tuple()


def evaluate_play(
    cards: Sequence[Card],
    blind: Optional[Blind] = None,
    abilities: Iterable[Ability] = (),
) -> ScoreResult:
    """Classify then score a play."""
    hand_type, scoring_indices = classify(cards)
    chips, mult = score(cards, hand_type, scoring_indices, blind, abilities)
    return ScoreResult(
        hand_type=hand_type,
        chips=chips,
        mult=mult,
        scoring_indices=tuple(scoring_indices),
    )
