"""Round bookkeeping — accumulates hand scores against the active blind.

Deck handling and input parsing live with the caller; a round only sees the
cards it is asked to score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from .enums import BlindType, HANDS_PER_ROUND, MAX_PLAYED_CARDS
from .cards import Card, format_cards
from .blinds import Blind
from .abilities import Ability
from .scoring import ScoreResult, evaluate_play
from .errors import InvalidPlayError

logger = logging.getLogger(__name__)


class RoundStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class Round:
    """One blind's worth of play."""
    blind: Blind
    hands_left: int = HANDS_PER_ROUND
    score: int = 0
    history: list[ScoreResult] = field(default_factory=list)

    @property
    def status(self) -> RoundStatus:
        if self.score >= self.blind.score:
            return RoundStatus.WON
        if self.hands_left <= 0:
            return RoundStatus.LOST
        return RoundStatus.IN_PROGRESS

    @property
    def remaining(self) -> int:
        return max(0, self.blind.score - self.score)

    def play(self, cards: Sequence[Card], abilities: Iterable[Ability] = ()) -> ScoreResult:
        """Score one played hand and add chips × mult to the round total."""
        if self.status != RoundStatus.IN_PROGRESS:
            raise InvalidPlayError(f"round is already {self.status.value}")
        if not 1 <= len(cards) <= MAX_PLAYED_CARDS:
            raise InvalidPlayError(
                f"must play between 1 and {MAX_PLAYED_CARDS} cards, got {len(cards)}"
            )

        result = evaluate_play(cards, self.blind, abilities)
        self.hands_left -= 1
        self.score += result.total
        self.history.append(result)
        logger.info("played %s -> %s (round %d/%d)",
                    format_cards(cards), result, self.score, self.blind.score)
        return result


def next_blind(blind_type: BlindType, ante: int) -> tuple[BlindType, int]:
    """Small → Big → Boss → Small of the next ante."""
    if blind_type == BlindType.SMALL:
        return BlindType.BIG, ante
    if blind_type == BlindType.BIG:
        return BlindType.BOSS, ante
    return BlindType.SMALL, ante + 1
