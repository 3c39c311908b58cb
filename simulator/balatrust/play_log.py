"""Play logger — records every scored hand as a replay row in PostgreSQL.

Usage:
    logger = PlayLogger(run_id, settings)
    logger.log_blind(blind)
    logger.log_play(round_, cards_played, result, abilities)
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

import psycopg2

from .cards import Card, format_cards
from .blinds import Blind
from .rounds import Round
from .scoring import ScoreResult
from .abilities import Ability
from .config import Settings

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS balatrust_play_log (
    id SERIAL PRIMARY KEY,
    run_id INTEGER NOT NULL,
    seq INTEGER NOT NULL,
    phase TEXT NOT NULL,
    ante INTEGER,
    blind TEXT,
    boss_ability TEXT,
    cards TEXT,
    abilities TEXT,
    hand_type TEXT,
    scoring_indices TEXT,
    chips BIGINT,
    mult BIGINT,
    total BIGINT,
    round_score BIGINT,
    target BIGINT,
    hands_left INTEGER,
    logged_at TIMESTAMPTZ DEFAULT NOW()
)
"""

INSERT_SQL = """
INSERT INTO balatrust_play_log
    (run_id, seq, phase, ante, blind, boss_ability, cards, abilities,
     hand_type, scoring_indices, chips, mult, total, round_score, target, hands_left)
VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
"""


def _get_conn(database_url: str):
    return psycopg2.connect(database_url)


def format_abilities(abilities: Iterable[Ability]) -> str:
    return ", ".join(a.name for a in abilities)


class PlayLogger:
    """Records plays to the balatrust_play_log table."""

    def __init__(self, run_id: int, settings: Optional[Settings] = None,
                 enabled: Optional[bool] = None):
        self.run_id = run_id
        self.settings = settings or Settings.from_env()
        self.enabled = self.settings.play_log_enabled if enabled is None else enabled
        self._seq = 0

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def ensure_table(self) -> None:
        if not self.enabled:
            return
        self._execute(CREATE_TABLE_SQL, ())

    def _execute(self, sql: str, params: tuple) -> bool:
        try:
            conn = _get_conn(self.settings.database_url)
        except psycopg2.Error as e:
            logger.warning("play log connect failed: %s", e)
            return False
        try:
            with conn:
                with conn.cursor() as cur:
                    cur.execute(sql, params)
            return True
        except psycopg2.Error as e:
            logger.warning("play log write failed: %s", e)
            return False
        finally:
            conn.close()

    def _write(self, phase: str, blind: Blind, cards: str = "", abilities: str = "",
               hand_type: Optional[str] = None, scoring_indices: Optional[list[int]] = None,
               chips: Optional[int] = None, mult: Optional[int] = None,
               total: Optional[int] = None, round_score: Optional[int] = None,
               hands_left: Optional[int] = None) -> bool:
        if not self.enabled or not self.run_id:
            return False
        boss = blind.boss_ability.name if blind.boss_ability else None
        params = (
            self.run_id, self._next_seq(), phase, blind.ante, blind.name, boss,
            cards, abilities, hand_type,
            json.dumps(scoring_indices) if scoring_indices is not None else None,
            chips, mult, total, round_score, blind.score, hands_left,
        )
        return self._execute(INSERT_SQL, params)

    def log_blind(self, blind: Blind) -> bool:
        """Log entering a blind."""
        return self._write("blind", blind)

    def log_play(self, round_: Round, cards_played: list[Card], result: ScoreResult,
                 abilities: Iterable[Ability] = ()) -> bool:
        """Log a scored hand together with the round total after it."""
        return self._write(
            "play", round_.blind,
            cards=format_cards(cards_played),
            abilities=format_abilities(abilities),
            hand_type=result.hand_type.value,
            scoring_indices=list(result.scoring_indices),
            chips=result.chips,
            mult=result.mult,
            total=result.total,
            round_score=round_.score,
            hands_left=round_.hands_left,
        )
