"""Runtime settings read from the environment.

DATABASE_URL takes precedence; otherwise a JSON file named by
BALATRUST_CONFIG may supply {"database_url": ...}.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: Optional[str], default: bool = False) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str] = None
    log_level: str = "WARNING"
    strict_abilities: bool = False
    play_log: bool = True

    @property
    def play_log_enabled(self) -> bool:
        return self.play_log and bool(self.database_url)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        db_url = env.get("DATABASE_URL")
        if not db_url and env.get("BALATRUST_CONFIG"):
            db_url = _read_config_url(env["BALATRUST_CONFIG"])
        return cls(
            database_url=db_url or None,
            log_level=env.get("BALATRUST_LOG_LEVEL", "WARNING").upper(),
            strict_abilities=_flag(env.get("BALATRUST_STRICT_ABILITIES")),
            play_log=_flag(env.get("BALATRUST_PLAY_LOG"), default=True),
        )


def _read_config_url(path: str) -> Optional[str]:
    """database_url from a JSON config file; unreadable files are skipped."""
    try:
        with open(path) as f:
            return json.load(f).get("database_url")
    except (OSError, json.JSONDecodeError, AttributeError) as e:
        logger.warning("ignoring config file %s: %s", path, e)
        return None


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
