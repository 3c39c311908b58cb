"""Shared helpers for the test suite."""

import pytest

from balatrust.cards import Card, parse_cards
from balatrust.enums import Rank, Suit


def c(rank: Rank, suit: Suit = Suit.SPADES) -> Card:
    """Build one card."""
    return Card(rank=rank, suit=suit)


def hand(text: str) -> list[Card]:
    """Build cards from notation, e.g. 'A♠ A♦ 4♣'."""
    return parse_cards(text)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("DATABASE_URL", "BALATRUST_CONFIG", "BALATRUST_LOG_LEVEL",
                "BALATRUST_STRICT_ABILITIES", "BALATRUST_PLAY_LOG"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
