"""Card value type and text notation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .enums import Suit, Rank
from .errors import CardParseError


_RANK_TOKENS: dict[str, Rank] = {r.display: r for r in Rank}
_RANK_TOKENS["T"] = Rank.TEN

_SUIT_TOKENS: dict[str, Suit] = {
    "♠": Suit.SPADES, "S": Suit.SPADES,
    "♥": Suit.HEARTS, "H": Suit.HEARTS,
    "♣": Suit.CLUBS, "C": Suit.CLUBS,
    "♦": Suit.DIAMONDS, "D": Suit.DIAMONDS,
}

_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Card:
    """A playing card. Equality is structural (rank + suit)."""
    rank: Rank
    suit: Suit

    @property
    def chip_value(self) -> int:
        """Chips this card adds when it scores."""
        return self.rank.chip_value

    def display(self) -> str:
        return f"{self.rank.display}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return self.display()

    @classmethod
    def parse(cls, text: str) -> "Card":
        """Parse '10♠', 'Ah', 'qd' or 'T♣' into a Card."""
        token = text.strip().upper()
        if len(token) < 2:
            raise CardParseError(text)
        rank = _RANK_TOKENS.get(token[:-1])
        if rank is None:
            raise CardParseError(text, "unknown rank")
        suit = _SUIT_TOKENS.get(token[-1])
        if suit is None:
            raise CardParseError(text, "unknown suit")
        return cls(rank=rank, suit=suit)


def parse_cards(text: str) -> list[Card]:
    """Parse a whitespace- or comma-separated card list, e.g. 'A♠ A♦ 4♣'."""
    return [Card.parse(tok) for tok in _SEPARATORS.split(text.strip()) if tok]


def format_cards(cards) -> str:
    """Format cards as 'K♠ Q♠ J♠ 10♠'."""
    return " ".join(c.display() for c in cards)
