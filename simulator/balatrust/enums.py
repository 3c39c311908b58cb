"""Enumerations and constants for the rules engine."""

from __future__ import annotations
from enum import Enum, IntEnum


class Suit(str, Enum):
    SPADES = "Spades"
    HEARTS = "Hearts"
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
}


class Rank(IntEnum):
    """Card ranks with numeric values for straights and high card. Ace = 14."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def chip_value(self) -> int:
        """Face value added to chips when this rank scores."""
        if self.value <= 10:
            return self.value
        if self.value in (11, 12, 13):  # J, Q, K
            return 10
        return 11  # Ace

    @property
    def display(self) -> str:
        _map = {11: "J", 12: "Q", 13: "K", 14: "A"}
        return _map.get(self.value, str(self.value))


class HandType(str, Enum):
    """Poker hand categories, declared lowest to highest."""
    HIGH_CARD = "High Card"
    PAIR = "Pair"
    TWO_PAIR = "Two Pair"
    THREE_OF_A_KIND = "Three of a Kind"
    STRAIGHT = "Straight"
    FLUSH = "Flush"
    FULL_HOUSE = "Full House"
    FOUR_OF_A_KIND = "Four of a Kind"
    STRAIGHT_FLUSH = "Straight Flush"
    FIVE_OF_A_KIND = "Five of a Kind"
    FLUSH_HOUSE = "Flush House"
    FLUSH_FIVE = "Flush Five"

    @property
    def rank(self) -> int:
        return _HAND_RANK[self]

    @property
    def base(self) -> tuple[int, int]:
        return HAND_BASE[self]


# Hand type precedence (higher = stronger)
_HAND_RANK: dict[HandType, int] = {
    HandType.HIGH_CARD: 1,
    HandType.PAIR: 2,
    HandType.TWO_PAIR: 3,
    HandType.THREE_OF_A_KIND: 4,
    HandType.STRAIGHT: 5,
    HandType.FLUSH: 6,
    HandType.FULL_HOUSE: 7,
    HandType.FOUR_OF_A_KIND: 8,
    HandType.STRAIGHT_FLUSH: 9,
    HandType.FIVE_OF_A_KIND: 10,
    HandType.FLUSH_HOUSE: 11,
    HandType.FLUSH_FIVE: 12,
}

# Base (chips, mult) for each hand type
HAND_BASE: dict[HandType, tuple[int, int]] = {
    HandType.FLUSH_FIVE:       (160, 16),
    HandType.FLUSH_HOUSE:      (140, 14),
    HandType.FIVE_OF_A_KIND:   (120, 12),
    HandType.STRAIGHT_FLUSH:   (100,  8),
    HandType.FOUR_OF_A_KIND:   ( 60,  7),
    HandType.FULL_HOUSE:       ( 40,  4),
    HandType.FLUSH:            ( 35,  4),
    HandType.STRAIGHT:         ( 30,  4),
    HandType.THREE_OF_A_KIND:  ( 30,  3),
    HandType.TWO_PAIR:         ( 20,  2),
    HandType.PAIR:             ( 10,  2),
    HandType.HIGH_CARD:        (  5,  1),
}

# Hand types that count as "containing" a family, for ability triggers
HAND_FAMILIES: dict[HandType, frozenset[HandType]] = {
    HandType.PAIR: frozenset({
        HandType.PAIR, HandType.TWO_PAIR, HandType.THREE_OF_A_KIND,
        HandType.FULL_HOUSE, HandType.FOUR_OF_A_KIND, HandType.FIVE_OF_A_KIND,
        HandType.FLUSH_HOUSE, HandType.FLUSH_FIVE,
    }),
    HandType.THREE_OF_A_KIND: frozenset({
        HandType.THREE_OF_A_KIND, HandType.FULL_HOUSE, HandType.FOUR_OF_A_KIND,
        HandType.FIVE_OF_A_KIND, HandType.FLUSH_HOUSE, HandType.FLUSH_FIVE,
    }),
    HandType.TWO_PAIR: frozenset({
        HandType.TWO_PAIR, HandType.FULL_HOUSE, HandType.FLUSH_HOUSE,
    }),
    HandType.FOUR_OF_A_KIND: frozenset({
        HandType.FOUR_OF_A_KIND, HandType.FIVE_OF_A_KIND, HandType.FLUSH_FIVE,
    }),
    HandType.STRAIGHT: frozenset({
        HandType.STRAIGHT, HandType.STRAIGHT_FLUSH,
    }),
    HandType.FLUSH: frozenset({
        HandType.FLUSH, HandType.STRAIGHT_FLUSH, HandType.FLUSH_HOUSE,
        HandType.FLUSH_FIVE,
    }),
}


class BlindType(str, Enum):
    SMALL = "Small"
    BIG = "Big"
    BOSS = "Boss"

    @property
    def label(self) -> str:
        return f"{self.value} Blind"


# Blind base score per ante; ante 0 exists but runs start at ante 1
ANTES: tuple[int, ...] = (
    100, 300, 800, 2_000, 5_000, 11_000, 20_000, 35_000, 50_000,
    110_000, 560_000, 7_200_000, 300_000_000, 47_000_000_000,
    29_000_000_000_000,
)

# Round limits
HANDS_PER_ROUND = 4
MAX_PLAYED_CARDS = 5
MAX_ABILITY_SLOTS = 5
