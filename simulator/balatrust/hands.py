"""Hand classification — maps played cards to a hand type and its scoring cards.

Categories are tested strictly from strongest to weakest and the first match
wins, so a five-card hand that is both a flush and a full house resolves to
Flush House. Flush and straight checks only apply to exactly five cards.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Sequence

from .enums import HandType, Rank, HAND_FAMILIES, MAX_PLAYED_CARDS
from .cards import Card


def classify(cards: Sequence[Card]) -> tuple[HandType, list[int]]:
    """Classify played cards and return (hand_type, scoring_card_indices).

    Args:
        cards: The played cards (1-5 cards). Callers validate the count.

    Returns:
        (HandType, ascending list of indices into `cards` that score)
    """
    n = len(cards)
    assert 1 <= n <= MAX_PLAYED_CARDS, f"classify() needs 1-5 cards, got {n}"

    all_indices = list(range(n))
    is_flush = _check_flush(cards)
    is_straight = _check_straight([c.rank.value for c in cards])

    rank_indices: dict[Rank, list[int]] = defaultdict(list)
    for i, card in enumerate(cards):
        rank_indices[card.rank].append(i)
    rank_counts = Counter({rank: len(idx) for rank, idx in rank_indices.items()})
    is_house = sorted(rank_counts.values()) == [2, 3]

    first = cards[0]

    if n == 5 and all(c.rank == first.rank and c.suit == first.suit for c in cards):
        return HandType.FLUSH_FIVE, all_indices

    if is_flush and is_house:
        return HandType.FLUSH_HOUSE, all_indices

    if n == 5 and all(c.rank == first.rank for c in cards):
        return HandType.FIVE_OF_A_KIND, all_indices

    if is_flush and is_straight:
        return HandType.STRAIGHT_FLUSH, all_indices

    quad = _rank_with_count(rank_counts, 4)
    if quad is not None:
        return HandType.FOUR_OF_A_KIND, rank_indices[quad]

    if is_house:
        return HandType.FULL_HOUSE, all_indices

    if is_flush:
        return HandType.FLUSH, all_indices

    if is_straight:
        return HandType.STRAIGHT, all_indices

    trips = _rank_with_count(rank_counts, 3)
    if trips is not None:
        return HandType.THREE_OF_A_KIND, rank_indices[trips]

    pairs = [r for r, count in rank_counts.items() if count == 2]
    if len(pairs) == 2:
        scoring = rank_indices[pairs[0]] + rank_indices[pairs[1]]
        return HandType.TWO_PAIR, sorted(scoring)

    if pairs:
        return HandType.PAIR, rank_indices[pairs[0]]

    # High card: only the highest card scores, first one on a tie
    best_idx = max(all_indices, key=lambda i: (cards[i].rank.value, -i))
    return HandType.HIGH_CARD, [best_idx]


def _check_flush(cards: Sequence[Card]) -> bool:
    """Five cards all sharing the first card's suit."""
    if len(cards) != 5:
        return False
    return all(c.suit == cards[0].suit for c in cards)


def _check_straight(rank_values: list[int]) -> bool:
    """Five consecutive rank values, or the ace-low wheel A-2-3-4-5."""
    if len(rank_values) != 5:
        return False
    s = sorted(rank_values)
    if all(b - a == 1 for a, b in zip(s, s[1:])):
        return True
    return s == [2, 3, 4, 5, 14]


def _rank_with_count(rank_counts: Counter, count: int) -> Rank | None:
    for rank, c in rank_counts.items():
        if c == count:
            return rank
    return None


def contains(hand_type: HandType, family: HandType) -> bool:
    """Whether a classified hand counts as containing `family`.

    Families not listed in HAND_FAMILIES only contain themselves.
    """
    return hand_type in HAND_FAMILIES.get(family, frozenset({family}))
