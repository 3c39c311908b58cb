"""Abilities (jokers) — passive modifiers that hook into hand scoring.

Every ability may react at three points of a play:
- on_play: once, after the base chips/mult are set
- on_score: once per scored (non-debuffed) card
- end_of_round: once, after every scored card has been counted

Hooks only touch the shared ScoreAccumulator. Played cards and the scoring
indices are handed over as tuples of frozen cards and ints.
Abilities fire in the order they are held, left to right.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, TYPE_CHECKING

from .enums import HandType, Suit, MAX_ABILITY_SLOTS
from .cards import Card
from .hands import classify, contains
from .errors import UnknownAbilityError, SlotsFullError

if TYPE_CHECKING:
    from .scoring import ScoreAccumulator

logger = logging.getLogger(__name__)


class Ability:
    """Base ability. Unimplemented hooks are no-ops."""

    name: str = "Ability"
    description: str = ""

    def on_play(self, acc: "ScoreAccumulator", cards: tuple[Card, ...],
                scoring: tuple[int, ...]) -> None:
        pass

    def on_score(self, acc: "ScoreAccumulator", card: Card) -> None:
        pass

    def end_of_round(self, acc: "ScoreAccumulator", cards: tuple[Card, ...],
                     scoring: tuple[int, ...]) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class Joker(Ability):
    """+4 mult at the end of the round. Also the registry fallback."""

    name = "Joker"
    description = "+4 Mult"

    def end_of_round(self, acc, cards, scoring):
        logger.debug("%s: +4 mult", self.name)
        acc.add_mult(4)


class SuitMultAbility(Ability):
    """+mult for every scored card of one suit."""

    def __init__(self, name: str, suit: Suit, mult: int = 3):
        self.name = name
        self.suit = suit
        self.mult = mult
        self.description = (
            f"Played cards with {suit.symbol}{suit.value[:-1]} suit give "
            f"+{mult} Mult when scored"
        )

    def on_score(self, acc, card):
        if card.suit == self.suit:
            logger.debug("%s: +%d mult", self.name, self.mult)
            acc.add_mult(self.mult)


class HandFamilyAbility(Ability):
    """Bonus when the scored cards contain a hand family.

    The scored cards are classified on their own and the result is tested
    against the family, e.g. a Full House contains a Pair and a Two Pair.
    """

    def __init__(self, name: str, family: HandType, chips: int = 0,
                 mult: int = 0, x_mult: int = 1):
        self.name = name
        self.family = family
        self.chips = chips
        self.mult = mult
        self.x_mult = x_mult
        if x_mult != 1:
            bonus = f"X{x_mult} Mult"
        elif chips:
            bonus = f"+{chips} Chips"
        else:
            bonus = f"+{mult} Mult"
        self.description = f"{bonus} if played hand contains a {family.value}"

    def triggers(self, cards: tuple[Card, ...], scoring: tuple[int, ...]) -> bool:
        if not scoring:
            return False
        scoring_cards = [cards[i] for i in scoring]
        hand_type, _ = classify(scoring_cards)
        return contains(hand_type, self.family)

    def end_of_round(self, acc, cards, scoring):
        if not self.triggers(cards, scoring):
            return
        logger.debug("%s: %s", self.name, self.description.split(" if ")[0])
        if self.chips:
            acc.add_chips(self.chips)
        if self.mult:
            acc.add_mult(self.mult)
        if self.x_mult != 1:
            acc.x_mult(self.x_mult)


# ============================================================
# Ability Registry
# ============================================================

ABILITY_FACTORIES: dict[str, Callable[[], Ability]] = {}

DEFAULT_ABILITY = "Joker"


def _register(name: str, factory: Callable[[], Ability]) -> None:
    ABILITY_FACTORIES[name] = factory


_register("Joker", Joker)

# --- Suit-based +3 mult on score ---
_register("Greedy Joker", lambda: SuitMultAbility("Greedy Joker", Suit.DIAMONDS))
_register("Lusty Joker", lambda: SuitMultAbility("Lusty Joker", Suit.HEARTS))
_register("Wrathful Joker", lambda: SuitMultAbility("Wrathful Joker", Suit.SPADES))
_register("Gluttonous Joker", lambda: SuitMultAbility("Gluttonous Joker", Suit.CLUBS))

# --- Hand family +mult ---
_register("Jolly Joker", lambda: HandFamilyAbility("Jolly Joker", HandType.PAIR, mult=8))
_register("Zany Joker", lambda: HandFamilyAbility("Zany Joker", HandType.THREE_OF_A_KIND, mult=12))
_register("Mad Joker", lambda: HandFamilyAbility("Mad Joker", HandType.TWO_PAIR, mult=10))
_register("Crazy Joker", lambda: HandFamilyAbility("Crazy Joker", HandType.STRAIGHT, mult=12))
_register("Droll Joker", lambda: HandFamilyAbility("Droll Joker", HandType.FLUSH, mult=10))

# --- Hand family +chips ---
_register("Sly Joker", lambda: HandFamilyAbility("Sly Joker", HandType.PAIR, chips=50))
_register("Wily Joker", lambda: HandFamilyAbility("Wily Joker", HandType.THREE_OF_A_KIND, chips=100))
_register("Clever Joker", lambda: HandFamilyAbility("Clever Joker", HandType.TWO_PAIR, chips=80))
_register("Devious Joker", lambda: HandFamilyAbility("Devious Joker", HandType.STRAIGHT, chips=100))
_register("Crafty Joker", lambda: HandFamilyAbility("Crafty Joker", HandType.FLUSH, chips=80))

# --- Hand family xMult ---
_register("The Duo", lambda: HandFamilyAbility("The Duo", HandType.PAIR, x_mult=2))
_register("The Trio", lambda: HandFamilyAbility("The Trio", HandType.THREE_OF_A_KIND, x_mult=3))
_register("The Family", lambda: HandFamilyAbility("The Family", HandType.FOUR_OF_A_KIND, x_mult=4))
_register("The Order", lambda: HandFamilyAbility("The Order", HandType.STRAIGHT, x_mult=3))
_register("The Tribe", lambda: HandFamilyAbility("The Tribe", HandType.FLUSH, x_mult=2))


def available_abilities() -> list[str]:
    return list(ABILITY_FACTORIES)


def resolve(name: str, strict: bool = False) -> Ability:
    """Create an ability by name.

    Unknown names fall back to the plain Joker so a bad name from the UI
    never ends a turn. With strict=True they raise UnknownAbilityError.
    """
    factory = ABILITY_FACTORIES.get(name)
    if factory is None:
        if strict:
            raise UnknownAbilityError(name)
        logger.warning("unknown ability %r, using %s", name, DEFAULT_ABILITY)
        factory = ABILITY_FACTORIES[DEFAULT_ABILITY]
    return factory()


# ============================================================
# Held abilities
# ============================================================

class AbilitySlots:
    """The player's ordered ability collection. Order is hook firing order."""

    def __init__(self, abilities: Optional[Iterable[Ability | str]] = None,
                 capacity: int = MAX_ABILITY_SLOTS, strict: bool = False):
        self.capacity = capacity
        self.strict = strict
        self._abilities: list[Ability] = []
        for ability in abilities or []:
            self.add(ability)

    def add(self, ability: Ability | str, position: Optional[int] = None) -> Ability:
        """Add an ability (or a registry name) at `position`, default rightmost."""
        if len(self._abilities) >= self.capacity:
            raise SlotsFullError(f"all {self.capacity} ability slots are taken")
        if isinstance(ability, str):
            ability = resolve(ability, strict=self.strict)
        if position is None:
            self._abilities.append(ability)
        else:
            if not 0 <= position <= len(self._abilities):
                raise IndexError(f"slot {position} out of range")
            self._abilities.insert(position, ability)
        return ability

    def remove(self, index: int) -> Ability:
        return self._abilities.pop(index)

    def move(self, from_index: int, to_index: int) -> None:
        """Take the ability at from_index out and reinsert it at to_index.

        Entries in between shift by one towards the vacated slot.
        """
        n = len(self._abilities)
        if not (0 <= from_index < n and 0 <= to_index < n):
            raise IndexError(f"cannot move slot {from_index} to {to_index} with {n} abilities")
        ability = self._abilities.pop(from_index)
        self._abilities.insert(to_index, ability)

    def names(self) -> list[str]:
        return [a.name for a in self._abilities]

    def __iter__(self) -> Iterator[Ability]:
        return iter(list(self._abilities))

    def __len__(self) -> int:
        return len(self._abilities)

    def __getitem__(self, index: int) -> Ability:
        return self._abilities[index]

    def __repr__(self) -> str:
        return f"AbilitySlots({self.names()})"
