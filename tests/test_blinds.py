"""Blind targets, boss selection and round progression tests."""

import logging
import random

import pytest

from balatrust.blinds import (
    BOSS_ABILITIES, Blind, create_boss_ability, select_boss_ability,
)
from balatrust.enums import ANTES, BlindType, Rank, Suit
from balatrust.rounds import next_blind

from conftest import c


class LastChoice:
    """rng stand-in that always picks the last option."""

    def choice(self, seq):
        return seq[-1]


class TestBlindTargets:

    @pytest.mark.parametrize("ante", [1, 2, 8])
    def test_small_is_table_value(self, ante):
        blind = Blind.create(BlindType.SMALL, ante)
        assert blind.score == ANTES[ante]
        assert blind.name == "Small Blind"
        assert blind.boss_ability is None

    def test_big_is_one_and_a_half(self):
        assert Blind.create(BlindType.BIG, 1).score == 450
        assert Blind.create(BlindType.BIG, 0).score == 150

    def test_boss_is_double(self):
        blind = Blind.create(BlindType.BOSS, 2, rng=random.Random(1))
        assert blind.score == 1600
        assert blind.boss_ability is not None
        assert blind.name == f"Boss Blind - {blind.boss_ability.name}"
        assert blind.description == blind.boss_ability.description

    def test_ante_past_table(self):
        with pytest.raises(IndexError):
            Blind.create(BlindType.SMALL, len(ANTES))

    def test_negative_ante(self):
        with pytest.raises(IndexError):
            Blind.create(BlindType.SMALL, -1)

    def test_str(self):
        assert str(Blind.create(BlindType.SMALL, 1)) == "Small Blind (300 chips)"


class TestBossAbilities:

    def test_registry(self):
        assert set(BOSS_ABILITIES) == {"The Club", "The Goad", "The Window", "The Head"}
        assert BOSS_ABILITIES["The Goad"].debuff_suit == Suit.SPADES

    def test_selection_uses_rng(self):
        assert select_boss_ability(LastChoice()).name == "The Head"

    def test_seeded_selection_repeats(self):
        a = Blind.create(BlindType.BOSS, 1, rng=random.Random(42))
        b = Blind.create(BlindType.BOSS, 1, rng=random.Random(42))
        assert a == b

    def test_named_boss(self):
        blind = Blind.create(BlindType.BOSS, 1, boss="The Window")
        assert blind.is_card_debuffed(c(Rank.TWO, Suit.DIAMONDS))
        assert not blind.is_card_debuffed(c(Rank.TWO, Suit.SPADES))

    def test_unknown_boss_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="balatrust.blinds"):
            boss = create_boss_ability("The Wall")
        assert boss.name == "The Club"
        assert "The Wall" in caplog.text


class TestProgression:

    def test_next_blind(self):
        assert next_blind(BlindType.SMALL, 1) == (BlindType.BIG, 1)
        assert next_blind(BlindType.BIG, 1) == (BlindType.BOSS, 1)
        assert next_blind(BlindType.BOSS, 1) == (BlindType.SMALL, 2)
