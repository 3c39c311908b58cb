"""Round bookkeeping tests."""

import pytest

from balatrust.abilities import AbilitySlots
from balatrust.blinds import Blind
from balatrust.enums import BlindType, HandType, HANDS_PER_ROUND
from balatrust.errors import InvalidPlayError
from balatrust.rounds import Round, RoundStatus

from conftest import hand


def small_round() -> Round:
    return Round(blind=Blind.create(BlindType.SMALL, 1))


class TestRound:

    def test_play_accumulates(self):
        round_ = small_round()
        result = round_.play(hand("A♠ A♦ 4♣ 7♥ 9♥"))
        assert result.hand_type == HandType.PAIR
        assert round_.score == 64
        assert round_.hands_left == HANDS_PER_ROUND - 1
        assert round_.remaining == 300 - 64
        assert round_.history == [result]
        assert round_.status == RoundStatus.IN_PROGRESS

    def test_win(self):
        round_ = small_round()
        round_.play(hand("9♥ 10♥ J♥ Q♥ K♥"), AbilitySlots(["Jolly Joker"]))
        # (100 + 49) x 8
        assert round_.score == 1192
        assert round_.status == RoundStatus.WON
        assert round_.remaining == 0

    def test_loss_after_last_hand(self):
        round_ = small_round()
        for _ in range(HANDS_PER_ROUND):
            round_.play(hand("2♣"))
        assert round_.score == 4 * 7
        assert round_.status == RoundStatus.LOST

    def test_no_play_after_round_over(self):
        round_ = small_round()
        round_.play(hand("9♥ 10♥ J♥ Q♥ K♥"))
        with pytest.raises(InvalidPlayError, match="won"):
            round_.play(hand("2♣"))

    @pytest.mark.parametrize("text", ["", "A♠ A♦ 4♣ 7♥ 9♥ 2♣"])
    def test_card_count_rejected(self, text):
        round_ = small_round()
        cards = hand(text) if text else []
        with pytest.raises(InvalidPlayError):
            round_.play(cards)
        assert round_.hands_left == HANDS_PER_ROUND

    def test_boss_debuff_applies(self):
        round_ = Round(blind=Blind.create(BlindType.BOSS, 1, boss="The Goad"))
        result = round_.play(hand("A♠ A♦"))
        assert result.total == 42
