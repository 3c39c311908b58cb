"""balatrust — poker hand classification and chips × mult scoring rules engine."""

__version__ = "0.1.0"

from .enums import Suit, Rank, HandType, BlindType, HAND_BASE, ANTES
from .cards import Card, parse_cards, format_cards
from .hands import classify, contains
from .abilities import Ability, AbilitySlots, resolve, available_abilities
from .blinds import Blind, BossAbility, create_boss_ability
from .scoring import ScoreAccumulator, ScoreResult, score, evaluate_play
from .rounds import Round, RoundStatus, next_blind
from .errors import (
    BalatrustError, CardParseError, UnknownAbilityError, SlotsFullError,
    InvalidPlayError,
)
