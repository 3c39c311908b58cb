"""Exceptions raised by the rules engine."""

from __future__ import annotations


class BalatrustError(Exception):
    """Base class for all package errors."""


class CardParseError(BalatrustError, ValueError):
    """Card text could not be parsed."""

    def __init__(self, text: str, reason: str = "unrecognised card"):
        self.text = text
        super().__init__(f"{reason}: {text!r}")


class UnknownAbilityError(BalatrustError, KeyError):
    """Ability name not in the registry (strict resolution only)."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown ability: {self.name!r}"


class SlotsFullError(BalatrustError):
    """The ability collection is already at capacity."""


class InvalidPlayError(BalatrustError, ValueError):
    """A play was rejected by the round (bad card count or round over)."""
