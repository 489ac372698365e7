"""Enumerations used by the Roshambo domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Choice(StrEnum):
    """Hand sign a player commits to in a round."""

    PAPER = "paper"
    ROCK = "rock"
    SCISSORS = "scissors"


class Dominance(IntEnum):
    """Result of comparing one choice against another."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def invert(self) -> Dominance:
        """Return the result seen from the other side of the comparison."""

        return Dominance(-self.value)
