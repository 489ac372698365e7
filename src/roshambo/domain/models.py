"""Dataclasses describing a game of Rock-Paper-Scissors.

A :class:`Player` produces a :class:`Participation` every time it picks.
Two participations combine into a :class:`Round`, whose outcome is derived
on demand from the two choices.  A :class:`Game` keeps the rounds in the
order they were played.

Participations own a snapshot of the player that picked, so the identity
recorded for a past round never changes afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Literal

from .dominance import compare
from .enums import Choice, Dominance

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Player:
    """Named participant."""

    name: str

    def clone(self) -> Player:
        """Return an independent copy with the same identity."""

        return replace(self)

    def pick(self, choice: Choice, *, at: datetime | None = None) -> Participation:
        """Commit to ``choice`` and return the timestamped record of it.

        ``at`` overrides the wall-clock timestamp; it defaults to the current
        UTC time.  An explicit ``at`` must be timezone-aware so picks from
        different sources stay comparable.
        """

        if at is None:
            at = datetime.now(UTC)
        elif at.tzinfo is None:
            raise ValueError(f"Pick timestamp must be timezone-aware, got {at!r}")

        participation = Participation(player=self.clone(), choice=choice, picked_at=at)
        logger.debug("%s picked %s at %s", self.name, choice, participation.picked_at)
        return participation


@dataclass(frozen=True, slots=True)
class Participation:
    """One player's timestamped commitment to a choice."""

    player: Player
    choice: Choice
    picked_at: datetime

    def __add__(self, other: Participation) -> Round:
        if not isinstance(other, Participation):
            return NotImplemented
        return Round(player_one=self, player_two=other)


@dataclass(frozen=True, slots=True)
class Winner:
    """Outcome where one player dominated the other."""

    player: Player
    kind: Literal["winner"] = "winner"

    @property
    def is_draw(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Draw:
    """Outcome where both players showed the same sign."""

    kind: Literal["draw"] = "draw"

    @property
    def is_draw(self) -> bool:
        return True


Outcome = Winner | Draw


@dataclass(frozen=True, slots=True)
class Round:
    """Pairing of two participations.

    The position of a participation only tells ``player_one`` from
    ``player_two``; swapping them never changes who wins.
    """

    player_one: Participation
    player_two: Participation

    @property
    def participations(self) -> tuple[Participation, Participation]:
        return (self.player_one, self.player_two)

    @property
    def outcome(self) -> Outcome:
        """Derive the result of the round from both choices."""

        result = compare(self.player_one.choice, self.player_two.choice)
        if result is Dominance.EQUAL:
            return Draw()
        if result is Dominance.GREATER:
            return Winner(self.player_one.player)
        return Winner(self.player_two.player)

    @property
    def started_at(self) -> datetime:
        """Timestamp of the earlier pick."""

        return min(self.player_one.picked_at, self.player_two.picked_at)

    @property
    def finished_at(self) -> datetime:
        """Timestamp of the later pick."""

        return max(self.player_one.picked_at, self.player_two.picked_at)


@dataclass(slots=True)
class Game:
    """Ordered, append-only history of rounds."""

    rounds: list[Round] = field(default_factory=list)

    @classmethod
    def with_capacity(cls, capacity: int) -> Game:
        """Create an empty game expecting roughly ``capacity`` rounds.

        Lists grow on demand, so the hint is only validated.
        """

        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        return cls()

    def add_round(self, round_: Round) -> None:
        """Append a completed round to the history."""

        self.rounds.append(round_)
        logger.debug("round %d added", len(self.rounds))

    def __iadd__(self, round_: Round) -> Game:
        if not isinstance(round_, Round):
            return NotImplemented
        self.add_round(round_)
        return self

    def __len__(self) -> int:
        return len(self.rounds)

    def __iter__(self) -> Iterator[Round]:
        return iter(self.rounds)
