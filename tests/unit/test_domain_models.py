"""Unit tests for players, participations, rounds and outcomes."""

from __future__ import annotations

import itertools
from datetime import UTC, datetime, timedelta

import pytest

from roshambo.domain import models as dm
from roshambo.domain.enums import Choice

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def _round(
    first: Choice,
    second: Choice,
    *,
    names: tuple[str, str] = ("John", "Jeff"),
    first_at: datetime = T0,
    second_at: datetime = T0 + timedelta(seconds=1),
) -> dm.Round:
    one = dm.Player(names[0]).pick(first, at=first_at)
    two = dm.Player(names[1]).pick(second, at=second_at)
    return one + two


def test_pick_records_player_choice_and_time():
    player = dm.Player("John")
    participation = player.pick(Choice.ROCK, at=T0)

    assert participation.player == player
    assert participation.player is not player
    assert participation.choice is Choice.ROCK
    assert participation.picked_at == T0


def test_pick_defaults_to_current_utc_time():
    before = datetime.now(UTC)
    participation = dm.Player("John").pick(Choice.PAPER)
    after = datetime.now(UTC)

    assert participation.picked_at.tzinfo is not None
    assert before <= participation.picked_at <= after


def test_pick_can_be_repeated():
    player = dm.Player("Jeff")
    first = player.pick(Choice.ROCK, at=T0)
    second = player.pick(Choice.PAPER, at=T0 + timedelta(minutes=1))

    assert first != second
    assert first.player == second.player == player


def test_participation_keeps_snapshot_of_player():
    player = dm.Player("John")
    participation = player.pick(Choice.ROCK, at=T0)
    renamed = dm.Player("Johnny")
    del player

    assert participation.player.name == "John"
    assert renamed.pick(Choice.ROCK, at=T0).player.name == "Johnny"


def test_player_and_participation_are_immutable():
    player = dm.Player("John")
    participation = player.pick(Choice.ROCK, at=T0)
    with pytest.raises(AttributeError):
        player.name = "Johnny"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        participation.choice = Choice.PAPER  # type: ignore[misc]


def test_clone_is_equal_but_independent():
    player = dm.Player("John")
    clone = player.clone()
    assert clone == player
    assert clone is not player


def test_adding_participations_builds_round():
    one = dm.Player("John").pick(Choice.ROCK, at=T0)
    two = dm.Player("Jeff").pick(Choice.SCISSORS, at=T0)
    round_ = one + two

    assert round_.player_one is one
    assert round_.player_two is two
    assert round_.participations == (one, two)


def test_rock_beats_scissors():
    outcome = _round(Choice.ROCK, Choice.SCISSORS).outcome
    assert outcome == dm.Winner(dm.Player("John"))
    assert not outcome.is_draw


def test_same_choice_is_draw():
    outcome = _round(Choice.PAPER, Choice.PAPER).outcome
    assert outcome == dm.Draw()
    assert outcome.is_draw


def test_second_player_can_win():
    outcome = _round(Choice.SCISSORS, Choice.ROCK).outcome
    assert isinstance(outcome, dm.Winner)
    assert outcome.player.name == "Jeff"


def test_outcome_does_not_depend_on_position():
    for first, second in itertools.product(Choice, repeat=2):
        one = dm.Player("John").pick(first, at=T0)
        two = dm.Player("Jeff").pick(second, at=T0)
        forward = (one + two).outcome
        backward = (two + one).outcome
        assert forward == backward


def test_outcome_is_recomputed_consistently():
    round_ = _round(Choice.PAPER, Choice.ROCK)
    assert round_.outcome == round_.outcome == dm.Winner(dm.Player("John"))


def test_started_and_finished_at():
    late = T0 + timedelta(seconds=5)
    round_ = _round(Choice.ROCK, Choice.PAPER, first_at=late, second_at=T0)

    assert round_.started_at == T0
    assert round_.finished_at == late
    assert round_.started_at <= round_.finished_at


def test_equal_timestamps_are_tolerated():
    round_ = _round(Choice.ROCK, Choice.PAPER, first_at=T0, second_at=T0)
    assert round_.started_at == round_.finished_at == T0


def test_pick_rejects_naive_timestamp():
    with pytest.raises(ValueError, match="timezone-aware"):
        dm.Player("Jeff").pick(Choice.ROCK, at=datetime(2024, 1, 1))


def test_default_and_explicit_timestamps_mix():
    one = dm.Player("John").pick(Choice.ROCK)
    two = dm.Player("Jeff").pick(Choice.ROCK, at=datetime(2024, 1, 1, tzinfo=UTC))
    round_ = one + two
    assert round_.started_at == two.picked_at
    assert round_.finished_at == one.picked_at
