"""Cyclic dominance between choices.

Scissors cuts paper, paper covers rock, rock crushes scissors.  The relation
is reflexive and antisymmetric but not transitive, so it is spelled out pair
by pair instead of being derived from a numeric rank.
"""

from __future__ import annotations

import itertools

from .enums import Choice, Dominance

_P, _R, _S = Choice.PAPER, Choice.ROCK, Choice.SCISSORS

DOMINANCE_TABLE: dict[tuple[Choice, Choice], Dominance] = {
    (_S, _S): Dominance.EQUAL,
    (_S, _P): Dominance.GREATER,
    (_S, _R): Dominance.LESS,
    (_R, _S): Dominance.GREATER,
    (_R, _R): Dominance.EQUAL,
    (_R, _P): Dominance.LESS,
    (_P, _S): Dominance.LESS,
    (_P, _R): Dominance.GREATER,
    (_P, _P): Dominance.EQUAL,
}

assert set(DOMINANCE_TABLE) == set(itertools.product(Choice, repeat=2)), (
    "dominance table must cover every ordered pair of choices"
)


def compare(first: Choice, second: Choice) -> Dominance:
    """Return how ``first`` fares against ``second``.

    ``GREATER`` means ``first`` wins, ``LESS`` means ``second`` wins and
    ``EQUAL`` means both players showed the same sign.
    """

    try:
        return DOMINANCE_TABLE[(first, second)]
    except KeyError:
        raise AssertionError(f"no dominance defined for {first!r} vs {second!r}") from None


def beats(first: Choice, second: Choice) -> bool:
    """Return whether ``first`` dominates ``second``."""

    return compare(first, second) is Dominance.GREATER
