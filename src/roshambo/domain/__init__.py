"""Domain model for Roshambo.

This package exposes:

* Enumerations for choices and comparison results (see :mod:`enums`).
* The dominance relation between choices (see :mod:`dominance`).
* Dataclasses for players, picks, rounds, outcomes and games
  (see :mod:`models`).

Everything here is pure and in-memory.
"""

from . import dominance, enums, models

__all__ = [
    "dominance",
    "enums",
    "models",
]
