"""In-memory Rock-Paper-Scissors domain.

The :mod:`roshambo.domain` package holds the rules: choices, their cyclic
dominance relation, picks, rounds, outcomes and the game history.  The
remaining modules wire that domain to a console entry point.
"""

__version__ = "0.1.0"
