"""Development entrypoint for the Roshambo demo."""

from __future__ import annotations

from roshambo.main import run

if __name__ == "__main__":
    run()
