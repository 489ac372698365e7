"""Console entry point playing a single demonstration round."""

from __future__ import annotations

import logging
import sys

from roshambo.config import Settings, get_settings
from roshambo.domain.models import Game, Player
from roshambo.logging_config import configure_logging
from roshambo.render import dump

logger = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> int:
    """Play one round, record it in a game and print both to stdout."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    player_one = Player(settings.player_one_name)
    player_two = Player(settings.player_two_name)

    round_ = player_one.pick(settings.player_one_choice) + player_two.pick(
        settings.player_two_choice
    )
    game = Game()
    game += round_
    logger.info("game holds %d round(s)", len(game))

    print(dump(game))
    print(dump(round_.outcome))
    return 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""

    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover - manual launch helper
    run()
