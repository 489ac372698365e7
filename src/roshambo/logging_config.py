"""Logging setup for the console entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Send log records to stderr so stdout only carries program output.

    Handlers already installed on the root logger are left in place.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
