"""Shared Rich logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "npm_version_sync"


def build_rich_handler() -> RichHandler:
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling this again replaces the previous handler rather than stacking.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    logger.addHandler(build_rich_handler())
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
