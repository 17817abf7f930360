"""
framecode.logging - Centralized logging configuration.

Every module logs through a child of the "framecode" logger, so one call
to configure_logging controls the engine, config loading and the CLI.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("framecode")

VERBOSE_FORMAT = "%(levelname)s %(name)s: %(message)s"
QUIET_FORMAT = "%(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a framecode module.

    Args:
        name: Module name, usually __name__ ("framecode.timecode")

    Returns:
        Child of the package logger
    """
    if name == logger.name:
        return logger
    return logger.getChild(name.removeprefix(f"{logger.name}."))


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the framecode package.

    Args:
        verbose: If True, log DEBUG records with their module name;
            otherwise only warnings
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=VERBOSE_FORMAT if verbose else QUIET_FORMAT,
    )
    logger.setLevel(level)
