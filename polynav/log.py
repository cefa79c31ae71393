"""Logging setup for the command-line front door."""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_LEVEL_ENV_VAR = "POLYNAV_LOG_LEVEL"
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(verbose: int = 0) -> int:
    """Map ``-v`` counts onto levels; ``POLYNAV_LOG_LEVEL`` wins when valid."""
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if env_level in _LEVEL_NAMES:
        return getattr(logging, env_level)
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbose: int = 0) -> None:
    """Install a single stderr handler on the ``polynav`` logger."""
    logger = logging.getLogger("polynav")
    logger.setLevel(resolve_log_level(verbose))
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging", "resolve_log_level"]
