"""
Logging configuration for the simulator.

Modules log through ``logging.getLogger(__name__)``; the dashboard calls
``configure_logging`` once at start-up.
"""

from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def configure_logging(level: Union[int, str] = logging.INFO, *, force: bool = False) -> logging.Logger:
    """
    Attach a single stream handler to the root logger.

    Repeated calls are no-ops unless ``force`` is set, because Streamlit re-runs
    the dashboard script on every interaction.
    """
    global _LOGGING_CONFIGURED
    root = logging.getLogger()
    if _LOGGING_CONFIGURED and not force:
        return root

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level!r}")

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    _LOGGING_CONFIGURED = True
    return root
