"""Logging setup shared by the engine, the console driver and the dashboard.

Game text (hands, prompts, outcomes) is written to the console by the engine
itself; logging carries diagnostics only and goes to stderr.
"""

from __future__ import annotations

import logging

from blackjack.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (cli.py and app.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
