"""Constants and environment-driven settings for the Blackjack engine.

Environment switches:
    LOG_LEVEL=DEBUG / INFO / WARNING / ERROR   (default WARNING)
    BLACKJACK_SEED=<int>                       fixed shuffle seed for replays

Command-line flags in cli.py take precedence over the environment.
"""

from __future__ import annotations

import os
import time

# ─── Table limits ─────────────────────────────────────────────────────────────

MIN_PLAYERS: int = 1
MAX_PLAYERS: int = 7

HOUSE_NAME: str = "House"

# ─── Scoring ──────────────────────────────────────────────────────────────────

BLACKJACK: int = 21
HOUSE_HIT_LIMIT: int = 16    # House hits on 16 or less, stands on any 17
SOFT_ACE_BONUS: int = 10     # Added once when an ace can count as 11

# ─── Environment ──────────────────────────────────────────────────────────────

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()


def env_seed() -> int | None:
    """Return BLACKJACK_SEED as an int, or None when unset or not numeric."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    try:
        return int(raw)
    except ValueError:
        return None


def default_seed() -> int:
    """Seed for a new round engine: BLACKJACK_SEED if set, else wall-clock seconds."""
    seed = env_seed()
    if seed is None:
        seed = int(time.time())
    return seed
