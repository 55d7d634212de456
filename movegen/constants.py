"""Game constants shared by the move generator."""

from __future__ import annotations

import string

BOARD_SIZE = 15
CENTER = BOARD_SIZE // 2  # 0-indexed center square

ALPHABET = string.ascii_uppercase
BLANK = "?"  # wildcard tile on the rack
EMPTY = ""   # empty board cell

# Placements shorter than this are never reported
MIN_WORD_LENGTH = 2

# Search budget (None = unbounded)
DEFAULT_MAX_STEPS: int | None = None
DEFAULT_TIME_LIMIT: float | None = None
