"""Word counts and reading time estimates."""

from __future__ import annotations

import math


def word_count(text: str) -> int:
    """Number of whitespace-separated tokens in ``text``."""
    return len(text.split())


def reading_minutes(words: int, words_per_minute: int = 200, minimum: int = 0) -> int:
    """Estimated minutes to read ``words`` words, rounded up.

    An empty body reads in zero minutes unless ``minimum`` says otherwise.
    """
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    return max(minimum, math.ceil(words / words_per_minute))
