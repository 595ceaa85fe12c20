"""Spaced-repetition scheduling exports."""

from .models import DEFAULT_EASE, MIN_EASE, Grade, ScheduledFlashcard
from .scheduler import (
    MAX_EASE,
    MAX_INTERVAL,
    due_cards,
    next_interval,
    review,
    schedule_new,
)

__all__ = [
    "DEFAULT_EASE",
    "MIN_EASE",
    "MAX_EASE",
    "MAX_INTERVAL",
    "Grade",
    "ScheduledFlashcard",
    "due_cards",
    "next_interval",
    "review",
    "schedule_new",
]
