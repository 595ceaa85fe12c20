"""Pydantic models for spaced-repetition scheduling state."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field

from app.modules.flashcards.models.flashcards import Flashcard

DEFAULT_EASE = 2.5
MIN_EASE = 1.3


class Grade(str, Enum):
    """Recall quality reported by the learner."""

    AGAIN = "again"
    HARD = "hard"
    GOOD = "good"
    EASY = "easy"


class ScheduledFlashcard(Flashcard):
    """A flashcard with its review state.

    ``due_date`` is always ``interval`` days after ``last_reviewed``; a card
    that was never graded is due on the day it was scheduled.
    """

    id: str
    ease_factor: float = Field(default=DEFAULT_EASE, ge=MIN_EASE)
    interval: int = Field(default=0, ge=0, description="Whole days")
    due_date: date
    last_reviewed: Optional[date] = None
