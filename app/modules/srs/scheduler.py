"""SM-2 family scheduler for flashcard reviews.

The grading date is always passed in, never read from a clock, so a review is
a pure function of (card, grade, today). Each review returns a new card; the
input card is left untouched.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Iterable

from app.modules.flashcards.models.flashcards import Flashcard
from app.modules.srs.models import DEFAULT_EASE, MIN_EASE, Grade, ScheduledFlashcard

MIN_INTERVAL = 1
AGAIN_EASE_PENALTY = 0.20
HARD_EASE_PENALTY = 0.15
HARD_MULTIPLIER = 1.2
EASY_BONUS = 1.3
EASY_EASE_BONUS = 0.15
MAX_INTERVAL = 36500
MAX_EASE = 5.0


def _round(x: float) -> int:
    # half-up; round() would send 2.5 to 2
    return int(math.floor(x + 0.5))


def _clamp_ease(ease: float) -> float:
    return round(min(MAX_EASE, max(MIN_EASE, ease)), 2)


def _clamp_interval(days: int) -> int:
    return min(MAX_INTERVAL, days)


def next_interval(card: ScheduledFlashcard, grade: Grade) -> int:
    """Interval in days the card gets for ``grade``.

    Intervals never decrease from ``again`` through ``easy`` for the same card
    and never exceed ``MAX_INTERVAL``.
    """
    prev = min(card.interval, MAX_INTERVAL)
    ease = min(card.ease_factor, MAX_EASE)
    if grade == Grade.AGAIN:
        return MIN_INTERVAL
    hard = max(prev + 1, _round(prev * HARD_MULTIPLIER))
    if grade == Grade.HARD:
        return _clamp_interval(hard)
    good = max(MIN_INTERVAL, _round(prev * ease), hard)
    if grade == Grade.GOOD:
        return _clamp_interval(good)
    return _clamp_interval(max(_round(prev * ease * EASY_BONUS), good))


def next_ease(card: ScheduledFlashcard, grade: Grade) -> float:
    if grade == Grade.AGAIN:
        return _clamp_ease(card.ease_factor - AGAIN_EASE_PENALTY)
    if grade == Grade.HARD:
        return _clamp_ease(card.ease_factor - HARD_EASE_PENALTY)
    if grade == Grade.EASY:
        return _clamp_ease(card.ease_factor + EASY_EASE_BONUS)
    return _clamp_ease(card.ease_factor)


def review(card: ScheduledFlashcard, grade: Grade, today: date) -> ScheduledFlashcard:
    """Apply one grading event and return the rescheduled card."""
    interval = next_interval(card, grade)
    # due dates stop at date.max
    due_in = min(interval, (date.max - today).days)
    return card.model_copy(
        update={
            "interval": interval,
            "ease_factor": next_ease(card, grade),
            "due_date": today + timedelta(days=due_in),
            "last_reviewed": today,
        }
    )


def schedule_new(card: Flashcard, card_id: str, today: date) -> ScheduledFlashcard:
    """Start scheduling a freshly generated card; it is due immediately."""
    return ScheduledFlashcard(
        id=card_id,
        question=card.question,
        answer=card.answer,
        ease_factor=DEFAULT_EASE,
        interval=0,
        due_date=today,
    )


def due_cards(
    cards: Iterable[ScheduledFlashcard], today: date
) -> list[ScheduledFlashcard]:
    """Cards due on or before ``today``, earliest first."""
    return sorted((c for c in cards if c.due_date <= today), key=lambda c: c.due_date)
