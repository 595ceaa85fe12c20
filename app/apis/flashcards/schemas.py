from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from app.modules.flashcards.models.flashcards import Flashcard
from app.modules.srs.models import Grade, ScheduledFlashcard


class GenerateFlashcardsRequest(BaseModel):
    count: int = Field(default=10, ge=1, le=50, description="Number of cards to ask for")


class FlashcardsResponse(BaseModel):
    flashcards: list[Flashcard] = Field(default_factory=list)


class ScheduleCardsRequest(BaseModel):
    flashcards: list[Flashcard]
    today: Optional[date] = None


class ScheduledCardsResponse(BaseModel):
    cards: list[ScheduledFlashcard] = Field(default_factory=list)


class ReviewRequest(BaseModel):
    card: ScheduledFlashcard
    grade: Grade
    today: Optional[date] = Field(
        default=None, description="Grading date; defaults to the server's date"
    )


class ReviewResponse(BaseModel):
    card: ScheduledFlashcard


class DueCardsRequest(BaseModel):
    cards: list[ScheduledFlashcard]
    today: Optional[date] = None
