"""Pydantic models for multiple-choice quizzes and attempt history."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class MCQ(BaseModel):
    """A single multiple-choice question; ``correct_answer`` is one of ``options``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer: str = Field(alias="correctAnswer")
    explanation: str


class MCQAttempt(BaseModel):
    """One scored pass through a quiz. Never edited after it is recorded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: datetime = Field(alias="date")
    score: int
    total: int
    incorrect_questions: list[str] = Field(
        default_factory=list, alias="incorrectQuestions"
    )
