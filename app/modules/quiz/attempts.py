"""Scoring of quiz passes and the append-only attempt history."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from app.modules.quiz.models import MCQ, MCQAttempt


def incorrect_mcqs(mcqs: Sequence[MCQ], answers: Sequence[Optional[str]]) -> list[MCQ]:
    """Questions whose answer is missing or wrong. Unanswered counts as wrong."""
    missed: list[MCQ] = []
    for i, q in enumerate(mcqs):
        given = answers[i] if i < len(answers) else None
        if given != q.correct_answer:
            missed.append(q)
    return missed


def score_attempt(
    mcqs: Sequence[MCQ], answers: Sequence[Optional[str]], at: datetime
) -> MCQAttempt:
    missed = incorrect_mcqs(mcqs, answers)
    return MCQAttempt(
        timestamp=at,
        score=len(mcqs) - len(missed),
        total=len(mcqs),
        incorrect_questions=[q.question for q in missed],
    )


class AttemptLog:
    """Ordered history of attempts; entries are only ever appended."""

    def __init__(self) -> None:
        self._attempts: list[MCQAttempt] = []

    def record(self, attempt: MCQAttempt) -> None:
        self._attempts.append(attempt)

    @property
    def attempts(self) -> tuple[MCQAttempt, ...]:
        return tuple(self._attempts)

    def __len__(self) -> int:
        return len(self._attempts)
