from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.modules.quiz.models import MCQ, Difficulty, MCQAttempt


class GenerateMCQRequest(BaseModel):
    difficulty: Difficulty = Difficulty.MEDIUM
    count: int = Field(default=5, ge=1, le=20)


class MCQListResponse(BaseModel):
    mcqs: list[MCQ] = Field(default_factory=list)


class SubmitAttemptRequest(BaseModel):
    mcqs: list[MCQ]
    answers: list[Optional[str]] = Field(
        default_factory=list, description="Chosen option per question; null if skipped"
    )


class AttemptResponse(BaseModel):
    attempt: MCQAttempt
    incorrect: list[MCQ] = Field(default_factory=list)


class AttemptHistoryResponse(BaseModel):
    attempts: list[MCQAttempt] = Field(default_factory=list)


class StudyGuideRequest(BaseModel):
    incorrect: list[MCQ] = Field(..., min_length=1)


class TextResponse(BaseModel):
    text: str
