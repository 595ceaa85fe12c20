from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ConceptMapRequest(BaseModel):
    topic: Optional[str] = Field(
        default=None, description="Map a topic instead of the ingested text"
    )


class TopicRequest(BaseModel):
    topic: str


class StudyPlanRequest(BaseModel):
    days: int = Field(default=7, ge=1, le=30)


class TextResponse(BaseModel):
    text: str
