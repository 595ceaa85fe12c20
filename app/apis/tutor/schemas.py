from __future__ import annotations

from pydantic import BaseModel, Field

from app.modules.generation.models import ChatMessage


class TutorRequest(BaseModel):
    history: list[ChatMessage] = Field(
        default_factory=list, description="Full conversation so far, oldest first"
    )
    question: str


class TutorResponse(BaseModel):
    reply: str
    history: list[ChatMessage] = Field(default_factory=list)
