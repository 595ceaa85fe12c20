from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ContextResponse(BaseModel):
    has_text: bool
    characters: int = 0
    model_id: str
    language: str
    available_models: list[str] = Field(default_factory=list)


class ContextSettingsRequest(BaseModel):
    model_id: Optional[str] = Field(default=None, description="Model to use for every feature")
    language: Optional[str] = Field(default=None, description="Response language, e.g. 'English'")


class IngestTextRequest(BaseModel):
    text: str = Field(..., description="Study material to work from")


class IngestTopicRequest(BaseModel):
    topic: str = Field(..., description="Topic to generate study notes for")


class IngestResponse(BaseModel):
    text: str
    context: ContextResponse
