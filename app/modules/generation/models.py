"""Pydantic models for generation requests and conversation history."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.generation.shapes import ShapeNode


class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """One turn of a conversation; histories are append-only lists of these."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    content: str


class Attachment(BaseModel):
    """Binary payload sent inline with the instruction (file or audio)."""

    data: bytes
    media_type: str = Field(..., description="Passed to the backend untouched")


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model_id: str
    instruction: str
    attachment: Optional[Attachment] = None
    shape: Optional[ShapeNode] = None
    system_instruction: Optional[str] = None
    history: list[ChatMessage] = Field(default_factory=list)
