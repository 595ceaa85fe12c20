from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OutlineSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str
    points: list[str] = Field(default_factory=list)


class EssayOutline(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    introduction: str
    body: list[OutlineSection]
    conclusion: str
