from __future__ import annotations

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    query: str = Field(..., description="What to look for in the ingested text")
    top_k: int = Field(default=4, ge=1, le=10)


class SearchResponse(BaseModel):
    query: str
    snippets: list[str] = Field(default_factory=list)
    history: list[str] = Field(default_factory=list)


class AnswerRequest(BaseModel):
    question: str


class AnswerResponse(BaseModel):
    answer: str


class SearchHistoryResponse(BaseModel):
    history: list[str] = Field(default_factory=list)
