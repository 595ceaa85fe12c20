"""Scripted stand-in for the remote model, built on pydantic-ai's FunctionModel."""

from __future__ import annotations

from typing import Any, Union

from pydantic_ai.messages import (
    ModelMessage,
    ModelRequest,
    ModelResponse,
    TextPart,
    UserPromptPart,
)
from pydantic_ai.models.function import AgentInfo, FunctionModel

from app.modules.generation import GenerationClient

Reply = Union[str, Exception]


class FakeBackend:
    """Answers with the scripted replies in order; the last one repeats.

    Every call is recorded so tests can check what was sent.
    """

    def __init__(self, *replies: Reply) -> None:
        self.replies: list[Reply] = list(replies)
        self.calls: list[list[ModelMessage]] = []
        self.model_ids: list[str] = []

    def script(self, *replies: Reply) -> "FakeBackend":
        self.replies = list(replies)
        return self

    def _respond(self, messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        self.calls.append(list(messages))
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return ModelResponse(parts=[TextPart(content=reply)])

    def build(self, model_id: str) -> FunctionModel:
        self.model_ids.append(model_id)
        return FunctionModel(self._respond)

    def client(self) -> GenerationClient:
        return GenerationClient(model_builder=self.build)

    # Inspection helpers

    @property
    def last_request(self) -> ModelRequest:
        req = self.calls[-1][-1]
        assert isinstance(req, ModelRequest)
        return req

    @property
    def last_prompt(self) -> Any:
        for part in self.last_request.parts:
            if isinstance(part, UserPromptPart):
                return part.content
        return None

    @property
    def last_instructions(self) -> str | None:
        return self.last_request.instructions

    def transcript(self, call: int = -1) -> list[tuple[str, str]]:
        """(role, text) pairs of one call, oldest first."""
        out: list[tuple[str, str]] = []
        for msg in self.calls[call]:
            if isinstance(msg, ModelRequest):
                for part in msg.parts:
                    if isinstance(part, UserPromptPart) and isinstance(part.content, str):
                        out.append(("user", part.content))
            elif isinstance(msg, ModelResponse):
                for part in msg.parts:
                    if isinstance(part, TextPart):
                        out.append(("model", part.content))
        return out
