"""Structured generation client using pydantic-ai and the Gemini provider.

Each call builds a fresh agent, sends exactly one request and converts the
reply into text or a validated value. There is no retry, no cache and no
session: conversation history is passed in by the caller on every call.
Imports for the LLM provider are kept lazy to avoid import-time errors when
credentials are missing.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_ai import Agent, BinaryContent
from pydantic_ai.messages import (
    ModelMessage,
    ModelRequest,
    ModelResponse,
    TextPart,
    UserPromptPart,
)

from app.core.config import settings
from app.core.logging import feature_logger, get_logger
from app.modules.generation.decoding import ShapeKind, UndecodableText, decode
from app.modules.generation.errors import BackendError, MalformedResponseError
from app.modules.generation.models import (
    Attachment,
    ChatMessage,
    ChatRole,
    GenerationRequest,
)
from app.modules.generation.shapes import ShapeNode

logger = get_logger(__name__)

T = TypeVar("T")

ModelBuilder = Callable[[str], Any]


def _build_google_model(model_name: str):
    """Build the Google Gemini model provider (lazy import)."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=settings.generation.gemini_api_key)
    return GoogleModel(model_name, provider=provider)


def _build_openrouter_model(model_name: str):
    """Build OpenRouter model via OpenAI-compatible provider (lazy import)."""
    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    if not settings.generation.openrouter_api_key:
        raise RuntimeError(
            "OpenRouter API key not configured. Set OPENROUTER_API_KEY in your environment."
        )

    provider = OpenAIProvider(
        api_key=settings.generation.openrouter_api_key,
        base_url="https://openrouter.ai/api/v1",
    )
    # OpenRouter ids are namespaced ("google/gemini-2.5-flash")
    if "/" not in model_name:
        model_name = settings.generation.openrouter_model
    return OpenAIChatModel(model_name, provider=provider)


def build_model_by_settings(model_name: str):
    provider = (settings.generation.model_provider or "google").lower()
    if provider == "openrouter":
        return _build_openrouter_model(model_name)
    return _build_google_model(model_name)


def shape_directive(shape: ShapeNode) -> str:
    return (
        "Respond with a single JSON value only: no markdown, no code fences, "
        "no commentary. The JSON must conform to this schema:\n"
        f"{json.dumps(shape.to_schema(), ensure_ascii=False)}"
    )


@dataclass
class StructuredOutput(Generic[T]):
    """Binds the expected pydantic type to the shape constraint sent with the request.

    ``wrapper_key`` names the field the model may wrap a collection in
    (``{"flashcards": [...]}``). ``empty`` builds the value returned when that
    field is absent; without it an absent value is a malformed response.
    """

    type_: Any
    shape: ShapeNode
    wrapper_key: Optional[str] = None
    empty: Optional[Callable[[], T]] = None
    adapter: TypeAdapter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.adapter = TypeAdapter(self.type_)


def _history_messages(history: Sequence[ChatMessage]) -> list[ModelMessage]:
    messages: list[ModelMessage] = []
    for msg in history:
        if msg.role == ChatRole.USER:
            messages.append(ModelRequest(parts=[UserPromptPart(content=msg.content)]))
        else:
            messages.append(ModelResponse(parts=[TextPart(content=msg.content)]))
    return messages


class GenerationClient:
    """Stateless client; safe to share and to call concurrently."""

    def __init__(self, *, model_builder: Optional[ModelBuilder] = None) -> None:
        self._build_model = model_builder or build_model_by_settings

    async def complete(self, request: GenerationRequest, *, feature: str) -> str:
        """Send one request and return the raw response text."""
        instructions = request.system_instruction
        if request.shape is not None:
            directive = shape_directive(request.shape)
            instructions = f"{instructions}\n\n{directive}" if instructions else directive

        prompt: Any = request.instruction
        if request.attachment is not None:
            prompt = [
                request.instruction,
                BinaryContent(
                    data=request.attachment.data,
                    media_type=request.attachment.media_type,
                ),
            ]

        log = feature_logger(logger, feature, request.model_id)
        log.debug("Generation request")
        try:
            model = self._build_model(request.model_id)
            agent: Agent[None, str] = Agent[None, str](
                model=model,
                output_type=str,
                instructions=instructions,
            )
            res = await agent.run(
                prompt,
                message_history=_history_messages(request.history) or None,
            )
        except Exception as e:  # noqa: BLE001
            log.exception("Error during '%s'", feature)
            raise BackendError(feature, str(e)) from e
        return res.output

    async def generate_text(
        self,
        model_id: str,
        instruction: str,
        *,
        feature: str,
        system: Optional[str] = None,
        history: Optional[Sequence[ChatMessage]] = None,
    ) -> str:
        request = GenerationRequest(
            model_id=model_id,
            instruction=instruction,
            system_instruction=system,
            history=list(history or []),
        )
        return await self.complete(request, feature=feature)

    async def generate_multimodal(
        self,
        model_id: str,
        instruction: str,
        data: bytes,
        media_type: str,
        *,
        feature: str,
    ) -> str:
        request = GenerationRequest(
            model_id=model_id,
            instruction=instruction,
            attachment=Attachment(data=data, media_type=media_type),
        )
        return await self.complete(request, feature=feature)

    async def generate_structured(
        self,
        model_id: str,
        instruction: str,
        output: StructuredOutput[T],
        *,
        feature: str,
    ) -> T:
        request = GenerationRequest(
            model_id=model_id, instruction=instruction, shape=output.shape
        )
        raw = await self.complete(request, feature=feature)
        return self.decode(raw, output, feature=feature)

    def decode(self, raw: str, output: StructuredOutput[T], *, feature: str) -> T:
        """Decode response text into ``output.type_`` or raise ``MalformedResponseError``."""
        try:
            shape = decode(raw, output.wrapper_key)
        except UndecodableText as e:
            self._log_malformed(feature, raw, str(e))
            raise MalformedResponseError(feature, raw, str(e)) from e

        if shape.kind == ShapeKind.ABSENT:
            if output.empty is not None:
                return output.empty()
            self._log_malformed(feature, raw, "empty response")
            raise MalformedResponseError(feature, raw, "empty response")

        try:
            return output.adapter.validate_python(shape.value)
        except ValidationError as e:
            self._log_malformed(feature, raw, str(e))
            raise MalformedResponseError(feature, raw, str(e)) from e

    @staticmethod
    def _log_malformed(feature: str, raw: str, reason: str) -> None:
        log = feature_logger(logger, feature)
        log.error("JSON parsing error during '%s': %s", feature, reason)
        log.error("Received malformed text from API: %s", raw)
