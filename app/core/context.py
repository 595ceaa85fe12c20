"""Process-wide study context.

The ingested material, the selected model and the response language are read
by every feature. They live in one immutable ``StudyContext`` value; the
``ContextStore`` is its single owner and swaps in a new value on every change,
so a feature holding a context never sees it mutate under it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class ContextError(Exception):
    """A feature was invoked without the input it needs (e.g. nothing ingested)."""


class StudyContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    ingested_text: Optional[str] = None
    model_id: str = settings.generation.default_model
    language: str = settings.generation.default_language

    @property
    def has_text(self) -> bool:
        return bool(self.ingested_text and self.ingested_text.strip())


def require_text(ctx: StudyContext) -> str:
    """Return the ingested text or raise ``ContextError``."""
    if not ctx.has_text:
        raise ContextError("Please ingest some text first.")
    return ctx.ingested_text  # type: ignore[return-value]


class ContextStore:
    """Owns the current ``StudyContext`` for the lifetime of the app."""

    def __init__(self, initial: Optional[StudyContext] = None) -> None:
        self._ctx = initial or StudyContext()

    def current(self) -> StudyContext:
        return self._ctx

    def ingest(self, text: str) -> StudyContext:
        if not text or not text.strip():
            raise ContextError("Cannot ingest empty text.")
        self._ctx = self._ctx.model_copy(update={"ingested_text": text})
        logger.info("Ingested %d characters", len(text))
        return self._ctx

    def clear(self) -> StudyContext:
        self._ctx = self._ctx.model_copy(update={"ingested_text": None})
        return self._ctx

    def configure(
        self, *, model_id: Optional[str] = None, language: Optional[str] = None
    ) -> StudyContext:
        update: dict[str, str] = {}
        if model_id:
            update["model_id"] = model_id
        if language:
            update["language"] = language
        if update:
            self._ctx = self._ctx.model_copy(update=update)
        return self._ctx
