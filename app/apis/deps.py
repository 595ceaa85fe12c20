from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.core.context import ContextStore, StudyContext
from app.modules.generation import GenerationClient
from app.modules.quiz.attempts import AttemptLog


def get_context_store(request: Request) -> ContextStore:
    """The app-wide owner of the study context, created in ``create_app``."""
    return request.app.state.context_store


def get_generation_client(request: Request) -> GenerationClient:
    return request.app.state.generation_client


def get_attempt_log(request: Request) -> AttemptLog:
    return request.app.state.attempt_log


def current_context(
    store: ContextStore = Depends(get_context_store),
) -> StudyContext:
    """Snapshot of the context taken when the request starts."""
    return store.current()


Store = Annotated[ContextStore, Depends(get_context_store)]
Client = Annotated[GenerationClient, Depends(get_generation_client)]
Context = Annotated[StudyContext, Depends(current_context)]
Attempts = Annotated[AttemptLog, Depends(get_attempt_log)]
