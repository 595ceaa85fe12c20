from __future__ import annotations

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from app.apis.deps import Client, Store
from app.core.config import settings
from app.core.context import StudyContext
from app.modules.ingest import extract_text_from_file, fetch_topic_info, transcribe_audio
from .schemas import (
    ContextResponse,
    ContextSettingsRequest,
    IngestResponse,
    IngestTextRequest,
    IngestTopicRequest,
)


router = APIRouter()


def _describe(ctx: StudyContext) -> ContextResponse:
    return ContextResponse(
        has_text=ctx.has_text,
        characters=len(ctx.ingested_text or ""),
        model_id=ctx.model_id,
        language=ctx.language,
        available_models=settings.generation.available_models,
    )


@router.get(
    f"/{settings.app.version}/context",
    response_model=ContextResponse,
    tags=["ingest"],
)
async def get_context(store: Store) -> ContextResponse:
    return _describe(store.current())


@router.put(
    f"/{settings.app.version}/context/settings",
    response_model=ContextResponse,
    tags=["ingest"],
)
async def update_settings(req: ContextSettingsRequest, store: Store) -> ContextResponse:
    if req.model_id and req.model_id not in settings.generation.available_models:
        raise HTTPException(status_code=422, detail=f"Unknown model: {req.model_id}")
    return _describe(store.configure(model_id=req.model_id, language=req.language))


@router.post(
    f"/{settings.app.version}/ingest/text",
    response_model=IngestResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["ingest"],
)
async def ingest_text(req: IngestTextRequest, store: Store) -> IngestResponse:
    ctx = store.ingest(req.text)
    return IngestResponse(text=req.text, context=_describe(ctx))


@router.post(
    f"/{settings.app.version}/ingest/topic",
    response_model=IngestResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["ingest"],
)
async def ingest_topic(
    req: IngestTopicRequest, store: Store, client: Client
) -> IngestResponse:
    text = await fetch_topic_info(client, store.current(), req.topic)
    return IngestResponse(text=text, context=_describe(store.ingest(text)))


@router.post(
    f"/{settings.app.version}/ingest/file",
    response_model=IngestResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["ingest"],
)
async def ingest_file(
    store: Store, client: Client, file: UploadFile = File(...)
) -> IngestResponse:
    data = await file.read()
    media_type = file.content_type or "application/octet-stream"
    text = await extract_text_from_file(client, store.current(), data, media_type)
    return IngestResponse(text=text, context=_describe(store.ingest(text)))


@router.post(
    f"/{settings.app.version}/ingest/audio",
    response_model=IngestResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["ingest"],
)
async def ingest_audio(
    store: Store, client: Client, file: UploadFile = File(...)
) -> IngestResponse:
    data = await file.read()
    media_type = file.content_type or "audio/webm"
    text = await transcribe_audio(client, store.current(), data, media_type)
    return IngestResponse(text=text, context=_describe(store.ingest(text)))


@router.delete(
    f"/{settings.app.version}/ingest",
    response_model=ContextResponse,
    tags=["ingest"],
)
async def clear_ingested(store: Store) -> ContextResponse:
    return _describe(store.clear())
