from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.apis.deps import Client, Context
from app.core.config import settings
from app.core.context import require_text
from app.core.db.base import get_session
from app.modules.search import SearchHistoryStore, generate_answer, semantic_search
from .schemas import (
    AnswerRequest,
    AnswerResponse,
    SearchHistoryResponse,
    SearchRequest,
    SearchResponse,
)


router = APIRouter()


@router.post(
    f"/{settings.app.version}/search",
    response_model=SearchResponse,
    tags=["search"],
)
async def search(
    req: SearchRequest,
    ctx: Context,
    client: Client,
    session: AsyncSession = Depends(get_session),
) -> SearchResponse:
    require_text(ctx)
    # History is updated before the call, so failed searches are remembered too
    history = await SearchHistoryStore(session).record(req.query)
    snippets = await semantic_search(client, ctx, req.query, top_k=req.top_k)
    return SearchResponse(query=req.query, snippets=snippets, history=history)


@router.post(
    f"/{settings.app.version}/search/answer",
    response_model=AnswerResponse,
    tags=["search"],
)
async def answer(req: AnswerRequest, ctx: Context, client: Client) -> AnswerResponse:
    return AnswerResponse(answer=await generate_answer(client, ctx, req.question))


@router.get(
    f"/{settings.app.version}/search/history",
    response_model=SearchHistoryResponse,
    tags=["search"],
)
async def get_history(
    session: AsyncSession = Depends(get_session),
) -> SearchHistoryResponse:
    return SearchHistoryResponse(history=await SearchHistoryStore(session).load())


@router.delete(
    f"/{settings.app.version}/search/history",
    response_model=SearchHistoryResponse,
    tags=["search"],
)
async def clear_history(
    session: AsyncSession = Depends(get_session),
) -> SearchHistoryResponse:
    await SearchHistoryStore(session).clear()
    return SearchHistoryResponse(history=[])
