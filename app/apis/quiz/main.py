from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, status

from app.apis.deps import Attempts, Client, Context
from app.core.config import settings
from app.modules.quiz.attempts import incorrect_mcqs, score_attempt
from app.modules.quiz.generator import generate_mcqs, generate_study_guide
from .schemas import (
    AttemptHistoryResponse,
    AttemptResponse,
    GenerateMCQRequest,
    MCQListResponse,
    StudyGuideRequest,
    SubmitAttemptRequest,
    TextResponse,
)


router = APIRouter()


@router.post(
    f"/{settings.app.version}/quiz/mcqs",
    response_model=MCQListResponse,
    tags=["quiz"],
)
async def create_mcqs(
    req: GenerateMCQRequest, ctx: Context, client: Client
) -> MCQListResponse:
    mcqs = await generate_mcqs(client, ctx, difficulty=req.difficulty, count=req.count)
    return MCQListResponse(mcqs=mcqs)


@router.post(
    f"/{settings.app.version}/quiz/attempts",
    response_model=AttemptResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["quiz"],
)
async def submit_attempt(req: SubmitAttemptRequest, log: Attempts) -> AttemptResponse:
    attempt = score_attempt(req.mcqs, req.answers, datetime.now(timezone.utc))
    log.record(attempt)
    return AttemptResponse(attempt=attempt, incorrect=incorrect_mcqs(req.mcqs, req.answers))


@router.get(
    f"/{settings.app.version}/quiz/attempts",
    response_model=AttemptHistoryResponse,
    tags=["quiz"],
)
async def list_attempts(log: Attempts) -> AttemptHistoryResponse:
    return AttemptHistoryResponse(attempts=list(log.attempts))


@router.post(
    f"/{settings.app.version}/quiz/study-guide",
    response_model=TextResponse,
    tags=["quiz"],
)
async def create_study_guide(
    req: StudyGuideRequest, ctx: Context, client: Client
) -> TextResponse:
    return TextResponse(text=await generate_study_guide(client, ctx, req.incorrect))
