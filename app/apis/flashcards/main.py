from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, status

from app.apis.deps import Client, Context
from app.core.config import settings
from app.modules.flashcards.generator import generate_flashcards
from app.modules.srs.scheduler import due_cards, review, schedule_new
from .schemas import (
    DueCardsRequest,
    FlashcardsResponse,
    GenerateFlashcardsRequest,
    ReviewRequest,
    ReviewResponse,
    ScheduleCardsRequest,
    ScheduledCardsResponse,
)


router = APIRouter()


@router.post(
    f"/{settings.app.version}/flashcards",
    response_model=FlashcardsResponse,
    status_code=status.HTTP_200_OK,
    tags=["flashcards"],
)
async def create_flashcards(
    req: GenerateFlashcardsRequest, ctx: Context, client: Client
) -> FlashcardsResponse:
    cards = await generate_flashcards(client, ctx, count=req.count)
    return FlashcardsResponse(flashcards=cards)


@router.post(
    f"/{settings.app.version}/srs/cards",
    response_model=ScheduledCardsResponse,
    tags=["srs"],
)
async def schedule_cards(req: ScheduleCardsRequest) -> ScheduledCardsResponse:
    today = req.today or date.today()
    return ScheduledCardsResponse(
        cards=[schedule_new(c, str(uuid.uuid4()), today) for c in req.flashcards]
    )


@router.post(
    f"/{settings.app.version}/srs/review",
    response_model=ReviewResponse,
    tags=["srs"],
)
async def review_card(req: ReviewRequest) -> ReviewResponse:
    return ReviewResponse(card=review(req.card, req.grade, req.today or date.today()))


@router.post(
    f"/{settings.app.version}/srs/due",
    response_model=ScheduledCardsResponse,
    tags=["srs"],
)
async def list_due_cards(req: DueCardsRequest) -> ScheduledCardsResponse:
    return ScheduledCardsResponse(cards=due_cards(req.cards, req.today or date.today()))
