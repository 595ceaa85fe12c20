from __future__ import annotations

from fastapi import APIRouter

from app.apis.deps import Client, Context
from app.core.config import settings
from app.modules.concept_map import (
    ConceptMapData,
    generate_concept_map,
    generate_concept_map_for_topic,
)
from app.modules.planning import (
    LessonPlan,
    StudyPlan,
    generate_lesson_plan,
    generate_study_plan,
)
from app.modules.summary import generate_summary
from app.modules.writing import (
    EssayOutline,
    generate_essay_arguments,
    generate_essay_outline,
)
from .schemas import ConceptMapRequest, StudyPlanRequest, TextResponse, TopicRequest


router = APIRouter()


@router.post(
    f"/{settings.app.version}/summary",
    response_model=TextResponse,
    tags=["summary"],
)
async def summarize(ctx: Context, client: Client) -> TextResponse:
    return TextResponse(text=await generate_summary(client, ctx))


@router.post(
    f"/{settings.app.version}/concept-map",
    response_model=ConceptMapData,
    tags=["concept_map"],
)
async def concept_map(
    req: ConceptMapRequest, ctx: Context, client: Client
) -> ConceptMapData:
    if req.topic:
        return await generate_concept_map_for_topic(client, ctx, req.topic)
    return await generate_concept_map(client, ctx)


@router.post(
    f"/{settings.app.version}/essay/outline",
    response_model=EssayOutline,
    tags=["essay"],
)
async def essay_outline(req: TopicRequest, ctx: Context, client: Client) -> EssayOutline:
    return await generate_essay_outline(client, ctx, req.topic)


@router.post(
    f"/{settings.app.version}/essay/arguments",
    response_model=TextResponse,
    tags=["essay"],
)
async def essay_arguments(
    req: TopicRequest, ctx: Context, client: Client
) -> TextResponse:
    return TextResponse(text=await generate_essay_arguments(client, ctx, req.topic))


@router.post(
    f"/{settings.app.version}/lesson-plan",
    response_model=LessonPlan,
    tags=["planning"],
)
async def lesson_plan(req: TopicRequest, ctx: Context, client: Client) -> LessonPlan:
    return await generate_lesson_plan(client, ctx, req.topic)


@router.post(
    f"/{settings.app.version}/study-plan",
    response_model=StudyPlan,
    tags=["planning"],
)
async def study_plan(req: StudyPlanRequest, ctx: Context, client: Client) -> StudyPlan:
    return await generate_study_plan(client, ctx, req.days)
