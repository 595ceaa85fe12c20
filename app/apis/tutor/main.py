from __future__ import annotations

from fastapi import APIRouter

from app.apis.deps import Client, Context
from app.core.config import settings
from app.modules.tutor import Conversation
from .schemas import TutorRequest, TutorResponse


router = APIRouter()


@router.post(
    f"/{settings.app.version}/tutor",
    response_model=TutorResponse,
    tags=["tutor"],
)
async def tutor_turn(req: TutorRequest, ctx: Context, client: Client) -> TutorResponse:
    conversation = Conversation(req.history)
    reply = await conversation.ask(client, ctx, req.question)
    return TutorResponse(reply=reply, history=list(conversation.messages))
