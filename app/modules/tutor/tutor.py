"""Socratic AI tutor.

The client keeps no session, so every turn sends the whole conversation.
``Conversation`` is the caller-side history; it only grows.
"""

from __future__ import annotations

from typing import Sequence

from app.core.context import ContextError, StudyContext, require_text
from app.modules.generation import ChatMessage, ChatRole, GenerationClient

FEATURE = "AI Tutor response generation"
TUTOR_NAME = "Synapse"


def _system_instruction(text: str, language: str) -> str:
    return (
        f"You are an AI Tutor named '{TUTOR_NAME}'. Your primary goal is to help the "
        "user understand a topic by guiding them with the Socratic method, not by "
        "giving direct answers. Use the provided context material to stay on topic. "
        "The conversation history is provided for context. When the user asks a "
        "question, respond with a thoughtful, probing question that encourages them "
        "to think critically and find the answer themselves. If the user is stuck, "
        "you can provide small hints. Keep your responses concise and "
        f"conversational. Please respond in {language}.\n\n"
        f"--- CONTEXT MATERIAL ---\n{text}\n---"
    )


async def get_tutor_response(
    client: GenerationClient,
    ctx: StudyContext,
    history: Sequence[ChatMessage],
    question: str,
) -> str:
    text = require_text(ctx)
    if not question or not question.strip():
        raise ContextError("Please enter a question.")
    return await client.generate_text(
        ctx.model_id,
        question.strip(),
        feature=FEATURE,
        system=_system_instruction(text, ctx.language),
        history=history,
    )


class Conversation:
    def __init__(self, messages: Sequence[ChatMessage] = ()) -> None:
        self._messages: list[ChatMessage] = list(messages)

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    async def ask(
        self, client: GenerationClient, ctx: StudyContext, question: str
    ) -> str:
        """Send ``question`` with the history so far; record both turns on success."""
        reply = await get_tutor_response(client, ctx, self._messages, question)
        self._messages.append(ChatMessage(role=ChatRole.USER, content=question.strip()))
        self._messages.append(ChatMessage(role=ChatRole.MODEL, content=reply))
        return reply
