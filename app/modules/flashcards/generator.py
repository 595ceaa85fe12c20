"""Flashcard generator built on the structured generation client.

Exposes one async function that returns validated flashcards for the
ingested material. The model may answer with a bare array or wrap it under
``flashcards``; both decode to the same list, and a missing field is an empty
result rather than an error.
"""

from __future__ import annotations

from app.core.context import StudyContext, require_text
from app.modules.flashcards.models.flashcards import Flashcard
from app.modules.generation import GenerationClient, StructuredOutput
from app.modules.generation.shapes import array, obj, string

FEATURE = "flashcard generation"
DEFAULT_COUNT = 10

FLASHCARDS_SHAPE = array(
    obj({"question": string(), "answer": string()}),
)

FLASHCARDS_OUTPUT: StructuredOutput[list[Flashcard]] = StructuredOutput(
    type_=list[Flashcard],
    shape=FLASHCARDS_SHAPE,
    wrapper_key="flashcards",
    empty=list,
)


def _build_instruction(text: str, count: int, language: str) -> str:
    return (
        f"Based on the following text, generate a list of {int(count)} question and "
        "answer flashcards. The questions should cover key concepts, definitions, "
        "and important facts from the text. The answers should be concise and "
        "directly derivable from the text. "
        f"Please provide the response in {language}.\n\n---\n{text}\n---"
    )


async def generate_flashcards(
    client: GenerationClient, ctx: StudyContext, *, count: int = DEFAULT_COUNT
) -> list[Flashcard]:
    """Generate question/answer flashcards from the ingested text."""
    text = require_text(ctx)
    cards = await client.generate_structured(
        ctx.model_id,
        _build_instruction(text, count, ctx.language),
        FLASHCARDS_OUTPUT,
        feature=FEATURE,
    )
    return _postprocess(cards)


def _postprocess(cards: list[Flashcard]) -> list[Flashcard]:
    """Light normalization without adding complex provider constraints."""
    clean_cards = []
    for c in cards:
        q = (c.question or "").strip()
        a = (c.answer or "").strip()
        if q and a:
            clean_cards.append(Flashcard(question=q, answer=a))
    return clean_cards
