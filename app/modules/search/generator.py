"""Semantic search and grounded question answering over the ingested text.

Ranking is entirely the model's: it is asked to quote the most relevant
snippets. An answer without a ``snippets`` field means nothing was found.
"""

from __future__ import annotations

from app.core.context import ContextError, StudyContext, require_text
from app.modules.generation import GenerationClient, StructuredOutput
from app.modules.generation.shapes import array, obj, string

SEARCH_FEATURE = "semantic search"
ANSWER_FEATURE = "answer generation"
MAX_TOP_K = 10

SEARCH_OUTPUT: StructuredOutput[list[str]] = StructuredOutput(
    type_=list[str],
    shape=obj({"snippets": array(string())}),
    wrapper_key="snippets",
    empty=list,
)


def _search_instruction(text: str, query: str, top_k: int) -> str:
    return (
        f"From the provided text, extract the top {top_k} most relevant snippets "
        f'related to the following query: "{query}". The snippets should be direct '
        "quotes from the text.\n\n"
        f"--- TEXT ---\n{text}\n--- QUERY ---\n{query}\n"
    )


async def semantic_search(
    client: GenerationClient, ctx: StudyContext, query: str, *, top_k: int = 4
) -> list[str]:
    text = require_text(ctx)
    if not query or not query.strip():
        raise ContextError("Please enter a search query.")
    top_k = max(1, min(MAX_TOP_K, int(top_k)))
    snippets = await client.generate_structured(
        ctx.model_id,
        _search_instruction(text, query.strip(), top_k),
        SEARCH_OUTPUT,
        feature=SEARCH_FEATURE,
    )
    return [s for s in snippets if s.strip()][:top_k]


def _answer_instruction(text: str, question: str, language: str) -> str:
    return (
        f"Using ONLY the provided context below, answer the user's question in {language}. "
        'If the answer is not found in the context, say "The answer is not available '
        f'in the provided text." in {language}.\n\n'
        f"--- CONTEXT ---\n{text}\n\n--- QUESTION ---\n{question}"
    )


async def generate_answer(
    client: GenerationClient, ctx: StudyContext, question: str
) -> str:
    text = require_text(ctx)
    if not question or not question.strip():
        raise ContextError("Please enter a question.")
    return await client.generate_text(
        ctx.model_id,
        _answer_instruction(text, question.strip(), ctx.language),
        feature=ANSWER_FEATURE,
    )
