from __future__ import annotations

from app.core.context import StudyContext, require_text
from app.modules.generation import GenerationClient

FEATURE = "summary generation"


async def generate_summary(client: GenerationClient, ctx: StudyContext) -> str:
    """Concise summary of the ingested text in the selected language."""
    text = require_text(ctx)
    instruction = (
        "Summarize the following text in a concise and informative way, "
        f"in {ctx.language}:\n\n---\n{text}\n---"
    )
    return await client.generate_text(ctx.model_id, instruction, feature=FEATURE)
