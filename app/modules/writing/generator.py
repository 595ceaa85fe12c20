"""Essay outline and devil's-advocate arguments grounded in the ingested text."""

from __future__ import annotations

from app.core.context import ContextError, StudyContext, require_text
from app.modules.generation import GenerationClient, StructuredOutput
from app.modules.generation.shapes import array, obj, string
from app.modules.writing.models import EssayOutline

OUTLINE_FEATURE = "essay outline generation"
ARGUMENTS_FEATURE = "essay argument generation"

ESSAY_OUTLINE_OUTPUT: StructuredOutput[EssayOutline] = StructuredOutput(
    type_=EssayOutline,
    shape=obj(
        {
            "title": string("A compelling title for the essay."),
            "introduction": string(
                "A paragraph introducing the topic and the main thesis."
            ),
            "body": array(
                obj(
                    {
                        "heading": string(
                            "The main topic or argument of this paragraph."
                        ),
                        "points": array(
                            string(),
                            "Key ideas to be discussed in this paragraph, supported "
                            "by evidence from the context.",
                        ),
                    }
                ),
                "The main body paragraphs of the essay.",
            ),
            "conclusion": string(
                "A paragraph summarizing the main points and restating the thesis."
            ),
        }
    ),
)


def _require_topic(topic: str) -> str:
    if not topic or not topic.strip():
        raise ContextError("Please enter an essay topic or thesis.")
    return topic.strip()


async def generate_essay_outline(
    client: GenerationClient, ctx: StudyContext, topic: str
) -> EssayOutline:
    text = require_text(ctx)
    instruction = (
        "Based on the provided context material, generate a structured essay outline "
        f'for the following topic/thesis: "{_require_topic(topic)}". The outline should '
        "include a title, an introduction, several body sections with headings and "
        "bullet points, and a conclusion. The points in the body should be derived "
        f"from the context. Please generate the outline in {ctx.language}."
        f"\n\n--- CONTEXT MATERIAL ---\n{text}\n---"
    )
    return await client.generate_structured(
        ctx.model_id, instruction, ESSAY_OUTLINE_OUTPUT, feature=OUTLINE_FEATURE
    )


async def generate_essay_arguments(
    client: GenerationClient, ctx: StudyContext, topic: str
) -> str:
    text = require_text(ctx)
    instruction = (
        "Based on the provided context material, play the role of a \"devil's "
        f'advocate" for the following essay topic/thesis: "{_require_topic(topic)}". '
        "Generate a list of potential counter-arguments, weaknesses in the likely "
        "arguments, or alternative perspectives that the author should consider "
        "addressing to make their essay more robust. Present this as a bulleted "
        f"list. Respond in {ctx.language}.\n\n--- CONTEXT MATERIAL ---\n{text}\n---"
    )
    return await client.generate_text(
        ctx.model_id, instruction, feature=ARGUMENTS_FEATURE
    )
