"""Concept map generation from the ingested text or from a bare topic."""

from __future__ import annotations

from app.core.context import ContextError, StudyContext, require_text
from app.modules.concept_map.models import ConceptMapData
from app.modules.generation import GenerationClient, StructuredOutput
from app.modules.generation.shapes import array, integer, obj, string

FEATURE = "concept map generation"

CONCEPT_MAP_OUTPUT: StructuredOutput[ConceptMapData] = StructuredOutput(
    type_=ConceptMapData,
    shape=obj(
        {
            "nodes": array(obj({"id": string(), "group": integer()})),
            "links": array(
                obj({"source": string(), "target": string(), "value": integer()})
            ),
        }
    ),
    empty=ConceptMapData,
)

_MAP_RULES = (
    "Identify the main concepts as nodes and the relationships between them as "
    "links. Provide the output as a JSON object with 'nodes' and 'links' arrays. "
    "Each node should have an 'id' (the concept name) and a 'group' (a number for "
    "coloring). Each link should have a 'source' id, a 'target' id, and a 'value' "
    "representing the strength of the relationship (from 1 to 10)."
)


async def generate_concept_map(
    client: GenerationClient, ctx: StudyContext
) -> ConceptMapData:
    text = require_text(ctx)
    instruction = (
        f"Analyze the following text and generate a concept map. {_MAP_RULES} "
        f"Please provide the concept names (node ids) in {ctx.language}."
        f"\n\n---\n{text}\n---"
    )
    return await client.generate_structured(
        ctx.model_id, instruction, CONCEPT_MAP_OUTPUT, feature=FEATURE
    )


async def generate_concept_map_for_topic(
    client: GenerationClient, ctx: StudyContext, topic: str
) -> ConceptMapData:
    if not topic or not topic.strip():
        raise ContextError("Please enter a topic.")
    instruction = (
        f'Generate a concept map for the topic: "{topic.strip()}". {_MAP_RULES} '
        f"Please provide the concept names (node ids) in {ctx.language}."
    )
    return await client.generate_structured(
        ctx.model_id,
        instruction,
        CONCEPT_MAP_OUTPUT,
        feature=f'{FEATURE} for topic "{topic.strip()}"',
    )
