"""Turn topics, files and recordings into study text.

Uploaded bytes are forwarded as-is with their media type; the backend decides
what it can read.
"""

from __future__ import annotations

from app.core.context import ContextError, StudyContext
from app.modules.generation import GenerationClient

TOPIC_FEATURE = "fetching topic info"
FILE_FEATURE = "file text extraction"
AUDIO_FEATURE = "audio transcription"

EXTRACT_PROMPT = (
    "Extract all text content from the provided file. The output should be "
    "formatted as plain text, preserving paragraphs and structure where possible."
)
TRANSCRIBE_PROMPT = (
    "Transcribe the audio from the provided file accurately. "
    "The output should be the spoken text only."
)


async def fetch_topic_info(
    client: GenerationClient, ctx: StudyContext, topic: str
) -> str:
    if not topic or not topic.strip():
        raise ContextError("Please enter a topic.")
    instruction = (
        "Generate a comprehensive set of study notes about the following topic: "
        f'"{topic.strip()}". The notes should be well-structured, informative, and '
        "suitable for someone studying this topic. Cover key definitions, main "
        f"concepts, and important examples. Please provide the response in {ctx.language}."
    )
    return await client.generate_text(ctx.model_id, instruction, feature=TOPIC_FEATURE)


async def extract_text_from_file(
    client: GenerationClient, ctx: StudyContext, data: bytes, media_type: str
) -> str:
    if not data:
        raise ContextError("The uploaded file is empty.")
    return await client.generate_multimodal(
        ctx.model_id, EXTRACT_PROMPT, data, media_type, feature=FILE_FEATURE
    )


async def transcribe_audio(
    client: GenerationClient, ctx: StudyContext, data: bytes, media_type: str
) -> str:
    if not data:
        raise ContextError("The uploaded recording is empty.")
    return await client.generate_multimodal(
        ctx.model_id, TRANSCRIBE_PROMPT, data, media_type, feature=AUDIO_FEATURE
    )
