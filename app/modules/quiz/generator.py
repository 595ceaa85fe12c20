"""MCQ generator and personalized study guide.

Provides:
- async generate_mcqs(client, ctx, difficulty, count) -> list[MCQ]
- async generate_study_guide(client, ctx, incorrect) -> str
"""

from __future__ import annotations

from typing import Sequence

from app.core.context import StudyContext, require_text
from app.core.logging import feature_logger, get_logger
from app.modules.generation import GenerationClient, StructuredOutput
from app.modules.generation.shapes import array, obj, string
from app.modules.quiz.models import MCQ, Difficulty

MCQ_FEATURE = "MCQ generation"
GUIDE_FEATURE = "personalized study guide generation"
OPTIONS_PER_QUESTION = 4

logger = feature_logger(get_logger(__name__), MCQ_FEATURE)

DIFFICULTY_INSTRUCTIONS = {
    Difficulty.EASY: (
        "The questions should be straightforward, testing basic recall of "
        "definitions and key facts presented in the text."
    ),
    Difficulty.MEDIUM: (
        "The questions should require comprehension and application of the main "
        "concepts, potentially asking to interpret information."
    ),
    Difficulty.HARD: (
        "The questions should be challenging, requiring analysis, synthesis, or "
        "evaluation of the information. They may involve subtle distinctions, "
        "multi-step reasoning, or application to new scenarios."
    ),
}

MCQ_SHAPE = array(
    obj(
        {
            "question": string(),
            "options": array(string()),
            "correctAnswer": string(),
            "explanation": string(
                "A brief explanation of why the correct answer is correct, "
                "to be shown to the user after they answer."
            ),
        }
    )
)

MCQ_OUTPUT: StructuredOutput[list[MCQ]] = StructuredOutput(
    type_=list[MCQ],
    shape=MCQ_SHAPE,
    wrapper_key="mcqs",
    empty=list,
)


def _build_instruction(
    text: str, difficulty: Difficulty, count: int, language: str
) -> str:
    return (
        f"Based on the following text, generate a list of {int(count)} multiple-choice "
        f"questions (MCQs) of {difficulty.value} difficulty. "
        f"{DIFFICULTY_INSTRUCTIONS[difficulty]} "
        f"Each question should have {OPTIONS_PER_QUESTION} options, with one clear "
        "correct answer. For each question, also provide a brief explanation for why "
        "the correct answer is correct. This explanation will be shown to the student "
        f"after they answer. Please provide the response in {language}."
        f"\n\n---\n{text}\n---"
    )


async def generate_mcqs(
    client: GenerationClient,
    ctx: StudyContext,
    *,
    difficulty: Difficulty = Difficulty.MEDIUM,
    count: int = 5,
) -> list[MCQ]:
    """Generate MCQs; questions without exactly 4 options containing the answer are dropped."""
    text = require_text(ctx)
    mcqs = await client.generate_structured(
        ctx.model_id,
        _build_instruction(text, difficulty, count, ctx.language),
        MCQ_OUTPUT,
        feature=MCQ_FEATURE,
    )
    out: list[MCQ] = []
    for q in mcqs:
        options = [o.strip() for o in q.options]
        answer = q.correct_answer.strip()
        # four distinct options, exactly one of them the answer
        distinct = len(set(options)) == len(options) == OPTIONS_PER_QUESTION
        if not distinct or answer not in options:
            logger.warning("Dropping malformed MCQ: %s", q.question)
            continue
        out.append(
            MCQ(
                question=q.question.strip(),
                options=options,
                correct_answer=answer,
                explanation=q.explanation.strip(),
            )
        )
    return out


def _guide_instruction(text: str, incorrect: Sequence[MCQ], language: str) -> str:
    missed = "\n".join(
        f'- Question: "{m.question}" (Correct Answer: "{m.correct_answer}")'
        for m in incorrect
    )
    return (
        "A student is studying the following text and has incorrectly answered some "
        "multiple-choice questions. Based on the text and their specific mistakes, "
        "generate a personalized study guide to help them understand the concepts "
        "they are struggling with. The guide should be concise, targeted, and easy "
        f"to understand. Please provide the response in {language}.\n\n"
        f"--- ORIGINAL TEXT ---\n{text}\n---\n\n"
        f"--- INCORRECTLY ANSWERED QUESTIONS ---\n{missed}\n---\n\n"
        "Your task is to:\n"
        "1. Identify the core concepts the student is misunderstanding based on their errors.\n"
        "2. Extract the most relevant information from the original text that explains these concepts.\n"
        "3. Present this information as a clear, focused study guide. Start with a brief "
        "overview of the weak areas and then provide explanations."
    )


async def generate_study_guide(
    client: GenerationClient, ctx: StudyContext, incorrect: Sequence[MCQ]
) -> str:
    text = require_text(ctx)
    return await client.generate_text(
        ctx.model_id,
        _guide_instruction(text, incorrect, ctx.language),
        feature=GUIDE_FEATURE,
    )
