"""Lesson plan and study plan generation."""

from __future__ import annotations

from app.core.context import ContextError, StudyContext, require_text
from app.modules.generation import GenerationClient, StructuredOutput
from app.modules.generation.shapes import array, integer, obj, string
from app.modules.planning.models import LessonPlan, StudyPlan

LESSON_FEATURE = "lesson plan generation"
STUDY_FEATURE = "study plan generation"
LESSON_MINUTES = 50
MIN_STUDY_DAYS = 1
MAX_STUDY_DAYS = 30

LESSON_PLAN_OUTPUT: StructuredOutput[LessonPlan] = StructuredOutput(
    type_=LessonPlan,
    shape=obj(
        {
            "title": string("Title of the lesson plan."),
            "objective": string("The primary learning objective for the students."),
            "duration": string(
                "Estimated duration of the lesson, e.g., '50 minutes'."
            ),
            "materials": array(string(), "List of materials needed."),
            "activities": array(
                obj(
                    {
                        "name": string(),
                        "duration": string(),
                        "description": string(),
                    }
                )
            ),
            "assessment": string("How student understanding will be assessed."),
        }
    ),
)

STUDY_PLAN_OUTPUT: StructuredOutput[StudyPlan] = StructuredOutput(
    type_=StudyPlan,
    shape=obj(
        {
            "title": string(),
            "durationDays": integer(),
            "schedule": array(
                obj({"day": integer(), "topic": string(), "tasks": array(string())})
            ),
        }
    ),
)


async def generate_lesson_plan(
    client: GenerationClient, ctx: StudyContext, topic: str
) -> LessonPlan:
    text = require_text(ctx)
    if not topic or not topic.strip():
        raise ContextError("Please enter a lesson topic.")
    instruction = (
        f"Based on the provided text, create a detailed {LESSON_MINUTES}-minute lesson "
        f'plan for the topic: "{topic.strip()}". The lesson plan should be structured '
        "for a classroom setting and include a clear objective, materials, a sequence "
        "of activities (like a warm-up, main activity, and wrap-up), and an assessment "
        f"method. Respond in {ctx.language}.\n\n--- CONTEXT ---\n{text}\n---"
    )
    return await client.generate_structured(
        ctx.model_id, instruction, LESSON_PLAN_OUTPUT, feature=LESSON_FEATURE
    )


async def generate_study_plan(
    client: GenerationClient, ctx: StudyContext, days: int = 7
) -> StudyPlan:
    text = require_text(ctx)
    days = max(MIN_STUDY_DAYS, min(MAX_STUDY_DAYS, int(days)))
    instruction = (
        "Analyze the provided study material and create a personalized, day-by-day "
        f"study plan to cover all the content within {days} days. The plan should "
        "break down the material into manageable topics and tasks for each day. The "
        f"goal is to prepare for an exam on this content. Respond in {ctx.language}."
        f"\n\n--- STUDY MATERIAL ---\n{text}\n---"
    )
    return await client.generate_structured(
        ctx.model_id, instruction, STUDY_PLAN_OUTPUT, feature=STUDY_FEATURE
    )
