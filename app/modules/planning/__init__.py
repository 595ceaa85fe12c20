"""Lesson and study planning exports."""

from .generator import generate_lesson_plan, generate_study_plan
from .models import LessonActivity, LessonPlan, StudyDay, StudyPlan

__all__ = [
    "generate_lesson_plan",
    "generate_study_plan",
    "LessonActivity",
    "LessonPlan",
    "StudyDay",
    "StudyPlan",
]
