"""Lesson and study plan models.

Each plan is the whole result of one generation call; regenerating produces a
new value rather than editing the old one.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LessonActivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    duration: str
    description: str


class LessonPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    objective: str
    duration: str
    materials: list[str]
    activities: list[LessonActivity]
    assessment: str


class StudyDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int
    topic: str
    tasks: list[str]


class StudyPlan(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    duration_days: int = Field(alias="durationDays")
    schedule: list[StudyDay]
