"""Flashcard model shared by generation and spaced-repetition scheduling.

Field constraints stay out of the model so the shape sent to the backend is
just two required strings; blank cards are filtered after decoding.
"""

from pydantic import BaseModel, ConfigDict


class Flashcard(BaseModel):
    """Question on the front, answer on the back. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
