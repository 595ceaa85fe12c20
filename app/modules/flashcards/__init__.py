"""Flashcards module exports."""

from .models.flashcards import Flashcard
from .generator import generate_flashcards

__all__ = [
    "Flashcard",
    "generate_flashcards",
]
