"""Essay writing helpers."""

from .generator import generate_essay_arguments, generate_essay_outline
from .models import EssayOutline, OutlineSection

__all__ = [
    "generate_essay_arguments",
    "generate_essay_outline",
    "EssayOutline",
    "OutlineSection",
]
