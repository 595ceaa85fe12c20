"""Generation client exports."""

from .client import GenerationClient, StructuredOutput, build_model_by_settings
from .errors import BackendError, GenerationError, MalformedResponseError
from .models import Attachment, ChatMessage, ChatRole, GenerationRequest
from .shapes import ShapeNode

__all__ = [
    "GenerationClient",
    "StructuredOutput",
    "build_model_by_settings",
    "BackendError",
    "GenerationError",
    "MalformedResponseError",
    "Attachment",
    "ChatMessage",
    "ChatRole",
    "GenerationRequest",
    "ShapeNode",
]
