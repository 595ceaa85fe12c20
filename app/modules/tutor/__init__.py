"""AI tutor exports."""

from .tutor import Conversation, get_tutor_response

__all__ = ["Conversation", "get_tutor_response"]
