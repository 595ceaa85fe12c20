"""Semantic search exports."""

from .generator import generate_answer, semantic_search
from .history import MAX_HISTORY, SearchHistoryStore, push_query

__all__ = [
    "generate_answer",
    "semantic_search",
    "MAX_HISTORY",
    "SearchHistoryStore",
    "push_query",
]
