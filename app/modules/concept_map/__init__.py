"""Concept map exports."""

from .generator import generate_concept_map, generate_concept_map_for_topic
from .models import ConceptLink, ConceptMapData, ConceptNode, dangling_links

__all__ = [
    "generate_concept_map",
    "generate_concept_map_for_topic",
    "ConceptLink",
    "ConceptMapData",
    "ConceptNode",
    "dangling_links",
]
