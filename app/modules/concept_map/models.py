"""Concept map models.

Node ids double as display labels. Links reference nodes by id; checking that
every link points at an existing node is left to whoever renders the map (see
``dangling_links``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConceptNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    group: int = Field(..., description="Only used for coloring")


class ConceptLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    value: int = Field(..., description="Relationship strength, 1-10")


class ConceptMapData(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodes: list[ConceptNode] = Field(default_factory=list)
    links: list[ConceptLink] = Field(default_factory=list)


def dangling_links(data: ConceptMapData) -> list[ConceptLink]:
    """Links whose source or target is not a node id."""
    ids = {n.id for n in data.nodes}
    return [
        link
        for link in data.links
        if link.source not in ids or link.target not in ids
    ]
