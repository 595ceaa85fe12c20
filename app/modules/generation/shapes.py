"""Shape constraints sent to the backend alongside structured requests.

A ``ShapeNode`` is a small recursive schema (object / array / string /
integer). It is rendered into the request as a generation-time directive; the
client never validates against it, pydantic models do that after decoding.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class NodeType(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"


class ShapeNode(BaseModel):
    type: NodeType
    description: Optional[str] = None
    properties: dict[str, "ShapeNode"] = Field(default_factory=dict)
    items: Optional["ShapeNode"] = None
    required: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_structure(self) -> "ShapeNode":
        if self.type == NodeType.ARRAY and self.items is None:
            raise ValueError("array nodes need an items node")
        missing = [k for k in self.required if k not in self.properties]
        if missing:
            raise ValueError(f"required fields not in properties: {missing}")
        return self

    def to_schema(self) -> dict[str, Any]:
        """Render as a JSON-schema style dict."""
        out: dict[str, Any] = {"type": self.type.value}
        if self.description:
            out["description"] = self.description
        if self.type == NodeType.OBJECT:
            out["properties"] = {k: v.to_schema() for k, v in self.properties.items()}
            if self.required:
                out["required"] = list(self.required)
        if self.type == NodeType.ARRAY and self.items is not None:
            out["items"] = self.items.to_schema()
        return out


def string(description: Optional[str] = None) -> ShapeNode:
    return ShapeNode(type=NodeType.STRING, description=description)


def integer(description: Optional[str] = None) -> ShapeNode:
    return ShapeNode(type=NodeType.INTEGER, description=description)


def array(items: ShapeNode, description: Optional[str] = None) -> ShapeNode:
    return ShapeNode(type=NodeType.ARRAY, items=items, description=description)


def obj(
    properties: dict[str, ShapeNode],
    required: Optional[list[str]] = None,
    description: Optional[str] = None,
) -> ShapeNode:
    """Object node; every property is required unless ``required`` says otherwise."""
    return ShapeNode(
        type=NodeType.OBJECT,
        properties=properties,
        required=list(properties) if required is None else required,
        description=description,
    )
