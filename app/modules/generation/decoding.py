"""Tagged decoding of structured model output.

Even under a schema directive the model sometimes answers with the bare array
and sometimes wraps it as ``{"flashcards": [...]}``. Both are valid; the
decoder tags which one it saw instead of probing fields ad hoc.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ShapeKind(str, Enum):
    BARE = "bare"  # the value as returned
    WRAPPED = "wrapped"  # unwrapped from {wrapper_key: value}
    ABSENT = "absent"  # null, or an object without the expected wrapper key


@dataclass(frozen=True)
class DecodedShape:
    kind: ShapeKind
    value: Any


class UndecodableText(ValueError):
    """Raised when the returned text is not JSON at all."""


def parse_json(raw_text: str) -> Any:
    text = (raw_text or "").strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise UndecodableText(str(e)) from e


def classify(decoded: Any, wrapper_key: Optional[str] = None) -> DecodedShape:
    if decoded is None:
        return DecodedShape(ShapeKind.ABSENT, None)
    if wrapper_key is None or isinstance(decoded, list):
        return DecodedShape(ShapeKind.BARE, decoded)
    if isinstance(decoded, dict):
        if decoded.get(wrapper_key) is not None:
            return DecodedShape(ShapeKind.WRAPPED, decoded[wrapper_key])
        return DecodedShape(ShapeKind.ABSENT, None)
    # scalars never match a wrapped collection; validation rejects them
    return DecodedShape(ShapeKind.BARE, decoded)


def decode(raw_text: str, wrapper_key: Optional[str] = None) -> DecodedShape:
    """Strip, JSON-decode and classify ``raw_text``."""
    return classify(parse_json(raw_text), wrapper_key)
