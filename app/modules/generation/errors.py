"""Error taxonomy for generation calls.

Every generation entry point raises exactly one of ``BackendError`` or
``MalformedResponseError``; both derive from ``GenerationError`` so callers can
catch a single type and show ``str(exc)`` to the learner.
"""

from __future__ import annotations

from typing import Optional


class GenerationError(Exception):
    def __init__(self, feature: str, message: str) -> None:
        super().__init__(message)
        self.feature = feature
        self.message = message


class BackendError(GenerationError):
    """The remote call itself failed (network, auth, quota, remote-side error)."""

    def __init__(self, feature: str, cause: str) -> None:
        super().__init__(feature, f"API Error during {feature}: {cause}")
        self.cause = cause


class MalformedResponseError(GenerationError):
    """The call succeeded but the text could not be decoded into the expected shape.

    ``raw_text`` is kept for logs only; it is not part of the message.
    """

    def __init__(
        self, feature: str, raw_text: str, reason: Optional[str] = None
    ) -> None:
        super().__init__(
            feature,
            f"The API returned an invalid format for {feature}. Please try again.",
        )
        self.raw_text = raw_text
        self.reason = reason
