import logging
import os
from typing import Any, MutableMapping, Optional


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(feature)s | %(model)s | %(message)s"

# Chatty client libraries that log every HTTP round trip
QUIET_LOGGERS = ("httpx", "httpcore", "google_genai", "aiosqlite")


class FeatureFilter(logging.Filter):
    """Fills ``feature``/``model`` on records that were logged without them."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        for attr in ("feature", "model"):
            if not hasattr(record, attr):
                setattr(record, attr, "-")
        return True


class FeatureLogger(logging.LoggerAdapter):
    """Logger bound to one feature (and optionally a model id)."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    resolved = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
    handler.addFilter(FeatureFilter())
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)


def feature_logger(
    logger: logging.Logger, feature: str, model: Optional[str] = None
) -> FeatureLogger:
    """Wrap ``logger`` so every record carries the feature name."""
    return FeatureLogger(logger, {"feature": feature, "model": model or "-"})
