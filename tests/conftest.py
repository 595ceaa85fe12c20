import os
import sys
import tempfile
from pathlib import Path

# Settings are read at import time; point storage at a throwaway database first
_DB_DIR = tempfile.mkdtemp(prefix="study-assistant-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ.setdefault("GEMINI_API_KEY", "test-key")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from tests.fixtures.fake_backend import FakeBackend  # noqa: E402
from app.core.context import StudyContext  # noqa: E402

PHOTOSYNTHESIS = "Photosynthesis converts light into chemical energy."


@pytest.fixture
def ctx():
    return StudyContext(
        ingested_text=PHOTOSYNTHESIS, model_id="gemini-2.5-flash", language="English"
    )


@pytest.fixture
def empty_ctx():
    return StudyContext(model_id="gemini-2.5-flash", language="English")


@pytest.fixture
def backend():
    """Backend that answers 'ok' until a test scripts something else."""
    return FakeBackend("ok")
