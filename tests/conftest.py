import sys
from pathlib import Path

import pytest

# Make the lotofacil package importable without installing it.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _no_ai_credentials(monkeypatch):
    """Keep tests offline and independent of the developer's Gemini settings."""

    for name in ("GEMINI_API_KEY", "API_KEY", "LOTOFACIL_AI_MODEL"):
        monkeypatch.delenv(name, raising=False)
