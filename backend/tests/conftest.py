import json
import pytest
import os
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

# Settings are read once when `config` is first imported.
os.environ.setdefault("GEMINI_API_KEY", "test_gemini_key")
os.environ.setdefault("GEMINI_MODEL", "gemini-2.5-flash")


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Make sure the loaded settings carry a Gemini key."""
    from config import settings
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test_gemini_key")
    monkeypatch.setattr(settings, "GEMINI_MODEL", "gemini-2.5-flash")
    return settings


@pytest.fixture
def missing_api_key(monkeypatch):
    from config import settings
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)
    return settings


@pytest.fixture
def test_client():
    """Create a TestClient for FastAPI app."""
    import main
    return TestClient(main.app)


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient usable as an async context manager."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def make_response():
    """Build a successful httpx response mock around a JSON payload."""
    def _make(payload):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = payload
        mock_response.raise_for_status = MagicMock()
        return mock_response
    return _make


@pytest.fixture
def sample_result_json():
    return {
        "verdict": "MISLEADING",
        "confidenceScore": 73,
        "explanation": "The claim mixes an accurate statistic with a false causal link."
    }


@pytest.fixture
def sample_reply_text(sample_result_json):
    return "```json\n" + json.dumps(sample_result_json, indent=2) + "\n```"


@pytest.fixture
def sample_grounding_chunks():
    return [
        {"web": {"uri": "https://example.org/a", "title": "A"}},
        {"web": {"uri": "https://example.org/b", "title": ""}},
    ]


@pytest.fixture
def sample_gemini_response(sample_reply_text, sample_grounding_chunks):
    """Sample Gemini generateContent payload with search grounding."""
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [{"text": sample_reply_text}]
                },
                "finishReason": "STOP",
                "groundingMetadata": {
                    "webSearchQueries": ["food cures all diseases"],
                    "groundingChunks": sample_grounding_chunks
                }
            }
        ]
    }
