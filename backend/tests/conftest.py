import json
import pytest
import os
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

TEST_ENV_VARS = {
    "CEREBRAS_API_KEY": "test_cerebras_key",
    "CEREBRAS_MODEL": "qwen-3-32b",
}

@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables before any imports."""
    for key, value in TEST_ENV_VARS.items():
        os.environ[key] = value
    yield
    # Cleanup
    for key in TEST_ENV_VARS.keys():
        os.environ.pop(key, None)


@pytest.fixture
def settings():
    from config import Settings
    return Settings(CEREBRAS_API_KEY="test_cerebras_key", STRICT_SCHEMA=True)


@pytest.fixture
def app(settings):
    from main import create_app
    return create_app(settings)


@pytest.fixture
def test_client(app):
    """Create a TestClient for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def sample_analysis():
    """A provider answer that matches the AnalysisResult shape."""
    return {
        "truthProbability": 2,
        "explanation": {
            "verdict": "Myth",
            "keyPoints": [
                "Satellite imagery shows a curved horizon.",
                "Ships disappear hull-first over the horizon.",
                "Lunar eclipses cast a round shadow of the Earth.",
            ],
            "sources": ["nasa.gov", "esa.int", "britannica.com"],
        },
    }


@pytest.fixture
def completion_response():
    """Builds a chat completion body whose first choice carries `content`."""
    def _build(content):
        return {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "model": "qwen-3-32b",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": content},
                }
            ],
        }
    return _build


@pytest.fixture
def sample_cerebras_response(completion_response, sample_analysis):
    return completion_response(json.dumps(sample_analysis))


@pytest.fixture
def provider_client_factory():
    """Mock for httpx.AsyncClient used as `async with httpx.AsyncClient(...) as client`."""
    def _make(json_data=None, status_error=None, post_side_effect=None, json_side_effect=None):
        mock_client = MagicMock()
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = json_data
        if json_side_effect is not None:
            mock_response.json.side_effect = json_side_effect
        mock_response.raise_for_status = MagicMock(side_effect=status_error)

        mock_client.post = AsyncMock(return_value=mock_response, side_effect=post_side_effect)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        return mock_client
    return _make


class FakeEvaluator:
    """Stands in for ClaimEvaluator behind the get_evaluator dependency."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.claims = []

    async def evaluate(self, claim):
        self.claims.append(claim)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def fake_evaluator(app, sample_analysis):
    from main import get_evaluator
    evaluator = FakeEvaluator(payload=sample_analysis)
    app.dependency_overrides[get_evaluator] = lambda: evaluator
    yield evaluator
    app.dependency_overrides.clear()
