# tests/conftest.py

import os
import tempfile

os.environ.setdefault("LOAN_EVALUATOR_OPENAI_URL", "http://llm.test/openai/deployments/gpt")
os.environ.setdefault("LOAN_EVALUATOR_OPENAI_API_KEY", "test-key")
os.environ.setdefault("LOAN_EVALUATOR_LOG_FILE", os.path.join(tempfile.gettempdir(), "loan_evaluator_test.log"))

import json

import pytest
import respx
from fastapi.testclient import TestClient

from loan_evaluator.config.settings import settings
from loan_evaluator.models import Mode, SAMPLE_PARAMETERS


def completion_body(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-35-turbo",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


@pytest.fixture
def sample_parameters():
    return SAMPLE_PARAMETERS


@pytest.fixture
def biased_parameters():
    return SAMPLE_PARAMETERS.model_copy(update={"mode": Mode.BIASED})


@pytest.fixture
def mock_llm_router():
    """Mock all calls to the completion endpoint"""
    with respx.mock(base_url=settings.OPENAI_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def mock_decision_response(mock_llm_router, request):
    """Parametrized mock for the model's JSON decision"""
    decision = getattr(request, "param", {"status": "Approved", "reason": "All policy rules are met."})
    content = decision if isinstance(decision, str) else json.dumps(decision)
    route = mock_llm_router.post("/chat/completions").respond(status_code=200, json=completion_body(content))
    return route


@pytest.fixture
def mock_llm_unavailable(mock_llm_router):
    return mock_llm_router.post("/chat/completions").respond(
        status_code=503, json={"error": {"message": "Service unavailable"}}
    )


@pytest.fixture
def client():
    from loan_evaluator.main import app
    return TestClient(app)
