"""
Tests for the transport endpoint that holds the provider credential.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from backend import main


def _status_error(cls, status):
    response = httpx.Response(status, request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))
    return cls("provider said no", response=response, body=None)


@pytest.fixture
def provider():
    sdk = MagicMock()
    main.app.dependency_overrides[main.get_provider_client] = lambda: sdk
    main.app.dependency_overrides[main.get_model_name] = lambda: "gpt-test"
    yield sdk
    main.app.dependency_overrides.clear()


@pytest.fixture
def client(provider):
    return TestClient(main.app)


def test_generate_returns_content_usage_and_model(client, provider):
    provider.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content='{"shots": []}'))],
        usage=SimpleNamespace(model_dump=lambda: {"prompt_tokens": 10, "completion_tokens": 5}),
        model="gpt-test-2025",
    )
    resp = client.post("/api/generate", json={"system": "SYS", "prompt": "brief", "max_tokens": 256})

    assert resp.status_code == 200
    assert resp.json() == {
        "content": '{"shots": []}',
        "usage": {"prompt_tokens": 10, "completion_tokens": 5},
        "model": "gpt-test-2025",
    }
    kwargs = provider.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["max_tokens"] == 256
    assert kwargs["messages"][0] == {"role": "system", "content": "SYS"}


def test_generate_defaults_max_tokens(client, provider):
    provider.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content="x"))], usage=None, model="m"
    )
    client.post("/api/generate", json={"prompt": "brief"})
    assert provider.chat.completions.create.call_args.kwargs["max_tokens"] == 8000


def test_missing_prompt_is_bad_request(client, provider):
    resp = client.post("/api/generate", json={"system": "SYS"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing prompt in request body"}
    provider.chat.completions.create.assert_not_called()


@pytest.mark.parametrize("exc_cls,status,body", [
    (openai.AuthenticationError, 401, {"error": "Invalid API key"}),
    (openai.RateLimitError, 429, {"error": "Rate limit exceeded"}),
])
def test_provider_errors_map_to_status(client, provider, exc_cls, status, body):
    provider.chat.completions.create.side_effect = _status_error(exc_cls, status)
    resp = client.post("/api/generate", json={"prompt": "brief"})
    assert resp.status_code == status
    assert resp.json() == body


def test_other_provider_errors_are_500_with_details(client, provider):
    provider.chat.completions.create.side_effect = openai.APIConnectionError(
        request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    )
    resp = client.post("/api/generate", json={"prompt": "brief"})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to generate response"
    assert resp.json()["details"]


def test_missing_credential_returns_error_envelope(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("COMPLETION_PROVIDER", raising=False)
    main.get_completion_config.cache_clear()
    main.get_provider_client.cache_clear()
    try:
        resp = TestClient(main.app).post("/api/generate", json={"prompt": "hi"})
    finally:
        main.get_completion_config.cache_clear()
        main.get_provider_client.cache_clear()

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    body = resp.json()
    assert body["error"] == "Failed to generate response"
    assert "OPENAI_API_KEY" in body["details"]
