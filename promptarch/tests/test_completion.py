"""
Tests for completion provider adapters and error mapping.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest
import requests

from promptarch.completion import (
    HttpCompletionClient,
    OpenAICompletionClient,
    build_completion_client,
    map_openai_error,
)
from promptarch.config import CompletionConfig
from promptarch.errors import RateLimited, ServiceError, Unauthorized

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
ENDPOINT = "http://localhost:3000/api/generate"


def _status_error(cls, status):
    response = httpx.Response(status, request=httpx.Request("POST", OPENAI_URL))
    return cls("provider said no", response=response, body=None)


def _http_response(status, body=None, text=""):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return response


# =============================================================================
# OpenAI adapter
# =============================================================================

class TestOpenAICompletionClient:

    def _client(self):
        sdk = MagicMock()
        return OpenAICompletionClient("sk-test", "gpt-test", client=sdk), sdk

    def test_sends_system_and_user_messages(self):
        client, sdk = self._client()
        sdk.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content='{"ok": true}'))]
        )
        assert client.complete("SYSTEM", "USER", 500) == '{"ok": true}'

        kwargs = sdk.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["max_tokens"] == 500
        assert kwargs["messages"] == [
            {"role": "system", "content": "SYSTEM"},
            {"role": "user", "content": "USER"},
        ]

    def test_empty_content_returns_empty_string(self):
        client, sdk = self._client()
        sdk.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))]
        )
        assert client.complete("S", "U", 10) == ""

    @pytest.mark.parametrize("exc_cls,status,expected", [
        (openai.AuthenticationError, 401, Unauthorized),
        (openai.RateLimitError, 429, RateLimited),
        (openai.InternalServerError, 500, ServiceError),
    ])
    def test_provider_errors_are_mapped(self, exc_cls, status, expected):
        client, sdk = self._client()
        sdk.chat.completions.create.side_effect = _status_error(exc_cls, status)
        with pytest.raises(expected):
            client.complete("S", "U", 10)
        assert sdk.chat.completions.create.call_count == 1

    def test_map_openai_error_keeps_cause(self):
        exc = _status_error(openai.RateLimitError, 429)
        mapped = map_openai_error(exc)
        assert isinstance(mapped, RateLimited)
        assert mapped.cause is exc


# =============================================================================
# HTTP transport adapter
# =============================================================================

class TestHttpCompletionClient:

    def test_posts_transport_payload(self):
        session = MagicMock()
        session.post.return_value = _http_response(200, {"content": "{}", "usage": {}, "model": "m"})
        client = HttpCompletionClient(ENDPOINT, timeout=30.0, session=session)

        assert client.complete("SYSTEM", "USER", 8000) == "{}"
        session.post.assert_called_once_with(
            ENDPOINT,
            json={"system": "SYSTEM", "prompt": "USER", "max_tokens": 8000},
            timeout=30.0,
        )

    @pytest.mark.parametrize("status,expected", [(401, Unauthorized), (429, RateLimited)])
    def test_status_codes_map_to_errors(self, status, expected):
        session = MagicMock()
        session.post.return_value = _http_response(status, {"error": "nope"})
        with pytest.raises(expected):
            HttpCompletionClient(ENDPOINT, session=session).complete("S", "U", 10)

    def test_server_error_carries_details(self):
        session = MagicMock()
        session.post.return_value = _http_response(
            500, {"error": "Failed to generate response", "details": "upstream overloaded"}
        )
        with pytest.raises(ServiceError) as excinfo:
            HttpCompletionClient(ENDPOINT, session=session).complete("S", "U", 10)
        assert "upstream overloaded" in excinfo.value.details

    def test_network_failure_is_service_error(self):
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(ServiceError, match="connection refused"):
            HttpCompletionClient(ENDPOINT, session=session).complete("S", "U", 10)

    def test_missing_content_is_service_error(self):
        session = MagicMock()
        session.post.return_value = _http_response(200, {"usage": {}})
        with pytest.raises(ServiceError, match="content"):
            HttpCompletionClient(ENDPOINT, session=session).complete("S", "U", 10)


def test_build_completion_client_selects_adapter():
    http_cfg = CompletionConfig(
        provider="http",
        api_key=None,
        api_base="https://api.openai.com/v1",
        model_name="gpt-4o",
        max_output_tokens=8000,
        endpoint_url=ENDPOINT,
        request_timeout=12.0,
    )
    client = build_completion_client(http_cfg)
    assert isinstance(client, HttpCompletionClient)
    assert client.timeout == 12.0

    openai_cfg = CompletionConfig(
        provider="openai",
        api_key="sk-test",
        api_base="https://api.openai.com/v1",
        model_name="gpt-4o",
        max_output_tokens=8000,
        endpoint_url=None,
        request_timeout=None,
    )
    client = build_completion_client(openai_cfg)
    assert isinstance(client, OpenAICompletionClient)
    assert client.model_name == "gpt-4o"
