"""
Completion providers.

The pipeline only depends on the CompletionClient interface; concrete adapters
talk either to an OpenAI-compatible API directly (server side, holding the
credential) or to the transport endpoint over HTTP.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import openai
import requests
from openai import OpenAI

from .config import CompletionConfig
from .errors import ProviderError, RateLimited, ServiceError, Unauthorized

logger = logging.getLogger(__name__)


class CompletionClient(ABC):
    """
    Sends system instructions plus user content to a provider, returns text.

    Implementations raise Unauthorized, RateLimited or ServiceError on failure
    and never retry.
    """

    @abstractmethod
    def complete(self, system_instructions: str, user_content: str, max_output_tokens: int) -> str:
        pass


def map_openai_error(exc: Exception) -> ProviderError:
    """Translate an openai SDK exception into the pipeline's provider errors."""
    if isinstance(exc, openai.AuthenticationError):
        return Unauthorized(cause=exc)
    if isinstance(exc, openai.RateLimitError):
        return RateLimited(cause=exc)
    return ServiceError(str(exc) or type(exc).__name__, cause=exc)


class OpenAICompletionClient(CompletionClient):
    """OpenAI-compatible chat completions."""

    def __init__(self, api_key: str, model_name: str, api_base: Optional[str] = None, client: Optional[OpenAI] = None):
        self.model_name = model_name
        self._client = client or OpenAI(api_key=api_key, base_url=api_base)

    def complete(self, system_instructions: str, user_content: str, max_output_tokens: int) -> str:
        logger.info("Calling %s (max_tokens=%d)", self.model_name, max_output_tokens)
        try:
            response = self._client.chat.completions.create(
                model=self.model_name,
                max_tokens=max_output_tokens,
                messages=[
                    {"role": "system", "content": system_instructions or ""},
                    {"role": "user", "content": user_content},
                ],
            )
        except openai.OpenAIError as exc:
            raise map_openai_error(exc) from exc

        message = response.choices[0].message
        return message.content or ""


class HttpCompletionClient(CompletionClient):
    """Calls the transport endpoint: POST {system, prompt, max_tokens} -> {content, usage, model}."""

    def __init__(self, endpoint_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._http = session or requests

    @staticmethod
    def _error_details(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:500] or f"HTTP {response.status_code}"
        if isinstance(body, dict):
            return str(body.get("details") or body.get("error") or body)
        return str(body)

    def complete(self, system_instructions: str, user_content: str, max_output_tokens: int) -> str:
        payload: Dict[str, Any] = {
            "system": system_instructions,
            "prompt": user_content,
            "max_tokens": max_output_tokens,
        }
        logger.info("POST %s (max_tokens=%d)", self.endpoint_url, max_output_tokens)
        try:
            response = self._http.post(self.endpoint_url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ServiceError(f"Transport request failed: {exc}", cause=exc) from exc

        if response.status_code == 401:
            raise Unauthorized()
        if response.status_code == 429:
            raise RateLimited()
        if not response.ok:
            raise ServiceError(f"HTTP {response.status_code}: {self._error_details(response)}")

        try:
            body = response.json()
        except ValueError as exc:
            raise ServiceError("Transport returned a non-JSON body", cause=exc) from exc
        content = body.get("content") if isinstance(body, dict) else None
        if not isinstance(content, str):
            raise ServiceError("Transport response is missing 'content'")
        return content


def build_completion_client(cfg: CompletionConfig) -> CompletionClient:
    """Pick the adapter named by configuration."""
    if cfg.provider == "http":
        return HttpCompletionClient(cfg.endpoint_url, timeout=cfg.request_timeout)
    return OpenAICompletionClient(cfg.api_key, cfg.model_name, api_base=cfg.api_base)


__all__ = [
    "CompletionClient",
    "OpenAICompletionClient",
    "HttpCompletionClient",
    "build_completion_client",
    "map_openai_error",
]
