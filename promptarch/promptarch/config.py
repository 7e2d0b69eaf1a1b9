"""
Configuration helpers for the prompt architecture pipeline.

Centralises environment variable loading/validation so the rest of the codebase
can depend on typed config objects instead of sprinkling os.getenv calls.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

COMPLETION_PROVIDER_CHOICES = {"openai", "http"}
DEFAULT_TEXT_LLM_MODEL = "gpt-4o"
DEFAULT_API_BASE = "https://api.openai.com/v1"
DEFAULT_MAX_OUTPUT_TOKENS = 8000
DEFAULT_PLATFORM = "platform-agnostic"


@dataclass(frozen=True)
class CompletionConfig:
    """Completion provider selection and credentials."""

    provider: str
    api_key: Optional[str]
    api_base: str
    model_name: str
    max_output_tokens: int
    endpoint_url: Optional[str]
    request_timeout: Optional[float]


@dataclass(frozen=True)
class PipelineConfig:
    """Misc pipeline knobs."""

    log_level: str
    default_platform: str


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Wrapper around os.getenv that trims whitespace."""
    value = os.getenv(name, default)
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or default


def _require_env(name: str) -> str:
    """Fetch an environment variable or raise a helpful error."""
    value = _get_env(name)
    if not value:
        raise RuntimeError(f"Expected environment variable '{name}' to be set.")
    return value


def _get_int_env(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


def _get_optional_float_env(name: str) -> Optional[float]:
    raw = _get_env(name)
    if raw is None or raw == "":
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a float, got '{raw}'.") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


def _normalize_provider(value: Optional[str]) -> str:
    normalized = (value or "openai").lower()
    if normalized not in COMPLETION_PROVIDER_CHOICES:
        raise ValueError(
            f"COMPLETION_PROVIDER must be one of {sorted(COMPLETION_PROVIDER_CHOICES)}, got '{value}'."
        )
    return normalized


@lru_cache(maxsize=1)
def get_completion_config() -> CompletionConfig:
    """Return the completion provider configuration."""
    provider = _normalize_provider(_get_env("COMPLETION_PROVIDER"))

    api_key = _get_env("OPENAI_API_KEY")
    endpoint_url = _get_env("COMPLETION_ENDPOINT_URL")
    if provider == "openai" and not api_key:
        api_key = _require_env("OPENAI_API_KEY")
    if provider == "http" and not endpoint_url:
        raise RuntimeError("COMPLETION_ENDPOINT_URL must be set when COMPLETION_PROVIDER=http")

    model_name = _get_env("TEXT_LLM_MODEL") or DEFAULT_TEXT_LLM_MODEL
    if not _get_env("TEXT_LLM_MODEL"):
        logging.getLogger(__name__).debug(
            "TEXT_LLM_MODEL not set, defaulting to %s", DEFAULT_TEXT_LLM_MODEL
        )

    return CompletionConfig(
        provider=provider,
        api_key=api_key,
        api_base=_get_env("OPENAI_API_BASE") or DEFAULT_API_BASE,
        model_name=model_name,
        max_output_tokens=_get_int_env("MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS),
        endpoint_url=endpoint_url,
        request_timeout=_get_optional_float_env("COMPLETION_REQUEST_TIMEOUT"),
    )


@lru_cache(maxsize=1)
def get_pipeline_config() -> PipelineConfig:
    """Return misc pipeline toggles."""
    return PipelineConfig(
        log_level=(_get_env("LOG_LEVEL") or "INFO").upper(),
        default_platform=_get_env("DEFAULT_PLATFORM") or DEFAULT_PLATFORM,
    )


__all__ = [
    "CompletionConfig",
    "PipelineConfig",
    "get_completion_config",
    "get_pipeline_config",
    "DEFAULT_MAX_OUTPUT_TOKENS",
    "DEFAULT_PLATFORM",
]
