"""
Architecture pipeline exceptions.

Provides a clear hierarchy for different error types:
- ArchitectError: Base exception for all pipeline errors
- InputError: Creative input cannot be assembled into a request
- ParseError: No valid JSON in the completion text
- SchemaError: Required architecture/shot fields missing or malformed
- ProviderError: Completion provider failures (Unauthorized, RateLimited, ServiceError)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

PARSE_SNIPPET_CHARS = 500


class ArchitectError(Exception):
    """Base exception for all architecture pipeline errors."""


class InputError(ArchitectError):
    """Input unusable for prompt assembly or refinement."""


class ParseError(ArchitectError):
    """Completion text did not contain parseable JSON."""

    def __init__(self, message: str, snippet: str = ""):
        self.snippet = snippet[:PARSE_SNIPPET_CHARS]
        super().__init__(f"{message}\nResponse was: {self.snippet}")


class SchemaError(ArchitectError):
    """
    Architecture failed validation.

    Every violation found is kept on ``violations`` and listed in the message,
    not just the first one.
    """

    def __init__(self, violations: Sequence[str]):
        self.violations: List[str] = list(violations)
        joined = "; ".join(self.violations) or "unknown schema violation"
        super().__init__(f"Architecture failed validation: {joined}")


class ProviderError(ArchitectError):
    """Base class for completion provider failures."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(message)


class Unauthorized(ProviderError):
    """Provider rejected the credential."""

    def __init__(self, message: str = "Invalid API key", cause: Optional[Exception] = None):
        super().__init__(message, cause)


class RateLimited(ProviderError):
    """Provider refused the call because of rate limiting."""

    def __init__(self, message: str = "Rate limit exceeded", cause: Optional[Exception] = None):
        super().__init__(message, cause)


class ServiceError(ProviderError):
    """Any other provider or transport failure."""

    def __init__(self, details: str, cause: Optional[Exception] = None):
        self.details = details
        super().__init__(f"Failed to generate response: {details}", cause)


__all__ = [
    "ArchitectError",
    "InputError",
    "ParseError",
    "SchemaError",
    "ProviderError",
    "Unauthorized",
    "RateLimited",
    "ServiceError",
    "PARSE_SNIPPET_CHARS",
]
