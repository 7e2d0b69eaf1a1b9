"""
Pulls the JSON document out of raw completion text.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from .errors import ParseError

logger = logging.getLogger(__name__)

# Opening or closing fence, with an optional language tag and its newline.
_FENCE_RE = re.compile(r"```[A-Za-z0-9_+\-]*[ \t]*\n?")


def strip_code_fences(text: str) -> str:
    """Remove every markdown code fence marker, wherever it appears, and trim."""
    return _FENCE_RE.sub("", text or "").strip()


def extract_json(raw_output: str) -> Any:
    """
    Parse completion text as JSON after removing incidental formatting.

    Strict: no object carving or repair. Raises ParseError carrying the first
    500 characters of the cleaned text when parsing fails.
    """
    cleaned = strip_code_fences(raw_output)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.error(
            "Completion was not valid JSON (%s) | length=%d", exc.msg, len(cleaned)
        )
        raise ParseError("Failed to parse architecture response as JSON", cleaned) from exc


__all__ = ["strip_code_fences", "extract_json"]
