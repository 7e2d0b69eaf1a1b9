"""
Validation and defaulting for parsed prompt architectures.

Rules are declared as data:
- REQUIRED_FIELDS must be present (every missing one is reported at once)
- OPTIONAL_DEFAULTS are filled in when absent
- every shot needs a non-empty prompt.full_prompt

Defaulting only ever touches optional fields; it never hides a required-field
violation.
"""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, List

from .errors import SchemaError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("metadata", "project", "global_style", "shots")

OPTIONAL_DEFAULTS: Dict[str, Any] = {
    "interpretations": [],
    "missing_info": [],
    "characters": [],
    "environments": [],
}

DEFAULT_CONFIDENCE_SCORE = 0.8
CONFIDENCE_MIN = 0.0
CONFIDENCE_MAX = 1.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _is_blank(value: Any) -> bool:
    # Empty objects and lists count as present; null, "", 0 and false do not.
    return value is None or (not value and not isinstance(value, (Mapping, list)))


def _missing_required(arch: Mapping) -> List[str]:
    return [name for name in REQUIRED_FIELDS if _is_blank(arch.get(name))]


def _shot_violations(shots: List[Any]) -> List[str]:
    violations = []
    for position, shot in enumerate(shots, start=1):
        if not isinstance(shot, Mapping):
            violations.append(f"Shot {position} is not an object")
            continue

        prompt = shot.get("prompt")
        full_prompt = prompt.get("full_prompt") if isinstance(prompt, Mapping) else None
        if not isinstance(full_prompt, str) or not full_prompt.strip():
            violations.append(f"Shot {position} missing full_prompt")

        # Numbering is optional, but when present it must be 1..N in order.
        if "shot_number" in shot:
            number = shot["shot_number"]
            if not _is_number(number) or number != position:
                violations.append(
                    f"Shot {position} has shot_number {number!r}, expected {position}"
                )
    return violations


def _ensure_confidence_score(metadata: Dict[str, Any]) -> None:
    score = metadata.get("confidence_score")
    if not _is_number(score):
        logger.warning(
            "metadata.confidence_score missing or invalid (%r), defaulting to %s",
            score, DEFAULT_CONFIDENCE_SCORE,
        )
        metadata["confidence_score"] = DEFAULT_CONFIDENCE_SCORE
        return

    clamped = max(CONFIDENCE_MIN, min(CONFIDENCE_MAX, float(score)))
    if clamped != score:
        logger.warning("metadata.confidence_score clamped %s -> %s", score, clamped)
        metadata["confidence_score"] = clamped


def validate_architecture(arch: Any) -> Dict[str, Any]:
    """
    Validate a parsed architecture and fill in optional defaults in place.

    Raises SchemaError listing every required-field violation found. Returns
    the same mapping that was passed in.
    """
    if not isinstance(arch, dict):
        raise SchemaError([f"Architecture must be a JSON object, got {type(arch).__name__}"])

    missing = _missing_required(arch)
    if missing:
        raise SchemaError([f"Architecture missing required fields: {', '.join(missing)}"])

    violations = []
    if not isinstance(arch["metadata"], Mapping):
        violations.append("metadata must be an object")
    if not isinstance(arch["shots"], list):
        violations.append("shots must be a list")
    else:
        violations.extend(_shot_violations(arch["shots"]))
    if violations:
        raise SchemaError(violations)

    _ensure_confidence_score(arch["metadata"])

    defaulted = []
    for name, default_value in OPTIONAL_DEFAULTS.items():
        if arch.get(name) is None:
            arch[name] = copy.deepcopy(default_value)
            defaulted.append(name)
    if defaulted:
        logger.debug("Optional sections defaulted: %s", ", ".join(defaulted))

    return arch


__all__ = [
    "validate_architecture",
    "REQUIRED_FIELDS",
    "OPTIONAL_DEFAULTS",
    "DEFAULT_CONFIDENCE_SCORE",
]
