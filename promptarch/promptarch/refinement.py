"""
Refinement request building.

A refinement sends the whole prior architecture back with feedback, scoped
either to a set of shots or to the entire document. The completion must come
back as a full replacement architecture.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from .errors import InputError
from .prompts.architecture import (
    FULL_REFINEMENT_INSTRUCTION,
    REFINEMENT_TEMPLATE,
    REGENERATE_FRESH,
    REGENERATE_WITH_DIRECTION,
    TARGETED_REFINEMENT_INSTRUCTION,
)

REFINEMENT_NOTE_CHARS = 100


def _shot_list(shot_numbers: Sequence[int]) -> str:
    return ", ".join(str(n) for n in shot_numbers)


def check_refinement_request(
    architecture: Dict[str, Any],
    feedback: str,
    target_shots: Optional[Sequence[int]] = None,
) -> Optional[List[int]]:
    """Reject unusable refinement requests. Returns the target shots as a list."""
    if not isinstance(feedback, str) or not feedback.strip():
        raise InputError("Refinement feedback is empty")
    if target_shots is None:
        return None

    targets = list(target_shots)
    if not targets:
        raise InputError("target_shots was given but names no shots")

    known = {
        shot.get("shot_number", position)
        for position, shot in enumerate(architecture.get("shots") or [], start=1)
        if isinstance(shot, dict)
    }
    unknown = [n for n in targets if n not in known]
    if unknown:
        raise InputError(f"Architecture has no shot(s) {_shot_list(unknown)}")
    return targets


def build_refinement_prompt(
    architecture: Dict[str, Any],
    feedback: str,
    target_shots: Optional[Sequence[int]] = None,
) -> str:
    """Embed the serialised architecture, the feedback and the scoping instruction."""
    if target_shots:
        scope = TARGETED_REFINEMENT_INSTRUCTION.format(shot_list=_shot_list(target_shots))
    else:
        scope = FULL_REFINEMENT_INSTRUCTION
    return REFINEMENT_TEMPLATE.format(
        architecture_json=json.dumps(architecture, indent=2, ensure_ascii=False),
        feedback=feedback,
        scope_instruction=scope,
    )


def build_regeneration_feedback(shot_numbers: Sequence[int], direction: Optional[str] = None) -> str:
    if direction:
        return REGENERATE_WITH_DIRECTION.format(shot_list=_shot_list(shot_numbers), direction=direction)
    return REGENERATE_FRESH.format(shot_list=_shot_list(shot_numbers))


def refinement_note(feedback: str) -> str:
    """Feedback truncated to 100 characters, with an ellipsis when cut."""
    if len(feedback) > REFINEMENT_NOTE_CHARS:
        return feedback[:REFINEMENT_NOTE_CHARS] + "..."
    return feedback


__all__ = [
    "build_refinement_prompt",
    "build_regeneration_feedback",
    "check_refinement_request",
    "refinement_note",
]
