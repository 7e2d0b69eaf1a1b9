"""
Confidence gating for validated architectures.

Decides whether an architecture is final, final with caveats, or should go
back to the requester with clarifying questions. Pure: reads the architecture,
never modifies it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping

from .types import Caveat, ClarifyingQuestion

CONFIDENCE_THRESHOLD = 0.70
MAX_CLARIFYING_QUESTIONS = 3


class GateStatus(str, Enum):
    COMPLETE = "complete"
    NEEDS_CLARIFICATION = "needs_clarification"
    COMPLETE_WITH_CAVEATS = "complete_with_caveats"


@dataclass
class GateResult:
    """Gate outcome. Every status carries a usable architecture."""

    status: GateStatus
    architecture: Dict[str, Any]
    questions: List[ClarifyingQuestion] = field(default_factory=list)
    caveats: List[Caveat] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "status": self.status.value,
            "architecture": self.architecture,
        }
        if self.status is GateStatus.NEEDS_CLARIFICATION:
            payload["questions"] = self.questions
        elif self.status is GateStatus.COMPLETE_WITH_CAVEATS:
            payload["caveats"] = self.caveats
        return payload


def _is_low_confidence(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return True
    return value < CONFIDENCE_THRESHOLD


def _qualifies_for_clarification(entry: Mapping[str, Any]) -> bool:
    return entry.get("criticality") == "high" or not entry.get("default_used")


def select_clarifying_questions(missing_info: List[Any]) -> List[ClarifyingQuestion]:
    """Up to three qualifying questions, in their original order."""
    selected: List[ClarifyingQuestion] = []
    for entry in missing_info or []:
        if not isinstance(entry, Mapping) or not _qualifies_for_clarification(entry):
            continue
        selected.append({
            "question": entry.get("question"),
            "why_it_matters": entry.get("why_it_matters"),
            "default_used": entry.get("default_used"),
        })
        if len(selected) == MAX_CLARIFYING_QUESTIONS:
            break
    return selected


def collect_caveats(interpretations: List[Any]) -> List[Caveat]:
    """Every interpretation below the confidence threshold."""
    return [
        {
            "element": item.get("element"),
            "interpretation": item.get("interpretation"),
            "alternatives": list(item.get("alternatives") or []),
        }
        for item in interpretations or []
        if isinstance(item, Mapping) and _is_low_confidence(item.get("confidence"))
    ]


def gate_architecture(architecture: Dict[str, Any]) -> GateResult:
    """Classify a validated architecture. Always returns exactly one status."""
    score = architecture["metadata"]["confidence_score"]
    if score >= CONFIDENCE_THRESHOLD:
        return GateResult(GateStatus.COMPLETE, architecture)

    questions = select_clarifying_questions(architecture.get("missing_info"))
    if questions:
        return GateResult(GateStatus.NEEDS_CLARIFICATION, architecture, questions=questions)

    return GateResult(
        GateStatus.COMPLETE_WITH_CAVEATS,
        architecture,
        caveats=collect_caveats(architecture.get("interpretations")),
    )


__all__ = [
    "GateStatus",
    "GateResult",
    "gate_architecture",
    "select_clarifying_questions",
    "collect_caveats",
    "CONFIDENCE_THRESHOLD",
]
