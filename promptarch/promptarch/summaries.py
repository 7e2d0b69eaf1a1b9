"""
Read-only views over a validated architecture.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .types import PromptRecord


def extract_prompts(architecture: Dict[str, Any]) -> List[PromptRecord]:
    """
    Copy-ready prompt for every shot, in shot order.

    Returns a list of dicts with shot_number, shot_id, narrative_beat, prompt
    and negative_prompt (None when the shot has none).
    """
    records: List[PromptRecord] = []
    for shot in architecture.get("shots", []):
        prompt = shot.get("prompt") or {}
        records.append({
            "shot_number": shot.get("shot_number"),
            "shot_id": shot.get("shot_id"),
            "narrative_beat": shot.get("narrative_beat"),
            "prompt": prompt.get("full_prompt", ""),
            "negative_prompt": prompt.get("negative_prompt") or None,
        })
    return records


def summarize_interpretations(architecture: Dict[str, Any]) -> str:
    """Human-readable markdown summary of interpretive decisions."""
    interpretations = architecture.get("interpretations") or []
    if not interpretations:
        return "No significant interpretations were made."

    blocks = []
    for item in interpretations:
        confidence = item.get("confidence")
        if isinstance(confidence, (int, float)) and not isinstance(confidence, bool):
            detail = f"Confidence: {round(confidence * 100)}%"
        else:
            detail = "Confidence: unknown"
        alternatives = item.get("alternatives") or []
        if alternatives:
            detail += f" | Alternatives: {', '.join(str(a) for a in alternatives)}"
        blocks.append(f"• **{item.get('element')}**: {item.get('interpretation')}\n  _{detail}_")
    return "\n\n".join(blocks)


__all__ = ["extract_prompts", "summarize_interpretations"]
