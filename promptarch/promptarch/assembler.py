"""
Builds the user request text sent alongside the system instructions.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import InputError
from .inputs import (
    CreativeInput,
    DeckInput,
    GenerationOptions,
    Reference,
    StructuredInput,
    TextInput,
)
from .prompts.architecture import (
    GENERATION_INSTRUCTIONS,
    SHOT_COMPOSITION_ORDER,
    SHOT_COUNT_INFERENCE_HINT,
)


def _format_structured(brief: StructuredInput) -> str:
    parts: List[str] = []
    if brief.concept:
        parts.append(f"Concept: {brief.concept}")
    if brief.tone:
        tone = brief.tone if isinstance(brief.tone, str) else ", ".join(brief.tone)
        parts.append(f"Tone: {tone}")
    if brief.narrative:
        parts.append(f"Narrative: {brief.narrative}")
    if brief.characters:
        lines = "\n".join(
            f"- {c.name}: {c.description}" if c.description else f"- {c.name}"
            for c in brief.characters
        )
        parts.append(f"Characters:\n{lines}")
    if brief.shots:
        lines = "\n".join(f"{idx}. {shot}" for idx, shot in enumerate(brief.shots, start=1))
        parts.append(f"Shot ideas:\n{lines}")
    if brief.style:
        parts.append(f"Style notes: {brief.style}")
    if brief.constraints:
        parts.append(f"Constraints: {brief.constraints}")
    return "\n\n".join(parts)


def render_input(creative_input: CreativeInput) -> str:
    """Render the brief body for any input variant."""
    if isinstance(creative_input, str):
        return creative_input
    if isinstance(creative_input, TextInput):
        return creative_input.content
    if isinstance(creative_input, DeckInput):
        return f"[Parsed from deck: {creative_input.filename}]\n\n{creative_input.parsed_content}"
    if isinstance(creative_input, StructuredInput):
        return _format_structured(creative_input)
    raise InputError(f"Unsupported creative input: {type(creative_input).__name__}")


def render_references(references: Sequence[Reference]) -> str:
    """Numbered references list, or an empty string when there are none."""
    if not references:
        return ""
    lines = [
        f"{idx}. {ref.description}" + (f" ({ref.url})" if ref.url else "")
        for idx, ref in enumerate(references, start=1)
    ]
    return "## Visual References\n" + "\n".join(lines)


def _references_of(creative_input: CreativeInput) -> Sequence[Reference]:
    if isinstance(creative_input, str):
        return ()
    return creative_input.references


def build_user_prompt(
    creative_input: CreativeInput,
    options: Optional[GenerationOptions] = None,
) -> str:
    """
    Assemble the user request for an architecture generation call.

    Sections: creative input, visual references (only when present),
    requirements, and the output instructions. Unset options are left out
    entirely.
    """
    options = options or GenerationOptions()

    requirements = [
        f"- Target platform: {options.platform}",
        f"- Number of shots: {options.shot_count or SHOT_COUNT_INFERENCE_HINT}",
        "- Output format: Complete JSON prompt architecture",
    ]
    if options.brand_context:
        requirements.append(f"- Brand context: {options.brand_context}")

    sections = ["## Creative Input\n\n" + render_input(creative_input)]
    references = render_references(_references_of(creative_input))
    if references:
        sections.append(references)
    sections.append("## Requirements\n\n" + "\n".join(requirements))
    sections.append(
        GENERATION_INSTRUCTIONS.format(
            composition=" + ".join(f"[{step}]" for step in SHOT_COMPOSITION_ORDER)
        )
    )
    return "\n\n".join(sections) + "\n"


__all__ = ["build_user_prompt", "render_input", "render_references"]
