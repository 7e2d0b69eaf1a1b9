"""
Creative input variants accepted by the prompt assembler.

A brief arrives as one of three shapes: free text, text parsed out of a deck,
or structured fields collected by a wizard-style form. Each may carry visual
references.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from .errors import InputError
from .config import DEFAULT_PLATFORM


@dataclass(frozen=True)
class Reference:
    """A visual reference attached to a brief."""

    description: str
    url: Optional[str] = None


@dataclass(frozen=True)
class CharacterBrief:
    """Character line in a structured brief."""

    name: str
    description: str = ""


@dataclass(frozen=True)
class TextInput:
    content: str
    references: Tuple[Reference, ...] = ()


@dataclass(frozen=True)
class DeckInput:
    filename: str
    parsed_content: str
    references: Tuple[Reference, ...] = ()


@dataclass(frozen=True)
class StructuredInput:
    concept: Optional[str] = None
    tone: Union[str, Sequence[str], None] = None
    narrative: Optional[str] = None
    characters: Tuple[CharacterBrief, ...] = ()
    shots: Tuple[str, ...] = ()
    style: Optional[str] = None
    constraints: Optional[str] = None
    references: Tuple[Reference, ...] = ()


CreativeInput = Union[str, TextInput, DeckInput, StructuredInput]


@dataclass(frozen=True)
class GenerationOptions:
    """Options that shape the requirements section of the request."""

    platform: str = DEFAULT_PLATFORM
    shot_count: Optional[int] = None
    brand_context: Optional[str] = None


def _references_from(raw: Any) -> Tuple[Reference, ...]:
    if not raw:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise InputError("references must be a list")
    refs = []
    for idx, item in enumerate(raw, start=1):
        if isinstance(item, str):
            refs.append(Reference(description=item))
        elif isinstance(item, Mapping) and item.get("description"):
            refs.append(Reference(description=str(item["description"]), url=item.get("url") or None))
        else:
            raise InputError(f"Reference {idx} needs a description")
    return tuple(refs)


def _characters_from(raw: Any) -> Tuple[CharacterBrief, ...]:
    if not raw:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise InputError("characters must be a list")
    chars = []
    for idx, item in enumerate(raw, start=1):
        if isinstance(item, Mapping) and item.get("name"):
            chars.append(CharacterBrief(name=str(item["name"]), description=str(item.get("description") or "")))
        else:
            raise InputError(f"Character {idx} needs a name")
    return tuple(chars)


def _require_text(payload: Mapping[str, Any], key: str, kind: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InputError(f"{kind} input requires a non-empty '{key}'")
    return value


def creative_input_from_dict(payload: Any) -> CreativeInput:
    """
    Convert a JSON-shaped brief into one of the input variants.

    Accepts a bare string (plain text) or a mapping tagged with ``type`` of
    ``text``, ``deck`` or ``structured``. Raises InputError for anything else.
    """
    if isinstance(payload, str):
        if not payload.strip():
            raise InputError("Creative input is empty")
        return TextInput(content=payload)
    if not isinstance(payload, Mapping):
        raise InputError(f"Creative input must be text or an object, got {type(payload).__name__}")

    kind = payload.get("type")
    references = _references_from(payload.get("references"))

    if kind == "text":
        return TextInput(content=_require_text(payload, "content", "Text"), references=references)
    if kind == "deck":
        return DeckInput(
            filename=_require_text(payload, "filename", "Deck"),
            parsed_content=_require_text(payload, "parsedContent", "Deck")
            if "parsedContent" in payload
            else _require_text(payload, "parsed_content", "Deck"),
            references=references,
        )
    if kind == "structured":
        tone = payload.get("tone")
        if isinstance(tone, list):
            tone = tuple(str(t) for t in tone)
        shots = payload.get("shots") or ()
        if not isinstance(shots, (list, tuple)):
            raise InputError("shots must be a list of shot ideas")
        return StructuredInput(
            concept=payload.get("concept"),
            tone=tone,
            narrative=payload.get("narrative"),
            characters=_characters_from(payload.get("characters")),
            shots=tuple(str(s) for s in shots),
            style=payload.get("style"),
            constraints=payload.get("constraints"),
            references=references,
        )
    raise InputError(f"Unknown creative input type: {kind!r}")


__all__ = [
    "Reference",
    "CharacterBrief",
    "TextInput",
    "DeckInput",
    "StructuredInput",
    "CreativeInput",
    "GenerationOptions",
    "creative_input_from_dict",
]
