"""
Type definitions for prompt architectures.

Provides TypedDict definitions for the JSON document produced by the pipeline.
Architectures travel as plain dicts so they serialise back to JSON unchanged;
these types exist for IDE autocomplete and type checking.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict, Union


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class ArchitectureMetadata(TypedDict, total=False):
    """Document-level metadata."""
    confidence_score: float
    schema_version: str
    created_at: str
    updated_at: str
    platform_target: str
    refinement_note: str


# ---------------------------------------------------------------------------
# Shots
# ---------------------------------------------------------------------------

class ShotPrompt(TypedDict, total=False):
    """Composed prompt for one shot."""
    full_prompt: str
    prompt_components: Dict[str, Any]
    negative_prompt: Optional[str]


class Shot(TypedDict, total=False):
    """One unit of generated-video output."""
    shot_number: int
    shot_id: str
    narrative_beat: str
    prompt: ShotPrompt


# ---------------------------------------------------------------------------
# Characters / environments
# ---------------------------------------------------------------------------

class Character(TypedDict, total=False):
    """Character definition with locked (verbatim) and flexible attributes."""
    name: str
    locked_attributes: Union[str, List[str], Dict[str, Any]]
    flexible_attributes: Union[str, List[str], Dict[str, Any]]


# ---------------------------------------------------------------------------
# Interpretations / missing info
# ---------------------------------------------------------------------------

class Interpretation(TypedDict, total=False):
    """A recorded disambiguation decision."""
    element: str
    interpretation: str
    reasoning: str
    alternatives: List[str]
    confidence: float


class MissingInfoQuestion(TypedDict, total=False):
    """Information the model would have liked to have."""
    question: str
    why_it_matters: str
    criticality: str  # high | medium | low
    default_used: Any


class ClarifyingQuestion(TypedDict):
    """Reduced missing-info entry surfaced by the confidence gate."""
    question: Optional[str]
    why_it_matters: Optional[str]
    default_used: Any


class Caveat(TypedDict):
    """Reduced low-confidence interpretation surfaced by the confidence gate."""
    element: Optional[str]
    interpretation: Optional[str]
    alternatives: List[str]


# ---------------------------------------------------------------------------
# Root document
# ---------------------------------------------------------------------------

class Architecture(TypedDict, total=False):
    """Root prompt architecture document."""
    metadata: ArchitectureMetadata
    project: Dict[str, Any]
    global_style: Dict[str, Any]
    characters: List[Character]
    environments: List[Dict[str, Any]]
    shots: List[Shot]
    interpretations: List[Interpretation]
    missing_info: List[MissingInfoQuestion]


class PromptRecord(TypedDict):
    """Copy-ready prompt for one shot."""
    shot_number: Optional[int]
    shot_id: Optional[str]
    narrative_beat: Optional[str]
    prompt: str
    negative_prompt: Optional[str]
