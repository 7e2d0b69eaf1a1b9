"""
Prompt templates for the prompt architecture pipeline.
"""

from .architecture import (
    ARCHITECTURE_SCHEMA_VERSION,
    ARCHITECTURE_SYSTEM_PROMPT,
    GENERATION_INSTRUCTIONS,
    REFINEMENT_TEMPLATE,
)

__all__ = [
    "ARCHITECTURE_SCHEMA_VERSION",
    "ARCHITECTURE_SYSTEM_PROMPT",
    "GENERATION_INSTRUCTIONS",
    "REFINEMENT_TEMPLATE",
]
