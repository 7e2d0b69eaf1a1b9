"""
Creative brief to multi-shot generative video prompt architecture.
"""

from .engine import ArchitectureEngine
from .errors import (
    ArchitectError,
    InputError,
    ParseError,
    ProviderError,
    RateLimited,
    SchemaError,
    ServiceError,
    Unauthorized,
)
from .gating import GateResult, GateStatus, gate_architecture
from .inputs import (
    CharacterBrief,
    DeckInput,
    GenerationOptions,
    Reference,
    StructuredInput,
    TextInput,
    creative_input_from_dict,
)

__all__ = [
    "ArchitectureEngine",
    "GateResult",
    "GateStatus",
    "gate_architecture",
    "TextInput",
    "DeckInput",
    "StructuredInput",
    "CharacterBrief",
    "Reference",
    "GenerationOptions",
    "creative_input_from_dict",
    "ArchitectError",
    "InputError",
    "ParseError",
    "SchemaError",
    "ProviderError",
    "Unauthorized",
    "RateLimited",
    "ServiceError",
]
