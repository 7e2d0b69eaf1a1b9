"""
Orchestrates architecture generation and refinement.

Generation: assemble request -> completion -> extract JSON -> validate -> gate.
Refinement: prior architecture + feedback -> completion -> extract -> validate.

The engine holds only immutable configuration, so a single instance can serve
concurrent invocations. Nothing is retried or cached: provider, parse and
schema errors reach the caller unchanged.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Sequence

from .assembler import build_user_prompt
from .completion import CompletionClient, build_completion_client
from .config import DEFAULT_MAX_OUTPUT_TOKENS, get_completion_config
from .extraction import extract_json
from .gating import GateResult, gate_architecture
from .inputs import CreativeInput, GenerationOptions
from .prompts.architecture import ARCHITECTURE_SCHEMA_VERSION, ARCHITECTURE_SYSTEM_PROMPT
from .refinement import (
    build_refinement_prompt,
    build_regeneration_feedback,
    check_refinement_request,
    refinement_note,
)
from .validation import validate_architecture

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ArchitectureEngine:
    """
    Turns creative briefs into validated prompt architectures.

    Usage:
        engine = ArchitectureEngine(client=OpenAICompletionClient(api_key, "gpt-4o"))
        result = engine.process_with_confidence_gating("A quiet morning in a lighthouse")
        if result.status is GateStatus.NEEDS_CLARIFICATION:
            ...
    """

    def __init__(
        self,
        client: CompletionClient,
        system_instructions: str = ARCHITECTURE_SYSTEM_PROMPT,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Args:
            client: Completion provider adapter
            system_instructions: Instructions sent with every call
            max_output_tokens: Output token cap passed to the provider
            clock: Returns the current UTC time, used for metadata timestamps
        """
        self.client = client
        self.system_instructions = system_instructions
        self.max_output_tokens = max_output_tokens
        self.clock = clock

    @classmethod
    def from_env(cls) -> "ArchitectureEngine":
        """Create an engine using the configured completion provider."""
        cfg = get_completion_config()
        return cls(client=build_completion_client(cfg), max_output_tokens=cfg.max_output_tokens)

    def _timestamp(self) -> str:
        return self.clock().isoformat()

    def _complete_and_validate(self, user_content: str) -> Dict[str, Any]:
        raw_output = self.client.complete(self.system_instructions, user_content, self.max_output_tokens)
        parsed = extract_json(raw_output)
        return validate_architecture(parsed)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_architecture(
        self,
        creative_input: CreativeInput,
        options: Optional[GenerationOptions] = None,
    ) -> Dict[str, Any]:
        """Generate and validate a new architecture, stamping creation metadata."""
        options = options or GenerationOptions()
        user_prompt = build_user_prompt(creative_input, options)

        architecture = self._complete_and_validate(user_prompt)
        architecture["metadata"].update({
            "schema_version": ARCHITECTURE_SCHEMA_VERSION,
            "created_at": self._timestamp(),
            "platform_target": options.platform,
        })

        logger.info(
            "Architecture generated: shots=%d, confidence=%.2f, interpretations=%d, missing_info=%d",
            len(architecture["shots"]),
            architecture["metadata"]["confidence_score"],
            len(architecture["interpretations"]),
            len(architecture["missing_info"]),
        )
        return architecture

    def process_with_confidence_gating(
        self,
        creative_input: CreativeInput,
        options: Optional[GenerationOptions] = None,
    ) -> GateResult:
        """Generate an architecture and classify it with the confidence gate."""
        result = gate_architecture(self.generate_architecture(creative_input, options))
        logger.info("Confidence gate: %s", result.status.value)
        return result

    # ------------------------------------------------------------------
    # Refinement
    # ------------------------------------------------------------------

    def refine_architecture(
        self,
        architecture: Dict[str, Any],
        feedback: str,
        target_shots: Optional[Sequence[int]] = None,
    ) -> Dict[str, Any]:
        """
        Produce a new architecture from a prior one plus feedback.

        Args:
            architecture: Previously validated architecture (left untouched)
            feedback: Free-text change request
            target_shots: Shot numbers to refine, or None for the whole document

        Returns:
            A freshly validated architecture that replaces the prior one.
        """
        targets = check_refinement_request(architecture, feedback, target_shots)
        prompt = build_refinement_prompt(architecture, feedback, targets)

        refined = self._complete_and_validate(prompt)
        refined["metadata"].update({
            "updated_at": self._timestamp(),
            "refinement_note": refinement_note(feedback),
        })

        logger.info(
            "Architecture refined: scope=%s, shots=%d, confidence=%.2f",
            targets or "all",
            len(refined["shots"]),
            refined["metadata"]["confidence_score"],
        )
        return refined

    def refine_with_confidence_gating(
        self,
        architecture: Dict[str, Any],
        feedback: str,
        target_shots: Optional[Sequence[int]] = None,
    ) -> GateResult:
        """Refine, then run the refined architecture through the confidence gate."""
        return gate_architecture(self.refine_architecture(architecture, feedback, target_shots))

    def regenerate_shots(
        self,
        architecture: Dict[str, Any],
        shot_numbers: Sequence[int],
        direction: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Regenerate specific shots, optionally following a direction."""
        feedback = build_regeneration_feedback(shot_numbers, direction)
        return self.refine_architecture(architecture, feedback, target_shots=list(shot_numbers))


__all__ = ["ArchitectureEngine"]
