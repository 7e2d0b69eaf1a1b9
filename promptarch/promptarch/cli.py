"""
Command line entry point for generating and refining prompt architectures.

Examples:
    promptarch generate brief.txt --shots 6 --platform runway -o arch.json
    promptarch generate brief.json --format structured
    promptarch refine arch.json --feedback "Make the ending warmer" --shots 5 6
    promptarch regenerate arch.json --shots 3 5 --direction "make it slower"
    promptarch tone moody nostalgic
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import get_pipeline_config
from .engine import ArchitectureEngine
from .errors import ArchitectError, InputError
from .film_grammar import translate_tone
from .gating import gate_architecture
from .inputs import DeckInput, GenerationOptions, TextInput, creative_input_from_dict
from .summaries import summarize_interpretations

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Creative brief to multi-shot prompt architecture.")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate an architecture from a brief.")
    gen.add_argument("brief", help="Path to the brief file.")
    gen.add_argument(
        "--format",
        choices=["text", "deck", "structured"],
        default="text",
        help="How to read the brief file (structured expects JSON).",
    )
    gen.add_argument("--platform", default=None, help="Target platform (default from DEFAULT_PLATFORM).")
    gen.add_argument("--shots", type=int, default=None, help="Number of shots; inferred when omitted.")
    gen.add_argument("--brand", default=None, help="Brand context.")
    gen.add_argument("-o", "--output", default=None, help="Write result JSON here instead of stdout.")

    ref = sub.add_parser("refine", help="Refine an existing architecture with feedback.")
    ref.add_argument("architecture", help="Path to architecture JSON.")
    ref.add_argument("--feedback", required=True, help="Feedback text.")
    ref.add_argument("--shots", type=int, nargs="+", default=None, help="Shot numbers to refine.")
    ref.add_argument("-o", "--output", default=None)

    regen = sub.add_parser("regenerate", help="Regenerate specific shots.")
    regen.add_argument("architecture", help="Path to architecture JSON.")
    regen.add_argument("--shots", type=int, nargs="+", required=True, help="Shot numbers to regenerate.")
    regen.add_argument("--direction", default=None, help="Optional creative direction.")
    regen.add_argument("-o", "--output", default=None)

    tone = sub.add_parser("tone", help="Translate tone words to technical parameters.")
    tone.add_argument("words", nargs="+")

    return parser.parse_args(argv)


def _load_brief(path: str, fmt: str):
    text = Path(path).read_text(encoding="utf-8")
    if fmt == "deck":
        return DeckInput(filename=Path(path).name, parsed_content=text)
    if fmt == "structured":
        payload = json.loads(text)
        if isinstance(payload, dict):
            payload.setdefault("type", "structured")
        return creative_input_from_dict(payload)
    return TextInput(content=text)


def _load_architecture(path: str) -> Dict[str, Any]:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise InputError(f"{path} must hold a JSON object, got {type(payload).__name__}")
    return payload


def _emit(payload: Any, output: Optional[str]) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %s", output)
    else:
        print(text)


def _run(args: argparse.Namespace) -> int:
    if args.command == "tone":
        for word in args.words:
            print(f"{word}: {translate_tone(word)}")
        return 0

    engine = ArchitectureEngine.from_env()

    if args.command == "generate":
        options = GenerationOptions(
            platform=args.platform or get_pipeline_config().default_platform,
            shot_count=args.shots,
            brand_context=args.brand,
        )
        result = engine.process_with_confidence_gating(_load_brief(args.brief, args.format), options)
    elif args.command == "refine":
        result = engine.refine_with_confidence_gating(
            _load_architecture(args.architecture), args.feedback, args.shots
        )
    else:
        refined = engine.regenerate_shots(_load_architecture(args.architecture), args.shots, args.direction)
        result = gate_architecture(refined)

    logger.info("Status: %s", result.status.value)
    if result.architecture.get("interpretations"):
        logger.info("Interpretations:\n%s", summarize_interpretations(result.architecture))
    _emit(result.to_dict(), args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=get_pipeline_config().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return _run(args)
    except (ArchitectError, OSError, RuntimeError, ValueError) as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
