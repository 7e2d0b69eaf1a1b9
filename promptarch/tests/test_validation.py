"""
Tests for architecture validation and defaulting.

Verifies that:
- Every missing required field is reported in one error
- Shots without a usable full_prompt are named by position
- Optional sections and confidence_score are defaulted, never masking errors
"""

import copy

import pytest

from promptarch import validation
from promptarch.errors import SchemaError


def _shot(number, prompt="Wide shot of a lighthouse at dawn"):
    return {
        "shot_number": number,
        "shot_id": f"S{number:02d}",
        "narrative_beat": "establish",
        "prompt": {"full_prompt": prompt, "prompt_components": {"subject": "lighthouse"}},
    }


def _complete_architecture():
    return {
        "metadata": {"confidence_score": 0.85, "schema_version": "1.0.0"},
        "project": {"title": "Keeper"},
        "global_style": {"palette": "cold blues"},
        "characters": [{"name": "Keeper", "locked_attributes": "grey beard, yellow slicker"}],
        "environments": [{"name": "Lighthouse"}],
        "shots": [_shot(1), _shot(2), _shot(3)],
        "interpretations": [],
        "missing_info": [],
    }


# =============================================================================
# Required fields
# =============================================================================

class TestRequiredFields:

    def test_reports_every_missing_field(self):
        with pytest.raises(SchemaError) as excinfo:
            validation.validate_architecture({"project": {}})
        message = str(excinfo.value)
        for name in ("metadata", "global_style", "shots"):
            assert name in message
        assert "project" not in excinfo.value.violations[0].split(":", 1)[1]

    def test_none_counts_as_missing(self):
        arch = _complete_architecture()
        arch["global_style"] = None
        with pytest.raises(SchemaError, match="global_style"):
            validation.validate_architecture(arch)

    @pytest.mark.parametrize("value", ["", 0, False])
    def test_falsy_scalars_count_as_missing(self, value):
        arch = _complete_architecture()
        arch["project"] = value
        with pytest.raises(SchemaError, match="project"):
            validation.validate_architecture(arch)

    def test_empty_object_and_list_are_present(self):
        arch = _complete_architecture()
        arch["project"] = {}
        arch["shots"] = []
        assert validation.validate_architecture(arch)["project"] == {}

    def test_rejects_non_object_root(self):
        with pytest.raises(SchemaError, match="JSON object"):
            validation.validate_architecture([1, 2, 3])

    def test_rejects_non_list_shots(self):
        arch = _complete_architecture()
        arch["shots"] = {"1": "nope"}
        with pytest.raises(SchemaError, match="shots must be a list"):
            validation.validate_architecture(arch)

    def test_missing_required_field_not_masked_by_defaulting(self):
        arch = _complete_architecture()
        del arch["metadata"]
        with pytest.raises(SchemaError, match="metadata"):
            validation.validate_architecture(arch)


# =============================================================================
# Shot prompts
# =============================================================================

class TestShotPrompts:

    def test_empty_full_prompt_names_shot_position(self):
        arch = _complete_architecture()
        arch["shots"][1]["prompt"]["full_prompt"] = ""
        with pytest.raises(SchemaError) as excinfo:
            validation.validate_architecture(arch)
        assert excinfo.value.violations == ["Shot 2 missing full_prompt"]

    def test_every_bad_shot_is_reported(self):
        arch = _complete_architecture()
        del arch["shots"][0]["prompt"]
        arch["shots"][2]["prompt"] = {"full_prompt": "   "}
        with pytest.raises(SchemaError) as excinfo:
            validation.validate_architecture(arch)
        assert "Shot 1 missing full_prompt" in excinfo.value.violations
        assert "Shot 3 missing full_prompt" in excinfo.value.violations

    def test_shot_numbers_must_be_contiguous(self):
        arch = _complete_architecture()
        arch["shots"][2]["shot_number"] = 4
        with pytest.raises(SchemaError, match="Shot 3 has shot_number 4"):
            validation.validate_architecture(arch)

    def test_shot_number_is_optional(self):
        arch = _complete_architecture()
        for shot in arch["shots"]:
            del shot["shot_number"]
        assert validation.validate_architecture(arch) is arch


# =============================================================================
# Defaulting
# =============================================================================

class TestDefaulting:

    def test_complete_architecture_is_unchanged(self):
        arch = _complete_architecture()
        expected = copy.deepcopy(arch)
        result = validation.validate_architecture(arch)
        assert result is arch
        assert result == expected

    def test_missing_confidence_defaults_to_point_eight(self):
        arch = _complete_architecture()
        del arch["metadata"]["confidence_score"]
        result = validation.validate_architecture(arch)
        assert result["metadata"]["confidence_score"] == 0.8

    @pytest.mark.parametrize("value", ["high", None, True, [0.5], float("nan"), float("inf"), float("-inf")])
    def test_non_numeric_confidence_defaults(self, value):
        arch = _complete_architecture()
        arch["metadata"]["confidence_score"] = value
        result = validation.validate_architecture(arch)
        assert result["metadata"]["confidence_score"] == validation.DEFAULT_CONFIDENCE_SCORE

    def test_out_of_range_confidence_is_clamped(self):
        arch = _complete_architecture()
        arch["metadata"]["confidence_score"] = 1.7
        assert validation.validate_architecture(arch)["metadata"]["confidence_score"] == 1.0

    def test_optional_sections_default_to_empty_lists(self):
        arch = _complete_architecture()
        for name in ("interpretations", "missing_info", "characters", "environments"):
            del arch[name]
        result = validation.validate_architecture(arch)
        for name in ("interpretations", "missing_info", "characters", "environments"):
            assert result[name] == []

    def test_defaults_are_not_shared_between_documents(self):
        first = validation.validate_architecture({**_complete_architecture(), "missing_info": None})
        second = validation.validate_architecture({**_complete_architecture(), "missing_info": None})
        first["missing_info"].append({"question": "?"})
        assert second["missing_info"] == []
