"""Tests for the self-correction module.

Covers:
- repair_json / parse_json_object: JSON recovery from raw model output
- SelfCorrector: Accepted / Corrected / Rejected transitions
- Diagnostics: error_summary, format_diagnostic, hints
"""

import logging

import pytest

from cosmo.schema import ComponentKind
from cosmo.validation import ROOT, ComponentValidator, CounterIdGenerator, IssueCode, get_validator

from .lib import (
    CorrectionOutcome,
    CorrectionState,
    SelfCorrector,
    error_summary,
    format_diagnostic,
    hints,
    is_safe_to_render,
)
from .parse import parse_json_object, repair_json


class _BrokenIdGenerator:
    """Id generator that fails, so sanitization cannot complete."""

    def next_id(self, prefix: str) -> str:
        raise RuntimeError("id service unavailable")


# =============================================================================
# JSON Repair Tests
# =============================================================================


class TestRepairJson:
    """Tests for recovering JSON objects from raw responses."""

    @pytest.mark.unit
    def test_valid_json_passes_through(self):
        """Strict JSON is returned unchanged."""
        assert repair_json('{"id": "b1", "label": "Live"}') == {"id": "b1", "label": "Live"}

    @pytest.mark.unit
    def test_markdown_code_block(self):
        """Test removing markdown code blocks."""
        content = '```json\n{"id": "b1", "label": "Live"}\n```'
        assert repair_json(content) == {"id": "b1", "label": "Live"}

    @pytest.mark.unit
    def test_bare_code_block(self):
        """Fences without a language tag are handled too."""
        assert repair_json('```\n{"id": "b1"}\n```') == {"id": "b1"}

    @pytest.mark.unit
    def test_trailing_comma_object(self):
        """Test fixing trailing comma in object."""
        assert repair_json('{"id": "b1", "label": "Live",}') == {"id": "b1", "label": "Live"}

    @pytest.mark.unit
    def test_trailing_comma_array(self):
        """Test fixing trailing comma in array."""
        result = repair_json('{"quickReplies": ["Yes", "No",]}')
        assert result == {"quickReplies": ["Yes", "No"]}

    @pytest.mark.unit
    def test_preamble(self):
        """Test removing common prefixes."""
        assert repair_json('Here is the JSON:\n{"id": "t1"}') == {"id": "t1"}

    @pytest.mark.unit
    def test_surrounding_prose(self):
        """Test extracting JSON from mixed content."""
        content = 'Sure! Here you go:\n{"id": "root"}\nHope this helps!'
        assert repair_json(content) == {"id": "root"}

    @pytest.mark.unit
    def test_braces_inside_strings(self):
        """Braces in string values do not end the object early."""
        content = 'Result {"label": "a } b", "id": "x"} done'
        assert repair_json(content) == {"label": "a } b", "id": "x"}

    @pytest.mark.unit
    def test_unquoted_keys(self):
        """Bare identifier keys are quoted."""
        assert repair_json('{label: "Hi", variant: "info"}') == {"label": "Hi", "variant": "info"}

    @pytest.mark.unit
    def test_top_level_array_is_not_an_object(self):
        assert repair_json("[1, 2, 3]") is None

    @pytest.mark.unit
    def test_unrecoverable(self):
        assert repair_json("I cannot help with that.") is None


class TestParseJsonObject:
    """Tests for the repair toggle."""

    @pytest.mark.unit
    def test_repair_enabled_by_default(self, monkeypatch):
        monkeypatch.delenv("COSMO_REPAIR_JSON", raising=False)
        assert parse_json_object('```json\n{"id": "x"}\n```') == {"id": "x"}

    @pytest.mark.unit
    def test_repair_disabled_by_override(self):
        """Test that repair does nothing when disabled."""
        assert parse_json_object('```json\n{"id": "x"}\n```', repair=False) is None
        assert parse_json_object('{"id": "x"}', repair=False) == {"id": "x"}

    @pytest.mark.unit
    def test_repair_disabled_by_environment(self, monkeypatch):
        monkeypatch.setenv("COSMO_REPAIR_JSON", "false")
        assert parse_json_object('{"id": "x",}') is None


# =============================================================================
# SelfCorrector Tests
# =============================================================================


class TestSelfCorrector:
    """Tests for the validate -> sanitize -> re-validate state machine."""

    @pytest.fixture
    def badge_corrector(self):
        validator = ComponentValidator("context_badge", id_generator=CounterIdGenerator())
        return SelfCorrector("context_badge", validator=validator)

    @pytest.mark.unit
    def test_valid_candidate_is_accepted(self, badge_corrector):
        candidate = {"id": "b1", "label": "Live"}
        outcome = badge_corrector.correct(candidate)

        assert outcome.state is CorrectionState.ACCEPTED
        assert outcome.is_safe
        assert outcome.record.label == "Live"
        assert outcome.record.to_wire() == candidate
        assert outcome.history == [
            CorrectionState.PENDING,
            CorrectionState.VALIDATED,
            CorrectionState.ACCEPTED,
        ]

    @pytest.mark.unit
    def test_accepted_record_is_not_clamped(self):
        """Accepted candidates are used as-is; warnings do not trigger repair."""
        outcome = SelfCorrector("progress_ring").correct({"id": "r1", "value": 150})
        assert outcome.state is CorrectionState.ACCEPTED
        assert outcome.record.value == 150
        assert [w.field for w in outcome.warnings] == ["value"]

    @pytest.mark.unit
    def test_accepted_record_skips_contextual_defaults(self):
        """Defaults derived from other fields are a sanitize step."""
        candidate = {"id": "i1", "state": "loading"}
        accepted = SelfCorrector("status_indicator").correct(candidate)
        assert accepted.state is CorrectionState.ACCEPTED
        assert accepted.record.pulse is None

        corrected = SelfCorrector("status_indicator").correct({**candidate, "size": "huge"})
        assert corrected.state is CorrectionState.CORRECTED
        assert corrected.record.pulse is True

    @pytest.mark.unit
    def test_huge_integer_in_response(self):
        raw = '{"id": "r1", "size": "big", "value": 1' + "0" * 400 + "}"
        outcome = SelfCorrector("progress_ring").correct_text(raw)
        assert outcome.state is CorrectionState.CORRECTED
        assert outcome.record.value == 100
        assert outcome.is_safe

    @pytest.mark.unit
    def test_accepted_record_reports_conflicts(self):
        """A priority conflict is a warning on an otherwise valid card."""
        outcome = SelfCorrector("hud_card").correct(
            {"id": "c1", "title": "Alert", "content": "Battery low", "priority": 5, "dismissible": True}
        )
        assert outcome.state is CorrectionState.ACCEPTED
        assert outcome.warnings[0].code is IssueCode.CONFLICT

    @pytest.mark.unit
    def test_invalid_candidate_is_corrected(self, badge_corrector):
        outcome = badge_corrector.correct({"id": "b1", "label": "x" * 40})

        assert outcome.state is CorrectionState.CORRECTED
        assert outcome.errors[0].code is IssueCode.TOO_LONG
        assert outcome.record.label == "x" * 30
        assert outcome.revalidation is not None
        assert outcome.revalidation.valid
        assert outcome.is_safe

    @pytest.mark.unit
    def test_correction_cannot_invent_content(self):
        """Missing required content stays an error after correction."""
        outcome = SelfCorrector("hud_card").correct({"id": "c1", "title": "", "content": "Body"})

        assert outcome.state is CorrectionState.CORRECTED
        assert outcome.record.title == ""
        assert [e.field for e in outcome.remaining_errors] == ["title"]
        assert not outcome.is_safe

    @pytest.mark.unit
    def test_without_revalidation_correction_is_not_safe(self, badge_corrector):
        corrector = SelfCorrector("context_badge", validator=badge_corrector.validator, revalidate=False)
        outcome = corrector.correct({"id": "b1", "label": "x" * 40})

        assert outcome.state is CorrectionState.CORRECTED
        assert outcome.revalidation is None
        assert not outcome.is_safe

    @pytest.mark.unit
    def test_revalidation_disabled_by_environment(self, monkeypatch):
        monkeypatch.setenv("COSMO_REVALIDATE", "no")
        assert SelfCorrector("badge").revalidate is False

    @pytest.mark.unit
    def test_non_object_candidate_is_corrected_from_scratch(self, badge_corrector):
        outcome = badge_corrector.correct(["not", "an", "object"])

        assert outcome.state is CorrectionState.CORRECTED
        assert outcome.errors[0].field == ROOT
        assert outcome.record.id == "badge-1"
        assert not outcome.is_safe

    @pytest.mark.unit
    def test_unsanitizable_candidate_is_rejected(self):
        validator = ComponentValidator("context_badge", id_generator=_BrokenIdGenerator())
        outcome = SelfCorrector("context_badge", validator=validator).correct({"label": "Live"})

        assert outcome.state is CorrectionState.REJECTED
        assert outcome.record is None
        assert not outcome.is_safe
        assert outcome.history[-1] is CorrectionState.REJECTED

    @pytest.mark.unit
    def test_none_candidate_raises(self, badge_corrector):
        with pytest.raises(TypeError):
            badge_corrector.correct(None)

    @pytest.mark.unit
    def test_mismatched_validator_raises(self):
        with pytest.raises(ValueError):
            SelfCorrector("hud_card", validator=get_validator("tooltip"))

    @pytest.mark.unit
    def test_correct_batch(self, badge_corrector):
        outcomes = badge_corrector.correct_batch(
            [{"id": "b1", "label": "Live"}, {"id": "b2", "label": ""}]
        )
        assert [o.state for o in outcomes] == [CorrectionState.ACCEPTED, CorrectionState.CORRECTED]

    @pytest.mark.unit
    def test_correct_text_repairs_json(self, badge_corrector):
        outcome = badge_corrector.correct_text('```json\n{"id": "b1", "label": "Live",}\n```')
        assert outcome.state is CorrectionState.ACCEPTED

    @pytest.mark.unit
    def test_correct_text_unparseable_is_rejected(self, badge_corrector):
        outcome = badge_corrector.correct_text("Sorry, I can't do that.")

        assert outcome.state is CorrectionState.REJECTED
        assert outcome.errors[0].field == ROOT
        assert outcome.errors[0].code is IssueCode.INVALID_JSON
        assert outcome.original == "Sorry, I can't do that."

    @pytest.mark.unit
    def test_correct_text_without_repair(self, badge_corrector):
        outcome = badge_corrector.correct_text('{"id": "b1", "label": "Live",}', repair=False)
        assert outcome.state is CorrectionState.REJECTED

    @pytest.mark.unit
    def test_correction_is_logged(self, badge_corrector, caplog):
        with caplog.at_level(logging.INFO, logger="cosmo.correction.lib"):
            badge_corrector.correct({"id": "b1", "label": ""})
        assert "ContextBadge corrected: 1 error" in caplog.text

    @pytest.mark.unit
    def test_outcome_to_dict(self, badge_corrector):
        data = badge_corrector.correct({"id": "b1", "label": "Live"}).to_dict()
        assert data["kind"] == ComponentKind.CONTEXT_BADGE.value
        assert data["state"] == "accepted"
        assert data["safe"] is True
        assert data["record"] == {"id": "b1", "label": "Live"}
        assert data["errors"] == []


# =============================================================================
# Diagnostics Tests
# =============================================================================


class TestErrorSummary:
    """Tests for one-line summaries."""

    @pytest.mark.unit
    def test_valid(self):
        assert error_summary(get_validator("badge").validate({"id": "b", "label": "L"})) == "Valid"

    @pytest.mark.unit
    def test_valid_with_warning(self):
        result = get_validator("progress_ring").validate({"id": "r", "value": 150})
        assert error_summary(result) == "Valid, 1 warning"

    @pytest.mark.unit
    def test_errors(self):
        result = get_validator("badge").validate({"id": "b", "label": "", "variant": "purple"})
        assert error_summary(result) == "2 errors"

    @pytest.mark.unit
    def test_accepts_outcome(self):
        outcome = SelfCorrector("badge").correct({"id": "b", "label": ""})
        assert error_summary(outcome) == "1 error"


class TestFormatDiagnostic:
    """Tests for numbered multi-line reports."""

    @pytest.mark.unit
    def test_no_issues(self):
        result = get_validator("badge").validate({"id": "b", "label": "L"})
        assert format_diagnostic(result) == "No errors or warnings"

    @pytest.mark.unit
    def test_errors_then_warnings(self):
        result = get_validator("badge").validate({"id": "b", "label": "", "colour": "red"})
        lines = format_diagnostic(result).splitlines()

        assert lines[0] == "Errors:"
        assert lines[1] == "  1. [label] 'label' must not be empty"
        assert lines[2] == ""
        assert lines[3] == "Warnings:"
        assert lines[4].startswith("  1. [colour] Unknown field 'colour'")

    @pytest.mark.unit
    def test_outcome_header(self):
        outcome = SelfCorrector("badge").correct({"id": "b", "label": "", "colour": "red"})
        text = format_diagnostic(outcome)

        assert text.splitlines()[0] == "ContextBadge: corrected (1 error, 1 warning)"
        assert "Still invalid after correction:" in text


class TestHints:
    """Tests for repair hints derived from the constraints table."""

    @pytest.mark.unit
    def test_too_long(self):
        result = get_validator("badge").validate({"id": "b", "label": "x" * 31})
        assert hints(result, "badge") == ["Shorten label to 30 characters or less"]

    @pytest.mark.unit
    def test_invalid_enum(self):
        result = get_validator("status_indicator").validate({"id": "i", "state": "sleeping"})
        assert hints(result, "status_indicator") == [
            "Use one of idle, active, loading, success, warning, error for state"
        ]

    @pytest.mark.unit
    def test_too_many_items(self):
        actions = [{"id": f"a{n}", "label": "Go"} for n in range(3)]
        result = get_validator("hud_card").validate(
            {"id": "c", "title": "T", "content": "C", "actions": actions}
        )
        assert hints(result, "hud_card") == ["Remove extra actions (max 2 allowed)"]

    @pytest.mark.unit
    def test_hex_color(self):
        result = get_validator("badge").validate({"id": "b", "label": "L", "contextualColor": "red"})
        assert hints(result, "badge") == ["Use a hex color like #ff5500 for contextualColor"]

    @pytest.mark.unit
    def test_nested_range(self):
        metadata = {"anchorType": "world-space", "autoAnchorDistance": 20}
        result = get_validator("badge").validate({"id": "b", "label": "L", "metadata": metadata})
        assert hints(result, "badge") == ["Set metadata.autoAnchorDistance between 0.1 and 10"]

    @pytest.mark.unit
    def test_duplicates_are_merged(self):
        items = [{"id": "i1", "label": "A"} for _ in range(3)]
        result = get_validator("action_bar").validate({"id": "bar", "items": items})
        assert hints(result, "action_bar") == ["Give every entry in items a unique id"]

    @pytest.mark.unit
    def test_missing_field_without_kind(self):
        result = get_validator("badge").validate({"id": "b"})
        assert hints(result) == ["Provide a non-empty label"]

    @pytest.mark.unit
    def test_outcome_supplies_kind(self):
        outcome = SelfCorrector("badge").correct({"id": "b", "label": "x" * 31})
        assert hints(outcome) == ["Shorten label to 30 characters or less"]

    @pytest.mark.unit
    def test_warnings_produce_no_hints(self):
        result = get_validator("progress_ring").validate({"id": "r", "value": 150})
        assert hints(result, "progress_ring") == []


class TestIsSafeToRender:
    """Tests for the renderer gate."""

    @pytest.mark.unit
    def test_validation_result(self):
        validator = get_validator("badge")
        assert is_safe_to_render(validator.validate({"id": "b", "label": "L"}))
        assert not is_safe_to_render(validator.validate({"id": "b"}))

    @pytest.mark.unit
    def test_outcome(self):
        outcome = SelfCorrector("badge").correct({"id": "b", "label": "L"})
        assert isinstance(outcome, CorrectionOutcome)
        assert is_safe_to_render(outcome)
