"""Unit tests for the validation engine.

Covers:
- Value helpers and format checks
- ComponentValidator.validate: required, type, enum, length, range, nested
- ComponentValidator.sanitize: ids, defaults, coercion, truncation, dedupe
- Id generators
- Issue and result types
"""

import copy
import json
import re
import threading

import pytest

from cosmo.records import ContextBadge, HUDCard
from cosmo.schema import Severity, StringFormat, UnknownComponentError

from .checks import is_integer, is_number, matches_format
from .ids import CounterIdGenerator, RandomIdGenerator, create_id_generator, default_id_generator
from .issues import ROOT, FieldIssue, IssueCode, ValidationResult
from .lib import ComponentValidator, get_validator, sanitize, validate
from .repair import coerce_bool, coerce_number, match_choice


def _codes(issues: list[FieldIssue]) -> dict[str, IssueCode]:
    return {issue.field: issue.code for issue in issues}


# =============================================================================
# Value Helpers
# =============================================================================


class TestValueHelpers:
    """Tests for the shared value predicates."""

    @pytest.mark.unit
    def test_booleans_are_not_numbers(self):
        assert is_number(1)
        assert is_number(2.5)
        assert not is_number(True)

    @pytest.mark.unit
    def test_non_finite_numbers_are_rejected(self):
        assert not is_number(float("nan"))
        assert not is_number(float("inf"))

    @pytest.mark.unit
    def test_integral_floats_are_integers(self):
        assert is_integer(3)
        assert is_integer(3.0)
        assert not is_integer(3.5)

    @pytest.mark.unit
    def test_huge_ints_are_finite_integers(self):
        huge = 10**400
        assert is_number(huge)
        assert is_integer(-huge)
        assert not is_integer(False)


class TestMatchesFormat:
    """Tests for string format checks."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fmt,value,expected",
        [
            (StringFormat.HEX_COLOR, "#ff5500", True),
            (StringFormat.HEX_COLOR, "#FF5500", True),
            (StringFormat.HEX_COLOR, "#fff", False),
            (StringFormat.HEX_COLOR, "ff5500", False),
            (StringFormat.HEX_COLOR, "not-a-color", False),
            (StringFormat.URL, "https://example.com/a.png", True),
            (StringFormat.URL, "http://localhost:8080", True),
            (StringFormat.URL, "ftp://example.com", False),
            (StringFormat.URL, "example.com", False),
            (StringFormat.EMAIL, "grace@example.com", True),
            (StringFormat.EMAIL, "grace@example", False),
            (StringFormat.ISO_DATETIME, "2024-05-01T09:30:00Z", True),
            (StringFormat.ISO_DATETIME, "2024-05-01T09:30:00+02:00", True),
            (StringFormat.ISO_DATETIME, "2024-05-01", True),
            (StringFormat.ISO_DATETIME, "tomorrow at noon", False),
        ],
    )
    def test_formats(self, fmt, value, expected):
        assert matches_format(fmt, value) is expected


class TestCoercion:
    """Tests for the lenient coercions used by sanitize."""

    @pytest.mark.unit
    def test_coerce_number(self):
        assert coerce_number("42") == 42
        assert isinstance(coerce_number("42"), int)
        assert coerce_number(" 3.5 ") == 3.5
        assert coerce_number("abc") is None
        assert coerce_number("nan") is None
        assert coerce_number(True) is None
        assert coerce_number(10**400) == 10**400

    @pytest.mark.unit
    def test_coerce_bool(self):
        assert coerce_bool(True) is True
        assert coerce_bool("yes") is True
        assert coerce_bool(0) is False
        assert coerce_bool(2) is None
        assert coerce_bool("maybe") is None

    @pytest.mark.unit
    def test_match_choice(self):
        choices = ("top-left", "top-right")
        assert match_choice("top-right", choices) == "top-right"
        assert match_choice("Top Right", choices) == "top-right"
        assert match_choice("TOP_RIGHT", choices) == "top-right"
        assert match_choice("middle", choices) is None


# =============================================================================
# validate()
# =============================================================================


class TestValidate:
    """Tests for read-only diagnosis."""

    @pytest.fixture
    def badge(self):
        return ComponentValidator("context_badge")

    @pytest.mark.unit
    def test_valid_candidate(self, badge):
        result = badge.validate({"id": "badge-1", "label": "Status"})
        assert result.valid
        assert result.errors == []
        assert result.warnings == []
        assert isinstance(result.sanitized, ContextBadge)

    @pytest.mark.unit
    def test_none_candidate_raises(self, badge):
        with pytest.raises(TypeError):
            badge.validate(None)

    @pytest.mark.unit
    def test_non_object_candidate(self, badge):
        result = badge.validate("label: Status")
        assert not result.valid
        assert result.errors[0].field == ROOT
        assert result.errors[0].code is IssueCode.INVALID_TYPE
        assert "got string" in result.errors[0].message

    @pytest.mark.unit
    def test_missing_required_field(self, badge):
        result = badge.validate({"id": "badge-1"})
        assert _codes(result.errors) == {"label": IssueCode.MISSING_FIELD}

    @pytest.mark.unit
    def test_null_required_field_is_missing(self, badge):
        result = badge.validate({"id": None, "label": "Status"})
        assert _codes(result.errors) == {"id": IssueCode.MISSING_FIELD}

    @pytest.mark.unit
    def test_blank_required_string(self, badge):
        result = badge.validate({"id": "badge-1", "label": "   "})
        assert _codes(result.errors) == {"label": IssueCode.EMPTY_VALUE}

    @pytest.mark.unit
    def test_wrong_primitive_type(self):
        result = validate("status_indicator", {"id": "i1", "state": "idle", "size": "large"})
        assert _codes(result.errors) == {"size": IssueCode.INVALID_TYPE}
        assert "must be a finite number, got string" in result.errors[0].message

    @pytest.mark.unit
    def test_boolean_is_not_a_number(self):
        result = validate("progress_ring", {"id": "r1", "value": True})
        assert _codes(result.errors) == {"value": IssueCode.INVALID_TYPE}

    @pytest.mark.unit
    def test_string_is_not_a_boolean(self, badge):
        result = badge.validate({"id": "b", "label": "L", "pulse": "true"})
        assert _codes(result.errors) == {"pulse": IssueCode.INVALID_TYPE}

    @pytest.mark.unit
    def test_integral_float_accepted_for_integer(self):
        assert validate("tooltip", {"id": "t", "content": "Hi", "delayShow": 300.0}).valid

    @pytest.mark.unit
    def test_fractional_float_rejected_for_integer(self):
        result = validate("tooltip", {"id": "t", "content": "Hi", "delayShow": 2.5})
        assert _codes(result.errors) == {"delayShow": IssueCode.INVALID_TYPE}

    @pytest.mark.unit
    def test_invalid_enum(self, badge):
        result = badge.validate({"id": "b", "label": "L", "variant": "not-a-real-variant"})
        assert not result.valid
        assert _codes(result.errors) == {"variant": IssueCode.INVALID_ENUM}
        assert "Expected one of: neutral, info, success, warning, error" in result.errors[0].message

    @pytest.mark.unit
    def test_center_is_not_an_edge_position(self):
        result = validate("hud_card", {"id": "c", "title": "T", "content": "C", "position": "center"})
        assert _codes(result.errors) == {"position": IssueCode.INVALID_ENUM}

    @pytest.mark.unit
    def test_too_long_is_an_error(self):
        result = validate("hud_card", {"id": "c", "title": "x" * 61, "content": "C"})
        assert _codes(result.errors) == {"title": IssueCode.TOO_LONG}
        assert "max length of 60 characters (got 61)" in result.errors[0].message

    @pytest.mark.unit
    def test_out_of_range_is_a_warning(self):
        result = validate("status_indicator", {"id": "i1", "state": "idle", "size": 40})
        assert result.valid
        assert _codes(result.warnings) == {"size": IssueCode.OUT_OF_RANGE}
        assert result.warnings[0].message == "'size' should be between 8 and 32, got 40"

    @pytest.mark.unit
    def test_validate_does_not_clamp(self):
        result = validate("progress_ring", {"id": "r1", "value": 150})
        assert result.valid
        assert result.warnings[0].field == "value"
        assert result.sanitized.value == 100

    @pytest.mark.unit
    def test_huge_integer_from_json(self):
        candidate = json.loads('{"id": "r1", "value": 1' + "0" * 400 + "}")
        result = validate("progress_ring", candidate)
        assert result.valid
        assert _codes(result.warnings) == {"value": IssueCode.OUT_OF_RANGE}
        assert result.sanitized.value == 100

    @pytest.mark.unit
    def test_bad_hex_color(self, badge):
        result = badge.validate({"id": "b", "label": "L", "contextualColor": "not-a-color"})
        assert _codes(result.errors) == {"contextualColor": IssueCode.INVALID_FORMAT}

    @pytest.mark.unit
    def test_nested_paths(self):
        result = validate(
            "hud_card",
            {"id": "c", "title": "T", "content": "C", "actions": [{"id": "a1", "label": "x" * 21}]},
        )
        assert _codes(result.errors) == {"actions[0].label": IssueCode.TOO_LONG}

    @pytest.mark.unit
    def test_nested_enum(self, badge):
        result = badge.validate({"id": "b", "label": "L", "metadata": {"anchorType": "orbit"}})
        assert _codes(result.errors) == {"metadata.anchorType": IssueCode.INVALID_ENUM}

    @pytest.mark.unit
    def test_empty_follow_target(self, badge):
        result = badge.validate({"id": "b", "label": "L", "metadata": {"followTarget": ""}})
        assert _codes(result.errors) == {"metadata.followTarget": IssueCode.EMPTY_VALUE}

    @pytest.mark.unit
    def test_malformed_vector(self, badge):
        metadata = {"anchorType": "world-space", "worldPosition": [0, 1]}
        result = badge.validate({"id": "b", "label": "L", "metadata": metadata})
        assert _codes(result.errors) == {"metadata.worldPosition": IssueCode.INVALID_FORMAT}

    @pytest.mark.unit
    def test_world_fields_ignored_in_screen_space(self, badge):
        result = badge.validate({"id": "b", "label": "L", "metadata": {"worldPosition": [0, 0, 1]}})
        assert result.valid
        assert _codes(result.warnings) == {"metadata.worldPosition": IssueCode.IGNORED}

    @pytest.mark.unit
    def test_unknown_fields_warn(self, badge):
        result = badge.validate({"id": "b", "label": "L", "colour": "red"})
        assert result.valid
        assert _codes(result.warnings) == {"colour": IssueCode.UNKNOWN_FIELD}

    @pytest.mark.unit
    def test_nullable_field_accepts_null(self):
        result = validate(
            "hud_card", {"id": "c", "title": "T", "content": "C", "autoHideAfterSeconds": None}
        )
        assert result.valid
        assert result.warnings == []

    @pytest.mark.unit
    def test_duplicate_ids(self):
        actions = [{"id": "a1", "label": "One"}, {"id": "a1", "label": "Two"}]
        result = validate("hud_card", {"id": "c", "title": "T", "content": "C", "actions": actions})
        assert _codes(result.errors) == {"actions": IssueCode.DUPLICATE_ID}
        assert "first used at actions[0]" in result.errors[0].message

    @pytest.mark.unit
    def test_does_not_mutate_input(self, badge):
        candidate = {"label": "x" * 40, "variant": "purple", "metadata": {"worldPosition": [1, 2, 3]}}
        snapshot = copy.deepcopy(candidate)
        badge.validate(candidate)
        assert candidate == snapshot

    @pytest.mark.unit
    def test_without_sanitized(self, badge):
        assert badge.validate({"id": "b", "label": "L"}, with_sanitized=False).sanitized is None

    @pytest.mark.unit
    def test_accepts_typed_records(self, badge):
        record = badge.sanitize({"label": "Live"})
        assert badge.validate(record).valid

    @pytest.mark.unit
    def test_is_valid(self, badge):
        assert badge.is_valid({"id": "b", "label": "L"})
        assert not badge.is_valid({"id": "b", "label": ""})


# =============================================================================
# sanitize()
# =============================================================================


class TestSanitize:
    """Tests for shape repair."""

    @pytest.fixture
    def badge(self, id_generator):
        return ComponentValidator("context_badge", id_generator=id_generator)

    @pytest.mark.unit
    def test_generates_prefixed_id(self, badge):
        assert badge.sanitize({"label": "Test"}).id == "badge-1"
        assert badge.sanitize({"id": "  ", "label": "Test"}).id == "badge-2"

    @pytest.mark.unit
    def test_keeps_supplied_id(self, badge):
        assert badge.sanitize({"id": "mine", "label": "Test"}).id == "mine"

    @pytest.mark.unit
    def test_nested_ids_use_item_prefix(self, id_generator):
        validator = ComponentValidator("action_bar", id_generator=id_generator)
        record = validator.sanitize({"id": "bar", "items": [{"label": "Home"}]})
        assert record.items[0].id == "item-1"

    @pytest.mark.unit
    def test_applies_defaults(self, badge):
        record = badge.sanitize({"label": "Test"})
        assert record.variant == "neutral"
        assert record.icon == "none"
        assert record.position == "top-right"
        assert record.dismissible is True
        assert record.pulse is False

    @pytest.mark.unit
    def test_absent_optional_fields_stay_absent(self, badge):
        wire = badge.sanitize({"label": "Test"}).to_wire()
        assert "contextualColor" not in wire
        assert "autoDismissMs" not in wire
        assert "metadata" not in wire

    @pytest.mark.unit
    def test_explicit_null_is_kept_for_nullable_fields(self, badge):
        wire = badge.sanitize({"label": "Test", "autoDismissMs": None}).to_wire()
        assert wire["autoDismissMs"] is None

    @pytest.mark.unit
    def test_truncates(self, badge):
        assert badge.sanitize({"label": "x" * 40}).label == "x" * 30

    @pytest.mark.unit
    def test_clamps(self):
        assert sanitize("progress_ring", {"id": "r1", "value": 150}).value == 100
        assert sanitize("progress_ring", {"id": "r1", "value": -5}).value == 0
        assert sanitize("progress_ring", {"id": "r1", "value": -(10**400)}).value == 0

    @pytest.mark.unit
    def test_coerces_numeric_strings(self):
        assert sanitize("progress_ring", {"id": "r1", "value": "42"}).value == 42

    @pytest.mark.unit
    def test_rounds_integers(self):
        assert sanitize("tooltip", {"id": "t", "content": "Hi", "delayShow": 412.7}).delay_show == 413

    @pytest.mark.unit
    def test_unusable_number_falls_back_to_default(self):
        record = sanitize("status_indicator", {"id": "i1", "state": "idle", "size": "big"})
        assert record.size == 12

    @pytest.mark.unit
    def test_enum_normalization(self, badge):
        assert badge.sanitize({"label": "L", "variant": "SUCCESS"}).variant == "success"
        assert badge.sanitize({"label": "L", "position": "Bottom Left"}).position == "bottom-left"

    @pytest.mark.unit
    def test_invalid_enum_uses_default(self, badge):
        assert badge.sanitize({"label": "L", "variant": "purple"}).variant == "neutral"

    @pytest.mark.unit
    def test_malformed_format_is_dropped(self, badge):
        record = badge.sanitize({"label": "L", "contextualColor": "red"})
        assert record.contextual_color is None
        assert "contextualColor" not in record.to_wire()

    @pytest.mark.unit
    def test_valid_format_is_trimmed(self, badge):
        assert badge.sanitize({"label": "L", "contextualColor": " #ff5500 "}).contextual_color == "#ff5500"

    @pytest.mark.unit
    def test_unknown_fields_are_dropped(self, badge):
        assert "colour" not in badge.sanitize({"label": "L", "colour": "red"}).to_wire()

    @pytest.mark.unit
    def test_duplicate_items_keep_first(self):
        actions = [{"id": "a1", "label": "One"}, {"id": "a1", "label": "Two"}]
        record = sanitize("hud_card", {"id": "c", "title": "T", "content": "C", "actions": actions})
        assert [a.label for a in record.actions] == ["One"]

    @pytest.mark.unit
    def test_too_many_items_are_truncated(self):
        actions = [{"id": f"a{n}", "label": "Go"} for n in range(4)]
        record = sanitize("hud_card", {"id": "c", "title": "T", "content": "C", "actions": actions})
        assert [a.id for a in record.actions] == ["a0", "a1"]

    @pytest.mark.unit
    def test_non_list_array_uses_default(self):
        record = sanitize("hud_card", {"id": "c", "title": "T", "content": "C", "actions": "none"})
        assert record.actions == []

    @pytest.mark.unit
    def test_string_arrays(self):
        record = sanitize(
            "message_preview",
            {
                "id": "m",
                "sender": {"name": "Ada"},
                "content": "Hi",
                "timestamp": "now",
                "quickReplies": ["Yes", "", 5, "x" * 30],
            },
        )
        assert record.quick_replies == ["Yes", "5", "x" * 25]

    @pytest.mark.unit
    def test_missing_nested_record_gets_placeholder(self):
        record = sanitize("mini_player", {"id": "p", "state": "playing"})
        assert record.track.title == ""
        assert record.track.duration is None

    @pytest.mark.unit
    def test_non_object_candidate(self, badge):
        record = badge.sanitize(["junk"])
        assert record.id == "badge-1"
        assert record.label == ""

    @pytest.mark.unit
    def test_none_candidate_raises(self, badge):
        with pytest.raises(TypeError):
            badge.sanitize(None)

    @pytest.mark.unit
    def test_does_not_alias_input(self, badge):
        candidate = {"label": "L", "metadata": {"anchorType": "world-space", "worldPosition": [1, 2, 3]}}
        record = badge.sanitize(candidate)
        candidate["metadata"]["worldPosition"][0] = 99
        assert record.metadata.world_position == [1, 2, 3]

    @pytest.mark.unit
    def test_returns_typed_record(self):
        assert isinstance(sanitize("HUDCard", {"title": "T", "content": "C"}), HUDCard)


# =============================================================================
# Module-level shortcuts
# =============================================================================


class TestShortcuts:
    """Tests for get_validator / validate / sanitize."""

    @pytest.mark.unit
    def test_validators_are_shared(self):
        assert get_validator("HUDCard") is get_validator("hud-card")

    @pytest.mark.unit
    def test_unknown_kind(self):
        with pytest.raises(UnknownComponentError) as exc_info:
            validate("hologram", {})
        assert exc_info.value.kind == "hologram"
        assert "hud_card" in str(exc_info.value)

    @pytest.mark.unit
    def test_repr(self):
        assert repr(ComponentValidator("tooltip")) == "ComponentValidator('tooltip')"


# =============================================================================
# Id generators
# =============================================================================


class TestIdGenerators:
    """Tests for id generation strategies."""

    @pytest.mark.unit
    def test_counter_is_sequential_across_prefixes(self):
        ids = CounterIdGenerator()
        assert ids.next_id("card") == "card-1"
        assert ids.next_id("badge") == "badge-2"

    @pytest.mark.unit
    def test_counter_start(self):
        assert CounterIdGenerator(start=100).next_id("ring") == "ring-100"

    @pytest.mark.unit
    def test_random_ids_match_pattern(self):
        ids = RandomIdGenerator()
        first, second = ids.next_id("tooltip"), ids.next_id("tooltip")
        assert re.fullmatch(r"tooltip-\d+", first)
        assert first != second

    @pytest.mark.unit
    def test_counter_is_thread_safe(self):
        ids = CounterIdGenerator()
        results: list[str] = []
        lock = threading.Lock()

        def worker():
            minted = [ids.next_id("x") for _ in range(200)]
            with lock:
                results.extend(minted)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == len(set(results)) == 1600

    @pytest.mark.unit
    def test_create_by_strategy(self):
        assert isinstance(create_id_generator("counter"), CounterIdGenerator)
        assert isinstance(create_id_generator("random"), RandomIdGenerator)

    @pytest.mark.unit
    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            create_id_generator("timestamp")

    @pytest.mark.unit
    def test_default_follows_environment(self, monkeypatch):
        monkeypatch.setenv("COSMO_ID_STRATEGY", "counter")
        assert isinstance(default_id_generator(), CounterIdGenerator)
        assert default_id_generator() is default_id_generator()


# =============================================================================
# Issues and results
# =============================================================================


class TestIssues:
    """Tests for FieldIssue and ValidationResult."""

    @pytest.mark.unit
    def test_field_issue(self):
        issue = FieldIssue("label", "'label' must not be empty", Severity.ERROR, IssueCode.EMPTY_VALUE)
        assert issue.is_error
        assert str(issue) == "[label] 'label' must not be empty"
        assert issue.to_dict() == {
            "field": "label",
            "message": "'label' must not be empty",
            "severity": "error",
            "code": "empty_value",
        }

    @pytest.mark.unit
    def test_result_from_issues(self):
        error = FieldIssue("label", "empty", Severity.ERROR, IssueCode.EMPTY_VALUE)
        warning = FieldIssue("size", "too big", Severity.WARNING, IssueCode.OUT_OF_RANGE)
        result = ValidationResult.from_issues([warning, error])

        assert not result.valid
        assert result.errors == [error]
        assert result.warnings == [warning]
        assert result.issues == [error, warning]
        assert result.error_fields == ["label"]
        assert result.warning_fields == ["size"]

    @pytest.mark.unit
    def test_warnings_never_affect_validity(self):
        warning = FieldIssue("size", "too big", Severity.WARNING, IssueCode.OUT_OF_RANGE)
        assert ValidationResult.from_issues([warning]).valid

    @pytest.mark.unit
    def test_result_to_dict(self):
        result = validate("badge", {"id": "b", "label": "L"})
        data = result.to_dict()
        assert data["valid"] is True
        assert data["errors"] == []
        assert data["sanitized"]["id"] == "b"
