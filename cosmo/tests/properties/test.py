"""Properties that hold for every component kind.

Field lists are derived from the constraints table, so a new bound or a new
component is covered without touching these tests.
"""

import copy
import re

import pytest

from cosmo.records import get_record_model
from cosmo.schema import COMPONENT_SPECS, ComponentKind, FieldType
from cosmo.validation import ComponentValidator, IssueCode, RandomIdGenerator, get_validator


def _walk(spec, prefix=""):
    """Yield (path, field) for every field, nested records included.

    Array elements are addressed through their first item (``items[0].badge``).
    """
    for f in spec.fields:
        path = f"{prefix}{f.name}"
        yield path, f
        if f.record is not None:
            yield from _walk(f.record, path + ("[0]." if f.type is FieldType.ARRAY else "."))


# (kind, path, field) triples declared in the table
FIELDS = [(kind, path, f) for kind, spec in COMPONENT_SPECS.items() for path, f in _walk(spec)]

# also capped by a sibling limit field
CAPPED = {(ComponentKind.TIMER, "remaining"), (ComponentKind.WEATHER_WIDGET, "dailyForecast[0].low")}

TRUNCATABLE = [
    (kind, path, f)
    for kind, path, f in FIELDS
    if f.type is FieldType.STRING and f.max_length is not None and not f.choices and not f.format
]

CLAMPED_ABOVE = [
    (kind, path, f)
    for kind, path, f in FIELDS
    if f.type in (FieldType.INTEGER, FieldType.NUMBER) and f.maximum is not None and (kind, path) not in CAPPED
]

CLAMPED_BELOW = [
    (kind, path, f)
    for kind, path, f in FIELDS
    if f.type in (FieldType.INTEGER, FieldType.NUMBER) and f.minimum is not None
]

ENUM_WITH_DEFAULT = {
    kind: next(f for f in spec.fields if f.choices and f.default is not None)
    for kind, spec in COMPONENT_SPECS.items()
}

REPAIRABLE_ERRORS = {IssueCode.MISSING_FIELD, IssueCode.EMPTY_VALUE, IssueCode.TOO_FEW_ITEMS}


def _param_id(case) -> str:
    kind, path, _ = case
    return f"{kind.value}.{path}"


def _with_value(kind, candidate, path: str, value):
    """Copy ``candidate`` with ``value`` set at ``path``, creating missing parents."""
    data = copy.deepcopy(candidate)
    node, spec = data, COMPONENT_SPECS[kind]
    *parents, leaf = path.split(".")
    for part in parents:
        is_item = part.endswith("[0]")
        name = part[:-3] if is_item else part
        record = spec.field(name).record
        if not node.get(name):
            # AR hints are only read in world space
            seed = {"anchorType": "world-space"} if record.field("anchorType") else {}
            node[name] = [seed] if is_item else seed
        node = node[name][0] if is_item else node[name]
        spec = record
    node[leaf] = value
    return data


def _read(wire, path: str):
    for part in path.split("."):
        wire = wire[part[:-3]][0] if part.endswith("[0]") else wire[part]
    return wire


def _sanitized(validator, candidate, path: str):
    return _read(validator.sanitize(candidate).to_wire(), path)


def _is_subset(expected, actual) -> bool:
    """True if every key/value of ``expected`` appears in ``actual``."""
    if isinstance(expected, dict):
        return isinstance(actual, dict) and all(
            key in actual and _is_subset(value, actual[key]) for key, value in expected.items()
        )
    if isinstance(expected, list):
        return (
            isinstance(actual, list)
            and len(expected) == len(actual)
            and all(_is_subset(e, a) for e, a in zip(expected, actual))
        )
    return expected == actual


def _issue(result, field: str):
    return next(i for i in result.issues if i.field == field)


# =============================================================================
# Valid candidates
# =============================================================================


class TestValidCandidates:
    """A well-formed candidate passes cleanly and survives sanitize."""

    @pytest.mark.unit
    def test_validates_cleanly(self, component_kind, valid_candidate):
        result = get_validator(component_kind).validate(valid_candidate)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.unit
    def test_result_carries_typed_record(self, component_kind, valid_candidate):
        result = get_validator(component_kind).validate(valid_candidate)
        assert isinstance(result.sanitized, get_record_model(component_kind))

    @pytest.mark.unit
    def test_sanitize_keeps_supplied_values(self, component_kind, valid_candidate):
        wire = get_validator(component_kind).sanitize(valid_candidate).to_wire()
        assert _is_subset(valid_candidate, wire)

    @pytest.mark.unit
    def test_sanitized_record_is_clean(self, component_kind, valid_candidate):
        validator = get_validator(component_kind)
        result = validator.validate(validator.sanitize(valid_candidate))
        assert result.errors == []
        assert result.warnings == []


# =============================================================================
# Sanitize
# =============================================================================


class TestSanitizeProperties:
    """Sanitize is total, pure and idempotent."""

    @pytest.mark.unit
    @pytest.mark.parametrize("empty", [False, True], ids=["valid", "empty"])
    def test_idempotent(self, component_kind, valid_candidate, id_generator, empty):
        validator = ComponentValidator(component_kind, id_generator=id_generator)
        once = validator.sanitize({} if empty else valid_candidate)
        twice = validator.sanitize(once.to_wire())
        assert twice.to_wire() == once.to_wire()

    @pytest.mark.unit
    def test_empty_candidate_leaves_only_content_errors(self, component_kind, id_generator):
        validator = ComponentValidator(component_kind, id_generator=id_generator)
        result = validator.validate(validator.sanitize({}))
        assert {issue.code for issue in result.errors} <= REPAIRABLE_ERRORS

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "junk",
        ["junk", 42, [], {"id": 5, "title": ["x"], "items": "nope", "metadata": 3}],
        ids=["string", "number", "array", "mistyped"],
    )
    def test_never_raises(self, component_kind, junk):
        record = get_validator(component_kind).sanitize(junk)
        assert isinstance(record, get_record_model(component_kind))

    @pytest.mark.unit
    def test_does_not_mutate_input(self, component_kind, valid_candidate):
        valid_candidate["unexpected"] = {"nested": [1, 2]}
        for f in COMPONENT_SPECS[component_kind].fields:
            if f.max_length is not None and not f.choices and not f.format:
                valid_candidate[f.name] = "y" * (f.max_length + 5)
        snapshot = copy.deepcopy(valid_candidate)
        validator = get_validator(component_kind)

        validator.validate(valid_candidate)
        validator.sanitize(valid_candidate)

        assert valid_candidate == snapshot

    @pytest.mark.unit
    def test_result_does_not_alias_input(self, component_kind, valid_candidate):
        wire = get_validator(component_kind).sanitize(valid_candidate).to_wire()
        for key, value in wire.items():
            if isinstance(value, (dict, list)) and key in valid_candidate:
                assert value is not valid_candidate[key]


class TestGeneratedIds:
    """Missing ids are minted as <prefix>-<digits>."""

    @pytest.mark.unit
    def test_id_format(self, component_kind):
        prefix = COMPONENT_SPECS[component_kind].id_prefix
        validator = ComponentValidator(component_kind, id_generator=RandomIdGenerator())
        assert re.fullmatch(rf"{prefix}-\d+", validator.sanitize({}).id)

    @pytest.mark.unit
    def test_ids_are_distinct(self, component_kind):
        validator = get_validator(component_kind)
        assert validator.sanitize({}).id != validator.sanitize({}).id

    @pytest.mark.unit
    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_id_replaced(self, component_kind, valid_candidate, id_generator, blank):
        valid_candidate["id"] = blank
        validator = ComponentValidator(component_kind, id_generator=id_generator)
        prefix = COMPONENT_SPECS[component_kind].id_prefix
        assert validator.sanitize(valid_candidate).id == f"{prefix}-1"


# =============================================================================
# Bounds
# =============================================================================


class TestEnumFallback:
    """Values outside a vocabulary are errors and fall back to the default."""

    @pytest.mark.unit
    def test_rejected_and_defaulted(self, component_kind, valid_candidate):
        f = ENUM_WITH_DEFAULT[component_kind]
        valid_candidate[f.name] = "not-a-choice"
        validator = get_validator(component_kind)

        result = validator.validate(valid_candidate)
        assert not result.valid
        assert _issue(result, f.name).code is IssueCode.INVALID_ENUM
        assert getattr(validator.sanitize(valid_candidate), f.attr) == f.default

    @pytest.mark.unit
    def test_loose_spelling_is_matched(self, component_kind, valid_candidate):
        f = ENUM_WITH_DEFAULT[component_kind]
        valid_candidate[f.name] = f.choices[-1].upper().replace("-", " ")
        record = get_validator(component_kind).sanitize(valid_candidate)
        assert getattr(record, f.attr) == f.choices[-1]


class TestTruncation:
    """Strings over their limit are reported and cut to the limit."""

    @pytest.mark.unit
    @pytest.mark.parametrize("case", TRUNCATABLE, ids=_param_id)
    def test_over_limit(self, case, valid_candidates):
        kind, path, f = case
        candidate = _with_value(kind, valid_candidates[kind], path, "x" * (f.max_length + 1))
        validator = get_validator(kind)

        issue = _issue(validator.validate(candidate), path)
        assert issue.code is IssueCode.TOO_LONG
        assert issue.severity is f.length_severity
        assert len(_sanitized(validator, candidate, path)) == f.max_length

    @pytest.mark.unit
    @pytest.mark.parametrize("case", TRUNCATABLE, ids=_param_id)
    def test_at_limit_untouched(self, case, valid_candidates):
        kind, path, f = case
        value = "x" * f.max_length
        candidate = _with_value(kind, valid_candidates[kind], path, value)
        validator = get_validator(kind)

        assert path not in {i.field for i in validator.validate(candidate).issues}
        assert _sanitized(validator, candidate, path) == value


class TestClamping:
    """Numbers outside their window are reported and clamped into it."""

    @pytest.mark.unit
    @pytest.mark.parametrize("case", CLAMPED_ABOVE, ids=_param_id)
    def test_above_maximum(self, case, valid_candidates):
        kind, path, f = case
        candidate = _with_value(kind, valid_candidates[kind], path, f.maximum + 1)
        validator = get_validator(kind)

        issue = _issue(validator.validate(candidate), path)
        assert issue.code is IssueCode.OUT_OF_RANGE
        assert issue.severity is f.range_severity
        assert _sanitized(validator, candidate, path) == f.maximum

    @pytest.mark.unit
    @pytest.mark.parametrize("case", CLAMPED_BELOW, ids=_param_id)
    def test_below_minimum(self, case, valid_candidates):
        kind, path, f = case
        candidate = _with_value(kind, valid_candidates[kind], path, f.minimum - 1)
        validator = get_validator(kind)

        issue = _issue(validator.validate(candidate), path)
        assert issue.code is IssueCode.OUT_OF_RANGE
        assert issue.severity is f.range_severity
        assert _sanitized(validator, candidate, path) == f.minimum

    @pytest.mark.unit
    @pytest.mark.parametrize("case", CLAMPED_ABOVE, ids=_param_id)
    def test_at_maximum_untouched(self, case, valid_candidates):
        kind, path, f = case
        candidate = _with_value(kind, valid_candidates[kind], path, f.maximum)
        validator = get_validator(kind)

        assert path not in {i.field for i in validator.validate(candidate).issues}
        assert _sanitized(validator, candidate, path) == f.maximum

    @pytest.mark.unit
    @pytest.mark.parametrize("case", CLAMPED_BELOW, ids=_param_id)
    def test_at_minimum_untouched(self, case, valid_candidates):
        kind, path, f = case
        candidate = _with_value(kind, valid_candidates[kind], path, f.minimum)
        validator = get_validator(kind)

        assert path not in {i.field for i in validator.validate(candidate).issues}
        assert _sanitized(validator, candidate, path) == f.minimum

    @pytest.mark.unit
    @pytest.mark.parametrize("case", CLAMPED_BELOW, ids=_param_id)
    def test_numeric_strings_are_coerced(self, case, valid_candidates):
        kind, path, f = case
        candidate = _with_value(kind, valid_candidates[kind], path, str(f.minimum))
        validator = get_validator(kind)

        assert _issue(validator.validate(candidate), path).code is IssueCode.INVALID_TYPE
        assert _sanitized(validator, candidate, path) == f.minimum

    @pytest.mark.unit
    def test_nested_bounds_are_covered(self):
        """Bounds inside nested records and array items are part of the tables."""
        clamped = {(kind.value, path) for kind, path, _ in CLAMPED_ABOVE + CLAMPED_BELOW}
        truncated = {(kind.value, path) for kind, path, _ in TRUNCATABLE}
        assert {
            ("hud_card", "metadata.autoAnchorDistance"),
            ("action_bar", "items[0].badge"),
            ("timer", "presets[0].seconds"),
            ("mini_player", "progress.current"),
            ("activity_ring", "rings[0].goal"),
        } <= clamped
        assert {("hud_card", "actions[0].label"), ("media_card", "media.alt")} <= truncated


# =============================================================================
# Cross-field rules
# =============================================================================


class TestPriorityOverride:
    """HUDCard priority >= 4 cannot be dismissed or auto-hidden."""

    @pytest.mark.unit
    @pytest.mark.parametrize("priority,forced", [(3, False), (4, True), (5, True)])
    def test_force(self, valid_candidates, priority, forced):
        candidate = {
            **valid_candidates[ComponentKind.HUD_CARD],
            "priority": priority,
            "dismissible": True,
            "autoHideAfterSeconds": 10,
        }
        record = get_validator("hud_card").sanitize(candidate)
        if forced:
            assert record.dismissible is False
            assert record.auto_hide_after_seconds is None
        else:
            assert record.dismissible is True
            assert record.auto_hide_after_seconds == 10
