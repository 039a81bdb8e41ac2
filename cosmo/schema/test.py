"""Tests for the constraints table and schema lookups."""

import json

import pytest

from .components import COMPONENT_SPECS, EDGE_POSITIONS, HUD_CARD, ScreenPosition
from .lib import (
    UnknownComponentError,
    export_constraints,
    get_record_spec,
    iter_record_specs,
    list_component_kinds,
    resolve_kind,
)
from .types import ComponentKind, FieldType, PriorityOverride, Severity, to_snake

# =============================================================================
# Kind resolution
# =============================================================================


class TestResolveKind:
    """Tests for alias resolution."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "alias",
        ["hud_card", "HUDCard", "hud-card", "HUD CARD", "card", ComponentKind.HUD_CARD],
    )
    def test_hud_card_aliases(self, alias):
        assert resolve_kind(alias) is ComponentKind.HUD_CARD

    @pytest.mark.unit
    def test_id_prefix_alias(self):
        assert resolve_kind("badge") is ComponentKind.CONTEXT_BADGE
        assert resolve_kind("ring") is ComponentKind.PROGRESS_RING

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_record_name_roundtrip(self, kind):
        assert resolve_kind(get_record_spec(kind).name) is kind

    @pytest.mark.unit
    @pytest.mark.parametrize("alias", ["hologram", "", 42, None])
    def test_unknown_raises(self, alias):
        with pytest.raises(UnknownComponentError) as exc_info:
            resolve_kind(alias)
        assert exc_info.value.kind == alias

    @pytest.mark.unit
    def test_unknown_is_a_value_error(self):
        with pytest.raises(ValueError, match="Valid kinds"):
            get_record_spec("hologram")


# =============================================================================
# Table integrity
# =============================================================================


class TestComponentTable:
    """Structural checks over the whole constraints table."""

    @pytest.mark.unit
    def test_sixteen_components(self):
        assert len(COMPONENT_SPECS) == 16
        assert list_component_kinds() == list(ComponentKind)

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_every_component_has_required_id(self, kind):
        spec = get_record_spec(kind)
        assert spec.kind is kind
        assert spec.id_prefix
        assert spec.fields[0].name == "id"
        assert spec.fields[0].required

    @pytest.mark.unit
    def test_record_names_are_unique(self):
        names = [
            nested.name
            for spec in COMPONENT_SPECS.values()
            for nested in iter_record_specs(spec)
        ]
        assert len(names) == len(set(names))

    @pytest.mark.unit
    def test_id_prefixes_are_unique(self):
        prefixes = [spec.id_prefix for spec in COMPONENT_SPECS.values()]
        assert len(prefixes) == len(set(prefixes))

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_defaults_respect_own_bounds(self, kind):
        for spec in iter_record_specs(get_record_spec(kind)):
            for f in spec.fields:
                if f.default is None:
                    continue
                if f.choices:
                    assert f.default in f.choices, f"{spec.name}.{f.name}"
                if f.minimum is not None:
                    assert f.default >= f.minimum, f"{spec.name}.{f.name}"
                if f.maximum is not None:
                    assert f.default <= f.maximum, f"{spec.name}.{f.name}"

    @pytest.mark.unit
    def test_hud_positions_exclude_center(self):
        assert ScreenPosition.CENTER not in EDGE_POSITIONS
        assert "center" not in HUD_CARD.field("position").choices

    @pytest.mark.unit
    def test_hud_priority_override(self):
        (rule,) = HUD_CARD.rules
        assert isinstance(rule, PriorityOverride)
        assert rule.condition == "priority >= 4"
        assert dict(rule.forced) == {"dismissible": False, "autoHideAfterSeconds": None}

    @pytest.mark.unit
    def test_action_bar_overflow_is_a_warning(self):
        items = get_record_spec("action_bar").field("items")
        assert items.count_severity is Severity.WARNING
        assert items.record.field("label").length_severity is Severity.WARNING


# =============================================================================
# Lookup helpers
# =============================================================================


class TestLookup:
    """Tests for RecordSpec.lookup and name conversion."""

    @pytest.mark.unit
    def test_lookup_top_level(self):
        assert HUD_CARD.lookup("title").max_length == 60

    @pytest.mark.unit
    def test_lookup_through_array_index(self):
        assert HUD_CARD.lookup("actions[1].label").max_length == 20

    @pytest.mark.unit
    def test_lookup_nested_object(self):
        assert HUD_CARD.lookup("metadata.anchorType").default == "screen-space"

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["nope", "title.length", "metadata.nope", "(root)"])
    def test_lookup_missing(self, path):
        assert HUD_CARD.lookup(path) is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "wire,attr",
        [
            ("id", "id"),
            ("autoHideAfterSeconds", "auto_hide_after_seconds"),
            ("showETA", "show_eta"),
            ("zIndex", "z_index"),
            ("dailyForecast", "daily_forecast"),
        ],
    )
    def test_to_snake(self, wire, attr):
        assert to_snake(wire) == attr


# =============================================================================
# Constraint export
# =============================================================================


class TestExportConstraints:
    """Tests for the JSON-friendly constraint export."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_json_serializable(self, kind):
        exported = export_constraints(kind)
        assert json.loads(json.dumps(exported)) == exported
        assert exported["kind"] == kind.value

    @pytest.mark.unit
    def test_field_summary(self):
        fields = export_constraints("HUDCard")["fields"]
        assert fields["title"] == {
            "type": "string",
            "required": True,
            "maxLength": 60,
            "lengthSeverity": "error",
        }
        assert fields["priority"]["default"] == 3
        assert fields["autoHideAfterSeconds"]["nullable"] is True
        assert fields["actions"]["record"]["idPrefix"] == "action"

    @pytest.mark.unit
    def test_rules_exported(self):
        rules = export_constraints("hud_card")["rules"]
        assert rules == [
            {
                "rule": "PriorityOverride",
                "field": "priority",
                "threshold": 4,
                "forced": [["dismissible", False], ["autoHideAfterSeconds", None]],
            }
        ]

    @pytest.mark.unit
    def test_array_types(self):
        fields = export_constraints("message_preview")["fields"]
        assert fields["quickReplies"]["itemType"] == FieldType.STRING.value
        assert fields["quickReplies"]["itemMaxLength"] == 25
        assert fields["quickReplies"]["maxItems"] == 3
