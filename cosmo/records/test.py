"""Tests for generated record models."""

import pytest

from cosmo.schema import ComponentKind, UnknownComponentError, get_record_spec

from .lib import (
    RECORD_MODELS,
    HUDCard,
    RecordModel,
    StatusIndicator,
    build_record,
    export_json_schema,
    get_record_model,
    model_for_spec,
)


class TestModelGeneration:
    """Tests for model generation from the table."""

    @pytest.mark.unit
    def test_every_kind_has_a_model(self):
        assert set(RECORD_MODELS) == set(ComponentKind)

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_model_named_after_record(self, kind):
        model = get_record_model(kind)
        assert issubclass(model, RecordModel)
        assert model.__name__ == get_record_spec(kind).name
        assert model.component_kind() is kind

    @pytest.mark.unit
    def test_models_are_cached(self):
        assert get_record_model("HUDCard") is HUDCard
        assert get_record_model(ComponentKind.HUD_CARD) is HUDCard

    @pytest.mark.unit
    def test_snake_case_attributes_with_camel_aliases(self):
        field = HUDCard.model_fields["auto_hide_after_seconds"]
        assert field.alias == "autoHideAfterSeconds"

    @pytest.mark.unit
    def test_nested_models_are_generated(self):
        action_spec = get_record_spec("hud_card").field("actions").record
        action_model = model_for_spec(action_spec)
        assert action_model.__name__ == "HUDCardAction"
        assert action_model.record_spec() is action_spec

    @pytest.mark.unit
    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownComponentError):
            get_record_model("hologram")


class TestBuildRecord:
    """Tests for building typed records from wire dicts."""

    @pytest.mark.unit
    def test_builds_nested_records(self):
        record = build_record(
            ComponentKind.HUD_CARD,
            {
                "id": "card-1",
                "title": "Hello",
                "content": "World",
                "actions": [{"id": "a1", "label": "OK", "variant": "primary"}],
                "metadata": {"anchorType": "world-space", "worldPosition": [0, 1, 2]},
            },
        )
        assert isinstance(record, HUDCard)
        assert record.actions[0].label == "OK"
        assert record.metadata.anchor_type == "world-space"

    @pytest.mark.unit
    def test_unset_fields_use_model_defaults(self):
        record = build_record("hud_card", {"id": "c", "title": "t", "content": "x"})
        assert record.variant == "neutral"
        assert record.priority == 3
        assert record.actions == []

    @pytest.mark.unit
    def test_to_wire_omits_unset_fields(self):
        record = build_record("hud_card", {"id": "c", "title": "t", "content": "x"})
        assert record.to_wire() == {"id": "c", "title": "t", "content": "x"}

    @pytest.mark.unit
    def test_to_wire_keeps_explicit_null(self):
        record = build_record(
            "context_badge", {"id": "b", "label": "L", "autoDismissMs": None}
        )
        assert record.to_wire() == {"id": "b", "label": "L", "autoDismissMs": None}

    @pytest.mark.unit
    def test_to_wire_serializes_nested_records(self):
        data = {
            "id": "c",
            "title": "t",
            "content": "x",
            "actions": [{"id": "a1", "label": "OK"}],
        }
        assert build_record("hud_card", data).to_wire() == data

    @pytest.mark.unit
    def test_unknown_keys_are_ignored(self):
        record = build_record("status_indicator", {"id": "i", "state": "idle", "colour": "red"})
        assert "colour" not in record.to_wire()

    @pytest.mark.unit
    def test_does_not_alias_input(self):
        data = {"id": "c", "title": "t", "content": "x", "metadata": {"worldPosition": [1, 2, 3]}}
        record = build_record("hud_card", data)
        data["metadata"]["worldPosition"].append(4)
        assert record.metadata.world_position == [1, 2, 3]


class TestModelValidation:
    """Generated models also accept ordinary construction."""

    @pytest.mark.unit
    def test_validate_by_alias(self):
        record = StatusIndicator.model_validate({"id": "i1", "state": "loading", "showLabel": 1})
        assert record.state == "loading"
        assert record.to_wire() == {"id": "i1", "state": "loading"}

    @pytest.mark.unit
    def test_construct_by_attribute_name(self):
        record = HUDCard(id="c", title="t", content="x", auto_hide_after_seconds=5)
        assert record.to_wire()["autoHideAfterSeconds"] == 5


class TestExportJsonSchema:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_uses_wire_names(self):
        schema = export_json_schema("hud_card")
        assert "autoHideAfterSeconds" in schema["properties"]
        assert "auto_hide_after_seconds" not in schema["properties"]

    @pytest.mark.unit
    def test_required_fields(self):
        schema = export_json_schema(ComponentKind.HUD_CARD)
        assert {"id", "title", "content"} <= set(schema["required"])

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_exports_every_kind(self, kind):
        schema = export_json_schema(kind)
        assert schema["title"] == get_record_spec(kind).name
        assert "id" in schema["properties"]
