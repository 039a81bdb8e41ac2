"""Typed component records generated from the constraints table.

Each RecordSpec yields one pydantic model with snake_case attributes and the
camelCase wire names as aliases. Models carry shape and descriptions only;
bounds stay in the table and are enforced by the validation engine.

Sanitized records are trusted and built with ``model_construct`` (no
re-validation). ``to_wire()`` walks the declaration rather than pydantic's
serializer so absent optional fields are omitted and explicit nulls kept.
"""

import copy
from collections.abc import Mapping
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, create_model

from ..schema import (
    ComponentKind,
    FieldSpec,
    FieldType,
    RecordSpec,
    get_record_spec,
    list_component_kinds,
)

_MODELS: dict[str, type["RecordModel"]] = {}
_SPECS_BY_MODEL: dict[type["RecordModel"], RecordSpec] = {}


class RecordModel(BaseModel):
    """Base class for every generated component and nested record model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def record_spec(cls) -> RecordSpec:
        """The RecordSpec this model was generated from."""
        return _SPECS_BY_MODEL[cls]

    @classmethod
    def component_kind(cls) -> ComponentKind | None:
        """Component kind for top-level models, None for nested ones."""
        return cls.record_spec().kind

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a camelCase dict.

        Fields that were never set are omitted; explicit ``None`` values
        (nullable fields such as ``autoHideAfterSeconds``) are kept.
        """
        out: dict[str, Any] = {}
        fields_set = self.model_fields_set
        for f in self.record_spec().fields:
            if f.attr in fields_set:
                out[f.name] = _wire_value(getattr(self, f.attr))
        return out


def _wire_value(value: Any) -> Any:
    if isinstance(value, RecordModel):
        return value.to_wire()
    if isinstance(value, (list, tuple)):
        return [_wire_value(v) for v in value]
    return value


# === MODEL GENERATION ===


def _annotation(f: FieldSpec) -> Any:
    if f.type is FieldType.STRING:
        annotation: Any = Literal[f.choices] if f.choices else str
    elif f.type is FieldType.INTEGER:
        annotation = int
    elif f.type is FieldType.NUMBER:
        annotation = float
    elif f.type is FieldType.BOOLEAN:
        annotation = bool
    elif f.type is FieldType.VECTOR3:
        annotation = tuple[float, float, float]
    elif f.type is FieldType.OBJECT:
        annotation = model_for_spec(f.record)
    elif f.record is not None:
        annotation = list[model_for_spec(f.record)]
    else:
        annotation = list[str]

    if not f.required or f.nullable:
        annotation = Optional[annotation]
    return annotation


def _field_info(f: FieldSpec) -> Any:
    description = f.description or None
    if f.required:
        return Field(..., alias=f.name, description=description)
    if f.type is FieldType.ARRAY:
        return Field(default_factory=list, alias=f.name, description=description)
    return Field(default=f.default, alias=f.name, description=description)


def model_for_spec(spec: RecordSpec) -> type[RecordModel]:
    """Get (generating on first use) the model for a RecordSpec.

    Nested records are generated before their parents.

    Args:
        spec: Top-level or nested record declaration.

    Returns:
        The RecordModel subclass named after ``spec.name``.
    """
    model = _MODELS.get(spec.name)
    if model is not None:
        return model

    definitions = {f.attr: (_annotation(f), _field_info(f)) for f in spec.fields}
    model = create_model(
        spec.name,
        __base__=RecordModel,
        __module__=__name__,
        __doc__=spec.description or f"{spec.name} record.",
        **definitions,
    )
    _MODELS[spec.name] = model
    _SPECS_BY_MODEL[model] = spec
    return model


def get_record_model(kind: ComponentKind | str) -> type[RecordModel]:
    """Get the typed model for a component kind (or alias).

    Raises:
        UnknownComponentError: If the kind cannot be resolved.
    """
    return model_for_spec(get_record_spec(kind))


# === CONSTRUCTION ===


def build_record(spec: RecordSpec | ComponentKind | str, data: Mapping[str, Any]) -> RecordModel:
    """Build a typed record from wire data without re-validating.

    Only declared fields are copied; unknown keys are ignored. Values are
    deep-copied so the record never aliases ``data``.

    Args:
        spec: RecordSpec, component kind or alias.
        data: Wire (camelCase) mapping, normally the output of sanitize.

    Returns:
        Instance of the generated model.
    """
    if not isinstance(spec, RecordSpec):
        spec = get_record_spec(spec)

    values: dict[str, Any] = {}
    for f in spec.fields:
        if f.name not in data:
            continue
        value = data[f.name]
        if f.record is not None and f.type is FieldType.ARRAY and isinstance(value, list):
            value = [build_record(f.record, item) for item in value if isinstance(item, Mapping)]
        elif f.record is not None and isinstance(value, Mapping):
            value = build_record(f.record, value)
        else:
            value = copy.deepcopy(value)
        values[f.attr] = value

    return model_for_spec(spec).model_construct(_fields_set=set(values), **values)


def export_json_schema(kind: ComponentKind | str) -> dict[str, Any]:
    """Export the JSON Schema of a component's typed record.

    Property names are the wire (camelCase) aliases.

    Args:
        kind: Component kind or alias.

    Returns:
        JSON Schema dict (with nested records under ``$defs``).
    """
    return get_record_model(kind).model_json_schema(by_alias=True)


# === PUBLIC MODELS ===

HUDCard = get_record_model(ComponentKind.HUD_CARD)
ContextBadge = get_record_model(ComponentKind.CONTEXT_BADGE)
ProgressRing = get_record_model(ComponentKind.PROGRESS_RING)
StatusIndicator = get_record_model(ComponentKind.STATUS_INDICATOR)
ActionBar = get_record_model(ComponentKind.ACTION_BAR)
Tooltip = get_record_model(ComponentKind.TOOLTIP)
MediaCard = get_record_model(ComponentKind.MEDIA_CARD)
MiniPlayer = get_record_model(ComponentKind.MINI_PLAYER)
Timer = get_record_model(ComponentKind.TIMER)
MessagePreview = get_record_model(ComponentKind.MESSAGE_PREVIEW)
ContactCard = get_record_model(ComponentKind.CONTACT_CARD)
EventCard = get_record_model(ComponentKind.EVENT_CARD)
WeatherWidget = get_record_model(ComponentKind.WEATHER_WIDGET)
QuickSettings = get_record_model(ComponentKind.QUICK_SETTINGS)
ActivityRing = get_record_model(ComponentKind.ACTIVITY_RING)
DirectionArrow = get_record_model(ComponentKind.DIRECTION_ARROW)

RECORD_MODELS: dict[ComponentKind, type[RecordModel]] = {
    kind: get_record_model(kind) for kind in list_component_kinds()
}

ComponentRecord = Union[
    HUDCard,
    ContextBadge,
    ProgressRing,
    StatusIndicator,
    ActionBar,
    Tooltip,
    MediaCard,
    MiniPlayer,
    Timer,
    MessagePreview,
    ContactCard,
    EventCard,
    WeatherWidget,
    QuickSettings,
    ActivityRing,
    DirectionArrow,
]


__all__ = [
    "RecordModel",
    "ComponentRecord",
    "RECORD_MODELS",
    "model_for_spec",
    "get_record_model",
    "build_record",
    "export_json_schema",
    "HUDCard",
    "ContextBadge",
    "ProgressRing",
    "StatusIndicator",
    "ActionBar",
    "Tooltip",
    "MediaCard",
    "MiniPlayer",
    "Timer",
    "MessagePreview",
    "ContactCard",
    "EventCard",
    "WeatherWidget",
    "QuickSettings",
    "ActivityRing",
    "DirectionArrow",
]
