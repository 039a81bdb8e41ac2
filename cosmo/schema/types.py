"""Descriptor types for the component constraints table.

These are plain frozen dataclasses and enums. They carry no behavior beyond
path lookup; the validation engine interprets them reflectively.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Union


class ComponentKind(str, Enum):
    """The sixteen Cosmo UI component types."""

    HUD_CARD = "hud_card"
    CONTEXT_BADGE = "context_badge"
    PROGRESS_RING = "progress_ring"
    STATUS_INDICATOR = "status_indicator"
    ACTION_BAR = "action_bar"
    TOOLTIP = "tooltip"
    MEDIA_CARD = "media_card"
    MINI_PLAYER = "mini_player"
    TIMER = "timer"
    MESSAGE_PREVIEW = "message_preview"
    CONTACT_CARD = "contact_card"
    EVENT_CARD = "event_card"
    WEATHER_WIDGET = "weather_widget"
    QUICK_SETTINGS = "quick_settings"
    ACTIVITY_RING = "activity_ring"
    DIRECTION_ARROW = "direction_arrow"


class Severity(str, Enum):
    """Issue severity. Only errors block acceptance."""

    ERROR = "error"
    WARNING = "warning"


class FieldType(str, Enum):
    """Primitive shape of a field on the wire (JSON)."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    VECTOR3 = "vector3"


class StringFormat(str, Enum):
    """Formats a string field must conform to."""

    HEX_COLOR = "hex_color"
    URL = "url"
    EMAIL = "email"
    ISO_DATETIME = "iso_datetime"


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one field: shape, bounds, severities and default.

    Attributes:
        name: Wire name (camelCase, as emitted by the AI adapter).
        type: Primitive wire type.
        required: Missing or empty values are errors.
        default: Value applied by sanitize when the field is absent or
            unusable. ``None`` means the field stays absent.
        choices: Closed vocabulary for string fields.
        nullable: ``null`` is a meaningful value and is kept on the wire.
        non_empty: An optional string that, when present, must not be blank.
        max_length: Maximum string length.
        length_severity: Severity of a max_length violation.
        minimum: Lower numeric bound.
        maximum: Upper numeric bound.
        range_severity: Severity of a numeric bound violation.
        min_items: Minimum array length (always an error).
        max_items: Maximum array length.
        count_severity: Severity of a max_items violation.
        item_type: Element type for arrays of primitives.
        item_max_length: Element max length for arrays of strings.
        record: Nested record for objects and arrays of objects.
        unique_by: Key that must be unique across array elements.
        format: Required string format.
        description: Human-readable description.
    """

    name: str
    type: FieldType
    required: bool = False
    default: Any = None
    choices: tuple[str, ...] | None = None
    nullable: bool = False
    non_empty: bool = False
    max_length: int | None = None
    length_severity: Severity = Severity.ERROR
    minimum: int | float | None = None
    maximum: int | float | None = None
    range_severity: Severity = Severity.WARNING
    min_items: int | None = None
    max_items: int | None = None
    count_severity: Severity = Severity.ERROR
    item_type: FieldType | None = None
    item_max_length: int | None = None
    record: RecordSpec | None = None
    unique_by: str | None = None
    format: StringFormat | None = None
    description: str = ""

    @property
    def attr(self) -> str:
        """Python attribute name (snake_case) for the wire name."""
        return to_snake(self.name)

    @property
    def has_range(self) -> bool:
        return self.minimum is not None or self.maximum is not None


# === CROSS-FIELD RULES ===


@dataclass(frozen=True)
class PriorityOverride:
    """Forces field values once ``field`` reaches ``threshold``.

    HUDCard: priority >= 4 makes a card non-dismissible and disables
    auto-hide regardless of what the candidate asked for.
    """

    field: str
    threshold: int
    forced: tuple[tuple[str, Any], ...]

    @property
    def condition(self) -> str:
        return f"{self.field} >= {self.threshold}"


@dataclass(frozen=True)
class ContextualDefault:
    """Default for ``field`` that depends on the value of ``depends_on``."""

    field: str
    depends_on: str
    cases: tuple[tuple[Any, Any], ...]
    fallback: Any

    def resolve(self, value: Any) -> Any:
        for case, result in self.cases:
            if case == value:
                return result
        return self.fallback


@dataclass(frozen=True)
class IgnoredUnless:
    """``fields`` only take effect when ``depends_on`` equals ``expected``."""

    fields: tuple[str, ...]
    depends_on: str
    expected: str


@dataclass(frozen=True)
class UpperBound:
    """Numeric ``field`` must not exceed the numeric ``limit`` field.

    Both are dotted paths relative to the record that declares the rule.
    """

    field: str
    limit: str


Rule = Union[PriorityOverride, ContextualDefault, IgnoredUnless, UpperBound]


@dataclass(frozen=True)
class RecordSpec:
    """Declaration of a record: a component or one of its nested objects.

    Attributes:
        name: Unique record name, also used for the generated model class.
        fields: Field declarations in wire order.
        kind: Component kind for top-level records, None for nested ones.
        id_prefix: Prefix for generated ids (``card`` -> ``card-17``).
        rules: Cross-field rules evaluated after per-field checks.
        description: Human-readable description.
    """

    name: str
    fields: tuple[FieldSpec, ...]
    kind: ComponentKind | None = None
    id_prefix: str | None = None
    rules: tuple[Rule, ...] = ()
    description: str = ""
    _index: dict[str, FieldSpec] = field(
        init=False, repr=False, compare=False, hash=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        self._index.update({f.name: f for f in self.fields})

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def field(self, name: str) -> FieldSpec | None:
        """Get a top-level field declaration by wire name."""
        return self._index.get(name)

    def lookup(self, path: str) -> FieldSpec | None:
        """Resolve a dotted/indexed issue path to its field declaration.

        Example:
            >>> HUD_CARD.lookup("actions[1].label").max_length
            20
        """
        spec: RecordSpec | None = self
        found: FieldSpec | None = None
        for part in _INDEX_PATTERN.sub("", path).split("."):
            if spec is None:
                return None
            found = spec.field(part)
            if found is None:
                return None
            spec = found.record
        return found


_INDEX_PATTERN = re.compile(r"\[\d+\]")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")


def to_snake(name: str) -> str:
    """Convert a camelCase wire name to a snake_case attribute name."""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    return _CAMEL_BOUNDARY.sub(r"\1_\2", name).lower()


# === FIELD FACTORIES ===
# Keyword-only helpers that keep the constraints table readable.


def _choice_values(choices: Iterable[Enum | str]) -> tuple[str, ...]:
    return tuple(c.value if isinstance(c, Enum) else c for c in choices)


def identifier(description: str = "Unique identifier") -> FieldSpec:
    return FieldSpec("id", FieldType.STRING, required=True, description=description)


def string(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, FieldType.STRING, **kwargs)


def choice(
    name: str,
    choices: Iterable[Enum | str],
    default: Enum | str | None = None,
    **kwargs: Any,
) -> FieldSpec:
    if isinstance(default, Enum):
        default = default.value
    return FieldSpec(
        name,
        FieldType.STRING,
        choices=_choice_values(choices),
        default=default,
        **kwargs,
    )


def integer(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, FieldType.INTEGER, **kwargs)


def number(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, FieldType.NUMBER, **kwargs)


def boolean(name: str, default: bool | None = None, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, FieldType.BOOLEAN, default=default, **kwargs)


def vector3(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, FieldType.VECTOR3, **kwargs)


def nested(name: str, record: RecordSpec, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, FieldType.OBJECT, record=record, **kwargs)


def array_of(name: str, record: RecordSpec, **kwargs: Any) -> FieldSpec:
    kwargs.setdefault("default", ())
    return FieldSpec(name, FieldType.ARRAY, record=record, **kwargs)


def array_of_strings(name: str, **kwargs: Any) -> FieldSpec:
    kwargs.setdefault("default", ())
    return FieldSpec(name, FieldType.ARRAY, item_type=FieldType.STRING, **kwargs)


__all__ = [
    "ComponentKind",
    "Severity",
    "FieldType",
    "StringFormat",
    "FieldSpec",
    "RecordSpec",
    "PriorityOverride",
    "ContextualDefault",
    "IgnoredUnless",
    "UpperBound",
    "Rule",
    "to_snake",
    "identifier",
    "string",
    "choice",
    "integer",
    "number",
    "boolean",
    "vector3",
    "nested",
    "array_of",
    "array_of_strings",
]
