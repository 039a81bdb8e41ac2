"""Schema module - authoritative constraints table for Cosmo UI components.

This module provides:
- Field and record descriptors (FieldSpec, RecordSpec, cross-field rules)
- The sixteen component declarations with bounds, defaults and severities
- Kind resolution from loose aliases ("HUDCard", "badge", "hud-card")
- JSON-friendly constraint exports for prompt construction

Example usage:
    >>> from cosmo.schema import get_record_spec, export_constraints
    >>> get_record_spec("HUDCard").field("title").max_length
    60
    >>> export_constraints("badge")["fields"]["label"]["maxLength"]
    30
"""

from .components import (
    ACTION_BAR,
    ACTIVITY_RING,
    COMPONENT_SPECS,
    CONTACT_CARD,
    CONTEXT_BADGE,
    DIRECTION_ARROW,
    EDGE_POSITIONS,
    EVENT_CARD,
    HUD_CARD,
    MEDIA_CARD,
    MESSAGE_PREVIEW,
    MINI_PLAYER,
    PROGRESS_RING,
    QUICK_SETTINGS,
    STATUS_INDICATOR,
    TIMER,
    TOOLTIP,
    WEATHER_WIDGET,
    AnchorType,
    AutoAnchor,
    ScreenPosition,
    SizeClass,
    Variant,
)
from .lib import (
    UnknownComponentError,
    export_constraints,
    get_record_spec,
    iter_record_specs,
    list_component_kinds,
    resolve_kind,
)
from .types import (
    ComponentKind,
    ContextualDefault,
    FieldSpec,
    FieldType,
    IgnoredUnless,
    PriorityOverride,
    RecordSpec,
    Rule,
    Severity,
    StringFormat,
    UpperBound,
    to_snake,
)

__all__ = [
    # Descriptors
    "ComponentKind",
    "Severity",
    "FieldType",
    "StringFormat",
    "FieldSpec",
    "RecordSpec",
    "Rule",
    "PriorityOverride",
    "ContextualDefault",
    "IgnoredUnless",
    "UpperBound",
    "to_snake",
    # Vocabularies
    "Variant",
    "ScreenPosition",
    "EDGE_POSITIONS",
    "AnchorType",
    "AutoAnchor",
    "SizeClass",
    # Table
    "COMPONENT_SPECS",
    "HUD_CARD",
    "CONTEXT_BADGE",
    "PROGRESS_RING",
    "STATUS_INDICATOR",
    "ACTION_BAR",
    "TOOLTIP",
    "MEDIA_CARD",
    "MINI_PLAYER",
    "TIMER",
    "MESSAGE_PREVIEW",
    "CONTACT_CARD",
    "EVENT_CARD",
    "WEATHER_WIDGET",
    "QUICK_SETTINGS",
    "ACTIVITY_RING",
    "DIRECTION_ARROW",
    # Lookup and export
    "UnknownComponentError",
    "resolve_kind",
    "get_record_spec",
    "list_component_kinds",
    "iter_record_specs",
    "export_constraints",
]
