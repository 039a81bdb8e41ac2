"""Typed records - pydantic models generated from the constraints table.

Example usage:
    >>> from cosmo.records import HUDCard, build_record
    >>> card = build_record("hud_card", {"id": "card-1", "title": "Hi", "content": "There"})
    >>> isinstance(card, HUDCard), card.to_wire()["title"]
    (True, 'Hi')
"""

from .lib import (
    RECORD_MODELS,
    ActionBar,
    ActivityRing,
    ComponentRecord,
    ContactCard,
    ContextBadge,
    DirectionArrow,
    EventCard,
    HUDCard,
    MediaCard,
    MessagePreview,
    MiniPlayer,
    ProgressRing,
    QuickSettings,
    RecordModel,
    StatusIndicator,
    Timer,
    Tooltip,
    WeatherWidget,
    build_record,
    export_json_schema,
    get_record_model,
    model_for_spec,
)

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
