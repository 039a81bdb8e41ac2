"""Constraints table for the sixteen Cosmo UI components.

Every bound, vocabulary, default and severity that the validation engine
enforces is declared here and nowhere else. Field names are the wire
(camelCase) names emitted by the AI adapter.
"""

from enum import Enum

from .types import (
    ComponentKind,
    ContextualDefault,
    FieldSpec,
    IgnoredUnless,
    PriorityOverride,
    RecordSpec,
    Severity,
    StringFormat,
    UpperBound,
    array_of,
    array_of_strings,
    boolean,
    choice,
    identifier,
    integer,
    nested,
    number,
    string,
    vector3,
)


# =============================================================================
# Shared vocabularies
# =============================================================================


class Variant(str, Enum):
    """Semantic color variant shared by the six HUD primitives.

    - NEUTRAL: General information, gray (default)
    - INFO: Informational, blue tint
    - SUCCESS: Positive feedback, green tint
    - WARNING: Attention needed, yellow tint
    - ERROR: Critical issue, red tint
    """

    NEUTRAL = "neutral"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ScreenPosition(str, Enum):
    """Nine-point screen anchor for screen-space components."""

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"


EDGE_POSITIONS = tuple(p for p in ScreenPosition if p is not ScreenPosition.CENTER)


class AnchorType(str, Enum):
    """AR anchoring mode.

    - SCREEN_SPACE: Fixed to the viewport; world coordinates are ignored
    - WORLD_SPACE: Placed in the 3D scene at worldPosition/worldRotation
    """

    SCREEN_SPACE = "screen-space"
    WORLD_SPACE = "world-space"


class AutoAnchor(str, Enum):
    """Automatic AR placement strategy."""

    FACE = "face"
    SURFACE = "surface"
    GAZE = "gaze"


class SizeClass(str, Enum):
    """Preset size used by the richer cards."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


_SURFACE_VARIANTS = ("default", "compact", "detailed", "glass")
_ALERT_ICONS = ("none", "info", "check", "alert", "error", "bell", "clock", "star")
_WEATHER_CONDITIONS = (
    "clear",
    "partly-cloudy",
    "cloudy",
    "rain",
    "heavy-rain",
    "thunderstorm",
    "snow",
    "sleet",
    "fog",
    "windy",
    "hail",
)

_TEMPERATURE = {"minimum": -100, "maximum": 150}
_PERCENT = {"minimum": 0, "maximum": 100}
_DAY_SECONDS = 86400


def _ar_metadata(name: str, *extra: FieldSpec) -> RecordSpec:
    """Build the AR anchoring sub-object shared by the HUD primitives."""
    return RecordSpec(
        name=name,
        description="AR anchoring hints (ignored by 2D renderers)",
        fields=(
            choice("anchorType", AnchorType, default=AnchorType.SCREEN_SPACE),
            vector3("worldPosition", description="[x, y, z] in meters"),
            vector3("worldRotation", description="[x, y, z] Euler angles in radians"),
            choice("autoAnchor", AutoAnchor),
            number(
                "autoAnchorDistance",
                minimum=0.1,
                maximum=10,
                range_severity=Severity.ERROR,
                description="Distance in meters for auto-anchoring",
            ),
            *extra,
        ),
        rules=(
            IgnoredUnless(
                fields=("worldPosition", "worldRotation", "autoAnchor", "autoAnchorDistance"),
                depends_on="anchorType",
                expected=AnchorType.WORLD_SPACE.value,
            ),
        ),
    )


# =============================================================================
# HUD primitives
# =============================================================================

HUD_CARD = RecordSpec(
    name="HUDCard",
    kind=ComponentKind.HUD_CARD,
    id_prefix="card",
    description="Glanceable notification card with optional actions",
    fields=(
        identifier(),
        string("title", required=True, max_length=60),
        string("content", required=True, max_length=200),
        choice("variant", Variant, default=Variant.NEUTRAL),
        integer("priority", minimum=1, maximum=5, default=3, description="1 (low) to 5 (critical)"),
        choice("position", EDGE_POSITIONS, default=ScreenPosition.TOP_RIGHT),
        choice("icon", _ALERT_ICONS, default="none"),
        number(
            "autoHideAfterSeconds",
            minimum=3,
            maximum=30,
            nullable=True,
            description="Seconds before the card hides itself; null keeps it visible",
        ),
        boolean("dismissible", default=True),
        array_of(
            "actions",
            RecordSpec(
                name="HUDCardAction",
                id_prefix="action",
                fields=(
                    identifier(),
                    string("label", required=True, max_length=20),
                    choice("variant", ("primary", "secondary", "destructive"), default="secondary"),
                ),
            ),
            max_items=2,
            unique_by="id",
        ),
        nested("metadata", _ar_metadata("HUDCardMetadata", integer("zIndex"))),
    ),
    rules=(
        PriorityOverride(
            field="priority",
            threshold=4,
            forced=(("dismissible", False), ("autoHideAfterSeconds", None)),
        ),
    ),
)

CONTEXT_BADGE = RecordSpec(
    name="ContextBadge",
    kind=ComponentKind.CONTEXT_BADGE,
    id_prefix="badge",
    description="Small status chip pinned to the screen or a tracked object",
    fields=(
        identifier(),
        string("label", required=True, max_length=30),
        choice("variant", Variant, default=Variant.NEUTRAL),
        choice("icon", _ALERT_ICONS + ("user", "wifi", "battery"), default="none"),
        choice("position", EDGE_POSITIONS, default=ScreenPosition.TOP_RIGHT),
        string("contextualColor", format=StringFormat.HEX_COLOR, description="#RRGGBB override"),
        integer("autoDismissMs", minimum=1000, maximum=30000, nullable=True),
        boolean("dismissible", default=True),
        boolean("pulse", default=False),
        nested(
            "metadata",
            _ar_metadata(
                "ContextBadgeMetadata",
                string("followTarget", non_empty=True, description="Tracked object identifier"),
            ),
        ),
    ),
)

PROGRESS_RING = RecordSpec(
    name="ProgressRing",
    kind=ComponentKind.PROGRESS_RING,
    id_prefix="ring",
    description="Circular progress indicator",
    fields=(
        identifier(),
        number("value", required=True, minimum=0, maximum=100, description="Percent complete"),
        number("size", minimum=24, maximum=200, default=48, description="Diameter in pixels"),
        number("thickness", minimum=2, maximum=20, default=6),
        choice("variant", Variant, default=Variant.NEUTRAL),
        boolean("animated", default=True),
        boolean("showValue", default=False),
        string("label", max_length=30),
        choice("position", ScreenPosition, default=ScreenPosition.CENTER),
        nested("metadata", _ar_metadata("ProgressRingMetadata")),
    ),
)

STATUS_INDICATOR = RecordSpec(
    name="StatusIndicator",
    kind=ComponentKind.STATUS_INDICATOR,
    id_prefix="indicator",
    description="Colored dot conveying system state",
    fields=(
        identifier(),
        choice(
            "state",
            ("idle", "active", "loading", "success", "warning", "error"),
            required=True,
        ),
        string("label", max_length=20),
        number("size", minimum=8, maximum=32, default=12),
        boolean("pulse"),
        boolean("glow", default=False),
        choice("position", ScreenPosition, default=ScreenPosition.TOP_RIGHT),
        nested("metadata", _ar_metadata("StatusIndicatorMetadata")),
    ),
    rules=(
        ContextualDefault(field="pulse", depends_on="state", cases=(("loading", True),), fallback=False),
    ),
)

ACTION_BAR = RecordSpec(
    name="ActionBar",
    kind=ComponentKind.ACTION_BAR,
    id_prefix="actionbar",
    description="Row of icon buttons docked to a screen edge",
    fields=(
        identifier(),
        array_of(
            "items",
            RecordSpec(
                name="ActionBarItem",
                id_prefix="item",
                fields=(
                    identifier(),
                    choice(
                        "icon",
                        (
                            "none", "home", "back", "forward", "menu", "close",
                            "settings", "search", "share", "favorite", "add",
                            "remove", "edit", "delete", "refresh", "camera",
                            "mic", "speaker",
                        ),
                        default="none",
                    ),
                    string("label", required=True, max_length=12, length_severity=Severity.WARNING),
                    boolean("disabled", default=False),
                    boolean("active", default=False),
                    integer("badge", minimum=0, maximum=99),
                ),
            ),
            required=True,
            min_items=1,
            max_items=6,
            count_severity=Severity.WARNING,
            unique_by="id",
        ),
        choice("position", ("bottom", "top", "left", "right"), default="bottom"),
        choice("variant", ("solid", "glass", "minimal"), default="glass"),
        boolean("showLabels", default=True),
        boolean("visible", default=True),
        nested("metadata", _ar_metadata("ActionBarMetadata", boolean("followGaze"))),
    ),
)

TOOLTIP = RecordSpec(
    name="Tooltip",
    kind=ComponentKind.TOOLTIP,
    id_prefix="tooltip",
    description="Contextual hint attached to a target element",
    fields=(
        identifier(),
        string("content", required=True, max_length=200),
        choice(
            "position",
            ("top", "bottom", "left", "right", "top-left", "top-right", "bottom-left", "bottom-right"),
            default="top",
        ),
        choice("trigger", ("hover", "click", "focus", "manual"), default="hover"),
        choice("variant", ("dark", "light", "info", "warning", "error"), default="dark"),
        boolean("showArrow", default=True),
        integer("delayShow", minimum=0, maximum=2000, default=300, description="Milliseconds"),
        integer("delayHide", minimum=0, maximum=2000, default=0, description="Milliseconds"),
        number("maxWidth", minimum=100, maximum=400, default=250, description="Pixels"),
        boolean("visible"),
        string("targetSelector", non_empty=True),
        nested("metadata", _ar_metadata("TooltipMetadata")),
    ),
)


# =============================================================================
# Rich cards
# =============================================================================


def _labelled_action(name: str, icons: tuple[str, ...], *, label_required: bool = True) -> RecordSpec:
    return RecordSpec(
        name=name,
        id_prefix="action",
        fields=(
            identifier(),
            string("label", required=label_required, max_length=20),
            choice("icon", icons),
        ),
    )


def _typed_action(name: str, types: tuple[str, ...]) -> RecordSpec:
    return RecordSpec(
        name=name,
        id_prefix="action",
        fields=(
            identifier(),
            choice("type", types, required=True),
            string("label", max_length=20),
        ),
    )


MEDIA_CARD = RecordSpec(
    name="MediaCard",
    kind=ComponentKind.MEDIA_CARD,
    id_prefix="media",
    description="Image, video, audio or link preview",
    fields=(
        identifier(),
        choice("type", ("image", "video", "audio", "link"), required=True),
        nested(
            "media",
            RecordSpec(
                name="MediaCardSource",
                fields=(
                    string("url", required=True, format=StringFormat.URL),
                    string("alt", max_length=120),
                    string("thumbnail", format=StringFormat.URL),
                ),
            ),
            required=True,
        ),
        string("title", required=True, max_length=60),
        string("description", max_length=200),
        choice("size", SizeClass, default=SizeClass.MEDIUM),
        choice("variant", ("default", "featured", "minimal", "glass"), default="default"),
        nested(
            "metadata",
            RecordSpec(
                name="MediaCardMetadata",
                fields=(
                    string("source", max_length=40),
                    number("duration", minimum=0, description="Seconds"),
                    string("timestamp"),
                    integer("views", minimum=0),
                ),
            ),
        ),
        array_of(
            "actions",
            _labelled_action(
                "MediaCardAction",
                ("play", "pause", "share", "save", "open", "download", "favorite"),
            ),
            max_items=3,
            unique_by="id",
        ),
        boolean("dismissible", default=True),
    ),
)

MINI_PLAYER = RecordSpec(
    name="MiniPlayer",
    kind=ComponentKind.MINI_PLAYER,
    id_prefix="player",
    description="Compact now-playing control",
    fields=(
        identifier(),
        choice("state", ("playing", "paused", "stopped", "loading", "buffering"), required=True),
        nested(
            "track",
            RecordSpec(
                name="MiniPlayerTrack",
                fields=(
                    string("title", required=True, max_length=60),
                    string("artist", max_length=40),
                    string("album", max_length=60),
                    string("artwork", format=StringFormat.URL),
                    number("duration", required=True, minimum=0, description="Seconds"),
                ),
            ),
            required=True,
        ),
        nested(
            "progress",
            RecordSpec(
                name="MiniPlayerProgress",
                fields=(
                    number("current", required=True, minimum=0, description="Seconds"),
                    number("buffered", minimum=0),
                ),
            ),
            required=True,
        ),
        integer("volume", **_PERCENT),
        boolean("shuffle", default=False),
        choice("repeat", ("off", "one", "all"), default="off"),
        choice("variant", ("default", "minimal", "glass", "floating"), default="default"),
        choice("size", SizeClass, default=SizeClass.MEDIUM),
        boolean("showProgress", default=True),
        boolean("showVolume", default=False),
    ),
    rules=(
        UpperBound(field="progress.current", limit="track.duration"),
        UpperBound(field="progress.buffered", limit="track.duration"),
    ),
)

TIMER = RecordSpec(
    name="Timer",
    kind=ComponentKind.TIMER,
    id_prefix="timer",
    description="Countdown, stopwatch or pomodoro timer",
    fields=(
        identifier(),
        choice("mode", ("countdown", "stopwatch", "pomodoro"), required=True),
        choice("state", ("idle", "running", "paused", "completed"), default="idle"),
        string("label", max_length=30),
        number("duration", required=True, minimum=1, maximum=_DAY_SECONDS, description="Seconds"),
        number("remaining", required=True, minimum=0, maximum=_DAY_SECONDS, description="Seconds"),
        choice("variant", ("ring", "digital", "minimal", "glass"), default="ring"),
        choice("size", SizeClass, default=SizeClass.MEDIUM),
        choice("color", ("neutral", "success", "warning", "error", "info"), default="info"),
        boolean("showControls", default=True),
        boolean("vibrateOnComplete", default=False),
        boolean("alertOnComplete", default=True),
        array_of(
            "presets",
            RecordSpec(
                name="TimerPreset",
                id_prefix="preset",
                fields=(
                    identifier(),
                    string("label", required=True, max_length=12),
                    integer("seconds", required=True, minimum=1, maximum=_DAY_SECONDS),
                ),
            ),
            max_items=4,
            unique_by="id",
        ),
    ),
    rules=(UpperBound(field="remaining", limit="duration"),),
)

MESSAGE_PREVIEW = RecordSpec(
    name="MessagePreview",
    kind=ComponentKind.MESSAGE_PREVIEW,
    id_prefix="message",
    description="Incoming message notification",
    fields=(
        identifier(),
        choice("type", ("text", "image", "voice", "video", "file"), default="text"),
        nested(
            "sender",
            RecordSpec(
                name="MessagePreviewSender",
                fields=(
                    string("name", required=True, max_length=40),
                    string("avatar"),
                    boolean("online"),
                    boolean("verified", default=False),
                ),
            ),
            required=True,
        ),
        string("content", required=True, max_length=200),
        string("timestamp", required=True),
        choice("priority", ("low", "normal", "high", "urgent"), default="normal"),
        choice("variant", ("default", "compact", "expanded", "glass"), default="default"),
        integer("unreadCount", minimum=0, maximum=999),
        string("app", max_length=30),
        array_of_strings("quickReplies", max_items=3, item_max_length=25),
        array_of(
            "actions",
            _labelled_action(
                "MessagePreviewAction",
                ("reply", "archive", "delete", "mute", "call", "video"),
            ),
            max_items=3,
            unique_by="id",
        ),
        boolean("read", default=False),
        number("autoHideAfterSeconds", minimum=3, maximum=60),
    ),
)

CONTACT_CARD = RecordSpec(
    name="ContactCard",
    kind=ComponentKind.CONTACT_CARD,
    id_prefix="contact",
    description="Person summary with presence and quick actions",
    fields=(
        identifier(),
        string("name", required=True, max_length=50),
        string("avatar", description="Image URL or initials"),
        choice("status", ("online", "offline", "busy", "away", "dnd")),
        string("title", max_length=60),
        string("organization", max_length=60),
        string("phone", max_length=30),
        string("email", format=StringFormat.EMAIL),
        string("lastSeen"),
        choice("variant", _SURFACE_VARIANTS, default="default"),
        array_of(
            "actions",
            _typed_action(
                "ContactCardAction",
                ("call", "message", "video", "email", "location", "favorite"),
            ),
            max_items=4,
            unique_by="id",
        ),
        boolean("favorite", default=False),
        string("location", max_length=60),
        string("relationship", max_length=30),
    ),
)

EVENT_CARD = RecordSpec(
    name="EventCard",
    kind=ComponentKind.EVENT_CARD,
    id_prefix="event",
    description="Calendar event or reminder",
    fields=(
        identifier(),
        string("title", required=True, max_length=60),
        choice("type", ("meeting", "reminder", "task", "birthday", "travel", "other"), default="other"),
        string("startTime", required=True, format=StringFormat.ISO_DATETIME),
        string("endTime", format=StringFormat.ISO_DATETIME),
        boolean("allDay", default=False),
        choice("status", ("upcoming", "ongoing", "completed", "cancelled"), default="upcoming"),
        nested(
            "location",
            RecordSpec(
                name="EventCardLocation",
                fields=(
                    string("name", required=True, max_length=60),
                    string("address", max_length=120),
                    string("meetingUrl", format=StringFormat.URL),
                    boolean("isVirtual", default=False),
                ),
            ),
        ),
        string("description", max_length=200),
        array_of(
            "attendees",
            RecordSpec(
                name="EventCardAttendee",
                fields=(
                    string("name", required=True, max_length=40),
                    string("avatar"),
                    choice("status", ("accepted", "declined", "tentative", "pending"), default="pending"),
                ),
            ),
            max_items=10,
        ),
        choice("variant", _SURFACE_VARIANTS, default="default"),
        choice("color", ("blue", "green", "red", "yellow", "purple", "orange"), default="blue"),
        array_of(
            "actions",
            _typed_action("EventCardAction", ("join", "snooze", "dismiss", "directions", "call")),
            max_items=3,
            unique_by="id",
        ),
        integer("minutesUntil"),
        boolean("reminder", default=False),
    ),
)

WEATHER_WIDGET = RecordSpec(
    name="WeatherWidget",
    kind=ComponentKind.WEATHER_WIDGET,
    id_prefix="weather",
    description="Current conditions with optional forecast",
    fields=(
        identifier(),
        string("location", required=True, max_length=40),
        number("temperature", required=True, **_TEMPERATURE),
        choice("unit", ("celsius", "fahrenheit"), default="celsius"),
        number("feelsLike", **_TEMPERATURE),
        choice("condition", _WEATHER_CONDITIONS, required=True),
        number("humidity", **_PERCENT),
        number("windSpeed", minimum=0),
        string("windDirection", max_length=3, description="Compass point such as NW"),
        number("uvIndex", minimum=0, maximum=15),
        integer("airQuality", minimum=0, maximum=500),
        choice("variant", _SURFACE_VARIANTS, default="default"),
        choice("size", SizeClass, default=SizeClass.MEDIUM),
        array_of(
            "hourlyForecast",
            RecordSpec(
                name="WeatherForecastHour",
                fields=(
                    string("time", required=True),
                    number("temperature", required=True, **_TEMPERATURE),
                    choice("condition", _WEATHER_CONDITIONS, required=True),
                    number("precipitation", **_PERCENT),
                ),
            ),
            max_items=24,
        ),
        array_of(
            "dailyForecast",
            RecordSpec(
                name="WeatherForecastDay",
                fields=(
                    string("date", required=True),
                    number("high", required=True, **_TEMPERATURE),
                    number("low", required=True, **_TEMPERATURE),
                    choice("condition", _WEATHER_CONDITIONS, required=True),
                    number("precipitation", **_PERCENT),
                ),
                rules=(UpperBound(field="low", limit="high"),),
            ),
            max_items=10,
        ),
        string("updatedAt"),
        string("sunrise"),
        string("sunset"),
    ),
)

QUICK_SETTINGS = RecordSpec(
    name="QuickSettings",
    kind=ComponentKind.QUICK_SETTINGS,
    id_prefix="settings",
    description="Grid of system toggles",
    fields=(
        identifier(),
        array_of(
            "items",
            RecordSpec(
                name="QuickSettingItem",
                id_prefix="setting",
                fields=(
                    identifier(),
                    choice(
                        "type",
                        (
                            "wifi", "bluetooth", "airplane", "dnd", "flashlight",
                            "location", "battery-saver", "dark-mode", "rotation",
                            "hotspot", "nfc", "sync", "mute", "vibrate",
                            "brightness", "volume", "screen-timeout", "custom",
                        ),
                        required=True,
                    ),
                    string("label", max_length=20),
                    boolean("enabled", required=True),
                    string("subtitle", max_length=30),
                    boolean("available", default=True),
                    string("icon", max_length=30),
                ),
            ),
            required=True,
            min_items=1,
            max_items=12,
            unique_by="id",
        ),
        choice("layout", ("row", "grid", "list"), default="grid"),
        choice("variant", ("default", "compact", "grid", "glass"), default="default"),
        integer("columns", minimum=1, maximum=6, default=4),
        boolean("showLabels", default=True),
        string("title", max_length=40),
        integer("batteryLevel", **_PERCENT),
        string("currentTime"),
    ),
)

ACTIVITY_RING = RecordSpec(
    name="ActivityRing",
    kind=ComponentKind.ACTIVITY_RING,
    id_prefix="activity",
    description="Concentric fitness goal rings",
    fields=(
        identifier(),
        array_of(
            "rings",
            RecordSpec(
                name="ActivityRingData",
                id_prefix="metric",
                fields=(
                    identifier(),
                    string("label", required=True, max_length=20),
                    number("current", required=True, minimum=0),
                    number("goal", required=True, minimum=1),
                    string("unit", max_length=12),
                    choice(
                        "color",
                        ("red", "green", "blue", "yellow", "purple", "orange", "pink"),
                        required=True,
                    ),
                    choice(
                        "icon",
                        ("move", "exercise", "stand", "steps", "heart", "calories", "distance", "custom"),
                    ),
                ),
            ),
            required=True,
            min_items=1,
            max_items=4,
            unique_by="id",
        ),
        choice("variant", ("default", "minimal", "detailed", "glass"), default="default"),
        choice("size", SizeClass, default=SizeClass.MEDIUM),
        boolean("showLabels", default=True),
        boolean("showPercentage", default=True),
        boolean("showGoals", default=False),
        boolean("animated", default=True),
        string("title", max_length=40),
        string("subtitle", max_length=60),
        number("strokeWidth", minimum=4, maximum=24, default=12),
    ),
)

DIRECTION_ARROW = RecordSpec(
    name="DirectionArrow",
    kind=ComponentKind.DIRECTION_ARROW,
    id_prefix="arrow",
    description="Navigation arrow pointing toward a destination",
    fields=(
        identifier(),
        nested(
            "destination",
            RecordSpec(
                name="DirectionArrowDestination",
                fields=(
                    string("name", required=True, max_length=60),
                    string("address", max_length=120),
                    string("category", max_length=30),
                ),
            ),
            required=True,
        ),
        number("bearing", required=True, minimum=0, maximum=360, description="Degrees from north"),
        number("distance", required=True, minimum=0),
        choice("distanceUnit", ("meters", "kilometers", "feet", "miles"), default="meters"),
        number("estimatedTime", minimum=0, description="Minutes"),
        choice("mode", ("walking", "driving", "cycling", "transit"), default="walking"),
        string("instruction", max_length=80),
        string("nextInstruction", max_length=80),
        choice("variant", ("default", "minimal", "detailed", "glass", "ar"), default="default"),
        choice("size", SizeClass, default=SizeClass.MEDIUM),
        boolean("showCompass", default=False),
        choice("color", ("blue", "green", "orange", "red"), default="blue"),
        boolean("pulse", default=False),
        boolean("showETA", default=True),
    ),
)


COMPONENT_SPECS: dict[ComponentKind, RecordSpec] = {
    spec.kind: spec
    for spec in (
        HUD_CARD,
        CONTEXT_BADGE,
        PROGRESS_RING,
        STATUS_INDICATOR,
        ACTION_BAR,
        TOOLTIP,
        MEDIA_CARD,
        MINI_PLAYER,
        TIMER,
        MESSAGE_PREVIEW,
        CONTACT_CARD,
        EVENT_CARD,
        WEATHER_WIDGET,
        QUICK_SETTINGS,
        ACTIVITY_RING,
        DIRECTION_ARROW,
    )
}


__all__ = [
    "Variant",
    "ScreenPosition",
    "EDGE_POSITIONS",
    "AnchorType",
    "AutoAnchor",
    "SizeClass",
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
    "COMPONENT_SPECS",
]
