"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Deterministic id generation for tests
- One valid candidate per component kind, as an AI adapter would emit it
"""

from __future__ import annotations

import copy
from typing import Any

import pytest
from dotenv import load_dotenv

from cosmo.schema import ComponentKind
from cosmo.validation import CounterIdGenerator

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Valid Candidates
# =============================================================================

VALID_CANDIDATES: dict[ComponentKind, dict[str, Any]] = {
    ComponentKind.HUD_CARD: {
        "id": "card-1",
        "title": "Meeting in 5 minutes",
        "content": "Design review in room 4B",
        "variant": "info",
        "priority": 3,
        "actions": [{"id": "join", "label": "Join", "variant": "primary"}],
    },
    ComponentKind.CONTEXT_BADGE: {
        "id": "badge-1",
        "label": "Recording",
        "variant": "error",
        "icon": "alert",
        "contextualColor": "#ff3b30",
        "autoDismissMs": 5000,
    },
    ComponentKind.PROGRESS_RING: {
        "id": "ring-1",
        "value": 65,
        "label": "Upload",
        "showValue": True,
    },
    ComponentKind.STATUS_INDICATOR: {
        "id": "indicator-1",
        "state": "active",
        "label": "Online",
    },
    ComponentKind.ACTION_BAR: {
        "id": "actionbar-1",
        "items": [
            {"id": "home", "icon": "home", "label": "Home"},
            {"id": "search", "icon": "search", "label": "Search", "badge": 3},
        ],
    },
    ComponentKind.TOOLTIP: {
        "id": "tooltip-1",
        "content": "Tap to pin this card",
        "targetSelector": "#pin-button",
    },
    ComponentKind.MEDIA_CARD: {
        "id": "media-1",
        "type": "image",
        "media": {"url": "https://example.com/photo.jpg", "alt": "Sunset"},
        "title": "Sunset at the pier",
        "actions": [{"id": "share", "label": "Share", "icon": "share"}],
    },
    ComponentKind.MINI_PLAYER: {
        "id": "player-1",
        "state": "playing",
        "track": {"title": "Clair de Lune", "artist": "Debussy", "duration": 300},
        "progress": {"current": 120, "buffered": 180},
        "volume": 70,
    },
    ComponentKind.TIMER: {
        "id": "timer-1",
        "mode": "countdown",
        "state": "running",
        "duration": 300,
        "remaining": 120,
        "presets": [{"id": "five", "label": "5 min", "seconds": 300}],
    },
    ComponentKind.MESSAGE_PREVIEW: {
        "id": "message-1",
        "sender": {"name": "Ada", "online": True},
        "content": "Are we still on for lunch?",
        "timestamp": "2024-05-01T11:58:00Z",
        "quickReplies": ["Yes", "Running late"],
    },
    ComponentKind.CONTACT_CARD: {
        "id": "contact-1",
        "name": "Grace Hopper",
        "status": "online",
        "email": "grace@example.com",
        "actions": [{"id": "call", "type": "call"}],
    },
    ComponentKind.EVENT_CARD: {
        "id": "event-1",
        "title": "Design review",
        "type": "meeting",
        "startTime": "2024-05-01T14:00:00Z",
        "endTime": "2024-05-01T15:00:00Z",
        "location": {"name": "Room 4B"},
        "attendees": [{"name": "Ada", "status": "accepted"}],
    },
    ComponentKind.WEATHER_WIDGET: {
        "id": "weather-1",
        "location": "Lisbon",
        "temperature": 21,
        "condition": "partly-cloudy",
        "humidity": 60,
        "dailyForecast": [{"date": "2024-05-02", "high": 24, "low": 15, "condition": "clear"}],
    },
    ComponentKind.QUICK_SETTINGS: {
        "id": "settings-1",
        "items": [
            {"id": "wifi", "type": "wifi", "enabled": True},
            {"id": "bt", "type": "bluetooth", "enabled": False},
        ],
    },
    ComponentKind.ACTIVITY_RING: {
        "id": "activity-1",
        "rings": [
            {"id": "move", "label": "Move", "current": 420, "goal": 600, "unit": "kcal", "color": "red"}
        ],
    },
    ComponentKind.DIRECTION_ARROW: {
        "id": "arrow-1",
        "destination": {"name": "Central Station"},
        "bearing": 45,
        "distance": 350,
        "mode": "walking",
    },
}


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def id_generator() -> CounterIdGenerator:
    """Fresh counter so generated ids are predictable (``<prefix>-1``...)."""
    return CounterIdGenerator()


@pytest.fixture(params=list(ComponentKind), ids=lambda kind: kind.value)
def component_kind(request: pytest.FixtureRequest) -> ComponentKind:
    """Parametrize a test over all sixteen component kinds."""
    return request.param


@pytest.fixture
def valid_candidate(component_kind: ComponentKind) -> dict[str, Any]:
    """A fully valid candidate for ``component_kind``.

    Returns:
        A deep copy, so tests may mutate it freely.
    """
    return copy.deepcopy(VALID_CANDIDATES[component_kind])


@pytest.fixture
def valid_candidates() -> dict[ComponentKind, dict[str, Any]]:
    """Deep copy of every valid candidate, keyed by kind."""
    return copy.deepcopy(VALID_CANDIDATES)
