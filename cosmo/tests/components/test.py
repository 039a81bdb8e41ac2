"""Per-component validation scenarios.

Each class exercises one component kind the way an AI adapter would: a
valid record, the characteristic failures, and what sanitize makes of them.
"""

import re

import pytest

from cosmo.validation import ComponentValidator, IssueCode, ValidationResult, get_validator


def _fields(issues) -> set[str]:
    return {issue.field for issue in issues}


def _issue(result: ValidationResult, field: str):
    return next(i for i in result.issues if i.field == field)


# =============================================================================
# Documented Scenarios
# =============================================================================


class TestDocumentedScenarios:
    """The reference ContextBadge / ProgressRing / StatusIndicator cases."""

    BADGE = {
        "id": "badge-1",
        "label": "Status",
        "variant": "info",
        "icon": "info",
        "position": "top-right",
        "dismissible": True,
        "pulse": False,
        "autoDismissMs": None,
    }

    @pytest.mark.unit
    def test_valid_badge(self):
        result = get_validator("context_badge").validate(dict(self.BADGE))
        assert result.valid
        assert result.errors == []

    @pytest.mark.unit
    def test_empty_label(self):
        result = get_validator("context_badge").validate({**self.BADGE, "label": ""})
        assert not result.valid
        assert _fields(result.errors) == {"label"}

    @pytest.mark.unit
    def test_contextual_color(self):
        validator = get_validator("context_badge")
        bad = validator.validate({**self.BADGE, "contextualColor": "not-a-color"})
        good = validator.validate({**self.BADGE, "contextualColor": "#ff5500"})
        assert _fields(bad.errors) == {"contextualColor"}
        assert good.valid

    @pytest.mark.unit
    def test_sanitize_bare_badge(self):
        record = get_validator("context_badge").sanitize({"label": "Test"})
        assert re.fullmatch(r"badge-\d+", record.id)
        assert record.variant == "neutral"
        assert record.icon == "none"
        assert record.position == "top-right"
        assert record.dismissible is True

    @pytest.mark.unit
    def test_sanitize_clamps_progress(self):
        assert get_validator("progress_ring").sanitize({"id": "r1", "value": 150}).value <= 100

    @pytest.mark.unit
    def test_contextual_pulse_default(self):
        validator = get_validator("status_indicator")
        assert validator.sanitize({"id": "i1", "state": "loading"}).pulse is True
        assert validator.sanitize({"id": "i1", "state": "active"}).pulse is False


# =============================================================================
# HUD primitives
# =============================================================================


class TestHUDCard:
    """HUDCard: bounds, action rules and the priority override."""

    @pytest.fixture
    def card(self):
        return {"id": "card-1", "title": "Meeting", "content": "Design review at 3pm"}

    @pytest.fixture
    def validator(self, id_generator):
        return ComponentValidator("hud_card", id_generator=id_generator)

    @pytest.mark.unit
    @pytest.mark.parametrize("missing", ["id", "title", "content"])
    def test_required_fields(self, validator, card, missing):
        del card[missing]
        result = validator.validate(card)
        assert not result.valid
        assert missing in _fields(result.errors)

    @pytest.mark.unit
    def test_content_too_long(self, validator, card):
        card["content"] = "x" * 201
        assert _fields(validator.validate(card).errors) == {"content"}

    @pytest.mark.unit
    def test_too_many_actions(self, validator, card):
        card["actions"] = [{"id": f"a{n}", "label": "Go"} for n in range(3)]
        result = validator.validate(card)
        assert not result.valid
        assert _issue(result, "actions").code is IssueCode.TOO_MANY_ITEMS

    @pytest.mark.unit
    @pytest.mark.parametrize("seconds", [1, 45])
    def test_auto_hide_window_is_a_warning(self, validator, card, seconds):
        card["autoHideAfterSeconds"] = seconds
        result = validator.validate(card)
        assert result.valid
        assert _fields(result.warnings) == {"autoHideAfterSeconds"}

    @pytest.mark.unit
    def test_high_priority_with_auto_hide_warns(self, validator, card):
        card.update(priority=5, autoHideAfterSeconds=10)
        result = validator.validate(card)
        assert result.valid
        assert "priority >= 4" in _issue(result, "autoHideAfterSeconds").message

    @pytest.mark.unit
    def test_high_priority_dismissible_warns(self, validator, card):
        card.update(priority=4, dismissible=True)
        result = validator.validate(card)
        assert _issue(result, "dismissible").code is IssueCode.CONFLICT

    @pytest.mark.unit
    def test_high_priority_not_dismissible_is_clean(self, validator, card):
        card.update(priority=5, dismissible=False)
        assert validator.validate(card).warnings == []

    @pytest.mark.unit
    def test_invalid_anchor_type(self, validator, card):
        card["metadata"] = {"anchorType": "floating"}
        assert "metadata.anchorType" in _fields(validator.validate(card).errors)

    @pytest.mark.unit
    def test_world_position_ignored_in_screen_space(self, validator, card):
        card["metadata"] = {"anchorType": "screen-space", "worldPosition": [0, 1.5, -2]}
        result = validator.validate(card)
        assert result.valid
        assert "ignored" in _issue(result, "metadata.worldPosition").message

    @pytest.mark.unit
    def test_invalid_auto_anchor(self, validator, card):
        card["metadata"] = {"anchorType": "world-space", "autoAnchor": "hand"}
        assert _fields(validator.validate(card).errors) == {"metadata.autoAnchor"}

    @pytest.mark.unit
    def test_auto_anchor_distance_is_an_error(self, validator, card):
        card["metadata"] = {"anchorType": "world-space", "autoAnchor": "gaze", "autoAnchorDistance": 50}
        assert _fields(validator.validate(card).errors) == {"metadata.autoAnchorDistance"}

    @pytest.mark.unit
    def test_sanitize_defaults(self, validator):
        record = validator.sanitize({"title": "T", "content": "C"})
        assert record.id == "card-1"
        assert record.variant == "neutral"
        assert record.priority == 3
        assert record.position == "top-right"
        assert record.icon == "none"
        assert record.dismissible is True

    @pytest.mark.unit
    def test_sanitize_truncates(self, validator):
        record = validator.sanitize({"title": "t" * 80, "content": "c" * 300})
        assert len(record.title) == 60
        assert len(record.content) == 200

    @pytest.mark.unit
    @pytest.mark.parametrize("priority", [4, 5])
    def test_sanitize_forces_high_priority(self, validator, card, priority):
        card.update(priority=priority, dismissible=True, autoHideAfterSeconds=10)
        record = validator.sanitize(card)
        assert record.dismissible is False
        assert record.auto_hide_after_seconds is None
        assert record.to_wire()["autoHideAfterSeconds"] is None

    @pytest.mark.unit
    def test_sanitize_keeps_low_priority_choices(self, validator, card):
        card.update(priority=2, dismissible=False, autoHideAfterSeconds=10)
        record = validator.sanitize(card)
        assert record.dismissible is False
        assert record.auto_hide_after_seconds == 10

    @pytest.mark.unit
    def test_sanitize_generates_action_ids(self, validator, card):
        card["actions"] = [{"label": "Open"}, {"label": "Snooze"}]
        record = validator.sanitize(card)
        assert [a.id for a in record.actions] == ["action-1", "action-2"]
        assert [a.variant for a in record.actions] == ["secondary", "secondary"]


class TestContextBadge:
    """ContextBadge: timing window, colors and tracking metadata."""

    @pytest.fixture
    def validator(self):
        return get_validator("context_badge")

    @pytest.mark.unit
    @pytest.mark.parametrize("ms", [500, 60000])
    def test_auto_dismiss_window_is_a_warning(self, validator, ms):
        result = validator.validate({"id": "b", "label": "L", "autoDismissMs": ms})
        assert result.valid
        assert _fields(result.warnings) == {"autoDismissMs"}

    @pytest.mark.unit
    def test_sanitize_clamps_auto_dismiss(self, validator):
        assert validator.sanitize({"label": "L", "autoDismissMs": 500}).auto_dismiss_ms == 1000

    @pytest.mark.unit
    def test_sanitize_removes_invalid_color(self, validator):
        assert validator.sanitize({"label": "L", "contextualColor": "blue"}).contextual_color is None

    @pytest.mark.unit
    def test_sanitize_drops_empty_follow_target(self, validator):
        record = validator.sanitize({"label": "L", "metadata": {"followTarget": " "}})
        assert record.metadata.follow_target is None
        assert record.metadata.anchor_type == "screen-space"


class TestProgressRing:
    """ProgressRing: percent value and geometry."""

    @pytest.fixture
    def validator(self):
        return get_validator("progress_ring")

    @pytest.mark.unit
    def test_value_required(self, validator):
        assert _fields(validator.validate({"id": "r"}).errors) == {"value"}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [-10, 120])
    def test_value_window_is_a_warning(self, validator, value):
        result = validator.validate({"id": "r", "value": value})
        assert result.valid
        assert _fields(result.warnings) == {"value"}

    @pytest.mark.unit
    def test_value_must_be_numeric(self, validator):
        assert _fields(validator.validate({"id": "r", "value": "half"}).errors) == {"value"}

    @pytest.mark.unit
    def test_size_must_be_numeric(self, validator):
        assert _fields(validator.validate({"id": "r", "value": 5, "size": "big"}).errors) == {"size"}

    @pytest.mark.unit
    def test_sanitize_clamps_size(self, validator):
        assert validator.sanitize({"id": "r", "value": 5, "size": 10}).size == 24
        assert validator.sanitize({"id": "r", "value": 5, "size": 500}).size == 200

    @pytest.mark.unit
    def test_sanitize_defaults(self, validator):
        record = validator.sanitize({"id": "r", "value": 5})
        assert record.variant == "neutral"
        assert record.animated is True
        assert record.show_value is False
        assert record.position == "center"
        assert record.size == 48
        assert record.thickness == 6

    @pytest.mark.unit
    def test_sanitize_truncates_label(self, validator):
        assert len(validator.sanitize({"id": "r", "value": 5, "label": "l" * 50}).label) == 30


class TestStatusIndicator:
    """StatusIndicator: state vocabulary and contextual pulse."""

    @pytest.fixture
    def validator(self):
        return get_validator("status_indicator")

    @pytest.mark.unit
    def test_state_required(self, validator):
        assert _fields(validator.validate({"id": "i"}).errors) == {"state"}

    @pytest.mark.unit
    def test_invalid_state(self, validator):
        result = validator.validate({"id": "i", "state": "sleeping"})
        assert _issue(result, "state").code is IssueCode.INVALID_ENUM

    @pytest.mark.unit
    @pytest.mark.parametrize("flag", ["pulse", "glow"])
    def test_flags_must_be_boolean(self, validator, flag):
        result = validator.validate({"id": "i", "state": "idle", flag: "yes"})
        assert _fields(result.errors) == {flag}

    @pytest.mark.unit
    def test_label_too_long(self, validator):
        result = validator.validate({"id": "i", "state": "idle", "label": "l" * 21})
        assert _fields(result.errors) == {"label"}

    @pytest.mark.unit
    def test_sanitize_clamps_size(self, validator):
        assert validator.sanitize({"id": "i", "state": "idle", "size": 50}).size == 32

    @pytest.mark.unit
    def test_explicit_pulse_wins_over_contextual_default(self, validator):
        assert validator.sanitize({"id": "i", "state": "loading", "pulse": False}).pulse is False

    @pytest.mark.unit
    def test_sanitize_defaults(self, validator):
        record = validator.sanitize({"id": "i", "state": "idle"})
        assert record.glow is False
        assert record.position == "top-right"
        assert record.size == 12


class TestActionBar:
    """ActionBar: item count, labels and duplicate ids."""

    @pytest.fixture
    def bar(self):
        return {
            "id": "bar",
            "items": [
                {"id": "home", "icon": "home", "label": "Home"},
                {"id": "search", "icon": "search", "label": "Search"},
            ],
        }

    @pytest.fixture
    def validator(self):
        return get_validator("action_bar")

    @pytest.mark.unit
    def test_valid_bar(self, validator, bar):
        assert validator.validate(bar).errors == []

    @pytest.mark.unit
    def test_empty_items(self, validator, bar):
        bar["items"] = []
        result = validator.validate(bar)
        assert not result.valid
        assert _issue(result, "items").code is IssueCode.TOO_FEW_ITEMS

    @pytest.mark.unit
    def test_too_many_items_is_a_warning(self, validator, bar):
        bar["items"] = [{"id": f"i{n}", "label": f"Item {n}"} for n in range(7)]
        result = validator.validate(bar)
        assert result.valid
        assert _issue(result, "items").code is IssueCode.TOO_MANY_ITEMS

    @pytest.mark.unit
    def test_item_without_id(self, validator, bar):
        del bar["items"][0]["id"]
        assert _fields(validator.validate(bar).errors) == {"items[0].id"}

    @pytest.mark.unit
    def test_item_without_label(self, validator, bar):
        del bar["items"][0]["label"]
        assert _fields(validator.validate(bar).errors) == {"items[0].label"}

    @pytest.mark.unit
    def test_long_label_is_a_warning(self, validator, bar):
        bar["items"][0]["label"] = "Very long label"
        result = validator.validate(bar)
        assert result.valid
        assert _fields(result.warnings) == {"items[0].label"}

    @pytest.mark.unit
    def test_duplicate_item_ids(self, validator, bar):
        bar["items"][1]["id"] = "home"
        result = validator.validate(bar)
        assert not result.valid
        assert "Duplicate" in _issue(result, "items").message

    @pytest.mark.unit
    def test_invalid_position(self, validator, bar):
        bar["position"] = "middle"
        assert _fields(validator.validate(bar).errors) == {"position"}

    @pytest.mark.unit
    def test_sanitize(self, validator, bar):
        bar["items"] = [{"id": f"i{n}", "label": "Extremely long"} for n in range(8)]
        record = validator.sanitize(bar)
        assert len(record.items) == 6
        assert record.items[0].label == "Extremely lo"
        assert record.position == "bottom"
        assert record.variant == "glass"
        assert record.show_labels is True
        assert record.visible is True


class TestTooltip:
    """Tooltip: trigger vocabulary, timing and width."""

    @pytest.fixture
    def validator(self):
        return get_validator("tooltip")

    @pytest.mark.unit
    def test_content_required(self, validator):
        assert _fields(validator.validate({"id": "t"}).errors) == {"content"}

    @pytest.mark.unit
    @pytest.mark.parametrize("field,value", [("position", "above"), ("trigger", "hold"), ("variant", "neon")])
    def test_invalid_vocabulary(self, validator, field, value):
        result = validator.validate({"id": "t", "content": "Hi", field: value})
        assert _fields(result.errors) == {field}

    @pytest.mark.unit
    @pytest.mark.parametrize("trigger", ["hover", "click", "focus", "manual"])
    def test_valid_triggers(self, validator, trigger):
        assert validator.validate({"id": "t", "content": "Hi", "trigger": trigger}).valid

    @pytest.mark.unit
    def test_max_width_window_is_a_warning(self, validator):
        result = validator.validate({"id": "t", "content": "Hi", "maxWidth": 500})
        assert result.valid
        assert _fields(result.warnings) == {"maxWidth"}

    @pytest.mark.unit
    def test_empty_target_selector(self, validator):
        result = validator.validate({"id": "t", "content": "Hi", "targetSelector": ""})
        assert _issue(result, "targetSelector").code is IssueCode.EMPTY_VALUE

    @pytest.mark.unit
    def test_sanitize(self, validator):
        record = validator.sanitize({"content": "c" * 250, "maxWidth": 500})
        assert re.fullmatch(r"tooltip-\d+", record.id)
        assert len(record.content) == 200
        assert record.max_width == 400
        assert record.position == "top"
        assert record.trigger == "hover"
        assert record.variant == "dark"
        assert record.show_arrow is True
        assert record.delay_show == 300
        assert record.delay_hide == 0


# =============================================================================
# Rich cards
# =============================================================================


class TestRichCards:
    """Nested records, formats and cross-field bounds of the richer cards."""

    @pytest.mark.unit
    def test_media_requires_source(self):
        result = get_validator("media_card").validate({"id": "m", "type": "image", "title": "T"})
        assert _fields(result.errors) == {"media"}

    @pytest.mark.unit
    def test_media_url_format(self):
        candidate = {"id": "m", "type": "video", "title": "T", "media": {"url": "not a url"}}
        result = get_validator("media_card").validate(candidate)
        assert _issue(result, "media.url").code is IssueCode.INVALID_FORMAT

    @pytest.mark.unit
    def test_media_bad_url_cannot_be_invented(self):
        candidate = {"id": "m", "type": "video", "title": "T", "media": {"url": "not a url"}}
        validator = get_validator("media_card")
        record = validator.sanitize(candidate)
        assert record.media.url == ""
        assert _fields(validator.validate(record).errors) == {"media.url"}

    @pytest.mark.unit
    def test_player_progress_beyond_track(self):
        candidate = {
            "id": "p",
            "state": "playing",
            "track": {"title": "Song", "duration": 300},
            "progress": {"current": 400},
        }
        validator = get_validator("mini_player")
        result = validator.validate(candidate)
        assert result.valid
        assert _issue(result, "progress.current").message == (
            "'progress.current' (400) exceeds 'track.duration' (300)"
        )
        assert validator.sanitize(candidate).progress.current == 300

    @pytest.mark.unit
    def test_timer_remaining_beyond_duration(self):
        candidate = {"id": "t", "mode": "countdown", "duration": 300, "remaining": 500}
        validator = get_validator("timer")
        assert _fields(validator.validate(candidate).warnings) == {"remaining"}
        assert validator.sanitize(candidate).remaining == 300

    @pytest.mark.unit
    def test_forecast_low_above_high(self):
        candidate = {
            "id": "w",
            "location": "Oslo",
            "temperature": 4,
            "condition": "snow",
            "dailyForecast": [{"date": "Mon", "high": 2, "low": 5, "condition": "snow"}],
        }
        validator = get_validator("weather_widget")
        assert _fields(validator.validate(candidate).warnings) == {"dailyForecast[0].low"}
        assert validator.sanitize(candidate).daily_forecast[0].low == 2

    @pytest.mark.unit
    def test_event_start_time_format(self):
        result = get_validator("event_card").validate(
            {"id": "e", "title": "Standup", "startTime": "next tuesday"}
        )
        assert _issue(result, "startTime").code is IssueCode.INVALID_FORMAT

    @pytest.mark.unit
    def test_contact_email_dropped(self):
        record = get_validator("contact_card").sanitize({"id": "c", "name": "Grace", "email": "grace"})
        assert record.email is None

    @pytest.mark.unit
    def test_quick_settings_require_items(self):
        validator = get_validator("quick_settings")
        assert _fields(validator.validate({"id": "q"}).errors) == {"items"}
        record = validator.sanitize({"id": "q"})
        assert record.items == []
        assert _issue(validator.validate(record), "items").code is IssueCode.TOO_FEW_ITEMS

    @pytest.mark.unit
    def test_quick_setting_enabled_required(self):
        result = get_validator("quick_settings").validate(
            {"id": "q", "items": [{"id": "wifi", "type": "wifi"}]}
        )
        assert _fields(result.errors) == {"items[0].enabled"}

    @pytest.mark.unit
    def test_activity_rings_limit(self):
        rings = [
            {"id": f"r{n}", "label": "Move", "current": 1, "goal": 2, "color": "red"} for n in range(5)
        ]
        validator = get_validator("activity_ring")
        result = validator.validate({"id": "a", "rings": rings})
        assert not result.valid
        assert _issue(result, "rings").code is IssueCode.TOO_MANY_ITEMS
        assert len(validator.sanitize({"id": "a", "rings": rings}).rings) == 4

    @pytest.mark.unit
    def test_quick_replies(self):
        candidate = {
            "id": "m",
            "sender": {"name": "Ada"},
            "content": "Lunch?",
            "timestamp": "11:58",
            "quickReplies": ["Absolutely, see you there!!", "No"],
        }
        result = get_validator("message_preview").validate(candidate)
        assert _fields(result.errors) == {"quickReplies[0]"}

    @pytest.mark.unit
    def test_bearing_clamped(self):
        candidate = {"id": "d", "destination": {"name": "Home"}, "bearing": 400, "distance": 10}
        validator = get_validator("direction_arrow")
        assert _fields(validator.validate(candidate).warnings) == {"bearing"}
        assert validator.sanitize(candidate).bearing == 360
