"""Tests for configuration management."""

import logging

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_id_strategy,
    get_log_level,
    list_environment_variables,
    parse_bool,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("COSMO_ID_STRATEGY", raising=False)
        assert get_environment(EnvVar.ID_STRATEGY) == "random"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("COSMO_ID_STRATEGY", "random")
        assert get_environment(EnvVar.ID_STRATEGY, override="counter") == "counter"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("COSMO_LOG_LEVEL", "DEBUG")
        assert get_environment(EnvVar.LOG_LEVEL) == "DEBUG"

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes", "on"):
            monkeypatch.setenv("COSMO_REVALIDATE", value)
            assert get_environment(EnvVar.REVALIDATE) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No", "off"):
            monkeypatch.setenv("COSMO_REPAIR_JSON", value)
            assert get_environment(EnvVar.REPAIR_JSON) is False

    @pytest.mark.unit
    def test_invalid_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean strings fall back to the default."""
        monkeypatch.setenv("COSMO_REPAIR_JSON", "maybe")
        assert get_environment(EnvVar.REPAIR_JSON) is True

    @pytest.mark.unit
    def test_false_override_is_respected(self, monkeypatch):
        """A False override is not mistaken for a missing override."""
        monkeypatch.setenv("COSMO_REVALIDATE", "true")
        assert get_environment(EnvVar.REVALIDATE, override=False) is False


class TestParseBool:
    """Tests for boolean string parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [" true ", "1", "YES", "On"])
    def test_truthy(self, value):
        assert parse_bool(value) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["false", "0", "no", "OFF"])
    def test_falsy(self, value):
        assert parse_bool(value) is False

    @pytest.mark.unit
    def test_unrecognized(self):
        assert parse_bool("sometimes") is None


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.ID_STRATEGY)
        assert isinstance(info, EnvConfig)
        assert info.name == "COSMO_ID_STRATEGY"
        assert info.default == "random"
        assert info.var_type is str
        assert info.category == "validation"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.REPAIR_JSON)
        assert "JSON" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)
        assert all(isinstance(v, EnvVar) for v in result)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        correction_vars = list_environment_variables("correction")
        assert EnvVar.REPAIR_JSON in correction_vars
        assert EnvVar.REVALIDATE in correction_vars
        assert EnvVar.LOG_LEVEL not in correction_vars

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        assert list_environment_variables("docker") == []

    @pytest.mark.unit
    def test_every_variable_has_a_converted_type(self):
        """Only str and bool values are converted."""
        for var in EnvVar:
            assert var.value.var_type in (str, bool), var.value.name


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestGetLogLevel:
    """Tests for log level resolution."""

    @pytest.mark.unit
    def test_default_is_info(self, monkeypatch):
        monkeypatch.delenv("COSMO_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    @pytest.mark.unit
    def test_env_name_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("COSMO_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    @pytest.mark.unit
    def test_unknown_name_falls_back_to_info(self):
        assert get_log_level(override="chatty") == logging.INFO


class TestGetIdStrategy:
    """Tests for id strategy resolution."""

    @pytest.mark.unit
    def test_override(self):
        assert get_id_strategy(override="Counter") == "counter"

    @pytest.mark.unit
    def test_unknown_strategy_raises(self, monkeypatch):
        monkeypatch.setenv("COSMO_ID_STRATEGY", "timestamp")
        with pytest.raises(ValueError, match="Unknown id strategy"):
            get_id_strategy()
