"""Centralized environment configuration management for cosmo.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from cosmo.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> strategy = get_environment(EnvVar.ID_STRATEGY)  # Returns str
    >>> repair = get_environment(EnvVar.REPAIR_JSON)  # Returns bool
    >>>
    >>> # Override at runtime
    >>> strategy = get_environment(EnvVar.ID_STRATEGY, override="counter")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "COSMO_LOG_LEVEL").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by cosmo.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - logging: Log verbosity
        - validation: Validator behavior (id generation)
        - correction: Self-correction orchestrator behavior
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="COSMO_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level name (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------
    ID_STRATEGY = EnvConfig(
        name="COSMO_ID_STRATEGY",
        default="random",
        var_type=str,
        description="Generator for missing ids: 'random' (uuid4) or 'counter'",
        category="validation",
    )

    # -------------------------------------------------------------------------
    # Correction
    # -------------------------------------------------------------------------
    REPAIR_JSON = EnvConfig(
        name="COSMO_REPAIR_JSON",
        default=True,
        var_type=bool,
        description="Repair malformed JSON (fences, trailing commas) before correcting",
        category="correction",
    )
    REVALIDATE = EnvConfig(
        name="COSMO_REVALIDATE",
        default=True,
        var_type=bool,
        description="Re-validate sanitized records after correction",
        category="correction",
    )


ID_STRATEGIES = ("random", "counter")


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no, on/off (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes", "on"):
        return True
    if normalized in ("false", "0", "no", "off"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is bool:
        result = parse_bool(value)
        return result if result is not None else default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str or bool).

    Example:
        >>> get_environment(EnvVar.ID_STRATEGY)
        'random'
        >>> get_environment(EnvVar.ID_STRATEGY, override="counter")
        'counter'
    """
    config: EnvConfig = env_var.value

    # Override takes highest priority
    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_log_level(override: str | None = None) -> int:
    """Get the configured log level as a logging constant.

    Unknown level names fall back to INFO.
    """
    name = str(get_environment(EnvVar.LOG_LEVEL, override=override)).upper().strip()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_id_strategy(override: str | None = None) -> str:
    """Get the id generation strategy ('random' or 'counter').

    Raises:
        ValueError: If the configured strategy is not recognized.
    """
    strategy = str(get_environment(EnvVar.ID_STRATEGY, override=override)).lower().strip()
    if strategy not in ID_STRATEGIES:
        raise ValueError(
            f"Unknown id strategy: {strategy!r}. Expected one of: {', '.join(ID_STRATEGIES)}"
        )
    return strategy


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, validation, correction).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "ID_STRATEGIES",
    # Main interface
    "get_environment",
    "get_environment_info",
    "parse_bool",
    # Convenience functions
    "get_log_level",
    "get_id_strategy",
    # Introspection
    "list_environment_variables",
]
