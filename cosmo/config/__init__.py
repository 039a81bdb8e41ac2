"""Centralized configuration management for cosmo.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from cosmo.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> strategy = get_environment(EnvVar.ID_STRATEGY)  # Returns str: "random"
    >>> repair = get_environment(EnvVar.REPAIR_JSON)  # Returns bool: True
    >>>
    >>> # List available variables by category
    >>> for var in list_environment_variables("correction"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    logging: Log verbosity (COSMO_LOG_LEVEL)
    validation: Id generation strategy (COSMO_ID_STRATEGY)
    correction: JSON repair and re-validation toggles
"""

from .lib import (
    # Core types
    ID_STRATEGIES,
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_id_strategy,
    get_log_level,
    # Introspection
    list_environment_variables,
    parse_bool,
)

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
