"""Logging micro API for cosmo."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
