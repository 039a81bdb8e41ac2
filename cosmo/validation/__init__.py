"""Component validation - diagnose and repair AI-produced records.

Example usage:
    >>> from cosmo.validation import get_validator
    >>> result = get_validator("progress_ring").validate({"id": "r1", "value": 150})
    >>> result.valid, result.warnings[0].field
    (True, 'value')
    >>> result.sanitized.value
    100
"""

from ..schema import UnknownComponentError
from .checks import check_record, matches_format
from .ids import (
    CounterIdGenerator,
    IdGenerator,
    RandomIdGenerator,
    create_id_generator,
    default_id_generator,
)
from .issues import ROOT, FieldIssue, IssueCode, ValidationResult
from .lib import ComponentValidator, get_validator, sanitize, validate
from .repair import repair_record

__all__ = [
    # Results
    "ROOT",
    "IssueCode",
    "FieldIssue",
    "ValidationResult",
    # Engine
    "ComponentValidator",
    "UnknownComponentError",
    "get_validator",
    "validate",
    "sanitize",
    "check_record",
    "repair_record",
    "matches_format",
    # Ids
    "IdGenerator",
    "CounterIdGenerator",
    "RandomIdGenerator",
    "create_id_generator",
    "default_id_generator",
]
