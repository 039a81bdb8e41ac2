"""Cosmo UI component validation.

Validates, sanitizes and self-corrects component records produced by an AI
model before they reach a renderer. Every bound, vocabulary and default
lives in one declarative constraints table (``cosmo.schema``).

Example usage:
    >>> import cosmo
    >>> result = cosmo.validate("context_badge", {"id": "b1", "label": ""})
    >>> result.valid, result.error_fields
    (False, ['label'])
    >>> cosmo.sanitize("progress_ring", {"id": "r1", "value": 150}).value
    100
"""

from .correction import (
    CorrectionOutcome,
    CorrectionState,
    SelfCorrector,
    error_summary,
    format_diagnostic,
    hints,
    is_safe_to_render,
)
from .records import RecordModel, build_record, export_json_schema, get_record_model
from .schema import (
    ComponentKind,
    Severity,
    UnknownComponentError,
    export_constraints,
    get_record_spec,
    list_component_kinds,
    resolve_kind,
)
from .validation import (
    ComponentValidator,
    FieldIssue,
    IssueCode,
    ValidationResult,
    get_validator,
    sanitize,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    # Schema
    "ComponentKind",
    "Severity",
    "UnknownComponentError",
    "resolve_kind",
    "get_record_spec",
    "list_component_kinds",
    "export_constraints",
    # Records
    "RecordModel",
    "get_record_model",
    "build_record",
    "export_json_schema",
    # Validation
    "IssueCode",
    "FieldIssue",
    "ValidationResult",
    "ComponentValidator",
    "get_validator",
    "validate",
    "sanitize",
    # Correction
    "CorrectionState",
    "CorrectionOutcome",
    "SelfCorrector",
    "is_safe_to_render",
    "error_summary",
    "format_diagnostic",
    "hints",
]
