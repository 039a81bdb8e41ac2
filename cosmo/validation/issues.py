"""Issue and result types produced by the validation engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..records import RecordModel
from ..schema import Severity

ROOT = "(root)"


class IssueCode(str, Enum):
    """Machine-readable category of a FieldIssue."""

    MISSING_FIELD = "missing_field"
    EMPTY_VALUE = "empty_value"
    INVALID_TYPE = "invalid_type"
    INVALID_ENUM = "invalid_enum"
    INVALID_FORMAT = "invalid_format"
    TOO_LONG = "too_long"
    TOO_MANY_ITEMS = "too_many_items"
    TOO_FEW_ITEMS = "too_few_items"
    OUT_OF_RANGE = "out_of_range"
    DUPLICATE_ID = "duplicate_id"
    UNKNOWN_FIELD = "unknown_field"
    CONFLICT = "conflict"
    IGNORED = "ignored"
    INVALID_JSON = "invalid_json"


@dataclass(frozen=True)
class FieldIssue:
    """A single problem found in a candidate.

    Attributes:
        field: Dotted/indexed path (``metadata.anchorType``, ``items[0].id``)
            or ``(root)`` for the candidate itself.
        message: Human-readable description.
        severity: ERROR blocks acceptance, WARNING does not.
        code: Issue category.
    """

    field: str
    message: str
    severity: Severity
    code: IssueCode

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> dict[str, str]:
        return {
            "field": self.field,
            "message": self.message,
            "severity": self.severity.value,
            "code": self.code.value,
        }

    def __str__(self) -> str:
        return f"[{self.field}] {self.message}"


@dataclass
class ValidationResult:
    """Outcome of checking a candidate against its component declaration.

    Attributes:
        valid: True iff ``errors`` is empty.
        errors: Blocking issues.
        warnings: Non-blocking issues.
        sanitized: Best-effort repaired record, typed as the component's
            model. None only if sanitization failed unexpectedly.
    """

    valid: bool
    errors: list[FieldIssue] = field(default_factory=list)
    warnings: list[FieldIssue] = field(default_factory=list)
    sanitized: RecordModel | None = None

    @classmethod
    def from_issues(
        cls, issues: list[FieldIssue], sanitized: RecordModel | None = None
    ) -> "ValidationResult":
        errors = [i for i in issues if i.is_error]
        warnings = [i for i in issues if not i.is_error]
        return cls(valid=not errors, errors=errors, warnings=warnings, sanitized=sanitized)

    @property
    def issues(self) -> list[FieldIssue]:
        """Errors followed by warnings."""
        return [*self.errors, *self.warnings]

    @property
    def error_fields(self) -> list[str]:
        return [e.field for e in self.errors]

    @property
    def warning_fields(self) -> list[str]:
        return [w.field for w in self.warnings]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "sanitized": self.sanitized.to_wire() if self.sanitized is not None else None,
        }


__all__ = ["ROOT", "IssueCode", "FieldIssue", "ValidationResult"]
