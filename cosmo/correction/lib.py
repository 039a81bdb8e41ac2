"""Self-correction orchestrator for AI-generated component records.

Wraps validate/sanitize into a single pass per generation attempt:

    Pending -> Validated -> Accepted   (candidate valid, used as-is)
                         -> Corrected  (sanitized record used, errors reported)
                         -> Rejected   (nothing usable)

No retries happen here. An external AI adapter may re-prompt the model with
``format_diagnostic`` output or ``hints``.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..config import EnvVar, get_environment
from ..records import RecordModel, build_record
from ..schema import (
    ComponentKind,
    FieldType,
    RecordSpec,
    Severity,
    StringFormat,
    get_record_spec,
    resolve_kind,
)
from ..validation import (
    ROOT,
    ComponentValidator,
    FieldIssue,
    IssueCode,
    ValidationResult,
    get_validator,
)
from ..validation.checks import range_text
from .parse import parse_json_object

logger = logging.getLogger(__name__)


class CorrectionState(str, Enum):
    """States of a single generation attempt."""

    PENDING = "pending"
    VALIDATED = "validated"
    ACCEPTED = "accepted"
    CORRECTED = "corrected"
    REJECTED = "rejected"


@dataclass
class CorrectionOutcome:
    """Result of running one candidate through the orchestrator.

    Attributes:
        kind: Component kind that was checked.
        state: Terminal state (ACCEPTED, CORRECTED or REJECTED).
        original: The candidate as received.
        validation: Diagnosis of the original candidate.
        record: Typed record to hand to a renderer, None when rejected.
            Accepted records are built from the candidate as-is, so
            contextual defaults and forced overrides only appear on
            corrected records (an accepted loading StatusIndicator has
            pulse None).
        revalidation: Diagnosis of the corrected record, when enabled.
        history: States visited, in order.
    """

    kind: ComponentKind
    state: CorrectionState
    original: Any
    validation: ValidationResult
    record: RecordModel | None = None
    revalidation: ValidationResult | None = None
    history: list[CorrectionState] = field(default_factory=list)

    @property
    def errors(self) -> list[FieldIssue]:
        """Errors of the original candidate."""
        return self.validation.errors

    @property
    def warnings(self) -> list[FieldIssue]:
        return self.validation.warnings

    @property
    def remaining_errors(self) -> list[FieldIssue]:
        """Errors still present after correction (missing semantic content)."""
        return self.revalidation.errors if self.revalidation is not None else []

    @property
    def is_safe(self) -> bool:
        """Whether ``record`` can be rendered.

        Accepted records are safe. Corrected records are safe only once
        re-validation confirmed them; sanitize repairs shape, not content.
        """
        if self.record is None:
            return False
        if self.state is CorrectionState.ACCEPTED:
            return True
        if self.state is CorrectionState.CORRECTED:
            return self.revalidation is not None and self.revalidation.valid
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "state": self.state.value,
            "safe": self.is_safe,
            "record": self.record.to_wire() if self.record is not None else None,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "remainingErrors": [e.to_dict() for e in self.remaining_errors],
        }


class SelfCorrector:
    """Single-pass validate -> sanitize -> re-validate for one component kind.

    Args:
        kind: Component kind or alias.
        validator: Validator to use. Defaults to the shared validator.
        revalidate: Re-validate corrected records. Defaults to
            COSMO_REVALIDATE.

    Example:
        >>> corrector = SelfCorrector("status_indicator")
        >>> outcome = corrector.correct({"id": "i1", "state": "loading", "size": "big"})
        >>> outcome.state, outcome.record.pulse
        (<CorrectionState.CORRECTED: 'corrected'>, True)
    """

    def __init__(
        self,
        kind: ComponentKind | str,
        validator: ComponentValidator | None = None,
        revalidate: bool | None = None,
    ):
        self.kind = resolve_kind(kind)
        self.validator = validator or get_validator(self.kind)
        if self.validator.kind is not self.kind:
            raise ValueError(
                f"Validator for {self.validator.kind.value} cannot correct {self.kind.value}"
            )
        self.revalidate: bool = get_environment(EnvVar.REVALIDATE, override=revalidate)

    @property
    def spec(self) -> RecordSpec:
        return self.validator.spec

    def correct(self, candidate: Any) -> CorrectionOutcome:
        """Run one candidate through the state machine.

        Raises:
            TypeError: If ``candidate`` is None.
        """
        history = [CorrectionState.PENDING]
        validation = self.validator.validate(candidate)
        history.append(CorrectionState.VALIDATED)
        name = self.spec.name

        record: RecordModel | None = None
        revalidation: ValidationResult | None = None
        if validation.valid:
            state = CorrectionState.ACCEPTED
            record = build_record(self.spec, self.validator.to_mapping(candidate))
            logger.debug(f"{name} accepted ({error_summary(validation)})")
        elif validation.sanitized is not None:
            state = CorrectionState.CORRECTED
            record = validation.sanitized
            logger.info(f"{name} corrected: {error_summary(validation)}")
            if self.revalidate:
                revalidation = self.validator.validate(record, with_sanitized=False)
                if not revalidation.valid:
                    fields = ", ".join(revalidation.error_fields)
                    logger.warning(f"{name} still invalid after correction: {fields}")
        else:
            state = CorrectionState.REJECTED
            logger.warning(f"{name} rejected: {error_summary(validation)}")

        history.append(state)
        return CorrectionOutcome(
            kind=self.kind,
            state=state,
            original=candidate,
            validation=validation,
            record=record,
            revalidation=revalidation,
            history=history,
        )

    def correct_batch(self, candidates: Iterable[Any]) -> list[CorrectionOutcome]:
        """Correct each candidate independently."""
        return [self.correct(candidate) for candidate in candidates]

    def correct_text(self, raw: str, repair: bool | None = None) -> CorrectionOutcome:
        """Parse a raw model response and correct the object it contains.

        Args:
            raw: Response text (may include fences, prose, trailing commas).
            repair: Use JSON repair. Defaults to COSMO_REPAIR_JSON.

        Returns:
            CorrectionOutcome; unparseable text is REJECTED with a (root) error.
        """
        data = parse_json_object(raw, repair=repair)
        if data is not None:
            return self.correct(data)

        issue = FieldIssue(
            ROOT,
            f"Response does not contain a {self.spec.name} JSON object",
            Severity.ERROR,
            IssueCode.INVALID_JSON,
        )
        logger.warning(f"{self.spec.name} rejected: unparseable response")
        return CorrectionOutcome(
            kind=self.kind,
            state=CorrectionState.REJECTED,
            original=raw,
            validation=ValidationResult.from_issues([issue]),
            history=[CorrectionState.PENDING, CorrectionState.VALIDATED, CorrectionState.REJECTED],
        )


# =============================================================================
# Diagnostics
# =============================================================================


def _validation_of(result: ValidationResult | CorrectionOutcome) -> ValidationResult:
    return result.validation if isinstance(result, CorrectionOutcome) else result


def is_safe_to_render(result: ValidationResult | CorrectionOutcome) -> bool:
    """Whether a result yields a record a renderer may consume."""
    if isinstance(result, CorrectionOutcome):
        return result.is_safe
    return result.valid


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}{'' if n == 1 else 's'}"


def error_summary(result: ValidationResult | CorrectionOutcome) -> str:
    """One-line summary such as "2 errors, 1 warning" or "Valid"."""
    validation = _validation_of(result)
    parts = []
    if validation.errors:
        parts.append(_count(len(validation.errors), "error"))
    else:
        parts.append("Valid")
    if validation.warnings:
        parts.append(_count(len(validation.warnings), "warning"))
    return ", ".join(parts)


def format_diagnostic(result: ValidationResult | CorrectionOutcome) -> str:
    """Render every error and warning as a numbered, multi-line report.

    Intended for logs, CLIs and re-prompting; never parse it back.

    Example output::

        Errors:
          1. [label] 'label' must not be empty

        Warnings:
          1. [size] 'size' should be between 8 and 32, got 40
    """
    validation = _validation_of(result)
    lines: list[str] = []

    if isinstance(result, CorrectionOutcome):
        name = get_record_spec(result.kind).name
        lines.append(f"{name}: {result.state.value} ({error_summary(validation)})")
        lines.append("")

    def section(title: str, issues: list[FieldIssue]) -> None:
        if not issues:
            return
        if lines and lines[-1] != "":
            lines.append("")
        lines.append(f"{title}:")
        lines.extend(f"  {i}. {issue}" for i, issue in enumerate(issues, 1))

    section("Errors", validation.errors)
    section("Warnings", validation.warnings)
    if isinstance(result, CorrectionOutcome):
        section("Still invalid after correction", result.remaining_errors)

    if not validation.errors and not validation.warnings:
        lines.append("No errors or warnings")
    return "\n".join(lines)


_FORMAT_HINTS = {
    StringFormat.HEX_COLOR: "Use a hex color like #ff5500 for {field}",
    StringFormat.URL: "Use an absolute http(s) URL for {field}",
    StringFormat.EMAIL: "Use a valid email address for {field}",
    StringFormat.ISO_DATETIME: "Use an ISO 8601 timestamp such as 2024-05-01T09:30:00Z for {field}",
}


def _hint(issue: FieldIssue, spec: RecordSpec | None) -> str | None:
    declared = spec.lookup(issue.field) if spec is not None else None
    name = issue.field

    if issue.code is IssueCode.TOO_LONG and declared is not None:
        limit = declared.max_length or declared.item_max_length
        return f"Shorten {name} to {limit} characters or less"
    if issue.code is IssueCode.TOO_MANY_ITEMS and declared is not None:
        return f"Remove extra {name} (max {declared.max_items} allowed)"
    if issue.code is IssueCode.TOO_FEW_ITEMS and declared is not None:
        return f"Provide at least {declared.min_items} {name}"
    if issue.code is IssueCode.OUT_OF_RANGE and declared is not None and declared.has_range:
        hint = f"Set {name} {range_text(declared)}"
        return f"{hint}, or null" if declared.nullable else hint
    if issue.code is IssueCode.INVALID_ENUM and declared is not None and declared.choices:
        return f"Use one of {', '.join(declared.choices)} for {name}"
    if issue.code is IssueCode.INVALID_FORMAT and declared is not None:
        if declared.type is FieldType.VECTOR3:
            return f"Use an [x, y, z] array of 3 numbers for {name}"
        if declared.format is not None:
            return _FORMAT_HINTS[declared.format].format(field=name)
    if issue.code in (IssueCode.MISSING_FIELD, IssueCode.EMPTY_VALUE):
        return f"Provide a non-empty {name}"
    if issue.code is IssueCode.DUPLICATE_ID:
        return f"Give every entry in {name} a unique id"
    if issue.code is IssueCode.INVALID_JSON:
        return "Respond with a single JSON object and no surrounding prose"
    if issue.code is IssueCode.INVALID_TYPE:
        return f"Fix the type of {name}: {issue.message}"
    return None


def hints(
    result: ValidationResult | CorrectionOutcome,
    kind: ComponentKind | str | None = None,
) -> list[str]:
    """Human-readable repair hints for each error, de-duplicated.

    Bounds in the hints come from the constraints table, so they always
    match what the validator enforces.

    Args:
        result: Validation result or correction outcome.
        kind: Component kind, required for bound-aware hints when ``result``
            is a plain ValidationResult.

    Returns:
        Hints in error order without duplicates.
    """
    if isinstance(result, CorrectionOutcome):
        kind = result.kind
    spec = get_record_spec(kind) if kind is not None else None

    collected: list[str] = []
    for issue in _validation_of(result).errors:
        hint = _hint(issue, spec)
        if hint and hint not in collected:
            collected.append(hint)
    return collected


__all__ = [
    "CorrectionState",
    "CorrectionOutcome",
    "SelfCorrector",
    "is_safe_to_render",
    "error_summary",
    "format_diagnostic",
    "hints",
]
