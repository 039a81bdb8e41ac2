"""Component validation and sanitization.

One generic engine drives every component kind: the constraints table in
``cosmo.schema`` is consulted reflectively, so no bound is restated here.

    validate(candidate)  -> ValidationResult   (read-only diagnosis)
    sanitize(candidate)  -> typed record        (shape repair)

Malformed input is the expected case and is reported, never raised. Only
programmer errors fail fast: a ``None`` candidate raises TypeError and an
unknown component kind raises UnknownComponentError.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from ..records import RecordModel, build_record, get_record_model
from ..schema import ComponentKind, RecordSpec, Severity, get_record_spec, resolve_kind
from .checks import RecordChecker, json_type_name
from .ids import IdGenerator, default_id_generator
from .issues import ROOT, FieldIssue, IssueCode, ValidationResult
from .repair import RecordRepairer

logger = logging.getLogger(__name__)


class ComponentValidator:
    """Validator for a single component kind.

    Instances hold no mutable state beyond the id generator, which is
    thread-safe, so one validator can serve concurrent callers.

    Args:
        kind: Component kind or alias ("HUDCard", "badge", ...).
        id_generator: Source of ids for records without one. Defaults to
            the process-wide generator selected by COSMO_ID_STRATEGY.

    Raises:
        UnknownComponentError: If ``kind`` cannot be resolved.

    Example:
        >>> validator = ComponentValidator("context_badge")
        >>> validator.validate({"id": "badge-1", "label": "Status"}).valid
        True
        >>> validator.sanitize({"label": "Test"}).variant
        'neutral'
    """

    def __init__(self, kind: ComponentKind | str, id_generator: IdGenerator | None = None):
        self.kind: ComponentKind = resolve_kind(kind)
        self.spec: RecordSpec = get_record_spec(self.kind)
        self.model: type[RecordModel] = get_record_model(self.kind)
        self._id_generator = id_generator

    def __repr__(self) -> str:
        return f"ComponentValidator({self.kind.value!r})"

    @property
    def id_generator(self) -> IdGenerator:
        return self._id_generator or default_id_generator()

    def to_mapping(self, candidate: Any) -> Mapping[str, Any] | None:
        """Wire view of a candidate, or None if it is not an object."""
        if candidate is None:
            raise TypeError(f"{self.spec.name} validator requires a candidate object, got None")
        if isinstance(candidate, RecordModel):
            return candidate.to_wire()
        if isinstance(candidate, Mapping):
            return candidate
        return None

    def validate(self, candidate: Any, *, with_sanitized: bool = True) -> ValidationResult:
        """Diagnose a candidate without modifying it.

        Args:
            candidate: Parsed JSON object (mapping) or a typed record.
            with_sanitized: Also compute ``result.sanitized``.

        Returns:
            ValidationResult; ``valid`` is True iff there are no errors.

        Raises:
            TypeError: If ``candidate`` is None.
        """
        data = self.to_mapping(candidate)
        checker = RecordChecker()
        if data is None:
            checker.issues.append(
                FieldIssue(
                    ROOT,
                    f"{self.spec.name} must be a JSON object, got {json_type_name(candidate)}",
                    Severity.ERROR,
                    IssueCode.INVALID_TYPE,
                )
            )
        else:
            checker.check_record(self.spec, data)

        sanitized = self._try_sanitize(candidate) if with_sanitized else None
        result = ValidationResult.from_issues(checker.issues, sanitized=sanitized)

        if checker.issues:
            logger.debug(
                f"{self.spec.name}: {len(result.errors)} error(s), "
                f"{len(result.warnings)} warning(s)"
            )
            for issue in checker.issues:
                logger.debug(f"  {issue.severity.value}: {issue}")
        return result

    def sanitize(self, candidate: Any) -> RecordModel:
        """Repair a candidate into the closest conforming typed record.

        Never raises for malformed input; a non-object candidate is treated
        as an empty object. The input is never mutated and the result never
        aliases it.

        Raises:
            TypeError: If ``candidate`` is None.
        """
        data = self.to_mapping(candidate)
        if data is None:
            logger.debug(f"{self.spec.name}: non-object candidate sanitized from scratch")
            data = {}
        wire = RecordRepairer(self.id_generator).repair_record(self.spec, data)
        return build_record(self.spec, wire)

    def _try_sanitize(self, candidate: Any) -> RecordModel | None:
        try:
            return self.sanitize(candidate)
        except Exception:
            logger.exception(f"Sanitizing {self.spec.name} failed")
            return None

    def is_valid(self, candidate: Any) -> bool:
        """Convenience check that skips sanitization."""
        return self.validate(candidate, with_sanitized=False).valid


# === MODULE-LEVEL SHORTCUTS ===


@lru_cache(maxsize=None)
def _cached_validator(kind: ComponentKind) -> ComponentValidator:
    return ComponentValidator(kind)


def get_validator(kind: ComponentKind | str) -> ComponentValidator:
    """Get the shared validator for a kind (or alias)."""
    return _cached_validator(resolve_kind(kind))


def validate(kind: ComponentKind | str, candidate: Any) -> ValidationResult:
    """Validate a candidate for a component kind."""
    return get_validator(kind).validate(candidate)


def sanitize(kind: ComponentKind | str, candidate: Any) -> RecordModel:
    """Sanitize a candidate for a component kind."""
    return get_validator(kind).sanitize(candidate)


__all__ = [
    "ComponentValidator",
    "get_validator",
    "validate",
    "sanitize",
]
