"""Read-only checks of a candidate against a RecordSpec.

Nothing here mutates or repairs; every finding becomes a FieldIssue with
the severity declared in the constraints table.
"""

import math
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any
from urllib.parse import urlparse

from ..schema import (
    ContextualDefault,
    FieldSpec,
    FieldType,
    IgnoredUnless,
    PriorityOverride,
    RecordSpec,
    Severity,
    StringFormat,
    UpperBound,
)
from .issues import FieldIssue, IssueCode

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

_FORMAT_LABELS = {
    StringFormat.HEX_COLOR: "hex color like #ff5500",
    StringFormat.URL: "absolute http(s) URL",
    StringFormat.EMAIL: "email address",
    StringFormat.ISO_DATETIME: "ISO 8601 timestamp",
}

_TYPE_LABELS = {
    FieldType.STRING: "a string",
    FieldType.INTEGER: "an integer",
    FieldType.NUMBER: "a finite number",
    FieldType.BOOLEAN: "a boolean",
    FieldType.ARRAY: "an array",
    FieldType.OBJECT: "an object",
    FieldType.VECTOR3: "an [x, y, z] array of 3 numbers",
}


# === VALUE HELPERS (shared with repair) ===


def is_number(value: Any) -> bool:
    """True for finite ints/floats. Booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints of any size are finite; converting them to float can overflow
    return isinstance(value, int) or math.isfinite(value)


def is_integer(value: Any) -> bool:
    if isinstance(value, int):
        return not isinstance(value, bool)
    return is_number(value) and value.is_integer()


def is_vector3(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) == 3 and all(is_number(v) for v in value)


def matches_format(fmt: StringFormat, value: str) -> bool:
    """Check a string against one of the declared formats."""
    if fmt is StringFormat.HEX_COLOR:
        return bool(_HEX_COLOR.match(value))
    if fmt is StringFormat.EMAIL:
        return bool(_EMAIL.match(value))
    if fmt is StringFormat.URL:
        if any(c.isspace() for c in value):
            return False
        parsed = urlparse(value)
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)
    if fmt is StringFormat.ISO_DATETIME:
        text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
        try:
            datetime.fromisoformat(text)
        except ValueError:
            return False
        return True
    return True


def json_type_name(value: Any) -> str:
    """Name a Python value by its JSON type, for messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def fmt_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_path(data: Mapping[str, Any], path: str) -> Any:
    """Resolve a dotted path through nested mappings, None if absent."""
    current: Any = data
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
    return current


def join_path(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def range_text(f: FieldSpec) -> str:
    """Describe a numeric window, e.g. 'between 0 and 100'."""
    if f.minimum is not None and f.maximum is not None:
        return f"between {fmt_number(f.minimum)} and {fmt_number(f.maximum)}"
    if f.minimum is not None:
        return f"at least {fmt_number(f.minimum)}"
    return f"at most {fmt_number(f.maximum)}"


# === CHECKS ===


class RecordChecker:
    """Collects issues for one candidate.

    Args:
        issues: List that findings are appended to.
    """

    def __init__(self, issues: list[FieldIssue] | None = None):
        self.issues: list[FieldIssue] = issues if issues is not None else []

    def _add(self, path: str, message: str, severity: Severity, code: IssueCode) -> None:
        self.issues.append(FieldIssue(path, message, severity, code))

    def _error(self, path: str, message: str, code: IssueCode) -> None:
        self._add(path, message, Severity.ERROR, code)

    def _warning(self, path: str, message: str, code: IssueCode) -> None:
        self._add(path, message, Severity.WARNING, code)

    def check_record(self, spec: RecordSpec, data: Mapping[str, Any], prefix: str = "") -> None:
        """Check every declared field, unknown keys and cross-field rules."""
        for f in spec.fields:
            path = join_path(prefix, f.name)
            value = data.get(f.name)
            if value is None:
                # null means absent, except for nullable fields where it is meaningful
                if f.required:
                    self._error(path, f"Missing required field '{path}'", IssueCode.MISSING_FIELD)
                continue
            self.check_value(f, value, path)

        for key in data:
            if spec.field(key) is None:
                path = join_path(prefix, str(key))
                self._warning(
                    path, f"Unknown field '{path}' is not part of {spec.name} and will be dropped",
                    IssueCode.UNKNOWN_FIELD,
                )

        for rule in spec.rules:
            self._check_rule(spec, rule, data, prefix)

    def check_value(self, f: FieldSpec, value: Any, path: str) -> None:
        if not self._check_type(f, value, path):
            return

        if f.type is FieldType.STRING:
            self._check_string(f, value, path)
        elif f.type in (FieldType.INTEGER, FieldType.NUMBER):
            self._check_range(f, value, path)
        elif f.type is FieldType.OBJECT and f.record is not None:
            self.check_record(f.record, value, path)
        elif f.type is FieldType.ARRAY:
            self._check_array(f, value, path)

    def _check_type(self, f: FieldSpec, value: Any, path: str) -> bool:
        ok = {
            FieldType.STRING: lambda v: isinstance(v, str),
            FieldType.INTEGER: is_integer,
            FieldType.NUMBER: is_number,
            FieldType.BOOLEAN: lambda v: isinstance(v, bool),
            FieldType.ARRAY: lambda v: isinstance(v, (list, tuple)),
            FieldType.OBJECT: lambda v: isinstance(v, Mapping),
            FieldType.VECTOR3: is_vector3,
        }[f.type](value)
        if not ok:
            code = IssueCode.INVALID_FORMAT if f.type is FieldType.VECTOR3 else IssueCode.INVALID_TYPE
            self._error(
                path,
                f"'{path}' must be {_TYPE_LABELS[f.type]}, got {json_type_name(value)}",
                code,
            )
        return ok

    def _check_string(self, f: FieldSpec, value: str, path: str) -> None:
        if not value.strip() and (f.required or f.non_empty):
            self._error(path, f"'{path}' must not be empty", IssueCode.EMPTY_VALUE)
            return

        if f.choices and value not in f.choices:
            self._error(
                path,
                f"Invalid {path} '{value}'. Expected one of: {', '.join(f.choices)}",
                IssueCode.INVALID_ENUM,
            )
            return

        if f.format and not matches_format(f.format, value):
            self._error(
                path,
                f"'{path}' must be a {_FORMAT_LABELS[f.format]}, got '{value}'",
                IssueCode.INVALID_FORMAT,
            )
            return

        if f.max_length is not None and len(value) > f.max_length:
            self._add(
                path,
                f"'{path}' exceeds max length of {f.max_length} characters (got {len(value)})",
                f.length_severity,
                IssueCode.TOO_LONG,
            )

    def _check_range(self, f: FieldSpec, value: float, path: str) -> None:
        if not f.has_range:
            return
        too_low = f.minimum is not None and value < f.minimum
        too_high = f.maximum is not None and value > f.maximum
        if too_low or too_high:
            self._add(
                path,
                f"'{path}' should be {range_text(f)}, got {fmt_number(value)}",
                f.range_severity,
                IssueCode.OUT_OF_RANGE,
            )

    def _check_array(self, f: FieldSpec, items: list[Any], path: str) -> None:
        count = len(items)
        if f.min_items is not None and count < f.min_items:
            self._error(
                path,
                f"'{path}' needs at least {f.min_items} item(s), got {count}",
                IssueCode.TOO_FEW_ITEMS,
            )
        if f.max_items is not None and count > f.max_items:
            self._add(
                path,
                f"'{path}' has {count} items, maximum is {f.max_items}",
                f.count_severity,
                IssueCode.TOO_MANY_ITEMS,
            )

        seen: dict[Any, int] = {}
        for index, item in enumerate(items):
            item_path = f"{path}[{index}]"
            if f.record is not None:
                if not isinstance(item, Mapping):
                    self._error(
                        item_path,
                        f"'{item_path}' must be an object, got {json_type_name(item)}",
                        IssueCode.INVALID_TYPE,
                    )
                    continue
                self.check_record(f.record, item, item_path)
                if f.unique_by:
                    key = item.get(f.unique_by)
                    if isinstance(key, (str, int, float)) and not isinstance(key, bool):
                        if key in seen:
                            self._error(
                                path,
                                f"Duplicate {f.unique_by} '{key}' at {item_path} "
                                f"(first used at {path}[{seen[key]}])",
                                IssueCode.DUPLICATE_ID,
                            )
                        else:
                            seen[key] = index
            elif not isinstance(item, str):
                self._error(
                    item_path,
                    f"'{item_path}' must be a string, got {json_type_name(item)}",
                    IssueCode.INVALID_TYPE,
                )
            elif f.item_max_length is not None and len(item) > f.item_max_length:
                self._add(
                    item_path,
                    f"'{item_path}' exceeds max length of {f.item_max_length} characters "
                    f"(got {len(item)})",
                    f.length_severity,
                    IssueCode.TOO_LONG,
                )

    # --- cross-field rules ---

    def _check_rule(self, spec: RecordSpec, rule: Any, data: Mapping[str, Any], prefix: str) -> None:
        if isinstance(rule, PriorityOverride):
            level = data.get(rule.field)
            if not is_number(level) or level < rule.threshold:
                return
            for name, forced in rule.forced:
                supplied = data.get(name)
                if supplied is not None and supplied != forced:
                    path = join_path(prefix, name)
                    self._warning(
                        path,
                        f"'{path}' is ignored when {rule.condition}",
                        IssueCode.CONFLICT,
                    )

        elif isinstance(rule, IgnoredUnless):
            current = data.get(rule.depends_on)
            if current is None:
                declared = spec.field(rule.depends_on)
                current = declared.default if declared is not None else None
            if current == rule.expected:
                return
            for name in rule.fields:
                if data.get(name) is not None:
                    path = join_path(prefix, name)
                    self._warning(
                        path,
                        f"'{path}' is ignored unless {rule.depends_on} is '{rule.expected}'",
                        IssueCode.IGNORED,
                    )

        elif isinstance(rule, UpperBound):
            value = get_path(data, rule.field)
            limit = get_path(data, rule.limit)
            if is_number(value) and is_number(limit) and value > limit:
                path = join_path(prefix, rule.field)
                self._warning(
                    path,
                    f"'{path}' ({fmt_number(value)}) exceeds "
                    f"'{join_path(prefix, rule.limit)}' ({fmt_number(limit)})",
                    IssueCode.OUT_OF_RANGE,
                )

        elif isinstance(rule, ContextualDefault):
            # Only affects sanitize defaults.
            return


def check_record(spec: RecordSpec, data: Mapping[str, Any]) -> list[FieldIssue]:
    """Check a candidate mapping and return all issues in discovery order."""
    checker = RecordChecker()
    checker.check_record(spec, data)
    return checker.issues


__all__ = [
    "RecordChecker",
    "check_record",
    "is_number",
    "is_integer",
    "is_vector3",
    "matches_format",
    "json_type_name",
    "fmt_number",
    "get_path",
    "join_path",
    "range_text",
]
