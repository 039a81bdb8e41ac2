"""Deterministic repair of a candidate into the nearest conforming record.

Repairs shape only: ids are generated, strings truncated, numbers clamped,
enums and formats replaced by defaults or dropped, arrays de-duplicated and
truncated. Required content that was never supplied is left empty.
"""

import math
from collections.abc import Mapping
from typing import Any

from ..config import parse_bool
from ..schema import (
    ContextualDefault,
    FieldSpec,
    FieldType,
    PriorityOverride,
    RecordSpec,
    UpperBound,
)
from .checks import get_path, is_number, matches_format
from .ids import IdGenerator

_ABSENT = object()


# === COERCION ===


def coerce_number(value: Any) -> int | float | None:
    """Accept finite numbers and numeric strings ("42", " 3.5 ")."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return None
        if not math.isfinite(parsed):
            return None
        return int(parsed) if parsed.is_integer() else parsed
    return None


def coerce_bool(value: Any) -> bool | None:
    """Accept booleans, 0/1 and strings such as "true", "no", "on"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        return parse_bool(value)
    return None


def match_choice(value: str, choices: tuple[str, ...]) -> str | None:
    """Find a vocabulary entry, tolerating case, spaces and underscores."""
    if value in choices:
        return value
    normalized = value.strip().lower().replace("_", "-").replace(" ", "-")
    for candidate in choices:
        if candidate.lower() == normalized:
            return candidate
    return None


def _default(f: FieldSpec) -> Any:
    # Declared defaults are immutable; arrays go on the wire as fresh lists.
    return list(f.default) if isinstance(f.default, tuple) else f.default


def clamp(f: FieldSpec, value: int | float) -> int | float:
    if f.minimum is not None and value < f.minimum:
        return f.minimum
    if f.maximum is not None and value > f.maximum:
        return f.maximum
    return value


# === REPAIR ===


class RecordRepairer:
    """Builds sanitized wire dicts.

    Args:
        ids: Generator used for records whose id is missing or blank.
    """

    def __init__(self, ids: IdGenerator):
        self.ids = ids

    def repair_record(self, spec: RecordSpec, data: Mapping[str, Any]) -> dict[str, Any]:
        """Return a new wire dict for ``spec``; ``data`` is never mutated."""
        out: dict[str, Any] = {}
        for f in spec.fields:
            value = self.repair_value(f, data.get(f.name, _ABSENT))
            if value is not _ABSENT:
                out[f.name] = value
            elif f.name == "id" and spec.id_prefix:
                out[f.name] = self.ids.next_id(spec.id_prefix)
            elif f.required:
                out[f.name] = self._placeholder(f)
            elif f.default is not None:
                out[f.name] = _default(f)

        for rule in spec.rules:
            self._apply_rule(rule, out)
        return out

    def _placeholder(self, f: FieldSpec) -> Any:
        """Stand-in for required content that cannot be repaired."""
        if f.default is not None:
            return _default(f)
        if f.type is FieldType.STRING:
            return ""
        if f.type is FieldType.ARRAY:
            return []
        if f.type is FieldType.OBJECT and f.record is not None:
            return self.repair_record(f.record, {})
        return None

    def repair_value(self, f: FieldSpec, value: Any) -> Any:
        """Repair one value, returning ``_ABSENT`` when it is unusable."""
        if value is _ABSENT:
            return _ABSENT
        if value is None:
            return None if f.nullable else _ABSENT

        if f.type is FieldType.STRING:
            return self._repair_string(f, value)

        if f.type in (FieldType.INTEGER, FieldType.NUMBER):
            number = coerce_number(value)
            if number is None:
                return _ABSENT
            if f.type is FieldType.INTEGER and not isinstance(number, int):
                number = round(number)
            return clamp(f, number)

        if f.type is FieldType.BOOLEAN:
            flag = coerce_bool(value)
            return _ABSENT if flag is None else flag

        if f.type is FieldType.VECTOR3:
            if not isinstance(value, (list, tuple)) or len(value) != 3:
                return _ABSENT
            components = [coerce_number(v) for v in value]
            return _ABSENT if None in components else components

        if f.type is FieldType.OBJECT:
            if not isinstance(value, Mapping) or f.record is None:
                return _ABSENT
            return self.repair_record(f.record, value)

        if f.type is FieldType.ARRAY:
            return self._repair_array(f, value)

        return _ABSENT

    def _repair_string(self, f: FieldSpec, value: Any) -> Any:
        if is_number(value) and not f.choices:
            value = str(value)
        if not isinstance(value, str):
            return _ABSENT

        if f.choices:
            matched = match_choice(value, f.choices)
            return _ABSENT if matched is None else matched

        if f.format:
            value = value.strip()
            if not matches_format(f.format, value):
                return _ABSENT

        if f.max_length is not None and len(value) > f.max_length:
            value = value[: f.max_length]

        if not value.strip() and (f.required or f.non_empty):
            return _ABSENT
        return value

    def _repair_array(self, f: FieldSpec, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return _ABSENT

        items: list[Any] = []
        if f.record is not None:
            seen: set[Any] = set()
            for item in value:
                if not isinstance(item, Mapping):
                    continue
                repaired = self.repair_record(f.record, item)
                if f.unique_by:
                    key = repaired.get(f.unique_by)
                    if isinstance(key, (str, int, float)) and not isinstance(key, bool):
                        if key in seen:
                            continue
                        seen.add(key)
                items.append(repaired)
        else:
            for item in value:
                if is_number(item):
                    item = str(item)
                if not isinstance(item, str) or not item.strip():
                    continue
                if f.item_max_length is not None:
                    item = item[: f.item_max_length]
                items.append(item)

        if f.max_items is not None:
            items = items[: f.max_items]
        return items

    # --- cross-field rules ---

    def _apply_rule(self, rule: Any, out: dict[str, Any]) -> None:
        if isinstance(rule, ContextualDefault):
            if out.get(rule.field) is None:
                out[rule.field] = rule.resolve(out.get(rule.depends_on))

        elif isinstance(rule, PriorityOverride):
            level = out.get(rule.field)
            if is_number(level) and level >= rule.threshold:
                for name, forced in rule.forced:
                    out[name] = forced

        elif isinstance(rule, UpperBound):
            value = get_path(out, rule.field)
            limit = get_path(out, rule.limit)
            if is_number(value) and is_number(limit) and value > limit:
                _set_path(out, rule.field, limit)


def _set_path(data: dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    for part in parents:
        data = data[part]
    data[leaf] = value


def repair_record(spec: RecordSpec, data: Mapping[str, Any], ids: IdGenerator) -> dict[str, Any]:
    """Sanitize ``data`` into a new wire dict for ``spec``."""
    return RecordRepairer(ids).repair_record(spec, data)


__all__ = [
    "RecordRepairer",
    "repair_record",
    "coerce_number",
    "coerce_bool",
    "match_choice",
    "clamp",
]
