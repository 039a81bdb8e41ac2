"""Authoritative schema module for Cosmo UI components.

Single source of truth for component knowledge: the constraints table
(``components``), kind resolution, and JSON-friendly constraint exports for
prompt building and documentation. Validators consult these declarations
reflectively and never restate a bound.
"""

from dataclasses import asdict
from enum import Enum
from typing import Any

from .components import COMPONENT_SPECS
from .types import ComponentKind, FieldSpec, RecordSpec


class UnknownComponentError(ValueError):
    """Raised when a component kind or alias cannot be resolved."""

    def __init__(self, kind: Any):
        self.kind = kind
        valid = ", ".join(k.value for k in ComponentKind)
        super().__init__(f"Unknown component kind: {kind!r}. Valid kinds: {valid}")


def _normalize(alias: str) -> str:
    return alias.lower().strip().replace("_", "").replace("-", "").replace(" ", "")


def _build_alias_index() -> dict[str, ComponentKind]:
    index: dict[str, ComponentKind] = {}
    for kind, spec in COMPONENT_SPECS.items():
        index[_normalize(kind.value)] = kind
        index[_normalize(spec.name)] = kind
        if spec.id_prefix:
            index[_normalize(spec.id_prefix)] = kind
    return index


_ALIASES = _build_alias_index()


# === LOOKUP ===


def resolve_kind(alias: ComponentKind | str) -> ComponentKind:
    """Resolve a kind, record name, id prefix or loose alias to a kind.

    Matching is case-insensitive and ignores ``_``, ``-`` and spaces, so
    ``"HUDCard"``, ``"hud-card"`` and ``"card"`` all resolve to
    ``ComponentKind.HUD_CARD``.

    Args:
        alias: A ComponentKind or any accepted spelling of one.

    Returns:
        The canonical ComponentKind.

    Raises:
        UnknownComponentError: If the alias matches no component.
    """
    if isinstance(alias, ComponentKind):
        return alias
    if not isinstance(alias, str):
        raise UnknownComponentError(alias)
    kind = _ALIASES.get(_normalize(alias))
    if kind is None:
        raise UnknownComponentError(alias)
    return kind


def get_record_spec(kind: ComponentKind | str) -> RecordSpec:
    """Get the constraints declaration for a component kind.

    Args:
        kind: The component kind (or an alias accepted by resolve_kind).

    Returns:
        The top-level RecordSpec for the kind.

    Raises:
        UnknownComponentError: If the kind cannot be resolved.
    """
    return COMPONENT_SPECS[resolve_kind(kind)]


def list_component_kinds() -> list[ComponentKind]:
    """List all component kinds in declaration order."""
    return list(COMPONENT_SPECS)


def iter_record_specs(spec: RecordSpec):
    """Yield ``spec`` and every nested RecordSpec, children first."""
    for f in spec.fields:
        if f.record is not None:
            yield from iter_record_specs(f.record)
    yield spec


# === EXPORT ===


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    return value


def _field_constraints(f: FieldSpec) -> dict[str, Any]:
    """Summarize one field, omitting unset constraints."""
    out: dict[str, Any] = {"type": f.type.value, "required": f.required}
    if f.description:
        out["description"] = f.description
    if f.default is not None:
        out["default"] = _jsonable(f.default)
    if f.nullable:
        out["nullable"] = True
    if f.choices:
        out["enum"] = list(f.choices)
    if f.format:
        out["format"] = f.format.value
    if f.non_empty:
        out["nonEmpty"] = True
    if f.max_length is not None:
        out["maxLength"] = f.max_length
        out["lengthSeverity"] = f.length_severity.value
    if f.minimum is not None:
        out["minimum"] = f.minimum
    if f.maximum is not None:
        out["maximum"] = f.maximum
    if f.has_range:
        out["rangeSeverity"] = f.range_severity.value
    if f.min_items is not None:
        out["minItems"] = f.min_items
    if f.max_items is not None:
        out["maxItems"] = f.max_items
        out["countSeverity"] = f.count_severity.value
    if f.unique_by:
        out["uniqueBy"] = f.unique_by
    if f.item_type is not None:
        out["itemType"] = f.item_type.value
    if f.item_max_length is not None:
        out["itemMaxLength"] = f.item_max_length
    if f.record is not None:
        out["record"] = _record_constraints(f.record)
    return out


def _record_constraints(spec: RecordSpec) -> dict[str, Any]:
    out: dict[str, Any] = {"name": spec.name}
    if spec.id_prefix:
        out["idPrefix"] = spec.id_prefix
    out["fields"] = {f.name: _field_constraints(f) for f in spec.fields}
    if spec.rules:
        out["rules"] = [
            {"rule": type(rule).__name__, **_jsonable_dict(asdict(rule))}
            for rule in spec.rules
        ]
    return out


def _jsonable_dict(data: dict[str, Any]) -> dict[str, Any]:
    result = {}
    for key, value in data.items():
        if isinstance(value, tuple):
            value = [_jsonable(list(v)) if isinstance(v, tuple) else _jsonable(v) for v in value]
        result[key] = _jsonable(value)
    return result


def export_constraints(kind: ComponentKind | str) -> dict[str, Any]:
    """Export the constraints for a kind as a JSON-serializable dict.

    Intended for prompt construction and documentation. Keys use the wire
    naming (camelCase) so the output can be shown to a model verbatim.

    Args:
        kind: The component kind (or alias).

    Returns:
        Dict with kind, description, id prefix, fields and rules.
    """
    spec = get_record_spec(kind)
    return {
        "kind": spec.kind.value,
        "description": spec.description,
        **_record_constraints(spec),
    }


__all__ = [
    "UnknownComponentError",
    "resolve_kind",
    "get_record_spec",
    "list_component_kinds",
    "iter_record_specs",
    "export_constraints",
]
