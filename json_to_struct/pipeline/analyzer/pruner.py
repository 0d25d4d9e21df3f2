"""
IR pruner.

Reduces a unified IR to the fields selected by a spec that mirrors its
shape, optionally overriding the type or the optionality of a field::

    {
        "of": {
            "id": True,                       # keep as is
            "debug": False,                   # drop
            "payload": {"forceType": {"type": "any"}},
            "items": {"type": "slice", "of": {"name": True}},
            "note": {"forceOptional": True},
        }
    }

Fields absent from the mapping are dropped. A spec node describes a struct
unless it says ``"type": "slice"``; for a slice, its ``of`` mapping applies
to the element struct.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import InvalidSpecError, NestingTooDeepError, TypeMismatchError, UnknownFieldError
from .ir_nodes import AnyType, FieldDef, IRType, PrimitiveType, SliceType, StructType, TypeKind, ir_from_dict

_FINISHED_TYPES = (PrimitiveType, AnyType, StructType, SliceType)
_CONTAINER_KINDS = {TypeKind.STRUCT.value: StructType, TypeKind.SLICE.value: SliceType}


def prune(node: IRType, spec: Mapping[str, Any]) -> IRType:
    """
    Apply a selection spec to a unified IR.

    Args:
        node: A finished IR node, as returned by ``unify``
        spec: The selection spec

    Returns:
        A new IR node; ``node`` is left untouched

    Raises:
        InvalidSpecError: if a spec node is malformed
        TypeMismatchError: if a spec node expects another container kind
        UnknownFieldError: if a spec selects a field the struct does not have
        NestingTooDeepError: if the spec nests deeper than the interpreter can recurse
    """
    try:
        return _prune(node, spec)
    except RecursionError as e:
        raise NestingTooDeepError("Prune spec is nested too deeply") from e


def _prune(node: IRType, spec: Mapping[str, Any]) -> IRType:
    if not isinstance(spec, Mapping) or not isinstance(spec.get("of"), Mapping):
        raise InvalidSpecError("Prune spec requires an 'of' mapping of field selections")

    expected = spec.get("type") or TypeKind.STRUCT.value
    if not isinstance(expected, str) or expected not in _CONTAINER_KINDS:
        raise InvalidSpecError(f"Prune spec type must be 'struct' or 'slice', got {expected!r}")

    if not isinstance(node, _CONTAINER_KINDS[expected]):
        raise TypeMismatchError(f"Unexpected type {node.kind.value} encountered, {expected} expected")

    if isinstance(node, SliceType):
        return SliceType(_prune(node.element, {"of": spec["of"]}))

    return _prune_struct(node, spec["of"])


def _prune_struct(struct: StructType, selection: Mapping[str, Any]) -> StructType:
    for name, selected in selection.items():
        if selected and name not in struct.fields:
            raise UnknownFieldError(f"Field '{name}' is not found")

    fields = {}
    for name, field_def in struct.fields.items():
        selected = selection.get(name)
        if not selected:
            continue
        if selected is True:
            fields[name] = field_def
            continue
        if not isinstance(selected, Mapping):
            raise InvalidSpecError(f"Selection for field '{name}' must be a boolean or a mapping")
        fields[name] = _override_field(field_def, selected)

    return StructType(fields)


def _override_field(field_def: FieldDef, selected: Mapping[str, Any]) -> FieldDef:
    type_ref = field_def.type_ref
    optional = field_def.optional

    force_type = selected.get("forceType")
    if force_type is not None:
        type_ref = force_type if isinstance(force_type, _FINISHED_TYPES) else ir_from_dict(force_type)
    if selected.get("forceOptional"):
        optional = True
    if selected.get("of") is not None:
        type_ref = _prune(type_ref, {"of": selected["of"], "type": selected.get("type")})

    return FieldDef(type_ref, optional)
