"""
Union unifier.

Collapses a set of raw IR nodes describing the same logical slot (the
top-level documents, the items of an array, or the values of one struct
field across documents) into a single finished IR node.

Rules, applied to the flattened alternatives of a union:

- null markers are ignored when choosing the kind;
- no kind left (all null, or an empty array) -> any;
- a single primitive kind -> that primitive;
- only slices -> a slice of the unified items. A null item widens the
  element type to any, since an element slot cannot be optional;
- only structs -> merged field by field. A field is optional when some
  struct lacks it or when null was observed for it;
- exactly int and float -> float;
- anything else -> any.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import NestingTooDeepError, NonContainerTopLevelError
from .ir_nodes import (
    ANY,
    FLOAT,
    PRIMITIVE_KINDS,
    FieldDef,
    IgnoreType,
    IRType,
    PrimitiveType,
    RawSlice,
    RawStruct,
    RawType,
    SliceType,
    StructType,
    TypeKind,
    UnionType,
    flatten_alternatives,
)

_NUMERIC_KINDS = frozenset({TypeKind.INT, TypeKind.FLOAT})


def unify(nodes: Sequence[RawType]) -> IRType:
    """
    Merge the classified top-level documents into one finished IR node.

    Args:
        nodes: Raw IR of each document, as returned by ``classify``

    Returns:
        The unified IR, free of union and null markers

    Raises:
        NonContainerTopLevelError: if a document is not an object or an array
        NestingTooDeepError: if the documents nest deeper than the interpreter can recurse
    """
    if not nodes:
        raise ValueError("At least one document is required for unification")

    for index, node in enumerate(nodes):
        if not isinstance(node, (RawStruct, RawSlice)):
            raise NonContainerTopLevelError(f"Document #{index} is a {node.kind.value}, top-level documents must be objects or arrays")

    return unify_node(UnionType(tuple(nodes)))


def unify_node(node: RawType) -> IRType:
    """Unify a raw node. A non-union node is treated as a single alternative."""
    try:
        return _unify_node(node)
    except RecursionError as e:
        raise NestingTooDeepError("Documents are nested too deeply to unify") from e


def _unify_node(node: RawType) -> IRType:
    alternatives = flatten_alternatives((node,))
    kinds = {alt.kind for alt in alternatives if alt.kind is not TypeKind.IGNORE}

    if not kinds:
        return ANY

    if len(kinds) == 1:
        (kind,) = kinds
        if kind in PRIMITIVE_KINDS:
            return PrimitiveType(kind)
        if kind is TypeKind.ANY:
            return ANY
        if kind is TypeKind.SLICE:
            return _unify_slices([alt for alt in alternatives if alt.kind is TypeKind.SLICE])
        if kind is TypeKind.STRUCT:
            return _unify_structs([alt for alt in alternatives if alt.kind is TypeKind.STRUCT])

    if kinds == _NUMERIC_KINDS:
        return FLOAT

    return ANY


def _unify_slices(slices: list[RawType]) -> SliceType:
    """Merge slice alternatives by unifying all of their items together."""
    _require_raw(slices, RawSlice)

    items = flatten_alternatives(s.element for s in slices)
    if any(isinstance(item, IgnoreType) for item in items):
        return SliceType(ANY)

    return SliceType(_unify_node(UnionType(items)))


def _unify_structs(structs: list[RawType]) -> StructType:
    """Merge struct alternatives field by field, deciding optionality."""
    _require_raw(structs, RawStruct)

    values_by_field: dict[str, list[RawType]] = {}
    suppliers_by_field: dict[str, int] = {}
    for struct in structs:
        for name, value in struct.fields.items():
            values_by_field.setdefault(name, []).extend(flatten_alternatives((value,)))
            suppliers_by_field[name] = suppliers_by_field.get(name, 0) + 1

    fields = {}
    for name, values in values_by_field.items():
        present = tuple(value for value in values if not isinstance(value, IgnoreType))
        optional = suppliers_by_field[name] < len(structs) or len(present) < len(values)
        fields[name] = FieldDef(_unify_node(UnionType(present)), optional)

    return StructType(fields)


def _require_raw(alternatives: list[RawType], expected: type) -> None:
    """Every alternative merged at a container site must be a raw node of that container kind."""
    for alt in alternatives:
        if not isinstance(alt, expected):
            raise TypeError(f"Cannot unify {type(alt).__name__} as {expected.__name__}; only classified (raw) nodes can be unified")
