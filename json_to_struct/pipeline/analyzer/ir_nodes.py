"""
IR (Intermediate Representation) node definitions.

Two families of nodes live here:

* The finished IR (``PrimitiveType``, ``AnyType``, ``StructType``,
  ``SliceType``) is what the unifier and the pruner return and what the
  backends render.
* The raw IR (``RawStruct``, ``RawSlice``, ``UnionType``, ``IgnoreType``)
  is produced by the classifier and consumed entirely by the unifier.

``PrimitiveType`` and ``AnyType`` are leaves shared by both families.
All nodes are frozen; transformations always build new trees.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from ..errors import InvalidSpecError


class TypeKind(Enum):
    """Kind of a node in the IR."""

    BOOL = "bool"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    ANY = "any"  # Opaque fallback
    STRUCT = "struct"  # Fixed key/value record
    SLICE = "slice"  # Homogeneous list
    UNION = "union"  # Transient: alternatives awaiting unification
    IGNORE = "ignore"  # Transient: null was observed


PRIMITIVE_KINDS = frozenset({TypeKind.BOOL, TypeKind.STRING, TypeKind.INT, TypeKind.FLOAT})


@dataclass(frozen=True)
class PrimitiveType:
    """A payload-free scalar type."""

    kind: TypeKind

    def __post_init__(self):
        if self.kind not in PRIMITIVE_KINDS:
            raise ValueError(f"{self.kind} is not a primitive kind")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value}


@dataclass(frozen=True)
class AnyType:
    """Untyped fallback used when examples disagree or carry no information."""

    kind: ClassVar[TypeKind] = TypeKind.ANY

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value}


@dataclass(frozen=True)
class FieldDef:
    """A field of a finished struct."""

    type_ref: IRType
    optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"of": self.type_ref.to_dict()}
        if self.optional:
            d["optional"] = True
        return d


@dataclass(frozen=True)
class StructType:
    """A finished struct: field name -> FieldDef, in first-seen order."""

    kind: ClassVar[TypeKind] = TypeKind.STRUCT

    fields: Mapping[str, FieldDef] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self):
        return hash(frozenset(self.fields.items()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "fields": {name: field_def.to_dict() for name, field_def in self.fields.items()},
        }


@dataclass(frozen=True)
class SliceType:
    """A finished homogeneous list."""

    kind: ClassVar[TypeKind] = TypeKind.SLICE

    element: IRType = field(default_factory=AnyType)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "of": self.element.to_dict()}


@dataclass(frozen=True)
class RawStruct:
    """A classified object. Fields carry no optionality yet."""

    kind: ClassVar[TypeKind] = TypeKind.STRUCT

    fields: Mapping[str, RawType] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self):
        return hash(frozenset(self.fields.items()))


@dataclass(frozen=True)
class RawSlice:
    """A classified array; ``element`` is usually a union of its items."""

    kind: ClassVar[TypeKind] = TypeKind.SLICE

    element: RawType = field(default_factory=AnyType)


@dataclass(frozen=True)
class UnionType:
    """Alternatives describing the same slot, merged by the unifier."""

    kind: ClassVar[TypeKind] = TypeKind.UNION

    alternatives: tuple[RawType, ...] = ()


@dataclass(frozen=True)
class IgnoreType:
    """Marks an occurrence that was null. Only affects optionality."""

    kind: ClassVar[TypeKind] = TypeKind.IGNORE


IRType = PrimitiveType | AnyType | StructType | SliceType
RawType = PrimitiveType | AnyType | RawStruct | RawSlice | UnionType | IgnoreType

BOOL = PrimitiveType(TypeKind.BOOL)
STRING = PrimitiveType(TypeKind.STRING)
INT = PrimitiveType(TypeKind.INT)
FLOAT = PrimitiveType(TypeKind.FLOAT)
ANY = AnyType()
IGNORE = IgnoreType()


def ir_from_dict(d: Any) -> IRType:
    """
    Build a finished IR node from its plain dictionary form.

    This is the inverse of ``to_dict()``. A missing ``type`` means struct.

    Args:
        d: e.g. ``{"type": "slice", "of": {"type": "int"}}``

    Returns:
        The corresponding finished IR node

    Raises:
        InvalidSpecError: if the dictionary does not describe a finished IR node
    """
    if not isinstance(d, Mapping):
        raise InvalidSpecError(f"IR type must be an object, got {type(d).__name__}")

    type_name = d.get("type") or TypeKind.STRUCT.value
    try:
        kind = TypeKind(type_name)
    except ValueError:
        raise InvalidSpecError(f"Unknown IR type '{type_name}'") from None

    if kind in PRIMITIVE_KINDS:
        return PrimitiveType(kind)
    if kind is TypeKind.ANY:
        return ANY
    if kind is TypeKind.SLICE:
        if "of" not in d:
            raise InvalidSpecError("IR slice type requires 'of'")
        return SliceType(ir_from_dict(d["of"]))
    if kind is TypeKind.STRUCT:
        fields = d.get("fields") or {}
        if not isinstance(fields, Mapping):
            raise InvalidSpecError("IR struct 'fields' must be an object")
        result = {}
        for name, field_dict in fields.items():
            if not isinstance(field_dict, Mapping) or "of" not in field_dict:
                raise InvalidSpecError(f"IR struct field '{name}' requires 'of'")
            result[name] = FieldDef(ir_from_dict(field_dict["of"]), bool(field_dict.get("optional", False)))
        return StructType(result)

    # union and ignore never appear in a finished IR
    raise InvalidSpecError(f"IR type '{type_name}' cannot be used in a finished IR")


def flatten_alternatives(nodes: Iterable[RawType]) -> tuple[RawType, ...]:
    """Splice the alternatives of nested unions into a single level."""
    flat: list[RawType] = []
    for node in nodes:
        if isinstance(node, UnionType):
            flat.extend(flatten_alternatives(node.alternatives))
        else:
            flat.append(node)
    return tuple(flat)
