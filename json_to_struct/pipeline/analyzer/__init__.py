"""
Analyzer module.

Contains value classification, union unification and IR pruning.
"""

from __future__ import annotations

from .classifier import classify
from .ir_nodes import (
    ANY,
    BOOL,
    FLOAT,
    IGNORE,
    INT,
    STRING,
    AnyType,
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
    ir_from_dict,
)
from .pruner import prune
from .unifier import unify, unify_node

__all__ = [
    "classify",
    "unify",
    "unify_node",
    "prune",
    "ir_from_dict",
    "TypeKind",
    "IRType",
    "RawType",
    "PrimitiveType",
    "AnyType",
    "FieldDef",
    "StructType",
    "SliceType",
    "RawStruct",
    "RawSlice",
    "UnionType",
    "IgnoreType",
    "BOOL",
    "STRING",
    "INT",
    "FLOAT",
    "ANY",
    "IGNORE",
]
