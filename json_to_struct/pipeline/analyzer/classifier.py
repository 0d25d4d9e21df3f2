"""
Value classifier.

Turns one decoded JSON value into a raw IR tree. Arrays keep the union of
their items unresolved; the unifier decides the element type later, once
every document is known.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from ..errors import NestingTooDeepError, UnsupportedValueKindError
from .ir_nodes import BOOL, FLOAT, IGNORE, INT, STRING, RawSlice, RawStruct, RawType, UnionType, flatten_alternatives


def classify(value: Any) -> RawType:
    """
    Infer the raw IR node describing a single value.

    Args:
        value: A value as produced by a JSON decoder

    Returns:
        The raw IR node for the value

    Raises:
        UnsupportedValueKindError: if the value (or a nested one) has no IR counterpart
        NestingTooDeepError: if the value nests deeper than the interpreter can recurse
    """
    try:
        return _classify(value)
    except RecursionError as e:
        raise NestingTooDeepError("Document is nested too deeply to infer a type") from e


def _classify(value: Any) -> RawType:
    # bool is a subclass of int
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, int):
        return INT
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedValueKindError(f"Cannot infer a type for non-finite number {value!r}")
        return INT if value.is_integer() else FLOAT
    if isinstance(value, str):
        return STRING
    if isinstance(value, (list, tuple)):
        # Items are classified before flattening so each nesting level costs one frame
        items = [_classify(item) for item in value]
        return RawSlice(UnionType(flatten_alternatives(items)))
    if isinstance(value, Mapping):
        return RawStruct({key: _classify(item) for key, item in value.items()})
    if value is None:
        return IGNORE

    raise UnsupportedValueKindError(f"Cannot infer a type for value of type {type(value).__name__}: {value!r}")
