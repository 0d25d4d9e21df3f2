"""
Exceptions raised by the inference pipeline.

Every error is fatal for the current call: no partial IR is ever returned.
"""

from __future__ import annotations


class StructInferenceError(Exception):
    """Base class for classification, unification and pruning failures."""

    pass


class UnsupportedValueKindError(StructInferenceError):
    """Raised when a document contains a value that has no IR counterpart.

    This covers NaN and infinite floats as well as any Python object that
    cannot come out of a JSON decoder (sets, bytes, datetimes, ...).
    """

    pass


class NonContainerTopLevelError(StructInferenceError):
    """Raised when a top-level document is neither an object nor an array."""

    pass


class InvalidSpecError(StructInferenceError):
    """Raised when a prune spec is malformed (e.g. its ``of`` mapping is missing)."""

    pass


class UnknownFieldError(StructInferenceError):
    """Raised when a prune spec selects a field the struct does not have."""

    pass


class TypeMismatchError(StructInferenceError):
    """Raised when a prune spec expects a struct where the IR has a slice, or vice versa."""

    pass


class NestingTooDeepError(StructInferenceError):
    """Raised when documents (or the IR built from them) nest deeper than the interpreter can recurse."""

    pass


class ConfigError(ValueError):
    """Raised when the generator configuration is invalid or unusable."""

    pass


class DocumentLoadError(ValueError):
    """Raised when an example document cannot be read or decoded."""

    pass
