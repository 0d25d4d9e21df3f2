"""JSON to Struct Generator

A Python package for inferring struct definitions from example JSON documents.
Merges the shapes of many documents into one type, lets a filter prune or
override fields, and renders the result as Go source code.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGeneratorConfig,
    ConfigError,
    DocumentLoadError,
    InvalidSpecError,
    NestingTooDeepError,
    NonContainerTopLevelError,
    StructGenerator,
    StructInferenceError,
    TypeMismatchError,
    UnknownFieldError,
    UnsupportedValueKindError,
    classify,
    prune,
    unify,
)

__all__ = [
    "StructGenerator",
    "CodeGeneratorConfig",
    "classify",
    "unify",
    "prune",
    "StructInferenceError",
    "UnsupportedValueKindError",
    "NonContainerTopLevelError",
    "InvalidSpecError",
    "UnknownFieldError",
    "TypeMismatchError",
    "NestingTooDeepError",
    "ConfigError",
    "DocumentLoadError",
]
