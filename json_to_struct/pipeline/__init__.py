"""
Pipeline - JSON examples to struct definition generator.

This module infers a struct type from example documents in phases:

1. Phase 1 (Classifier): Turn each document into a raw IR tree
2. Phase 2 (Unifier): Merge the raw trees into one finished IR
3. Phase 3 (Pruner): Optionally reduce/override the IR with a selection spec
4. Phase 4 (Backend): Render the IR as target-language source code
"""

from __future__ import annotations

from .analyzer import classify, prune, unify
from .config import CodeGeneratorConfig
from .errors import (
    ConfigError,
    DocumentLoadError,
    InvalidSpecError,
    NestingTooDeepError,
    NonContainerTopLevelError,
    StructInferenceError,
    TypeMismatchError,
    UnknownFieldError,
    UnsupportedValueKindError,
)
from .generator import StructGenerator

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
