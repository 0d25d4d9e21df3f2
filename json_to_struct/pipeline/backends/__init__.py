"""
Code generation backends.

Each backend renders a finished IR into source code for one target language.
"""

from __future__ import annotations

from .base import CodeBackend
from .go_backend import GoBackend

__all__ = [
    "CodeBackend",
    "GoBackend",
]
