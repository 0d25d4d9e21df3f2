"""
Struct generator pipeline.

1. Load: expand the configured glob and decode every matching JSON file
2. Classify: infer a raw IR tree per document
3. Unify: merge the raw trees into one finished IR
4. Prune: apply the configured filter, if any
5. Render: turn the IR into source code with a language backend
"""

from __future__ import annotations

import glob
import json
import logging
from pathlib import Path
from typing import Any

from .analyzer import IRType, classify, prune, unify
from .backends import CodeBackend, GoBackend
from .config import CodeGeneratorConfig
from .errors import ConfigError, DocumentLoadError, NestingTooDeepError

logger = logging.getLogger(__name__)

BACKENDS: dict[str, type[CodeBackend]] = {
    "go": GoBackend,
}


class StructGenerator:
    """Infers a struct definition from example JSON documents."""

    def __init__(self, config: CodeGeneratorConfig, language: str = "go", base_dir: str | Path | None = None):
        """
        Initialize the generator.

        Args:
            config: Generation configuration
            language: Target language ("go")
            base_dir: Directory the glob is resolved against (default: current directory)
        """
        if language not in BACKENDS:
            raise ValueError(f"Language '{language}' is not supported")
        self.config = config
        self.language = language
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def find_documents(self) -> list[Path]:
        """Expand the configured glob into a sorted list of files."""
        if not self.config.glob:
            raise ConfigError("Configuration key 'glob' is required to load documents")

        root = self.base_dir or Path.cwd()
        paths = sorted(root / match for match in glob.glob(self.config.glob, root_dir=root, recursive=True))
        paths = [path for path in paths if path.is_file()]
        if not paths:
            raise ConfigError(f"No documents match glob '{self.config.glob}' in {root}")

        logger.info(f"Found {len(paths)} document(s) matching '{self.config.glob}'")
        return paths

    def load_documents(self) -> list[Any]:
        """Read and decode every document matching the configured glob."""
        documents = []
        for path in self.find_documents():
            try:
                with open(path, encoding="utf-8") as f:
                    documents.append(json.load(f))
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise DocumentLoadError(f"Failed to load document {path}: {e}") from e
            logger.debug(f"Loaded document {path}")
        return documents

    def infer(self, documents: list[Any]) -> IRType:
        """
        Infer the unified (and pruned, if a filter is configured) IR of the documents.

        Args:
            documents: Decoded JSON documents

        Returns:
            The finished IR
        """
        ir = unify([classify(document) for document in documents])
        if self.config.filter is not None:
            ir = prune(ir, self.config.filter)
        return ir

    def generate(self, documents: list[Any] | None = None) -> str:
        """
        Generate source code.

        Args:
            documents: Decoded JSON documents; loaded from the configured glob when omitted

        Returns:
            Generated code as a string
        """
        if documents is None:
            documents = self.load_documents()

        ir = self.infer(documents)
        backend = BACKENDS[self.language](self.config)
        try:
            return backend.generate(ir)
        except RecursionError as e:
            raise NestingTooDeepError(f"Inferred type is nested too deeply to render as {self.language}") from e

    def dump_ir(self, documents: list[Any] | None = None) -> dict[str, Any]:
        """Infer the IR and return its plain dictionary form."""
        if documents is None:
            documents = self.load_documents()

        ir = self.infer(documents)
        try:
            return ir.to_dict()
        except RecursionError as e:
            raise NestingTooDeepError("Inferred type is nested too deeply to serialize") from e
