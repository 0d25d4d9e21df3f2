"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import FieldDef, IRType, SliceType, StructType, TypeKind
from ..config import TAG_NAME_PLACEHOLDER, CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from IR kinds to language types
    TYPE_MAP: dict[TypeKind, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self._register_filters(self.jinja_env)

        self.file_template = self.jinja_env.get_template(f"file.{self.FILE_EXTENSION}.jinja2")
        self.struct_template = self.jinja_env.get_template(f"struct.{self.FILE_EXTENSION}.jinja2")

    def _register_filters(self, env: jinja2.Environment) -> None:
        """Hook for subclasses to add custom template filters."""

    @abstractmethod
    def generate(self, ir: IRType) -> str:
        """
        Generate source code from a finished IR.

        Args:
            ir: The unified (and possibly pruned) IR

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, ir: IRType) -> str:
        """
        Translate an IR node to a language-specific type expression.

        Args:
            ir: The IR node

        Returns:
            Language-specific type string
        """

    def render_tag(self, json_name: str, field_def: FieldDef) -> str:
        """Fill the tag template matching the field's optionality."""
        template = self.config.tag_template if field_def.optional else self.config.tag_required_template
        return template.replace(TAG_NAME_PLACEHOLDER, json_name)

    def uses_pointer(self, field_def: FieldDef) -> bool:
        """Whether the field should be rendered behind a pointer."""
        if field_def.optional:
            return self.config.use_pointer_field
        return self.config.use_pointer_field_for_required

    def _prepare_struct_context(self, struct: StructType) -> dict[str, Any]:
        """
        Prepare the template context for a struct.

        Args:
            struct: The struct node

        Returns:
            Dictionary of template variables
        """
        return {"fields": [self._prepare_field_context(name, field_def) for name, field_def in struct.fields.items()]}

    @abstractmethod
    def _prepare_field_context(self, json_name: str, field_def: FieldDef) -> dict[str, Any]:
        """Prepare the template context for one struct field."""


def contains_kind(ir: IRType, kind: TypeKind) -> bool:
    """Check whether a node of the given kind appears anywhere in the tree."""
    if ir.kind is kind:
        return True
    if isinstance(ir, SliceType):
        return contains_kind(ir.element, kind)
    if isinstance(ir, StructType):
        return any(contains_kind(field_def.type_ref, kind) for field_def in ir.fields.values())
    return False
