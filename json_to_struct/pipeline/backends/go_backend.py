"""
Go backend.

Renders a finished IR as a Go type expression, optionally wrapped in a
named type declaration and a package clause.
"""

from __future__ import annotations

from typing import Any

import jinja2

from ...utils import to_go_field_name
from ..analyzer.ir_nodes import FieldDef, IRType, SliceType, StructType, TypeKind
from .base import CodeBackend, contains_kind

PADDING = "\t"


class GoBackend(CodeBackend):
    """Backend rendering Go struct definitions."""

    TYPE_MAP = {
        TypeKind.ANY: "json.RawMessage",
        TypeKind.BOOL: "bool",
        TypeKind.INT: "int",
        TypeKind.STRING: "string",
        TypeKind.FLOAT: "float64",
    }

    TEMPLATE_LANG = "go"
    FILE_EXTENSION = "go"

    def _register_filters(self, env: jinja2.Environment) -> None:
        env.filters["indent_block"] = _indent_block

    def generate(self, ir: IRType) -> str:
        imports = []
        # json.RawMessage lives in encoding/json
        if self.config.package_name and contains_kind(ir, TypeKind.ANY):
            imports.append("encoding/json")

        code = self.file_template.render(
            package_name=self.config.package_name,
            imports=imports,
            type_name=self.config.type_name,
            body=self.translate_type(ir),
        )
        return code + "\n"

    def translate_type(self, ir: IRType) -> str:
        if isinstance(ir, SliceType):
            return f"[]{self.translate_type(ir.element)}"
        if isinstance(ir, StructType):
            return self.struct_template.render(**self._prepare_struct_context(ir))
        try:
            return self.TYPE_MAP[ir.kind]
        except KeyError:
            raise ValueError(f"Cannot render IR node of kind {ir.kind.value}") from None

    def _prepare_field_context(self, json_name: str, field_def: FieldDef) -> dict[str, Any]:
        go_type = self.translate_type(field_def.type_ref)
        if self.uses_pointer(field_def):
            go_type = f"*{go_type}"
        return {
            "name": to_go_field_name(json_name, self.config.abbr_must_be_upper_case),
            "type": go_type,
            "tag": self.render_tag(json_name, field_def),
        }


def _indent_block(text: str) -> str:
    """Indent every continuation line of a nested type by one level."""
    return text.replace("\n", "\n" + PADDING)
