"""
Configuration for the struct generator pipeline.

The configuration file is a JSON object. Keys may be written in camelCase
(``usePointerField``) or snake_case (``use_pointer_field``); a ``null``
value keeps the default.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigError

# Placeholder replaced by the JSON key in tag templates
TAG_NAME_PLACEHOLDER = "%name%"

DEFAULT_TAG_TEMPLATE = f'json:"{TAG_NAME_PLACEHOLDER}"'


@dataclass
class CodeGeneratorConfig:
    """Configuration options for struct generation."""

    # Glob matching the example JSON documents
    glob: str = ""

    # Extra words rendered fully upper-case in field names (id, api, http, url, uri are built in)
    abbr_must_be_upper_case: list[str] = field(default_factory=list)

    # Whether optional fields are rendered as pointers
    use_pointer_field: bool = False

    # Whether required fields are rendered as pointers
    use_pointer_field_for_required: bool = True

    # Struct tag for optional fields
    tag_template: str = DEFAULT_TAG_TEMPLATE

    # Struct tag for required fields
    tag_required_template: str = DEFAULT_TAG_TEMPLATE

    # Prune spec applied to the unified IR (None = keep everything)
    filter: dict[str, Any] | None = None

    # Name of the emitted Go type (empty = bare type expression)
    type_name: str = ""

    # Go package clause (empty = no package clause)
    package_name: str = ""

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        if not isinstance(d, Mapping):
            raise ConfigError(f"Configuration must be an object, got {type(d).__name__}")

        config = CodeGeneratorConfig()
        for k, v in d.items():
            attr = _CAMEL_CASE_KEYS.get(k, k)
            if attr not in _EXPECTED_TYPES or v is None:
                continue
            expected = _EXPECTED_TYPES[attr]
            if not isinstance(v, expected):
                raise ConfigError(f"Configuration key '{k}' must be of type {expected.__name__}, got {type(v).__name__}")
            if expected is list and not all(isinstance(item, str) for item in v):
                raise ConfigError(f"Configuration key '{k}' must be a list of strings")
            setattr(config, attr, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary, using the camelCase keys of the config file."""
        return {
            "glob": self.glob,
            "abbrMustBeUpperCase": self.abbr_must_be_upper_case,
            "usePointerField": self.use_pointer_field,
            "usePointerFieldForRequired": self.use_pointer_field_for_required,
            "tagTemplate": self.tag_template,
            "tagRequiredTemplate": self.tag_required_template,
            "filter": self.filter,
            "typeName": self.type_name,
            "packageName": self.package_name,
        }


_CAMEL_CASE_KEYS = {
    "abbrMustBeUpperCase": "abbr_must_be_upper_case",
    "usePointerField": "use_pointer_field",
    "usePointerFieldForRequired": "use_pointer_field_for_required",
    "tagTemplate": "tag_template",
    "tagRequiredTemplate": "tag_required_template",
    "typeName": "type_name",
    "packageName": "package_name",
}

_EXPECTED_TYPES: dict[str, type] = {
    "glob": str,
    "abbr_must_be_upper_case": list,
    "use_pointer_field": bool,
    "use_pointer_field_for_required": bool,
    "tag_template": str,
    "tag_required_template": str,
    "filter": dict,
    "type_name": str,
    "package_name": str,
}
