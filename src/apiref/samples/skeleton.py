"""A sample provider that renders a YAML manifest skeleton from a definition's fields."""

from __future__ import annotations

from typing import Any

import yaml

from apiref.graph.registry import Definitions
from apiref.models import Definition, DefinitionField
from apiref.parser.identity import CORE_GROUP
from apiref.samples.base import SampleProvider

_PRIMITIVE_PLACEHOLDERS: dict[str, Any] = {
    "string": "string",
    "integer": 0,
    "number": 0.0,
    "boolean": False,
}


def api_version(definition: Definition) -> str:
    """Return the ``apiVersion`` value for *definition* (``v1``, ``apps/v1beta1``)."""
    if definition.group == CORE_GROUP:
        return definition.version
    return f"{definition.group}/{definition.version}"


class YamlSkeletonProvider(SampleProvider):
    """Render a manifest skeleton with one placeholder per field.

    ``apiVersion`` and ``kind`` are filled in from the definition's identity.
    When a registry is supplied, fields referring to inlined definitions are
    expanded one level deep.

    Args:
        registry: Optional registry used to expand referenced definitions.
    """

    def __init__(self, registry: Definitions | None = None) -> None:
        self._registry = registry

    @property
    def tab(self) -> str:
        return "yaml"

    @property
    def sample_type(self) -> str:
        return "yaml"

    def get_sample(self, definition: Definition) -> str:
        if not definition.fields:
            return ""
        body: dict[str, Any] = {}
        for field in definition.sorted_fields():
            if field.name == "apiVersion":
                body[field.name] = api_version(definition)
            elif field.name == "kind":
                body[field.name] = definition.kind
            else:
                body[field.name] = self._placeholder(field, expand=True)
        return yaml.safe_dump(body, sort_keys=False, default_flow_style=False)

    def _placeholder(self, field: DefinitionField, expand: bool) -> Any:
        if field.type_name.endswith(" array"):
            return []
        if field.type_name.endswith(" map"):
            return {}
        if field.type_name in _PRIMITIVE_PLACEHOLDERS:
            return _PRIMITIVE_PLACEHOLDERS[field.type_name]
        if expand and self._registry is not None and field.reference is not None:
            target = self._registry.get_by_key(field.reference)
            if target is not None and target.is_inlined:
                return {
                    nested.name: self._placeholder(nested, expand=False)
                    for nested in target.sorted_fields()
                }
        return {}
