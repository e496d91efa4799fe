"""Resolve a definition's schema properties into typed fields.

For every property of a definition's raw schema the resolver builds a
:class:`~apiref.models.DefinitionField` carrying the property's display type
and, when that type denotes another registered definition, the key of that
definition. Those keys are the edges of the cross-reference graph.

Field resolution must run only after the registry is fully populated: a
property may refer to a definition that is indexed later in the scan.
"""

from __future__ import annotations

from typing import Any

from apiref.graph.registry import Definitions
from apiref.models import Definition, DefinitionField
from apiref.parser.identity import (
    is_array,
    is_map,
    parse_definition_name,
    ref_name,
    schema_type,
)

PATCH_STRATEGY_KEY = "x-kubernetes-patch-strategy"
PATCH_MERGE_KEY_KEY = "x-kubernetes-patch-merge-key"


def type_name(schema: Any) -> str:
    """Return the display type of a property schema.

    Examples::

        {"type": "string"}                                    -> "string"
        {"$ref": "#/definitions/io.k8s...api.v1.Container"}   -> "Container"
        {"type": "array", "items": {"$ref": ...Container}}    -> "Container array"
        {"type": "object", "additionalProperties": {"type": "string"}}
                                                              -> "string map"
    """
    if not isinstance(schema, dict):
        return "object"

    ref = schema.get("$ref")
    if isinstance(ref, str):
        name = ref_name(ref)
        gvk = parse_definition_name(name)
        if gvk is not None:
            return gvk.kind
        return name.rsplit(".", 1)[-1]

    if is_array(schema):
        return f"{type_name(schema['items'])} array"

    if is_map(schema):
        return f"{type_name(schema['additionalProperties'])} map"

    return schema_type(schema) or "object"


def _extension(schema: dict[str, Any], key: str) -> str | None:
    value = schema.get(key)
    return value if isinstance(value, str) else None


def build_fields(definition: Definition, registry: Definitions) -> list[DefinitionField]:
    """Build the field list of *definition* from its schema's ``properties``.

    Args:
        definition: The definition whose raw schema is walked.
        registry: The fully populated registry used to resolve references.

    Returns:
        A new list with one field per property, in the schema's iteration
        order. Use :meth:`~apiref.models.Definition.sorted_fields` for a
        stable display order.

    Raises:
        DefinitionNameError: If a property ``$ref`` names a malformed
            definition.
    """
    properties = definition.schema_.get("properties") or {}
    fields: list[DefinitionField] = []

    for field_name, prop in properties.items():
        if not isinstance(prop, dict):
            prop = {}
        description = str(prop.get("description") or "").replace("\n", " ")
        target = registry.get_for_schema(prop)
        fields.append(
            DefinitionField(
                name=field_name,
                type_name=type_name(prop),
                description=description,
                patch_strategy=_extension(prop, PATCH_STRATEGY_KEY),
                patch_merge_key=_extension(prop, PATCH_MERGE_KEY_KEY),
                reference=target.key if target is not None else None,
            )
        )

    return fields


def resolve_fields(definition: Definition, registry: Definitions) -> None:
    """Replace *definition*'s fields with a freshly resolved list."""
    definition.fields = build_fields(definition, registry)


def resolve_all_fields(registry: Definitions) -> None:
    """Resolve the fields of every definition in *registry*."""
    for definition in registry:
        resolve_fields(definition, registry)

