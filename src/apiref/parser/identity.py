"""Derive (group, version, kind) identities from schema definition names.

OpenAPI documents for Kubernetes-style APIs name every schema with a
fully-qualified, dot-separated Go package path, for example::

    io.k8s.kubernetes.pkg.api.v1.Pod                      -> core/v1/Pod
    io.k8s.kubernetes.pkg.apis.apps.v1beta1.Deployment    -> apps/v1beta1/Deployment
    io.k8s.apimachinery.pkg.util.intstr.IntOrString       -> skipped (utility type)

:func:`parse_definition_name` implements the name rules and
:func:`gvk_for_schema` applies them to a property schema (``$ref``, arrays and
maps) so the registry can resolve field types to definitions.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from apiref.exceptions import DefinitionNameError
from apiref.models import GroupVersionKind

logger = logging.getLogger(__name__)

CORE_GROUP = "core"

_CORE_MARKER = "api"
_GROUP_MARKER = "apis"
_UTILITY_MARKERS = frozenset({"util", "pkg"})
_MIN_SEGMENTS = 4


def parse_definition_name(name: str) -> Optional[GroupVersionKind]:
    """Parse a fully-qualified definition name into a :class:`GroupVersionKind`.

    Args:
        name: Dot-separated schema name from the document's definitions map.

    Returns:
        The parsed identity, or ``None`` when the name is too short to be a
        resource or denotes a non-resource utility type.

    Raises:
        DefinitionNameError: If the name matches none of the recognised
            shapes, or its group, version or kind segment is empty.
    """
    parts = name.split(".")
    if len(parts) < _MIN_SEGMENTS:
        logger.warning("Could not find version and type for definition %s", name)
        return None
    if not all(parts[-3:]):
        raise DefinitionNameError(name)

    if parts[-3] == _CORE_MARKER:
        return GroupVersionKind(group=CORE_GROUP, version=parts[-2], kind=parts[-1])
    if parts[-4] == _GROUP_MARKER:
        return GroupVersionKind(group=parts[-3], version=parts[-2], kind=parts[-1])
    if parts[-3] in _UTILITY_MARKERS:
        # e.g. io.k8s.apimachinery.pkg.runtime.RawExtension
        logger.debug("Skipping utility definition %s", name)
        return None

    raise DefinitionNameError(name)


def ref_name(ref: str) -> str:
    """Return the definition name a local JSON pointer ``$ref`` points at.

    Handles both ``#/definitions/<name>`` (Swagger 2.0) and
    ``#/components/schemas/<name>`` (OpenAPI 3.x), unescaping RFC 6901
    ``~1`` and ``~0`` sequences.
    """
    segment = ref.rsplit("/", 1)[-1]
    return segment.replace("~1", "/").replace("~0", "~")


def gvk_for_schema(schema: Any) -> Optional[GroupVersionKind]:
    """Return the identity a property schema refers to, if any.

    ``$ref`` schemas are parsed by name; arrays recurse into ``items`` and
    maps into ``additionalProperties``. Primitive schemas return ``None``.

    Raises:
        DefinitionNameError: If a ``$ref`` names a malformed definition.
    """
    if not isinstance(schema, dict):
        return None

    ref = schema.get("$ref")
    if isinstance(ref, str):
        return parse_definition_name(ref_name(ref))

    if is_array(schema):
        return gvk_for_schema(schema.get("items"))

    if is_map(schema):
        return gvk_for_schema(schema["additionalProperties"])

    return None


def is_array(schema: dict[str, Any]) -> bool:
    return schema_type(schema) == "array" and isinstance(schema.get("items"), dict)


def is_map(schema: dict[str, Any]) -> bool:
    return isinstance(schema.get("additionalProperties"), dict) and schema_type(
        schema
    ) in ("object", None)


def schema_type(schema: dict[str, Any]) -> Optional[str]:
    """Return the schema's type, taking the first non-null entry of a type list."""
    type_value = schema.get("type")
    if isinstance(type_value, list):
        non_null = [t for t in type_value if t != "null"]
        return non_null[0] if non_null else None
    return type_value
