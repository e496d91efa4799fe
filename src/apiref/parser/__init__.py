"""OpenAPI spec parser -- load documents and derive definition identities.

This sub-package is responsible for the first half of the apiref pipeline:
turning raw OpenAPI documents (JSON or YAML, local file or remote URL) into
dictionaries and parsing each schema definition's fully-qualified name into a
:class:`~apiref.models.GroupVersionKind`.

Typical usage::

    from apiref.parser import load_spec, parse_definition_name

    raw = load_spec("swagger.json")
    gvk = parse_definition_name("io.k8s.kubernetes.pkg.api.v1.Pod")

Sub-modules:

* :mod:`~apiref.parser.loader` -- I/O layer (URL, file, stdin) plus format
  detection and version validation.
* :mod:`~apiref.parser.identity` -- Definition name and ``$ref`` parsing.
"""

from apiref.parser.identity import gvk_for_schema, parse_definition_name
from apiref.parser.loader import get_schema_definitions, load_spec, validate_spec_version

__all__ = [
    "load_spec",
    "validate_spec_version",
    "get_schema_definitions",
    "parse_definition_name",
    "gvk_for_schema",
]
