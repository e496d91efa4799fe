"""Build the resolved documentation model from loaded OpenAPI documents.

This is the driver of the resolution engine. :func:`build_definitions` runs
the phases in a fixed order, each relying on the previous one having finished
for every definition:

1. Walk every schema name and register a :class:`~apiref.models.Definition`
   for each resource-shaped name.
2. Resolve fields (the registry is complete, so forward references resolve).
3. Index definitions by kind, rank versions, and link sibling versions.
4. Flag categorised definitions for the table of contents.
5. Derive appears-in and inlining relations, then sort them for display.

A malformed definition name raises
:class:`~apiref.exceptions.DefinitionNameError` and no registry is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from apiref.graph.fields import resolve_all_fields
from apiref.graph.registry import Definitions
from apiref.graph.relations import derive_appears_in, derive_inlined, sort_relations
from apiref.graph.toc import apply_resource_categories
from apiref.graph.versions import link_other_versions, rank_versions
from apiref.models import Definition, DocsConfig
from apiref.parser.identity import parse_definition_name
from apiref.parser.loader import get_schema_definitions

logger = logging.getLogger(__name__)

RESOURCE_NAME_KEY = "x-kubernetes-resource"


def visit_definitions(
    documents: Iterable[dict[str, Any]], fn: Callable[[Definition], None]
) -> None:
    """Call *fn* with a new definition for every resource schema in *documents*.

    Utility types and too-short names are skipped.

    Raises:
        DefinitionNameError: If a schema name matches no recognised shape.
    """
    for document in documents:
        for name, schema in get_schema_definitions(document).items():
            gvk = parse_definition_name(name)
            if gvk is None:
                continue
            if not isinstance(schema, dict):
                schema = {}
            resource = schema.get(RESOURCE_NAME_KEY)
            fn(
                Definition(
                    name=gvk.kind,
                    group=gvk.group,
                    version=gvk.version,
                    kind=gvk.kind,
                    full_name=name,
                    resource=resource if isinstance(resource, str) else None,
                    schema=schema,
                )
            )


def build_definitions(
    documents: Iterable[dict[str, Any]], config: Optional[DocsConfig] = None
) -> Definitions:
    """Parse, index and cross-reference every definition in *documents*.

    Args:
        documents: Loaded OpenAPI documents (see
            :func:`~apiref.parser.loader.load_spec`).
        config: Inline rules and resource categories. Defaults to
            :class:`~apiref.models.DocsConfig` defaults.

    Returns:
        The fully resolved registry.

    Example::

        raw = load_spec("swagger.json")
        definitions = build_definitions([raw], load_docs_config(config_dir))
        deployment = definitions.get_by_key("apps.v1beta1.Deployment")
    """
    if config is None:
        config = DocsConfig()

    registry = Definitions()
    visit_definitions(documents, registry.put)
    logger.debug("Registered %d definitions", len(registry))

    resolve_all_fields(registry)

    registry.build_kind_index()
    rank_versions(registry)
    link_other_versions(registry)

    derive_relations(registry, config)
    return registry


def derive_relations(registry: Definitions, config: DocsConfig) -> None:
    """Re-derive the config-dependent state of an indexed, ranked registry.

    Applies resource categories, then appears-in and inlining, then sorts the
    relation lists. Safe to call again with a different *config*.
    """
    apply_resource_categories(registry, config.resource_categories)

    derive_appears_in(registry)
    derive_inlined(registry, config.inline_definitions)
    sort_relations(registry)
