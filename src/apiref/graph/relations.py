"""Derive graph-wide relations between resolved definitions.

Two independent passes run over the completed registry:

* **Appears-in** -- the reverse of the field reference edges. If
  ``Deployment.spec`` has type ``DeploymentSpec``, then ``DeploymentSpec``
  appears in ``Deployment``.
* **Inlining** -- name-pattern subordination. With the rule
  ``${resource}Spec``, ``DeploymentSpec`` is inlined into ``Deployment`` of
  the same group and version, and drops out of the table of contents.

When a kind matches several rules (``FooListSpec`` against both
``${resource}Spec`` and ``${resource}ListSpec``), the first rule in
declaration order that names a registered owner wins.

Both passes reset the state they own before deriving it, so running them
again yields the same result.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from apiref.graph.registry import Definitions
from apiref.graph.versions import display_order
from apiref.models import RESOURCE_PLACEHOLDER, Definition, InlineDefinitionRule

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Appears-in
# ---------------------------------------------------------------------------


def derive_appears_in(registry: Definitions) -> None:
    """Populate ``appears_in`` from every resolved field reference."""
    for definition in registry:
        definition.appears_in = []

    for definition in registry.all_definitions():
        for field in definition.fields:
            if field.reference is None:
                continue
            target = registry.get_by_key(field.reference)
            if target is None:
                continue
            target.found_in_field = True
            if definition.key not in target.appears_in:
                target.appears_in.append(definition.key)


# ---------------------------------------------------------------------------
# Inlining
# ---------------------------------------------------------------------------


def inline_owner_kinds(
    kind: str, rules: Sequence[InlineDefinitionRule]
) -> Iterator[tuple[InlineDefinitionRule, str]]:
    """Yield ``(rule, owner_kind)`` for every rule that can produce *kind*.

    Rules are tried in declaration order. The owner part substituted for
    ``${resource}`` must be non-empty.

    Example::

        >>> rules = [InlineDefinitionRule(name="Spec", match="${resource}Spec")]
        >>> [owner for _, owner in inline_owner_kinds("DeploymentSpec", rules)]
        ['Deployment']
    """
    for rule in rules:
        prefix, _, suffix = rule.match.partition(RESOURCE_PLACEHOLDER)
        if len(kind) <= len(prefix) + len(suffix):
            continue
        if kind.startswith(prefix) and kind.endswith(suffix):
            yield rule, kind[len(prefix) : len(kind) - len(suffix)]


def find_inline_owner(
    definition: Definition,
    registry: Definitions,
    rules: Sequence[InlineDefinitionRule],
) -> Optional[Definition]:
    """Return the definition *definition* should be inlined into, if any.

    The owner must live in the same group and version.
    """
    for rule, owner_kind in inline_owner_kinds(definition.kind, rules):
        owner = registry.get_by_group_version_kind(
            definition.group, definition.version, owner_kind
        )
        if owner is not None and owner.key != definition.key:
            logger.debug(
                "Inlining %s into %s (rule %s)", definition.key, owner.key, rule.name
            )
            return owner
    return None


def derive_inlined(
    registry: Definitions, rules: Sequence[InlineDefinitionRule]
) -> None:
    """Mark subordinate definitions as inlined into their owners.

    An inlined definition is removed from the table of contents
    (``in_toc = False``) regardless of how it was flagged before. The flag
    belongs to :func:`~apiref.graph.toc.apply_resource_categories`, so
    re-run that first when inlining again with other rules (see
    :func:`~apiref.graph.builder.derive_relations`).
    """
    for definition in registry:
        definition.inline = []
        definition.is_inlined = False

    for definition in registry.all_definitions():
        owner = find_inline_owner(definition, registry, rules)
        if owner is None:
            continue
        definition.is_inlined = True
        definition.in_toc = False
        definition.found_in_field = True
        owner.inline.append(definition.key)


def sort_relations(registry: Definitions) -> None:
    """Sort every ``appears_in`` and ``inline`` list into display order."""
    for definition in registry:
        definition.appears_in = [
            d.key for d in sorted(registry.resolve(definition.appears_in), key=display_order)
        ]
        definition.inline = [
            d.key for d in sorted(registry.resolve(definition.inline), key=display_order)
        ]
