"""Apply the resource-category taxonomy to the registry.

The docs configuration lists, per category, the (kind, version, group)
triples that deserve a standalone top-level entry. :func:`apply_resource_categories`
flags those definitions ``in_toc``; :func:`build_toc` returns the resolved
categories for the rendering stage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from apiref.graph.registry import Definitions
from apiref.models import ResourceCategory

logger = logging.getLogger(__name__)


@dataclass
class TocEntry:
    """One definition listed in a table-of-contents category."""

    key: str
    description_warning: Optional[str] = None
    description_note: Optional[str] = None


@dataclass
class TocCategory:
    name: str
    include: Optional[str] = None
    entries: list[TocEntry] = field(default_factory=list)


def apply_resource_categories(
    registry: Definitions, categories: Sequence[ResourceCategory]
) -> None:
    """Flag every categorised definition present in *registry* as ``in_toc``.

    Every other definition is reset to ``in_toc = False``. Entries naming a
    definition that does not exist are logged and skipped.
    """
    for definition in registry:
        definition.in_toc = False

    for category in categories:
        for resource in category.resources:
            definition = registry.get_by_group_version_kind(
                resource.group, resource.version, resource.name
            )
            if definition is None:
                logger.warning(
                    "Resource %s/%s/%s in category '%s' not found in spec",
                    resource.group,
                    resource.version,
                    resource.name,
                    category.name,
                )
                continue
            definition.in_toc = True


def build_toc(
    registry: Definitions, categories: Sequence[ResourceCategory]
) -> list[TocCategory]:
    """Return the categories with their resolved, non-inlined definitions.

    Categories keep their configured order, as do the resources within them.
    Missing and inlined definitions are left out.
    """
    toc: list[TocCategory] = []
    for category in categories:
        resolved = TocCategory(name=category.name, include=category.include)
        for resource in category.resources:
            definition = registry.get_by_group_version_kind(
                resource.group, resource.version, resource.name
            )
            if definition is None or definition.is_inlined:
                continue
            resolved.entries.append(
                TocEntry(
                    key=definition.key,
                    description_warning=resource.description_warning,
                    description_note=resource.description_note,
                )
            )
        toc.append(resolved)
    return toc
