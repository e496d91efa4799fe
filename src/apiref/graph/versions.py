"""Order the versions of each kind and mark superseded ones.

Kubernetes-style versions look like ``v1``, ``v2beta1`` or ``v1alpha3``.
Precedence, highest first:

1. Stability -- GA (``v<N>``) outranks beta, beta outranks alpha.
2. Major number -- ``v2beta1`` outranks ``v1beta2``.
3. Pre-release number -- ``v1beta2`` outranks ``v1beta1``.

All numbers compare numerically (``v1beta10`` outranks ``v1beta9``).
Definitions with equal versions (the same kind in two groups) keep a stable
order by group name.

Ranking is strictly per kind name; it never relates versions across kinds.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from apiref.graph.registry import Definitions
from apiref.models import Definition

_VERSION_RE = re.compile(r"^v(\d+)(?:(alpha|beta)(\d*))?$")
_STABILITY = {"alpha": 0, "beta": 1, "": 2}

_UNRECOGNISED = (-1, -1, -1)


def version_precedence(version: str) -> tuple[int, int, int]:
    """Return a sort key where larger means newer.

    Unrecognised version strings rank below every recognised version.

    Example::

        >>> version_precedence("v1") > version_precedence("v1beta1")
        True
        >>> version_precedence("v1beta10") > version_precedence("v1beta9")
        True
    """
    match = _VERSION_RE.match(version)
    if match is None:
        return _UNRECOGNISED
    major, stage, number = match.groups()
    return (_STABILITY[stage or ""], int(major), int(number) if number else 0)


def sort_by_version(definitions: Iterable[Definition]) -> list[Definition]:
    """Return *definitions* newest version first; equal versions sort by group."""
    by_group = sorted(definitions, key=lambda d: d.group)
    return sorted(by_group, key=lambda d: version_precedence(d.version), reverse=True)


def display_order(definition: Definition) -> tuple:
    """Sort key for relation lists: name, then newest version, then group."""
    stability, major, number = version_precedence(definition.version)
    return (definition.name, -stability, -major, -number, definition.version, definition.group)


def superseded_keys(ordered: Sequence[Definition]) -> set[str]:
    """Return the keys of every definition but the newest.

    Args:
        ordered: Definitions of one kind, newest first (see
            :func:`sort_by_version`).

    Returns:
        An empty set for zero or one definitions; otherwise the keys of
        ``ordered[1:]``.
    """
    if len(ordered) <= 1:
        return set()
    return {definition.key for definition in ordered[1:]}


def rank_versions(registry: Definitions) -> None:
    """Sort every kind group newest first and flag superseded versions.

    Requires :meth:`~apiref.graph.registry.Definitions.build_kind_index` to
    have run. Also records, for each superseded definition, the keys of the
    versions that rank above it in ``newer_versions``.
    """
    for kind, group in registry.by_kind.items():
        ordered = sort_by_version(group)
        registry.by_kind[kind] = ordered
        old = superseded_keys(ordered)
        for index, definition in enumerate(ordered):
            definition.is_old_version = definition.key in old
            definition.newer_versions = [
                newer.key
                for newer in ordered[:index]
                if newer.version != definition.version
            ]


def link_other_versions(registry: Definitions) -> None:
    """Record, for every definition, the other versions of its kind."""
    for definition in registry:
        others = sorted(registry.get_other_versions(definition), key=display_order)
        definition.other_versions = [other.key for other in others]
