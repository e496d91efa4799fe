"""The definition registry: the primary index of the documentation model.

:class:`Definitions` owns every :class:`~apiref.models.Definition` and keeps
two orthogonal indexes over them:

* ``by_key`` -- ``"<group>.<version>.<kind>"`` to definition, for exact
  lookup;
* ``by_kind`` -- kind name to every definition of that kind, for
  version-family lookup. Built once, after all definitions are inserted, by
  :meth:`Definitions.build_kind_index`.

Lookups never raise; they return ``None`` when nothing matches.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from apiref.models import Definition, GroupVersionKind
from apiref.parser.identity import gvk_for_schema


class Definitions:
    """Indexes the definitions parsed from one or more OpenAPI documents."""

    def __init__(self) -> None:
        self.by_key: dict[str, Definition] = {}
        self.by_kind: dict[str, list[Definition]] = {}

    def __len__(self) -> int:
        return len(self.by_key)

    def __iter__(self) -> Iterator[Definition]:
        return iter(self.by_key.values())

    def __contains__(self, key: object) -> bool:
        return key in self.by_key

    def all_definitions(self) -> list[Definition]:
        """Return every definition, ordered by key."""
        return [self.by_key[key] for key in sorted(self.by_key)]

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def put(self, definition: Definition) -> None:
        """Insert *definition*, replacing any previous entry with the same key."""
        self.by_key[definition.key] = definition

    def build_kind_index(self) -> None:
        """Rebuild the kind-name index from every registered definition."""
        by_kind: dict[str, list[Definition]] = {}
        for key in sorted(self.by_key):
            definition = self.by_key[key]
            by_kind.setdefault(definition.name, []).append(definition)
        self.by_kind = by_kind

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_by_key(self, key: str) -> Optional[Definition]:
        return self.by_key.get(key)

    def get_by_group_version_kind(
        self, group: str, version: str, kind: str
    ) -> Optional[Definition]:
        gvk = GroupVersionKind(group=group, version=version, kind=kind)
        return self.by_key.get(gvk.key)

    def get_for_schema(self, schema: Any) -> Optional[Definition]:
        """Resolve a raw property schema to a registered definition.

        ``$ref`` schemas, arrays of them and maps of them resolve to the
        referenced definition. Primitive schemas and references to kinds that
        were never registered return ``None``.

        Raises:
            DefinitionNameError: If a ``$ref`` names a malformed definition.
        """
        gvk = gvk_for_schema(schema)
        if gvk is None:
            return None
        return self.by_key.get(gvk.key)

    def is_complex(self, schema: Any) -> bool:
        """Return ``True`` if *schema* denotes a (possibly wrapped) kind."""
        return gvk_for_schema(schema) is not None

    def versions_of(self, kind: str) -> list[Definition]:
        """Return every definition of *kind*, newest first once ranked."""
        return list(self.by_kind.get(kind, []))

    def get_other_versions(self, definition: Definition) -> list[Definition]:
        """Return the definitions sharing *definition*'s kind but not its version."""
        return [
            other
            for other in self.by_kind.get(definition.name, [])
            if other.version != definition.version
        ]

    def resolve(self, keys: Iterable[str]) -> list[Definition]:
        """Dereference a list of registry keys, dropping unknown ones."""
        return [self.by_key[key] for key in keys if key in self.by_key]
