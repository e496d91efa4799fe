"""Canonical Pydantic models shared across all apiref modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into two groups:

**Configuration models** -- deserialised from ``config.yaml`` in the docs
config directory:
    :class:`InlineDefinitionRule`, :class:`ResourceEntry`,
    :class:`ResourceCategory`, and :class:`DocsConfig`.

**Documentation model** -- produced by the resolution engine and consumed by
the (external) rendering stage:
    :class:`GroupVersionKind`, :class:`DefinitionField`, :class:`Definition`,
    and :class:`ExampleText`.

Cross references between definitions are stored as registry keys
(``"<group>.<version>.<kind>"``) rather than object references, because the
reference graph is cyclic. Use :meth:`apiref.graph.registry.Definitions.resolve`
to turn a key list back into definitions.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

RESOURCE_PLACEHOLDER = "${resource}"
"""Placeholder substituted with the owning kind in inline rule patterns."""


# --- Docs Config ---


class InlineDefinitionRule(BaseModel):
    """A name-pattern rule that subordinates one definition to another.

    ``match`` contains the :data:`RESOURCE_PLACEHOLDER`; a definition whose
    kind equals the pattern with the placeholder replaced by another kind in
    the same group and version is inlined into that kind's documentation.

    Example::

        InlineDefinitionRule(name="Spec", match="${resource}Spec")
        # DeploymentSpec is inlined into Deployment
    """

    name: str = Field(description="Display name of the inlined section")
    match: str = Field(description="Kind pattern containing ${resource}")

    @field_validator("match")
    @classmethod
    def _require_placeholder(cls, value: str) -> str:
        if RESOURCE_PLACEHOLDER not in value:
            raise ValueError(f"inline match pattern must contain {RESOURCE_PLACEHOLDER}")
        return value


def default_inline_definitions() -> list[InlineDefinitionRule]:
    """Return the Kubernetes suffix conventions, in precedence order."""
    return [
        InlineDefinitionRule(name="Spec", match="${resource}Spec"),
        InlineDefinitionRule(name="Status", match="${resource}Status"),
        InlineDefinitionRule(name="List", match="${resource}List"),
        InlineDefinitionRule(name="DeploymentStrategy", match="${resource}Strategy"),
        InlineDefinitionRule(name="DeploymentRollback", match="${resource}Rollback"),
        InlineDefinitionRule(name="RollingUpdateDeployment", match="RollingUpdate${resource}"),
        InlineDefinitionRule(name="EventSource", match="${resource}Source"),
    ]


class ResourceEntry(BaseModel):
    """One (kind, version, group) listed under a :class:`ResourceCategory`."""

    name: str
    version: str
    group: str
    description_warning: Optional[str] = None
    description_note: Optional[str] = None


class ResourceCategory(BaseModel):
    """A named grouping of resources in the table of contents."""

    name: str
    include: Optional[str] = Field(
        default=None, description="Name of the include file for the category intro"
    )
    resources: list[ResourceEntry] = Field(default_factory=list)


class DocsConfig(BaseModel):
    """Declarative configuration for the documentation model.

    Loaded by :func:`~apiref.config.load_docs_config`. Unknown top-level keys
    (rendering options consumed by other tools) are preserved in
    ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    example_location: Optional[str] = None
    api_groups: list[str] = Field(default_factory=list)
    inline_definitions: list[InlineDefinitionRule] = Field(
        default_factory=default_inline_definitions
    )
    resource_categories: list[ResourceCategory] = Field(default_factory=list)


# --- Documentation Model ---


class GroupVersionKind(BaseModel):
    """The three-part identity of an API resource type."""

    model_config = ConfigDict(frozen=True, str_min_length=1)

    group: str
    version: str
    kind: str

    @property
    def key(self) -> str:
        """Registry key, ``"<group>.<version>.<kind>"``."""
        return f"{self.group}.{self.version}.{self.kind}"


class DefinitionField(BaseModel):
    """One named, typed property of a :class:`Definition`'s schema."""

    name: str
    type_name: str
    description: str = ""
    patch_strategy: Optional[str] = None
    patch_merge_key: Optional[str] = None
    reference: Optional[str] = Field(
        default=None, description="Registry key of the referenced definition"
    )


class Definition(BaseModel):
    """The documentation model of one versioned API resource schema.

    Created once per raw schema entry by
    :func:`~apiref.graph.builder.visit_definitions`, then filled in place by
    the field resolver, the version ranker and the relationship deriver, in
    that order.

    Link helpers take the ``use_tags`` presentation toggle explicitly: with
    tags, anchors omit the group (``deployment-v1beta1``); without,
    they include it (``deployment-v1beta1-apps``).
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Display name (e.g. Deployment)")
    group: str
    version: str
    kind: str
    full_name: str = ""
    resource: Optional[str] = None
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")

    fields: list[DefinitionField] = Field(default_factory=list)

    in_toc: bool = False
    is_inlined: bool = False
    is_old_version: bool = False
    found_in_field: bool = False

    appears_in: list[str] = Field(default_factory=list)
    inline: list[str] = Field(default_factory=list)
    other_versions: list[str] = Field(default_factory=list)
    newer_versions: list[str] = Field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.group}.{self.version}.{self.kind}"

    @property
    def gvk(self) -> GroupVersionKind:
        return GroupVersionKind(group=self.group, version=self.version, kind=self.kind)

    @property
    def description(self) -> str:
        return self.schema_.get("description", "")

    @property
    def group_display_name(self) -> str:
        if not self.group or self.group == "core":
            return "Core"
        return self.group

    def sorted_fields(self) -> list[DefinitionField]:
        """Return the fields ordered by name for display."""
        return sorted(self.fields, key=lambda f: f.name)

    def anchor(self, use_tags: bool = False) -> str:
        base = f"{self.name.lower()}-{self.version}"
        if use_tags:
            return base
        return f"{base}-{self.group}"

    def md_link(self, use_tags: bool = False) -> str:
        return f"[{self.name}](#{self.anchor(use_tags)})"

    def href_link(self, use_tags: bool = False) -> str:
        return f'<a href="#{self.anchor(use_tags)}">{self.name}</a>'

    def version_link(self, use_tags: bool = False) -> str:
        return f'<a href="#{self.anchor(use_tags)}">{self.version}</a>'


class ExampleText(BaseModel):
    """One rendered sample for a definition, as produced by a sample provider."""

    tab: str
    type: str
    text: str = ""
