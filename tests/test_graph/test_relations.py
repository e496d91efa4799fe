"""Tests for apiref.graph.relations -- appears-in and inlining."""

from __future__ import annotations

from apiref.graph.registry import Definitions
from apiref.graph.relations import (
    derive_appears_in,
    derive_inlined,
    find_inline_owner,
    inline_owner_kinds,
    sort_relations,
)
from apiref.models import Definition, InlineDefinitionRule, default_inline_definitions


def _registry(*keys: str) -> Definitions:
    registry = Definitions()
    for key in keys:
        group, version, kind = key.split(".")
        registry.put(Definition(name=kind, group=group, version=version, kind=kind))
    registry.build_kind_index()
    return registry


class TestAppearsIn:
    def test_object_meta_appears_in_every_owner(self, registry: Definitions) -> None:
        meta = registry.get_by_key("meta.v1.ObjectMeta")
        assert meta.appears_in == [
            "apps.v1beta1.Deployment",
            "extensions.v1beta1.Deployment",
            "autoscaling.v1.HorizontalPodAutoscaler",
            "autoscaling.v2alpha1.HorizontalPodAutoscaler",
            "core.v1.Pod",
            "core.v1.PodTemplateSpec",
        ]
        assert meta.found_in_field

    def test_array_reference_counts(self, registry: Definitions) -> None:
        container = registry.get_by_key("core.v1.Container")
        assert container.appears_in == ["core.v1.PodSpec"]

    def test_unreferenced_definition(self, registry: Definitions) -> None:
        deployment = registry.get_by_key("apps.v1beta1.Deployment")
        assert deployment.appears_in == []
        assert not deployment.found_in_field

    def test_every_reference_is_mirrored(self, registry: Definitions) -> None:
        edges = 0
        for definition in registry:
            for field in definition.fields:
                if field.reference is None:
                    continue
                edges += 1
                target = registry.get_by_key(field.reference)
                assert definition.key in target.appears_in, (definition.key, field.name)
        assert edges > 0

    def test_rederiving_does_not_duplicate(self, registry: Definitions) -> None:
        derive_appears_in(registry)
        sort_relations(registry)
        assert registry.get_by_key("core.v1.PodSpec").appears_in == [
            "core.v1.Pod",
            "core.v1.PodTemplateSpec",
        ]


class TestInlineOwnerKinds:
    def test_suffix_rule(self) -> None:
        rules = [InlineDefinitionRule(name="Spec", match="${resource}Spec")]
        assert [owner for _, owner in inline_owner_kinds("DeploymentSpec", rules)] == [
            "Deployment"
        ]

    def test_prefix_rule(self) -> None:
        rules = [
            InlineDefinitionRule(name="RollingUpdate", match="RollingUpdate${resource}")
        ]
        assert [owner for _, owner in inline_owner_kinds("RollingUpdateDeployment", rules)] == [
            "Deployment"
        ]

    def test_empty_owner_is_never_produced(self) -> None:
        rules = [InlineDefinitionRule(name="Spec", match="${resource}Spec")]
        assert list(inline_owner_kinds("Spec", rules)) == []

    def test_rules_yield_in_declaration_order(self) -> None:
        rules = [
            InlineDefinitionRule(name="Spec", match="${resource}Spec"),
            InlineDefinitionRule(name="ListSpec", match="${resource}ListSpec"),
        ]
        assert [owner for _, owner in inline_owner_kinds("FooListSpec", rules)] == [
            "FooList",
            "Foo",
        ]


class TestFindInlineOwner:
    def test_first_rule_with_registered_owner_wins(self) -> None:
        registry = _registry("g.v1.Foo", "g.v1.FooList", "g.v1.FooListSpec")
        rules = [
            InlineDefinitionRule(name="Spec", match="${resource}Spec"),
            InlineDefinitionRule(name="ListSpec", match="${resource}ListSpec"),
        ]
        child = registry.get_by_key("g.v1.FooListSpec")
        assert find_inline_owner(child, registry, rules).key == "g.v1.FooList"

    def test_falls_through_to_later_rule(self) -> None:
        registry = _registry("g.v1.Foo", "g.v1.FooListSpec")
        rules = [
            InlineDefinitionRule(name="Spec", match="${resource}Spec"),
            InlineDefinitionRule(name="ListSpec", match="${resource}ListSpec"),
        ]
        child = registry.get_by_key("g.v1.FooListSpec")
        assert find_inline_owner(child, registry, rules).key == "g.v1.Foo"

    def test_owner_must_share_group_and_version(self) -> None:
        registry = _registry("g.v1.Foo", "g.v2.FooSpec", "h.v1.FooSpec")
        rules = default_inline_definitions()
        assert find_inline_owner(registry.get_by_key("g.v2.FooSpec"), registry, rules) is None
        assert find_inline_owner(registry.get_by_key("h.v1.FooSpec"), registry, rules) is None


class TestDeriveInlined:
    def test_fixture_inlining(self, registry: Definitions) -> None:
        deployment = registry.get_by_key("apps.v1beta1.Deployment")
        assert deployment.inline == [
            "apps.v1beta1.DeploymentSpec",
            "apps.v1beta1.DeploymentStatus",
            "apps.v1beta1.DeploymentStrategy",
            "apps.v1beta1.RollingUpdateDeployment",
        ]
        assert registry.get_by_key("extensions.v1beta1.Deployment").inline == [
            "extensions.v1beta1.DeploymentSpec"
        ]
        assert registry.get_by_key("core.v1.Pod").inline == ["core.v1.PodSpec"]

    def test_inlined_definitions_leave_the_toc(self, registry: Definitions) -> None:
        spec = registry.get_by_key("apps.v1beta1.DeploymentSpec")
        assert spec.is_inlined
        assert not spec.in_toc
        assert spec.found_in_field

    def test_unmatched_owner_is_not_inlined(self, registry: Definitions) -> None:
        template = registry.get_by_key("core.v1.PodTemplateSpec")
        assert not template.is_inlined
        assert registry.get_by_key("core.v1.Pod").is_inlined is False

    def test_rederiving_is_stable(self, registry: Definitions) -> None:
        derive_inlined(registry, default_inline_definitions())
        sort_relations(registry)
        assert len(registry.get_by_key("apps.v1beta1.Deployment").inline) == 4

    def test_no_rules_means_no_inlining(self, registry: Definitions) -> None:
        derive_inlined(registry, [])
        assert not any(d.is_inlined for d in registry)
        assert all(d.inline == [] for d in registry)
