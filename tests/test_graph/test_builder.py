"""Tests for apiref.graph.builder -- the full resolution pipeline."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from apiref.exceptions import DefinitionNameError
from apiref.graph import build_definitions
from apiref.graph.builder import derive_relations, visit_definitions
from apiref.graph.registry import Definitions
from apiref.models import Definition, DocsConfig


class TestVisitDefinitions:
    def test_skips_utility_types(self, swagger_raw: dict[str, Any]) -> None:
        seen: list[Definition] = []
        visit_definitions([swagger_raw], seen.append)
        names = {d.full_name for d in seen}
        assert len(seen) == 14
        assert "io.k8s.apimachinery.pkg.util.intstr.IntOrString" not in names
        assert "io.k8s.apimachinery.pkg.runtime.RawExtension" not in names

    def test_reads_resource_extension(self, swagger_raw: dict[str, Any]) -> None:
        seen: list[Definition] = []
        visit_definitions([swagger_raw], seen.append)
        by_key = {d.key: d for d in seen}
        assert by_key["apps.v1beta1.Deployment"].resource == "deployments"
        assert by_key["core.v1.Container"].resource is None

    def test_keeps_raw_schema(self, swagger_raw: dict[str, Any]) -> None:
        seen: list[Definition] = []
        visit_definitions([swagger_raw], seen.append)
        pod = next(d for d in seen if d.key == "core.v1.Pod")
        assert pod.description.startswith("Pod is a collection")
        assert pod.full_name == "io.k8s.kubernetes.pkg.api.v1.Pod"


class TestBuildDefinitions:
    def test_registry_size(self, registry: Definitions) -> None:
        assert len(registry) == 14

    def test_default_config(self, swagger_raw: dict[str, Any]) -> None:
        registry = build_definitions([swagger_raw])
        assert registry.get_by_key("apps.v1beta1.DeploymentSpec").is_inlined
        assert not any(d.in_toc for d in registry)

    def test_forward_references_resolve(self, swagger_raw: dict[str, Any]) -> None:
        # Referencing definition listed before its target
        reordered = copy.deepcopy(swagger_raw)
        definitions = reordered["definitions"]
        reordered["definitions"] = dict(reversed(list(definitions.items())))
        registry = build_definitions([reordered])
        template = next(
            f for f in registry.get_by_key("apps.v1beta1.DeploymentSpec").fields
            if f.name == "template"
        )
        assert template.reference == "core.v1.PodTemplateSpec"

    def test_multiple_documents_merge(self, swagger_raw: dict[str, Any]) -> None:
        extra = {
            "swagger": "2.0",
            "definitions": {
                "io.k8s.kubernetes.pkg.apis.apps.v1.Deployment": {
                    "properties": {"kind": {"type": "string"}}
                }
            },
        }
        registry = build_definitions([swagger_raw, extra])
        assert len(registry) == 15
        assert [d.version for d in registry.versions_of("Deployment")] == [
            "v1",
            "v1beta1",
            "v1beta1",
        ]
        assert registry.get_by_key("apps.v1beta1.Deployment").is_old_version
        assert registry.get_by_key("apps.v1beta1.Deployment").newer_versions == [
            "apps.v1.Deployment"
        ]

    def test_malformed_name_aborts(self, swagger_raw: dict[str, Any]) -> None:
        broken = copy.deepcopy(swagger_raw)
        broken["definitions"]["com.example.widgets.v1.Widget"] = {}
        with pytest.raises(DefinitionNameError, match="com.example.widgets.v1.Widget"):
            build_definitions([broken])

    def test_malformed_field_reference_aborts(self, swagger_raw: dict[str, Any]) -> None:
        broken = copy.deepcopy(swagger_raw)
        pod = broken["definitions"]["io.k8s.kubernetes.pkg.api.v1.Pod"]
        pod["properties"]["widget"] = {"$ref": "#/definitions/com.example.widgets.v1.Widget"}
        with pytest.raises(DefinitionNameError):
            build_definitions([broken])

    def test_openapi3_components(self) -> None:
        doc = {
            "openapi": "3.0.0",
            "components": {
                "schemas": {
                    "io.k8s.kubernetes.pkg.api.v1.Pod": {
                        "properties": {
                            "spec": {"$ref": "#/components/schemas/io.k8s.kubernetes.pkg.api.v1.PodSpec"}
                        }
                    },
                    "io.k8s.kubernetes.pkg.api.v1.PodSpec": {"properties": {}},
                }
            },
        }
        registry = build_definitions([doc])
        assert registry.get_by_key("core.v1.Pod").inline == ["core.v1.PodSpec"]


class TestDeriveRelations:
    def test_new_rules_restore_toc_entries(
        self, registry: Definitions, docs_config: DocsConfig
    ) -> None:
        spec = registry.get_by_key("apps.v1beta1.DeploymentSpec")
        assert not spec.in_toc

        no_inlining = docs_config.model_copy(update={"inline_definitions": []})
        derive_relations(registry, no_inlining)
        assert spec.in_toc
        assert not spec.is_inlined
        assert registry.get_by_key("apps.v1beta1.Deployment").inline == []

        derive_relations(registry, docs_config)
        assert not spec.in_toc
        assert spec.is_inlined
        assert len(registry.get_by_key("apps.v1beta1.Deployment").inline) == 4

    def test_dropped_category_leaves_toc(
        self, registry: Definitions, docs_config: DocsConfig
    ) -> None:
        derive_relations(registry, docs_config.model_copy(update={"resource_categories": []}))
        assert not any(d.in_toc for d in registry)
