"""Tests for apiref.samples -- the sample aggregator and providers."""

from __future__ import annotations

import pytest

from apiref.graph.registry import Definitions
from apiref.models import Definition
from apiref.samples import SampleProvider, get_samples


class _StaticProvider(SampleProvider):
    def __init__(self, tab: str, text: str) -> None:
        self._tab = tab
        self._text = text

    @property
    def tab(self) -> str:
        return self._tab

    @property
    def sample_type(self) -> str:
        return "bash"

    def get_sample(self, definition: Definition) -> str:
        return self._text.format(kind=definition.kind.lower())


class _FailingProvider(_StaticProvider):
    def get_sample(self, definition: Definition) -> str:
        raise KeyError(definition.key)


class _EmptyProvider(_StaticProvider):
    def get_sample(self, definition: Definition) -> str:
        return None  # type: ignore[return-value]


@pytest.fixture
def pod(registry: Definitions) -> Definition:
    return registry.get_by_key("core.v1.Pod")


class TestGetSamples:
    def test_one_sample_per_provider_in_order(self, pod: Definition) -> None:
        providers = [
            _StaticProvider("kubectl", "kubectl get {kind}"),
            _StaticProvider("curl", "curl /api/v1/{kind}s"),
        ]
        samples = get_samples(pod, providers)
        assert [s.tab for s in samples] == ["kubectl", "curl"]
        assert samples[0].text == "kubectl get pod"
        assert samples[0].type == "bash"

    def test_failing_provider_yields_empty_text(self, pod: Definition) -> None:
        providers = [
            _FailingProvider("broken", ""),
            _StaticProvider("kubectl", "kubectl get {kind}"),
        ]
        samples = get_samples(pod, providers)
        assert samples[0].tab == "broken"
        assert samples[0].text == ""
        assert samples[1].text == "kubectl get pod"

    def test_empty_result_yields_empty_text(self, pod: Definition) -> None:
        (sample,) = get_samples(pod, [_EmptyProvider("empty", "")])
        assert sample.text == ""

    def test_no_providers(self, pod: Definition) -> None:
        assert get_samples(pod, []) == []

    def test_provider_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            SampleProvider()  # type: ignore[abstract]
