"""Abstract base class for sample providers.

A sample provider renders example text for a definition in one format
(``kubectl`` commands, ``curl`` requests, a YAML manifest, ...). The core
only ever calls the three members declared here and never inspects a
provider's internals.

Example:
    Minimal provider implementation::

        class KubectlProvider(SampleProvider):
            @property
            def tab(self) -> str:
                return "kubectl"

            @property
            def sample_type(self) -> str:
                return "bash"

            def get_sample(self, definition):
                return f"kubectl get {definition.name.lower()}"
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from apiref.models import Definition


class SampleProvider(ABC):
    """Base class for all sample providers.

    Providers are registered as an ordered list and queried by
    :func:`~apiref.samples.aggregator.get_samples`; their order is the order
    of the rendered tabs.
    """

    @property
    @abstractmethod
    def tab(self) -> str:
        """Return the display name of the sample's tab (e.g. ``"kubectl"``)."""
        ...

    @property
    @abstractmethod
    def sample_type(self) -> str:
        """Return the format of the sample text, used for syntax highlighting."""
        ...

    @abstractmethod
    def get_sample(self, definition: Definition) -> str:
        """Render the sample text for *definition*.

        Implementations may raise or return an empty string when no sample
        is available; the aggregator turns either into an empty text.
        """
        ...
