"""Sample providers and the aggregator that queries them.

Sub-modules:

* :mod:`~apiref.samples.base` -- The :class:`SampleProvider` interface.
* :mod:`~apiref.samples.aggregator` -- :func:`get_samples`, the fan-out.
* :mod:`~apiref.samples.skeleton` -- A YAML manifest skeleton provider.
"""

from apiref.samples.aggregator import get_samples
from apiref.samples.base import SampleProvider
from apiref.samples.skeleton import YamlSkeletonProvider

__all__ = ["get_samples", "SampleProvider", "YamlSkeletonProvider"]
