"""Definition graph -- index, resolve, rank and relate schema definitions.

This sub-package is the second half of the apiref pipeline: taking loaded
OpenAPI documents and producing a :class:`~apiref.graph.registry.Definitions`
registry in which every definition carries its fields, version status and
relations to other definitions.

Typical usage::

    from apiref.graph import build_definitions

    definitions = build_definitions([raw_spec], docs_config)
    pod = definitions.get_by_key("core.v1.Pod")

Sub-modules:

* :mod:`~apiref.graph.registry` -- Key and kind indexes over definitions.
* :mod:`~apiref.graph.fields` -- Field extraction and reference resolution.
* :mod:`~apiref.graph.versions` -- Version precedence and superseded flags.
* :mod:`~apiref.graph.relations` -- Appears-in and inlining relations.
* :mod:`~apiref.graph.toc` -- Resource-category table of contents.
* :mod:`~apiref.graph.builder` -- Phase-ordered pipeline driver.
"""

from apiref.graph.builder import build_definitions, derive_relations
from apiref.graph.registry import Definitions

__all__ = ["build_definitions", "derive_relations", "Definitions"]
