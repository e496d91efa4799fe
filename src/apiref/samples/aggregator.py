"""Fan a definition out to every sample provider and collect the results."""

from __future__ import annotations

import logging
from typing import Sequence

from apiref.models import Definition, ExampleText
from apiref.samples.base import SampleProvider

logger = logging.getLogger(__name__)


def get_samples(
    definition: Definition, providers: Sequence[SampleProvider]
) -> list[ExampleText]:
    """Return one :class:`~apiref.models.ExampleText` per provider, in order.

    A provider that raises or returns nothing contributes an empty text; the
    failure never reaches the caller and never aborts the other providers.

    Args:
        definition: The definition to render samples for.
        providers: Sample providers in registration order.

    Returns:
        A list the same length as *providers*.
    """
    samples: list[ExampleText] = []
    for provider in providers:
        try:
            text = provider.get_sample(definition) or ""
        except Exception as exc:
            logger.debug(
                "No %s sample for %s: %s", provider.tab, definition.key, exc
            )
            text = ""
        samples.append(ExampleText(tab=provider.tab, type=provider.sample_type, text=text))
    return samples
