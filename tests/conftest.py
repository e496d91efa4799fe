"""Shared test fixtures for apiref.

Provides reusable fixtures for loading the swagger fixture, building the
resolved registry, creating isolated config environments, managing output
state, and running CLI commands. These fixtures are automatically discovered
by pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from apiref.graph import Definitions, build_definitions
from apiref.models import DocsConfig, ResourceCategory, ResourceEntry
from apiref.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"
SWAGGER_SMALL = FIXTURES_DIR / "swagger_small.json"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale
    ("I/O operation on closed file").  Resetting forces a fresh manager
    to be created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Spec and registry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def swagger_raw() -> dict[str, Any]:
    """Load the raw swagger fixture dict."""
    with open(SWAGGER_SMALL) as f:
        return json.load(f)


@pytest.fixture
def docs_config() -> DocsConfig:
    """Default inline rules plus categories naming a missing and an inlined entry."""
    return DocsConfig(
        resource_categories=[
            ResourceCategory(
                name="Workloads",
                include="_workloads",
                resources=[
                    ResourceEntry(name="Deployment", version="v1beta1", group="apps"),
                    ResourceEntry(
                        name="Pod",
                        version="v1",
                        group="core",
                        description_note="Pods are usually created by controllers.",
                    ),
                    ResourceEntry(name="DeploymentSpec", version="v1beta1", group="apps"),
                    ResourceEntry(name="CronJob", version="v2alpha1", group="batch"),
                ],
            ),
            ResourceCategory(
                name="Autoscaling",
                resources=[
                    ResourceEntry(
                        name="HorizontalPodAutoscaler", version="v1", group="autoscaling"
                    ),
                ],
            ),
        ]
    )


@pytest.fixture
def registry(swagger_raw: dict[str, Any], docs_config: DocsConfig) -> Definitions:
    """The fully resolved registry built from the swagger fixture."""
    return build_definitions([swagger_raw], docs_config)


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_DATA_HOME to a subdirectory of tmp_path, clears
    APIREF_CONFIG_DIR and changes the working directory to tmp_path.
    """
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("APIREF_CONFIG_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
