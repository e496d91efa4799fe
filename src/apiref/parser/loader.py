"""Load OpenAPI specifications from a URL, local file, or stdin.

This module handles all I/O for fetching raw OpenAPI documents and converting
them into Python dictionaries.  It supports both JSON and YAML formats with
automatic format detection.

The public functions are:

* :func:`load_spec` -- Load and parse a spec from any supported source.
* :func:`validate_spec_version` -- Check and return the ``swagger`` or
  ``openapi`` version string.
* :func:`get_schema_definitions` -- Return the document's map of
  fully-qualified schema names to raw schemas.

After loading, the raw dicts are passed to
:func:`~apiref.graph.builder.build_definitions`.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from apiref.exceptions import SpecParseError


def load_spec(source: str) -> dict[str, Any]:
    """Load an OpenAPI spec from URL, file path, or stdin ('-').

    Supports JSON and YAML formats.
    Auto-detects format from content/extension.

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The parsed spec as a dictionary.

    Raises:
        SpecParseError: If the source cannot be loaded or parsed.
    """
    if source == "-":
        return _load_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def _load_from_stdin() -> dict[str, Any]:
    """Read spec from stdin, parsing as JSON and then YAML."""
    try:
        content = sys.stdin.read()
    except Exception as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecParseError("No input received from stdin")

    return _parse_content(content, hint="stdin")


def _load_from_url(url: str) -> dict[str, Any]:
    """Fetch spec from URL. Supports JSON and YAML responses.

    Raises:
        SpecParseError: If the URL cannot be fetched or content cannot be parsed.
    """
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch spec from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    hint = ""
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"

    return _parse_content(response.text, hint=hint)


def _load_from_file(path: str) -> dict[str, Any]:
    """Load spec from local file.

    Supports .json, .yaml, and .yml extensions. Falls back to content-based
    detection if the extension is not recognized.

    Raises:
        SpecParseError: If the file cannot be read or content cannot be parsed.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Spec file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecParseError(f"Failed to read spec file {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"Spec file is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    return _parse_content(content, hint=hint)


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    Tries JSON first (unless hint is 'yaml'), then falls back to YAML.
    Swagger documents for large APIs are usually JSON, and JSON parsing is
    much faster than YAML for them.

    Raises:
        SpecParseError: If the content cannot be parsed as either format.
    """
    json_error: Exception | None = None
    yaml_error: Exception | None = None

    if hint != "yaml":
        try:
            result = json.loads(content)
            if not isinstance(result, dict):
                raise SpecParseError(
                    "Spec must be a JSON/YAML object (got "
                    f"{type(result).__name__})"
                )
            return result
        except json.JSONDecodeError as exc:
            json_error = exc
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc

    try:
        result = yaml.safe_load(content)
        if not isinstance(result, dict):
            raise SpecParseError(
                "Spec must be a JSON/YAML object (got "
                f"{type(result).__name__ if result is not None else 'empty document'})"
            )
        return result
    except yaml.YAMLError as exc:
        yaml_error = exc

    msg = "Failed to parse spec as JSON or YAML"
    if json_error:
        msg += f"\n  JSON error: {json_error}"
    if yaml_error:
        msg += f"\n  YAML error: {yaml_error}"
    raise SpecParseError(msg)


def validate_spec_version(spec: dict[str, Any]) -> str:
    """Validate and return the document's Swagger/OpenAPI version string.

    Swagger 2.x documents keep their schemas under ``definitions``; OpenAPI
    3.x documents under ``components.schemas``. Both are accepted.

    Args:
        spec: The parsed spec dictionary.

    Returns:
        The version string (e.g., ``'2.0'``, ``'3.0.3'``).

    Raises:
        SpecParseError: If the version is missing or unsupported.
    """
    if "swagger" in spec:
        version_str = str(spec["swagger"])
        if version_str.startswith("2."):
            return version_str
        raise SpecParseError(f"Unsupported Swagger version: {version_str}")

    openapi_version = spec.get("openapi")
    if openapi_version is None:
        raise SpecParseError(
            "Missing 'swagger' or 'openapi' field. Is this an OpenAPI document?"
        )

    version_str = str(openapi_version)
    if version_str.startswith("3."):
        return version_str

    raise SpecParseError(
        f"Unsupported OpenAPI version: {version_str}. "
        "Only Swagger 2.x and OpenAPI 3.x are supported."
    )


def get_schema_definitions(spec: dict[str, Any]) -> dict[str, Any]:
    """Return the map of fully-qualified schema names to raw schemas.

    Returns an empty dict when the document declares no schemas.
    """
    if "definitions" in spec:
        definitions = spec["definitions"]
    else:
        definitions = spec.get("components", {}).get("schemas", {})
    if not isinstance(definitions, dict):
        raise SpecParseError(
            f"Schema definitions must be an object (got {type(definitions).__name__})"
        )
    return definitions
