"""Inspect commands -- examine the resolved documentation model.

Provides the ``apiref inspect`` sub-command group with read-only commands
for viewing the model built from one or more OpenAPI documents: the
definition list, a single resolved definition, and the table of contents.
All sub-commands load the documents, load the docs config, build the
registry, and present the data in table or structured output format.
"""

from __future__ import annotations

from typing import Optional

import typer

from apiref.exceptions import ApirefError
from apiref.exit_codes import EXIT_NOT_FOUND
from apiref.graph import Definitions, build_definitions
from apiref.models import Definition, DocsConfig
from apiref.output import debug, error, format_response, get_output, info


inspect_app = typer.Typer(no_args_is_help=True)


_SPEC_OPTION_HELP = "OpenAPI document (file path, URL, or '-'). Repeatable."


def _build(
    specs: list[str], config_dir: Optional[str]
) -> tuple[Definitions, DocsConfig]:
    """Load every document in *specs* and build the resolved registry.

    Raises:
        typer.Exit: With the error's exit code when loading, config or
            resolution fails.
    """
    from apiref.config import load_docs_config, resolve_config_dir
    from apiref.parser import load_spec, validate_spec_version

    try:
        config = load_docs_config(resolve_config_dir(config_dir))
        documents = []
        for source in specs:
            raw = load_spec(source)
            version = validate_spec_version(raw)
            debug(f"Loaded {source} (version {version})")
            documents.append(raw)
        registry = build_definitions(documents, config)
    except ApirefError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    debug(f"Resolved {len(registry)} definitions")
    return registry, config


def _yes(flag: bool) -> str:
    return "Yes" if flag else ""


@inspect_app.command("definitions")
def inspect_definitions(
    spec: list[str] = typer.Option(..., "--spec", "-s", help=_SPEC_OPTION_HELP),
    config_dir: Optional[str] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml."
    ),
) -> None:
    """List all resolved definitions.

    Example::

        apiref inspect definitions --spec swagger.json
    """
    registry, _ = _build(spec, config_dir)

    headers = ["Key", "Kind", "Version", "Group", "TOC", "Inlined", "Old"]
    rows: list[list[str]] = []
    for definition in registry.all_definitions():
        rows.append([
            definition.key,
            definition.kind,
            definition.version,
            definition.group_display_name,
            _yes(definition.in_toc),
            _yes(definition.is_inlined),
            _yes(definition.is_old_version),
        ])

    get_output().print_table(headers, rows, title=f"Definitions ({len(rows)})")


def _describe(
    definition: Definition, registry: Definitions, use_tags: bool
) -> dict:
    from apiref.samples import YamlSkeletonProvider, get_samples

    def links(keys: list[str]) -> list[str]:
        return [d.md_link(use_tags) for d in registry.resolve(keys)]

    samples = get_samples(definition, [YamlSkeletonProvider(registry)])
    return {
        "key": definition.key,
        "kind": definition.kind,
        "group": definition.group_display_name,
        "version": definition.version,
        "resource": definition.resource,
        "description": definition.description,
        "anchor": definition.anchor(use_tags),
        "in_toc": definition.in_toc,
        "is_inlined": definition.is_inlined,
        "is_old_version": definition.is_old_version,
        "fields": [
            f.model_dump(exclude_none=True) for f in definition.sorted_fields()
        ],
        "appears_in": links(definition.appears_in),
        "inline": links(definition.inline),
        "other_versions": [
            d.version_link(use_tags) for d in registry.resolve(definition.other_versions)
        ],
        "newer_versions": links(definition.newer_versions),
        "samples": [s.model_dump() for s in samples],
    }


@inspect_app.command("show")
def inspect_show(
    key: str = typer.Argument(..., help="Definition key, e.g. apps.v1beta1.Deployment."),
    spec: list[str] = typer.Option(..., "--spec", "-s", help=_SPEC_OPTION_HELP),
    config_dir: Optional[str] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml."
    ),
    use_tags: bool = typer.Option(
        False, "--use-tags", help="Render anchors without the group suffix."
    ),
) -> None:
    """Show one resolved definition with its fields and relations.

    Example::

        apiref inspect show apps.v1beta1.Deployment --spec swagger.json
    """
    registry, _ = _build(spec, config_dir)

    definition = registry.get_by_key(key)
    if definition is None:
        error(f"Definition '{key}' not found")
        raise typer.Exit(code=EXIT_NOT_FOUND)

    format_response(_describe(definition, registry, use_tags))


@inspect_app.command("toc")
def inspect_toc(
    spec: list[str] = typer.Option(..., "--spec", "-s", help=_SPEC_OPTION_HELP),
    config_dir: Optional[str] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml."
    ),
    use_tags: bool = typer.Option(
        False, "--use-tags", help="Render anchors without the group suffix."
    ),
) -> None:
    """Show the table of contents built from the resource categories.

    Example::

        apiref inspect toc --spec swagger.json --config-dir docs/
    """
    from apiref.graph.toc import build_toc

    registry, config = _build(spec, config_dir)

    toc = build_toc(registry, config.resource_categories)
    if not toc:
        info("No resource categories configured.")
        return

    headers = ["Category", "Definition", "Anchor", "Note"]
    rows: list[list[str]] = []
    for category in toc:
        for entry in category.entries:
            definition = registry.get_by_key(entry.key)
            rows.append([
                category.name,
                entry.key,
                definition.anchor(use_tags) if definition else "-",
                entry.description_warning or entry.description_note or "",
            ])

    get_output().print_table(headers, rows, title="Table of Contents")
