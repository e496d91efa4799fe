"""apiref -- Build a cross-referenced documentation model from OpenAPI specs.

This package reads the schema definitions of a large, versioned REST API
surface (Kubernetes style) and resolves them into an in-memory graph of
:class:`~apiref.models.Definition` objects ready to be rendered as API
reference documentation.

Typical workflow::

    apiref inspect definitions --spec swagger.json
    apiref inspect show apps.v1beta1.Deployment --spec swagger.json

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: Docs configuration loading and XDG data paths.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    parser: Spec loading and definition identity parsing.
    graph: Definition registry, field resolution, ranking, and relations.
    samples: Sample-provider interface and aggregation.
"""

__version__ = "0.1.0"
