"""Exception hierarchy for apiref.

All exceptions inherit from :class:`ApirefError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`apiref.exit_codes`.
The top-level error handler in :func:`apiref.app.main` catches
``ApirefError`` and exits with the appropriate code.

Subclass hierarchy::

    ApirefError (exit 1)
    +-- InvalidUsageError       (exit 2)
    +-- NotFoundError           (exit 4)
    +-- SpecParseError          (exit 7)
    |   +-- DefinitionNameError (exit 7)
    +-- ConfigError             (exit 1)
"""

from apiref.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_SPEC_PARSE_ERROR,
)


class ApirefError(Exception):
    """Base exception for all apiref errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ApirefError):
    """Raised for invalid CLI arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class NotFoundError(ApirefError):
    """Raised when a requested definition key is not in the resolved model."""

    exit_code = EXIT_NOT_FOUND


class SpecParseError(ApirefError):
    """Raised when the OpenAPI spec cannot be parsed or fails validation."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class DefinitionNameError(SpecParseError):
    """Raised when a definition name matches none of the recognised shapes.

    This is the one fatal condition of the resolution engine: the input
    document is not shaped like the API surface the model expects, so
    no partial registry is produced.

    Args:
        name: The fully-qualified definition name that could not be parsed.
    """

    def __init__(self, name: str):
        super().__init__(f"Could not locate group for definition '{name}'")
        self.name = name


class ConfigError(ApirefError):
    """Raised for configuration problems (invalid YAML, failed validation)."""

    exit_code = EXIT_GENERIC_FAILURE
