"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~apiref.exceptions.ApirefError` subclass.

Example::

    $ apiref inspect show core.v9.Nothing --spec swagger.json
    $ echo $?
    4   # EXIT_NOT_FOUND -- no definition with that key
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_NOT_FOUND = 4
"""The requested definition does not exist in the resolved model."""

EXIT_SPEC_PARSE_ERROR = 7
"""The OpenAPI specification could not be parsed or contains malformed definition names."""
