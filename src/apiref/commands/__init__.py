"""Built-in CLI sub-commands for apiref.

* :mod:`~apiref.commands.inspect` -- list definitions, show one resolved
  definition, and print the table of contents.
"""
