"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~hkdocs.exceptions.HkdocsError` subclass.
Documentation build scripts can inspect the exit code to tell a broken
command spec apart from a bad invocation without parsing stderr.

Example::

    $ hkdocs sidebar docs/cli/commands.json
    $ echo $?
    7   # EXIT_SPEC_PARSE_ERROR -- the command spec is malformed
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_SPEC_PARSE_ERROR = 7
"""The command specification could not be loaded, parsed, or validated."""

EXIT_INTERRUPTED = 130
"""The run was cancelled with Ctrl-C."""
