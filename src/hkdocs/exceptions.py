"""Exception hierarchy for hkdocs.

All exceptions inherit from :class:`HkdocsError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`hkdocs.exit_codes`.
The top-level error handler in :func:`hkdocs.app.main` catches
``HkdocsError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    HkdocsError (exit 1)
    +-- SpecParseError      (exit 7)
    +-- ConfigError         (exit 1)
"""

from hkdocs.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_SPEC_PARSE_ERROR,
)


class HkdocsError(Exception):
    """Base exception for all hkdocs errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`hkdocs.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class SpecParseError(HkdocsError):
    """Raised when the command spec cannot be loaded, parsed, or fails validation."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ConfigError(HkdocsError):
    """Raised for configuration problems (invalid project file, bad override values)."""

    exit_code = EXIT_GENERIC_FAILURE
