"""Validate command -- check a command spec without generating anything."""

from __future__ import annotations

import typer

from hkdocs.exceptions import HkdocsError
from hkdocs.generator import count_nodes
from hkdocs.output import error, success


def validate_command(
    spec: str = typer.Argument(
        ..., help="Command spec: file path, URL, or '-' for stdin."
    ),
) -> None:
    """Load and validate a command spec.

    Exits with code 7 if the document can't be parsed or its command tree
    is malformed (cycles, misplaced full paths, non-mapping children).
    """
    from hkdocs.parser import load_command_spec

    try:
        command_spec = load_command_spec(spec)
    except HkdocsError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    visible, hidden = count_nodes(command_spec.cmd)
    success(f"Command spec is valid: {visible} visible, {hidden} hidden commands")
