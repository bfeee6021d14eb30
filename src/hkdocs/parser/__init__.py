"""Command spec parser -- load the generated document and validate its tree.

Typical usage::

    from hkdocs.parser import build_command_spec, load_spec

    raw = load_spec("docs/cli/commands.json")
    spec = build_command_spec(raw)

Sub-modules:

* :mod:`~hkdocs.parser.loader` -- I/O layer (URL, file, stdin) plus JSON/YAML
  format detection.
* :mod:`~hkdocs.parser.validator` -- Walks the raw mapping, rejects cycles
  and inconsistent paths, and builds :class:`~hkdocs.models.CommandNode`
  records.
"""

from hkdocs.parser.loader import load_spec
from hkdocs.parser.validator import (
    build_command_node,
    build_command_spec,
    load_command_spec,
)

__all__ = [
    "load_spec",
    "build_command_node",
    "build_command_spec",
    "load_command_spec",
]
