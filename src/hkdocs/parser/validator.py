"""Validate a raw command spec and build typed :class:`CommandNode` records.

The raw document comes straight from :func:`~hkdocs.parser.loader.load_spec`
and is only trusted to be a mapping. This module walks it depth-first and
fails fast with :class:`~hkdocs.exceptions.SpecParseError` when:

* a node is its own ancestor (possible with YAML anchors and aliases),
* ``subcommands`` or one of its children is not a mapping,
* a child declares a full path that does not match its position: it must
  extend the parent's path by exactly one segment, equal to the child's key.

Children that declare no full path get one derived from their position.
Sibling order is kept exactly as it appears in the document.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from hkdocs.exceptions import SpecParseError
from hkdocs.models import CommandNode, CommandSpec

logger = logging.getLogger(__name__)

_PATH_KEYS = ("full_path", "fullPath", "full_cmd")
_SPEC_KEYS = ("name", "bin", "version", "about")
_HIDDEN_KEYS = ("hidden", "hide")


def build_command_spec(raw: dict[str, Any]) -> CommandSpec:
    """Build a :class:`CommandSpec` from a loaded document.

    Documents in the ``usage`` layout nest the root command under ``cmd``;
    anything else is treated as the root node itself.

    Raises:
        SpecParseError: If the tree is malformed.
    """
    if "cmd" in raw:
        root_raw = raw["cmd"]
        meta = {key: raw[key] for key in _SPEC_KEYS if raw.get(key) is not None}
    else:
        root_raw = raw
        meta = {}

    if not isinstance(root_raw, dict):
        raise SpecParseError(
            f"Invalid command spec: root command must be a mapping "
            f"(got {type(root_raw).__name__})"
        )

    root = build_command_node(root_raw)
    try:
        spec = CommandSpec(**meta, cmd=root)
    except ValidationError as exc:
        raise SpecParseError(f"Invalid command spec metadata: {exc}") from exc

    logger.debug("Built command spec '%s'", spec.name or spec.bin or "<unnamed>")
    return spec


def build_command_node(
    raw: dict[str, Any],
    *,
    path: tuple[str, ...] = (),
) -> CommandNode:
    """Validate *raw* as the root of a command tree and build its node.

    Args:
        raw: The root command mapping.
        path: Path of the root when it sits below the real tree root. A full
            path declared on the root itself takes precedence.

    Raises:
        SpecParseError: On cycles, non-mapping children, or full paths that
            do not match the node's position in the tree.
    """
    declared = _declared_path(raw, path)
    root_path = tuple(declared) if declared is not None else path
    return _build(raw, root_path, key=None, ancestors=frozenset())


def _build(
    raw: dict[str, Any],
    path: tuple[str, ...],
    key: Optional[str],
    ancestors: frozenset[int],
) -> CommandNode:
    if id(raw) in ancestors:
        raise SpecParseError(
            f"Invalid command spec at '{_label(path)}': command is its own ancestor"
        )
    ancestors = ancestors | {id(raw)}

    subs_raw = raw.get("subcommands")
    if subs_raw is None:
        subs_raw = {}
    if not isinstance(subs_raw, dict):
        raise SpecParseError(
            f"Invalid command spec at '{_label(path)}': 'subcommands' must be a "
            f"mapping (got {type(subs_raw).__name__})"
        )

    children: dict[str, CommandNode] = {}
    for child_key, child_raw in subs_raw.items():
        if not isinstance(child_key, str):
            raise SpecParseError(
                f"Invalid command spec at '{_label(path)}': subcommand name "
                f"{child_key!r} must be a string"
            )
        child_path = path + (child_key,)
        if not isinstance(child_raw, dict):
            raise SpecParseError(
                f"Invalid command spec at '{_label(child_path)}': command must be "
                f"a mapping (got {type(child_raw).__name__})"
            )
        _check_declared_path(child_raw, child_path)
        children[child_key] = _build(child_raw, child_path, child_key, ancestors)

    fields = {
        k: v
        for k, v in raw.items()
        if k not in _PATH_KEYS
        and k != "subcommands"
        and not (k in _HIDDEN_KEYS and v is None)
    }
    fields.setdefault("name", key or "")
    try:
        return CommandNode.model_validate(
            {**fields, "full_path": list(path), "subcommands": children}
        )
    except ValidationError as exc:
        raise SpecParseError(
            f"Invalid command spec at '{_label(path)}': {exc}"
        ) from exc


def _declared_path(raw: dict[str, Any], path: tuple[str, ...]) -> Optional[list[str]]:
    """Return the full path the node declares, or ``None`` when it has none."""
    for key in _PATH_KEYS:
        if key in raw and raw[key] is not None:
            value = raw[key]
            if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
                raise SpecParseError(
                    f"Invalid command spec at '{_label(path)}': '{key}' must be a "
                    f"list of strings"
                )
            return value
    return None


def _check_declared_path(raw: dict[str, Any], expected: tuple[str, ...]) -> None:
    declared = _declared_path(raw, expected)
    if declared is None:
        return
    where = f"Invalid command spec at '{_label(expected)}'"
    if len(declared) != len(expected):
        raise SpecParseError(
            f"{where}: full path {declared!r} has {len(declared)} segments, "
            f"expected {len(expected)}"
        )
    if declared[-1] != expected[-1]:
        raise SpecParseError(
            f"{where}: full path ends with '{declared[-1]}' but the command is "
            f"registered as '{expected[-1]}'"
        )
    if tuple(declared[:-1]) != expected[:-1]:
        raise SpecParseError(
            f"{where}: full path {declared!r} does not extend parent path "
            f"{list(expected[:-1])!r}"
        )


def _label(path: tuple[str, ...]) -> str:
    return " ".join(path) or "<root>"


def load_command_spec(source: str) -> CommandSpec:
    """Load *source* with :func:`~hkdocs.parser.loader.load_spec` and validate it."""
    from hkdocs.parser.loader import load_spec

    return build_command_spec(load_spec(source))
