"""Flatten a command tree into the ordered list of documented command paths.

This is the core algorithm of hkdocs. Given the root
:class:`~hkdocs.models.CommandNode`, it walks the tree depth-first and
returns the full path of every command that belongs in the sidebar.

**Ordering**

Siblings are visited in the insertion order of ``subcommands``, which is the
order of the source document, never a sorted one. A parent's own entry comes
before its children's entries.

**Hidden commands**

A hidden command contributes no entry of its own, but its subtree is still
walked and its visible descendants are listed. This lets a hidden group
command organise children without having a page of its own. The root is
never listed.
"""

from __future__ import annotations

from typing import Iterator

from hkdocs.models import CommandNode


def iter_visible(
    node: CommandNode,
    *,
    include_hidden: bool = False,
) -> Iterator[tuple[list[str], CommandNode]]:
    """Yield ``(full_path, child)`` for every listed descendant of *node*.

    Pre-order, siblings in insertion order. A copy of each path is yielded
    so callers can't mutate the tree through it.
    """
    for child in node.subcommands.values():
        if include_hidden or not child.hidden:
            yield list(child.full_path), child
        yield from iter_visible(child, include_hidden=include_hidden)


def flatten(node: CommandNode, *, include_hidden: bool = False) -> list[list[str]]:
    """Return the full paths of all listed commands below *node*.

    Args:
        node: The tree root. Only its descendants are listed.
        include_hidden: Also list hidden commands, for preview builds.

    Returns:
        A fresh list of paths in depth-first, pre-order sequence.

    Example::

        >>> flatten(root)
        [['cache'], ['cache', 'clear'], ['check'], ['run'], ['run', 'pre-commit']]
    """
    return [path for path, _ in iter_visible(node, include_hidden=include_hidden)]


def count_nodes(node: CommandNode) -> tuple[int, int]:
    """Return ``(visible, hidden)`` counts of the descendants of *node*."""
    visible = hidden = 0
    for child in node.subcommands.values():
        if child.hidden:
            hidden += 1
        else:
            visible += 1
        sub_visible, sub_hidden = count_nodes(child)
        visible += sub_visible
        hidden += sub_hidden
    return visible, hidden
