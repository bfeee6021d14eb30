"""Turn flattened command paths into sidebar navigation entries.

Each path becomes a :class:`~hkdocs.models.NavEntry` whose label joins the
segments with ``label_separator`` and whose link joins them with
``link_separator`` under ``base_link``. With the default
:class:`~hkdocs.models.SiteConfig`, ``["cache", "clear"]`` becomes::

    {"text": "cache clear", "link": "/cli/cache/clear"}
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from hkdocs.generator.flatten import flatten
from hkdocs.models import CommandNode, CommandSpec, NavEntry, SiteConfig


def build_nav_entry(path: Sequence[str], config: SiteConfig) -> NavEntry:
    """Build the sidebar entry for one command path."""
    text = config.label_prefix + config.label_separator.join(path)
    link = config.base_link.rstrip("/") + "/" + config.link_separator.join(path)
    return NavEntry(text=text, link=link)


def build_sidebar(
    source: Union[CommandSpec, CommandNode],
    config: SiteConfig | None = None,
) -> list[NavEntry]:
    """Build the ordered sidebar for a whole command spec.

    Args:
        source: A :class:`CommandSpec` or its root :class:`CommandNode`.
        config: Link and label settings. Defaults to :class:`SiteConfig`.

    Returns:
        One :class:`NavEntry` per listed command, in flatten order.
    """
    config = config or SiteConfig()
    root = source.cmd if isinstance(source, CommandSpec) else source
    return [
        build_nav_entry(path, config)
        for path in flatten(root, include_hidden=config.include_hidden)
    ]


def sidebar_to_json(entries: Sequence[NavEntry]) -> list[dict[str, Any]]:
    """Return *entries* as plain dicts ready for ``json.dumps``."""
    return [entry.model_dump() for entry in entries]
