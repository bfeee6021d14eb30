"""Sidebar generator -- flatten the command tree and build navigation entries.

Typical usage::

    from hkdocs.generator import build_sidebar, flatten

    paths = flatten(spec.cmd)
    entries = build_sidebar(spec, SiteConfig(base_link="/cli"))

Sub-modules:

* :mod:`~hkdocs.generator.flatten` -- The core depth-first walk that lists
  every documented command path.
* :mod:`~hkdocs.generator.sidebar` -- Maps paths to label/link pairs.
"""

from hkdocs.generator.flatten import count_nodes, flatten, iter_visible
from hkdocs.generator.sidebar import build_nav_entry, build_sidebar, sidebar_to_json

__all__ = [
    "flatten",
    "iter_visible",
    "count_nodes",
    "build_nav_entry",
    "build_sidebar",
    "sidebar_to_json",
]
