"""Canonical Pydantic models shared across all hkdocs modules.

This is the single source of truth for data shapes in the project. The models
fall into two groups:

**Command spec models** -- produced by the spec validator and consumed by the
flattener:
    :class:`CommandNode` and :class:`CommandSpec`.

**Site models** -- configuration and output of the navigation builder:
    :class:`SiteConfig`, and :class:`NavEntry`.

Command spec models accept the key spellings found in the wild (``full_cmd``
and ``hide`` from the ``usage`` JSON output, ``fullPath``/``hidden`` from
hand-written specs) and ignore every other key, since the generated document
also carries args, flags, and examples that the sidebar does not need.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# --- Command spec ---


class CommandNode(BaseModel):
    """One node in the command hierarchy.

    ``subcommands`` preserves the insertion order of the source document;
    that order is the order of the generated sidebar.

    Example::

        CommandNode(
            name="cache",
            full_path=["cache"],
            subcommands={
                "clear": CommandNode(name="clear", full_path=["cache", "clear"]),
            },
        )
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: str = ""
    full_path: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("full_path", "fullPath", "full_cmd"),
        description="Command names from the tree root down to this node",
    )
    hidden: bool = Field(
        default=False,
        validation_alias=AliasChoices("hidden", "hide"),
        description="Exclude this node's own entry from navigation",
    )
    help: Optional[str] = None
    aliases: list[str] = Field(default_factory=list)
    subcommands: dict[str, CommandNode] = Field(default_factory=dict)


class CommandSpec(BaseModel):
    """Top-level command specification document.

    Mirrors the ``usage`` JSON layout where the root command is nested
    under ``cmd``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    bin: Optional[str] = None
    version: Optional[str] = None
    about: Optional[str] = None
    cmd: CommandNode = Field(default_factory=CommandNode)


# --- Site config ---


class SiteConfig(BaseModel):
    """Settings for turning flattened command paths into sidebar entries.

    Loaded from ``./hkdocs.json`` and overridden by environment variables
    and CLI flags (see :func:`~hkdocs.config.resolve_site_config`).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_link: str = Field(
        default="/cli", description="Prefix prepended to every sidebar link"
    )
    link_separator: str = Field(
        default="/", description="Joins path segments in links"
    )
    label_separator: str = Field(
        default=" ", description="Joins path segments in labels"
    )
    label_prefix: str = Field(
        default="", description="Leading text for every label, e.g. 'hk '"
    )
    include_hidden: bool = Field(
        default=False, description="Also list hidden commands (preview builds)"
    )


# --- Navigation ---


class NavEntry(BaseModel):
    """A single sidebar item: display label plus link target."""

    model_config = ConfigDict(frozen=True)

    text: str
    link: str
