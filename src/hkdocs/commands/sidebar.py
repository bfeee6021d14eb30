"""Sidebar commands -- emit the navigation list for the CLI reference.

``hkdocs sidebar`` prints (or writes) the JSON array the site config imports
for its ``/cli/`` sidebar. ``hkdocs paths`` lists the flattened command paths
for a quick look at what will be documented.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer

from hkdocs.config import atomic_write, resolve_site_config
from hkdocs.exceptions import HkdocsError
from hkdocs.generator import build_sidebar, count_nodes, iter_visible, sidebar_to_json
from hkdocs.models import CommandSpec, SiteConfig
from hkdocs.output import debug, error, info, print_data, print_table, success


def _resolve(ctx: typer.Context, overrides: dict[str, Any]) -> SiteConfig:
    config_path: Optional[Path] = (ctx.obj or {}).get("config_path")
    return resolve_site_config(cli_overrides=overrides, config_path=config_path)


def _load(source: str) -> CommandSpec:
    from hkdocs.parser import load_command_spec

    debug(f"Loading command spec from {source}")
    return load_command_spec(source)


def sidebar_command(
    ctx: typer.Context,
    spec: str = typer.Argument(
        ..., help="Command spec: file path, URL, or '-' for stdin."
    ),
    base_link: Optional[str] = typer.Option(
        None, "--base-link", help="Link prefix for every entry (default /cli)."
    ),
    label_prefix: Optional[str] = typer.Option(
        None, "--label-prefix", help="Text prepended to every label, e.g. 'hk '."
    ),
    include_hidden: bool = typer.Option(
        False, "--include-hidden", help="Also list hidden commands."
    ),
    write: Optional[Path] = typer.Option(
        None, "--write", "-w", help="Write the sidebar JSON to this file."
    ),
) -> None:
    """Generate sidebar entries for every documented command.

    Example::

        hkdocs sidebar docs/cli/commands.json --write docs/.vitepress/cli_commands.json
    """
    try:
        config = _resolve(
            ctx,
            {
                "base_link": base_link,
                "label_prefix": label_prefix,
                "include_hidden": True if include_hidden else None,
            },
        )
        entries = sidebar_to_json(build_sidebar(_load(spec), config))
    except HkdocsError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    if write is not None:
        atomic_write(write, json.dumps(entries, indent=2, ensure_ascii=False) + "\n")
        success(f"Wrote {len(entries)} sidebar entries to {write}")
        return

    print_data(json.dumps(entries, indent=2, ensure_ascii=False))


def paths_command(
    ctx: typer.Context,
    spec: str = typer.Argument(
        ..., help="Command spec: file path, URL, or '-' for stdin."
    ),
    include_hidden: bool = typer.Option(
        False, "--include-hidden", help="Also list hidden commands."
    ),
) -> None:
    """List the command paths that appear in the sidebar, in sidebar order."""
    try:
        config = _resolve(ctx, {"include_hidden": True if include_hidden else None})
        command_spec = _load(spec)
    except HkdocsError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    rows = [
        [" ".join(path), "yes" if node.hidden else ""]
        for path, node in iter_visible(command_spec.cmd, include_hidden=config.include_hidden)
    ]
    title = command_spec.name or command_spec.bin or None
    print_table(["command", "hidden"], rows, title=title)

    visible, hidden = count_nodes(command_spec.cmd)
    info(f"{len(rows)} commands listed ({visible} visible, {hidden} hidden)")
