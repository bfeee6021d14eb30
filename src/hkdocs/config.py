"""Site configuration with precedence resolution and atomic writes.

This module handles all configuration for hkdocs:

* **Project config** -- an optional ``hkdocs.json`` next to the docs, holding
  :class:`~hkdocs.models.SiteConfig` fields. See :func:`load_project_config`.
* **Precedence resolution** -- :func:`resolve_site_config` merges CLI flags,
  environment variables, the project file, and defaults into one immutable
  :class:`~hkdocs.models.SiteConfig`.
* **Data directory** -- XDG compliant on Linux/BSD, ``~/.hkdocs/`` elsewhere.
  Only crash logs are stored there.

Generated files are written with :func:`atomic_write` so a failed build never
leaves a half-written sidebar behind.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from hkdocs.exceptions import ConfigError
from hkdocs.models import SiteConfig

_APP_NAME = "hkdocs"
_PROJECT_CONFIG_FILENAME = "hkdocs.json"

_ENV_OVERRIDES = {
    "HKDOCS_BASE_LINK": "base_link",
    "HKDOCS_LABEL_PREFIX": "label_prefix",
    "HKDOCS_INCLUDE_HIDDEN": "include_hidden",
}


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/hkdocs/`` (default ``~/.local/share/hkdocs/``).
    On macOS/Windows: ``~/.hkdocs/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is removed and the original file is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Project-local config ---


def load_project_config(path: Optional[Path] = None) -> Optional[dict[str, Any]]:
    """Load project-local configuration.

    Args:
        path: Explicit config file. When ``None``, ``./hkdocs.json`` is used
            if it exists.

    Returns:
        The parsed JSON object, or ``None`` if the default file does not exist.

    Raises:
        ConfigError: If an explicit *path* is missing, or the file contains
            invalid JSON or a non-object value.
    """
    if path is None:
        path = Path.cwd() / _PROJECT_CONFIG_FILENAME
        if not path.is_file():
            return None
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


# --- Precedence resolution ---


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for var, field in _ENV_OVERRIDES.items():
        value = os.environ.get(var)
        if value is not None and value != "":
            overrides[field] = value
    return overrides


def resolve_site_config(
    cli_overrides: Optional[dict[str, Any]] = None,
    config_path: Optional[Path] = None,
) -> SiteConfig:
    """Resolve site config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_overrides``; ``None`` values are ignored)
        2. Environment variables (``HKDOCS_BASE_LINK``, ``HKDOCS_LABEL_PREFIX``,
           ``HKDOCS_INCLUDE_HIDDEN``)
        3. Project config (``./hkdocs.json`` or *config_path*)
        4. Defaults

    Raises:
        ConfigError: If the project file is invalid or the merged values
            fail validation.
    """
    merged: dict[str, Any] = {}

    project = load_project_config(config_path)
    if project is not None:
        merged.update(project)

    merged.update(_env_overrides())

    if cli_overrides:
        merged.update({k: v for k, v in cli_overrides.items() if v is not None})

    try:
        return SiteConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid site configuration: {exc}") from exc
