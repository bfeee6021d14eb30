"""Load a command specification from a URL, local file, or stdin.

The document is usually the JSON that ``usage generate json`` writes for
``hk``, checked into the docs tree. Hand-maintained YAML specs are accepted
too. Format is picked from the file suffix or HTTP content type, falling
back to trying JSON and then YAML.

The loaded dict should be passed to
:func:`~hkdocs.parser.validator.build_command_spec`.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from hkdocs.exceptions import SpecParseError

logger = logging.getLogger(__name__)

_FETCH_TIMEOUT = 30.0


def load_spec(source: str) -> dict[str, Any]:
    """Load a command spec from URL, file path, or stdin ('-').

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The parsed document as a dictionary, keys in document order.

    Raises:
        SpecParseError: If the source cannot be loaded or parsed.
    """
    if source == "-":
        return _load_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def _load_from_stdin() -> dict[str, Any]:
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecParseError("No input received from stdin")

    logger.debug("Read %d bytes of command spec from stdin", len(content))
    return _parse_content(content)


def _load_from_url(url: str) -> dict[str, Any]:
    """Fetch a spec over HTTP(S), using the content type as a format hint."""
    try:
        response = httpx.get(url, timeout=_FETCH_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching command spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch command spec from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    hint = ""
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"

    logger.debug("Fetched command spec from %s (%s)", url, content_type or "no content type")
    return _parse_content(response.text, hint=hint)


def _load_from_file(path: str) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Command spec file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecParseError(f"Failed to read command spec {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"Command spec file is empty: {path}")

    logger.debug("Loaded command spec from %s", file_path)
    return _parse_content(content, hint=_hint_from_suffix(file_path))


def _hint_from_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return ""


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    JSON is tried first unless the hint says YAML. An explicit JSON hint
    never falls back to YAML, so a truncated ``commands.json`` is reported
    as a JSON error rather than a confusing YAML one.

    Raises:
        SpecParseError: If the content cannot be parsed, or the top-level
            value is not a mapping.
    """
    json_error: Exception | None = None

    if hint != "yaml":
        try:
            return _require_mapping(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        return _require_mapping(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        msg = "Failed to parse command spec as JSON or YAML"
        if json_error:
            msg += f"\n  JSON error: {json_error}"
        msg += f"\n  YAML error: {exc}"
        raise SpecParseError(msg) from exc


def _require_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"Command spec must be a JSON/YAML object (got {kind})")
    return result
