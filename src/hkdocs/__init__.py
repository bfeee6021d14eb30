"""hkdocs -- Build the CLI reference sidebar for the hk documentation site.

This package reads the command specification generated for ``hk`` (the JSON
document emitted by ``usage``), validates its command tree, and flattens it
into the ordered list of navigation entries consumed by the site's sidebar.

Typical workflow::

    hk usage | usage generate json > docs/cli/commands.json
    hkdocs sidebar docs/cli/commands.json --write docs/.vitepress/cli_commands.json

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: Site configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
