"""
centralforge.renderer - Placeholder Template Rendering
======================================================

Renders ``pom-template.xml`` and ``settings-template.xml`` by replacing
``{{key}}`` placeholders with values from ``config.properties``.

Placeholder names are raw property keys such as ``{{pgp.passphrase}}`` or
``{{project.groupId}}``. Substitution is plain text replacement per key, so
dotted names need no escaping. A placeholder whose key is not configured is
left in the output unchanged rather than raising.

Usage Example
-------------
>>> from centralforge.renderer import substitute_placeholders
>>> substitute_placeholders("Hello, {{name}}!", {"name": "Alice"})
'Hello, Alice!'
>>> substitute_placeholders("Hello, {{name}}!", {})
'Hello, {{name}}!'
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from rich.console import Console

from centralforge.models import PublisherProperties, StepResult


err_console = Console(stderr=True)


def placeholder(key: str) -> str:
    """Return the placeholder token for ``key``."""
    return "{{" + key + "}}"


def substitute_placeholders(
    template: str,
    properties: PublisherProperties | Mapping[str, str],
) -> str:
    """
    Replace every ``{{key}}`` occurrence with its configured value.

    Parameters
    ----------
    template : str
        Template text.

    properties : PublisherProperties | Mapping[str, str]
        Values to substitute. Only these keys are consulted.

    Returns
    -------
    str
        The template with all known placeholders replaced. Unknown
        placeholders are left as-is.

    Notes
    -----
    Each key is replaced across the whole string, so repeated placeholders
    are all substituted. Rendering a string with no placeholders left
    returns it unchanged.
    """
    for key, value in properties.items():
        template = template.replace(placeholder(key), value)

    return template


def read_template(template_path: Path) -> str:
    """
    Read a template exactly as stored.

    Line endings are not translated, and bytes that are not valid UTF-8 are
    kept as surrogate escapes so ``write_output`` restores them unchanged.

    Raises
    ------
    OSError
        If the file cannot be read.
    """
    with template_path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def write_output(output_path: Path, content: str) -> None:
    """
    Write ``content`` to ``output_path``, creating or truncating it.

    Missing parent directories (e.g. ``target/``) are created. Line endings
    and escaped template bytes are written back as-is.

    Raises
    ------
    OSError
        If the directory or file cannot be written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(content)


def render(
    template_path: Path | str,
    output_path: Path | str,
    properties: PublisherProperties | Mapping[str, str],
) -> StepResult:
    """
    Render a template file to an output file.

    Parameters
    ----------
    template_path : Path | str
        Template to read.

    output_path : Path | str
        Destination. Created if missing, truncated if present.

    properties : PublisherProperties | Mapping[str, str]
        Values to substitute.

    Returns
    -------
    StepResult
        Success with the written path, or failure with the I/O error. The
        error is also printed to stderr. When the template cannot be read
        the destination is not touched.
    """
    template_path = Path(template_path)
    output_path = Path(output_path)
    name = f"Render {template_path.name}"

    try:
        template = read_template(template_path)
    except OSError as e:
        err_console.print(f"[red]Error:[/] Could not read template {template_path}: {e}")
        return StepResult(name=name, success=False, path=output_path, error=str(e))

    content = substitute_placeholders(template, properties)

    try:
        write_output(output_path, content)
    except OSError as e:
        err_console.print(f"[red]Error:[/] Could not write {output_path}: {e}")
        return StepResult(name=name, success=False, path=output_path, error=str(e))

    return StepResult(name=name, success=True, path=output_path)
