"""
centralforge.publisher - Maven Central Setup Pipeline
=====================================================

This module orchestrates a setup run and the ``init`` scaffolding.

Architecture
------------
A setup run is a fixed, linear pipeline:

    1. Load config.properties (once)
    2. Render pom-template.xml      -> target/pom.xml
    3. Render settings-template.xml -> target/settings.xml
    4. Write sonatype-instructions.txt
    5. Write pgp-key-instructions.txt
    6. Generate the PGP key with gpg

Every step returns a ``StepResult``. A failed step is reported and the
pipeline moves on to the next one; nothing is rolled back. Steps depend
only on the loaded properties, never on each other's output.

Usage Example
-------------
>>> from centralforge.models import SetupOptions
>>> from centralforge.publisher import setup_project
>>> result = setup_project(SetupOptions(generate_key=False), verbose=False)
>>> [step.name for step in result.steps]
['Render pom-template.xml', 'Render settings-template.xml', ...]

See Also
--------
- renderer.py: Placeholder substitution
- keygen.py: gpg invocation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, select_autoescape
from rich.console import Console
from rich.panel import Panel

from centralforge import __version__
from centralforge.instructions import DOCUMENTS, emit_instructions
from centralforge.keygen import generate_pgp_key
from centralforge.models import (
    DEFAULT_CONFIG_FILE,
    ProjectCoordinates,
    PublisherProperties,
    SetupOptions,
    StepResult,
    load_properties,
)
from centralforge.renderer import render


if TYPE_CHECKING:
    from collections.abc import Callable


# =============================================================================
# Module-Level Configuration
# =============================================================================

console = Console()

POM_TEMPLATE = "pom-template.xml"
SETTINGS_TEMPLATE = "settings-template.xml"

# template file -> rendered file name inside the target directory
RENDERED_FILES: dict[str, str] = {
    POM_TEMPLATE: "pom.xml",
    SETTINGS_TEMPLATE: "settings.xml",
}

# Starter files written by `centralforge init`: packaged name -> output name.
# Only .j2 templates go through Jinja2; the rest are copied verbatim.
SCAFFOLD_FILES: dict[str, str] = {
    "config.properties.j2": DEFAULT_CONFIG_FILE,
    POM_TEMPLATE: POM_TEMPLATE,
    SETTINGS_TEMPLATE: SETTINGS_TEMPLATE,
}


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class SetupResult:
    """
    Result of a setup run.

    Attributes
    ----------
    work_dir : Path
        Directory the run operated in.

    properties : PublisherProperties
        Configuration the run used.

    steps : list[StepResult]
        One entry per executed step, in order.

    warnings : list[str]
        Non-fatal observations, e.g. a non-zero gpg exit status.

    Examples
    --------
    >>> result = SetupResult(work_dir=Path("."), properties=PublisherProperties())
    >>> result.success
    True
    """

    work_dir: Path
    properties: PublisherProperties
    steps: list[StepResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if every executed step succeeded."""
        return all(step.success for step in self.steps)

    @property
    def failed_steps(self) -> list[StepResult]:
        return [step for step in self.steps if not step.success]

    @property
    def files_written(self) -> list[Path]:
        return [step.path for step in self.steps if step.success and step.path]


# =============================================================================
# Template Engine Setup
# =============================================================================


def properties_value(value: object) -> str:
    """
    Escape a value for the right-hand side of a ``.properties`` line.

    Backslashes and control characters are escaped, and a leading space
    is protected so ``parse_properties`` reads the value back unchanged.
    """
    text = str(value)
    text = (
        text.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\f", "\\f")
    )
    # Leading whitespace would be eaten by the parser
    if text[:1] == " ":
        text = "\\" + text
    return text


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment for the ``init`` starter files.

    Returns
    -------
    Environment
        Environment loading from ``centralforge.templates`` with
        autoescaping disabled and trailing newlines preserved.
    """
    env = Environment(
        loader=PackageLoader("centralforge", "templates"),
        autoescape=select_autoescape([]),  # plain text, not HTML
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

    env.filters["properties_value"] = properties_value

    return env


# =============================================================================
# Setup Pipeline
# =============================================================================


def _pipeline(
    options: SetupOptions,
    properties: PublisherProperties,
) -> list[tuple[str, Callable[[], StepResult]]]:
    """Build the ordered list of (label, step) pairs for a run."""
    steps: list[tuple[str, Callable[[], StepResult]]] = []

    for template_name, output_name in RENDERED_FILES.items():
        template_path = options.resolve(template_name)
        output_path = options.target_path / output_name
        steps.append((
            f"Rendering {template_name}",
            lambda t=template_path, o=output_path: render(t, o, properties),
        ))

    for file_name, document in DOCUMENTS.items():
        output_path = options.resolve(file_name)
        steps.append((
            f"Writing {file_name}",
            lambda d=document, o=output_path: emit_instructions(d, o),
        ))

    if options.generate_key:
        steps.append((
            "Generating PGP key",
            lambda: generate_pgp_key(
                properties,
                gpg_binary=options.gpg_binary,
                inherit_io=options.inherit_io,
                cwd=options.work_dir,
            ),
        ))

    return steps


def setup_project(
    options: SetupOptions | None = None,
    *,
    properties: PublisherProperties | None = None,
    verbose: bool = True,
) -> SetupResult:
    """
    Run the full setup pipeline.

    Parameters
    ----------
    options : SetupOptions | None
        Run options. Defaults to ``SetupOptions()`` (current directory).

    properties : PublisherProperties | None
        Pre-loaded configuration. If None, ``options.config_path`` is loaded.

    verbose : bool, default=True
        If True, display progress to the console. Errors are always shown.

    Returns
    -------
    SetupResult
        Per-step results. The run never raises for I/O or process errors;
        inspect ``result.success`` or ``result.failed_steps`` instead.
    """
    options = options or SetupOptions()

    if properties is None:
        properties = load_properties(options.config_path)

    result = SetupResult(work_dir=options.work_dir, properties=properties)

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold blue]Preparing Maven Central publishing[/]\n"
                f"[dim]Directory: {options.work_dir} | "
                f"Properties: {len(properties)} loaded[/]",
                title="[bold]centralforge[/]",
                border_style="blue",
            )
        )
        console.print()

    for label, step in _pipeline(options, properties):
        if verbose:
            console.print(f"[bold]{label}...[/]")

        step_result = step()
        result.steps.append(step_result)

        if step_result.returncode:
            result.warnings.append(
                f"{options.gpg_binary} exited with status {step_result.returncode}"
            )

        if verbose:
            if step_result.success and step_result.path:
                console.print(f"  [green]✓[/] Created {_display(step_result.path, options)}")
            elif step_result.success:
                console.print(f"  [green]✓[/] {step_result.name}")
            else:
                console.print(f"  [yellow]⚠[/] {step_result.name} skipped")

    if verbose:
        _print_summary(result)

    return result


def _display(path: Path, options: SetupOptions) -> Path:
    try:
        return path.relative_to(options.work_dir)
    except ValueError:
        return path


def _print_summary(result: SetupResult) -> None:
    console.print()

    for warning in result.warnings:
        console.print(f"[yellow]⚠[/] {warning}")

    if result.success:
        console.print(
            Panel(
                "[bold green]Publishing setup complete![/]\n\n"
                "[bold]Next steps:[/]\n"
                "  Read sonatype-instructions.txt to request OSSRH access\n"
                "  gpg --keyserver keyserver.ubuntu.com --send-keys <key-id>\n"
                "  mvn -s target/settings.xml -f target/pom.xml clean deploy",
                title="[bold green]Success[/]",
                border_style="green",
            )
        )
    else:
        failed = "\n".join(
            f"  - {step.name}: {step.error}" for step in result.failed_steps
        )
        console.print(
            Panel(
                f"[bold yellow]Setup finished with {len(result.failed_steps)} "
                f"failed step(s)[/]\n\n{failed}",
                title="[bold]Partial Success[/]",
                border_style="yellow",
            )
        )


# =============================================================================
# Workspace Scaffolding
# =============================================================================


def scaffold_workspace(
    work_dir: Path,
    coordinates: ProjectCoordinates,
    *,
    force: bool = False,
) -> list[Path]:
    """
    Write a starter ``config.properties`` and the two templates.

    Parameters
    ----------
    work_dir : Path
        Directory to write into. Created if missing.

    coordinates : ProjectCoordinates
        Values for ``config.properties``.

    force : bool, default=False
        If True, overwrite existing files.

    Returns
    -------
    list[Path]
        Files that were written.

    Raises
    ------
    FileExistsError
        If any target file exists and ``force`` is False. Nothing is
        written in that case.
    """
    if not force:
        existing = [
            name for name in SCAFFOLD_FILES.values() if (work_dir / name).exists()
        ]
        if existing:
            raise FileExistsError(
                f"Files already exist: {', '.join(existing)}. Use --force to overwrite."
            )

    env = create_jinja_env()
    context = {
        "coordinates": coordinates,
        "centralforge_version": __version__,
    }

    work_dir.mkdir(parents=True, exist_ok=True)
    created_files: list[Path] = []

    for template_name, output_name in SCAFFOLD_FILES.items():
        if template_name.endswith(".j2"):
            content = env.get_template(template_name).render(**context)
        else:
            content, _, _ = env.loader.get_source(env, template_name)

        full_path = work_dir / output_name
        full_path.write_text(content, encoding="utf-8")
        created_files.append(full_path)

    return created_files
