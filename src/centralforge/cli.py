"""
centralforge.cli - Command Line Interface
=========================================

Typer application for centralforge.

Architecture
------------
    app (bare invocation)  - Run the full setup pipeline
    └── init               - Write starter config.properties and templates

Running ``centralforge`` with no arguments performs the whole fixed
sequence in the current directory and always exits 0; failed steps are
reported on stderr. The options only adjust where files are read from and
how gpg is run.

Usage Examples
--------------
    $ centralforge init
    $ centralforge
    $ centralforge --no-keygen --dir ./mylib

See Also
--------
- publisher.py: The setup pipeline
- models.py: SetupOptions and ProjectCoordinates
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import questionary
import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from centralforge import __version__
from centralforge.models import DEFAULT_CONFIG_FILE, ProjectCoordinates, SetupOptions
from centralforge.publisher import scaffold_workspace, setup_project


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="centralforge",
    help="Bootstrap Maven Central publishing: pom.xml, settings.xml, instructions and a PGP key.",
    rich_markup_mode="rich",
    add_completion=False,
)

console = Console()


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]centralforge[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Maven Central publishing bootstrapper[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Interactive Prompts
# =============================================================================

def _ask_text(message: str, default: str) -> str:
    result = questionary.text(message, default=default).ask()
    if result is None:
        raise typer.Abort()
    return result


def prompt_coordinates(defaults: ProjectCoordinates) -> ProjectCoordinates:
    """
    Interactively prompt for the values of a starter config.properties.

    Parameters
    ----------
    defaults : ProjectCoordinates
        Values offered as defaults, usually built from CLI options.

    Returns
    -------
    ProjectCoordinates
        Validated coordinates.
    """
    group_id = _ask_text("Maven groupId:", defaults.group_id)
    artifact_id = _ask_text("Maven artifactId:", defaults.artifact_id)
    version = _ask_text("Version:", defaults.version)
    description = _ask_text("Description:", defaults.description)
    developer_name = _ask_text("Developer name:", defaults.developer_name)
    developer_email = _ask_text("Developer email:", defaults.developer_email)
    ossrh_username = _ask_text("OSSRH username:", defaults.ossrh_username)

    ossrh_password = questionary.password("OSSRH password:").ask()
    if ossrh_password is None:
        raise typer.Abort()

    pgp_email = _ask_text("PGP key email:", developer_email)

    pgp_passphrase = questionary.password("PGP key passphrase:").ask()
    if pgp_passphrase is None:
        raise typer.Abort()

    return ProjectCoordinates(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        description=description,
        developer_name=developer_name,
        developer_email=developer_email,
        ossrh_username=ossrh_username,
        ossrh_password=ossrh_password or defaults.ossrh_password,
        pgp_email=pgp_email,
        pgp_passphrase=pgp_passphrase or defaults.pgp_passphrase,
    )


# =============================================================================
# Main Application Callback - Run Setup
# =============================================================================

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    work_dir: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-C",
            help="Directory with config.properties and templates (default: current directory)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    config_file: Annotated[
        Path,
        typer.Option(
            "--config",
            help="Properties file with placeholder values",
        ),
    ] = Path(DEFAULT_CONFIG_FILE),
    target_dir: Annotated[
        Path,
        typer.Option(
            "--target",
            help="Directory for the rendered pom.xml and settings.xml",
        ),
    ] = Path("target"),
    gpg_binary: Annotated[
        str,
        typer.Option(
            "--gpg",
            help="gpg executable to run",
        ),
    ] = "gpg",
    no_keygen: Annotated[
        bool,
        typer.Option(
            "--no-keygen",
            help="Skip PGP key generation",
        ),
    ] = False,
    capture_gpg_output: Annotated[
        bool,
        typer.Option(
            "--capture-gpg-output",
            help="Hide gpg's own output instead of passing the terminal through",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors",
        ),
    ] = False,
) -> None:
    """
    [bold]centralforge[/] - Maven Central publishing bootstrapper.

    With no command, renders [cyan]target/pom.xml[/] and
    [cyan]target/settings.xml[/] from their templates, writes the Sonatype
    and PGP instruction files, then generates a signing key with gpg.

    [bold]Quick Start:[/]

        centralforge init
        centralforge
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        options = SetupOptions(
            work_dir=work_dir or Path.cwd(),
            config_file=config_file,
            target_dir=target_dir,
            gpg_binary=gpg_binary,
            inherit_io=not capture_gpg_output,
            generate_key=not no_keygen,
        )
    except ValidationError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    # Failed steps are reported but never change the exit status
    setup_project(options, verbose=not quiet)


# =============================================================================
# Init Command - Write Starter Files
# =============================================================================

@app.command()
def init(
    work_dir: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-C",
            help="Directory to write into (default: current directory)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    group_id: Annotated[
        str,
        typer.Option(
            "--group-id",
            "-g",
            help="Maven groupId, e.g. io.github.yourname",
        ),
    ] = "com.example",
    artifact_id: Annotated[
        str,
        typer.Option(
            "--artifact-id",
            "-a",
            help="Maven artifactId",
        ),
    ] = "my-library",
    email: Annotated[
        str | None,
        typer.Option(
            "--email",
            "-e",
            help="Developer and PGP key email",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing files",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip all prompts, use defaults",
        ),
    ] = False,
) -> None:
    """
    Write a starter config.properties, pom-template.xml and settings-template.xml.

    [bold]Examples:[/]

        centralforge init
        centralforge init --group-id io.github.jane --artifact-id demo --yes
    """
    work_dir = (work_dir or Path.cwd()).resolve()

    try:
        coordinates = ProjectCoordinates(
            group_id=group_id,
            artifact_id=artifact_id,
            **({"developer_email": email, "pgp_email": email} if email else {}),
        )
        if not yes:
            coordinates = prompt_coordinates(coordinates)
    except ValidationError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    try:
        created_files = scaffold_workspace(work_dir, coordinates, force=force)
    except FileExistsError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)
    except OSError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    files_table = Table(title="Files Created", show_header=False)
    files_table.add_column("File", style="cyan")
    for path in created_files:
        files_table.add_row(str(path.relative_to(work_dir)))

    console.print()
    console.print(files_table)
    console.print()
    console.print("[dim]Next steps:[/]")
    console.print(f"  Edit {DEFAULT_CONFIG_FILE} and the templates")
    console.print("  centralforge")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
