"""
centralforge - Maven Central Publishing Bootstrapper
====================================================

A CLI tool that prepares everything an individual developer needs to
publish a Java artifact to Maven Central through Sonatype OSSRH.

Features
--------
- **Build Descriptor**: Renders ``target/pom.xml`` from ``pom-template.xml``
- **Credentials**: Renders ``target/settings.xml`` from ``settings-template.xml``
- **Instructions**: Writes OSSRH signup and PGP key creation guides
- **Signing Key**: Runs ``gpg --quick-gen-key`` non-interactively

Quick Start
-----------
```bash
# Write a starter config.properties and templates
centralforge init

# Render everything and generate the signing key
centralforge
```

Example
-------
>>> from centralforge import SetupOptions, setup_project
>>> result = setup_project(SetupOptions(generate_key=False))
>>> result.files_written
[PosixPath('target/pom.xml'), ...]

Architecture
------------
- ``cli``: Typer-based command line interface
- ``models``: Pydantic models and the ``.properties`` loader
- ``renderer``: ``{{key}}`` placeholder substitution
- ``instructions``: Fixed instruction documents
- ``keygen``: gpg key generation
- ``publisher``: The setup pipeline and workspace scaffolding
- ``templates``: Starter files written by ``centralforge init``
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from centralforge.models import (
    ProjectCoordinates,
    PublisherProperties,
    SetupOptions,
    load_properties,
)
from centralforge.publisher import (
    SetupResult,
    StepResult,
    scaffold_workspace,
    setup_project,
)
from centralforge.renderer import render, substitute_placeholders


__all__ = [
    "ProjectCoordinates",
    "PublisherProperties",
    "SetupOptions",
    "SetupResult",
    "StepResult",
    "__version__",
    "load_properties",
    "render",
    "scaffold_workspace",
    "setup_project",
    "substitute_placeholders",
]
