"""
centralforge.models - Configuration Models and Properties Loading
=================================================================

This module defines the data models used throughout centralforge and the
loader for the ``config.properties`` file that drives template rendering
and key generation.

Architecture Notes
------------------
The models are organized by who builds them:

    PublisherProperties  <- config.properties (Java .properties syntax)
    SetupOptions         <- CLI options or library callers
    ProjectCoordinates   <- `centralforge init` prompts
    StepResult           <- every pipeline operation

The loaded properties are passed explicitly into each operation that needs
them. Nothing reads configuration from module-level state.

Usage Example
-------------
>>> from centralforge.models import parse_properties
>>> parse_properties("pgp.email = dev@example.com\\n# comment\\n")
{'pgp.email': 'dev@example.com'}
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.console import Console


# Errors are reported on stderr, progress on stdout
err_console = Console(stderr=True)

# Keys consumed by the key generation step
PGP_EMAIL_KEY = "pgp.email"
PGP_PASSPHRASE_KEY = "pgp.passphrase"

DEFAULT_CONFIG_FILE = "config.properties"

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class StepResult:
    """
    Outcome of a single setup operation.

    Every operation in the pipeline returns one of these instead of raising,
    which lets the caller decide whether to continue. The setup pipeline
    always continues.

    Attributes
    ----------
    name : str
        Short human-readable name of the step.

    success : bool
        Whether the step completed.

    path : Path | None
        File the step wrote, if any.

    error : str | None
        Error message when ``success`` is False.

    returncode : int | None
        Exit status of the external process, for the key generation step.
    """

    name: str
    success: bool
    path: Path | None = None
    error: str | None = None
    returncode: int | None = None


# =============================================================================
# Properties Parsing
# =============================================================================


def _logical_lines(text: str) -> Iterator[str]:
    """Join backslash-continued lines and drop blanks and comments."""
    pending: str | None = None

    for raw in text.splitlines():
        line = raw.lstrip(" \t\f")

        if pending is None:
            if not line or line[0] in "#!":
                continue
            current = line
        else:
            current = pending + line

        # An odd number of trailing backslashes continues the line
        trailing = len(current) - len(current.rstrip("\\"))
        if trailing % 2 == 1:
            pending = current[:-1]
            continue

        pending = None
        yield current

    if pending is not None:
        yield pending


def _unescape(text: str) -> str:
    """Decode .properties escape sequences."""
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\" or i + 1 >= len(text):
            out.append(char)
            i += 1
            continue

        nxt = text[i + 1]
        if nxt == "u" and re.fullmatch(r"[0-9a-fA-F]{4}", text[i + 2:i + 6]):
            out.append(chr(int(text[i + 2:i + 6], 16)))
            i += 6
        else:
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2

    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw key and raw value."""
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in "=: \t\f":
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")

    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse text in Java ``.properties`` syntax.

    Parameters
    ----------
    text : str
        Contents of a properties file.

    Returns
    -------
    dict[str, str]
        Key to value mapping. Later duplicates override earlier ones.

    Notes
    -----
    Supported syntax:

    - ``#`` and ``!`` comment lines, blank lines
    - ``key=value``, ``key: value`` and ``key value`` separators
    - trailing-backslash line continuations
    - ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes

    Examples
    --------
    >>> parse_properties("a=1\\nb : two words\\n")
    {'a': '1', 'b': 'two words'}
    """
    values: dict[str, str] = {}

    for line in _logical_lines(text):
        key, value = _split_entry(line)
        values[_unescape(key)] = _unescape(value)

    return values


# =============================================================================
# Publisher Properties
# =============================================================================


class PublisherProperties(BaseModel):
    """
    Immutable configuration loaded from ``config.properties``.

    Behaves like a read-only mapping of string keys to string values. The
    two ``pgp.*`` keys used for key generation are exposed as properties.

    Attributes
    ----------
    values : dict[str, str]
        All loaded key/value pairs.

    source : Path | None
        File the values were loaded from, if any.

    Examples
    --------
    >>> props = PublisherProperties(values={"pgp.email": "dev@example.com"})
    >>> props.pgp_email
    'dev@example.com'
    >>> "pgp.passphrase" in props
    False
    """

    model_config = ConfigDict(frozen=True)

    values: dict[str, str] = Field(
        default_factory=dict,
        description="Loaded key/value pairs",
    )
    source: Path | None = Field(
        default=None,
        description="File the values were loaded from",
    )

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for ``key`` or ``default``."""
        return self.values.get(key, default)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(key, value)`` pairs."""
        return iter(self.values.items())

    @property
    def pgp_email(self) -> str | None:
        """Email identity for the generated PGP key."""
        return self.values.get(PGP_EMAIL_KEY)

    @property
    def pgp_passphrase(self) -> str | None:
        """Passphrase protecting the generated PGP key."""
        return self.values.get(PGP_PASSPHRASE_KEY)


def load_properties(path: Path | str = DEFAULT_CONFIG_FILE) -> PublisherProperties:
    """
    Load a ``.properties`` file into a ``PublisherProperties`` object.

    A missing or unreadable file is not fatal: the error is printed to
    stderr and an empty configuration is returned, so later steps still run
    and leave their placeholders unreplaced.

    The file is decoded as UTF-8, falling back to ISO-8859-1 (the
    encoding Java writes .properties files in) when it is not valid UTF-8.

    Parameters
    ----------
    path : Path | str
        Properties file to read. Defaults to ``config.properties``.

    Returns
    -------
    PublisherProperties
        Loaded configuration, empty if the file could not be read.
    """
    path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        err_console.print(f"[red]Error:[/] Could not read {path}: {e}")
        return PublisherProperties()

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("latin-1")

    return PublisherProperties(values=parse_properties(text), source=path)


# =============================================================================
# Setup Options
# =============================================================================


class SetupOptions(BaseModel):
    """
    Options controlling a setup run.

    The defaults reproduce the fixed behaviour of a bare ``centralforge``
    invocation in the current directory.

    Attributes
    ----------
    work_dir : Path
        Directory holding the inputs and receiving the outputs.

    config_file : Path
        Properties file, relative to ``work_dir`` unless absolute.

    target_dir : Path
        Directory for rendered files, relative to ``work_dir`` unless absolute.

    gpg_binary : str
        Name or path of the gpg executable.

    inherit_io : bool
        Let gpg use the terminal directly. When False its output is captured.

    generate_key : bool
        Run the key generation step.
    """

    work_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding inputs and receiving outputs",
    )
    config_file: Path = Field(
        default=Path(DEFAULT_CONFIG_FILE),
        description="Properties file with placeholder values",
    )
    target_dir: Path = Field(
        default=Path("target"),
        description="Directory for rendered pom.xml and settings.xml",
    )
    gpg_binary: str = Field(
        default="gpg",
        min_length=1,
        description="gpg executable",
    )
    inherit_io: bool = Field(
        default=True,
        description="Pass the terminal through to gpg",
    )
    generate_key: bool = Field(
        default=True,
        description="Run gpg key generation",
    )

    @field_validator("gpg_binary")
    @classmethod
    def validate_gpg_binary(cls, v: str) -> str:
        """Strip surrounding whitespace from the executable name."""
        v = v.strip()
        if not v:
            msg = "gpg executable must not be blank"
            raise ValueError(msg)
        return v

    def resolve(self, path: Path | str) -> Path:
        """Resolve ``path`` against ``work_dir`` unless it is absolute."""
        path = Path(path)
        return path if path.is_absolute() else self.work_dir / path

    @property
    def config_path(self) -> Path:
        return self.resolve(self.config_file)

    @property
    def target_path(self) -> Path:
        return self.resolve(self.target_dir)


# =============================================================================
# Project Coordinates (for `centralforge init`)
# =============================================================================


class ProjectCoordinates(BaseModel):
    """
    Values written into a starter ``config.properties``.

    Attributes
    ----------
    group_id, artifact_id, version : str
        Maven coordinates of the artifact.

    name, description, url : str
        Project metadata required by Maven Central.

    developer_name, developer_email : str
        Entry for the ``<developers>`` section.

    ossrh_username, ossrh_password : str
        OSSRH credentials for ``settings.xml``.

    pgp_email, pgp_passphrase : str
        Identity and passphrase for the generated signing key.

    Examples
    --------
    >>> coords = ProjectCoordinates(group_id="io.github.jane", artifact_id="demo")
    >>> coords.scm_url
    'https://github.com/jane/demo'
    """

    group_id: Annotated[str, Field(min_length=1, description="Maven groupId")]
    artifact_id: Annotated[str, Field(min_length=1, description="Maven artifactId")]
    version: str = Field(default="1.0.0", min_length=1)
    name: str = Field(default="")
    description: str = Field(default="A Java library", max_length=500)
    url: str = Field(default="")
    developer_name: str = Field(default="Your Name")
    developer_email: str = Field(default="you@example.com")
    ossrh_username: str = Field(default="your-ossrh-username")
    ossrh_password: str = Field(default="your-ossrh-password")
    pgp_email: str = Field(default="you@example.com")
    pgp_passphrase: str = Field(default="change-me")

    @field_validator("group_id", "artifact_id")
    @classmethod
    def validate_coordinate(cls, v: str) -> str:
        """
        Validate a Maven coordinate segment.

        Coordinates may contain letters, digits, dots, hyphens and
        underscores and must start with a letter or digit.
        """
        v = v.strip()
        if not re.match(r"^[A-Za-z0-9][A-Za-z0-9._-]*$", v):
            msg = (
                f"Invalid Maven coordinate '{v}'. Use letters, digits, "
                "dots, hyphens and underscores."
            )
            raise ValueError(msg)
        return v

    @field_validator("developer_email", "pgp_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email format validation."""
        v = v.strip()
        if not re.match(_EMAIL_PATTERN, v):
            msg = f"Invalid email format: {v}"
            raise ValueError(msg)
        return v

    @property
    def display_name(self) -> str:
        return self.name or self.artifact_id

    @property
    def scm_url(self) -> str:
        """
        Project URL, guessed from an ``io.github.<user>`` groupId if unset.
        """
        if self.url:
            return self.url
        parts = self.group_id.split(".")
        if len(parts) >= 3 and parts[0] == "io" and parts[1] == "github":
            return f"https://github.com/{parts[2]}/{self.artifact_id}"
        return f"https://example.com/{self.artifact_id}"
