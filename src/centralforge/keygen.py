"""
centralforge.keygen - PGP Signing Key Generation
================================================

Maven Central requires every published artifact to be signed. This module
delegates key creation to gpg, running it non-interactively with the
identity and passphrase from ``config.properties``:

    gpg --batch --passphrase <passphrase> --quick-gen-key <email> rsa2048 sign,encrypt 0

The key is 2048-bit RSA, usable for signing and encryption, and never
expires. gpg owns the keyring; nothing is stored by centralforge.

Notes
-----
gpg's exit status is recorded but a non-zero status is only reported as a
warning. gpg exits non-zero for conditions such as an existing key with the
same user id, which do not prevent publishing.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from rich.console import Console

from centralforge.models import (
    PGP_EMAIL_KEY,
    PGP_PASSPHRASE_KEY,
    PublisherProperties,
    StepResult,
)


console = Console()
err_console = Console(stderr=True)

STEP_NAME = "Generate PGP key"

KEY_ALGORITHM = "rsa2048"
KEY_USAGE = "sign,encrypt"
KEY_EXPIRY = "0"  # never expires


def build_gpg_command(
    email: str,
    passphrase: str,
    gpg_binary: str = "gpg",
) -> list[str]:
    """
    Build the gpg command line for batch key generation.

    Examples
    --------
    >>> build_gpg_command("dev@example.com", "secret")
    ['gpg', '--batch', '--passphrase', 'secret', '--quick-gen-key', 'dev@example.com', 'rsa2048', 'sign,encrypt', '0']
    """
    return [
        gpg_binary,
        "--batch",
        "--passphrase",
        passphrase,
        "--quick-gen-key",
        email,
        KEY_ALGORITHM,
        KEY_USAGE,
        KEY_EXPIRY,
    ]


def generate_pgp_key(
    properties: PublisherProperties,
    *,
    gpg_binary: str = "gpg",
    inherit_io: bool = True,
    cwd: Path | None = None,
) -> StepResult:
    """
    Generate a signing key pair with gpg.

    Blocks until gpg exits. There is no timeout.

    Parameters
    ----------
    properties : PublisherProperties
        Must contain ``pgp.email`` and ``pgp.passphrase``.

    gpg_binary : str, default="gpg"
        gpg executable name or path.

    inherit_io : bool, default=True
        If True gpg reads from and writes to this process's terminal so its
        prompts and progress are visible. If False its output is captured
        and discarded.

    cwd : Path | None
        Working directory for gpg.

    Returns
    -------
    StepResult
        ``returncode`` holds gpg's exit status when it ran. Launch failures,
        interruptions and missing settings are reported as failures and
        printed to stderr; they never raise.
    """
    email = properties.pgp_email
    passphrase = properties.pgp_passphrase

    missing = [
        key
        for key, value in ((PGP_EMAIL_KEY, email), (PGP_PASSPHRASE_KEY, passphrase))
        if value is None
    ]
    if missing:
        msg = f"Missing {', '.join(missing)} in configuration"
        err_console.print(f"[red]Error:[/] Cannot generate PGP key: {msg}")
        return StepResult(name=STEP_NAME, success=False, error=msg)

    command = build_gpg_command(email, passphrase, gpg_binary)

    try:
        completed = subprocess.run(
            command,
            check=False,
            cwd=cwd,
            capture_output=not inherit_io,
        )
    except OSError as e:
        err_console.print(f"[red]Error:[/] Could not run {gpg_binary}: {e}")
        return StepResult(name=STEP_NAME, success=False, error=str(e))
    except KeyboardInterrupt:
        err_console.print(f"[red]Error:[/] Interrupted while waiting for {gpg_binary}")
        return StepResult(name=STEP_NAME, success=False, error="interrupted")

    console.print(f"PGP key created for email: {email}")

    return StepResult(
        name=STEP_NAME,
        success=True,
        returncode=completed.returncode,
    )
