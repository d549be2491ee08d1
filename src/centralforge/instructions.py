"""
centralforge.instructions - Fixed Instruction Documents
=======================================================

Plain-text guides written next to the rendered build files. Their content
never depends on configuration, so every run writes identical bytes.

Documents
---------
- SONATYPE_INSTRUCTIONS -> sonatype-instructions.txt
- PGP_KEY_INSTRUCTIONS  -> pgp-key-instructions.txt
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from centralforge.models import StepResult


err_console = Console(stderr=True)

SONATYPE_INSTRUCTIONS_FILE = "sonatype-instructions.txt"
PGP_KEY_INSTRUCTIONS_FILE = "pgp-key-instructions.txt"

SONATYPE_INSTRUCTIONS = (
    "### Sonatype Account Creation Instructions ###\n\n"
    "1. Go to https://issues.sonatype.org/secure/Signup!default.jspa and create an account.\n"
    "2. Verify your email address by following the instructions sent to your email.\n"
    "3. Once your account is created and verified, log in to https://issues.sonatype.org/.\n"
    "4. Create a new ticket requesting access to the OSSRH (OSS Repository Hosting) "
    "by following these steps:\n"
    "    a. Click on 'Create' in the top navigation bar.\n"
    "    b. Choose 'Community Support - Open Source Project Repository Hosting'.\n"
    "    c. Fill in the required details such as project information, group ID, "
    "and repository URL.\n"
    "    d. Submit the ticket and wait for approval.\n"
    "5. Once your ticket is approved, you will receive an email confirmation "
    "with further instructions.\n"
)

PGP_KEY_INSTRUCTIONS = (
    "### PGP Key Creation Instructions ###\n\n"
    "1. Install GPG (GNU Privacy Guard) on your system. "
    "Here are some recommendations based on your OS:\n"
    "    - **Windows**: Use Gpg4win, available at https://gpg4win.org/.\n"
    "    - **macOS**: Use GPG Suite, available at https://gpgtools.org/.\n"
    "    - **Linux**: Install GPG using your package manager, e.g., "
    "`sudo apt-get install gnupg` for Debian-based systems.\n\n"
    "2. Generate a PGP key using the following commands in your terminal:\n"
    "    ```\n"
    "    gpg --full-generate-key\n"
    "    ```\n"
    "    Follow the prompts to complete the key generation process.\n\n"
    "3. Export your public and private keys:\n"
    "    ```\n"
    "    gpg --armor --export your-email@example.com > public-key.asc\n"
    "    gpg --armor --export-secret-keys your-email@example.com > private-key.asc\n"
    "    ```\n"
    "4. Import your keys to Maven by adding the following to your `pom.xml` "
    "and `settings.xml`:\n"
    "    ```xml\n"
    "    <plugin>\n"
    "        <groupId>org.apache.maven.plugins</groupId>\n"
    "        <artifactId>maven-gpg-plugin</artifactId>\n"
    "        <version>1.6</version>\n"
    "        <executions>\n"
    "            <execution>\n"
    "                <id>sign-artifacts</id>\n"
    "                <phase>verify</phase>\n"
    "                <goals>\n"
    "                    <goal>sign</goal>\n"
    "                </goals>\n"
    "            </execution>\n"
    "        </executions>\n"
    "        <configuration>\n"
    "            <gpgKeyname>your-key-id</gpgKeyname>\n"
    "            <gpgPassphrase>${env.GPG_PASSPHRASE}</gpgPassphrase>\n"
    "        </configuration>\n"
    "    </plugin>\n"
    "    ```"
)

# output file name -> document, in pipeline order
DOCUMENTS: dict[str, str] = {
    SONATYPE_INSTRUCTIONS_FILE: SONATYPE_INSTRUCTIONS,
    PGP_KEY_INSTRUCTIONS_FILE: PGP_KEY_INSTRUCTIONS,
}


def emit_instructions(document: str, output_path: Path | str) -> StepResult:
    """
    Write a fixed instruction document.

    Parameters
    ----------
    document : str
        Document body, e.g. ``SONATYPE_INSTRUCTIONS``.

    output_path : Path | str
        Destination file, created or truncated.

    Returns
    -------
    StepResult
        Failure carries the I/O error, which is also printed to stderr.
    """
    output_path = Path(output_path)
    name = f"Write {output_path.name}"

    try:
        # newline="" keeps the bytes identical on every platform
        with output_path.open("w", encoding="utf-8", newline="") as f:
            f.write(document)
    except OSError as e:
        err_console.print(f"[red]Error:[/] Could not write {output_path}: {e}")
        return StepResult(name=name, success=False, path=output_path, error=str(e))

    return StepResult(name=name, success=True, path=output_path)
