"""
pytest configuration and shared fixtures for centralforge tests.

Fixtures
--------
sample_properties : str
    Contents of a config.properties covering both templates.

workspace : Path
    A temporary directory holding config.properties and both templates.

mock_gpg : MagicMock
    Patches subprocess.run in the keygen module so gpg is never executed.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


POM_TEMPLATE = """<project>
    <groupId>{{project.groupId}}</groupId>
    <artifactId>{{project.artifactId}}</artifactId>
    <version>{{project.version}}</version>
    <scm><url>{{project.url}}</url></scm>
    <url>{{project.url}}</url>
</project>
"""

SETTINGS_TEMPLATE = """<settings>
    <server>
        <id>ossrh</id>
        <username>{{ossrh.username}}</username>
        <password>{{ossrh.password}}</password>
    </server>
    <gpg.passphrase>{{pgp.passphrase}}</gpg.passphrase>
</settings>
"""


@pytest.fixture
def sample_properties() -> str:
    """
    Provide config.properties content matching the sample templates.

    Returns
    -------
    str
        Properties text with project, OSSRH and PGP keys.
    """
    return """# sample configuration
project.groupId=io.github.jane
project.artifactId=demo
project.version=1.2.3
project.url=https://github.com/jane/demo

ossrh.username=jane
ossrh.password=s3cret

pgp.email=jane@example.com
pgp.passphrase=correct horse
"""


@pytest.fixture
def workspace(tmp_path: Path, sample_properties: str) -> Path:
    """
    Create a working directory ready for a setup run.

    Returns
    -------
    Path
        Directory containing config.properties, pom-template.xml and
        settings-template.xml.
    """
    work_dir = tmp_path / "workspace"
    work_dir.mkdir()
    (work_dir / "config.properties").write_text(sample_properties, encoding="utf-8")
    (work_dir / "pom-template.xml").write_text(POM_TEMPLATE, encoding="utf-8")
    (work_dir / "settings-template.xml").write_text(SETTINGS_TEMPLATE, encoding="utf-8")
    return work_dir


@pytest.fixture
def mock_gpg():
    """Patch subprocess.run for the keygen module; gpg exits 0."""
    with patch("centralforge.keygen.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0)
        yield mock_run

