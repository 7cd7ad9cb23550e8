"""Shared fixtures."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from dotver import Version


@pytest.fixture
def release_strings() -> list[str]:
    """Release version strings, deliberately out of order."""
    return ["1.0.1", "1.0.2", "1.1.0", "1.0.0"]


@pytest.fixture
def releases() -> list[Version]:
    """Parsed releases in ascending order."""
    return [
        Version.parse("1.0.0"),
        Version.parse("1.0.1"),
        Version.parse("1.0.2"),
        Version.parse("1.1.0"),
    ]


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """An empty working directory without any config file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
