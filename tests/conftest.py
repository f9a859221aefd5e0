"""Shared test fixtures for pokerrank."""

import pytest
from pathlib import Path


@pytest.fixture
def tmp_output(tmp_path):
    """Provide a temporary output directory for result files."""
    return tmp_path / "output"


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "showdown.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
