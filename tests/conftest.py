"""Shared pytest fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SAMPLE_FILES = {
    "yaml": "sample.yml",
    "json": "sample.json",
    "toml": "sample.toml",
    "rsn": "sample.rsn",
}


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample documents and logs."""
    return FIXTURES_DIR


@pytest.fixture
def sample_files() -> dict:
    """Sample document file names by format tag."""
    return dict(SAMPLE_FILES)


@pytest.fixture
def sample_path() -> Path:
    """Path of the YAML sample document."""
    return FIXTURES_DIR / SAMPLE_FILES["yaml"]


@pytest.fixture
def sample_document(sample_path):
    """The sample document, loaded from YAML."""
    from reqdoc.core.loader import load_file

    return load_file(sample_path)


@pytest.fixture
def scenario_document():
    """Single-topic document used by the status scenarios."""
    from reqdoc.core.loader import load_document

    return load_document(
        """
name: Scenario
version: 0.1.0
description: Two requirements in one topic
topics:
  TOPIC-1:
    name: Only Topic
    requirements:
      REQ-1.1:
        name: First
        description: First requirement
      REQ-1.2:
        name: Second
        description: Second requirement
""",
        fmt="yaml",
    )
