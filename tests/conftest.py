"""Shared fixtures for the relnotes test suite."""

import json
from datetime import date
from pathlib import Path

import pytest

from relnotes.models.base import Commit

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def commit_factory():
    """Factory fixture for creating Commit instances."""

    def create_commit(message: str, sha: str = "abcd1234ef567890", author: str = "tester") -> Commit:
        return Commit(
            sha=sha,
            message=message,
            author=author,
            url=f"https://github.com/acme/webapp/commit/{sha}",
        )

    return create_commit


@pytest.fixture
def load_request():
    """Load one of the JSON request fixtures."""

    def _load(name: str) -> dict:
        return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def fixed_date():
    return date(2024, 5, 1)
