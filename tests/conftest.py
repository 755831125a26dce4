"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from issue_vault.github_client.models import IssueRecord
from issue_vault.storage.manager import VaultWriter


def make_issue(number: int, title: str = "Test Issue", **overrides: Any) -> IssueRecord:
    """Build an IssueRecord with sensible defaults."""
    fields: dict[str, Any] = {
        "number": number,
        "title": title,
        "state": "open",
        "author": "testuser",
        "created_at": datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC),
        "updated_at": datetime(2024, 1, 2, 8, 30, 0, tzinfo=UTC),
        "labels": (),
        "milestone": None,
        "html_url": f"https://github.com/testorg/testrepo/issues/{number}",
        "body": "Test body",
    }
    fields.update(overrides)
    return IssueRecord(**fields)


@pytest.fixture
def issue_factory() -> Callable[..., IssueRecord]:
    """Factory for IssueRecord objects."""
    return make_issue


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Temporary vault output directory (not yet created)."""
    return tmp_path / "vault"


@pytest.fixture
def vault_writer(vault_dir: Path) -> VaultWriter:
    """VaultWriter rooted in a temporary directory."""
    return VaultWriter(vault_dir)
