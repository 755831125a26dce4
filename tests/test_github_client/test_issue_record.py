"""Tests for GitHub client models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from issue_vault.github_client.models import IssueRecord


class TestIssueRecord:
    """Test IssueRecord model."""

    def test_valid_record(self) -> None:
        """Test creating a record with every field."""
        record = IssueRecord(
            number=42,
            title="Test Issue",
            state="open",
            author="testuser",
            created_at=datetime(2024, 1, 1, 12, 0, 0),
            updated_at=datetime(2024, 1, 2, 12, 0, 0),
            labels=["bug", "p1"],
            milestone="Easy",
            html_url="https://github.com/o/r/issues/42",
            body="Body",
        )

        assert record.number == 42
        assert record.labels == ("bug", "p1")
        assert record.milestone == "Easy"
        assert record.is_pull_request is False

    def test_optional_fields_default(self) -> None:
        """Test optional fields default to absence."""
        record = IssueRecord(
            number=1,
            state="closed",
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
            html_url="https://github.com/o/r/issues/1",
        )

        assert record.title == ""
        assert record.author is None
        assert record.labels == ()
        assert record.milestone is None
        assert record.body is None

    def test_missing_required_fields(self) -> None:
        """Test validation with missing fields."""
        with pytest.raises(ValidationError):
            IssueRecord(number=1, state="open")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Test records cannot be modified after creation."""
        record = IssueRecord(
            number=1,
            state="open",
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
            html_url="https://github.com/o/r/issues/1",
        )

        with pytest.raises(ValidationError):
            record.title = "changed"  # type: ignore[misc]
