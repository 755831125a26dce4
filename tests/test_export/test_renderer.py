"""Tests for markdown rendering."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from issue_vault.export.models import Facet, FilenameMeta
from issue_vault.export.renderer import (
    format_timestamp,
    render_category_index,
    render_frontmatter,
    render_issue,
    render_root_index,
)
from issue_vault.github_client.models import IssueRecord


class TestFormatTimestamp:
    """Test format_timestamp function."""

    def test_naive_datetime(self) -> None:
        """Test naive timestamps are treated as UTC."""
        assert format_timestamp(datetime(2024, 3, 5, 7, 8, 9)) == "2024-03-05T07:08:09Z"

    def test_converts_to_utc(self) -> None:
        """Test aware timestamps are converted to UTC."""
        tz = timezone(timedelta(hours=8))
        value = datetime(2024, 3, 5, 8, 0, 0, tzinfo=tz)
        assert format_timestamp(value) == "2024-03-05T00:00:00Z"


class TestRenderIssue:
    """Test issue document rendering."""

    def test_frontmatter(self, issue_factory: Callable[..., IssueRecord]) -> None:
        """Test the header block fields, order and literal formats."""
        issue = issue_factory(
            42,
            'Leak: "pool"',
            labels=("bug", "p1"),
            milestone="Easy",
            state="closed",
        )

        assert render_frontmatter(issue) == (
            "---\n"
            "number: 42\n"
            'title: "Leak: \\"pool\\""\n'
            'state: "closed"\n'
            'author: "testuser"\n'
            'created_at: "2024-01-01T12:00:00Z"\n'
            'updated_at: "2024-01-02T08:30:00Z"\n'
            'labels: ["bug", "p1"]\n'
            'milestone: "Easy"\n'
            'url: "https://github.com/testorg/testrepo/issues/42"\n'
            "---\n"
        )

    def test_missing_optional_fields(
        self, issue_factory: Callable[..., IssueRecord]
    ) -> None:
        """Test absent author, labels and milestone render as null/empty."""
        text = render_frontmatter(issue_factory(1, author=None))

        assert "author: null\n" in text
        assert "labels: []\n" in text
        assert "milestone: null\n" in text

    def test_non_ascii_kept(self, issue_factory: Callable[..., IssueRecord]) -> None:
        """Test non-ASCII text is written literally."""
        text = render_frontmatter(issue_factory(1, "闭包是什么", labels=("基础",)))

        assert 'title: "闭包是什么"' in text
        assert 'labels: ["基础"]' in text

    def test_document_layout(self, issue_factory: Callable[..., IssueRecord]) -> None:
        """Test heading, source note and verbatim body follow the header."""
        issue = issue_factory(7, "Title", body="Line one\n\n```js\ncode\n```")

        text = render_issue(issue)

        assert text.startswith("---\nnumber: 7\n")
        assert text.endswith(
            "---\n\n# Title\n\n"
            "> #7 · Source: https://github.com/testorg/testrepo/issues/7\n\n"
            "Line one\n\n```js\ncode\n```\n"
        )

    def test_empty_body(self, issue_factory: Callable[..., IssueRecord]) -> None:
        """Test an issue without body."""
        text = render_issue(issue_factory(7, body=None))
        assert text.endswith("/issues/7\n\n\n")


class TestRenderCategoryIndex:
    """Test category document rendering."""

    def test_links_sorted_by_number(self) -> None:
        """Test members are listed ascending with display text."""
        meta = {
            2: FilenameMeta(base_name="2. Two", display_text="#2 Two"),
            10: FilenameMeta(base_name="10. Ten", display_text="#10 Ten"),
        }

        text = render_category_index(Facet.LABEL, "bug", [10, 2], meta)

        assert text == (
            "# Label: bug\n\n"
            "2 issues\n\n"
            "- [[issues/2. Two|#2 Two]]\n"
            "- [[issues/10. Ten|#10 Ten]]\n"
        )

    def test_milestone_heading(self) -> None:
        """Test the milestone facet heading."""
        meta = {1: FilenameMeta(base_name="1. A", display_text="#1 A")}

        text = render_category_index(Facet.MILESTONE, "Easy", {1}, meta)

        assert text.startswith("# Milestone: Easy\n\n1 issues\n")


class TestRenderRootIndex:
    """Test root index rendering."""

    def test_both_facets(self) -> None:
        """Test both views list their categories in collation order."""
        text = render_root_index(
            "testorg/testrepo",
            3,
            {"Hard": "Hard", "easy": "easy"},
            {"p1": "p1", "Bug": "Bug", "a/b": "a_b"},
        )

        assert text == (
            "# testorg/testrepo offline issue index\n\n"
            "- Exported issues: **3**\n"
            "- Two views: milestone & label\n\n"
            "## Milestone view\n"
            "- [[by-milestone/easy|easy]]\n"
            "- [[by-milestone/Hard|Hard]]\n\n"
            "## Label view\n"
            "- [[by-label/a_b|a/b]]\n"
            "- [[by-label/Bug|Bug]]\n"
            "- [[by-label/p1|p1]]\n"
        )

    def test_empty_facets_use_placeholders(self) -> None:
        """Test empty facets render a placeholder instead of an empty list."""
        text = render_root_index("o/r", 0, {}, {})

        assert "## Milestone view\n_No milestones_\n" in text
        assert "## Label view\n_No labels_\n" in text

    def test_resolved_file_names_used(self) -> None:
        """Test links point at resolved names, not raw keys."""
        text = render_root_index("o/r", 1, {"Easy": "Easy-2"}, {"Easy": "Easy"})

        assert "- [[by-milestone/Easy-2|Easy]]" in text
        assert "- [[by-label/Easy|Easy]]" in text
