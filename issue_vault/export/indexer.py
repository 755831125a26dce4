"""Fold an issue set into naming metadata and label/milestone indices."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..github_client.models import IssueRecord
from .models import Facet, FilenameMeta
from .sanitize import DEFAULT_MAX_TITLE_LENGTH, sanitize, truncate_for_name


def filename_meta(
    issue: IssueRecord, max_title_length: int = DEFAULT_MAX_TITLE_LENGTH
) -> FilenameMeta:
    """Derive the document name and link text of an issue.

    The result depends only on the issue number and title, so unchanged
    issues map to the same paths on every run.
    """
    title_part = truncate_for_name(issue.title, max_title_length)
    base_name = f"{issue.number}. {title_part}" if title_part else f"{issue.number}."
    display_text = f"#{issue.number} {sanitize(issue.title)}".rstrip()
    return FilenameMeta(base_name=base_name, display_text=display_text)


@dataclass
class IssueIndex:
    """Per-issue metadata plus one membership index per facet.

    Category keys keep first-seen order; member sets are unordered and
    are sorted when read through ``members``.
    """

    meta: dict[int, FilenameMeta] = field(default_factory=dict)
    by_label: dict[str, set[int]] = field(default_factory=dict)
    by_milestone: dict[str, set[int]] = field(default_factory=dict)

    def facet_index(self, facet: Facet) -> dict[str, set[int]]:
        """Return the membership index of ``facet``."""
        if facet is Facet.LABEL:
            return self.by_label
        return self.by_milestone

    def keys(self, facet: Facet) -> list[str]:
        """Category keys of ``facet`` in first-seen order."""
        return list(self.facet_index(facet))

    def members(self, facet: Facet, key: str) -> list[int]:
        """Issue numbers filed under ``key``, ascending."""
        return sorted(self.facet_index(facet)[key])

    def add(self, issue: IssueRecord, max_title_length: int) -> None:
        """Record one issue in the metadata map and both indices."""
        self.meta[issue.number] = filename_meta(issue, max_title_length)
        for label in issue.labels:
            if not label:
                continue
            self.by_label.setdefault(label, set()).add(issue.number)
        if issue.milestone:
            self.by_milestone.setdefault(issue.milestone, set()).add(issue.number)


def build_index(
    issues: Iterable[IssueRecord], max_title_length: int = DEFAULT_MAX_TITLE_LENGTH
) -> IssueIndex:
    """Index ``issues`` in a single pass."""
    index = IssueIndex()
    for issue in issues:
        index.add(issue, max_title_length)
    return index
