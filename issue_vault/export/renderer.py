"""Markdown rendering for issue, category and root index documents.

All functions are pure: they build the full document text in memory and
leave writing to the caller.
"""

import json
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from ..github_client.models import IssueRecord
from .models import Facet, FilenameMeta

FACET_TITLES = {
    Facet.LABEL: "Label",
    Facet.MILESTONE: "Milestone",
}


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with a ``Z`` suffix.

    Naive datetimes are taken to be UTC already, as GitHub reports them.
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _frontmatter_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, list | tuple):
        items = ", ".join(json.dumps(item, ensure_ascii=False) for item in value)
        return f"[{items}]"
    return json.dumps(value, ensure_ascii=False)


def render_frontmatter(issue: IssueRecord) -> str:
    """Render the ``---`` delimited key/value header of an issue document."""
    fields: dict[str, Any] = {
        "number": issue.number,
        "title": issue.title,
        "state": issue.state,
        "author": issue.author,
        "created_at": format_timestamp(issue.created_at),
        "updated_at": format_timestamp(issue.updated_at),
        "labels": list(issue.labels),
        "milestone": issue.milestone,
        "url": issue.html_url,
    }
    lines = [f"{key}: {_frontmatter_value(value)}" for key, value in fields.items()]
    return "---\n" + "\n".join(lines) + "\n---\n"


def render_issue(issue: IssueRecord) -> str:
    """Render the per-issue document: header, title, source note and body."""
    return (
        f"{render_frontmatter(issue)}\n"
        f"# {issue.title}\n\n"
        f"> #{issue.number} · Source: {issue.html_url}\n\n"
        f"{issue.body or ''}\n"
    )


def _link(target: str, text: str) -> str:
    return f"- [[{target}|{text}]]"


def render_category_index(
    facet: Facet,
    key: str,
    member_ids: Iterable[int],
    meta: Mapping[int, FilenameMeta],
) -> str:
    """Render a category document listing every member issue.

    Args:
        facet: Facet the category belongs to
        key: Label name or milestone title
        member_ids: Issue numbers in the category
        meta: Naming metadata by issue number

    Returns:
        Markdown with a heading, member count and one link per issue,
        ordered by issue number
    """
    ordered = sorted(set(member_ids))
    lines = [_link(meta[n].link_target, meta[n].display_text) for n in ordered]
    return (
        f"# {FACET_TITLES[facet]}: {key}\n\n"
        f"{len(ordered)} issues\n\n" + "\n".join(lines) + "\n"
    )


def category_sort_key(key: str) -> tuple[str, str]:
    """Case-insensitive ordering with the raw key as tie-breaker."""
    return key.casefold(), key


def _facet_links(facet: Facet, file_names: Mapping[str, str], placeholder: str) -> str:
    if not file_names:
        return placeholder
    keys = sorted(file_names, key=category_sort_key)
    return "\n".join(
        _link(f"{facet.directory}/{file_names[key]}", key) for key in keys
    )


def render_root_index(
    repository: str,
    total_count: int,
    milestone_files: Mapping[str, str],
    label_files: Mapping[str, str],
) -> str:
    """Render ``index.md``, the entry point linking both facets.

    Args:
        repository: ``owner/repo`` label shown in the heading
        total_count: Number of exported issues
        milestone_files: Milestone title -> category document stem
        label_files: Label name -> category document stem
    """
    milestone_lines = _facet_links(Facet.MILESTONE, milestone_files, "_No milestones_")
    label_lines = _facet_links(Facet.LABEL, label_files, "_No labels_")
    return (
        f"# {repository} offline issue index\n\n"
        f"- Exported issues: **{total_count}**\n"
        "- Two views: milestone & label\n\n"
        f"## Milestone view\n{milestone_lines}\n\n"
        f"## Label view\n{label_lines}\n"
    )
