"""End-to-end export of a fetched issue set into vault documents."""

from collections.abc import Sequence
from pathlib import PurePosixPath

from rich.console import Console

from ..github_client.models import IssueRecord
from ..storage.manager import VaultWriter
from .indexer import build_index
from .models import ISSUES_DIR, ROOT_INDEX, ExportResult, Facet
from .namer import CategoryNamer
from .renderer import render_category_index, render_issue, render_root_index
from .sanitize import DEFAULT_MAX_TITLE_LENGTH

console = Console()


def export_issues(
    issues: Sequence[IssueRecord],
    owner: str,
    repo: str,
    writer: VaultWriter,
    max_title_length: int = DEFAULT_MAX_TITLE_LENGTH,
) -> ExportResult:
    """Index, name, render and write the complete document set.

    Category names are resolved labels first, then milestones, each in the
    order the keys were first seen while indexing, so an unchanged issue
    set always produces the same file names.
    """
    index = build_index(issues, max_title_length)

    namer = CategoryNamer()
    label_files = namer.resolve_all(Facet.LABEL, index.keys(Facet.LABEL))
    milestone_files = namer.resolve_all(Facet.MILESTONE, index.keys(Facet.MILESTONE))

    writer.ensure_directories()
    written_before = writer.documents_written

    for issue in issues:
        base_name = index.meta[issue.number].base_name
        writer.write_document(
            PurePosixPath(ISSUES_DIR, f"{base_name}.md"), render_issue(issue)
        )
    console.print(f"Wrote {len(issues)} issue documents")

    for facet, file_names in (
        (Facet.LABEL, label_files),
        (Facet.MILESTONE, milestone_files),
    ):
        for key, file_name in file_names.items():
            document = render_category_index(
                facet, key, index.members(facet, key), index.meta
            )
            writer.write_document(
                PurePosixPath(facet.directory, f"{file_name}.md"), document
            )
        console.print(f"Wrote {len(file_names)} {facet.value} documents")

    writer.write_document(
        ROOT_INDEX,
        render_root_index(f"{owner}/{repo}", len(issues), milestone_files, label_files),
    )

    return ExportResult(
        issue_count=len(issues),
        label_count=len(label_files),
        milestone_count=len(milestone_files),
        documents_written=writer.documents_written - written_before,
        output_dir=str(writer.base_path.absolute()),
    )
