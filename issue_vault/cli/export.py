"""CLI command for exporting a repository's issues into a note vault."""

import logging

import requests
import typer
from github.GithubException import GithubException
from rich.console import Console
from rich.table import Table

from ..config import ExportConfig
from ..export.fetcher import fetch_all_issues
from ..export.pipeline import export_issues
from ..github_client.client import GitHubClient
from ..storage.manager import VaultWriter
from .options import (
    DELAY_OPTION,
    MAX_TITLE_LENGTH_OPTION,
    OUT_DIR_ARGUMENT,
    OWNER_ARGUMENT,
    PAGE_SIZE_OPTION,
    REPO_ARGUMENT,
    TOKEN_OPTION,
)

console = Console()
logger = logging.getLogger(__name__)


def export(
    owner: str | None = OWNER_ARGUMENT,
    repo: str | None = REPO_ARGUMENT,
    out_dir: str | None = OUT_DIR_ARGUMENT,
    token: str | None = TOKEN_OPTION,
    page_size: int = PAGE_SIZE_OPTION,
    delay: float = DELAY_OPTION,
    max_title_length: int = MAX_TITLE_LENGTH_OPTION,
) -> None:
    """Export every issue of a repository as linked markdown documents.

    Writes issues/, by-label/, by-milestone/ and index.md under OUT_DIR.
    Open index.md from your vault to browse by milestone or label.

    Examples:
        issue-vault export
        issue-vault export microsoft vscode ./vault
        issue-vault export myorg myrepo out --page-size 50 --delay 1
    """
    config = ExportConfig(
        owner=owner,
        repo=repo,
        out_dir=out_dir,
        token=token,
        per_page=page_size,
        delay=delay,
        max_title_length=max_title_length,
    )

    try:
        config.validate()

        params_table = Table(title="Export Parameters")
        params_table.add_column("Parameter", style="cyan")
        params_table.add_column("Value", style="green")
        params_table.add_row("Repository", config.repository)
        params_table.add_row("Output", config.out_dir)
        params_table.add_row(
            "Authentication", "token" if config.is_authenticated() else "anonymous"
        )
        params_table.add_row("Page Size", str(config.per_page))
        console.print(params_table)

        console.print(f"🔎 Fetching issues from {config.repository}...")
        client = GitHubClient(token=config.token, per_page=config.per_page)
        source = client.issue_pages(config.owner, config.repo)
        issues = fetch_all_issues(source, delay=config.delay)
        console.print(f"✅ Total issues fetched: {len(issues)}")

        console.print(f"💾 Writing documents to {config.out_dir}...")
        writer = VaultWriter(config.out_dir)
        result = export_issues(
            issues,
            config.owner,
            config.repo,
            writer,
            max_title_length=config.max_title_length,
        )

    except requests.RequestException as e:
        logger.debug("GitHub request failed", exc_info=True)
        console.print(f"❌ Network error while fetching issues: {e}")
        console.print("Please check your network connection.")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)
    except GithubException as e:
        logger.debug("GitHub request failed", exc_info=True)
        console.print(f"❌ GitHub API error: {e}")
        console.print("Please check your GitHub token and network connection.")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"❌ Error writing output: {e}")
        raise typer.Exit(1)

    results_table = Table(title="Export Results")
    results_table.add_column("Metric", style="cyan")
    results_table.add_column("Value", justify="right", style="green")
    results_table.add_row("Issues", str(result.issue_count))
    results_table.add_row("Labels", str(result.label_count))
    results_table.add_row("Milestones", str(result.milestone_count))
    results_table.add_row("Documents Written", str(result.documents_written))
    console.print(results_table)

    console.print("✨ Done.")
    console.print(
        f"Put the '{config.out_dir}' folder into your vault and open 'index.md'."
    )
