"""GitHub API client using PyGitHub."""

import logging
import os
from typing import Any

from github import Auth, Github
from github.GithubException import UnknownObjectException
from github.Issue import Issue
from github.PaginatedList import PaginatedList
from github.Repository import Repository
from rich.console import Console

from .. import __version__
from .models import IssueRecord

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 100


class RepositoryIssuePages:
    """Page-by-page view of every issue in one repository.

    Lists issues in all states, oldest first, so page boundaries stay put
    while new issues are being filed.
    """

    def __init__(self, repository: Repository, per_page: int):
        self.repository = repository
        self.per_page = per_page
        self._listing: PaginatedList | None = None

    def _get_listing(self) -> PaginatedList:
        if self._listing is None:
            self._listing = self.repository.get_issues(
                state="all", sort="created", direction="asc"
            )
        return self._listing

    def fetch_page(self, page: int) -> list[IssueRecord]:
        """Fetch one page of the listing.

        Args:
            page: 1-based page number

        Returns:
            Records on that page, pull requests included and flagged
        """
        # PaginatedList pages are 0-based
        raw_issues = self._get_listing().get_page(page - 1)
        logger.debug(
            "Fetched page %d of %s: %d entries",
            page,
            self.repository.full_name,
            len(raw_issues),
        )
        return [convert_issue(issue) for issue in raw_issues]


def convert_issue(github_issue: Issue) -> IssueRecord:
    """Convert PyGitHub issue to our model."""
    milestone = github_issue.milestone
    user = github_issue.user
    return IssueRecord(
        number=github_issue.number,
        title=github_issue.title or "",
        state=github_issue.state,
        author=user.login if user is not None else None,
        created_at=github_issue.created_at,
        updated_at=github_issue.updated_at,
        labels=tuple(label.name for label in github_issue.labels if label.name),
        milestone=milestone.title if milestone is not None else None,
        html_url=github_issue.html_url,
        body=github_issue.body,
        is_pull_request=github_issue.pull_request is not None,
    )


class GitHubClient:
    """GitHub API client with optional authentication."""

    def __init__(
        self,
        token: str | None = None,
        per_page: int = DEFAULT_PER_PAGE,
        base_url: str | None = None,
    ):
        """Initialize GitHub client.

        Requests are never retried: a failed or rate-limited request raises
        immediately instead of waiting for the limit to reset.

        Args:
            token: GitHub personal access token. If None, reads from
                GH_TOKEN or GITHUB_TOKEN env var; without one, requests are
                anonymous and subject to the lower rate limit.
            per_page: Number of issues requested per listing page
            base_url: API root for GitHub Enterprise; defaults to api.github.com
        """
        self.token = token or os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN")
        self.per_page = per_page

        options: dict[str, Any] = {
            "per_page": per_page,
            "user_agent": f"issue-vault/{__version__}",
            "retry": None,
        }
        if base_url:
            options["base_url"] = base_url

        if self.token:
            self.github = Github(auth=Auth.Token(self.token), **options)
        else:
            console.print(
                "No GitHub token configured, using anonymous access "
                "(lower rate limit)"
            )
            self.github = Github(**options)

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{owner}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {owner}/{repo} not found")

    def issue_pages(self, owner: str, repo: str) -> RepositoryIssuePages:
        """Return a page source over every issue of a repository."""
        return RepositoryIssuePages(self.get_repository(owner, repo), self.per_page)
