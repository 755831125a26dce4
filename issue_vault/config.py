"""Run configuration for issue exports."""

import os

from .export.fetcher import PAGE_DELAY_SECONDS
from .export.sanitize import DEFAULT_MAX_TITLE_LENGTH
from .github_client.client import DEFAULT_PER_PAGE

DEFAULT_OWNER = "pro-collection"
DEFAULT_REPO = "interview-question"
DEFAULT_OUT_DIR = "out"

# GitHub caps per_page for the issue listing at 100
MAX_PER_PAGE = 100


class ExportConfig:
    """Settings for one export run.

    Each value comes from the explicit argument when given, otherwise from
    the environment, otherwise from the built-in default.
    """

    def __init__(
        self,
        owner: str | None = None,
        repo: str | None = None,
        out_dir: str | None = None,
        token: str | None = None,
        per_page: int = DEFAULT_PER_PAGE,
        delay: float = PAGE_DELAY_SECONDS,
        max_title_length: int = DEFAULT_MAX_TITLE_LENGTH,
    ) -> None:
        self.owner: str = owner or os.getenv("OWNER") or DEFAULT_OWNER
        self.repo: str = repo or os.getenv("REPO") or DEFAULT_REPO
        self.out_dir: str = out_dir or os.getenv("OUT_DIR") or DEFAULT_OUT_DIR
        self.token: str | None = (
            token or os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or None
        )
        self.per_page = per_page
        self.delay = delay
        self.max_title_length = max_title_length

    @property
    def repository(self) -> str:
        """``owner/repo`` label of the exported repository."""
        return f"{self.owner}/{self.repo}"

    def is_authenticated(self) -> bool:
        """Check if a GitHub token is available."""
        return self.token is not None

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        problems = []
        if not self.owner.strip():
            problems.append("repository owner must not be empty")
        if not self.repo.strip():
            problems.append("repository name must not be empty")
        if not self.out_dir.strip():
            problems.append("output directory must not be empty")
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            problems.append(f"page size must be between 1 and {MAX_PER_PAGE}")
        if self.delay < 0:
            problems.append("page delay must not be negative")
        if self.max_title_length < 1:
            problems.append("max title length must be at least 1")

        if problems:
            raise ValueError(f"Invalid export configuration: {'; '.join(problems)}")
