"""Pydantic models for GitHub data structures.

These models map to GitHub's REST API issue listing.
API Reference: https://docs.github.com/en/rest/issues/issues#list-repository-issues
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class IssueRecord(BaseModel):
    """Immutable snapshot of one repository issue as fetched.

    The listing endpoint also returns pull requests; those arrive with
    ``is_pull_request`` set and are dropped by the fetcher.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Issue number within the repository")
    title: str = Field("", description="Short description/title of the issue")
    state: str = Field(..., description="Current state: 'open', 'closed'")
    author: str | None = Field(None, description="Login of the issue creator")
    created_at: datetime = Field(..., description="Timestamp of issue creation")
    updated_at: datetime = Field(..., description="Timestamp of last issue update")
    labels: tuple[str, ...] = Field(
        default_factory=tuple, description="Label names in the order GitHub returns"
    )
    milestone: str | None = Field(None, description="Milestone title, if any")
    html_url: str = Field(..., description="Canonical web URL of the issue")
    body: str | None = Field(None, description="Markdown body of the issue")
    is_pull_request: bool = Field(
        False, description="Whether the listing entry is a pull request"
    )
