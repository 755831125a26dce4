"""GitHub client package for API interaction."""

from .client import GitHubClient, RepositoryIssuePages
from .models import IssueRecord

__all__ = [
    "GitHubClient",
    "RepositoryIssuePages",
    "IssueRecord",
]
