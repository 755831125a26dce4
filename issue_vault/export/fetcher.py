"""Sequential, rate-paced retrieval of a repository's complete issue set."""

import logging
import time
from collections.abc import Callable
from typing import Protocol

from rich.console import Console

from ..github_client.models import IssueRecord

console = Console()
logger = logging.getLogger(__name__)

PAGE_DELAY_SECONDS = 0.25


class IssuePageSource(Protocol):
    """Anything that can list issues one fixed-size page at a time."""

    per_page: int

    def fetch_page(self, page: int) -> list[IssueRecord]:
        """Return the records on 1-based ``page``."""
        ...


def fetch_all_issues(
    source: IssuePageSource,
    delay: float = PAGE_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> list[IssueRecord]:
    """Fetch every issue from ``source``, oldest first.

    Pages are requested strictly in order until one comes back shorter
    than ``source.per_page``. The page length is taken before pull
    requests are removed, so a page mixing issues and pull requests never
    ends pagination early. Between pages the function pauses for ``delay``
    seconds. Errors from the source are not retried and propagate to the
    caller.

    Args:
        source: Paginated issue listing
        delay: Pause between consecutive page requests, in seconds
        sleep: Pause implementation, replaceable in tests

    Returns:
        All issues, pull requests excluded, in listing order
    """
    issues: list[IssueRecord] = []
    seen: set[int] = set()
    page = 1

    while True:
        batch = source.fetch_page(page)
        kept = 0
        for record in batch:
            if record.is_pull_request:
                continue
            if record.number in seen:
                logger.warning(
                    "Issue #%d returned again on page %d, skipping", record.number, page
                )
                continue
            seen.add(record.number)
            issues.append(record)
            kept += 1

        logger.debug("Page %d: %d entries, %d issues kept", page, len(batch), kept)
        console.print(f"Fetched page {page}: {kept} issues")

        if len(batch) < source.per_page:
            break
        sleep(delay)
        page += 1

    return issues
