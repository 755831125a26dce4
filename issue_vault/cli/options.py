"""Standardized CLI argument and option definitions.

Positional values default to None so that the environment and built-in
defaults in ExportConfig can fill them in.
"""

import typer

from ..export.fetcher import PAGE_DELAY_SECONDS
from ..export.sanitize import DEFAULT_MAX_TITLE_LENGTH
from ..github_client.client import DEFAULT_PER_PAGE

# Repository selection - positional, falling back to OWNER / REPO / OUT_DIR
OWNER_ARGUMENT = typer.Argument(
    None, help="Repository owner (default: $OWNER or pro-collection)"
)
REPO_ARGUMENT = typer.Argument(
    None, help="Repository name (default: $REPO or interview-question)"
)
OUT_DIR_ARGUMENT = typer.Argument(
    None, help="Output directory (default: $OUT_DIR or out)"
)

TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="GitHub API token (defaults to GH_TOKEN or GITHUB_TOKEN env var)",
)

# Fetch pacing
PAGE_SIZE_OPTION = typer.Option(
    DEFAULT_PER_PAGE, "--page-size", help="Issues requested per page (1-100)"
)
DELAY_OPTION = typer.Option(
    PAGE_DELAY_SECONDS, "--delay", help="Pause between page requests in seconds"
)

# Naming
MAX_TITLE_LENGTH_OPTION = typer.Option(
    DEFAULT_MAX_TITLE_LENGTH,
    "--max-title-length",
    help="Maximum title characters used in issue file names",
)
