"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .export import export

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="issue-vault",
    help="Export GitHub issues into a linked offline note vault",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="export", context_settings={"help_option_names": ["-h", "--help"]})(
    export
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from issue_vault import __version__

    console.print(f"Issue Vault v{__version__}")


if __name__ == "__main__":
    app()
