"""Storage manager for exported vault documents."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from rich.console import Console

from ..export.models import ISSUES_DIR, Facet

console = Console()

OUTPUT_DIRECTORIES = (ISSUES_DIR, Facet.LABEL.directory, Facet.MILESTONE.directory)


class VaultWriter:
    """Writes markdown documents into the vault output layout.

    Layout::

        <output_dir>/index.md
        <output_dir>/issues/<number>. <title>.md
        <output_dir>/by-label/<name>.md
        <output_dir>/by-milestone/<name>.md
    """

    def __init__(self, output_dir: str | Path = "out"):
        """Initialize the writer.

        Args:
            output_dir: Root directory of the exported vault
        """
        self.base_path = Path(output_dir)
        self.documents_written = 0

    def ensure_directories(self) -> list[Path]:
        """Create the output root and its three sub-directories.

        The directories are independent of each other and are created
        concurrently. Existing directories are left as they are.

        Returns:
            Paths of the sub-directories
        """
        paths = [self.base_path / name for name in OUTPUT_DIRECTORIES]
        with ThreadPoolExecutor(max_workers=len(paths)) as executor:
            # list() re-raises the first mkdir failure
            list(executor.map(lambda p: p.mkdir(parents=True, exist_ok=True), paths))
        return paths

    def write_document(self, relative_path: str | Path, content: str) -> Path:
        """Write one complete document, replacing any previous version.

        Args:
            relative_path: Path below the output root, including extension
            content: Full document text

        Returns:
            Path to the written file
        """
        file_path = self.base_path / relative_path
        try:
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            console.print(f"Error writing {file_path}: {e}")
            raise

        self.documents_written += 1
        return file_path
