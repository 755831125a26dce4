"""Models shared across the export pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

ISSUES_DIR = "issues"
ROOT_INDEX = "index.md"


class Facet(str, Enum):
    """Grouping dimension for category documents."""

    LABEL = "label"
    MILESTONE = "milestone"

    @property
    def directory(self) -> str:
        """Output directory holding this facet's category documents."""
        return f"by-{self.value}"


class FilenameMeta(BaseModel):
    """Naming data derived once per issue."""

    model_config = ConfigDict(frozen=True)

    base_name: str = Field(
        ..., description="Document stem: '<number>. <truncated title>'"
    )
    display_text: str = Field(
        ..., description="Link text: '#<number> <sanitized title>'"
    )

    @property
    def link_target(self) -> str:
        """Vault link target of the issue document, without extension."""
        return f"{ISSUES_DIR}/{self.base_name}"


class ExportResult(BaseModel):
    """Summary of a completed export run."""

    issue_count: int = Field(..., description="Issues exported")
    label_count: int = Field(..., description="Distinct labels indexed")
    milestone_count: int = Field(..., description="Distinct milestones indexed")
    documents_written: int = Field(..., description="Markdown files written")
    output_dir: str = Field(..., description="Absolute output directory")
