"""Data structures flowing through the font2css pipeline."""

from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, Field


class FontEntry:
    """
    A file flowing through the pipeline.

    Contents are either ``None`` (null entry), ``bytes`` (buffer entry) or a
    readable binary stream (stream entry). Every path assignment is recorded
    in ``history`` so that the name the file was first seen under stays
    available after renames.
    """

    def __init__(self, path: str | Path, contents: bytes | BinaryIO | None = None):
        self.history: list[Path] = [Path(path)]
        self.contents = contents

    @classmethod
    def from_file(cls, path: str | Path) -> "FontEntry":
        """Read a file into a buffer entry."""
        path = Path(path)
        return cls(path, path.read_bytes())

    @property
    def path(self) -> Path:
        """Current path of the entry."""
        return self.history[-1]

    @path.setter
    def path(self, value: str | Path) -> None:
        value = Path(value)
        if value != self.path:
            self.history.append(value)

    @property
    def original_path(self) -> Path:
        """Path the entry was first observed under."""
        return self.history[0]

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def extension(self) -> str:
        return self.path.suffix

    def is_null(self) -> bool:
        return self.contents is None

    def is_buffer(self) -> bool:
        return isinstance(self.contents, bytes | bytearray)

    def is_stream(self) -> bool:
        return not self.is_null() and not self.is_buffer()

    def __repr__(self) -> str:
        if self.is_null():
            mode = "null"
        elif self.is_buffer():
            mode = f"{len(self.contents)} bytes"
        else:
            mode = "stream"
        return f"<FontEntry {self.path} ({mode})>"


class FontItemResult(BaseModel):
    """Result for a single font file."""

    source_path: Path = Field(..., description="Input font file")
    success: bool = Field(..., description="Whether conversion succeeded")
    output_path: Path | None = Field(None, description="Path to the written stylesheet")
    declaration: str | None = Field(None, description="Generated @font-face rule")
    processing_time_ms: float = Field(..., ge=0.0, description="Processing time in milliseconds")
    errors: list[str] = Field(default_factory=list, description="Error messages if any")


class FontBatchResult(BaseModel):
    """Result of converting a batch of font files."""

    results: list[FontItemResult] = Field(..., description="Results for each file")
    total_items: int = Field(..., ge=0, description="Total number of files processed")
    successful_items: int = Field(..., ge=0, description="Number of converted files")
    failed_items: int = Field(..., ge=0, description="Number of failed files")
    total_processing_time_ms: float = Field(..., ge=0.0, description="Total processing time")
    output_directory: Path = Field(..., description="Output directory used")

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_items == 0:
            return 0.0
        return (self.successful_items / self.total_items) * 100.0

    def get_failed_items(self) -> list[FontItemResult]:
        """Get list of failed items."""
        return [result for result in self.results if not result.success]

    def get_successful_items(self) -> list[FontItemResult]:
        """Get list of successful items."""
        return [result for result in self.results if result.success]
