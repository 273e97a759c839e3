"""Batch processing module for converting many font files at once."""

from .processor import (
    BatchProgressCallback,
    ConsoleProgressCallback,
    FontBatchProcessor,
    collect_font_files,
)

__all__ = [
    "BatchProgressCallback",
    "ConsoleProgressCallback",
    "FontBatchProcessor",
    "collect_font_files",
]
