"""
Batch Processor
===============

Converts many font files into stylesheet fragments with per-file error
reporting and progress tracking.
"""

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from font2css.core.config import DEFAULT_FONT_EXTENSIONS, Font2CSSConfig
from font2css.core.exceptions import (
    Font2CSSError,
    InputFileNotFoundError,
    NoFontFilesError,
    ProcessingError,
)
from font2css.core.models import FontBatchResult, FontEntry, FontItemResult
from font2css.pipeline.adapter import FontFaceTransform

logger = logging.getLogger(__name__)


class BatchProgressCallback:
    """Base class for batch progress callbacks."""

    def on_start(self, total_items: int) -> None:
        """Called when batch processing starts."""

    def on_item_complete(self, path: Path, success: bool, processing_time_ms: float) -> None:
        """Called when processing of a file completes."""

    def on_error(self, path: Path, error: Exception) -> None:
        """Called when a file fails."""

    def on_complete(self, result: FontBatchResult) -> None:
        """Called when batch processing completes."""


class ConsoleProgressCallback(BatchProgressCallback):
    """Console-based progress callback."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.start_time = None

    def on_start(self, total_items: int) -> None:
        self.start_time = time.time()
        if not self.quiet:
            print(f"Converting {total_items} font files...")

    def on_item_complete(self, path: Path, success: bool, processing_time_ms: float) -> None:
        if not self.quiet:
            status = "✓" if success else "✗"
            print(f"{status} {path.name} - {processing_time_ms:.1f}ms")

    def on_error(self, path: Path, error: Exception) -> None:
        print(f"✗ Error processing {path}: {error}")

    def on_complete(self, result: FontBatchResult) -> None:
        elapsed = time.time() - self.start_time if self.start_time else 0
        print(f"Converted {result.successful_items}/{result.total_items} fonts in {elapsed:.2f}s")
        if result.failed_items:
            print(f"Failed: {result.failed_items}")


def collect_font_files(
    inputs: Iterable[str | Path], extensions: Iterable[str] | None = None
) -> list[Path]:
    """
    Expand files and directories into a list of font files.

    Directories are searched recursively for files with one of the given
    extensions; files named explicitly are always included.

    Args:
        inputs: Font files and directories
        extensions: Accepted extensions (with leading dot)

    Returns:
        Sorted list of unique font file paths
    """
    if extensions is None:
        extensions = DEFAULT_FONT_EXTENSIONS
    accepted = {ext.lower() for ext in extensions}

    inputs = [Path(p) for p in inputs]
    found = set()
    for input_path in inputs:
        if not input_path.exists():
            raise InputFileNotFoundError(str(input_path))

        if input_path.is_dir():
            matches = [
                p for p in input_path.rglob("*") if p.is_file() and p.suffix.lower() in accepted
            ]
            logger.debug(f"Found {len(matches)} font files in {input_path}")
            found.update(matches)
        else:
            found.add(input_path)

    if not found:
        raise NoFontFilesError(", ".join(str(p) for p in inputs))

    return sorted(found)


class FontBatchProcessor:
    """
    Batch converter from font files to `@font-face` stylesheets.

    Each file is read into a buffer entry, passed through
    :class:`FontFaceTransform` and written to the output directory.
    """

    def __init__(self, config: Font2CSSConfig | None = None):
        self.config = config or Font2CSSConfig()
        self.transform = FontFaceTransform(
            url_prefix=self.config.url_prefix,
            output_extension=self.config.output_extension,
        )

    def process(
        self,
        font_paths: list[Path],
        output_dir: Path,
        progress_callback: BatchProgressCallback | None = None,
        base_dir: Path | None = None,
    ) -> FontBatchResult:
        """
        Convert font files and write the stylesheets.

        Args:
            font_paths: Font files to convert
            output_dir: Directory receiving the stylesheets
            progress_callback: Optional progress callback
            base_dir: Root used to mirror sub-directories when
                ``preserve_structure`` is enabled

        Returns:
            Batch processing result

        Raises:
            ProcessingError: If a file fails and ``continue_on_error`` is disabled
        """
        start_time = time.time()

        if progress_callback is None:
            progress_callback = BatchProgressCallback()

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        progress_callback.on_start(len(font_paths))

        results = []
        written: dict[Path, Path] = {}
        for font_path in font_paths:
            result = self._process_single_item(
                Path(font_path), output_dir, base_dir, progress_callback
            )
            results.append(result)

            if result.success:
                previous = written.get(result.output_path)
                if previous is not None:
                    logger.warning(
                        f"{result.output_path} from {result.source_path} overwrites "
                        f"the stylesheet generated from {previous}"
                    )
                written[result.output_path] = result.source_path
            elif not self.config.continue_on_error:
                raise ProcessingError(
                    f"Failed to convert {result.source_path}: {'; '.join(result.errors)}",
                    details=result,
                )

        failed_items = sum(1 for result in results if not result.success)
        batch_result = FontBatchResult(
            results=results,
            total_items=len(results),
            successful_items=len(results) - failed_items,
            failed_items=failed_items,
            total_processing_time_ms=(time.time() - start_time) * 1000,
            output_directory=output_dir,
        )
        logger.info(
            f"Converted {batch_result.successful_items}/{batch_result.total_items} "
            f"font files into {output_dir}"
        )

        progress_callback.on_complete(batch_result)
        return batch_result

    def _process_single_item(
        self,
        font_path: Path,
        output_dir: Path,
        base_dir: Path | None,
        progress_callback: BatchProgressCallback,
    ) -> FontItemResult:
        """Convert a single file."""
        start_time = time.time()

        try:
            entry = self.transform.transform(FontEntry.from_file(font_path))

            output_path = self._get_output_path(entry, output_dir, base_dir)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(entry.contents)

            processing_time_ms = (time.time() - start_time) * 1000
            result = FontItemResult(
                source_path=font_path,
                success=True,
                output_path=output_path,
                declaration=entry.contents.decode("utf-8"),
                processing_time_ms=processing_time_ms,
            )
            logger.debug(f"Wrote {output_path}")

        except (OSError, Font2CSSError) as e:
            processing_time_ms = (time.time() - start_time) * 1000
            logger.warning(f"Failed to convert {font_path}: {e}")
            progress_callback.on_error(font_path, e)

            result = FontItemResult(
                source_path=font_path,
                success=False,
                processing_time_ms=processing_time_ms,
                errors=[str(e)],
            )

        progress_callback.on_item_complete(font_path, result.success, result.processing_time_ms)
        return result

    def _get_output_path(self, entry: FontEntry, output_dir: Path, base_dir: Path | None) -> Path:
        """Determine output path for a converted entry."""
        if self.config.preserve_structure and base_dir is not None:
            try:
                relative_dir = entry.original_path.parent.relative_to(base_dir)
                return output_dir / relative_dir / entry.path.name
            except ValueError:
                logger.debug(f"{entry.original_path} is outside {base_dir}, writing flat")

        return output_dir / entry.path.name
