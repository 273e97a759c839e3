"""
Font Face Transform
===================

Pipeline stage turning font entries into stylesheet entries.
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from font2css.core.exceptions import (
    ProcessingError,
    StreamingNotSupportedError,
    UnencodableNameError,
)
from font2css.core.models import FontEntry
from font2css.fonts.deriver import FONT_URL_PREFIX, derive_font_face

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[FontEntry, Exception], None]


def _log_error(entry: FontEntry, error: Exception) -> None:
    logger.warning(f"Skipping {entry.path}: {error}")


class FontFaceTransform:
    """
    Replace font entry contents with a generated `@font-face` rule.

    Null entries are forwarded untouched. Stream entries and entries whose
    name cannot be encoded are reported to the error handler and dropped
    without stopping the run. Buffer entries get UTF-8 stylesheet contents
    and their extension rewritten.
    """

    def __init__(
        self,
        url_prefix: str = FONT_URL_PREFIX,
        output_extension: str = ".css",
        on_error: ErrorHandler | None = None,
    ):
        self.url_prefix = url_prefix
        self.output_extension = output_extension
        self.on_error = on_error or _log_error

    def transform(self, entry: FontEntry) -> FontEntry:
        """
        Transform a single entry in place.

        Raises:
            StreamingNotSupportedError: If the entry carries stream contents
            UnencodableNameError: If the file name has undecodable bytes
        """
        if entry.is_null():
            logger.debug(f"Passing through null entry {entry.path}")
            return entry

        if entry.is_stream():
            raise StreamingNotSupportedError(str(entry.path))

        descriptor = derive_font_face(
            basename=entry.stem,
            extension=entry.extension,
            original_name=entry.original_path.name,
            url_prefix=self.url_prefix,
        )
        try:
            entry.contents = descriptor.declaration.encode("utf-8")
        except UnicodeEncodeError as e:
            raise UnencodableNameError(str(entry.path), e) from e
        entry.path = entry.path.with_suffix(self.output_extension)
        return entry

    def __call__(self, entries: Iterable[FontEntry]) -> Iterator[FontEntry]:
        """Transform entries lazily, reporting failed ones to the error handler."""
        for entry in entries:
            try:
                yield self.transform(entry)
            except ProcessingError as e:
                self.on_error(entry, e)
