"""font2css
========

Generates CSS `@font-face` rules from font files, guessing the family,
style and weight from hyphen-separated file names such as
``Roboto-Black-Italic.woff2``.
"""

__version__ = "1.0.0"

from .batch import FontBatchProcessor, collect_font_files
from .core.config import Font2CSSConfig
from .core.exceptions import Font2CSSError, ProcessingError, StreamingNotSupportedError
from .core.models import FontBatchResult, FontEntry
from .fonts import FontFaceDescriptor, derive_font_face
from .pipeline import FontFaceTransform

__all__ = [
    "Font2CSSConfig",
    "Font2CSSError",
    "FontBatchProcessor",
    "FontBatchResult",
    "FontEntry",
    "FontFaceDescriptor",
    "FontFaceTransform",
    "ProcessingError",
    "StreamingNotSupportedError",
    "collect_font_files",
    "derive_font_face",
]
