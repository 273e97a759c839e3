"""Font Face Module
================

This module guesses CSS `@font-face` attributes from font file names.
"""

from .deriver import (
    FONT_URL_PREFIX,
    TokenClassification,
    classify_tokens,
    derive_font_face,
    extract_family,
    resolve_format,
)
from .keywords import FONT_STYLE_KEYWORDS, FONT_WEIGHT_KEYWORDS, FONT_WEIGHT_NAMES
from .models import FontFaceDescriptor

__all__ = [
    "FONT_STYLE_KEYWORDS",
    "FONT_URL_PREFIX",
    "FONT_WEIGHT_KEYWORDS",
    "FONT_WEIGHT_NAMES",
    "FontFaceDescriptor",
    "TokenClassification",
    "classify_tokens",
    "derive_font_face",
    "extract_family",
    "resolve_format",
]
