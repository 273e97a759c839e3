"""
Font Face Deriver
=================

Guesses `@font-face` attributes from a font's file name.

File names are expected to follow the ``Family-Descriptor-Descriptor`` pattern,
e.g. ``Roboto-Black-Italic.woff2``. Everything after the first hyphen is matched
against the CSS style and weight keyword tables; recognized descriptors are
stripped from the end of the name to obtain the family.
"""

import logging
from dataclasses import dataclass

from .keywords import FONT_STYLE_KEYWORDS, FONT_WEIGHT_KEYWORDS, FONT_WEIGHT_NAMES
from .models import FontFaceDescriptor

logger = logging.getLogger(__name__)

FONT_URL_PREFIX = "../fonts/"
TOKEN_SEPARATOR = "-"


@dataclass(frozen=True)
class TokenClassification:
    """Style and weight recognized in the descriptor tokens."""

    style: str | None = None
    weight: str | None = None

    @property
    def count(self) -> int:
        """Number of recognized attributes (0, 1 or 2)."""
        return (self.style is not None) + (self.weight is not None)


def descriptor_tokens(basename: str) -> list[str]:
    """Get the lower-cased tokens following the family seed."""
    return [token.lower() for token in basename.split(TOKEN_SEPARATOR)[1:]]


def classify_tokens(tokens: list[str]) -> TokenClassification:
    """
    Classify descriptor tokens into a style and a weight.

    Every token is visited; a later match overrides an earlier one for the
    same property.

    Args:
        tokens: Lower-cased descriptor tokens

    Returns:
        TokenClassification with the last matching style and weight
    """
    style = None
    weight = None

    for token in tokens:
        if token in FONT_STYLE_KEYWORDS:
            style = token

        if token == "normal":
            continue

        if token in FONT_WEIGHT_NAMES:
            weight = str(FONT_WEIGHT_NAMES[token])
        elif token in FONT_WEIGHT_KEYWORDS:
            weight = token

    return TokenClassification(style=style, weight=weight)


def extract_family(basename: str, count: int) -> str:
    """
    Extract the font family by dropping the last ``count`` tokens.

    Args:
        basename: Font base file name
        count: Number of recognized attributes

    Returns:
        Family name (may be empty when every token is dropped)
    """
    parts = basename.split(TOKEN_SEPARATOR)
    if len(parts) == 1 or count == 0:
        return basename
    return TOKEN_SEPARATOR.join(parts[:-count])


def resolve_format(extension: str) -> str:
    """Get the `format()` hint for a file extension."""
    if "woff2" in extension:
        return "woff2"
    if "woff" in extension:
        return "woff"
    return "truetype"


def build_src_url(original_name: str, url_prefix: str = FONT_URL_PREFIX) -> str:
    """Build the URL of the font asset relative to the stylesheet."""
    return f"{url_prefix}{original_name}"


def derive_font_face(
    basename: str,
    extension: str,
    original_name: str,
    url_prefix: str = FONT_URL_PREFIX,
) -> FontFaceDescriptor:
    """
    Derive a `@font-face` descriptor from a font file name.

    Args:
        basename: Current file name without extension
        extension: Current file extension, including the dot
        original_name: File name as first seen, with its extension
        url_prefix: Prefix prepended to ``original_name`` in the `src` URL

    Returns:
        FontFaceDescriptor for the file
    """
    classification = classify_tokens(descriptor_tokens(basename))
    family = extract_family(basename, classification.count)

    descriptor = FontFaceDescriptor(
        family=family,
        src_url=build_src_url(original_name, url_prefix),
        format=resolve_format(extension),
        style=classification.style,
        weight=classification.weight,
    )
    logger.debug(
        f"Derived font face for {original_name}: family={family!r}, "
        f"style={descriptor.style}, weight={descriptor.weight}, format={descriptor.format}"
    )
    return descriptor
