"""
CSS Font Keyword Tables
=======================

Static lookup tables used to recognize style and weight descriptors in
font file names.
"""

from types import MappingProxyType

# Values accepted by the CSS `font-style` property
FONT_STYLE_KEYWORDS: frozenset[str] = frozenset({"normal", "italic", "oblique"})

# Keyword and numeric values accepted by the CSS `font-weight` property
FONT_WEIGHT_KEYWORDS: frozenset[str] = frozenset(
    {
        "normal",
        "bold",
        "bolder",
        "lighter",
        "100",
        "200",
        "300",
        "400",
        "500",
        "600",
        "700",
        "800",
        "900",
    }
)

# Descriptive weight names as used by type foundries
FONT_WEIGHT_NAMES: MappingProxyType[str, int] = MappingProxyType(
    {
        "thin": 100,
        "hairline": 100,
        "extralight": 200,
        "ultralight": 200,
        "light": 300,
        "normal": 400,
        "regular": 400,
        "book": 400,
        "medium": 500,
        "semibold": 600,
        "demibold": 600,
        "bold": 700,
        "extrabold": 800,
        "ultrabold": 800,
        "black": 900,
        "heavy": 900,
    }
)
