"""
Font face data models.
"""

from dataclasses import dataclass

FONT_DISPLAY = "swap"


@dataclass(frozen=True)
class FontFaceDescriptor:
    """Attributes guessed for a single `@font-face` rule."""

    family: str
    src_url: str
    format: str  # woff2, woff, truetype
    style: str | None = None
    weight: str | None = None

    @property
    def src(self) -> str:
        """Get the value of the `src` property."""
        return f'url("{self.src_url}") format("{self.format}")'

    def to_properties(self) -> dict[str, str]:
        """Get CSS property names mapped to their values, in rendering order."""
        properties = {
            "font-family": f'"{self.family}"',
            "src": self.src,
        }
        if self.style:
            properties["font-style"] = self.style
        if self.weight:
            properties["font-weight"] = self.weight
        return properties

    @property
    def declaration(self) -> str:
        """Render the full `@font-face` rule."""
        fragments = "".join(f"{name}:{value};" for name, value in self.to_properties().items())
        return f"@font-face{{{fragments}font-display:{FONT_DISPLAY};}}"

    def __str__(self) -> str:
        return self.declaration
