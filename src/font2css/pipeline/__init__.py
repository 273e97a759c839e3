"""Pipeline stages operating on font entries."""

from .adapter import FontFaceTransform

__all__ = ["FontFaceTransform"]
