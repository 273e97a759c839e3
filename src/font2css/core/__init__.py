"""Core components for font2css."""

from .config import Font2CSSConfig, load_config_from_yaml
from .exceptions import (
    ConfigurationError,
    Font2CSSError,
    InputFileNotFoundError,
    NoFontFilesError,
    ProcessingError,
    StreamingNotSupportedError,
    UnencodableNameError,
    ValidationError,
)
from .models import FontBatchResult, FontEntry, FontItemResult

__all__ = [
    "ConfigurationError",
    "Font2CSSConfig",
    "Font2CSSError",
    "FontBatchResult",
    "FontEntry",
    "FontItemResult",
    "InputFileNotFoundError",
    "NoFontFilesError",
    "ProcessingError",
    "StreamingNotSupportedError",
    "UnencodableNameError",
    "ValidationError",
    "load_config_from_yaml",
]
