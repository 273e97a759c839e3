"""Custom exceptions for the font2css system."""

from typing import Any


class Font2CSSError(Exception):
    """Base exception for all font2css errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(Font2CSSError):
    """Exception raised for input validation errors."""


class ConfigurationError(Font2CSSError):
    """Exception raised for configuration errors."""


class ProcessingError(Font2CSSError):
    """Exception raised while converting a font file."""


class StreamingNotSupportedError(ProcessingError):
    """Exception raised when an entry carries stream contents."""

    def __init__(self, path: str):
        super().__init__("Streaming is not supported", details={"path": path})
        self.path = path


class InputFileNotFoundError(ProcessingError):
    """Exception raised when an input path does not exist."""

    def __init__(self, file_path: str):
        super().__init__(f"Input file not found: {file_path}")


class NoFontFilesError(ValidationError):
    """Exception raised when no font files are found in the given inputs."""

    def __init__(self, location: str):
        super().__init__(f"No font files found in {location}")


class InvalidExtensionError(ValueError):
    """Exception raised for malformed file extensions in configuration."""

    def __init__(self, field_name: str, extension: str):
        super().__init__(f"Extension in {field_name} must start with '.': {extension!r}")


class UnencodableNameError(ProcessingError):
    """Exception raised when a file name cannot be written to a UTF-8 stylesheet."""

    def __init__(self, path: str, error: UnicodeEncodeError):
        super().__init__(f"File name is not valid UTF-8: {path!r}", details={"error": str(error)})
