"""Configuration management for font2css."""

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from font2css.fonts.deriver import FONT_URL_PREFIX

from .exceptions import ConfigurationError, InvalidExtensionError

DEFAULT_FONT_EXTENSIONS = [".ttf", ".otf", ".woff", ".woff2"]


class Font2CSSConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONT2CSS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Stylesheet generation configuration."""

    url_prefix: str = Field(FONT_URL_PREFIX, description="Prefix of the font URL in `src`")
    output_extension: str = Field(".css", description="Extension of generated stylesheets")
    font_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FONT_EXTENSIONS),
        description="File extensions picked up when scanning directories",
    )
    preserve_structure: bool = Field(
        False, description="Mirror input sub-directories in the output directory"
    )
    continue_on_error: bool = Field(True, description="Keep converting after a failed file")

    @field_validator("output_extension")
    @classmethod
    def validate_output_extension(cls, v):
        if not v.startswith("."):
            raise InvalidExtensionError("output_extension", v)
        return v

    @field_validator("font_extensions")
    @classmethod
    def normalize_font_extensions(cls, v):
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        if not normalized:
            raise ValueError("font_extensions must not be empty")
        return normalized

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Font2CSSConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "Font2CSSConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config_data is None:
        raise ConfigurationError(f"Empty configuration file: {config_path}")
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    try:
        # YAML values are explicit, so the .env file is not consulted
        return config_class(_env_file=None, **config_data)
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e
