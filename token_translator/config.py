"""Configuration model and loader for token-translator.

Precedence (highest to lowest):
1. Explicit overrides (CLI flags)
2. Environment variables (TOKEN_TRANSLATOR_*)
3. JSON config file (explicit path or token-translator.config.json)
4. Defaults
"""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, validator

from .errors import ConfigurationError
from .exporters.base import ExportOptions
from .tokens import ExportFormat, TokenType
from .translator_logging import get_logger

logger = get_logger()

CONFIG_FILE_NAME = "token-translator.config.json"
ENV_PREFIX = "TOKEN_TRANSLATOR_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


def _split_list(v: Any) -> Any:
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return v


class TranslatorConfig(BaseModel):
    """Defaults applied to imports and exports."""

    # Export defaults
    default_formats: list[str] = Field(
        default_factory=lambda: [ExportFormat.TYPESCRIPT.value]
    )
    default_include_types: list[str] = Field(
        default_factory=lambda: [t.value for t in TokenType]
    )
    css_prefix: str | None = Field(default=None)
    group_by_category: bool = Field(default=True)
    include_type_definitions: bool = Field(default=True)
    generate_docs: bool = Field(default=False)
    resolve_references: bool = Field(default=False)

    # Import defaults
    collection_name: str | None = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")
    log_file: Path | None = Field(default=None)

    @validator("default_formats", pre=True)
    def validate_formats(cls, v: Any) -> list[str]:
        v = _split_list(v)
        if not isinstance(v, list) or not v:
            raise ValueError("default_formats must be a non-empty list")
        known = {f.value for f in ExportFormat}
        for name in v:
            if name not in known:
                raise ValueError(f"Unknown export format: {name}")
        return v

    @validator("default_include_types", pre=True)
    def validate_include_types(cls, v: Any) -> list[str]:
        v = _split_list(v)
        if not isinstance(v, list):
            raise ValueError("default_include_types must be a list")
        known = {t.value for t in TokenType}
        for name in v:
            if name not in known:
                raise ValueError(f"Unknown token type: {name}")
        return v

    @validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @validator("log_format")
    def validate_log_format(cls, v: str) -> str:
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v

    def to_export_options(self, generated_at: str | None = None) -> ExportOptions:
        """Build export options from these defaults."""
        return ExportOptions(
            formats=list(self.default_formats),
            include_types=[TokenType(t) for t in self.default_include_types],
            group_by_category=self.group_by_category,
            include_type_definitions=self.include_type_definitions,
            generate_docs=self.generate_docs,
            css_prefix=self.css_prefix,
            resolve_references=self.resolve_references,
            generated_at=generated_at,
        )


class ConfigLoader:
    """Loads TranslatorConfig from file, environment and overrides."""

    def __init__(
        self,
        project_path: Path | None = None,
        config_file: Path | None = None,
    ):
        self.project_path = Path(project_path) if project_path else Path.cwd()
        self.config_file = Path(config_file) if config_file else None

    @property
    def config_path(self) -> Path:
        """Config file consulted by ``load``."""
        if self.config_file is not None:
            return self.config_file
        return self.project_path / CONFIG_FILE_NAME

    def load(self, **overrides: Any) -> TranslatorConfig:
        """Load configuration from all sources.

        Overrides whose value is None are ignored so unset CLI flags do not
        mask lower-precedence sources.

        Raises:
            ConfigurationError: If the file is unreadable or a value is
                invalid.
        """
        config_dict: dict[str, Any] = {}

        # 1. Config file
        file_settings = self._load_file()
        config_dict.update(file_settings)
        if file_settings:
            logger.debug(f"Loaded {len(file_settings)} settings from {self.config_path}")

        # 2. Environment variables
        env_settings = self._load_env()
        config_dict.update(env_settings)
        if env_settings:
            logger.debug(f"Applied {len(env_settings)} environment variables")

        # 3. Explicit overrides
        explicit = {k: v for k, v in overrides.items() if v is not None}
        config_dict.update(explicit)
        if explicit:
            logger.debug(f"Applied {len(explicit)} explicit overrides")

        try:
            return TranslatorConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}", str(self.config_path)
            ) from e

    def _load_file(self) -> dict[str, Any]:
        path = self.config_path
        if not path.exists():
            if self.config_file is not None:
                raise ConfigurationError(f"Config file not found: {path}", str(path))
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read config file: {e}", str(path)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a JSON object", str(path))
        return data

    def _load_env(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for field_name in TranslatorConfig.model_fields:
            value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if value is not None:
                settings[field_name] = value
        return settings


def load_config(
    config_file: Path | None = None,
    project_path: Path | None = None,
    **overrides: Any,
) -> TranslatorConfig:
    """Convenience function to load configuration."""
    loader = ConfigLoader(project_path=project_path, config_file=config_file)
    return loader.load(**overrides)
