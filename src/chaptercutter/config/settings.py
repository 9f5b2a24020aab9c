"""Pydantic settings for Chaptercutter configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chaptercutter.exceptions import InvalidSettingsError


def get_config_dir() -> Path:
    """Get the configuration directory, creating it if needed."""
    config_dir = Path.home() / ".chaptercutter"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from YAML file if it exists.

    Returns:
        Dictionary of configuration values, or empty dict if file doesn't exist.
    """
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path) as f:
                return yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError):
            # Silently ignore malformed or unreadable config
            return {}
    return {}


ParagraphSizing = Literal["cycle", "fixed", "random"]


class ChapterSettings(BaseModel):
    """Thresholds for chapter detection and prose reconstruction."""

    min_chapter_chars: int = Field(default=50, ge=0)
    min_page_break_segment_chars: int = Field(default=100, ge=0)
    page_break_newline_run: int = Field(default=4, ge=2)
    max_page_break_title_chars: int = Field(default=50, ge=1)

    min_sentences_per_paragraph: int = Field(default=3, ge=1)
    max_sentences_per_paragraph: int = Field(default=5, ge=1)
    paragraph_sizing: ParagraphSizing = "cycle"
    random_seed: int | None = None  # only used with paragraph_sizing="random"
    respect_blank_lines: bool = True

    @model_validator(mode="after")
    def _check_sentence_range(self) -> "ChapterSettings":
        if self.min_sentences_per_paragraph > self.max_sentences_per_paragraph:
            raise ValueError(
                "min_sentences_per_paragraph must not exceed max_sentences_per_paragraph"
            )
        return self

    @property
    def sentences_per_paragraph(self) -> tuple[int, int]:
        """Inclusive (min, max) sentence range for one paragraph."""
        return (self.min_sentences_per_paragraph, self.max_sentences_per_paragraph)


class ExtractionSettings(BaseModel):
    """Settings for PDF text extraction."""

    backend: Literal["pdfplumber"] = "pdfplumber"
    max_workers: int | None = None
    layout: bool = False


class Settings(BaseSettings):
    """Main settings model for Chaptercutter."""

    model_config = SettingsConfigDict(
        env_prefix="CHAPTERCUTTER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    chapters: ChapterSettings = Field(default_factory=ChapterSettings)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment must still win
        return (env_settings, init_settings, dotenv_settings, file_secret_settings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables (CHAPTERCUTTER_* prefix)
    2. YAML config file (~/.chaptercutter/config.yaml)
    3. Default values

    Raises:
        InvalidSettingsError: If any value fails validation.
    """
    yaml_config = _load_yaml_config()
    try:
        return Settings(**yaml_config)
    except ValidationError as e:
        raise InvalidSettingsError("Invalid Chaptercutter configuration", details=str(e)) from e
