"""Configuration for Chaptercutter."""

from chaptercutter.config.settings import (
    ChapterSettings,
    ExtractionSettings,
    Settings,
    get_config_path,
    get_settings,
)

__all__ = [
    "ChapterSettings",
    "ExtractionSettings",
    "Settings",
    "get_config_path",
    "get_settings",
]
