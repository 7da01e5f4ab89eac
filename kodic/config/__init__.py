"""Configuration module for kodic"""

from .settings import (
    AppSettings,
    CacheSettings,
    ClipboardSettings,
    DictionarySettings,
    LoggingSettings,
    NotificationSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "CacheSettings",
    "ClipboardSettings",
    "DictionarySettings",
    "LoggingSettings",
    "NotificationSettings",
    "settings",
]
