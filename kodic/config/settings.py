"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DictionarySettings(BaseSettings):
    """Dictionary API configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    base_url: str = Field(
        default="https://en.dict.naver.com/api3/enko/",
        validation_alias=AliasChoices("KODIC_DICT_URL"),
    )
    request_timeout: float = Field(
        default=10.0, validation_alias=AliasChoices("KODIC_DICT_TIMEOUT")
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        validation_alias=AliasChoices("KODIC_USER_AGENT"),
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL and keep a single trailing slash"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Dictionary URL must start with http:// or https://")
        return v.rstrip("/") + "/"

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v


class ClipboardSettings(BaseSettings):
    """Clipboard polling configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    poll_interval: float = Field(
        default=0.5, validation_alias=AliasChoices("KODIC_POLL_INTERVAL")
    )

    @field_validator("poll_interval")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        """Validate polling interval"""
        if v <= 0:
            raise ValueError("Poll interval must be positive")
        return v


class CacheSettings(BaseSettings):
    """Definition store configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    db_path: Path = Field(
        default=Path("kodic.db"), validation_alias=AliasChoices("KODIC_DB_PATH")
    )
    enable_cache: bool = Field(
        default=True, validation_alias=AliasChoices("KODIC_ENABLE_CACHE")
    )
    disable_disk: bool = Field(
        default=False, validation_alias=AliasChoices("KODIC_CACHE_DISABLE_DISK")
    )


class NotificationSettings(BaseSettings):
    """Desktop notification configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    enable: bool = Field(default=True, validation_alias=AliasChoices("KODIC_NOTIFY"))
    icon_path: Path = Field(
        default=Path("icon.jpg"), validation_alias=AliasChoices("KODIC_ICON")
    )
    app_name: str = Field(default="kodic", validation_alias=AliasChoices("KODIC_APP_NAME"))
    timeout_ms: int = Field(
        default=5000, validation_alias=AliasChoices("KODIC_NOTIFY_TIMEOUT_MS")
    )

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout_ms(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Notification timeout must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path = Field(
        default=Path("kodic.log"), validation_alias=AliasChoices("KODIC_LOG_FILE")
    )
    format: str = Field(
        default=(
            "%(asctime)s - %(name)s - %(levelname)s - "
            "%(filename)s:%(lineno)d - %(message)s"
        ),
        validation_alias=AliasChoices("LOG_FORMAT"),
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    dictionary: DictionarySettings = Field(default_factory=DictionarySettings)
    clipboard: ClipboardSettings = Field(default_factory=ClipboardSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    notification: NotificationSettings = Field(default_factory=NotificationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def get_all_paths(self) -> list[Path]:
        """Get parent directories of every file the app writes"""
        paths = [self.logging.file.parent]
        if self.cache.enable_cache and not self.cache.disable_disk:
            paths.append(self.cache.db_path.parent)
        return paths

    def create_directories(self) -> None:
        """Create all necessary directories"""
        for path in self.get_all_paths():
            path.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = AppSettings()
