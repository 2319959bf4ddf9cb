"""Configuration management module"""
import os
from pathlib import Path
from typing import Optional
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)


def get_home_path() -> Path:
    """Get the DrawIt home directory from environment or default"""
    home_path = os.environ.get("DRAWIT_HOME")
    if home_path:
        return Path(home_path).expanduser()
    return Path.home() / ".drawit"


def get_config_file() -> Path | None:
    """Get config file path if it exists"""
    config_file = get_home_path() / "config.toml"
    if config_file.exists():
        return config_file
    return None


class Settings(BaseSettings):
    """Client configuration settings"""

    # Backend connection
    base_url: str = "http://localhost:3000/"
    timeout: int = 30  # seconds

    # Sent with login/register when the request carries none
    device_id: Optional[str] = None

    # Logging configuration
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="DRAWIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML file"""
        config_file = get_config_file()
        if config_file:
            toml_settings = TomlConfigSettingsSource(
                settings_cls, toml_file=config_file
            )
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                toml_settings,
                file_secret_settings,
            )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
