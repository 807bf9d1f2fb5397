"""Application configuration using Pydantic Settings with YAML/JSON file support."""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from link_protocols.core.enums import BrowseAction, ResolveAction
from link_protocols.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_DIR = Path.home() / ".link_protocols"


class SearchConfig(BaseModel):
    """Web-search scheme configuration."""

    url: str = Field(
        default="http://www.google.com/search?q=",
        description="Search URL prefix; the query is appended to it",
    )
    quote_query: bool = Field(
        default=True, description="Percent-encode the query before appending it"
    )


class ReferenceConfig(BaseModel):
    """Dictionary and DOI lookup configuration."""

    dict_url: str = Field(
        default="http://www.dict.org/bin/Dict?Form=Dict1&Database=*&Strategy=*&Query=",
        description="Dictionary lookup URL prefix; the word is appended to it",
    )
    doi_url: str = Field(
        default="http://dx.doi.org/", description="DOI resolver URL prefix"
    )


class ExtraProtocolConfig(BaseModel):
    """A user-declared protocol appended after the built-in table."""

    pattern: str = Field(..., min_length=1, description="Scheme prefix regex")
    browse: BrowseAction = Field(
        default=BrowseAction.OPEN_URL, description="What activating the link does"
    )
    resolve: ResolveAction = Field(
        default=ResolveAction.IDENTITY, description="How the link is published"
    )


class ProtocolsConfig(BaseModel):
    """Protocol table configuration."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    reference: ReferenceConfig = Field(default_factory=ReferenceConfig)
    extra: list[ExtraProtocolConfig] = Field(
        default_factory=list, description="Protocols appended after the defaults"
    )


class HostConfig(BaseModel):
    """Default host environment configuration."""

    browser: str | None = Field(
        default=None, description="webbrowser controller name; None uses the platform default"
    )
    info_command: str = Field(default="info", description="Info manual viewer executable")
    man_command: str = Field(default="man", description="Manual page viewer executable")
    command_timeout: float | None = Field(
        default=None, description="Viewer subprocess timeout in seconds; None waits"
    )

    @field_validator("browser", mode="before")
    @classmethod
    def validate_browser(cls, v):
        """Treat an empty browser name as the platform default."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class AppConfig(BaseSettings):
    """Main configuration.

    Supports YAML and JSON config files. Looks for config.yaml or config.json in:
    1. Current directory
    2. User config directory (~/.link_protocols/)
    3. Environment variables (LINKPROTO_*)

    Example config file:
        protocols:
          search:
            url: https://duckduckgo.com/?q=
          extra:
            - pattern: "gemini://"
              browse: open_url
              resolve: identity
        host:
          browser: firefox
    """

    model_config = SettingsConfigDict(
        env_prefix="LINKPROTO_",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    protocols: ProtocolsConfig = Field(default_factory=ProtocolsConfig)
    host: HostConfig = Field(default_factory=HostConfig)

    @classmethod
    def _config_files(cls) -> list[Path]:
        return [
            Path("config.yaml"),
            Path("config.json"),
            CONFIG_DIR / "config.yaml",
            CONFIG_DIR / "config.json",
        ]

    @classmethod
    def _load_config_file(cls) -> dict | None:
        """Load configuration from the first YAML or JSON file found.

        Returns:
            Dictionary with config values or None if no file found
        """
        for config_file in cls._config_files():
            if config_file.exists():
                try:
                    return read_config_file(config_file)
                except (OSError, ValueError, yaml.YAMLError) as e:
                    logger.warning(f"[CONFIG] Skipping unreadable config file {config_file}: {e}")
                    continue

        return None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Customize settings sources to include the YAML/JSON file."""
        config_dict = cls._load_config_file()

        def file_settings():
            return config_dict or {}

        return (
            init_settings,
            file_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


def read_config_file(config_file: Path) -> dict:
    """Read a YAML or JSON config file into a dictionary."""
    with open(config_file, encoding="utf-8") as f:
        if config_file.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping")
    return data


def load_config(path: str | Path) -> AppConfig:
    """Build a configuration from an explicit YAML or JSON file.

    Values in the file take precedence over the default file lookup and the
    environment.
    """
    config_file = Path(path).expanduser()
    data = read_config_file(config_file)
    logger.debug(f"[CONFIG] Loaded configuration from {config_file}")
    return AppConfig(**data)


# Singleton instance
_config_instance: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the process-wide configuration instance.

    Returns:
        The configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig()
    return _config_instance


def set_config(config: AppConfig) -> None:
    """Set the configuration instance (mainly for testing).

    Args:
        config: The configuration instance to set
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the configuration instance (mainly for testing)."""
    global _config_instance
    _config_instance = None
