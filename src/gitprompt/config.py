from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Literal

import yaml
from pydantic import Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from gitprompt.exceptions import ConfigError
from gitprompt.logging import get_logger

__all__ = [
    "GitPromptConfig",
    "UntrackedMode",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)

UntrackedMode = Literal["all", "normal", "no"]


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e
            except OSError as e:
                raise ConfigError(
                    message=f"Cannot read {yaml_file}: {e}",
                    field=None,
                    value=str(yaml_file),
                ) from e
            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    message=f"Config file {yaml_file} must contain a mapping",
                    field=None,
                    value=loaded,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class GitPromptConfig(BaseSettings):
    """Root configuration object for gitprompt.

    Attributes:
        short_sha_length: Characters of the commit id shown for a detached HEAD.
        untracked_files: Untracked scan mode handed to git ("no" skips the scan).
        count_stash: Read the stash reflog; when False the stash count is 0.
        verbosity: Log level used when no -v/-q flag is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITPROMPT_",
        extra="ignore",
    )

    short_sha_length: int = Field(default=7, ge=4, le=40)
    untracked_files: UntrackedMode = "normal"
    count_stash: bool = True
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    #: Explicit YAML file, set on the subclass built by load_config()
    yaml_config_file: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init settings (explicit keyword arguments)
        2. Environment variables (GITPROMPT_*)
        3. Explicit YAML config (--config)
        4. User YAML config (~/.config/gitprompt/config.yaml)
        """
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        config_file = getattr(settings_cls, "yaml_config_file", None)
        if config_file is not None:
            sources.append(YamlConfigSource(settings_cls, config_file))
        sources.append(YamlConfigSource(settings_cls, get_user_config_path()))
        return tuple(sources)


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/gitprompt/config.yaml
    """
    return Path.home() / ".config" / "gitprompt" / "config.yaml"


def load_config(config_path: Path | None = None) -> GitPromptConfig:
    """Load configuration with hierarchy: defaults -> user -> file -> env.

    Args:
        config_path: Optional explicit YAML config file.

    Returns:
        GitPromptConfig instance with merged configuration.

    Raises:
        ConfigError: If the file is missing, unparsable, or values are invalid.
    """
    if config_path is not None and not config_path.is_file():
        raise ConfigError(
            message=f"Config file not found: {config_path}",
            field=None,
            value=str(config_path),
        )

    settings_cls: type[GitPromptConfig] = GitPromptConfig
    if config_path is not None:
        # settings_customise_sources only sees the class being built
        class FileBackedConfig(GitPromptConfig):
            yaml_config_file = config_path

        settings_cls = FileBackedConfig

    try:
        return settings_cls()
    except ValidationError as e:
        # Extract first error for ConfigError
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
