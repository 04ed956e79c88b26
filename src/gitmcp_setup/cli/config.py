import tomllib
from dataclasses import dataclass
from pathlib import Path

from gitmcp_setup.core.command_catalog import DEFAULT_HELPER_NAME
from gitmcp_setup.core.server_config import DEFAULT_ENVIRONMENT

CONFIG_DIR_NAME = ".gitmcp"


class ConfigError(Exception):
    """Raised when .gitmcp/config.toml cannot be used."""


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `.gitmcp/config.toml`."""

    environment: str
    helper_name: str

    @staticmethod
    def defaults() -> "LoadedConfig":
        return LoadedConfig(environment=DEFAULT_ENVIRONMENT, helper_name=DEFAULT_HELPER_NAME)


def _string_setting(data: dict, section: str, key: str, default: str) -> str:
    table = data.get(section, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{section}] must be a table")
    value = table.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{section}.{key} must be a non-empty string")
    return value


def load_config(config_dir: Path) -> LoadedConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Example config:
      [server]
      environment = "staging"

      [helper]
      name = "git-mcp-server"
    """

    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return LoadedConfig.defaults()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {e}") from e

    return LoadedConfig(
        environment=_string_setting(data, "server", "environment", DEFAULT_ENVIRONMENT),
        helper_name=_string_setting(data, "helper", "name", DEFAULT_HELPER_NAME),
    )
