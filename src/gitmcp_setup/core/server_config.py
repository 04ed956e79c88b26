"""MCP server descriptor for wiring the helper into an agent configuration."""

import json
from dataclasses import dataclass, field
from typing import Any

import yaml

from gitmcp_setup.core.command_catalog import CommandCatalog

DEFAULT_ENVIRONMENT = "development"


@dataclass(frozen=True)
class ServerConfig:
    """Static stdio server entry. Pure data, no lifecycle."""

    name: str
    transport_type: str
    command: str
    args: tuple[str, ...] = ()
    env: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.transport_type,
            "command": self.command,
            "args": list(self.args),
            "env": dict(self.env),
        }


def build_server_config(
    catalog: CommandCatalog, environment: str = DEFAULT_ENVIRONMENT
) -> ServerConfig:
    return ServerConfig(
        name="git",
        transport_type="stdio",
        command=catalog.helper_executable,
        args=(),
        env={"ENVIRONMENT": environment},
    )


def render_server_config(config: ServerConfig, output_format: str) -> str:
    """Render the entry as a one-item `mcps` list (yaml) or a plain object (json)."""
    if output_format == "json":
        return json.dumps(config.to_dict(), indent=2)
    return yaml.dump(
        {"mcps": [config.to_dict()]},
        default_flow_style=False,
        sort_keys=False,
    )
