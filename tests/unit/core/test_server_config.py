"""Tests for the MCP server descriptor."""

import json

import yaml

from gitmcp_setup.core.command_catalog import CommandCatalog
from gitmcp_setup.core.server_config import build_server_config, render_server_config


def test_default_server_config() -> None:
    config = build_server_config(CommandCatalog.for_helper())

    assert config.to_dict() == {
        "name": "git",
        "type": "stdio",
        "command": "git-mcp-server",
        "args": [],
        "env": {"ENVIRONMENT": "development"},
    }


def test_server_config_environment() -> None:
    config = build_server_config(CommandCatalog.for_helper(), "production")

    assert config.env == {"ENVIRONMENT": "production"}


def test_render_yaml_wraps_entry_in_mcps_list() -> None:
    config = build_server_config(CommandCatalog.for_helper())

    data = yaml.safe_load(render_server_config(config, "yaml"))

    assert data == {"mcps": [config.to_dict()]}


def test_render_json() -> None:
    config = build_server_config(CommandCatalog.for_helper(), "staging")

    data = json.loads(render_server_config(config, "json"))

    assert data["command"] == "git-mcp-server"
    assert data["env"] == {"ENVIRONMENT": "staging"}
