"""Tests for the info command."""

import json

import yaml
from click.testing import CliRunner

from gitmcp_setup.cli.cli import cli
from gitmcp_setup.cli.config import LoadedConfig
from gitmcp_setup.core.context import SetupContext


def test_info_yaml_default() -> None:
    ctx = SetupContext.for_test()

    result = CliRunner().invoke(cli, ["info"], obj=ctx)

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.stdout)
    assert data == {
        "mcps": [
            {
                "name": "git",
                "type": "stdio",
                "command": "git-mcp-server",
                "args": [],
                "env": {"ENVIRONMENT": "development"},
            }
        ]
    }
    assert "git_blame" in result.output


def test_info_json_with_environment_override() -> None:
    ctx = SetupContext.for_test()

    result = CliRunner().invoke(
        cli, ["info", "--format", "json", "--environment", "production"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["env"] == {"ENVIRONMENT": "production"}


def test_info_uses_configured_environment() -> None:
    ctx = SetupContext.for_test(
        config=LoadedConfig(environment="staging", helper_name="git-mcp-server")
    )

    result = CliRunner().invoke(cli, ["info", "--format", "json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["env"] == {"ENVIRONMENT": "staging"}


def test_info_lists_tools_in_documented_order() -> None:
    result = CliRunner().invoke(cli, ["info"], obj=SetupContext.for_test())

    assert result.exit_code == 0, result.output
    assert result.stderr.index("git_status") < result.stderr.index("git_log")
    assert result.stderr.index("git_blame") < result.stderr.index("git_show")
