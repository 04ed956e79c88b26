"""Tests for the environment probe."""

import logging
import os
import shutil
import subprocess
from pathlib import Path

import pytest

from gitmcp_setup.core.command_catalog import CommandCatalog
from gitmcp_setup.core.probe import AVAILABLE_TOOLS, EnvironmentProbe, RepoStatus
from gitmcp_setup.gateway.process.fake import FakeProcessRunner
from gitmcp_setup.gateway.process.real import RealProcessRunner

CATALOG = CommandCatalog.for_helper()
REGISTRY_QUERY = ("gem", "list", "-i", "git-mcp-server")
PATH_LOOKUP = ("which", "git-mcp-server")
REPO_ROOT_QUERY = ("git", "rev-parse", "--git-dir")
SHORT_STATUS = ("git", "status", "--porcelain")

INSTALL_BLOCK = [
    "Install Git MCP Server:",
    "  gem install git-mcp-server --no-document",
    "",
]
INIT_BLOCK = [
    "Initialize Git repository:",
    "  git init",
    "  git add .",
    "  git commit -m 'Initial commit'",
    "",
]


def _probe(runner: FakeProcessRunner, cwd: Path) -> EnvironmentProbe:
    return EnvironmentProbe(runner, CATALOG, cwd)


def _runner_for(*, helper: bool, repo: bool, report: str = "") -> FakeProcessRunner:
    succeeding: set[tuple[str, ...]] = set()
    if helper:
        succeeding.add(PATH_LOOKUP)
    if repo:
        succeeding.add(REPO_ROOT_QUERY)
    return FakeProcessRunner(succeeding=succeeding, outputs={SHORT_STATUS: report})


def test_helper_available_via_gem_registry(tmp_path: Path) -> None:
    runner = FakeProcessRunner(succeeding={REGISTRY_QUERY})

    assert _probe(runner, tmp_path).helper_available() is True
    # PATH lookup is skipped once the registry answers
    assert runner.calls == [REGISTRY_QUERY]


def test_helper_available_via_path_lookup(tmp_path: Path) -> None:
    runner = FakeProcessRunner(succeeding={PATH_LOOKUP})

    assert _probe(runner, tmp_path).helper_available() is True
    assert runner.calls == [REGISTRY_QUERY, PATH_LOOKUP]


def test_helper_not_available(tmp_path: Path) -> None:
    runner = FakeProcessRunner()

    assert _probe(runner, tmp_path).helper_available() is False


def test_helper_probe_exception_is_negative(tmp_path: Path) -> None:
    runner = FakeProcessRunner(raises={REGISTRY_QUERY: RuntimeError("boom")})

    assert _probe(runner, tmp_path).helper_available() is False


def test_repo_available_with_git_directory(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    runner = FakeProcessRunner()

    assert _probe(runner, tmp_path).repo_available() is True
    assert runner.calls == []


def test_repo_available_via_rev_parse(tmp_path: Path) -> None:
    runner = FakeProcessRunner(succeeding={REPO_ROOT_QUERY})

    assert _probe(runner, tmp_path).repo_available() is True


def test_git_file_is_not_a_repository_marker(tmp_path: Path) -> None:
    (tmp_path / ".git").write_text("gitdir: elsewhere", encoding="utf-8")
    runner = FakeProcessRunner()

    assert _probe(runner, tmp_path).repo_available() is False


def test_repo_probe_exception_is_negative(tmp_path: Path) -> None:
    runner = FakeProcessRunner(raises={REPO_ROOT_QUERY: OSError("no git")})

    assert _probe(runner, tmp_path).repo_available() is False


@pytest.mark.parametrize(
    ("helper", "repo"),
    [(True, True), (True, False), (False, True), (False, False)],
)
def test_usable_is_logical_and(tmp_path: Path, helper: bool, repo: bool) -> None:
    probe = _probe(_runner_for(helper=helper, repo=repo), tmp_path)

    assert probe.usable() is (helper and repo)
    readiness = probe.readiness()
    assert readiness.helper_available is helper
    assert readiness.repo_available is repo
    assert readiness.usable is (helper and repo)


def test_probes_are_idempotent(tmp_path: Path) -> None:
    probe = _probe(_runner_for(helper=True, repo=True, report=" M a.rb\n"), tmp_path)

    assert probe.helper_available() == probe.helper_available()
    assert probe.repo_available() == probe.repo_available()
    assert probe.repo_status() == probe.repo_status()
    assert probe.installation_instructions() == probe.installation_instructions()


def test_repo_status_without_repository(tmp_path: Path) -> None:
    runner = _runner_for(helper=True, repo=False)

    status = _probe(runner, tmp_path).repo_status()

    assert status == RepoStatus.unavailable()
    assert status.to_dict() == {"initialized": False, "clean": False}
    assert SHORT_STATUS not in runner.calls


def test_repo_status_parses_report(tmp_path: Path) -> None:
    runner = _runner_for(helper=False, repo=True, report=" M a.rb\nA  b.rb\n?? c.rb\n")

    status = _probe(runner, tmp_path).repo_status()

    assert status.initialized is True
    assert status.clean is False
    assert status.has_staged is True
    assert status.has_unstaged is True
    assert status.has_untracked is True


def test_repo_status_clean(tmp_path: Path) -> None:
    status = _probe(_runner_for(helper=False, repo=True), tmp_path).repo_status()

    assert status.to_dict() == {
        "initialized": True,
        "clean": True,
        "has_staged": False,
        "has_unstaged": False,
        "has_untracked": False,
    }


def test_repo_status_degrades_on_exception(tmp_path: Path) -> None:
    runner = FakeProcessRunner(
        succeeding={REPO_ROOT_QUERY},
        raises={SHORT_STATUS: OSError("git vanished")},
    )

    status = _probe(runner, tmp_path).repo_status()

    assert status.to_dict() == {"initialized": False, "clean": False}


def test_installation_instructions_empty_when_ready(tmp_path: Path) -> None:
    probe = _probe(_runner_for(helper=True, repo=True), tmp_path)

    assert probe.installation_instructions() == []


def test_installation_instructions_helper_missing(tmp_path: Path) -> None:
    probe = _probe(_runner_for(helper=False, repo=True), tmp_path)

    assert probe.installation_instructions() == INSTALL_BLOCK


def test_installation_instructions_repo_missing(tmp_path: Path) -> None:
    probe = _probe(_runner_for(helper=True, repo=False), tmp_path)

    assert probe.installation_instructions() == INIT_BLOCK


def test_installation_instructions_both_missing(tmp_path: Path) -> None:
    probe = _probe(_runner_for(helper=False, repo=False), tmp_path)

    assert probe.installation_instructions() == INSTALL_BLOCK + INIT_BLOCK


def test_available_tools_is_fixed(tmp_path: Path) -> None:
    runner = FakeProcessRunner()

    tools = _probe(runner, tmp_path).available_tools()

    assert tools == frozenset(AVAILABLE_TOOLS)
    assert len(tools) == 14
    assert {"git_status", "git_commit", "git_blame", "git_show"} <= tools
    assert runner.calls == []


def test_helper_probe_failure_is_logged_at_debug(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    runner = FakeProcessRunner(raises={REGISTRY_QUERY: RuntimeError("boom")})

    with caplog.at_level(logging.DEBUG, logger="gitmcp_setup.core.probe"):
        assert _probe(runner, tmp_path).helper_available() is False

    assert any(
        record.levelno == logging.DEBUG and "Helper probe failed" in record.getMessage()
        for record in caplog.records
    )


def test_short_status_failure_is_logged_at_debug(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    runner = FakeProcessRunner(
        succeeding={REPO_ROOT_QUERY},
        raises={SHORT_STATUS: OSError("git vanished")},
    )

    with caplog.at_level(logging.DEBUG, logger="gitmcp_setup.core.probe"):
        _probe(runner, tmp_path).repo_status()

    assert "Short-status query failed" in caplog.text


@pytest.mark.skipif(shutil.which("git") is None, reason="needs git")
def test_repo_status_with_non_utf8_filename(tmp_path: Path) -> None:
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    subprocess.run(["git", "config", "core.quotePath", "false"], cwd=tmp_path, check=True)
    (tmp_path / os.fsdecode(b"caf\xe9.txt")).write_text("x", encoding="utf-8")

    status = EnvironmentProbe(RealProcessRunner(), CATALOG, tmp_path).repo_status()

    assert status.initialized is True
    assert status.clean is False
    assert status.has_untracked is True
