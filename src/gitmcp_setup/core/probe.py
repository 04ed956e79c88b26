"""Environment probes for the Git MCP helper and the local repository.

Every probe re-queries the host; nothing is cached between calls. Probe
failures of any kind are reported as absence, so "not installed" and
"could not check" are indistinguishable to callers.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gitmcp_setup.core.command_catalog import CommandCatalog, display_command
from gitmcp_setup.gateway.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

AVAILABLE_TOOLS: tuple[str, ...] = (
    "git_status",
    "git_log",
    "git_diff",
    "git_branch",
    "git_commit",
    "git_push",
    "git_pull",
    "git_checkout",
    "git_merge",
    "git_stash",
    "git_reset",
    "git_tag",
    "git_blame",
    "git_show",
)


@dataclass(frozen=True)
class ReadinessStatus:
    """Snapshot of both prerequisites."""

    helper_available: bool
    repo_available: bool

    @property
    def usable(self) -> bool:
        return self.helper_available and self.repo_available


@dataclass(frozen=True)
class RepoStatus:
    """Working-tree state derived from the short-status report.

    The three flag fields are None when the repository could not be
    inspected; consumers treat None as False.
    """

    initialized: bool
    clean: bool
    has_staged: bool | None = None
    has_unstaged: bool | None = None
    has_untracked: bool | None = None

    @staticmethod
    def unavailable() -> "RepoStatus":
        return RepoStatus(initialized=False, clean=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize, omitting flag fields that were never determined."""
        data: dict[str, Any] = {"initialized": self.initialized, "clean": self.clean}
        for key in ("has_staged", "has_unstaged", "has_untracked"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


def parse_short_status(report: str) -> RepoStatus:
    """Classify a `git status --porcelain` report.

    A line is staged evidence when its index column is neither space nor
    `?`, unstaged evidence when its worktree column is not space, and
    untracked evidence when it starts with `??`.
    """
    lines = [line for line in report.splitlines() if line]
    return RepoStatus(
        initialized=True,
        clean=report.strip() == "",
        has_staged=any(line[0] not in (" ", "?") for line in lines),
        has_unstaged=any(len(line) > 1 and line[1] != " " for line in lines),
        has_untracked=any(line.startswith("??") for line in lines),
    )


class EnvironmentProbe:
    """Stateless queries against the host environment."""

    def __init__(self, runner: ProcessRunner, catalog: CommandCatalog, cwd: Path) -> None:
        self._runner = runner
        self._catalog = catalog
        self._cwd = cwd

    def helper_available(self) -> bool:
        """Check the gem registry, then PATH, for the helper executable."""
        try:
            if self._runner.check(self._catalog.helper_registry_query, cwd=self._cwd).succeeded:
                return True
            return self._runner.check(self._catalog.helper_path_lookup, cwd=self._cwd).succeeded
        except Exception:
            # Absence and probe errors are reported the same way
            logger.debug("Helper probe failed", exc_info=True)
            return False

    def repo_available(self) -> bool:
        """Check for a .git directory, then ask git for its metadata root."""
        try:
            if (self._cwd / ".git").is_dir():
                return True
            return self._runner.check(self._catalog.repo_root_query, cwd=self._cwd).succeeded
        except Exception:
            logger.debug("Repository probe failed", exc_info=True)
            return False

    def usable(self) -> bool:
        return self.helper_available() and self.repo_available()

    def readiness(self) -> ReadinessStatus:
        return ReadinessStatus(
            helper_available=self.helper_available(),
            repo_available=self.repo_available(),
        )

    def repo_status(self) -> RepoStatus:
        """Inspect the working tree, degrading to unavailable on any error."""
        if not self.repo_available():
            return RepoStatus.unavailable()
        try:
            report = self._runner.capture(self._catalog.short_status, cwd=self._cwd)
        except Exception:
            logger.debug("Short-status query failed", exc_info=True)
            return RepoStatus.unavailable()
        return parse_short_status(report)

    def installation_instructions(self) -> list[str]:
        """Manual steps for whichever prerequisite is missing."""
        instructions: list[str] = []

        if not self.helper_available():
            instructions.append("Install Git MCP Server:")
            instructions.append(f"  {display_command(self._catalog.install_helper)}")
            instructions.append("")

        if not self.repo_available():
            instructions.append("Initialize Git repository:")
            instructions.append(f"  {display_command(self._catalog.init_repo)}")
            instructions.append(f"  {display_command(self._catalog.stage_all)}")
            instructions.append(f"  {display_command(self._catalog.initial_commit)}")
            instructions.append("")

        return instructions

    def available_tools(self) -> frozenset[str]:
        return frozenset(AVAILABLE_TOOLS)
