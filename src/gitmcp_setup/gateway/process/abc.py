"""Process invocation abstraction for testing.

This module provides an ABC for running external commands so probes and
remediation steps can be exercised without spawning real processes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProbeResult:
    """Classified outcome of a single external command.

    Attributes:
        succeeded: True only when the command spawned and exited with status 0
    """

    succeeded: bool


class ProcessRunner(ABC):
    """Abstract process operations for dependency injection."""

    @abstractmethod
    def check(self, args: tuple[str, ...], *, cwd: Path) -> ProbeResult:
        """Run a command with its output discarded.

        Spawn errors and nonzero exits are classified as failure; neither is
        raised to the caller.

        Args:
            args: Command argv
            cwd: Working directory for the command

        Returns:
            ProbeResult describing whether the command succeeded
        """
        ...

    @abstractmethod
    def execute(self, args: tuple[str, ...], *, cwd: Path) -> ProbeResult:
        """Run a command with its output streamed to the terminal.

        Same classification contract as check().

        Args:
            args: Command argv
            cwd: Working directory for the command

        Returns:
            ProbeResult describing whether the command succeeded
        """
        ...

    @abstractmethod
    def capture(self, args: tuple[str, ...], *, cwd: Path) -> str:
        """Run a command and return its standard output as text.

        The exit status is not checked. Spawn errors are raised.

        Args:
            args: Command argv
            cwd: Working directory for the command

        Returns:
            Captured stdout
        """
        ...
