"""Production implementation of process operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from gitmcp_setup.gateway.process.abc import ProbeResult, ProcessRunner

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Real implementation of process operations using subprocess."""

    def check(self, args: tuple[str, ...], *, cwd: Path) -> ProbeResult:
        """Run a command quietly and classify its exit status."""
        return self._run(args, cwd=cwd, quiet=True)

    def execute(self, args: tuple[str, ...], *, cwd: Path) -> ProbeResult:
        """Run a command attached to the terminal and classify its exit status."""
        return self._run(args, cwd=cwd, quiet=False)

    def capture(self, args: tuple[str, ...], *, cwd: Path) -> str:
        """Run a command and return stdout regardless of exit status."""
        logger.debug("Capturing output of %s in %s", list(args), cwd)
        result = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        if result.returncode != 0:
            logger.debug("%s exited with %d", args[0], result.returncode)
        return result.stdout

    def _run(self, args: tuple[str, ...], *, cwd: Path, quiet: bool) -> ProbeResult:
        logger.debug("Running %s in %s", list(args), cwd)
        stream = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(
                list(args),
                cwd=cwd,
                stdout=stream,
                stderr=stream,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Could not run %s: %s", args[0], e)
            return ProbeResult(succeeded=False)

        if result.returncode != 0:
            logger.debug("%s exited with %d", args[0], result.returncode)
        return ProbeResult(succeeded=result.returncode == 0)
