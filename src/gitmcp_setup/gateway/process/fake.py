"""Fake process operations for testing.

FakeProcessRunner is an in-memory implementation that answers commands from
pre-configured tables, enabling fast and deterministic tests.
"""

from pathlib import Path

from gitmcp_setup.gateway.process.abc import ProbeResult, ProcessRunner


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation of process operations.

    This class has NO public setup methods. All state is provided via constructor.

    Constructor Injection:
    ---------------------
    - succeeding: Commands that exit with status 0 (everything else fails)
    - outputs: Mapping of command -> stdout returned by capture()
    - raises: Mapping of command -> exception raised when that command runs

    Mutation Tracking:
    -----------------
    - calls: Every command passed to check(), execute() or capture(), in order
    - executed: Commands passed to execute() only
    """

    def __init__(
        self,
        *,
        succeeding: set[tuple[str, ...]] | None = None,
        outputs: dict[tuple[str, ...], str] | None = None,
        raises: dict[tuple[str, ...], Exception] | None = None,
    ) -> None:
        self._succeeding = succeeding if succeeding is not None else set()
        self._outputs = outputs if outputs is not None else {}
        self._raises = raises if raises is not None else {}
        self._calls: list[tuple[str, ...]] = []
        self._executed: list[tuple[str, ...]] = []

    def check(self, args: tuple[str, ...], *, cwd: Path) -> ProbeResult:
        self._record(args)
        return ProbeResult(succeeded=args in self._succeeding)

    def execute(self, args: tuple[str, ...], *, cwd: Path) -> ProbeResult:
        self._record(args)
        self._executed.append(args)
        return ProbeResult(succeeded=args in self._succeeding)

    def capture(self, args: tuple[str, ...], *, cwd: Path) -> str:
        self._record(args)
        return self._outputs.get(args, "")

    def _record(self, args: tuple[str, ...]) -> None:
        self._calls.append(args)
        if args in self._raises:
            raise self._raises[args]

    @property
    def calls(self) -> list[tuple[str, ...]]:
        """Commands run so far, for test assertions."""
        return list(self._calls)

    @property
    def executed(self) -> list[tuple[str, ...]]:
        """Commands run attached to the terminal, for test assertions."""
        return list(self._executed)
