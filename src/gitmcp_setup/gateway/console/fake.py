"""Fake console for testing.

FakeConsole answers prompts from a scripted list, enabling fast and
deterministic tests of interactive flows.
"""

import click

from gitmcp_setup.gateway.console.abc import Console


class FakeConsole(Console):
    """In-memory fake that replays scripted responses.

    This class has NO public setup methods. All state is provided via constructor.
    Running out of responses raises click.Abort, mirroring end of input.
    """

    def __init__(self, *, responses: list[str] | None = None) -> None:
        """Create FakeConsole with scripted responses.

        Args:
            responses: Lines returned by successive read_line() calls
        """
        self._responses = list(responses) if responses is not None else []
        self._prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self._prompts.append(prompt)
        if not self._responses:
            raise click.Abort()
        return self._responses.pop(0)

    @property
    def prompts(self) -> list[str]:
        """Prompts shown so far, for test assertions."""
        return list(self._prompts)
