"""Console input abstraction for testing.

Interactive prompts read through this ABC so the remediation flow can be
driven by a scripted sequence of answers in tests.
"""

from abc import ABC, abstractmethod


class Console(ABC):
    """Abstract line reader for dependency injection."""

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Show a prompt and read one line of input.

        Args:
            prompt: Text shown before reading

        Returns:
            The line entered, without its trailing newline. An empty line
            returns the empty string.
        """
        ...
