"""Interactive yes/no confirmation.

Line reading sits behind the :class:`LineReader` interface. The reader
matching the process's stdin is chosen once at startup by
:func:`get_line_reader`; callers only ever see :class:`Confirmer`.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from rich.markup import escape

from nvmprune.utils.formatting import console

logger = logging.getLogger(__name__)

# Answers accepted as "yes" (after stripping whitespace)
_YES_ANSWERS: frozenset[str] = frozenset({"y", "Y"})


class LineReader(ABC):
    """Reads one line of operator input after showing a prompt."""

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Show a prompt and block until a line is entered.

        Args:
            prompt: Plain text prompt (no Rich markup).

        Returns:
            The line without its trailing newline; empty at end of input.
        """


class TerminalLineReader(LineReader):
    """Line reader for an interactive terminal.

    Reads through the Rich console so the prompt shares the console's
    styling and line editing comes from the terminal.
    """

    def read_line(self, prompt: str) -> str:
        """Prompt on the console and read with line editing."""
        try:
            return console.input(f"[bold]{escape(prompt)}[/bold]")
        except EOFError:
            console.print()
            return ""


class StreamLineReader(LineReader):
    """Line reader for piped or redirected input.

    Attributes:
        stream: Stream to read from. If None, reads sys.stdin at call time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_line(self, prompt: str) -> str:
        """Print the prompt and read one raw line from the stream."""
        console.print(prompt, end="", markup=False, highlight=False)
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        # Input is not echoed when piped; finish the prompt line ourselves
        console.print()
        return line.rstrip("\r\n")


def get_line_reader(stream: TextIO | None = None) -> LineReader:
    """Choose the line reader for this process.

    Args:
        stream: Input stream to inspect. If None, uses sys.stdin.

    Returns:
        TerminalLineReader when the stream is a TTY, StreamLineReader otherwise.
    """
    source = stream if stream is not None else sys.stdin
    try:
        interactive = source.isatty()
    except (AttributeError, ValueError):
        interactive = False

    if interactive:
        logger.debug("Reading answers from the terminal")
        return TerminalLineReader()
    logger.debug("Reading answers from a non-interactive stream")
    return StreamLineReader(stream)


class Confirmer:
    """Asks yes/no questions, defaulting to no.

    Example:
        >>> confirmer = Confirmer(get_line_reader())
        >>> if confirmer.confirm("Uninstall Node v16.3.0? [y/N] "):
        ...     ...
    """

    def __init__(self, reader: LineReader) -> None:
        self._reader = reader

    def confirm(self, prompt: str) -> bool:
        """Ask a question and wait for the answer.

        Args:
            prompt: Question shown to the operator.

        Returns:
            True only for a 'y' or 'Y' answer; anything else, including
            empty input, is False.
        """
        answer = self._reader.read_line(prompt).strip()
        return answer in _YES_ANSWERS
