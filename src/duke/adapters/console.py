"""Terminal input/output adapter."""

from typing import Iterator

import click


class ConsoleUI:
    """
    Console output with a leading indent on every line.

    Implements Output protocol, and doubles as the line source for
    interactive sessions.
    """

    def __init__(self, indent: int = 5):
        self.prefix = " " * indent

    def show(self, text: str) -> None:
        for line in text.splitlines() or [""]:
            click.echo(f"{self.prefix}{line}" if line else "")

    def read_lines(self) -> Iterator[str]:
        """Yield stdin lines without their trailing newline."""
        stdin = click.get_text_stream("stdin")
        for line in stdin:
            yield line.rstrip("\r\n")
