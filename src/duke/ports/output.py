"""User-facing output interface."""

from typing import Protocol


class Output(Protocol):
    """Interface for showing feedback text to the user."""

    def show(self, text: str) -> None:
        """Display text. May span several lines."""
        ...
