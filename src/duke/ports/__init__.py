"""Ports - interfaces/protocols for external dependencies."""

from .task_store import TaskStore
from .output import Output

__all__ = [
    "TaskStore",
    "Output",
]
