"""
Cleanup actions.

A section describes its work as an ordered list of these records; the
ActionExecutor interprets them one by one.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class PathRemoval:
    """Remove a file or directory tree, or every match when ``pattern`` is set."""

    path: str
    label: str
    pattern: bool = False


@dataclass(frozen=True)
class CommandInvocation:
    """Run a tool's own cleanup command."""

    description: str
    command: str
    args: Tuple[str, ...] = ()
    cwd: Optional[str] = None
    tolerate_failure: bool = False

    @property
    def argv(self) -> List[str]:
        return [self.command, *self.args]


@dataclass(frozen=True)
class Notice:
    """A progress line printed between actions (``say``, ``info`` or ``warn``)."""

    message: str
    level: str = "info"


CleanupAction = Union[PathRemoval, CommandInvocation, Notice]


def remove(path: str, label: Optional[str] = None) -> PathRemoval:
    return PathRemoval(path, label or path)


def remove_matching(pattern: str, label: str) -> PathRemoval:
    return PathRemoval(pattern, label, pattern=True)


def command(description: str, *argv: str, cwd: Optional[str] = None,
            tolerate_failure: bool = False) -> CommandInvocation:
    return CommandInvocation(description, argv[0], tuple(argv[1:]), cwd, tolerate_failure)


def say(message: str) -> Notice:
    return Notice(message, "say")


def info(message: str) -> Notice:
    return Notice(message, "info")


def warn(message: str) -> Notice:
    return Notice(message, "warn")
