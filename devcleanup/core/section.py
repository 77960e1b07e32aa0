"""
Section base class and interfaces.

Every group of the cleanup catalog (Gradle, Node, Homebrew, ...) is a Section.
A section only decides *what* should happen for a given configuration and
machine; the ActionExecutor performs it. This keeps each section testable
against a fake environment.
"""

import abc
import logging
from typing import List, Optional

from devcleanup.core.actions import CleanupAction
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment

# Set up logger
logger = logging.getLogger("devcleanup.core")


class CleanupError(Exception):
    """Base exception for cleanup-related errors."""
    pass


class CommandFailedError(CleanupError):
    """Exception raised when a cleanup command exits with a non-zero status."""

    def __init__(self, argv: List[str], returncode: int):
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"Command {' '.join(self.argv)!r} failed with exit status {returncode}")


class Section(abc.ABC):
    """Abstract base class for all catalog sections."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Get the short name of the section."""
        pass

    @property
    @abc.abstractmethod
    def title(self) -> str:
        """Get the banner printed when the section starts."""
        pass

    def skip_reason(self, config: Configuration, env: Environment) -> Optional[str]:
        """
        Decide whether the section should be skipped entirely.

        Returns:
            A message explaining the skip, or None if the section should run
        """
        return None

    @abc.abstractmethod
    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        """
        Build the ordered list of actions for this section.

        Tool presence is checked here, so the returned list only contains
        commands for tools that are installed (or whose absence is tolerated).

        Args:
            config: Flags for this run
            env: The machine being cleaned

        Returns:
            Actions to execute, in order
        """
        pass

    def run(self, config: Configuration, env: Environment, executor) -> None:
        """
        Run the section.

        This is a template method: subclasses implement ``plan`` and
        optionally ``skip_reason``.
        """
        reason = self.skip_reason(config, env)
        if reason:
            logger.info(f"Skipping {self.name} section: {reason}")
            executor.reporter.info(reason)
            return

        actions = self.plan(config, env)
        logger.debug(f"{self.name} section planned {len(actions)} actions")
        if self.title:
            executor.reporter.say(self.title)
        executor.execute_all(actions)
