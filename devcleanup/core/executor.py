"""
Execution primitives: removing paths, running commands, and interpreting
cleanup actions.

Each primitive reports its intent on the console before acting, so a run that
fails part way shows exactly how far it got.
"""

import glob
import logging
import os
import shutil
from typing import Iterable, Optional

from devcleanup.core.actions import CleanupAction, CommandInvocation, Notice, PathRemoval
from devcleanup.core.config import Configuration
from devcleanup.core.console import Reporter
from devcleanup.core.environment import Environment
from devcleanup.core.section import CommandFailedError
from devcleanup.core.utils import get_size, human_readable_size

logger = logging.getLogger("devcleanup.core.executor")

# Exit status a shell reports when the executable cannot be found
COMMAND_NOT_FOUND = 127


def _delete(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


class PathRemover:
    """Removes paths and keeps the running total of bytes freed."""

    def __init__(self, dry_run: bool, reporter: Reporter):
        self.dry_run = dry_run
        self.reporter = reporter
        self.total_freed = 0

    def remove(self, path: str, label: str, pattern: bool = False) -> int:
        """
        Remove a path (or every match of a glob pattern).

        Args:
            path: File or directory, or a glob pattern when ``pattern`` is set
            label: Human name shown in the output
            pattern: Expand ``path`` with glob instead of taking it literally

        Returns:
            Number of bytes freed by this call (always 0 in dry-run mode)

        Raises:
            OSError: If an existing path cannot be deleted
        """
        if pattern:
            matches = sorted(glob.glob(path))
        else:
            matches = [path] if os.path.lexists(path) else []

        if not matches:
            self.reporter.info(f"{label} — not found, skipping.")
            return 0

        freed = 0
        for match in matches:
            shown = label if len(matches) == 1 and match == path else f"{label} [{os.path.basename(match)}]"
            freed += self._remove_one(match, shown)
        return freed

    def _remove_one(self, path: str, label: str) -> int:
        size = get_size(path)
        self.reporter.info(f"{label} — {human_readable_size(size)}")
        if self.dry_run:
            self.reporter.info(f'(dry-run) rm -rf "{path}"')
            return 0

        logger.info(f"Removing {path}")
        _delete(path)
        self.total_freed += size
        logger.debug(f"Removed {path}, running total {self.total_freed} bytes")
        return size


class CommandRunner:
    """Runs a tool's own cleanup command attached to the terminal."""

    def __init__(self, dry_run: bool, reporter: Reporter, env: Environment):
        self.dry_run = dry_run
        self.reporter = reporter
        self.env = env

    def run(self, description: str, command: str, *args: str, cwd: Optional[str] = None,
            tolerate_failure: bool = False) -> None:
        """
        Run a command unless in dry-run mode.

        Raises:
            CommandFailedError: If the command fails and failure is not tolerated
        """
        argv = [command, *args]
        self.reporter.say(description)
        self.reporter.info(f"Command: {' '.join(argv)}")
        if self.dry_run:
            self.reporter.info("(dry-run) not executing")
            return

        try:
            returncode = self.env.execute(argv, cwd=cwd)
        except FileNotFoundError:
            if tolerate_failure:
                self.reporter.warn(f"{command} not found — skipping.")
                return
            raise CommandFailedError(argv, COMMAND_NOT_FOUND)
        except OSError as e:
            # e.g. the tool is on PATH but not executable
            if tolerate_failure:
                logger.warning(f"Could not start {command}: {e}")
                self.reporter.warn(f"{command} could not be started — skipping.")
                return
            raise

        if returncode != 0:
            if tolerate_failure:
                logger.warning(f"{' '.join(argv)} exited with status {returncode}, continuing")
                self.reporter.warn(f"{description} exited with status {returncode} — continuing.")
                return
            raise CommandFailedError(argv, returncode)


class ActionExecutor:
    """Interprets cleanup actions against the path remover and command runner."""

    def __init__(self, config: Configuration, env: Environment, reporter: Reporter):
        self.reporter = reporter
        self.remover = PathRemover(config.dry_run, reporter)
        self.runner = CommandRunner(config.dry_run, reporter, env)

    @property
    def total_freed(self) -> int:
        return self.remover.total_freed

    def execute(self, action: CleanupAction) -> None:
        if isinstance(action, PathRemoval):
            self.remover.remove(action.path, action.label, pattern=action.pattern)
        elif isinstance(action, CommandInvocation):
            self.runner.run(
                action.description,
                action.command,
                *action.args,
                cwd=action.cwd,
                tolerate_failure=action.tolerate_failure,
            )
        elif isinstance(action, Notice):
            emit = getattr(self.reporter, action.level)
            emit(action.message)
        else:
            raise TypeError(f"Unknown cleanup action: {action!r}")

    def execute_all(self, actions: Iterable[CleanupAction]) -> None:
        for action in actions:
            self.execute(action)
