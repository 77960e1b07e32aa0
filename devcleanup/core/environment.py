"""
Process environment seen by a cleanup run.

Tool lookups, subprocess execution and disk usage queries all go through an
Environment so that sections and the executor can be exercised against a fake
one in tests.
"""

import glob
import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from devcleanup.core.utils import run_command

logger = logging.getLogger("devcleanup.core.environment")


@dataclass(frozen=True)
class DiskUsage:
    total: int
    used: int
    free: int


class Environment:
    """The real machine: PATH lookups, subprocesses and the filesystem root."""

    def __init__(self, home: Optional[str] = None, cwd: Optional[str] = None):
        self.home = home or os.path.expanduser("~")
        self.cwd = cwd or os.getcwd()

    def home_path(self, *parts: str) -> str:
        """Join path components onto the user's home directory."""
        return os.path.join(self.home, *parts)

    def home_pattern(self, *parts: str) -> str:
        """Build a glob pattern under the home directory, matching the home path literally."""
        return os.path.join(glob.escape(self.home), *parts)

    def project_path(self, *parts: str) -> str:
        """Join path components onto the directory the run was started from."""
        return os.path.join(self.cwd, *parts)

    def which(self, tool: str) -> Optional[str]:
        """Return the full path of a tool on PATH, or None if it is not installed."""
        found = shutil.which(tool)
        logger.debug(f"Lookup {tool}: {found or 'not found'}")
        return found

    def has_tool(self, tool: str) -> bool:
        return self.which(tool) is not None

    def execute(self, argv: List[str], cwd: Optional[str] = None) -> int:
        """
        Run a command attached to the current terminal and wait for it.

        Raises:
            FileNotFoundError: If the executable cannot be found
        """
        workdir = cwd or self.cwd
        logger.debug(f"Executing {argv} in {workdir}")
        completed = subprocess.run(argv, cwd=workdir)
        logger.debug(f"{argv[0]} exited with status {completed.returncode}")
        return completed.returncode

    def capture(self, argv: List[str]) -> Optional[str]:
        """Run a read-only query and return its stdout, or None on failure."""
        return run_command(argv, cwd=self.cwd)

    def disk_usage(self, path: str = "/") -> DiskUsage:
        usage = shutil.disk_usage(path)
        return DiskUsage(usage.total, usage.used, usage.free)
