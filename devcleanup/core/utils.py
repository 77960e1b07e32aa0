"""Utility functions for the dev-cleanup application."""

import os
import logging
import subprocess
import time
from typing import Optional, List, Set, Tuple

logger = logging.getLogger("devcleanup.utils")

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]


def run_command(command: List[str], cwd: Optional[str] = None, timeout: int = 30) -> Optional[str]:
    """
    Run a command and return its output.

    Only used for read-only queries (e.g. ``brew --cache``); cleanup commands
    go through the CommandRunner so they inherit the terminal.

    Args:
        command: The command and its arguments
        cwd: The working directory to run the command in
        timeout: Timeout in seconds for the command (default: 30)

    Returns:
        The command output as a string, or None if the command failed
    """
    logger.debug(f"Running command: {' '.join(command)} in directory: {cwd or os.getcwd()}")

    start_time = time.time()
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True,
            cwd=cwd,
            timeout=timeout
        )
        execution_time = time.time() - start_time
        logger.debug(f"Command completed in {execution_time:.2f} seconds")
        return result.stdout.strip()
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out after {timeout} seconds: {' '.join(command)}")
        return None
    except subprocess.CalledProcessError as e:
        logger.debug(f"Command failed: {' '.join(command)}, error: {e.stderr}")
        return None
    except OSError as e:
        logger.debug(f"Could not start command: {' '.join(command)}, error: {e}")
        return None


def _disk_usage_of(path: str, seen: Set[Tuple[int, int]]) -> int:
    try:
        st = os.lstat(path)
    except OSError as e:
        logger.debug(f"Cannot stat {path}: {e}")
        return 0

    total = _allocated(st, seen)
    if not os.path.isdir(path) or os.path.islink(path):
        return total

    def on_error(e: OSError) -> None:
        logger.debug(f"Cannot read {e.filename}: {e}")

    for dirpath, dirnames, filenames in os.walk(path, onerror=on_error):
        for name in dirnames + filenames:
            fp = os.path.join(dirpath, name)
            try:
                total += _allocated(os.lstat(fp), seen)
            except OSError:
                # Removed while we were walking
                continue
    return total


def _allocated(st: os.stat_result, seen: Set[Tuple[int, int]]) -> int:
    key = (st.st_dev, st.st_ino)
    if st.st_nlink > 1:
        if key in seen:
            return 0
        seen.add(key)
    blocks = getattr(st, "st_blocks", None)
    if blocks is None:
        return st.st_size
    return blocks * 512


def get_size(*paths: str) -> int:
    """
    Calculate the on-disk size of one or more files or directories.

    The result counts allocated blocks rather than apparent file length, so it
    matches the space actually returned by a removal. Missing paths count as
    zero and errors while measuring are ignored.

    Args:
        paths: Paths to measure

    Returns:
        Size in bytes
    """
    seen: Set[Tuple[int, int]] = set()
    total_size = 0
    for path in paths:
        if os.path.lexists(path):
            total_size += _disk_usage_of(path, seen)
    return total_size


def human_readable_size(size_bytes: int) -> str:
    """
    Convert size in bytes to human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable size string (e.g., "4.2 MB")
    """
    size = float(size_bytes)
    i = 0
    while size >= 1024 and i < len(SIZE_UNITS) - 1:
        size /= 1024
        i += 1

    return f"{size:.1f} {SIZE_UNITS[i]}"
