"""Human-readable progress output."""

import os
import sys
from typing import Optional, TextIO

from devcleanup.core.environment import DiskUsage
from devcleanup.core.utils import human_readable_size

CYAN = "\033[1;36m"
GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
RESET = "\033[0m"


class Reporter:
    """Writes section banners, info lines, warnings and the final summary."""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            color = self.stream.isatty() and "NO_COLOR" not in os.environ
        self.color = color

    def _paint(self, code: str, text: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{RESET}"

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    def say(self, message: str) -> None:
        self._write("\n" + self._paint(CYAN, f"▶ {message}"))

    def done(self, message: str) -> None:
        self._write(self._paint(GREEN, f"✓ {message}"))

    def warn(self, message: str) -> None:
        self._write(self._paint(YELLOW, f"! {message}"))

    def info(self, message: str) -> None:
        self._write(f"   {message}")

    def disk_usage(self, mount: str, usage: DiskUsage) -> None:
        capacity = (usage.used * 100 // usage.total) if usage.total else 0
        self._write(f"{'Mounted on':<12}{'Size':>10}{'Used':>10}{'Avail':>10}{'Capacity':>10}")
        self._write(
            f"{mount:<12}"
            f"{human_readable_size(usage.total):>10}"
            f"{human_readable_size(usage.used):>10}"
            f"{human_readable_size(usage.free):>10}"
            f"{capacity:>9}%"
        )
