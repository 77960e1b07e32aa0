"""Run configuration resolved from the command line."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Configuration:
    """Immutable set of switches for one cleanup run."""

    dry_run: bool = False
    include_xcode: bool = False
    include_docker: bool = False
    aggressive: bool = False
    verbose: bool = False
    debug: bool = False

    def describe(self) -> str:
        """Return the one-line summary printed in the startup banner."""
        return (
            f"dry-run: {_flag(self.dry_run)}, "
            f"include-xcode: {_flag(self.include_xcode)}, "
            f"include-docker: {_flag(self.include_docker)}, "
            f"aggressive: {_flag(self.aggressive)}"
        )


def _flag(value: bool) -> str:
    return "true" if value else "false"
