"""Runs the whole cleanup catalog in order."""

import logging
from typing import Iterable, Optional, Type

from devcleanup.core.config import Configuration
from devcleanup.core.console import Reporter
from devcleanup.core.environment import Environment
from devcleanup.core.executor import ActionExecutor
from devcleanup.core.section import Section
from devcleanup.core.utils import human_readable_size

logger = logging.getLogger("devcleanup.core.orchestrator")

ROOT_MOUNT = "/"


def report_disk(reporter: Reporter, env: Environment, heading: str) -> None:
    reporter.say(heading)
    reporter.disk_usage(ROOT_MOUNT, env.disk_usage(ROOT_MOUNT))


def run_cleanup(
    config: Configuration,
    env: Environment,
    reporter: Reporter,
    sections: Optional[Iterable[Type[Section]]] = None,
) -> int:
    """
    Execute every catalog section for the given configuration.

    Args:
        config: Flags for this run
        env: The machine being cleaned
        reporter: Console output
        sections: Section classes to run (defaults to the full catalog)

    Returns:
        Bytes freed by direct path removals

    Raises:
        CommandFailedError: If a command whose failure is not tolerated fails
        OSError: If an existing path cannot be deleted
    """
    if sections is None:
        from devcleanup.sections import SECTION_REGISTRY
        sections = SECTION_REGISTRY.values()

    executor = ActionExecutor(config, env, reporter)

    reporter.say(f"Starting dev cleanup ({config.describe()})")
    report_disk(reporter, env, "Disk before:")

    for section_class in sections:
        section = section_class()
        logger.info(f"Running section: {section.name}")
        section.run(config, env, executor)

    report_disk(reporter, env, "Disk after:")

    if config.dry_run:
        reporter.warn("Dry run completed. No files were removed.")
    else:
        reporter.done(
            f"Cleanup completed. Estimated freed: {human_readable_size(executor.total_freed)} "
            "(plus tool-level cleanups)."
        )
    return executor.total_freed
