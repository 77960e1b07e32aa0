"""Homebrew download cache."""

import logging
from typing import List

from devcleanup.core.actions import CleanupAction, command, info, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY

logger = logging.getLogger("devcleanup.sections.homebrew")


class HomebrewSection(Section):
    """Runs ``brew cleanup -s`` and removes the Homebrew download cache."""

    @property
    def name(self) -> str:
        return "homebrew"

    @property
    def title(self) -> str:
        return "Cleaning Homebrew caches"

    def cache_dir(self, env: Environment) -> str:
        """
        Ask Homebrew for its cache directory.

        Falls back to the default location when the query fails. The result is
        best effort: a machine with a relocated cache and a broken ``brew``
        will get the default path, which is then simply reported as not found.
        """
        cache_dir = env.capture(["brew", "--cache"])
        if cache_dir:
            logger.info(f"Homebrew cache directory: {cache_dir}")
            return cache_dir
        default = env.home_path("Library", "Caches", "Homebrew")
        logger.warning(f"Could not determine Homebrew cache directory, using {default}")
        return default

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        if not env.has_tool("brew"):
            return [info("Homebrew not installed — skipping.")]

        return [
            command("brew cleanup -s", "brew", "cleanup", "-s"),
            # Downloaded bottles and source tarballs
            remove(self.cache_dir(env), "Homebrew cache directory"),
        ]


# Register this section
SECTION_REGISTRY["homebrew"] = HomebrewSection
