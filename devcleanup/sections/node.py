"""Node/JS package manager caches."""

import logging
from typing import List

from devcleanup.core.actions import CleanupAction, command, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY

logger = logging.getLogger("devcleanup.sections.node")


class NodeSection(Section):
    """Runs npm, yarn and pnpm cache cleanups for whichever of them is installed."""

    @property
    def name(self) -> str:
        return "node"

    @property
    def title(self) -> str:
        return "Cleaning Node/JS package manager caches"

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        actions: List[CleanupAction] = []

        if env.has_tool("npm"):
            actions.append(command("npm cache clean --force", "npm", "cache", "clean", "--force"))
            actions.append(remove(env.home_path(".npm", "_cacache"), "~/.npm/_cacache"))
        else:
            logger.info("npm not found on PATH")

        if env.has_tool("yarn"):
            actions.append(command("yarn cache clean", "yarn", "cache", "clean"))
        else:
            logger.info("yarn not found on PATH")

        if env.has_tool("pnpm"):
            actions.append(command("pnpm store prune", "pnpm", "store", "prune"))
            actions.append(remove(env.home_path("Library", "pnpm", "store"), "~/Library/pnpm/store"))
        else:
            logger.info("pnpm not found on PATH")

        return actions


# Register this section
SECTION_REGISTRY["node"] = NodeSection
