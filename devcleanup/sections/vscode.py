"""VS Code cache and log directories."""

from typing import List

from devcleanup.core.actions import CleanupAction, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY

CODE_SUPPORT_DIR = ("Library", "Application Support", "Code")


class VSCodeSection(Section):
    """Removes VS Code caches and logs; settings and extensions are left alone."""

    @property
    def name(self) -> str:
        return "vscode"

    @property
    def title(self) -> str:
        return "Cleaning VS Code cache/logs (safe)"

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        return [
            remove(env.home_path(*CODE_SUPPORT_DIR, "Cache"), "VS Code Cache"),
            remove(env.home_path(*CODE_SUPPORT_DIR, "CachedData"), "VS Code CachedData"),
            remove(env.home_path(*CODE_SUPPORT_DIR, "Service Worker", "CacheStorage"), "VS Code SW CacheStorage"),
            remove(env.home_path("Library", "Logs", "Code"), "VS Code Logs"),
        ]


# Register this section
SECTION_REGISTRY["vscode"] = VSCodeSection
