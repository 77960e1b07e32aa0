"""Swift Package Manager caches."""

from typing import List

from devcleanup.core.actions import CleanupAction, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY


class SwiftPMSection(Section):
    """Removes the SwiftPM repository and manifest caches."""

    @property
    def name(self) -> str:
        return "swiftpm"

    @property
    def title(self) -> str:
        return "Cleaning Swift Package Manager caches"

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        return [
            remove(env.home_path("Library", "Caches", "org.swift.swiftpm"), "~/Library/Caches/org.swift.swiftpm"),
            remove(env.home_path(".swiftpm", "cache"), "~/.swiftpm/cache"),
        ]


# Register this section
SECTION_REGISTRY["swiftpm"] = SwiftPMSection
