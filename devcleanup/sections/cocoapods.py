"""CocoaPods caches."""

from typing import List

from devcleanup.core.actions import CleanupAction, command, info, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY


class CocoaPodsSection(Section):
    """Runs ``pod cache clean --all`` and removes the CocoaPods and Xcode module caches."""

    @property
    def name(self) -> str:
        return "cocoapods"

    @property
    def title(self) -> str:
        return "Cleaning CocoaPods caches"

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        if not env.has_tool("pod"):
            return [info("CocoaPods not installed — skipping.")]

        return [
            command("pod cache clean --all", "pod", "cache", "clean", "--all"),
            remove(env.home_path("Library", "Caches", "CocoaPods"), "~/Library/Caches/CocoaPods"),
            remove(
                env.home_path("Library", "Developer", "Xcode", "DerivedData", "ModuleCache.noindex"),
                "Xcode ModuleCache.noindex (safe)",
            ),
        ]


# Register this section
SECTION_REGISTRY["cocoapods"] = CocoaPodsSection
