"""
Xcode caches (opt-in with --include-xcode).

Only caches and device support files are removed. Simulator devices are never
deleted, apart from the ones ``simctl`` itself reports as unavailable.
"""

from typing import List, Optional

from devcleanup.core.actions import CleanupAction, command, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY

XCODE_DIR = ("Library", "Developer", "Xcode")


class XcodeSection(Section):
    """Removes DerivedData, DeviceSupport and Xcode related caches."""

    @property
    def name(self) -> str:
        return "xcode"

    @property
    def title(self) -> str:
        return "Xcode cleanup enabled"

    def skip_reason(self, config: Configuration, env: Environment) -> Optional[str]:
        if not config.include_xcode:
            return "Xcode cleanup not requested (use --include-xcode)."
        return None

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        return [
            remove(env.home_path(*XCODE_DIR, "DerivedData"), "Xcode DerivedData"),
            remove(env.home_path(*XCODE_DIR, "iOS DeviceSupport"), "Xcode iOS DeviceSupport"),
            remove(env.home_path(*XCODE_DIR, "watchOS DeviceSupport"), "Xcode watchOS DeviceSupport"),
            remove(env.home_path(*XCODE_DIR, "tvOS DeviceSupport"), "Xcode tvOS DeviceSupport"),
            command("Delete unavailable simulators", "xcrun", "simctl", "delete", "unavailable"),
            remove(env.home_path("Library", "Caches", "com.apple.dt.Xcode"), "Xcode caches"),
            remove(env.home_path("Library", "Caches", "org.carthage.CarthageKit"), "Carthage cache"),
            remove(env.home_path("Library", "Developer", "CoreSimulator", "Caches"), "CoreSimulator caches"),
            remove(env.home_path("Library", "Logs", "CoreSimulator"), "CoreSimulator logs"),
        ]


# Register this section
SECTION_REGISTRY["xcode"] = XcodeSection
