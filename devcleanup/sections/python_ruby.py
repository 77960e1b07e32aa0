"""Python and Ruby package caches."""

from typing import List

from devcleanup.core.actions import CleanupAction, command, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY


class PythonRubySection(Section):
    """Purges the pip cache, removes pip/poetry/rubygems caches and runs gem cleanup."""

    @property
    def name(self) -> str:
        return "python_ruby"

    @property
    def title(self) -> str:
        return "Cleaning Python & Ruby caches (safe)"

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        actions: List[CleanupAction] = []
        if env.has_tool("pip"):
            actions.append(command("pip cache purge", "pip", "cache", "purge"))
        actions += [
            remove(env.home_path("Library", "Caches", "pip"), "~/Library/Caches/pip"),
            remove(env.home_path("Library", "Caches", "pypoetry"), "~/Library/Caches/pypoetry"),
            remove(env.home_path("Library", "Caches", "rubygems"), "~/Library/Caches/rubygems"),
        ]
        if env.has_tool("gem"):
            # gem cleanup keeps the latest version of every gem
            actions.append(command("gem cleanup (leaves latest versions)", "gem", "cleanup", tolerate_failure=True))
        return actions


# Register this section
SECTION_REGISTRY["python_ruby"] = PythonRubySection
