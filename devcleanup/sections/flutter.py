"""Flutter and Dart package caches."""

from typing import List

from devcleanup.core.actions import CleanupAction, info, remove
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY


class FlutterSection(Section):
    """Removes the Dart analysis server cache, and pub caches in aggressive mode."""

    @property
    def name(self) -> str:
        return "flutter"

    @property
    def title(self) -> str:
        return "Cleaning Flutter & Dart caches"

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        actions: List[CleanupAction] = []
        if config.aggressive:
            actions += [
                remove(env.home_path(".pub-cache", "hosted"), "~/.pub-cache/hosted (Dart/Flutter packages)"),
                remove(env.home_path(".pub-cache", "git"), "~/.pub-cache/git"),
            ]
        else:
            actions.append(info("Aggressive flag not set — skipping ~/.pub-cache to avoid large re-downloads."))
        actions.append(remove(env.home_path("Library", "Caches", "DartAnalysisServer"), "Dart Analysis Server cache"))
        return actions


# Register this section
SECTION_REGISTRY["flutter"] = FlutterSection
