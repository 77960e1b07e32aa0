"""Gradle, Android and JetBrains IDE build caches."""

import logging
import os
from typing import List

from devcleanup.core.actions import CleanupAction, command, info, remove, remove_matching, say, warn
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY

logger = logging.getLogger("devcleanup.sections.gradle")

ANDROID_DIR = "android"
GRADLE_WRAPPER = os.path.join(ANDROID_DIR, "gradlew")


class GradleSection(Section):
    """Stops Gradle daemons and removes Gradle, Android and IDE caches."""

    @property
    def name(self) -> str:
        return "gradle"

    @property
    def title(self) -> str:
        return "Stopping Gradle daemon (if any)"

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        actions: List[CleanupAction] = []

        wrapper = env.project_path(GRADLE_WRAPPER)
        if os.path.isfile(wrapper):
            logger.debug(f"Using project gradle wrapper at {wrapper}")
            actions.append(command(
                "Gradle stop via project wrapper", "sh", "gradlew", "--stop",
                cwd=env.project_path(ANDROID_DIR), tolerate_failure=True,
            ))
        else:
            actions.append(info(f"No local gradle wrapper found at ./{GRADLE_WRAPPER} — trying global"))
            actions.append(command("Global gradle stop", "gradle", "--stop", tolerate_failure=True))

        actions.append(say("Cleaning Flutter project builds"))
        if env.has_tool("flutter"):
            actions.append(command("flutter clean", "flutter", "clean", tolerate_failure=True))
        else:
            actions.append(info("flutter not installed — skipping flutter clean."))
        actions += [
            remove(env.project_path("build"), "Project build/"),
            remove(env.project_path(ANDROID_DIR, "build"), "Android module build/"),
            remove(env.project_path(ANDROID_DIR, ".gradle"), "Android .gradle (project)"),
        ]

        actions.append(say("Cleaning user Gradle caches"))
        actions += [
            remove(env.home_path(".gradle", "caches"), "~/.gradle/caches"),
            remove(env.home_path(".gradle", "wrapper", "dists"), "~/.gradle/wrapper/dists"),
            remove(env.home_path(".android", "build-cache"), "~/.android/build-cache"),
        ]

        actions.append(say("Cleaning Android Studio & IntelliJ caches (safe)"))
        actions += [
            remove_matching(env.home_pattern("Library", "Caches", "Google", "AndroidStudio*"),
                            "~/Library/Caches/Google/AndroidStudio*"),
            remove_matching(env.home_pattern("Library", "Logs", "Google", "AndroidStudio*"),
                            "~/Library/Logs/Google/AndroidStudio*"),
            remove_matching(env.home_pattern("Library", "Application Support", "Google", "AndroidStudio*", "log"),
                            "~/Library/Application Support/Google/AndroidStudio*/log"),
            remove_matching(env.home_pattern("Library", "Caches", "JetBrains", "*"),
                            "~/Library/Caches/JetBrains/*"),
        ]

        actions.append(warn("Not removing AVDs or system images (your emulators stay intact)."))
        return actions


# Register this section
SECTION_REGISTRY["gradle"] = GradleSection
