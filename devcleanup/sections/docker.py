"""Docker prune (opt-in with --include-docker)."""

from typing import List, Optional

from devcleanup.core.actions import CleanupAction, command
from devcleanup.core.config import Configuration
from devcleanup.core.environment import Environment
from devcleanup.core.section import Section
from devcleanup.sections import SECTION_REGISTRY


class DockerSection(Section):
    """
    Prunes stopped containers, dangling images, unused networks and the
    build cache. Images and volumes in use are left alone.
    """

    @property
    def name(self) -> str:
        return "docker"

    @property
    def title(self) -> str:
        return "Docker cleanup enabled"

    def skip_reason(self, config: Configuration, env: Environment) -> Optional[str]:
        if not config.include_docker:
            return "Docker cleanup not requested (use --include-docker)."
        if not env.has_tool("docker"):
            return "Docker not installed — skipping."
        return None

    def plan(self, config: Configuration, env: Environment) -> List[CleanupAction]:
        return [
            command("docker system prune -f", "docker", "system", "prune", "-f"),
            command("docker builder prune -af", "docker", "builder", "prune", "-af"),
        ]


# Register this section
SECTION_REGISTRY["docker"] = DockerSection
