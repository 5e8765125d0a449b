"""
Configuration service: runtime settings and Docker client construction.
"""
import logging
import os
from typing import Optional

from python_on_whales import DockerClient

logger = logging.getLogger(__name__)

DEFAULT_DOCKER_HOST = "unix:///var/run/docker.sock"
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class ConfigService:
    """
    Holds the dashboard settings and builds the Docker client.

    Args:
        docker_host: Engine address, e.g. ``unix:///var/run/docker.sock``.
        remove_force: Default ``force`` flag for container removal.
        remove_volumes: Default ``remove_volumes`` flag for container removal.
        collapse_error_status: If True, every error kind is answered with HTTP 500.
        cors_origins: Origins allowed to call the API from a browser.
    """

    def __init__(
        self,
        docker_host: str = DEFAULT_DOCKER_HOST,
        remove_force: bool = True,
        remove_volumes: bool = True,
        collapse_error_status: bool = False,
        cors_origins: Optional[list[str]] = None,
    ) -> None:
        self.docker_host = docker_host
        self.remove_force = remove_force
        self.remove_volumes = remove_volumes
        self.collapse_error_status = collapse_error_status
        self.cors_origins = (
            list(cors_origins) if cors_origins is not None else list(DEFAULT_CORS_ORIGINS)
        )

    @classmethod
    def from_env(cls) -> "ConfigService":
        """Build the configuration from environment variables."""
        return cls(
            docker_host=os.getenv("DOCKER_HOST", DEFAULT_DOCKER_HOST),
            remove_force=_env_bool("REMOVE_FORCE", True),
            remove_volumes=_env_bool("REMOVE_VOLUMES", True),
            collapse_error_status=_env_bool("COLLAPSE_ERROR_STATUS", False),
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        )

    def get_docker_client(self) -> DockerClient:
        """
        Create a Docker client bound to the configured engine.

        The client does not contact the engine until the first command runs,
        so an unreachable engine only shows up as errors on later calls.

        Returns:
            DockerClient instance.
        """
        logger.debug(f"Creating Docker client for host: {self.docker_host}")
        return DockerClient(host=self.docker_host)
