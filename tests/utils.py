"""
Test helper utilities: an in-memory Docker client double and server helpers.
"""
import time
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
import requests
from python_on_whales.exceptions import DockerException, NoSuchContainer, NoSuchImage

DAEMON_DOWN = (
    b"Cannot connect to the Docker daemon at unix:///var/run/docker.sock. "
    b"Is the docker daemon running?"
)


def make_container(
    container_id: str,
    name: str,
    image: str = "nginx:latest",
    image_id: str = "sha256:1111",
    status: str = "running",
    exit_code: int = 0,
    started_at: Optional[datetime] = None,
    finished_at: Optional[datetime] = None,
    created: Optional[datetime] = None,
    ports: Optional[Dict[str, Any]] = None,
    path: str = "/docker-entrypoint.sh",
    args: Optional[List[str]] = None,
    health: Optional[str] = None,
) -> SimpleNamespace:
    """Build an object shaped like a python_on_whales Container."""
    now = datetime.now(timezone.utc)
    state = SimpleNamespace(
        status=status,
        exit_code=exit_code,
        started_at=started_at or now - timedelta(minutes=5),
        finished_at=finished_at,
        health=SimpleNamespace(status=health) if health else None,
    )
    return SimpleNamespace(
        id=container_id,
        name=name,
        image=image_id,
        config=SimpleNamespace(image=image, labels=None),
        path=path,
        args=args if args is not None else ["nginx", "-g", "daemon off;"],
        created=created or now - timedelta(hours=1),
        state=state,
        network_settings=SimpleNamespace(ports=ports or {}),
    )


def make_image(
    image_id: str,
    repo_tags: Optional[List[str]] = None,
    size: int = 1024,
    virtual_size: Optional[int] = None,
    labels: Optional[Dict[str, str]] = None,
    created: Optional[datetime] = None,
) -> SimpleNamespace:
    """Build an object shaped like a python_on_whales Image."""
    return SimpleNamespace(
        id=image_id,
        repo_tags=repo_tags if repo_tags is not None else ["nginx:latest"],
        repo_digests=[f"nginx@{image_id}"],
        created=created or datetime(2024, 1, 1, tzinfo=timezone.utc),
        size=size,
        virtual_size=virtual_size,
        config=SimpleNamespace(labels=labels),
    )


def port_binding(host_port: str, host_ip: str = "0.0.0.0") -> SimpleNamespace:
    return SimpleNamespace(host_ip=host_ip, host_port=host_port)


class VanishedContainer:
    """Container listed by the engine but removed before it could be inspected."""

    def __init__(self, container_id: str) -> None:
        self.id = container_id

    def __getattr__(self, name: str):
        raise NoSuchContainer(
            ["docker", "container", "inspect", self.id],
            1,
            stderr=f"Error: No such container: {self.id}".encode(),
        )


class VanishedImage:
    """Image listed by the engine but removed before it could be inspected."""

    def __init__(self, image_id: str) -> None:
        self.id = image_id

    def __getattr__(self, name: str):
        raise NoSuchImage(
            ["docker", "image", "inspect", self.id],
            1,
            stderr=f"Error: No such image: {self.id}".encode(),
        )


class FakeContainerAPI:
    """Mimics ``DockerClient.container`` over a dict of containers."""

    def __init__(self, containers: List[SimpleNamespace]) -> None:
        self.containers = {c.id: c for c in containers}
        self.calls: List[tuple] = []

    def _get(self, command: str, reference: str) -> SimpleNamespace:
        for container in self.containers.values():
            if reference in (container.id, container.name):
                return container
        raise NoSuchContainer(
            ["docker", "container", command, reference],
            1,
            stderr=f"Error response from daemon: No such container: {reference}".encode(),
        )

    def list(self, all: bool = False) -> List[SimpleNamespace]:
        self.calls.append(("list", all))
        containers = list(self.containers.values())
        if all:
            return containers
        return [c for c in containers if c.state.status == "running"]

    def start(self, reference: str) -> None:
        self.calls.append(("start", reference))
        container = self._get("start", reference)
        container.state.status = "running"
        container.state.started_at = datetime.now(timezone.utc)

    def stop(self, reference: str) -> None:
        self.calls.append(("stop", reference))
        container = self._get("stop", reference)
        container.state.status = "exited"
        container.state.finished_at = datetime.now(timezone.utc)

    def restart(self, reference: str) -> None:
        self.calls.append(("restart", reference))
        container = self._get("restart", reference)
        container.state.status = "running"
        container.state.started_at = datetime.now(timezone.utc)

    def remove(self, reference: str, force: bool = False, volumes: bool = False) -> None:
        self.calls.append(("remove", reference, force, volumes))
        container = self._get("rm", reference)
        if container.state.status == "running" and not force:
            raise DockerException(
                ["docker", "container", "rm", reference],
                1,
                stderr=(
                    f"Error response from daemon: You cannot remove a running container "
                    f"{container.id}. Stop the container before attempting removal or "
                    f"force remove"
                ).encode(),
            )
        del self.containers[container.id]


class FakeImageAPI:
    def __init__(self, images: List[SimpleNamespace]) -> None:
        self.images = images

    def list(self) -> List[SimpleNamespace]:
        return list(self.images)


class FakeSystemAPI:
    def info(self) -> SimpleNamespace:
        return SimpleNamespace(server_version="27.0.3", containers=2, images=1)


class FakeDockerClient:
    """In-memory stand-in for ``python_on_whales.DockerClient``."""

    def __init__(
        self,
        containers: Optional[List[SimpleNamespace]] = None,
        images: Optional[List[SimpleNamespace]] = None,
    ) -> None:
        self.container = FakeContainerAPI(containers or [])
        self.image = FakeImageAPI(images or [])
        self.system = FakeSystemAPI()


class _Unreachable:
    def __init__(self, group: str) -> None:
        self.group = group

    def __getattr__(self, command: str):
        def fail(*args, **kwargs):
            raise DockerException(["docker", self.group, command], 1, stderr=DAEMON_DOWN)

        return fail


class UnreachableDockerClient:
    """Docker client whose every call fails as if the daemon were down."""

    def __init__(self) -> None:
        self.container = _Unreachable("container")
        self.image = _Unreachable("image")
        self.system = _Unreachable("system")


def wait_for_api_ready(api_url: str, timeout: int = 60) -> bool:
    """
    Wait for API to be ready, checking the root endpoint.

    Args:
        api_url: Base API URL
        timeout: Maximum wait time in seconds

    Returns:
        True if API is ready, fails the test otherwise
    """
    session = requests.Session()
    start_time = time.time()

    while time.time() - start_time < timeout:
        try:
            response = session.get(f"{api_url}/", timeout=2)
            if response.status_code == 200:
                data = response.json()
                if data.get("status") == "operational":
                    return True
        except requests.RequestException:
            pass
        time.sleep(0.5)

    pytest.fail(f"Server did not start within {timeout} seconds")
