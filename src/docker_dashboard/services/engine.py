"""
Engine client facade: thin pass-through operations over a Docker client.

Every operation is a single ``python_on_whales`` call. Listing also reads each
record's inspect data; records removed in between are skipped. Other errors
raised by the client propagate unchanged; classification happens at the HTTP
boundary.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from python_on_whales import DockerClient
from python_on_whales.exceptions import NoSuchContainer, NoSuchImage

from ..models.container import ContainerRecord, PortMapping
from ..models.image import ImageRecord
from ..models.system import EngineInfo
from .status_text import describe_status

logger = logging.getLogger(__name__)


def _epoch(moment: Optional[datetime]) -> int:
    if moment is None:
        return 0
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())


def _command(container: Any) -> str:
    path = getattr(container, "path", None) or ""
    args = list(getattr(container, "args", None) or [])
    return " ".join(part for part in [path, *args] if part)


def _ports(container: Any) -> list[PortMapping]:
    network_settings = getattr(container, "network_settings", None)
    port_map = getattr(network_settings, "ports", None) or {}
    ports: list[PortMapping] = []
    for key, bindings in port_map.items():
        port, _, protocol = key.partition("/")
        protocol = protocol or "tcp"
        if not bindings:
            ports.append(PortMapping(private_port=int(port), type=protocol))
            continue
        for binding in bindings:
            host_port = getattr(binding, "host_port", None)
            ports.append(
                PortMapping(
                    private_port=int(port),
                    public_port=int(host_port) if host_port else None,
                    type=protocol,
                    ip=getattr(binding, "host_ip", None) or None,
                )
            )
    ports.sort(key=lambda p: (p.private_port, p.type, p.public_port or 0))
    return ports


def container_record(container: Any, now: Optional[datetime] = None) -> ContainerRecord:
    """Convert a ``python_on_whales`` container into a ContainerRecord."""
    config = getattr(container, "config", None)
    state = container.state
    return ContainerRecord(
        id=container.id,
        names=[f"/{container.name.lstrip('/')}"],
        image=getattr(config, "image", None) or container.image,
        image_id=container.image,
        command=_command(container),
        created=_epoch(container.created),
        status=describe_status(state, now=now),
        state=(state.status or "unknown").lower(),
        ports=_ports(container),
    )


def image_record(image: Any) -> ImageRecord:
    """Convert a ``python_on_whales`` image into an ImageRecord."""
    config = getattr(image, "config", None)
    size = image.size or 0
    virtual_size = getattr(image, "virtual_size", None)
    return ImageRecord(
        id=image.id,
        repo_tags=list(image.repo_tags or []),
        repo_digests=list(image.repo_digests or []),
        created=_epoch(image.created),
        size=size,
        virtual_size=virtual_size if virtual_size is not None else size,
        labels=getattr(config, "labels", None) or None,
    )


class EngineClient:
    """
    Narrow facade over the Docker engine.

    Args:
        client: Docker client built once at startup and shared by all requests.

    Attributes:
        client: Injected Docker client.
    """

    def __init__(self, client: DockerClient) -> None:
        self.client = client

    def list_containers(self, include_stopped: bool = True) -> list[ContainerRecord]:
        """
        List containers known to the engine.

        Args:
            include_stopped: If False, only running containers are returned.

        Returns:
            List of ContainerRecord.
        """
        containers = self.client.container.list(all=include_stopped)
        logger.debug(f"Engine returned {len(containers)} containers")
        now = datetime.now(timezone.utc)
        records = []
        for container in containers:
            # Removed between the list and its inspect; the listing stays valid.
            try:
                records.append(container_record(container, now=now))
            except NoSuchContainer:
                logger.debug(f"Container {container.id} vanished while listing, skipping")
        return records

    def list_images(self) -> list[ImageRecord]:
        """List locally stored images."""
        images = self.client.image.list()
        logger.debug(f"Engine returned {len(images)} images")
        records = []
        for image in images:
            try:
                records.append(image_record(image))
            except NoSuchImage:
                logger.debug(f"Image {image.id} vanished while listing, skipping")
        return records

    def start_container(self, container_id: str) -> None:
        self.client.container.start(container_id)

    def stop_container(self, container_id: str) -> None:
        self.client.container.stop(container_id)

    def restart_container(self, container_id: str) -> None:
        self.client.container.restart(container_id)

    def remove_container(
        self, container_id: str, force: bool = True, remove_volumes: bool = True
    ) -> None:
        """
        Remove a container.

        Args:
            container_id: Container ID or name.
            force: Remove even if running (the engine stops it first).
            remove_volumes: Also remove anonymous volumes of the container.
        """
        self.client.container.remove(container_id, force=force, volumes=remove_volumes)

    def ping(self) -> EngineInfo:
        """Query engine system info; raises if the engine is unreachable."""
        info = self.client.system.info()
        return EngineInfo(
            server_version=getattr(info, "server_version", None) or "",
            containers=getattr(info, "containers", None) or 0,
            images=getattr(info, "images", None) or 0,
        )
