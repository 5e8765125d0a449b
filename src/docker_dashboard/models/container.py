"""Container models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PortMapping(BaseModel):
    """Port published (or only exposed) by a container."""

    model_config = ConfigDict(populate_by_name=True)

    private_port: int = Field(..., alias="PrivatePort", description="Container-side port")
    public_port: Optional[int] = Field(
        None, alias="PublicPort", description="Host-side port, if published"
    )
    type: str = Field(..., alias="Type", description="Protocol (tcp, udp, sctp)")
    ip: Optional[str] = Field(None, alias="IP", description="Host bind address")


class ContainerRecord(BaseModel):
    """Docker container as listed by the engine."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="Id", description="Container ID")
    names: list[str] = Field(..., alias="Names", description="Container names")
    image: str = Field(..., alias="Image", description="Image reference")
    image_id: str = Field(..., alias="ImageID", description="Image ID")
    command: str = Field(..., alias="Command", description="Command line")
    created: int = Field(..., alias="Created", description="Creation time (epoch seconds)")
    status: str = Field(..., alias="Status", description="Human-readable status")
    state: str = Field(..., alias="State", description="Lifecycle state")
    ports: list[PortMapping] = Field(..., alias="Ports", description="Port mappings")


class ContainerControlResponse(BaseModel):
    """Response after executing a control action on a container."""

    success: bool = Field(..., description="Action success status")
    message: str = Field(..., description="Status message")
