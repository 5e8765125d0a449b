"""Service and engine status models."""
from pydantic import BaseModel, Field


class ServiceInfoResponse(BaseModel):
    """Response for the API root."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")


class EngineInfo(BaseModel):
    """Subset of the Docker engine system information."""

    server_version: str = Field("", description="Docker engine version")
    containers: int = Field(0, description="Total containers on the engine")
    images: int = Field(0, description="Total images on the engine")


class PingResponse(BaseModel):
    """Response for the engine reachability check."""

    success: bool = Field(..., description="Engine reachable")
    message: str = Field(..., description="Status message")
    engine: EngineInfo = Field(..., description="Engine version and object counts")


class ErrorResponse(BaseModel):
    """Body returned for every failed operation."""

    error: str = Field(..., description="Generic failure message")
    code: str = Field(..., description="Error kind")
