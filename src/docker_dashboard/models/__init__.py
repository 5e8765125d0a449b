"""Pydantic models for the Docker Dashboard API."""

from .container import ContainerRecord, ContainerControlResponse, PortMapping
from .image import ImageRecord
from .system import EngineInfo, ErrorResponse, PingResponse, ServiceInfoResponse

__all__ = [
    "ContainerRecord",
    "ContainerControlResponse",
    "PortMapping",
    "ImageRecord",
    "EngineInfo",
    "ErrorResponse",
    "PingResponse",
    "ServiceInfoResponse",
]
