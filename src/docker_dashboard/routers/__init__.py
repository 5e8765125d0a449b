"""FastAPI routers for the Docker Dashboard API."""

from .container import ContainerRoutes
from .image import ImageRoutes
from .system import SystemRoutes

__all__ = ["ContainerRoutes", "ImageRoutes", "SystemRoutes"]
