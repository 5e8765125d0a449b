"""Services for the Docker Dashboard API."""

from .config import ConfigService
from .engine import EngineClient

__all__ = ["ConfigService", "EngineClient"]
