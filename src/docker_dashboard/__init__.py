"""Docker Dashboard API package entry point."""
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .errors import ControlError, control_error_handler, validation_error_handler
from .services.config import ConfigService
from .services.engine import EngineClient
from .routers.container import ContainerRoutes
from .routers.image import ImageRoutes
from .routers.system import SystemRoutes

__version__ = "1.0.0"


def create_app(
    config: Optional[ConfigService] = None,
    engine: Optional[EngineClient] = None,
    include_routers: bool = True,
    title: str = "Docker Dashboard API",
    description: str = "REST API to list and control Docker containers and images",
    version: str = __version__,
) -> FastAPI:
    """
    Factory function to create a preconfigured FastAPI application.

    The Docker client is built here, once, and injected into every router.

    Args:
        config: Settings; read from the environment when omitted.
        engine: Pre-built engine facade; built from `config` when omitted.
        include_routers: If True, registers base routers (system, containers, images).
        title: FastAPI application title.
        description: FastAPI application description.
        version: Application version string.

    Returns:
        FastAPI app ready to use or extend.
    """
    config = config or ConfigService.from_env()
    if engine is None:
        engine = EngineClient(config.get_docker_client())

    app = FastAPI(
        title=title,
        description=description,
        version=version,
    )
    app.add_exception_handler(ControlError, control_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if include_routers:
        system_routes = SystemRoutes(engine, config, title, version)
        container_routes = ContainerRoutes(engine, config)
        image_routes = ImageRoutes(engine, config)

        app.include_router(system_routes.router)
        app.include_router(container_routes.router)
        app.include_router(image_routes.router)

    return app


__all__ = [
    "ConfigService",
    "EngineClient",
    "ContainerRoutes",
    "ImageRoutes",
    "SystemRoutes",
    "ControlError",
    "create_app",
]
