"""
Service status routes: API root and engine reachability check.
"""
import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from ..errors import control_error
from ..models.system import ErrorResponse, PingResponse, ServiceInfoResponse
from ..services.config import ConfigService
from ..services.engine import EngineClient

logger = logging.getLogger(__name__)


class SystemRoutes:
    """
    Status router built with dependency injection.

    - GET / - Service information, never touches the engine
    - GET /ping - Check that the Docker engine answers

    Args:
        engine: Instance of `EngineClient` used for the engine check.
        config: Instance of `ConfigService` with the error policy.
        service_name: Name reported by the root endpoint.
        version: Version reported by the root endpoint.
    """

    def __init__(
        self,
        engine: EngineClient,
        config: ConfigService,
        service_name: str,
        version: str,
    ) -> None:
        self.engine = engine
        self.config = config
        self.service_name = service_name
        self.version = version
        self.router = self._build_router()

    def _build_router(self) -> APIRouter:
        router = APIRouter(tags=["System"])
        router.add_api_route(
            "/",
            self.get_service_info,
            methods=["GET"],
            response_model=ServiceInfoResponse,
        )
        router.add_api_route(
            "/ping",
            self.ping,
            methods=["GET"],
            response_model=PingResponse,
            responses={503: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        )
        return router

    async def get_service_info(self) -> ServiceInfoResponse:
        return ServiceInfoResponse(
            status="operational", service=self.service_name, version=self.version
        )

    async def ping(self) -> PingResponse:
        """
        Check that the Docker engine is reachable.

        Returns:
            PingResponse with the engine version in the message.

        Raises:
            ControlError: If the engine cannot be queried.
        """
        try:
            info = await run_in_threadpool(self.engine.ping)
            logger.debug(f"Docker engine reachable (version {info.server_version})")
            if info.server_version:
                message = f"Docker engine {info.server_version} reachable"
            else:
                message = "Docker engine reachable"
            return PingResponse(success=True, message=message, engine=info)
        except Exception as e:
            logger.error(f"Docker engine ping failed: {e}")
            raise control_error(
                e, "Docker engine unreachable", self.config.collapse_error_status
            ) from e
