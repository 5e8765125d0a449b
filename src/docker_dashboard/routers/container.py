"""
Container management routes implemented with a class and dependency injection.
"""
import logging
from typing import Callable, Optional

from fastapi import APIRouter, Query
from fastapi.concurrency import run_in_threadpool

from ..errors import control_error
from ..models.container import ContainerControlResponse, ContainerRecord
from ..models.system import ErrorResponse
from ..services.config import ConfigService
from ..services.engine import EngineClient

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


class ContainerRoutes:
    """
    Docker containers router built with dependency injection.

    Provides endpoints for listing containers and driving their lifecycle
    (start, stop, restart, remove).

    Args:
        engine: Instance of `EngineClient` used for every Docker call.
        config: Instance of `ConfigService` with removal and error policies.

    Attributes:
        engine: Injected engine facade.
        config: Injected configuration service.
        router: Instance of `APIRouter` with `/containers` endpoints.
    """

    def __init__(self, engine: EngineClient, config: ConfigService) -> None:
        """
        Initialize container routes.

        Args:
            engine: Engine facade instance for dependency injection.
            config: Configuration service instance for dependency injection.
        """
        self.engine = engine
        self.config = config
        self.router = self._build_router()

    def _build_router(self) -> APIRouter:
        """
        Build and configure the router with container management endpoints.

        Returns:
            APIRouter configured with GET, POST and DELETE handlers for /containers.
        """
        router = APIRouter(
            prefix="/containers", tags=["Containers"], responses=ERROR_RESPONSES
        )
        # GET /containers - list all containers
        router.add_api_route(
            "",
            self.get_containers,
            methods=["GET"],
            response_model=list[ContainerRecord],
        )
        # POST /containers/<container_id>/start - start container
        router.add_api_route(
            "/{container_id}/start",
            self.container_start,
            methods=["POST"],
            response_model=ContainerControlResponse,
        )
        # POST /containers/<container_id>/stop - stop container
        router.add_api_route(
            "/{container_id}/stop",
            self.container_stop,
            methods=["POST"],
            response_model=ContainerControlResponse,
        )
        # POST /containers/<container_id>/restart - restart container
        router.add_api_route(
            "/{container_id}/restart",
            self.container_restart,
            methods=["POST"],
            response_model=ContainerControlResponse,
        )
        # DELETE /containers/<container_id>/remove - remove container
        router.add_api_route(
            "/{container_id}/remove",
            self.container_remove,
            methods=["DELETE"],
            response_model=ContainerControlResponse,
        )
        return router

    async def get_containers(
        self,
        all: bool = Query(True, description="Include stopped containers"),
    ) -> list[ContainerRecord]:
        """
        List containers on the engine.

        Args:
            all: If False, only running containers are returned.

        Returns:
            List of ContainerRecord.

        Raises:
            ControlError: If the engine call fails.
        """
        try:
            logger.debug(f"Fetching containers from Docker (all={all})")
            containers = await run_in_threadpool(self.engine.list_containers, all)
            logger.info(f"Successfully retrieved {len(containers)} containers")
            return containers
        except Exception as e:
            logger.error(f"Failed to fetch containers: {e}")
            raise control_error(
                e, "Failed to fetch containers", self.config.collapse_error_status
            ) from e

    async def container_start(self, container_id: str) -> ContainerControlResponse:
        """
        Start a container.

        Args:
            container_id: Container ID or name.

        Returns:
            ContainerControlResponse with action result.
        """
        return await self._control_container(
            container_id, "start", "started", self.engine.start_container
        )

    async def container_stop(self, container_id: str) -> ContainerControlResponse:
        """
        Stop a container.

        Args:
            container_id: Container ID or name.

        Returns:
            ContainerControlResponse with action result.
        """
        return await self._control_container(
            container_id, "stop", "stopped", self.engine.stop_container
        )

    async def container_restart(self, container_id: str) -> ContainerControlResponse:
        """
        Restart a container.

        Args:
            container_id: Container ID or name.

        Returns:
            ContainerControlResponse with action result.
        """
        return await self._control_container(
            container_id, "restart", "restarted", self.engine.restart_container
        )

    async def container_remove(
        self,
        container_id: str,
        force: Optional[bool] = Query(
            None, description="Remove even if running (defaults to REMOVE_FORCE)"
        ),
        volumes: Optional[bool] = Query(
            None, description="Also remove anonymous volumes (defaults to REMOVE_VOLUMES)"
        ),
    ) -> ContainerControlResponse:
        """
        Remove a container.

        Destructive by default: unless overridden, a running container is
        stopped and its anonymous volumes are deleted.

        Args:
            container_id: Container ID or name.
            force: Per-request override of the configured force flag.
            volumes: Per-request override of the configured volumes flag.

        Returns:
            ContainerControlResponse with action result.
        """
        force = self.config.remove_force if force is None else force
        volumes = self.config.remove_volumes if volumes is None else volumes
        return await self._control_container(
            container_id,
            "remove",
            "removed",
            lambda cid: self.engine.remove_container(
                cid, force=force, remove_volumes=volumes
            ),
        )

    async def _control_container(
        self,
        container_id: str,
        action: str,
        past_tense: str,
        operation: Callable[[str], None],
    ) -> ContainerControlResponse:
        """
        Internal method to run one lifecycle operation on a container.

        Args:
            container_id: Container ID or name, forwarded without validation.
            action: Action name used in logs and error messages.
            past_tense: Action wording for the success message.
            operation: Engine facade call to run.

        Returns:
            ContainerControlResponse with action result.

        Raises:
            ControlError: If the engine call fails.
        """
        try:
            logger.debug(f"Control request for container: {container_id}, action: {action}")
            await run_in_threadpool(operation, container_id)
            logger.info(f"Container {container_id} {past_tense} successfully")
            return ContainerControlResponse(
                success=True,
                message=f"Container {past_tense} successfully",
            )
        except Exception as e:
            logger.error(f"Failed to {action} container {container_id}: {e}")
            raise control_error(
                e, f"Failed to {action} container", self.config.collapse_error_status
            ) from e
