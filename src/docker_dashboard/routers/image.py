"""
Image listing routes implemented with a class and dependency injection.
"""
import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from ..errors import control_error
from ..models.image import ImageRecord
from ..models.system import ErrorResponse
from ..services.config import ConfigService
from ..services.engine import EngineClient

logger = logging.getLogger(__name__)


class ImageRoutes:
    """
    Docker images router built with dependency injection.

    Args:
        engine: Instance of `EngineClient` used for every Docker call.
        config: Instance of `ConfigService` with the error policy.

    Attributes:
        engine: Injected engine facade.
        config: Injected configuration service.
        router: Instance of `APIRouter` with `/images` endpoints.
    """

    def __init__(self, engine: EngineClient, config: ConfigService) -> None:
        self.engine = engine
        self.config = config
        self.router = self._build_router()

    def _build_router(self) -> APIRouter:
        router = APIRouter(
            prefix="/images",
            tags=["Images"],
            responses={500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
        )
        # GET /images - list local images
        router.add_api_route(
            "",
            self.get_images,
            methods=["GET"],
            response_model=list[ImageRecord],
        )
        return router

    async def get_images(self) -> list[ImageRecord]:
        """
        List locally stored images.

        Returns:
            List of ImageRecord.

        Raises:
            ControlError: If the engine call fails.
        """
        try:
            logger.debug("Fetching images from Docker")
            images = await run_in_threadpool(self.engine.list_images)
            logger.info(f"Successfully retrieved {len(images)} images")
            return images
        except Exception as e:
            logger.error(f"Failed to fetch images: {e}")
            raise control_error(
                e, "Failed to fetch images", self.config.collapse_error_status
            ) from e
