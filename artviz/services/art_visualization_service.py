"""
Art visualization service: turns a room photo data URL into a room-with-art data URL
"""
import time
from typing import Optional

from google import genai

from artviz.core.config import Settings, settings
from artviz.core.errors import ConfigurationError
from artviz.middleware.logging_middleware import get_logger
from artviz.services.art_catalog import describe_art, resolve_art_type
from artviz.services.data_url import decode_data_url, prepare_room_image
from artviz.services.strategies import ArtOrchestrationStrategy, build_strategy

logger = get_logger(__name__)


class ArtVisualizationService:
    """Service wiring settings, the Gemini client and the configured strategy"""

    def __init__(self, settings: Settings, client: Optional[genai.Client] = None):
        self.settings = settings
        self._client = client
        self._strategy: Optional[ArtOrchestrationStrategy] = None

    @property
    def client(self) -> genai.Client:
        """Gemini client, created on first use once the key is known to be set"""
        if self._client is None:
            self._ensure_configured()
            self._client = genai.Client(api_key=self.settings.gemini_api_key)
            logger.info("Google GenAI client initialized")
        return self._client

    @property
    def strategy(self) -> ArtOrchestrationStrategy:
        if self._strategy is None:
            self._strategy = build_strategy(self.settings.orchestration_strategy, self.client, self.settings)
        return self._strategy

    def _ensure_configured(self):
        if not self.settings.gemini_configured:
            logger.error("GEMINI_API_KEY is not set - refusing to call the image service")
            raise ConfigurationError("Gemini API key not configured")

    async def visualize(self, image: str, art_type: Optional[str] = None) -> str:
        """
        Generate an image of the room with the requested art on its wall.

        Args:
            image: Room photo as a data URL
            art_type: One of the ArtType identifiers; anything else means painting

        Returns:
            str: Data URL of the generated image

        Raises:
            ArtVisualizationError: on configuration, input or upstream failures
        """
        self._ensure_configured()

        start_time = time.time()
        resolved = resolve_art_type(art_type)
        if art_type and resolved.value != art_type:
            logger.warning(f"Unknown art type {art_type!r}, using {resolved.value}")

        decoded = decode_data_url(image, strict=self.settings.strict_data_urls)
        decoded = prepare_room_image(decoded, self.settings.max_image_dimension)

        logger.info(
            f"Visualizing {resolved.value} with strategy={self.settings.orchestration_strategy} "
            f"({decoded.mime_type}, {len(decoded.data)} base64 chars)"
        )
        image_url = await self.strategy.visualize(decoded, describe_art(resolved))

        logger.info(f"Art visualization completed in {time.time() - start_time:.2f}s")
        return image_url


# Global service instance
art_visualization_service = ArtVisualizationService(settings)


def get_art_visualization_service() -> ArtVisualizationService:
    """FastAPI dependency returning the process-wide service."""
    return art_visualization_service
