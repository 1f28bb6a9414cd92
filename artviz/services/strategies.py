"""
Orchestration strategies that turn a room photo into a room-with-art image.

Two interchangeable designs sit behind ``ArtOrchestrationStrategy``:

- ``SingleCallStrategy``: one image-conditioned edit call to the image model.
- ``PipelineStrategy``: analyze the room (vision), write an image prompt
  (text), then synthesize a new image from that prompt alone. Each step
  waits for the previous one; any failure aborts the rest.

Which one serves requests is chosen by ``settings.orchestration_strategy``.
"""
import asyncio
import binascii
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from google import genai
from google.genai import types

from artviz.core.config import Settings
from artviz.core.errors import UpstreamCallFailureError, UpstreamEmptyResponseError, UpstreamNoImageError
from artviz.middleware.logging_middleware import get_logger
from artviz.services.data_url import DecodedImage, encode_data_url
from artviz.services.prompts import ArtPrompts

logger = get_logger(__name__)

GENERATED_IMAGE_MIME_TYPE = "image/png"


class ArtOrchestrationStrategy(ABC):
    """Drives the Gemini calls for one visualization request"""

    name: str = ""

    def __init__(self, client: genai.Client, settings: Settings):
        self.client = client
        self.settings = settings

    @abstractmethod
    async def visualize(self, image: DecodedImage, art_description: str) -> str:
        """Return a data URL of the room with the artwork added."""

    async def _generate_content(self, step: str, **request: Any) -> types.GenerateContentResponse:
        """Run one blocking SDK call in the executor, wrapping any failure."""

        def _run_generate():
            return self.client.models.generate_content(**request)

        timeout = self.settings.gemini_timeout_seconds
        logger.info(f"[{self.name}] {step}: calling {request.get('model')}")
        try:
            loop = asyncio.get_running_loop()
            future = loop.run_in_executor(None, _run_generate)
            if timeout:
                return await asyncio.wait_for(future, timeout=timeout)
            return await future
        except asyncio.TimeoutError as e:
            logger.error(f"[{self.name}] {step} timed out after {timeout}s")
            raise UpstreamCallFailureError(f"{step} timed out after {timeout} seconds") from e
        except Exception as e:
            logger.error(f"[{self.name}] {step} failed: {e}")
            raise UpstreamCallFailureError(str(e) or f"{step} failed: {type(e).__name__}") from e

    def _image_part(self, step: str, image: DecodedImage) -> types.Part:
        """Inline the room photo; a payload the service could not accept fails the call."""
        try:
            data = image.to_bytes()
        except (binascii.Error, ValueError) as e:
            logger.error(f"[{self.name}] {step} failed: image payload is not valid base64")
            raise UpstreamCallFailureError(f"{step} failed: image payload is not valid base64 ({e})") from e
        return types.Part.from_bytes(data=data, mime_type=image.mime_type)

    @staticmethod
    def _response_text(step: str, response: types.GenerateContentResponse) -> str:
        text = (response.text or "").strip() if response is not None else ""
        if not text:
            raise UpstreamEmptyResponseError(f"No text returned from {step}")
        return text

    @staticmethod
    def _image_data_url(part: types.Part) -> Optional[str]:
        """Data URL for a part carrying inline image bytes, else None."""
        inline_data = part.inline_data
        if inline_data is None or not inline_data.data:
            return None
        return encode_data_url(inline_data.mime_type or GENERATED_IMAGE_MIME_TYPE, inline_data.data)


class SingleCallStrategy(ArtOrchestrationStrategy):
    """Strategy A: a single image-edit call conditioned on the room photo"""

    name = "single_call"

    async def visualize(self, image: DecodedImage, art_description: str) -> str:
        contents = [
            self._image_part("image edit", image),
            types.Part.from_text(text=ArtPrompts.single_call(art_description)),
        ]
        response = await self._generate_content(
            "image edit",
            model=self.settings.gemini_image_model,
            contents=contents,
            config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
        )

        if not response.candidates:
            raise UpstreamEmptyResponseError("No candidates in response")

        candidate = response.candidates[0]
        if not candidate.content or not candidate.content.parts:
            raise UpstreamEmptyResponseError("No content or parts in candidate")

        # The model may interleave text parts; the first image part wins
        for part in candidate.content.parts:
            data_url = self._image_data_url(part)
            if data_url:
                logger.info(f"[{self.name}] Generated image ({part.inline_data.mime_type or GENERATED_IMAGE_MIME_TYPE})")
                return data_url

        raise UpstreamNoImageError("No image generated in response")


class PipelineStrategy(ArtOrchestrationStrategy):
    """Strategy B: analyze the room, write a prompt, synthesize a fresh image"""

    name = "pipeline"

    async def visualize(self, image: DecodedImage, art_description: str) -> str:
        analysis_response = await self._generate_content(
            "room analysis",
            model=self.settings.gemini_text_model,
            contents=[
                self._image_part("room analysis", image),
                types.Part.from_text(text=ArtPrompts.room_analysis()),
            ],
            config=types.GenerateContentConfig(response_modalities=["TEXT"]),
        )
        room_analysis = self._response_text("room analysis", analysis_response)
        logger.debug(f"[{self.name}] Room analysis: {room_analysis[:200]}")

        synthesis_response = await self._generate_content(
            "prompt synthesis",
            model=self.settings.gemini_text_model,
            contents=ArtPrompts.prompt_synthesis(room_analysis, art_description),
        )
        image_prompt = self._response_text("prompt synthesis", synthesis_response)
        logger.info(f"[{self.name}] Synthesized prompt: {image_prompt[:120]}...")

        # The original photo is not sent here; fidelity rests on the prompt
        generation_response = await self._generate_content(
            "image synthesis",
            model=self.settings.gemini_image_model,
            contents=image_prompt,
            config=types.GenerateContentConfig(response_modalities=["IMAGE"], candidate_count=1),
        )

        if not generation_response.candidates:
            raise UpstreamEmptyResponseError("No candidates in response")
        candidate = generation_response.candidates[0]
        if not candidate.content or not candidate.content.parts:
            raise UpstreamEmptyResponseError("No content or parts in candidate")

        data_url = self._image_data_url(candidate.content.parts[0])
        if not data_url:
            raise UpstreamNoImageError("No image generated in response")
        return data_url


STRATEGIES: Dict[str, Type[ArtOrchestrationStrategy]] = {
    SingleCallStrategy.name: SingleCallStrategy,
    PipelineStrategy.name: PipelineStrategy,
}


def build_strategy(name: str, client: genai.Client, settings: Settings) -> ArtOrchestrationStrategy:
    """Instantiate the strategy registered under ``name``."""
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown orchestration strategy: {name!r}") from None
    return strategy_cls(client, settings)
