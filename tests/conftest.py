"""
Shared pytest fixtures for the Art Visualizer tests
"""
import base64
import io
from typing import Optional
from unittest.mock import MagicMock

import pytest
from PIL import Image

from artviz.core.config import Settings


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's .env file"""
    values = {"gemini_api_key": "test-gemini-key", "orchestration_strategy": "single_call"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_image_part(data: bytes = b"\x89PNG generated", mime_type: Optional[str] = "image/png"):
    part = MagicMock()
    part.text = None
    part.inline_data = MagicMock()
    part.inline_data.data = data
    part.inline_data.mime_type = mime_type
    return part


def make_text_part(text: str = "Here is your room."):
    part = MagicMock()
    part.text = text
    part.inline_data = None
    return part


def make_response(parts=None, candidates=None, text: Optional[str] = None):
    """Mock GenerateContentResponse; pass ``parts`` for a single candidate"""
    response = MagicMock()
    if candidates is None:
        candidate = MagicMock()
        candidate.content.parts = parts if parts is not None else []
        candidates = [candidate]
    response.candidates = candidates
    response.text = text
    return response


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def pipeline_settings():
    return make_settings(orchestration_strategy="pipeline")


@pytest.fixture
def mock_genai_client():
    """Mock google.genai Client; tests set models.generate_content behaviour"""
    client = MagicMock()
    client.models.generate_content = MagicMock(return_value=make_response(parts=[make_image_part()]))
    return client


@pytest.fixture
def sample_jpeg_bytes():
    img = Image.new("RGB", (100, 80), color="beige")
    buffer = io.BytesIO()
    img.save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def sample_image_base64(sample_jpeg_bytes):
    """Room photo as the browser sends it: a JPEG data URL"""
    return f"data:image/jpeg;base64,{base64.b64encode(sample_jpeg_bytes).decode()}"


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def image_part():
    return make_image_part


@pytest.fixture
def text_part():
    return make_text_part


@pytest.fixture
def response_factory():
    return make_response
