"""Shared pytest fixtures for Faded Memory tests."""

import io
import shutil
import tempfile
from datetime import date
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, Mock

import pytest
from PIL import Image

from fadedmemory.core.config import FadedMemoryConfig
from fadedmemory.core.images import ImageInput
from fadedmemory.core.services.base import GenerationResult, GenerationServiceBase
from fadedmemory.ui.models import UIState


def make_image_bytes(image_format: str, size: tuple[int, int] = (60, 40), color=(200, 80, 40)) -> bytes:
    """Encode a solid-color test image in the given Pillow format."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> FadedMemoryConfig:
    """Create a test configuration that ignores the environment's .env file."""
    return FadedMemoryConfig(
        _env_file=None,
        api_key="test-key",
        default_service="Dry-Run",
        retro_filter_style="detailed",
    )


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def webp_bytes() -> bytes:
    return make_image_bytes("WEBP")


@pytest.fixture
def jpeg_input(jpeg_bytes: bytes) -> ImageInput:
    return ImageInput(data=jpeg_bytes, mime_type="image/jpeg", name="photo.jpg")


@pytest.fixture
def png_input(png_bytes: bytes) -> ImageInput:
    return ImageInput(data=png_bytes, mime_type="image/png", name="photo.png")


@pytest.fixture
def webp_input(webp_bytes: bytes) -> ImageInput:
    return ImageInput(data=webp_bytes, mime_type="image/webp", name="friend.webp")


@pytest.fixture
def image_files(temp_dir: Path, jpeg_bytes: bytes, png_bytes: bytes, webp_bytes: bytes) -> dict[str, Path]:
    """Write sample images (and a few invalid files) to disk.

    Returns:
        Mapping of label to file path
    """
    files = {
        "jpeg": temp_dir / "photo.jpg",
        "png": temp_dir / "photo.png",
        "webp": temp_dir / "friend.webp",
        "gif": temp_dir / "anim.gif",
        "text": temp_dir / "notes.jpg",
    }
    files["jpeg"].write_bytes(jpeg_bytes)
    files["png"].write_bytes(png_bytes)
    files["webp"].write_bytes(webp_bytes)
    files["gif"].write_bytes(make_image_bytes("GIF"))
    files["text"].write_text("definitely not an image")
    return files


@pytest.fixture
def fixed_clock():
    """Clock that always returns 7 March."""
    return lambda: date(2026, 3, 7)


@pytest.fixture
def mock_service() -> Mock:
    """Generation service whose ``generate`` returns a small PNG."""
    service = Mock(spec=GenerationServiceBase)
    service.name = "Mock"
    service.generate = AsyncMock(
        return_value=GenerationResult(image=make_image_bytes("PNG"), mime_type="image/png")
    )
    return service


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing."""
    return UIState()
