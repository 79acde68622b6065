"""Gemini generation service backed by the google-genai SDK.

Request shape
-------------
One user turn containing, in order:

1. An inline image part for the primary image
2. An inline image part for the secondary image (when present)
3. A text part with the compiled instruction

The request asks for both IMAGE and TEXT response modalities so a refusal
comes back as readable text instead of an empty response.

Response handling
-----------------
Only the first candidate is inspected. Its parts are scanned in order; an
inline data part supplies the image and a text part supplies the
description. A response with no candidates is treated as "no image", not
as an error.
"""

import logging
from collections.abc import Sequence
from typing import Any

from google import genai
from google.genai import types

from ..config import FadedMemoryConfig
from ..errors import ServiceFailureError
from ..images import ImageInput
from .base import GenerationResult, GenerationServiceBase

logger = logging.getLogger(__name__)


class GeminiService(GenerationServiceBase):
    """Hosted Gemini image model.

    The SDK client is created lazily on the first request so the app can
    start (and show a helpful error) without a credential.
    """

    name = "Gemini"
    description = "Google Gemini multimodal image generation"

    def __init__(self, config: FadedMemoryConfig) -> None:
        super().__init__(config)
        self.model_id = config.gemini_model_id
        self._client: genai.Client | None = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.config.has_api_key():
                raise ServiceFailureError(
                    "No API key configured. Set FADEDMEMORY_API_KEY or GEMINI_API_KEY."
                )
            self._client = genai.Client(api_key=self.config.api_key.get_secret_value())
        return self._client

    async def generate(self, images: Sequence[ImageInput], instruction: str) -> GenerationResult:
        contents = build_contents(images, instruction)
        logger.info(
            f"Sending {len(images)} image(s) to {self.model_id} "
            f"({sum(image.size for image in images)} bytes, {len(instruction)} prompt chars)"
        )

        response = await self.client.aio.models.generate_content(
            model=self.model_id,
            contents=contents,
            config=types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"]),
        )

        result = extract_result(response)
        logger.info(
            f"Gemini responded: image={'yes' if result.has_image else 'no'}, "
            f"text={'yes' if result.text else 'no'}"
        )
        return result


def build_contents(images: Sequence[ImageInput], instruction: str) -> list[types.Content]:
    """Build the single user turn sent to Gemini: image parts, then the text part."""
    parts = [types.Part.from_bytes(data=image.data, mime_type=image.mime_type) for image in images]
    parts.append(types.Part.from_text(text=instruction))
    return [types.Content(role="user", parts=parts)]


def extract_result(response: Any) -> GenerationResult:
    """Pull the image and description out of the first response candidate."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return GenerationResult()

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []

    image: bytes | None = None
    mime_type: str | None = None
    text: str | None = None
    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        data = getattr(inline_data, "data", None) if inline_data else None
        if data:
            image = bytes(data)
            mime_type = getattr(inline_data, "mime_type", None)
        elif getattr(part, "text", None):
            text = part.text

    return GenerationResult(image=image, mime_type=mime_type, text=text)
