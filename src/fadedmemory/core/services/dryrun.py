"""Dry-run generation service (offline).

Renders a rough local approximation of the transform with Pillow so the UI
can be exercised without a credential or network access: center-crop to
3:2, blend in the second image if there is one, warm the colors, add grain
and stamp the corner. The instruction text is ignored apart from logging.
"""

import asyncio
import io
import logging
from collections.abc import Sequence

from PIL import Image, ImageDraw, ImageEnhance, ImageFont, ImageOps

from ..images import ImageInput
from .base import GenerationResult, GenerationServiceBase

logger = logging.getLogger(__name__)

OUTPUT_SIZE = (768, 512)
STAMP_COLOR = (255, 140, 0)


class DryRunService(GenerationServiceBase):
    """Offline renderer used for local development and tests."""

    name = "Dry-Run"
    description = "Local Pillow renderer, no network access"

    async def generate(self, images: Sequence[ImageInput], instruction: str) -> GenerationResult:
        logger.info(f"Dry-run transform of {len(images)} image(s), {len(instruction)} prompt chars")
        data = await asyncio.to_thread(render_snapshot, images)
        return GenerationResult(
            image=data,
            mime_type="image/png",
            text="Dry-run render (no service call was made).",
        )


def render_snapshot(images: Sequence[ImageInput]) -> bytes:
    """Render the offline approximation and return PNG bytes."""
    if not images:
        raise ValueError("At least one image is required")

    frames = [ImageOps.fit(image.to_pil().convert("RGB"), OUTPUT_SIZE) for image in images]
    canvas = frames[0]
    if len(frames) > 1:
        canvas = Image.blend(canvas, frames[1], 0.5)

    canvas = ImageEnhance.Color(canvas).enhance(1.15)
    warm = Image.new("RGB", OUTPUT_SIZE, (255, 200, 120))
    canvas = Image.blend(canvas, warm, 0.12)

    grain = Image.effect_noise(OUTPUT_SIZE, 40).convert("RGB")
    canvas = Image.blend(canvas, grain, 0.08)

    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()
    draw.text((OUTPUT_SIZE[0] - 90, OUTPUT_SIZE[1] - 30), "DRY-RUN", fill=STAMP_COLOR, font=font)

    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG")
    return buffer.getvalue()
