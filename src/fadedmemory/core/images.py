"""Image input loading and format checks.

Selected files are read into memory as :class:`ImageInput` values holding
the raw bytes and MIME type that are later sent to the generation service.
The file type is decided by sniffing the content with Pillow rather than
trusting the file extension, so a renamed GIF is still rejected.

Only three formats are accepted: JPEG, PNG and WEBP.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import InputRejectedError, ReadFailureError

logger = logging.getLogger(__name__)

# Pillow format name -> MIME type accepted by the generation service
ALLOWED_FORMATS: dict[str, str] = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
}
ALLOWED_MIME_TYPES: frozenset[str] = frozenset(ALLOWED_FORMATS.values())

INVALID_TYPE_MESSAGE = "Invalid file type. Please select a JPG, PNG, or WEBP image."
READ_FAILURE_MESSAGE = "Failed to read the image file."


@dataclass(frozen=True)
class ImageInput:
    """An uploaded image ready to be sent to the generation service.

    Attributes:
        data: Raw encoded image bytes, exactly as read from disk
        mime_type: One of :data:`ALLOWED_MIME_TYPES`
        name: Original file name, for display and logging only
    """

    data: bytes
    mime_type: str
    name: str = ""

    def __post_init__(self) -> None:
        if self.mime_type not in ALLOWED_MIME_TYPES:
            raise InputRejectedError(INVALID_TYPE_MESSAGE)

    @property
    def size(self) -> int:
        """Payload size in bytes."""
        return len(self.data)

    def to_pil(self) -> Image.Image:
        """Decode the payload into a Pillow image."""
        return Image.open(io.BytesIO(self.data))

    def __repr__(self) -> str:
        return f"ImageInput(name={self.name!r}, mime_type={self.mime_type!r}, size={self.size})"


def detect_mime_type(data: bytes) -> str:
    """Identify the MIME type of encoded image bytes.

    Args:
        data: Encoded image bytes

    Returns:
        The MIME type of the image

    Raises:
        InputRejectedError: If the bytes are not a JPEG, PNG or WEBP image
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            image_format = image.format
    except (UnidentifiedImageError, OSError) as e:
        raise InputRejectedError(INVALID_TYPE_MESSAGE) from e

    mime_type = ALLOWED_FORMATS.get(image_format or "")
    if mime_type is None:
        logger.warning(f"Rejected unsupported image format: {image_format}")
        raise InputRejectedError(INVALID_TYPE_MESSAGE)
    return mime_type


def is_decodable_image(data: bytes) -> bool:
    """Check that ``data`` is an encoded image Pillow can fully decode.

    Any Pillow-readable format passes; unlike :func:`detect_mime_type` this
    is used on service results, not user uploads.
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        logger.debug(f"Image data could not be decoded: {e}")
        return False
    return True


def image_from_bytes(data: bytes, name: str = "") -> ImageInput:
    """Build an :class:`ImageInput` from bytes already in memory."""
    if not data:
        raise InputRejectedError(INVALID_TYPE_MESSAGE)
    return ImageInput(data=data, mime_type=detect_mime_type(data), name=name)


def load_image_input(path: str | Path, max_bytes: int | None = None) -> ImageInput:
    """Read a selected file from disk into an :class:`ImageInput`.

    Args:
        path: Path of the selected file
        max_bytes: Optional upper bound on the file size

    Returns:
        The loaded image input

    Raises:
        ReadFailureError: If the file cannot be read
        InputRejectedError: If the file is too large or not a supported image
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read image file {file_path}: {e}")
        raise ReadFailureError(READ_FAILURE_MESSAGE) from e

    if max_bytes is not None and len(data) > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise InputRejectedError(f"Image is too large. Maximum size is {limit_mb:.0f} MB.")

    image_input = image_from_bytes(data, name=file_path.name)
    logger.info(f"Loaded {image_input!r}")
    return image_input
