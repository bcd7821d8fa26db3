from __future__ import annotations

import base64
import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

MAX_IMAGE_SIZE = (1200, 1200)


class ImageDecodeError(ValueError):
    pass


def _read_bytes(upload) -> bytes:
    if isinstance(upload, (bytes, bytearray)):
        return bytes(upload)
    upload.seek(0)
    return upload.getvalue()


def to_data_uri(upload) -> str:
    """Decodes an uploaded image and re-encodes it as an embeddable PNG data URI."""
    data = _read_bytes(upload)
    try:
        img = Image.open(BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Could not read image: {e}") from e

    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA")
    img.thumbnail(MAX_IMAGE_SIZE)

    buffered = BytesIO()
    img.save(buffered, format="PNG")
    img_str = base64.b64encode(buffered.getvalue()).decode()
    logger.debug("Decoded image %sx%s (%d bytes in)", img.width, img.height, len(data))
    return f"data:image/png;base64,{img_str}"
