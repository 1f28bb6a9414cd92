"""
Data URL handling for uploaded room photos and generated images
"""
import base64
import binascii
import io
import logging
import re
from dataclasses import dataclass
from typing import Union

from PIL import Image, ImageOps, UnidentifiedImageError

from artviz.core.errors import InvalidImageFormatError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[^;,]*)(?:;[^;,]*)*?;base64,(?P<payload>.*)$", re.DOTALL)
_MIME_RE = re.compile(r"^[\w.+-]+/[\w.+-]+$")

# Best-effort patterns used when strict parsing is switched off
_LENIENT_PREFIX_RE = re.compile(r"^data:image/\w+;base64,")
_LENIENT_MIME_RE = re.compile(r"^data:(image/\w+);base64,")


@dataclass(frozen=True)
class DecodedImage:
    """Base64 payload and media type taken from a data URL"""

    data: str
    mime_type: str = DEFAULT_MIME_TYPE

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)

    def to_data_url(self) -> str:
        return encode_data_url(self.mime_type, self.data)


def decode_data_url(data_url: str, strict: bool = True) -> DecodedImage:
    """
    Split a ``data:<mime>;base64,<payload>`` string into payload and media type.

    Args:
        data_url: The data URL sent by the client
        strict: When True, anything that is not a base64 image data URL raises
            InvalidImageFormatError. When False, a non-matching string is passed
            through unchanged with the default media type.

    Returns:
        DecodedImage with the payload still base64-encoded
    """
    if not strict:
        payload = _LENIENT_PREFIX_RE.sub("", data_url, count=1)
        match = _LENIENT_MIME_RE.match(data_url)
        return DecodedImage(data=payload, mime_type=match.group(1) if match else DEFAULT_MIME_TYPE)

    match = _DATA_URL_RE.match(data_url.strip())
    if not match:
        raise InvalidImageFormatError("Image must be a base64 data URL (data:<mime-type>;base64,<payload>)")

    mime_type = match.group("mime").strip().lower()
    if not _MIME_RE.match(mime_type):
        mime_type = DEFAULT_MIME_TYPE
    elif not mime_type.startswith("image/"):
        raise InvalidImageFormatError(f"Unsupported media type: {mime_type}")

    payload = match.group("payload").strip()
    if not payload:
        raise InvalidImageFormatError("Image data URL has an empty payload")
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageFormatError(f"Image payload is not valid base64: {e}") from e

    return DecodedImage(data=payload, mime_type=mime_type)


def encode_data_url(mime_type: str, payload: Union[bytes, str]) -> str:
    """Compose a data URL; bytes are base64-encoded, strings are used as-is."""
    if isinstance(payload, bytes):
        payload = base64.b64encode(payload).decode("utf-8")
    return f"data:{mime_type};base64,{payload}"


def prepare_room_image(image: DecodedImage, max_dimension: int) -> DecodedImage:
    """
    Downscale a room photo whose longest side exceeds ``max_dimension``.

    Photos within the limit are returned untouched so the model sees the
    original bytes. A ``max_dimension`` of 0 skips inspection entirely.
    """
    if max_dimension <= 0:
        return image

    try:
        pil_image = Image.open(io.BytesIO(image.to_bytes()))
        pil_image.load()
    except (UnidentifiedImageError, OSError, binascii.Error, ValueError) as e:
        raise InvalidImageFormatError(f"Uploaded file is not a readable image: {e}") from e

    if pil_image.width <= max_dimension and pil_image.height <= max_dimension:
        return image

    original_size = (pil_image.width, pil_image.height)

    # Phone photos carry their rotation in EXIF
    pil_image = ImageOps.exif_transpose(pil_image)
    if pil_image.mode != "RGB":
        pil_image = pil_image.convert("RGB")
    pil_image.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    pil_image.save(buffer, format="JPEG", quality=95)
    logger.info(f"Resized room image from {original_size[0]}x{original_size[1]} to {pil_image.width}x{pil_image.height}")

    return DecodedImage(data=base64.b64encode(buffer.getvalue()).decode("utf-8"), mime_type="image/jpeg")
