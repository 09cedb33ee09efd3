"""
Image Validation and Processing Module

Validates uploaded images before they are sent to the image host.
Re-encodes images through PIL to strip potential exploits.
"""

import base64
import binascii
from collections import namedtuple
from io import BytesIO

from PIL import Image

from .errors import ImageValidationError

# Allowed image formats (PIL format names)
ALLOWED_FORMATS = {'JPEG', 'PNG', 'GIF', 'WEBP'}

# Maximum image dimensions (prevent decompression bombs)
MAX_WIDTH = 4096
MAX_HEIGHT = 4096

# Maximum decoded file size (10MB)
MAX_FILE_SIZE = 10 * 1024 * 1024

ProcessedImage = namedtuple('ProcessedImage', ['data', 'width', 'height', 'format'])


def decode_base64_image(image_data):
    """
    Decode a base64 payload, accepting either raw base64 or a data URL
    such as 'data:image/png;base64,iVBOR...'.

    Raises:
        ImageValidationError: If the payload is not valid base64
    """
    if not isinstance(image_data, str) or not image_data.strip():
        raise ImageValidationError("Image data is empty")

    payload = image_data.strip()
    if ',' in payload:
        payload = payload.split(',', 1)[1]

    # Tolerate missing padding from some browser encoders
    payload += '=' * (-len(payload) % 4)

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ImageValidationError("Image data is not valid base64")

    if not raw:
        raise ImageValidationError("Image data is empty")
    return raw


def _read_content(image_data):
    if isinstance(image_data, bytes):
        return image_data
    image_data.seek(0)
    return image_data.read()


def _open_checked(content):
    """Open the upload with Pillow and enforce format and size limits."""
    buffer = BytesIO(content)

    # verify() consumes the parser, so the image is opened a second time
    Image.open(buffer).verify()
    buffer.seek(0)
    img = Image.open(buffer)

    if img.format not in ALLOWED_FORMATS:
        raise ImageValidationError(
            f"Unsupported image type {img.format}; "
            f"upload one of {', '.join(sorted(ALLOWED_FORMATS))}"
        )

    width, height = img.size
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise ImageValidationError(
            f"Image is {width}x{height}, larger than the {MAX_WIDTH}x{MAX_HEIGHT} limit"
        )
    return img


def _flatten(img):
    """JPEG has no alpha channel: composite transparent images onto white."""
    if img.mode in ('P', 'LA'):
        img = img.convert('RGBA')
    if img.mode == 'RGBA':
        canvas = Image.new('RGB', img.size, (255, 255, 255))
        canvas.paste(img, mask=img.getchannel('A'))
        return canvas
    if img.mode != 'RGB':
        return img.convert('RGB')
    return img


def validate_and_process_image(image_data, max_width=2048, max_height=2048):
    """
    Validate an uploaded image and re-encode it as JPEG.

    Re-encoding drops metadata and anything appended to the original file.
    Images larger than max_width x max_height are scaled down, keeping the
    aspect ratio.

    Args:
        image_data: Raw image bytes or file-like object
        max_width: Width to scale down to (default 2048)
        max_height: Height to scale down to (default 2048)

    Returns:
        ProcessedImage: JPEG bytes plus final width and height

    Raises:
        ImageValidationError: If the image fails any of these checks
    """
    content = _read_content(image_data)
    if len(content) > MAX_FILE_SIZE:
        raise ImageValidationError(f"Image too large: {len(content)} bytes (max {MAX_FILE_SIZE})")

    try:
        img = _open_checked(content)
        if img.width > max_width or img.height > max_height:
            img.thumbnail((max_width, max_height), Image.Resampling.LANCZOS)
        img = _flatten(img)

        output = BytesIO()
        img.save(output, 'JPEG', quality=85, optimize=True)
    except ImageValidationError:
        raise
    except Image.DecompressionBombError:
        raise ImageValidationError("Image decodes to more pixels than allowed")
    except Exception as e:
        raise ImageValidationError(f"Image could not be read: {e}")

    return ProcessedImage(output.getvalue(), img.width, img.height, 'JPEG')
