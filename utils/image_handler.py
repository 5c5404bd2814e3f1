"""
Image Validation and Processing Module

Validates uploaded or fetched images (dish photos, template thumbnails,
logos, QR codes) and re-encodes them through Pillow to strip anything
that is not pixel data.
"""

import os
import uuid
from io import BytesIO

from PIL import Image


class ImageValidationError(Exception):
    """Raised when an image fails validation."""
    pass


# Allowed image formats (PIL format names)
ALLOWED_FORMATS = {'JPEG', 'PNG', 'GIF', 'WEBP'}

# Maximum image dimensions (prevent decompression bombs)
MAX_WIDTH = 4096
MAX_HEIGHT = 4096

# Maximum file size (10MB)
MAX_FILE_SIZE = 10 * 1024 * 1024

# Upload kind -> (max edge in px, output format)
UPLOAD_KINDS = {
    'menu-item': (1600, 'JPEG'),
    'template': (1200, 'JPEG'),
    'logo': (512, 'PNG'),
    'qr-code': (1024, 'PNG'),
}


def _read_bytes(image_data):
    if isinstance(image_data, bytes):
        content = image_data
    else:
        image_data.seek(0)
        content = image_data.read()
    if len(content) > MAX_FILE_SIZE:
        raise ImageValidationError(f"Image too large: {len(content)} bytes (max {MAX_FILE_SIZE})")
    if not content:
        raise ImageValidationError("Empty image")
    return content


def validate_and_process_image(image_data, output_path, max_edge=2048, output_format='JPEG'):
    """
    Validate and re-encode an image.

    Args:
        image_data: Raw image bytes or file-like object
        output_path: Path for the processed image; the extension is replaced
        max_edge: Longest side after resizing
        output_format: 'JPEG' (photos) or 'PNG' (logos and QR codes, which
            need sharp edges and transparency)

    Returns:
        str: The final output path

    Raises:
        ImageValidationError: If the image is invalid or potentially malicious
    """
    buffer = BytesIO(_read_bytes(image_data))

    try:
        img = Image.open(buffer)
        img.verify()

        # verify() leaves the image unusable; reopen
        buffer.seek(0)
        img = Image.open(buffer)

        if img.format not in ALLOWED_FORMATS:
            raise ImageValidationError(
                f"Invalid image format: {img.format}. Allowed formats: {', '.join(sorted(ALLOWED_FORMATS))}"
            )

        width, height = img.size
        if width > MAX_WIDTH or height > MAX_HEIGHT:
            raise ImageValidationError(
                f"Image dimensions too large: {width}x{height}. Maximum: {MAX_WIDTH}x{MAX_HEIGHT}"
            )

        if width > max_edge or height > max_edge:
            img.thumbnail((max_edge, max_edge), Image.Resampling.LANCZOS)

        base_path = os.path.splitext(output_path)[0]
        if output_format == 'PNG':
            if img.mode not in ('RGB', 'RGBA', 'L', 'LA'):
                img = img.convert('RGBA')
            output_path = base_path + '.png'
            img.save(output_path, 'PNG', optimize=True)
        else:
            if img.mode in ('RGBA', 'LA', 'P'):
                # Flatten transparency onto white
                if img.mode == 'P':
                    img = img.convert('RGBA')
                background = Image.new('RGB', img.size, (255, 255, 255))
                background.paste(img, mask=img.split()[-1])
                img = background
            elif img.mode != 'RGB':
                img = img.convert('RGB')
            output_path = base_path + '.jpg'
            img.save(output_path, 'JPEG', quality=85, optimize=True)

        return output_path

    except ImageValidationError:
        raise
    except Image.DecompressionBombError:
        raise ImageValidationError("Image appears to be a decompression bomb (too large when decoded)")
    except (OSError, ValueError, SyntaxError) as e:
        raise ImageValidationError(f"Invalid or corrupted image: {e}")


def save_upload(image_data, upload_folder, kind, owner_id):
    """
    Validate an image and store it under the upload folder.

    Returns:
        The stored file name (relative to upload_folder)
    """
    if kind not in UPLOAD_KINDS:
        raise ValueError(f"Unknown upload kind: {kind}")
    max_edge, output_format = UPLOAD_KINDS[kind]

    os.makedirs(upload_folder, exist_ok=True)
    stem = f"{kind}-{owner_id}-{uuid.uuid4().hex[:12]}"
    path = validate_and_process_image(
        image_data, os.path.join(upload_folder, stem), max_edge=max_edge, output_format=output_format
    )
    return os.path.basename(path)
