# Utility modules for Menu Studio
from .url_validator import is_safe_url, safe_fetch, SSRFError
from .image_handler import validate_and_process_image, save_upload, ImageValidationError
from .sanitizer import (
    sanitize_text, sanitize_url, sanitize_name,
    sanitize_description, sanitize_hex_color
)
