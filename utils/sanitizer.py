"""
Input Sanitization Module

Normalizes user input and AI-extracted text before it is stored. Values are
kept as plain text; HTML escaping happens once, at render time, through
Jinja autoescape on the public menu.
"""

import re
from urllib.parse import urlparse

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')
# Same set minus tab and newline, for multi-line fields.
_CONTROL_CHARS_KEEP_LINES = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')
_HEX_COLOR = re.compile(r'^#[0-9A-Fa-f]{6}$')


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text by trimming it and dropping control characters.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS_KEEP_LINES.sub('', text.strip())

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_url(url):
    """
    Reject URLs with dangerous schemes.

    Only http, https, and site-relative paths (/static/...) are accepted,
    since these end up in src attributes on the public menu.

    Returns:
        The URL if safe, empty string if unsafe or invalid
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()
    if url.startswith('/') and not url.startswith('//'):
        return url

    try:
        parsed = urlparse(url)
    except ValueError:
        return ''

    if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
        return ''

    return url


def sanitize_name(name, max_length=200, default='Unnamed Item'):
    """
    Sanitize a dish, category, or menu name.

    Strips control characters, collapses whitespace, and falls back to
    ``default`` if nothing is left.
    """
    if not name:
        return default

    if not isinstance(name, str):
        name = str(name)

    name = _CONTROL_CHARS.sub(' ', name.strip())
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length - 3] + '...'

    return name or default


def sanitize_description(description, max_length=2000):
    """Sanitize a free-text description, preserving newlines."""
    if not description:
        return ''

    if not isinstance(description, str):
        description = str(description)

    description = _CONTROL_CHARS_KEEP_LINES.sub('', description.strip())
    if len(description) > max_length:
        description = description[:max_length]

    return description


def sanitize_hex_color(value, default=None):
    """Return an uppercase #RRGGBB color, or ``default`` if the value is not one."""
    if not isinstance(value, str):
        return default
    value = value.strip()
    if not _HEX_COLOR.match(value):
        return default
    return value.upper()
