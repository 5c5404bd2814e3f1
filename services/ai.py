"""
AI Menu Service

Narrow interface to the external model used for menu extraction from a
photo, plus the deterministic template style generator.
"""

import base64
import json
import logging
import re

import requests

from constants import EDITOR_DEFAULTS
from .cost import to_decimal

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = (
    "Extract all menu items from this image. For each item, provide:\n"
    "- name: the dish name\n"
    "- description: brief description if available\n"
    "- price: numeric price without currency symbols\n\n"
    "Return ONLY a JSON array like this:\n"
    '[{"name": "Dish Name", "description": "Description", "price": 12.99}]\n'
    "Do not include any other text, just the JSON array."
)

# Returned when no extraction endpoint is configured
SAMPLE_DRAFTS = [
    {'name': 'Tacos al Pastor', 'description': 'Marinated pork, pineapple, onion and cilantro', 'price': '85.00'},
    {'name': 'Quesadilla de Flor de Calabaza', 'description': 'Corn tortilla with Oaxaca cheese', 'price': '65.00'},
    {'name': 'Guacamole', 'description': 'Fresh avocado with totopos', 'price': '70.00'},
    {'name': 'Agua de Horchata', 'description': '', 'price': '35.00'},
]

_FENCE_RE = re.compile(r'^```(?:json)?\s*|\s*```$')
_ARRAY_RE = re.compile(r'\[[\s\S]*\]')


class MenuExtractionError(Exception):
    """Raised when menu items cannot be extracted from an image."""
    pass


def _coerce_price(value):
    try:
        price = to_decimal(value)
    except ValueError:
        return to_decimal(0)
    if not price.is_finite() or price < 0:
        return to_decimal(0)
    return price


def _to_drafts(raw_items, category=None):
    drafts = []
    for index, item in enumerate(raw_items):
        if not isinstance(item, dict):
            continue
        drafts.append({
            'name': str(item.get('name') or 'Unnamed Item').strip(),
            'description': str(item.get('description') or '').strip(),
            'price': _coerce_price(item.get('price')),
            'category_name': category or item.get('category') or None,
            'order_index': index,
        })
    return drafts


def parse_extraction_response(text, category=None):
    """
    Parse the model's text reply into menu item drafts.

    The model is asked for a bare JSON array but often wraps it in a code
    fence or surrounding prose; the first [...] block is used.

    Args:
        text: Raw model reply
        category: Category name to assign every draft (optional)

    Returns:
        List of draft dicts with name, description, price, category_name,
        order_index

    Raises:
        MenuExtractionError: If no JSON array can be decoded
    """
    body = _FENCE_RE.sub('', (text or '').strip())
    match = _ARRAY_RE.search(body)
    if match:
        body = match.group(0)

    try:
        items = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        logger.error('Could not decode extraction reply: %.200s', text)
        raise MenuExtractionError('Failed to parse menu items from AI response. Try a clearer image.')

    if not isinstance(items, list):
        raise MenuExtractionError('AI response was not in the expected format.')

    return _to_drafts(items, category)


def extract_menu_items(image_bytes, mime_type, endpoint=None, api_key=None, timeout=30, category=None):
    """
    Extract menu item drafts from a menu photo.

    Posts the image to the configured model endpoint. Without an endpoint
    the fixed sample drafts are returned so the upload flow stays usable
    offline.
    """
    if not endpoint:
        logger.info('No AI extraction endpoint configured; returning sample drafts')
        return _to_drafts(SAMPLE_DRAFTS, category)

    headers = {'Content-Type': 'application/json'}
    if api_key:
        headers['Authorization'] = f'Bearer {api_key}'

    payload = {
        'prompt': EXTRACTION_PROMPT,
        'image': {
            'mime_type': mime_type or 'image/jpeg',
            'data': base64.b64encode(image_bytes).decode('ascii'),
        },
    }

    try:
        response = requests.post(endpoint, json=payload, headers=headers, timeout=timeout)
        response.raise_for_status()
        reply = response.json()
    except requests.RequestException as e:
        logger.error('AI extraction request failed: %s', e)
        raise MenuExtractionError(f'AI service unavailable: {e}')
    except ValueError:
        raise MenuExtractionError('AI service returned a non-JSON reply.')

    text = reply.get('text', '') if isinstance(reply, dict) else ''
    drafts = parse_extraction_response(text, category)
    logger.info('Extracted %d menu items', len(drafts))
    return drafts


def generate_template_style(prompt, brand_kit=None):
    """
    Generate a full template configuration from a style prompt.

    Starts from the editor palette, applies the brand kit's primary color and
    main font, then adjusts layout keys by keywords in the prompt.
    """
    prompt = (prompt or '').lower()
    brand_kit = brand_kit or {}

    style = dict(EDITOR_DEFAULTS)
    if brand_kit.get('primary_color'):
        style['primary_color'] = brand_kit['primary_color']
    if brand_kit.get('font_family_main'):
        style['font_family_primary'] = brand_kit['font_family_main']

    style['border_radius'] = '12px' if 'modern' in prompt else '6px'
    style['layout_style'] = 'grid' if 'grid' in prompt else 'list'
    style['card_style'] = 'minimal' if 'minimal' in prompt else 'elevated'
    style['spacing'] = 'compact' if 'compact' in prompt else 'comfortable'
    return style
