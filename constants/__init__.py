"""
Constants Package

Unit tables, validation whitelists, and template defaults.
"""

from .units import (
    UNIT_MAPPINGS,
    WEIGHT_TO_G,
    VOLUME_TO_ML,
)

from .validation import (
    VALID_CATEGORY_TYPES,
    VALID_MENU_STATUSES,
    VALID_RECIPE_STATUSES,
    VALID_ADJUSTMENT_REASONS,
    VALID_SUPPLIER_STATUSES,
    VALID_LAYOUT_STYLES,
    VALID_CARD_STYLES,
    VALID_SPACINGS,
    MAX_LENGTHS,
    MAX_PRICE,
    MAX_QUANTITY,
    ALLOWED_EXTENSIONS,
)

from .templates import (
    LIVE_MENU_DEFAULTS,
    EDITOR_DEFAULTS,
    DEFAULT_TEMPLATES,
    BRAND_KIT_DEFAULTS,
    UNCATEGORIZED,
)
