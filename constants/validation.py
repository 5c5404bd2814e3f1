"""
Validation Constants

Whitelist values for validating user input before it reaches the database.
"""

# Category usage types
VALID_CATEGORY_TYPES = {'recipe', 'ingredient', 'expense', 'menu_item'}

# Digital menu lifecycle
VALID_MENU_STATUSES = {'draft', 'active', 'inactive'}

# Recipe lifecycle
VALID_RECIPE_STATUSES = {'active', 'inactive', 'draft'}

# Stock movement reasons
VALID_ADJUSTMENT_REASONS = {'purchase', 'waste', 'count', 'transfer', 'sale', 'other'}

# Supplier lifecycle
VALID_SUPPLIER_STATUSES = {'active', 'inactive'}

# Template configuration enums
VALID_LAYOUT_STYLES = {'list', 'grid', 'cards'}
VALID_CARD_STYLES = {'minimal', 'elevated', 'bordered'}
VALID_SPACINGS = {'compact', 'comfortable', 'spacious'}

# Maximum field lengths
MAX_LENGTHS = {
    'name': 200,
    'category': 100,
    'description': 2000,
    'instructions': 50000,
    'unit': 20,
    'prompt': 1000,
}

# Upper bounds for numeric form input
MAX_PRICE = 999999
MAX_QUANTITY = 99999

# Allowed image extensions
ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
