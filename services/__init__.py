"""
Services Package

Business logic modules for the menu studio.
"""

from .cost import (
    InvalidIngredientError,
    to_decimal,
    round_display,
    cost_per_storage_unit,
    normalize_unit,
    convert_quantity,
    line_cost,
    recipe_cost,
    profit,
    margin_percentage,
    recipe_costing,
    cost_summary,
    build_cost_analysis,
)

from .menu_grouping import group_and_order_menu_items

from .template_config import resolve_template_config

from .formatting import (
    format_currency,
    format_percentage,
    slugify,
)

from .menus import (
    snapshot_menu,
    apply_template_to_menu,
    seed_default_templates,
)

from .orders import (
    OrderStateError,
    TAX_RATE,
    ORDER_STATUSES,
    PAYMENT_METHODS,
    order_line_total,
    order_totals,
    check_status_change,
    paginate,
)

from .inventory import (
    InvalidAdjustmentError,
    adjusted_quantity,
    inventory_levels,
)

from .ai import (
    MenuExtractionError,
    parse_extraction_response,
    extract_menu_items,
    generate_template_style,
)

__all__ = [
    # Cost
    'InvalidIngredientError',
    'to_decimal',
    'round_display',
    'cost_per_storage_unit',
    'normalize_unit',
    'convert_quantity',
    'line_cost',
    'recipe_cost',
    'profit',
    'margin_percentage',
    'recipe_costing',
    'cost_summary',
    'build_cost_analysis',
    # Menu rendering
    'group_and_order_menu_items',
    'resolve_template_config',
    # Formatting
    'format_currency',
    'format_percentage',
    'slugify',
    # Menus
    'snapshot_menu',
    'apply_template_to_menu',
    'seed_default_templates',
    # POS orders
    'OrderStateError',
    'TAX_RATE',
    'ORDER_STATUSES',
    'PAYMENT_METHODS',
    'order_line_total',
    'order_totals',
    'check_status_change',
    'paginate',
    # Inventory
    'InvalidAdjustmentError',
    'adjusted_quantity',
    'inventory_levels',
    # AI
    'MenuExtractionError',
    'parse_extraction_response',
    'extract_menu_items',
    'generate_template_style',
]
