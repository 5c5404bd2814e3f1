"""
Inventory Service

Stock level arithmetic and the inventory overview.
"""

from .cost import to_decimal, ZERO


class InvalidAdjustmentError(Exception):
    """Raised when a stock adjustment is not a usable quantity."""
    pass


def adjusted_quantity(current, delta):
    """
    Stock after applying a signed adjustment.

    Raises:
        InvalidAdjustmentError: If the delta is zero or stock would go negative
    """
    current = to_decimal(current)
    delta = to_decimal(delta)
    if delta == 0:
        raise InvalidAdjustmentError('Adjustment quantity cannot be zero')
    result = current + delta
    if result < 0:
        raise InvalidAdjustmentError(f'Adjustment would leave {result} in stock')
    return result


def inventory_levels(ingredients, levels):
    """
    One row per ingredient with its stock, value, and low-stock flag.

    Args:
        ingredients: Ingredient rows (id, name, category_name, storage_unit, cost_per_unit)
        levels: Mapping of ingredient_id to {quantity, low_stock_threshold, updated_at};
            an ingredient with no entry has never been counted

    Returns:
        Rows sorted by ingredient name
    """
    rows = []
    for ingredient in ingredients:
        level = levels.get(ingredient['id'])
        quantity = to_decimal(level['quantity']) if level else ZERO
        threshold = level.get('low_stock_threshold') if level else None
        rows.append({
            'ingredient_id': ingredient['id'],
            'ingredient_name': ingredient['name'],
            'category_name': ingredient.get('category_name'),
            'quantity': quantity,
            'storage_unit': ingredient['storage_unit'],
            'cost_per_unit': to_decimal(ingredient['cost_per_unit']),
            'stock_value': quantity * to_decimal(ingredient['cost_per_unit']),
            'low_stock_threshold': threshold,
            'is_low': threshold is not None and quantity <= to_decimal(threshold),
            'last_updated_at': level.get('updated_at') if level else None,
        })
    rows.sort(key=lambda row: (row['ingredient_name'].lower(), row['ingredient_id']))
    return rows
