"""
Cost Calculation Service

Functions for ingredient unit costs, recipe costs, margins, and the
cost analysis shown in the accounting views.
"""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from constants import UNIT_MAPPINGS, WEIGHT_TO_G, VOLUME_TO_ML

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
HUNDRED = Decimal('100')
CENTS = Decimal('0.01')


class InvalidIngredientError(ValueError):
    """Raised when ingredient cost data cannot produce a unit cost."""
    pass


def to_decimal(value):
    """Coerce a number, numeric string, or None to Decimal."""
    if value is None or value == '':
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() first so 0.15 stays 0.15 instead of its binary expansion
        return Decimal(str(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f'Not a number: {value!r}')


def round_display(value):
    """Round to 2 decimal places for display. Never store the result."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _field(obj, *names):
    """Read the first available field from a mapping or an object."""
    for name in names:
        if isinstance(obj, dict):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


# =========== INGREDIENT UNIT COST ===========

def cost_per_storage_unit(purchase_cost, conversion_factor):
    """
    Normalize an ingredient's purchase cost to its storage unit.

    A 1 KG bag bought for 150 and stored in grams has a conversion factor of
    1000, so each gram costs 0.15.

    Args:
        purchase_cost: Cost of one purchase unit
        conversion_factor: How many storage units one purchase unit holds

    Returns:
        Decimal cost of one storage unit

    Raises:
        InvalidIngredientError: If conversion_factor <= 0 or purchase_cost < 0
    """
    cost = to_decimal(purchase_cost)
    factor = to_decimal(conversion_factor)
    if factor <= 0:
        raise InvalidIngredientError(f'Conversion factor must be greater than 0 (got {factor})')
    if cost < 0:
        raise InvalidIngredientError(f'Purchase cost cannot be negative (got {cost})')
    return cost / factor


def normalize_unit(unit):
    """Map a unit alias (kg, gramo, cups...) to its standard name."""
    if not unit:
        return 'EA'
    unit = str(unit).strip()
    return UNIT_MAPPINGS.get(unit.lower(), unit.upper())


def convert_quantity(quantity, from_unit, to_unit):
    """
    Convert a quantity between two units of the same dimension.

    Weight units convert through grams and volume units through milliliters.
    Equal units and count units need no conversion. When the units cannot be
    converted (weight to volume, count to weight) the quantity is returned
    unchanged.
    """
    qty = to_decimal(quantity)
    src = normalize_unit(from_unit)
    dst = normalize_unit(to_unit)

    if src == dst:
        return qty

    if src in WEIGHT_TO_G and dst in WEIGHT_TO_G:
        return qty * WEIGHT_TO_G[src] / WEIGHT_TO_G[dst]

    if src in VOLUME_TO_ML and dst in VOLUME_TO_ML:
        return qty * VOLUME_TO_ML[src] / VOLUME_TO_ML[dst]

    logger.warning('Cannot convert %s from %s to %s; using quantity as-is', qty, src, dst)
    return qty


# =========== RECIPE COST ===========

def line_cost(line):
    """Cost of one recipe line: quantity in storage units times unit cost."""
    quantity = to_decimal(_field(line, 'quantity'))
    unit_cost = to_decimal(_field(line, 'ingredient_cost_per_unit', 'cost_per_unit'))

    unit = _field(line, 'unit')
    storage_unit = _field(line, 'storage_unit')
    if unit and storage_unit:
        quantity = convert_quantity(quantity, unit, storage_unit)

    return quantity * unit_cost


def recipe_cost(lines):
    """Sum of line costs. A recipe with no lines costs 0."""
    total = ZERO
    for line in lines:
        total += line_cost(line)
    return total


# =========== MARGIN ===========

def profit(selling_price, cost):
    return to_decimal(selling_price) - to_decimal(cost)


def margin_percentage(selling_price, cost):
    """
    Profit as a percentage of selling price, unrounded.

    A selling price of 0 (or less) has no meaningful margin; 0 is returned
    instead of dividing by zero.
    """
    price = to_decimal(selling_price)
    if price <= 0:
        return ZERO
    return (price - to_decimal(cost)) / price * HUNDRED


def recipe_costing(selling_price, lines):
    """Cost, profit, and margin for a recipe being saved."""
    cost = recipe_cost(lines)
    return {
        'cost': cost,
        'profit': profit(selling_price, cost),
        'margin_percentage': margin_percentage(selling_price, cost),
    }


# =========== SUMMARY ===========

def cost_summary(recipes, total_ingredients=0):
    """
    Aggregate recipe costs for the accounting dashboard.

    avg_margin is the mean of each recipe's margin percentage (mean of
    ratios), not total profit over total revenue. Empty input yields zeros.

    Args:
        recipes: Iterable of mappings/objects with cost and selling_price
        total_ingredients: Number of ingredients on file

    Returns:
        dict with total_recipes, total_ingredients, avg_recipe_cost,
        avg_margin, total_recipe_costs
    """
    costs = []
    margins = []
    for recipe in recipes:
        cost = to_decimal(_field(recipe, 'cost'))
        costs.append(cost)
        margins.append(margin_percentage(_field(recipe, 'selling_price'), cost))

    count = len(costs)
    total = sum(costs, ZERO)
    return {
        'total_recipes': count,
        'total_ingredients': total_ingredients,
        'avg_recipe_cost': total / count if count else ZERO,
        'avg_margin': sum(margins, ZERO) / count if count else ZERO,
        'total_recipe_costs': total,
    }


def build_cost_analysis(recipes, ingredients):
    """
    Build the cost analysis view: recipe rows by margin, ingredient rows by
    unit cost, and the summary. Values are rounded for display here only.
    """
    recipes = list(recipes)
    recipe_rows = []
    for recipe in recipes:
        cost = to_decimal(_field(recipe, 'cost'))
        price = to_decimal(_field(recipe, 'selling_price'))
        margin = margin_percentage(price, cost)
        recipe_rows.append({
            'id': _field(recipe, 'id'),
            'name': _field(recipe, 'name'),
            'category': _field(recipe, 'category_name'),
            'cost': round_display(cost),
            'selling_price': round_display(price),
            'profit': round_display(profit(price, cost)),
            'margin_percentage': round_display(margin),
            'ingredients_count': _field(recipe, 'ingredients_count') or 0,
            '_margin': margin,
        })
    recipe_rows.sort(key=lambda row: row['_margin'], reverse=True)
    for row in recipe_rows:
        del row['_margin']

    ingredient_rows = [
        {
            'id': _field(ing, 'id'),
            'name': _field(ing, 'name'),
            'category': _field(ing, 'category_name'),
            'storage_unit': _field(ing, 'storage_unit'),
            'cost_per_unit': to_decimal(_field(ing, 'cost_per_unit')),
            'used_in_recipes': _field(ing, 'used_in_recipes') or 0,
        }
        for ing in ingredients
    ]
    ingredient_rows.sort(key=lambda row: row['cost_per_unit'], reverse=True)

    summary = cost_summary(recipes, total_ingredients=len(ingredient_rows))
    for key in ('avg_recipe_cost', 'avg_margin', 'total_recipe_costs'):
        summary[key] = round_display(summary[key])

    return {
        'recipes': recipe_rows,
        'ingredients': ingredient_rows,
        'summary': summary,
    }
