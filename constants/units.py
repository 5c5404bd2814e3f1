"""
Unit Constants and Conversion Tables

Contains unit aliases and conversion factors used when a recipe line is
measured in a different unit than the ingredient's storage unit.
"""

from decimal import Decimal

# Unit aliases (lowercase input -> standard unit)
UNIT_MAPPINGS = {
    'g': 'G', 'gr': 'G', 'gram': 'G', 'grams': 'G', 'gramo': 'G', 'gramos': 'G',
    'kg': 'KG', 'kilo': 'KG', 'kilos': 'KG', 'kilogram': 'KG', 'kilograms': 'KG', 'kilogramo': 'KG',
    'oz': 'OZ', 'ounce': 'OZ', 'ounces': 'OZ', 'onza': 'OZ', 'onzas': 'OZ',
    'lb': 'LB', 'lbs': 'LB', 'pound': 'LB', 'pounds': 'LB', 'libra': 'LB', 'libras': 'LB',
    'ml': 'ML', 'milliliter': 'ML', 'milliliters': 'ML', 'mililitro': 'ML', 'mililitros': 'ML',
    'l': 'L', 'lt': 'L', 'liter': 'L', 'liters': 'L', 'litro': 'L', 'litros': 'L',
    'cup': 'CUP', 'cups': 'CUP', 'taza': 'CUP', 'tazas': 'CUP',
    'tbsp': 'TBSP', 'tablespoon': 'TBSP', 'tablespoons': 'TBSP', 'cucharada': 'TBSP',
    'tsp': 'TSP', 'teaspoon': 'TSP', 'teaspoons': 'TSP', 'cucharadita': 'TSP',
    'ea': 'EA', 'each': 'EA', 'unit': 'EA', 'units': 'EA', 'unidad': 'EA', 'unidades': 'EA',
    'piece': 'EA', 'pieces': 'EA', 'pieza': 'EA', 'piezas': 'EA',
    'portion': 'PORTION', 'portions': 'PORTION', 'porcion': 'PORTION', 'porción': 'PORTION',
}

# Weight conversions to G
WEIGHT_TO_G = {
    'G': Decimal('1'),
    'KG': Decimal('1000'),
    'OZ': Decimal('28.3495'),
    'LB': Decimal('453.592'),
}

# Volume conversions to ML
VOLUME_TO_ML = {
    'ML': Decimal('1'),
    'L': Decimal('1000'),
    'CUP': Decimal('236.588'),
    'TBSP': Decimal('14.787'),
    'TSP': Decimal('4.929'),
}
