"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .category import Category
from .menu import DigitalMenu, DigitalMenuCategory, MenuItem, CategoryInUseError
from .template import MenuTemplate, DefaultTemplateError
from .brand_kit import BrandKit
from .ingredient import Ingredient
from .recipe import Recipe, RecipeIngredient
from .order import Order, OrderItem, Payment
from .inventory import StockLevel, InventoryAdjustment
from .supplier import Supplier, SupplierProduct

__all__ = [
    'db',
    'Category',
    'DigitalMenu',
    'DigitalMenuCategory',
    'MenuItem',
    'CategoryInUseError',
    'MenuTemplate',
    'DefaultTemplateError',
    'BrandKit',
    'Ingredient',
    'Recipe',
    'RecipeIngredient',
    'Order',
    'OrderItem',
    'Payment',
    'StockLevel',
    'InventoryAdjustment',
    'Supplier',
    'SupplierProduct',
]
