"""
Recipe Models

Contains the Recipe and RecipeIngredient models for costing dishes
from their ingredient lines.
"""

from decimal import Decimal

from services.cost import line_cost, recipe_costing
from .base import db

MARGIN_FLOOR = Decimal('-99999999.9999')


class Recipe(db.Model):
    """Recipe with selling price and cost/margin derived from its lines."""
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)
    category_id = db.Column(db.Integer, db.ForeignKey('category.id'), nullable=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default='active')
    image_url = db.Column(db.String(500), nullable=True)
    selling_price = db.Column(db.Numeric(10, 2), nullable=False, default=0)

    # Stored unrounded; rounding happens only for display
    cost = db.Column(db.Numeric(14, 4), nullable=False, default=0)
    margin_percentage = db.Column(db.Numeric(12, 4), nullable=False, default=0)

    yield_amount = db.Column(db.Numeric(10, 2), nullable=False, default=1)
    yield_unit = db.Column(db.String(20), nullable=False, default='portion')
    preparation_instructions = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    category = db.relationship('Category')
    ingredients = db.relationship('RecipeIngredient', backref='recipe', lazy=True, cascade='all, delete-orphan')

    def recalculate(self):
        """Recompute cost and margin from the current ingredient lines."""
        lines = [ri.to_cost_line() for ri in self.ingredients if ri.ingredient]
        costing = recipe_costing(self.selling_price, lines)
        self.cost = costing['cost']
        # Numeric(12, 4) floor; a near-zero price against a large cost can go past it
        self.margin_percentage = max(costing['margin_percentage'], MARGIN_FLOOR)
        return costing

    def to_dict(self, with_lines=False):
        data = {
            'id': self.id,
            'name': self.name,
            'category': self.category.name if self.category else None,
            'status': self.status,
            'image_url': self.image_url,
            'selling_price': self.selling_price,
            'cost': self.cost,
            'margin_percentage': self.margin_percentage,
            'profit': (self.selling_price or 0) - (self.cost or 0),
            'yield_amount': self.yield_amount,
            'yield_unit': self.yield_unit,
            'ingredients_count': len(self.ingredients),
        }
        if with_lines:
            data['preparation_instructions'] = self.preparation_instructions or ''
            data['ingredients'] = [ri.to_dict() for ri in self.ingredients if ri.ingredient]
        return data


class RecipeIngredient(db.Model):
    """Join table linking recipes to ingredients with quantity and unit."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    quantity = db.Column(db.Numeric(12, 4), nullable=False)
    unit = db.Column(db.String(20), nullable=False)
    ingredient = db.relationship('Ingredient')

    def to_cost_line(self):
        return {
            'quantity': self.quantity,
            'unit': self.unit,
            'storage_unit': self.ingredient.storage_unit,
            'cost_per_unit': self.ingredient.cost_per_unit,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'ingredient_id': self.ingredient_id,
            'name': self.ingredient.name,
            'quantity': self.quantity,
            'unit': self.unit,
            'cost_per_unit': self.ingredient.cost_per_unit,
            'cost': line_cost(self.to_cost_line()),
        }
