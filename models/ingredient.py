"""
Ingredient Model

Contains the Ingredient model with purchase and storage units. Recipes
consume ingredients in storage units, so every ingredient keeps its cost
per storage unit derived from what it costs to buy.
"""

from sqlalchemy import event
from sqlalchemy.orm import validates

from services.cost import InvalidIngredientError, cost_per_storage_unit, to_decimal
from .base import db


class Ingredient(db.Model):
    """
    Ingredient bought in one unit and stored/consumed in another.

    Example: ground beef bought by the KG at 150 and stored in G with a
    conversion factor of 1000 costs 0.15 per G. cost_per_unit is never set
    directly; it is recomputed from purchase_unit_cost and conversion_factor
    before every insert and update.
    """
    __table_args__ = (
        db.UniqueConstraint('restaurant_id', 'name', name='uq_ingredient_restaurant_name'),
    )

    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)
    category_id = db.Column(db.Integer, db.ForeignKey('category.id'), nullable=True)
    name = db.Column(db.String(200), nullable=False, index=True)

    purchase_unit = db.Column(db.String(20), nullable=False, default='KG')
    purchase_unit_cost = db.Column(db.Numeric(12, 4), nullable=False, default=0)
    storage_unit = db.Column(db.String(20), nullable=False, default='G')

    # Storage units per purchase unit (1 KG -> 1000 G)
    conversion_factor = db.Column(db.Numeric(14, 4), nullable=False, default=1)

    # Derived: purchase_unit_cost / conversion_factor
    cost_per_unit = db.Column(db.Numeric(16, 6), nullable=False, default=0)

    category = db.relationship('Category')

    @validates('conversion_factor')
    def _validate_conversion_factor(self, key, value):
        factor = to_decimal(value)
        if factor <= 0:
            raise InvalidIngredientError(f'Conversion factor must be greater than 0 (got {factor})')
        return factor

    @validates('purchase_unit_cost')
    def _validate_purchase_unit_cost(self, key, value):
        cost = to_decimal(value)
        if cost < 0:
            raise InvalidIngredientError(f'Purchase cost cannot be negative (got {cost})')
        return cost

    def refresh_cost_per_unit(self):
        factor = self.conversion_factor if self.conversion_factor is not None else 1
        self.cost_per_unit = cost_per_storage_unit(self.purchase_unit_cost, factor)
        return self.cost_per_unit

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category_id': self.category_id,
            'category_name': self.category.name if self.category else None,
            'purchase_unit': self.purchase_unit,
            'purchase_unit_cost': self.purchase_unit_cost,
            'storage_unit': self.storage_unit,
            'conversion_factor': self.conversion_factor,
            'cost_per_unit': self.cost_per_unit,
        }


@event.listens_for(Ingredient, 'before_insert')
@event.listens_for(Ingredient, 'before_update')
def _recompute_cost_per_unit(mapper, connection, target):
    target.refresh_cost_per_unit()
