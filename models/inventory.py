"""
Inventory Models

Contains the per-ingredient stock level and the adjustment ledger that
moves it. Quantities are in the ingredient's storage unit.
"""

from .base import db


class StockLevel(db.Model):
    """Current stock of one ingredient."""
    id = db.Column(db.Integer, primary_key=True)
    ingredient_id = db.Column(
        db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, unique=True,
    )
    quantity = db.Column(db.Numeric(14, 4), nullable=False, default=0)
    low_stock_threshold = db.Column(db.Numeric(14, 4), nullable=True)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    ingredient = db.relationship(
        'Ingredient', backref=db.backref('stock_level', uselist=False, cascade='all, delete-orphan'),
    )

    def to_level(self):
        return {
            'quantity': self.quantity,
            'low_stock_threshold': self.low_stock_threshold,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


class InventoryAdjustment(db.Model):
    """A signed stock movement with the reason it happened."""
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)
    ingredient_id = db.Column(
        db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True,
    )
    quantity_adjusted = db.Column(db.Numeric(14, 4), nullable=False)

    # purchase | waste | count | transfer | sale | other
    reason_code = db.Column(db.String(20), nullable=False)
    notes = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime, server_default=db.func.now(), index=True)

    ingredient = db.relationship(
        'Ingredient', backref=db.backref('adjustments', lazy=True, cascade='all, delete-orphan'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'ingredient_id': self.ingredient_id,
            'ingredient_name': self.ingredient.name if self.ingredient else None,
            'quantity_adjusted': self.quantity_adjusted,
            'reason_code': self.reason_code,
            'notes': self.notes or '',
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
