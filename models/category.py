"""
Category Model

Restaurant-wide categories shared by recipes, ingredients, expenses,
and menu items.
"""

from .base import db


class Category(db.Model):
    """Global category; bound to digital menus through DigitalMenuCategory."""
    __table_args__ = (
        db.UniqueConstraint('restaurant_id', 'type', 'name', name='uq_category_restaurant_type_name'),
    )

    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)

    # recipe | ingredient | expense | menu_item
    type = db.Column(db.String(20), nullable=False, default='menu_item', index=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'order_index': self.order_index,
        }
