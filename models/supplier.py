"""
Supplier Models

Contains Supplier and the products bought from it.
"""

from services.cost import to_decimal
from .base import db


class Supplier(db.Model):
    """A vendor the restaurant buys ingredients from."""
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    category = db.Column(db.String(100), nullable=True)
    email = db.Column(db.String(200), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    address = db.Column(db.Text, default='')
    tax_id = db.Column(db.String(50), nullable=True)

    # active | inactive
    status = db.Column(db.String(20), nullable=False, default='active')
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    products = db.relationship(
        'SupplierProduct', backref='supplier', lazy=True,
        cascade='all, delete-orphan', order_by='SupplierProduct.name',
    )

    def to_dict(self, with_products=False):
        data = {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'email': self.email,
            'phone': self.phone,
            'address': self.address or '',
            'tax_id': self.tax_id,
            'status': self.status,
            'products_count': len(self.products),
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
        if with_products:
            data['products'] = [p.to_dict() for p in self.products]
        return data


class SupplierProduct(db.Model):
    """A product a supplier sells, optionally linked to one of our ingredients."""
    id = db.Column(db.Integer, primary_key=True)
    supplier_id = db.Column(db.Integer, db.ForeignKey('supplier.id'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='SET NULL'), nullable=True)
    sku = db.Column(db.String(50), nullable=True)
    name = db.Column(db.String(200), nullable=False)
    quantity = db.Column(db.Numeric(12, 4), nullable=False, default=1)
    unit = db.Column(db.String(20), nullable=False, default='KG')
    cost_per_unit = db.Column(db.Numeric(12, 4), nullable=False, default=0)

    ingredient = db.relationship('Ingredient', backref=db.backref('supplier_products', lazy=True))

    @property
    def total_cost(self):
        return to_decimal(self.quantity) * to_decimal(self.cost_per_unit)

    def to_dict(self):
        return {
            'id': self.id,
            'sku': self.sku,
            'name': self.name,
            'quantity': self.quantity,
            'unit': self.unit,
            'cost_per_unit': self.cost_per_unit,
            'total_cost': self.total_cost,
            'ingredient_id': self.ingredient_id,
            'ingredient_name': self.ingredient.name if self.ingredient else None,
        }
