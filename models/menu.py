"""
Digital Menu Models

Contains DigitalMenu, the per-menu category binding, and MenuItem.
"""

from services.formatting import slugify
from .base import db


class CategoryInUseError(Exception):
    """Raised when removing a menu category that still holds items."""
    pass


class DigitalMenu(db.Model):
    """A published, customer-facing menu bound to one template."""
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)

    # draft | active | inactive
    status = db.Column(db.String(20), nullable=False, default='draft')

    template_id = db.Column(db.Integer, db.ForeignKey('menu_template.id', ondelete='SET NULL'), nullable=True)
    qr_code_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    template = db.relationship('MenuTemplate')
    categories = db.relationship(
        'DigitalMenuCategory', backref='digital_menu', lazy=True,
        cascade='all, delete-orphan', order_by='DigitalMenuCategory.order_index',
    )
    items = db.relationship('MenuItem', backref='digital_menu', lazy=True, cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': slugify(self.name),
            'status': self.status,
            'template_id': self.template_id,
            'template_name': self.template.name if self.template else None,
            'qr_code_url': self.qr_code_url,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


class DigitalMenuCategory(db.Model):
    """Binds a global category to one digital menu with a menu-specific order."""
    __table_args__ = (
        db.UniqueConstraint('digital_menu_id', 'category_id', name='uq_menu_category'),
    )

    id = db.Column(db.Integer, primary_key=True)
    digital_menu_id = db.Column(db.Integer, db.ForeignKey('digital_menu.id'), nullable=False, index=True)
    category_id = db.Column(db.Integer, db.ForeignKey('category.id'), nullable=False, index=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)

    category = db.relationship('Category')
    items = db.relationship('MenuItem', backref='menu_category', lazy=True)

    @property
    def name(self):
        return self.category.name if self.category else None

    def ensure_deletable(self):
        if self.items:
            raise CategoryInUseError(
                f'Category "{self.name}" still has {len(self.items)} items; move or delete them first'
            )

    def to_dict(self):
        return {
            'id': self.id,
            'digital_menu_id': self.digital_menu_id,
            'category_id': self.category_id,
            'name': self.name,
            'order_index': self.order_index,
            'items_count': len(self.items),
        }


class MenuItem(db.Model):
    """A dish listed on a digital menu under one of its categories."""
    id = db.Column(db.Integer, primary_key=True)
    digital_menu_id = db.Column(db.Integer, db.ForeignKey('digital_menu.id'), nullable=False, index=True)
    menu_category_id = db.Column(
        db.Integer, db.ForeignKey('digital_menu_category.id'), nullable=False, index=True
    )
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, default='')
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    image_url = db.Column(db.String(500), nullable=True)

    # Order inside the category; category order lives on the binding
    position = db.Column(db.Integer, nullable=False, default=0)
    is_available = db.Column(db.Boolean, nullable=False, default=True)

    @property
    def category_name(self):
        return self.menu_category.name if self.menu_category else None

    @property
    def order_index(self):
        return self.menu_category.order_index if self.menu_category else None

    def to_row(self):
        """Flat record with the category name and order joined in."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description or '',
            'price': self.price,
            'image_url': self.image_url,
            'menu_category_id': self.menu_category_id,
            'category_name': self.category_name,
            'order_index': self.order_index,
            'position': self.position,
            'is_available': self.is_available,
        }
