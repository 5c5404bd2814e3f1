"""
Menu Template Model

Stores a template's style configuration and its category/item snapshot.
"""

from .base import db


class DefaultTemplateError(Exception):
    """Raised when deleting a built-in template."""
    pass


class MenuTemplate(db.Model):
    """
    Visual template for digital menus.

    config holds style keys (possibly partial; defaults are applied at render
    time). snapshot holds [{name, order_index, items: [...]}] copied into a
    menu when the template is applied.
    """
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, default='')
    preview_image_url = db.Column(db.String(500), nullable=True)
    config = db.Column(db.JSON, nullable=False, default=dict)
    snapshot = db.Column(db.JSON, nullable=False, default=list)
    is_default = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    def ensure_deletable(self):
        if self.is_default:
            raise DefaultTemplateError(f'Template "{self.name}" is a default template and cannot be deleted')

    def to_dict(self, full=False):
        data = {
            'id': self.id,
            'name': self.name,
            'description': self.description or '',
            'preview_image_url': self.preview_image_url,
            'is_default': self.is_default,
        }
        if full:
            data['config'] = self.config or {}
            data['snapshot'] = self.snapshot or []
        return data
