"""
Brand Kit Model

A restaurant's logo, colors, and fonts, used as input to template generation.
"""

from .base import db


class BrandKit(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, unique=True)
    logo_url = db.Column(db.String(500), default='')
    primary_color = db.Column(db.String(7), default='#F59E0B')
    secondary_colors = db.Column(db.JSON, nullable=False, default=list)
    font_family_main = db.Column(db.String(100), default='Inter')
    font_family_secondary = db.Column(db.String(100), default='Lora')

    def to_dict(self):
        return {
            'id': self.id,
            'logo_url': self.logo_url or '',
            'primary_color': self.primary_color,
            'secondary_colors': self.secondary_colors or [],
            'font_family_main': self.font_family_main,
            'font_family_secondary': self.font_family_secondary,
        }
