"""
Template Configuration Defaults

Every style key a digital menu template can carry, with the values used when
a template leaves a key unset.
"""

# Canonical defaults, used when rendering a live menu
LIVE_MENU_DEFAULTS = {
    'primary_color': '#1F2937',
    'secondary_color': '#F9FAFB',
    'accent_color': '#D97706',
    'background_color': '#FFFFFF',
    'border_radius': '8px',
    'font_family_primary': 'Inter',
    'font_family_secondary': 'Lora',
    'layout_style': 'list',
    'card_style': 'elevated',
    'spacing': 'comfortable',
    'show_images': True,
    'show_descriptions': True,
    'show_prices': True,
    'header_style': 'centered',
    'footer_style': 'simple',
}

# Starting palette for templates created in the editor or by AI generation
EDITOR_DEFAULTS = dict(
    LIVE_MENU_DEFAULTS,
    primary_color='#F59E0B',
    secondary_color='#FEF3C7',
    background_color='#FFFBEB',
)

# Templates seeded for every restaurant; both are protected from deletion
DEFAULT_TEMPLATES = [
    {
        'name': 'Classic Elegant',
        'description': 'A timeless and sophisticated design perfect for fine dining establishments.',
        'config': dict(LIVE_MENU_DEFAULTS),
    },
    {
        'name': 'Modern Vibrant',
        'description': 'A contemporary and colorful design ideal for casual dining and trendy cafes.',
        'config': {
            'primary_color': '#7C3AED',
            'secondary_color': '#F3E8FF',
            'accent_color': '#F59E0B',
            'background_color': '#FEFEFE',
            'background_image_url': '/placeholder.svg?height=800&width=1200',
            'border_radius': '16px',
            'font_family_primary': 'Inter',
            'font_family_secondary': 'Poppins',
        },
    },
]

# Brand kit values used when a restaurant has none yet
BRAND_KIT_DEFAULTS = {
    'logo_url': '',
    'primary_color': '#F59E0B',
    'font_family_main': 'Inter',
    'font_family_secondary': 'Lora',
}

UNCATEGORIZED = 'Uncategorized'
