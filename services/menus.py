"""
Digital Menu Service

Template application, menu snapshots, and default template seeding.
"""

import logging

from constants import DEFAULT_TEMPLATES
from .cost import to_decimal
from .menu_grouping import group_and_order_menu_items

logger = logging.getLogger(__name__)


def snapshot_menu(menu_rows):
    """
    Build a template snapshot from a menu's item rows.

    Args:
        menu_rows: Item dicts as produced by MenuItem.to_row()

    Returns:
        List of {name, order_index, items: [...]} in display order
    """
    snapshot = []
    for position, (category_name, items) in enumerate(group_and_order_menu_items(menu_rows)):
        order_index = items[0].get('order_index')
        snapshot.append({
            'name': category_name,
            'order_index': order_index if order_index is not None else position,
            'items': [
                {
                    'name': item['name'],
                    'description': item.get('description') or '',
                    'price': str(item.get('price') or 0),
                    'image_url': item.get('image_url'),
                    'order_index': index,
                }
                for index, item in enumerate(items)
            ],
        })
    return snapshot


def _bind_category(menu, name, order_index, db, Category, DigitalMenuCategory):
    """Find or create the restaurant's global category and bind it to the menu."""
    category = Category.query.filter_by(
        restaurant_id=menu.restaurant_id, type='menu_item', name=name
    ).first()
    if category is None:
        category = Category(
            restaurant_id=menu.restaurant_id, type='menu_item', name=name, order_index=order_index
        )
        db.session.add(category)
        db.session.flush()

    binding = DigitalMenuCategory(
        digital_menu_id=menu.id, category_id=category.id, order_index=order_index
    )
    db.session.add(binding)
    db.session.flush()
    return binding


def _snapshot_price(item):
    """Price of a stored snapshot item, or None if the item cannot be recreated."""
    if not isinstance(item, dict):
        return None
    try:
        price = to_decimal(item.get('price'))
    except ValueError:
        return None
    if not price.is_finite() or price < 0:
        return None
    return price


def apply_template_to_menu(menu, template, db, Category, DigitalMenuCategory, MenuItem):
    """
    Replace a menu's categories and items with a template's snapshot.

    This is a destructive resync: every existing item and category binding of
    the menu is deleted, then the snapshot is recreated with its own
    order_index values. The caller commits.

    Returns:
        dict with the number of categories and items created
    """
    menu.template_id = template.id

    binding_ids = [b.id for b in DigitalMenuCategory.query.filter_by(digital_menu_id=menu.id).all()]
    removed_items = MenuItem.query.filter_by(digital_menu_id=menu.id).delete()
    if binding_ids:
        DigitalMenuCategory.query.filter(DigitalMenuCategory.id.in_(binding_ids)).delete()
    db.session.flush()
    db.session.expire(menu)

    bindings = {}
    created_items = 0
    for entry in template.snapshot or []:
        if not isinstance(entry, dict):
            continue
        name = str(entry.get('name') or '').strip()
        if not name:
            continue
        order_index = entry.get('order_index') or 0

        binding = bindings.get(name)
        if binding is None:
            binding = _bind_category(menu, name, order_index, db, Category, DigitalMenuCategory)
            bindings[name] = binding

        items = entry.get('items') or []
        for item in items if isinstance(items, list) else []:
            price = _snapshot_price(item)
            if price is None:
                logger.warning('Skipping invalid snapshot item in template %s: %r', template.id, item)
                continue
            db.session.add(MenuItem(
                digital_menu_id=menu.id,
                menu_category_id=binding.id,
                name=str(item.get('name') or 'Unnamed Item'),
                description=str(item.get('description') or ''),
                price=price,
                image_url=item.get('image_url'),
                position=item.get('order_index') or 0,
            ))
            created_items += 1

    logger.info(
        'Applied template %s to menu %s: removed %d items, created %d categories and %d items',
        template.id, menu.id, removed_items, len(bindings), created_items,
    )
    return {'categories': len(bindings), 'items': created_items}


def seed_default_templates(restaurant_id, db, MenuTemplate):
    """
    Create the built-in templates for a restaurant unless it already has them.

    Returns:
        Number of templates created
    """
    existing = MenuTemplate.query.filter_by(restaurant_id=restaurant_id, is_default=True).count()
    if existing:
        return 0

    for preset in DEFAULT_TEMPLATES:
        db.session.add(MenuTemplate(
            restaurant_id=restaurant_id,
            name=preset['name'],
            description=preset['description'],
            config=dict(preset['config']),
            snapshot=[],
            is_default=True,
        ))
    logger.info('Seeded %d default templates for restaurant %s', len(DEFAULT_TEMPLATES), restaurant_id)
    return len(DEFAULT_TEMPLATES)
