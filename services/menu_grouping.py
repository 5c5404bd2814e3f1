"""
Menu Grouping Service

Groups a digital menu's items by category for rendering.
"""

from constants import UNCATEGORIZED


def _get(item, name):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _group_sort_key(order_index):
    # Groups without an order index go after every numbered group
    if order_index is None:
        return (1, 0)
    return (0, order_index)


def group_and_order_menu_items(items):
    """
    Group menu items by category name and order the groups.

    Items keep their input order inside a group. Groups are sorted by the
    order_index of the first item seen in each category; the sort is stable,
    so categories with equal order_index keep the order they were first
    encountered in.

    Args:
        items: Iterable of dicts or objects with category_name and order_index

    Returns:
        List of (category_name, [items]) tuples
    """
    groups = {}
    group_order = {}

    for item in items:
        category = _get(item, 'category_name') or UNCATEGORIZED
        if category not in groups:
            groups[category] = []
            group_order[category] = _get(item, 'order_index')
        groups[category].append(item)

    names = sorted(groups, key=lambda name: _group_sort_key(group_order[name]))
    return [(name, groups[name]) for name in names]
