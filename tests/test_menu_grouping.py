"""Tests for grouping and ordering digital menu items."""

from services import group_and_order_menu_items


def item(name, category, order_index):
    return {'name': name, 'category_name': category, 'order_index': order_index}


def names(groups):
    return [(category, [i['name'] for i in items]) for category, items in groups]


def test_every_item_lands_in_exactly_one_group():
    items = [
        item('Tacos', 'Mains', 1),
        item('Soda', 'Drinks', 0),
        item('Flan', 'Desserts', 2),
        item('Salad', 'Mains', 1),
        item('Water', 'Drinks', 0),
    ]
    groups = group_and_order_menu_items(items)

    grouped = [i for _, group in groups for i in group]
    assert len(grouped) == len(items)
    assert sorted(id(i) for i in grouped) == sorted(id(i) for i in items)


def test_groups_sorted_by_order_index_regardless_of_input_order():
    items = [
        item('C1', 'Third', 3),
        item('A1', 'First', 1),
        item('C2', 'Third', 3),
        item('B1', 'Second', 2),
        item('A2', 'First', 1),
    ]
    assert names(group_and_order_menu_items(items)) == [
        ('First', ['A1', 'A2']),
        ('Second', ['B1']),
        ('Third', ['C1', 'C2']),
    ]

    reversed_groups = group_and_order_menu_items(list(reversed(items)))
    assert [category for category, _ in reversed_groups] == ['First', 'Second', 'Third']


def test_empty_input_yields_no_groups():
    assert group_and_order_menu_items([]) == []


def test_mains_keep_input_order_after_drinks():
    items = [
        item('Tacos', 'Mains', 1),
        item('Soda', 'Drinks', 0),
        item('Salad', 'Mains', 1),
    ]
    assert names(group_and_order_menu_items(items)) == [
        ('Drinks', ['Soda']),
        ('Mains', ['Tacos', 'Salad']),
    ]


def test_missing_category_name_goes_to_uncategorized():
    items = [
        item('Mystery', None, 0),
        item('Blank', '', 0),
        item('Soup', 'Starters', 1),
    ]
    assert names(group_and_order_menu_items(items)) == [
        ('Uncategorized', ['Mystery', 'Blank']),
        ('Starters', ['Soup']),
    ]


def test_equal_order_index_keeps_first_seen_order():
    items = [
        item('Beer', 'Drinks', 1),
        item('Taco', 'Mains', 1),
        item('Wine', 'Drinks', 1),
    ]
    assert names(group_and_order_menu_items(items)) == [
        ('Drinks', ['Beer', 'Wine']),
        ('Mains', ['Taco']),
    ]


def test_group_without_order_index_sorts_last():
    items = [
        item('Special', 'Specials', None),
        item('Soup', 'Starters', 5),
    ]
    assert [c for c, _ in group_and_order_menu_items(items)] == ['Starters', 'Specials']


def test_group_position_comes_from_first_item_seen():
    items = [
        item('Late', 'Mains', 9),
        item('Soda', 'Drinks', 2),
        item('Early', 'Mains', 0),
    ]
    assert [c for c, _ in group_and_order_menu_items(items)] == ['Drinks', 'Mains']


def test_accepts_objects():
    class Row:
        def __init__(self, name, category_name, order_index):
            self.name = name
            self.category_name = category_name
            self.order_index = order_index

    rows = [Row('Tea', 'Drinks', 2), Row('Eggs', 'Breakfast', 1)]
    groups = group_and_order_menu_items(rows)
    assert [c for c, _ in groups] == ['Breakfast', 'Drinks']
    assert groups[0][1][0] is rows[1]
