"""Tests for stock adjustments and the inventory overview."""

from decimal import Decimal

import pytest

from services import InvalidAdjustmentError, adjusted_quantity, inventory_levels


def test_adjustments_add_and_remove_stock():
    assert adjusted_quantity(0, '2.5') == Decimal('2.5')
    assert adjusted_quantity('2.5', -1) == Decimal('1.5')
    assert adjusted_quantity(0.3, -0.1) == Decimal('0.2')


def test_stock_cannot_go_negative():
    with pytest.raises(InvalidAdjustmentError):
        adjusted_quantity(1, -2)


def test_zero_adjustment_rejected():
    with pytest.raises(InvalidAdjustmentError):
        adjusted_quantity(5, 0)


def ingredient(id, name, cost='0.15'):
    return {'id': id, 'name': name, 'category_name': None, 'storage_unit': 'G', 'cost_per_unit': cost}


def test_levels_cover_uncounted_ingredients():
    rows = inventory_levels([ingredient(1, 'salt'), ingredient(2, 'Beef')], {
        2: {'quantity': Decimal('1000'), 'low_stock_threshold': None, 'updated_at': None},
    })
    assert [r['ingredient_name'] for r in rows] == ['Beef', 'salt']
    assert rows[0]['stock_value'] == Decimal('150')
    assert rows[1]['quantity'] == 0
    assert rows[1]['is_low'] is False


def test_low_stock_flag_includes_threshold():
    rows = inventory_levels([ingredient(1, 'Beef'), ingredient(2, 'Rice')], {
        1: {'quantity': Decimal('500'), 'low_stock_threshold': Decimal('500')},
        2: {'quantity': Decimal('501'), 'low_stock_threshold': Decimal('500')},
    })
    assert [r['is_low'] for r in rows] == [True, False]
