"""Tests for POS order totals and status rules."""

from decimal import Decimal

import pytest

from services import (
    OrderStateError, TAX_RATE, order_line_total, order_totals, check_status_change, paginate,
)


# =========== TOTALS ===========

def test_totals_charge_sixteen_percent_tax():
    totals = order_totals([{'price': '12.99', 'quantity': 2}, {'price': '3.99', 'quantity': 1}])
    assert totals['subtotal'] == Decimal('29.97')
    assert totals['tax'] == Decimal('4.80')
    assert totals['total'] == Decimal('34.77')
    assert TAX_RATE == Decimal('0.16')


def test_tax_rounds_half_up_to_cents():
    # 0.16 * 10.03 = 1.6048; 0.16 * 0.03125 rounds from exactly half a cent
    assert order_totals([{'price': '10.03', 'quantity': 1}])['tax'] == Decimal('1.60')
    assert order_totals([{'price': '0.03125', 'quantity': 1}])['tax'] == Decimal('0.01')


def test_float_prices_do_not_drift():
    assert order_line_total(0.1, 3) == Decimal('0.3')


def test_empty_order_is_zero():
    totals = order_totals([])
    assert totals == {'subtotal': 0, 'tax': 0, 'discount': 0, 'total': 0}


def test_discount_comes_off_the_taxed_total():
    totals = order_totals([{'price': '100', 'quantity': 1}], discount='20')
    assert totals['tax'] == Decimal('16.00')
    assert totals['total'] == Decimal('96.00')


def test_discount_cannot_make_total_negative():
    totals = order_totals([{'price': '10', 'quantity': 1}], discount='500')
    assert totals['discount'] == Decimal('11.60')
    assert totals['total'] == 0


def test_custom_tax_rate():
    assert order_totals([{'price': '50', 'quantity': 2}], tax_rate='0')['total'] == Decimal('100')


# =========== STATUS ===========

def test_kitchen_status_changes_are_allowed():
    check_status_change('pending', 'preparing')
    check_status_change('ready', 'served')
    check_status_change('served', 'cancelled')


def test_unknown_status_rejected():
    with pytest.raises(ValueError):
        check_status_change('pending', 'lost')


@pytest.mark.parametrize('current', ['completed', 'cancelled'])
def test_closed_orders_stay_closed(current):
    with pytest.raises(OrderStateError):
        check_status_change(current, 'pending')


def test_completion_only_through_payment():
    with pytest.raises(OrderStateError):
        check_status_change('served', 'completed')


def test_paginate():
    assert paginate(45, 2, 20) == {'total': 45, 'pages': 3, 'current': 2, 'per_page': 20}
    assert paginate(0, 1, 20)['pages'] == 0
