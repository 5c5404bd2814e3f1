"""Tests for ingredient unit costs, recipe costing and the cost analysis."""

from decimal import Decimal

import pytest

from services import (
    InvalidIngredientError, cost_per_storage_unit, convert_quantity, normalize_unit,
    line_cost, recipe_cost, profit, margin_percentage, recipe_costing,
    cost_summary, build_cost_analysis, round_display,
)


# =========== UNIT COST ===========

def test_unit_cost_is_exact():
    assert cost_per_storage_unit(150, 1000) == Decimal('0.15')
    assert cost_per_storage_unit('150', '1000') == Decimal('0.15')


def test_float_inputs_do_not_drift():
    assert cost_per_storage_unit(0.3, 3) == Decimal('0.1')


@pytest.mark.parametrize('factor', [0, -1, '0'])
def test_non_positive_conversion_factor_rejected(factor):
    with pytest.raises(InvalidIngredientError):
        cost_per_storage_unit(150, factor)


def test_negative_purchase_cost_rejected():
    with pytest.raises(InvalidIngredientError):
        cost_per_storage_unit(-1, 10)


# =========== CONVERSION ===========

def test_unit_aliases():
    assert normalize_unit('kg') == 'KG'
    assert normalize_unit('gramos') == 'G'
    assert normalize_unit('Cups') == 'CUP'
    assert normalize_unit(None) == 'EA'


def test_convert_weight_and_volume():
    assert convert_quantity(2, 'kg', 'g') == Decimal('2000')
    assert convert_quantity(1, 'L', 'ML') == Decimal('1000')
    assert convert_quantity(500, 'G', 'KG') == Decimal('0.5')


def test_incompatible_units_keep_quantity():
    assert convert_quantity(3, 'EA', 'G') == Decimal('3')
    assert convert_quantity(1, 'KG', 'ML') == Decimal('1')


def test_line_cost_converts_to_storage_unit():
    line = {'quantity': '0.2', 'unit': 'KG', 'storage_unit': 'G', 'cost_per_unit': Decimal('0.15')}
    assert line_cost(line) == Decimal('30')


def test_recipe_cost_sums_lines():
    lines = [
        {'quantity': 200, 'unit': 'G', 'storage_unit': 'G', 'cost_per_unit': Decimal('0.15')},
        {'quantity': 2, 'unit': 'EA', 'storage_unit': 'EA', 'cost_per_unit': Decimal('4.5')},
    ]
    assert recipe_cost(lines) == Decimal('39')
    assert recipe_cost([]) == Decimal('0')


# =========== MARGIN ===========

def test_margin_and_profit():
    assert margin_percentage(100, 40) == Decimal('60')
    assert round_display(margin_percentage(100, 40)) == Decimal('60.00')
    assert profit(100, 40) == Decimal('60')


def test_zero_price_margin_is_zero():
    margin = margin_percentage(0, 10)
    assert margin == Decimal('0')
    assert margin.is_finite()
    assert margin_percentage(-5, 10) == Decimal('0')


def test_recipe_costing():
    costing = recipe_costing(
        Decimal('25'),
        [{'quantity': 100, 'unit': 'G', 'storage_unit': 'G', 'cost_per_unit': Decimal('0.05')}],
    )
    assert costing == {'cost': Decimal('5'), 'profit': Decimal('20'), 'margin_percentage': Decimal('80')}


# =========== SUMMARY ===========

def test_empty_summary_is_zero():
    summary = cost_summary([])
    assert summary == {
        'total_recipes': 0,
        'total_ingredients': 0,
        'avg_recipe_cost': Decimal('0'),
        'avg_margin': Decimal('0'),
        'total_recipe_costs': Decimal('0'),
    }

    analysis = build_cost_analysis([], [])
    assert analysis['recipes'] == []
    assert analysis['ingredients'] == []
    assert analysis['summary']['avg_margin'] == Decimal('0')


def test_avg_margin_is_mean_of_ratios():
    recipes = [
        {'cost': 50, 'selling_price': 100},  # 50%
        {'cost': 10, 'selling_price': 10},   # 0%
    ]
    summary = cost_summary(recipes, total_ingredients=3)
    assert summary['avg_margin'] == Decimal('25')
    assert summary['avg_recipe_cost'] == Decimal('30')
    assert summary['total_recipe_costs'] == Decimal('60')
    assert summary['total_ingredients'] == 3

    ratio_of_sums = (Decimal('110') - Decimal('60')) / Decimal('110') * 100
    assert summary['avg_margin'] != ratio_of_sums


def test_cost_analysis_ordering_and_rounding():
    recipes = iter([
        {'id': 1, 'name': 'Soup', 'category_name': 'Starters', 'cost': Decimal('2.005'),
         'selling_price': Decimal('10'), 'ingredients_count': 3},
        {'id': 2, 'name': 'Steak', 'category_name': 'Mains', 'cost': Decimal('30'),
         'selling_price': Decimal('40'), 'ingredients_count': 2},
    ])
    ingredients = [
        {'id': 1, 'name': 'Salt', 'storage_unit': 'G', 'cost_per_unit': Decimal('0.001'), 'used_in_recipes': 2},
        {'id': 2, 'name': 'Beef', 'storage_unit': 'G', 'cost_per_unit': Decimal('0.15'), 'used_in_recipes': 1},
    ]
    analysis = build_cost_analysis(recipes, ingredients)

    assert [r['name'] for r in analysis['recipes']] == ['Soup', 'Steak']
    soup = analysis['recipes'][0]
    assert soup['cost'] == Decimal('2.01')
    assert soup['profit'] == Decimal('8.00')
    assert soup['margin_percentage'] == Decimal('79.95')
    assert soup['category'] == 'Starters'
    assert [i['name'] for i in analysis['ingredients']] == ['Beef', 'Salt']
    assert analysis['summary']['total_recipes'] == 2
    assert analysis['summary']['total_ingredients'] == 2
