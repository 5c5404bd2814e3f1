from decimal import Decimal

from services import format_currency, format_percentage, slugify


def test_format_currency():
    assert format_currency(1234.5) == '$1,234.50'
    assert format_currency(Decimal('0.005')) == '$0.01'
    assert format_currency('85') == '$85.00'
    assert format_currency(-5) == '-$5.00'
    assert format_currency(12, symbol='€') == '€12.00'


def test_format_currency_invalid_input():
    assert format_currency(None) == '$0.00'
    assert format_currency('abc') == '$0.00'


def test_format_percentage():
    assert format_percentage(Decimal('60')) == '60%'
    assert format_percentage(12.5) == '12.5%'
    assert format_percentage(Decimal('33.333')) == '33.33%'
    assert format_percentage(None) == '0%'
    assert format_percentage(Decimal('-0.001')) == '0%'


def test_slugify():
    assert slugify('Tacos & Tequila') == 'tacos-and-tequila'
    assert slugify('  Classic   Elegant ') == 'classic-elegant'
    assert slugify(None) == ''
