"""
Display Formatting Service

Currency, percentage, and slug helpers registered as Jinja filters.
Display only: nothing formatted here is written back to the database.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENTS = Decimal('0.01')


def _as_decimal(value):
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        return None


def format_currency(value, symbol='$'):
    """Format as currency with 2 decimals and a thousands separator: $1,234.50"""
    amount = _as_decimal(value)
    if amount is None or not amount.is_finite():
        amount = Decimal('0')
    amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = '-' if amount < 0 else ''
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percentage(value):
    """Format a percentage with at most 2 decimals: 60%, 12.5%"""
    pct = _as_decimal(value)
    if pct is None or not pct.is_finite():
        return '0%'
    text = f"{pct.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}".rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return f"{text}%"


def slugify(text):
    """Convert text to a URL-friendly slug."""
    text = str(text or '').lower().strip()
    text = re.sub(r'\s+', '-', text)
    text = text.replace('&', '-and-')
    text = re.sub(r'[^\w-]+', '', text)
    text = re.sub(r'-{2,}', '-', text)
    return text.strip('-')
