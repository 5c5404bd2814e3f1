"""
POS Order Service

Decimal totals for point-of-sale orders and the order status rules.
"""

from decimal import Decimal, ROUND_HALF_UP

from .cost import to_decimal, ZERO, CENTS

TAX_RATE = Decimal('0.16')

# Order lifecycle: kitchen states, then completed once paid
ORDER_STATUSES = ('pending', 'preparing', 'ready', 'served', 'completed', 'cancelled')
CLOSED_STATUSES = {'completed', 'cancelled'}
PAYMENT_METHODS = {'cash', 'card', 'transfer'}


class OrderStateError(Exception):
    """Raised when an order cannot move to the requested state."""
    pass


def order_line_total(price, quantity):
    return to_decimal(price) * to_decimal(quantity)


def order_totals(lines, tax_rate=TAX_RATE, discount=0):
    """
    Subtotal, tax, discount, and total for an order.

    Tax is charged on the subtotal and rounded to cents; the discount is
    taken off the taxed amount and never drives the total below zero.

    Args:
        lines: Iterable of mappings with price and quantity
        tax_rate: Fraction of the subtotal charged as tax
        discount: Flat amount off the order

    Returns:
        dict with subtotal, tax, discount, total (Decimal)
    """
    subtotal = sum((order_line_total(line['price'], line['quantity']) for line in lines), ZERO)
    tax = (subtotal * to_decimal(tax_rate)).quantize(CENTS, rounding=ROUND_HALF_UP)
    discount = min(max(to_decimal(discount), ZERO), subtotal + tax)
    return {
        'subtotal': subtotal,
        'tax': tax,
        'discount': discount,
        'total': subtotal + tax - discount,
    }


def check_status_change(current, new):
    """Validate an order status transition; closed orders stay closed."""
    if new not in ORDER_STATUSES:
        raise ValueError(f'Invalid order status: {new}')
    if current in CLOSED_STATUSES and new != current:
        raise OrderStateError(f'Order is already {current}')
    if new == 'completed':
        raise OrderStateError('Orders are completed by recording a payment')


def paginate(total, page, per_page):
    """Pagination block for list responses, 1-based pages."""
    pages = (total + per_page - 1) // per_page if per_page else 0
    return {'total': total, 'pages': pages, 'current': page, 'per_page': per_page}
