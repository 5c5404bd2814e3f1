"""
POS Order Models

Contains Order, its line items, and the payments recorded against it.
"""

from services.orders import order_totals, check_status_change, CLOSED_STATUSES, OrderStateError
from .base import db


class Order(db.Model):
    """An order captured at the point of sale."""
    __tablename__ = 'pos_order'

    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, index=True)

    # pending | preparing | ready | served | completed | cancelled
    status = db.Column(db.String(20), nullable=False, default='pending', index=True)

    subtotal = db.Column(db.Numeric(14, 4), nullable=False, default=0)
    tax = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    discount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    total = db.Column(db.Numeric(14, 4), nullable=False, default=0)
    payment_method = db.Column(db.String(20), nullable=True)
    customer_name = db.Column(db.String(200), nullable=True)
    table_number = db.Column(db.String(20), nullable=True)
    notes = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime, server_default=db.func.now(), index=True)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    items = db.relationship(
        'OrderItem', backref='order', lazy=True, cascade='all, delete-orphan', order_by='OrderItem.id',
    )
    payments = db.relationship(
        'Payment', backref='order', lazy=True, cascade='all, delete-orphan', order_by='Payment.id',
    )

    def recalculate(self, tax_rate):
        """Recompute totals from the current lines."""
        totals = order_totals(
            [{'price': item.price, 'quantity': item.quantity} for item in self.items],
            tax_rate=tax_rate, discount=self.discount or 0,
        )
        self.subtotal = totals['subtotal']
        self.tax = totals['tax']
        self.discount = totals['discount']
        self.total = totals['total']
        return totals

    def set_status(self, status):
        check_status_change(self.status, status)
        self.status = status

    def record_payment(self, amount, method, reference_number=None):
        """Add a payment and close the order."""
        if self.status in CLOSED_STATUSES:
            raise OrderStateError(f'Order is already {self.status}')
        payment = Payment(amount=amount, method=method, reference_number=reference_number)
        self.payments.append(payment)
        self.status = 'completed'
        self.payment_method = method
        return payment

    def to_dict(self, with_lines=False):
        data = {
            'id': self.id,
            'status': self.status,
            'subtotal': self.subtotal,
            'tax': self.tax,
            'discount': self.discount,
            'total': self.total,
            'payment_method': self.payment_method,
            'customer_name': self.customer_name,
            'table_number': self.table_number,
            'notes': self.notes or '',
            'items_count': len(self.items),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
        if with_lines:
            data['items'] = [item.to_dict() for item in self.items]
            data['payments'] = [payment.to_dict() for payment in self.payments]
        return data


class OrderItem(db.Model):
    """One dish on an order; name and price are copied from the menu item at sale time."""
    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('pos_order.id'), nullable=False, index=True)
    menu_item_id = db.Column(db.Integer, db.ForeignKey('menu_item.id', ondelete='SET NULL'), nullable=True)
    name = db.Column(db.String(200), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    notes = db.Column(db.Text, default='')

    def to_dict(self):
        return {
            'id': self.id,
            'menu_item_id': self.menu_item_id,
            'name': self.name,
            'price': self.price,
            'quantity': self.quantity,
            'line_total': (self.price or 0) * (self.quantity or 0),
            'notes': self.notes or '',
        }


class Payment(db.Model):
    """Money received against an order."""
    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('pos_order.id'), nullable=False, index=True)
    amount = db.Column(db.Numeric(12, 2), nullable=False)

    # cash | card | transfer
    method = db.Column(db.String(20), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='completed')
    reference_number = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'order_id': self.order_id,
            'amount': self.amount,
            'method': self.method,
            'status': self.status,
            'reference_number': self.reference_number,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
