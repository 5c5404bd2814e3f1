"""Add POS orders, inventory and suppliers

Revision ID: 8c4d2f6a1b93
Revises: 3b7e91d2c4a8
Create Date: 2026-10-17 15:40:02.561337

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8c4d2f6a1b93'
down_revision = '3b7e91d2c4a8'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'pos_order',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('subtotal', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('tax', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('discount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('total', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('payment_method', sa.String(length=20), nullable=True),
        sa.Column('customer_name', sa.String(length=200), nullable=True),
        sa.Column('table_number', sa.String(length=20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_pos_order')),
    )
    op.create_index(op.f('ix_pos_order_created_at'), 'pos_order', ['created_at'])
    op.create_index(op.f('ix_pos_order_restaurant_id'), 'pos_order', ['restaurant_id'])
    op.create_index(op.f('ix_pos_order_status'), 'pos_order', ['status'])

    op.create_table(
        'order_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('menu_item_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ['menu_item_id'], ['menu_item.id'],
            name=op.f('fk_order_item_menu_item_id_menu_item'), ondelete='SET NULL',
        ),
        sa.ForeignKeyConstraint(['order_id'], ['pos_order.id'], name=op.f('fk_order_item_order_id_pos_order')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_order_item')),
    )
    op.create_index(op.f('ix_order_item_order_id'), 'order_item', ['order_id'])

    op.create_table(
        'payment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('method', sa.String(length=20), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('reference_number', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['order_id'], ['pos_order.id'], name=op.f('fk_payment_order_id_pos_order')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_payment')),
    )
    op.create_index(op.f('ix_payment_order_id'), 'payment', ['order_id'])

    op.create_table(
        'stock_level',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('low_stock_threshold', sa.Numeric(precision=14, scale=4), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(
            ['ingredient_id'], ['ingredient.id'],
            name=op.f('fk_stock_level_ingredient_id_ingredient'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_stock_level')),
        sa.UniqueConstraint('ingredient_id', name=op.f('uq_stock_level_ingredient_id')),
    )

    op.create_table(
        'inventory_adjustment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('quantity_adjusted', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('reason_code', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(
            ['ingredient_id'], ['ingredient.id'],
            name=op.f('fk_inventory_adjustment_ingredient_id_ingredient'), ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_inventory_adjustment')),
    )
    op.create_index(op.f('ix_inventory_adjustment_created_at'), 'inventory_adjustment', ['created_at'])
    op.create_index(op.f('ix_inventory_adjustment_ingredient_id'), 'inventory_adjustment', ['ingredient_id'])
    op.create_index(op.f('ix_inventory_adjustment_restaurant_id'), 'inventory_adjustment', ['restaurant_id'])

    op.create_table(
        'supplier',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=200), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('tax_id', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_supplier')),
    )
    op.create_index(op.f('ix_supplier_name'), 'supplier', ['name'])
    op.create_index(op.f('ix_supplier_restaurant_id'), 'supplier', ['restaurant_id'])

    op.create_table(
        'supplier_product',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=True),
        sa.Column('sku', sa.String(length=50), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('quantity', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.Column('cost_per_unit', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.ForeignKeyConstraint(
            ['ingredient_id'], ['ingredient.id'],
            name=op.f('fk_supplier_product_ingredient_id_ingredient'), ondelete='SET NULL',
        ),
        sa.ForeignKeyConstraint(['supplier_id'], ['supplier.id'], name=op.f('fk_supplier_product_supplier_id_supplier')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_supplier_product')),
    )
    op.create_index(op.f('ix_supplier_product_supplier_id'), 'supplier_product', ['supplier_id'])


def downgrade():
    op.drop_table('supplier_product')
    op.drop_table('supplier')
    op.drop_table('inventory_adjustment')
    op.drop_table('stock_level')
    op.drop_table('payment')
    op.drop_table('order_item')
    op.drop_table('pos_order')
