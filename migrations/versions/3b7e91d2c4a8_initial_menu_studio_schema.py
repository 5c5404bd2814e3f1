"""Initial menu studio schema

Revision ID: 3b7e91d2c4a8
Revises:
Create Date: 2026-10-17 09:12:40.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e91d2c4a8'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_category')),
        sa.UniqueConstraint('restaurant_id', 'type', 'name', name='uq_category_restaurant_type_name'),
    )
    op.create_index(op.f('ix_category_restaurant_id'), 'category', ['restaurant_id'])
    op.create_index(op.f('ix_category_type'), 'category', ['type'])

    op.create_table(
        'menu_template',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('preview_image_url', sa.String(length=500), nullable=True),
        sa.Column('config', sa.JSON(), nullable=False),
        sa.Column('snapshot', sa.JSON(), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_menu_template')),
    )
    op.create_index(op.f('ix_menu_template_restaurant_id'), 'menu_template', ['restaurant_id'])

    op.create_table(
        'brand_kit',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('logo_url', sa.String(length=500), nullable=True),
        sa.Column('primary_color', sa.String(length=7), nullable=True),
        sa.Column('secondary_colors', sa.JSON(), nullable=False),
        sa.Column('font_family_main', sa.String(length=100), nullable=True),
        sa.Column('font_family_secondary', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_brand_kit')),
        sa.UniqueConstraint('restaurant_id', name=op.f('uq_brand_kit_restaurant_id')),
    )

    op.create_table(
        'digital_menu',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('template_id', sa.Integer(), nullable=True),
        sa.Column('qr_code_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(
            ['template_id'], ['menu_template.id'],
            name=op.f('fk_digital_menu_template_id_menu_template'), ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_digital_menu')),
    )
    op.create_index(op.f('ix_digital_menu_restaurant_id'), 'digital_menu', ['restaurant_id'])

    op.create_table(
        'digital_menu_category',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('digital_menu_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['category_id'], ['category.id'],
            name=op.f('fk_digital_menu_category_category_id_category'),
        ),
        sa.ForeignKeyConstraint(
            ['digital_menu_id'], ['digital_menu.id'],
            name=op.f('fk_digital_menu_category_digital_menu_id_digital_menu'),
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_digital_menu_category')),
        sa.UniqueConstraint('digital_menu_id', 'category_id', name='uq_menu_category'),
    )
    op.create_index(op.f('ix_digital_menu_category_category_id'), 'digital_menu_category', ['category_id'])
    op.create_index(op.f('ix_digital_menu_category_digital_menu_id'), 'digital_menu_category', ['digital_menu_id'])

    op.create_table(
        'menu_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('digital_menu_id', sa.Integer(), nullable=False),
        sa.Column('menu_category_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ['digital_menu_id'], ['digital_menu.id'],
            name=op.f('fk_menu_item_digital_menu_id_digital_menu'),
        ),
        sa.ForeignKeyConstraint(
            ['menu_category_id'], ['digital_menu_category.id'],
            name=op.f('fk_menu_item_menu_category_id_digital_menu_category'),
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_menu_item')),
    )
    op.create_index(op.f('ix_menu_item_digital_menu_id'), 'menu_item', ['digital_menu_id'])
    op.create_index(op.f('ix_menu_item_menu_category_id'), 'menu_item', ['menu_category_id'])

    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('purchase_unit', sa.String(length=20), nullable=False),
        sa.Column('purchase_unit_cost', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column('storage_unit', sa.String(length=20), nullable=False),
        sa.Column('conversion_factor', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('cost_per_unit', sa.Numeric(precision=16, scale=6), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['category.id'], name=op.f('fk_ingredient_category_id_category')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_ingredient')),
        sa.UniqueConstraint('restaurant_id', 'name', name='uq_ingredient_restaurant_name'),
    )
    op.create_index(op.f('ix_ingredient_name'), 'ingredient', ['name'])
    op.create_index(op.f('ix_ingredient_restaurant_id'), 'ingredient', ['restaurant_id'])

    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('selling_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('cost', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('margin_percentage', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column('yield_amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('yield_unit', sa.String(length=20), nullable=False),
        sa.Column('preparation_instructions', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['category.id'], name=op.f('fk_recipe_category_id_category')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_recipe')),
    )
    op.create_index(op.f('ix_recipe_name'), 'recipe', ['name'])
    op.create_index(op.f('ix_recipe_restaurant_id'), 'recipe', ['restaurant_id'])

    op.create_table(
        'recipe_ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(
            ['ingredient_id'], ['ingredient.id'],
            name=op.f('fk_recipe_ingredient_ingredient_id_ingredient'), ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], name=op.f('fk_recipe_ingredient_recipe_id_recipe')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_recipe_ingredient')),
    )
    op.create_index(op.f('ix_recipe_ingredient_ingredient_id'), 'recipe_ingredient', ['ingredient_id'])
    op.create_index(op.f('ix_recipe_ingredient_recipe_id'), 'recipe_ingredient', ['recipe_id'])


def downgrade():
    op.drop_table('recipe_ingredient')
    op.drop_table('recipe')
    op.drop_table('ingredient')
    op.drop_table('menu_item')
    op.drop_table('digital_menu_category')
    op.drop_table('digital_menu')
    op.drop_table('brand_kit')
    op.drop_table('menu_template')
    op.drop_table('category')
