import logging
import os

import requests
from flask import Flask, render_template, request, jsonify, session, abort
from flask_migrate import Migrate
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload
from werkzeug.exceptions import HTTPException

from config import get_config
from constants import (
    VALID_CATEGORY_TYPES, VALID_MENU_STATUSES, VALID_RECIPE_STATUSES,
    VALID_ADJUSTMENT_REASONS, VALID_SUPPLIER_STATUSES,
    VALID_LAYOUT_STYLES, VALID_CARD_STYLES, VALID_SPACINGS,
    MAX_LENGTHS, MAX_PRICE, MAX_QUANTITY, ALLOWED_EXTENSIONS,
    EDITOR_DEFAULTS, BRAND_KIT_DEFAULTS,
)
from models import (
    db, Category, DigitalMenu, DigitalMenuCategory, MenuItem, MenuTemplate,
    BrandKit, Ingredient, Recipe, RecipeIngredient, Order, OrderItem,
    StockLevel, InventoryAdjustment, Supplier, SupplierProduct,
    CategoryInUseError, DefaultTemplateError,
)
from services import (
    InvalidIngredientError, MenuExtractionError, OrderStateError, to_decimal,
    group_and_order_menu_items, resolve_template_config, build_cost_analysis,
    apply_template_to_menu, snapshot_menu, seed_default_templates,
    extract_menu_items, generate_template_style,
    format_currency, format_percentage, slugify,
    ORDER_STATUSES, PAYMENT_METHODS, paginate,
    InvalidAdjustmentError, adjusted_quantity, inventory_levels,
)
from utils import (
    safe_fetch, SSRFError, save_upload, ImageValidationError,
    sanitize_text, sanitize_url, sanitize_name, sanitize_description, sanitize_hex_color,
)

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)

# Jinja filters for the public menu
app.jinja_env.filters['currency'] = lambda value: format_currency(value, app.config['CURRENCY_SYMBOL'])
app.jinja_env.filters['percentage'] = format_percentage
app.jinja_env.filters['slugify'] = slugify


# ============================================
# REQUEST HELPERS
# ============================================

def current_restaurant_id():
    """Restaurant of the signed-in user; sessions are issued elsewhere."""
    return session.get('restaurant_id') or app.config['DEFAULT_RESTAURANT_ID']


def get_json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, (dict, list)):
        abort(400, description='Request body must be a JSON object')
    return data


def get_json_object():
    data = get_json_body()
    if not isinstance(data, dict):
        abort(400, description='Request body must be a JSON object')
    return data


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def safe_int(value, default=0, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value not in (None, '') else default
    except (ValueError, TypeError):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def decimal_field(data, key, default=None, min_val=None, max_val=None):
    """Parse a decimal from the request body; 400 if it is not a number or out of range."""
    value = data.get(key)
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        abort(400, description=f'{key} must be a number')
    try:
        result = to_decimal(value)
    except ValueError:
        abort(400, description=f'{key} must be a number')
    if not result.is_finite():
        abort(400, description=f'{key} must be a number')
    if min_val is not None and result < min_val:
        abort(400, description=f'{key} must be at least {min_val}')
    if max_val is not None and result > max_val:
        abort(400, description=f'{key} must be at most {max_val}')
    return result


def required_name(data, key='name'):
    name = (data.get(key) or '').strip() if isinstance(data.get(key), str) else ''
    if not name:
        abort(400, description=f'{key} is required')
    return sanitize_name(name, max_length=MAX_LENGTHS['name'])


def get_owned_or_404(model, id):
    """Load a row belonging to the current restaurant."""
    obj = model.query.filter_by(id=id, restaurant_id=current_restaurant_id()).first()
    if obj is None:
        abort(404, description=f'{model.__name__} {id} not found')
    return obj


def get_menu_item_or_404(id):
    item = (MenuItem.query
            .join(DigitalMenu, MenuItem.digital_menu_id == DigitalMenu.id)
            .filter(MenuItem.id == id, DigitalMenu.restaurant_id == current_restaurant_id())
            .first())
    if item is None:
        abort(404, description=f'MenuItem {id} not found')
    return item


def get_binding_or_404(menu, binding_id):
    binding = DigitalMenuCategory.query.filter_by(id=binding_id, digital_menu_id=menu.id).first()
    if binding is None:
        abort(404, description=f'Category {binding_id} is not on menu {menu.id}')
    return binding


def store_upload(field, kind, owner_id):
    """Validate the uploaded image in request.files[field] and return its URL."""
    file = request.files.get(field)
    if not file or not file.filename:
        abort(400, description='No image selected')
    if not allowed_file(file.filename):
        abort(400, description='Invalid file type. Use PNG, JPG, GIF, or WEBP.')
    filename = save_upload(file, app.config['UPLOAD_FOLDER'], kind, owner_id)
    return f'/static/uploads/{filename}'


def commit():
    """Commit the session, rolling back before re-raising on constraint errors."""
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise


# ============================================
# ERROR HANDLERS
# ============================================

def error_response(message, status_code):
    return jsonify({'error': True, 'message': message, 'status_code': status_code}), status_code


@app.errorhandler(HTTPException)
def handle_http_error(e):
    return error_response(e.description, e.code)


@app.errorhandler(InvalidIngredientError)
@app.errorhandler(ImageValidationError)
@app.errorhandler(SSRFError)
@app.errorhandler(InvalidAdjustmentError)
def handle_validation_error(e):
    logger.info('Rejected request: %s', e)
    return error_response(str(e), 400)


@app.errorhandler(CategoryInUseError)
@app.errorhandler(DefaultTemplateError)
@app.errorhandler(OrderStateError)
def handle_conflict(e):
    return error_response(str(e), 409)


@app.errorhandler(IntegrityError)
def handle_integrity_error(e):
    db.session.rollback()
    logger.warning('Integrity error: %s', e.orig)
    return error_response('A record with these values already exists', 409)


@app.errorhandler(MenuExtractionError)
def handle_extraction_error(e):
    return error_response(str(e), 502)


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    menus = (DigitalMenu.query
             .filter_by(restaurant_id=current_restaurant_id())
             .order_by(DigitalMenu.created_at.desc(), DigitalMenu.id.desc())
             .all())
    return jsonify({'name': 'Menu Studio', 'menus': [m.to_dict() for m in menus]})


# ============================================
# ROUTES - CATEGORIES
# ============================================

@app.route('/api/categories')
def categories_list():
    query = Category.query.filter_by(restaurant_id=current_restaurant_id())
    category_type = request.args.get('type')
    if category_type:
        query = query.filter_by(type=category_type)
    categories = query.order_by(Category.order_index, Category.name).all()
    return jsonify([c.to_dict() for c in categories])


def next_category_order(restaurant_id, category_type):
    current = (db.session.query(func.max(Category.order_index))
               .filter_by(restaurant_id=restaurant_id, type=category_type)
               .scalar())
    return (current or 0) + 1


def find_or_create_category(name, category_type):
    restaurant_id = current_restaurant_id()
    category = Category.query.filter_by(restaurant_id=restaurant_id, type=category_type, name=name).first()
    if category is None:
        category = Category(
            restaurant_id=restaurant_id, name=name, type=category_type,
            order_index=next_category_order(restaurant_id, category_type),
        )
        db.session.add(category)
        db.session.flush()
    return category


@app.route('/api/categories', methods=['POST'])
def category_add():
    data = get_json_object()
    name = required_name(data)
    category_type = (data.get('type') or 'menu_item').lower()
    if category_type not in VALID_CATEGORY_TYPES:
        abort(400, description=f'Invalid category type: {category_type}')

    restaurant_id = current_restaurant_id()
    category = Category(
        restaurant_id=restaurant_id, name=name, type=category_type,
        order_index=next_category_order(restaurant_id, category_type),
    )
    db.session.add(category)
    commit()
    return jsonify(category.to_dict()), 201


@app.route('/api/categories/<int:id>', methods=['PUT'])
def category_edit(id):
    category = get_owned_or_404(Category, id)
    data = get_json_object()
    if 'name' in data:
        category.name = required_name(data)
    if 'order_index' in data:
        category.order_index = safe_int(data['order_index'], default=category.order_index)
    commit()
    return jsonify(category.to_dict())


@app.route('/api/categories/<int:id>', methods=['DELETE'])
def category_delete(id):
    category = get_owned_or_404(Category, id)
    if DigitalMenuCategory.query.filter_by(category_id=id).first():
        raise CategoryInUseError(f'Category "{category.name}" is still used by a digital menu')

    Ingredient.query.filter_by(category_id=id).update({'category_id': None})
    Recipe.query.filter_by(category_id=id).update({'category_id': None})
    db.session.delete(category)
    commit()
    return '', 204


@app.route('/api/categories/reorder', methods=['POST'])
def categories_reorder():
    updates = get_json_body()
    if not isinstance(updates, list):
        abort(400, description='Expected a list of {id, order_index}')

    categories = {c.id: c for c in Category.query.filter_by(restaurant_id=current_restaurant_id()).all()}
    for update in updates:
        category = categories.get(safe_int(update.get('id'), default=None)) if isinstance(update, dict) else None
        if category is None:
            abort(400, description=f'Unknown category in reorder: {update!r}')
        category.order_index = safe_int(update.get('order_index'), default=category.order_index)
    commit()
    return jsonify([c.to_dict() for c in sorted(categories.values(), key=lambda c: (c.order_index, c.name))])


# ============================================
# ROUTES - DIGITAL MENUS
# ============================================

def menu_item_rows(menu_id):
    """Menu items with their category name and order joined in, in display order."""
    items = (MenuItem.query
             .options(joinedload(MenuItem.menu_category).joinedload(DigitalMenuCategory.category))
             .join(DigitalMenuCategory, MenuItem.menu_category_id == DigitalMenuCategory.id)
             .filter(MenuItem.digital_menu_id == menu_id)
             .order_by(DigitalMenuCategory.order_index, MenuItem.position, MenuItem.id)
             .all())
    return [item.to_row() for item in items]


def build_menu_view(menu):
    """Everything the presentation layer needs: resolved style and ordered groups."""
    template_config = menu.template.config if menu.template else None
    groups = group_and_order_menu_items(menu_item_rows(menu.id))
    brand_kit = BrandKit.query.filter_by(restaurant_id=menu.restaurant_id).first()
    return {
        'menu': menu.to_dict(),
        'template': resolve_template_config(template_config),
        'groups': groups,
        'brand_kit': brand_kit.to_dict() if brand_kit else dict(BRAND_KIT_DEFAULTS),
    }


def validate_status(status):
    status = (status or 'draft').lower()
    if status not in VALID_MENU_STATUSES:
        abort(400, description=f'Invalid menu status: {status}')
    return status


def validate_template_id(template_id):
    if template_id in (None, ''):
        return None
    return get_owned_or_404(MenuTemplate, safe_int(template_id, default=-1)).id


@app.route('/api/menus')
def menus_list():
    menus = (DigitalMenu.query
             .options(joinedload(DigitalMenu.template))
             .filter_by(restaurant_id=current_restaurant_id())
             .order_by(DigitalMenu.created_at.desc(), DigitalMenu.id.desc())
             .all())
    return jsonify([m.to_dict() for m in menus])


@app.route('/api/menus', methods=['POST'])
def menu_add():
    data = get_json_object()
    menu = DigitalMenu(
        restaurant_id=current_restaurant_id(),
        name=required_name(data),
        status=validate_status(data.get('status')),
        template_id=validate_template_id(data.get('template_id')),
    )
    db.session.add(menu)
    commit()
    logger.info('Created digital menu %s "%s"', menu.id, menu.name)
    return jsonify(menu.to_dict()), 201


@app.route('/api/menus/<int:id>')
def menu_view(id):
    menu = get_owned_or_404(DigitalMenu, id)
    data = menu.to_dict()
    data['categories'] = [c.to_dict() for c in menu.categories]
    return jsonify(data)


@app.route('/api/menus/<int:id>', methods=['PUT'])
def menu_edit(id):
    menu = get_owned_or_404(DigitalMenu, id)
    data = get_json_object()
    if 'name' in data:
        menu.name = required_name(data)
    if 'status' in data:
        menu.status = validate_status(data['status'])
    if 'template_id' in data:
        menu.template_id = validate_template_id(data['template_id'])
    commit()
    return jsonify(menu.to_dict())


@app.route('/api/menus/<int:id>', methods=['DELETE'])
def menu_delete(id):
    menu = get_owned_or_404(DigitalMenu, id)
    db.session.delete(menu)
    commit()
    logger.info('Deleted digital menu %s', id)
    return '', 204


@app.route('/api/menus/<int:id>/qr-code', methods=['POST'])
def menu_upload_qr_code(id):
    menu = get_owned_or_404(DigitalMenu, id)
    menu.qr_code_url = store_upload('qr_code', 'qr-code', menu.id)
    commit()
    return jsonify({'qr_code_url': menu.qr_code_url})


@app.route('/api/menus/<int:id>/render')
def menu_render_data(id):
    view = build_menu_view(get_owned_or_404(DigitalMenu, id))
    view['groups'] = [{'category': name, 'items': items} for name, items in view['groups']]
    return jsonify(view)


# ============================================
# ROUTES - DIGITAL MENU CATEGORIES
# ============================================

@app.route('/api/menus/<int:id>/categories')
def menu_categories_list(id):
    menu = get_owned_or_404(DigitalMenu, id)
    return jsonify([c.to_dict() for c in menu.categories])


@app.route('/api/menus/<int:id>/categories', methods=['POST'])
def menu_category_add(id):
    menu = get_owned_or_404(DigitalMenu, id)
    data = get_json_object()

    if data.get('category_id') not in (None, ''):
        category = get_owned_or_404(Category, safe_int(data['category_id'], default=-1))
    else:
        category = find_or_create_category(required_name(data), 'menu_item')

    if 'order_index' in data:
        order_index = safe_int(data['order_index'], default=0)
    else:
        current = (db.session.query(func.max(DigitalMenuCategory.order_index))
                   .filter_by(digital_menu_id=menu.id)
                   .scalar())
        order_index = (current or 0) + 1

    binding = DigitalMenuCategory(digital_menu_id=menu.id, category_id=category.id, order_index=order_index)
    db.session.add(binding)
    commit()
    return jsonify(binding.to_dict()), 201


@app.route('/api/menus/<int:id>/categories/order', methods=['PUT'])
def menu_categories_reorder(id):
    menu = get_owned_or_404(DigitalMenu, id)
    updates = get_json_body()
    if not isinstance(updates, list):
        abort(400, description='Expected a list of {id, order_index}')

    bindings = {b.id: b for b in menu.categories}
    for update in updates:
        binding = bindings.get(safe_int(update.get('id'), default=None)) if isinstance(update, dict) else None
        if binding is None:
            abort(400, description=f'Unknown menu category in reorder: {update!r}')
        binding.order_index = safe_int(update.get('order_index'), default=binding.order_index)
    commit()
    return jsonify([b.to_dict() for b in sorted(bindings.values(), key=lambda b: b.order_index)])


@app.route('/api/menus/<int:id>/categories/<int:binding_id>', methods=['DELETE'])
def menu_category_delete(id, binding_id):
    menu = get_owned_or_404(DigitalMenu, id)
    binding = get_binding_or_404(menu, binding_id)
    binding.ensure_deletable()
    db.session.delete(binding)
    commit()
    return '', 204


# ============================================
# ROUTES - MENU ITEMS
# ============================================

def apply_menu_item_fields(item, data, menu):
    if 'name' in data:
        item.name = required_name(data)
    if 'description' in data:
        item.description = sanitize_description(data.get('description'), max_length=MAX_LENGTHS['description'])
    if 'price' in data:
        item.price = decimal_field(data, 'price', default=to_decimal(0), min_val=0, max_val=MAX_PRICE)
    if 'image_url' in data:
        item.image_url = sanitize_url(data.get('image_url')) or None
    if 'position' in data:
        item.position = safe_int(data['position'], default=item.position or 0, min_val=0)
    if 'is_available' in data:
        item.is_available = bool(data['is_available'])
    if 'menu_category_id' in data:
        item.menu_category_id = get_binding_or_404(menu, safe_int(data['menu_category_id'], default=-1)).id


@app.route('/api/menus/<int:id>/items')
def menu_items_list(id):
    menu = get_owned_or_404(DigitalMenu, id)
    return jsonify(menu_item_rows(menu.id))


@app.route('/api/menus/<int:id>/items', methods=['POST'])
def menu_item_add(id):
    menu = get_owned_or_404(DigitalMenu, id)
    data = get_json_object()
    if data.get('menu_category_id') in (None, ''):
        abort(400, description='menu_category_id is required')
    required_name(data)

    binding = get_binding_or_404(menu, safe_int(data['menu_category_id'], default=-1))
    if 'position' not in data:
        data = dict(data, position=len(binding.items))

    item = MenuItem(digital_menu_id=menu.id, menu_category_id=binding.id, price=0, position=0)
    apply_menu_item_fields(item, data, menu)
    db.session.add(item)
    commit()
    return jsonify(item.to_row()), 201


@app.route('/api/menu-items/<int:id>', methods=['PUT'])
def menu_item_edit(id):
    item = get_menu_item_or_404(id)
    apply_menu_item_fields(item, get_json_object(), item.digital_menu)
    commit()
    return jsonify(item.to_row())


@app.route('/api/menu-items/<int:id>', methods=['DELETE'])
def menu_item_delete(id):
    item = get_menu_item_or_404(id)
    db.session.delete(item)
    commit()
    return '', 204


@app.route('/api/menu-items/<int:id>/image', methods=['POST'])
def menu_item_upload_image(id):
    item = get_menu_item_or_404(id)
    item.image_url = store_upload('image', 'menu-item', item.id)
    commit()
    return jsonify(item.to_row())


@app.route('/api/menu-items/<int:id>/image-url', methods=['POST'])
def menu_item_import_image(id):
    item = get_menu_item_or_404(id)
    url = sanitize_url(get_json_object().get('url'))
    if not url or url.startswith('/'):
        abort(400, description='Invalid URL. Only http and https URLs are allowed.')

    try:
        content = safe_fetch(url)
    except requests.RequestException as e:
        abort(400, description=f'Could not fetch image: {e}')

    filename = save_upload(content, app.config['UPLOAD_FOLDER'], 'menu-item', item.id)
    item.image_url = f'/static/uploads/{filename}'
    commit()
    return jsonify(item.to_row())


# ============================================
# ROUTES - TEMPLATE APPLICATION & AI EXTRACTION
# ============================================

@app.route('/api/menus/<int:id>/apply-template', methods=['POST'])
def menu_apply_template(id):
    menu = get_owned_or_404(DigitalMenu, id)
    data = get_json_object()
    if data.get('template_id') in (None, ''):
        abort(400, description='template_id is required')
    template = get_owned_or_404(MenuTemplate, safe_int(data['template_id'], default=-1))

    counts = apply_template_to_menu(menu, template, db, Category, DigitalMenuCategory, MenuItem)
    commit()
    return jsonify({'success': True, 'menu_id': menu.id, 'template_id': template.id, **counts})


@app.route('/api/menus/<int:id>/save-as-template', methods=['POST'])
def menu_save_as_template(id):
    menu = get_owned_or_404(DigitalMenu, id)
    data = get_json_object()
    config = dict(menu.template.config or {}) if menu.template else dict(EDITOR_DEFAULTS)

    template = MenuTemplate(
        restaurant_id=menu.restaurant_id,
        name=sanitize_name(data.get('name') or f'{menu.name} template', max_length=MAX_LENGTHS['name']),
        description=sanitize_description(data.get('description'), max_length=MAX_LENGTHS['description']),
        config=config,
        snapshot=snapshot_menu(menu_item_rows(menu.id)),
    )
    db.session.add(template)
    commit()
    return jsonify(template.to_dict(full=True)), 201


@app.route('/api/menus/<int:id>/extract', methods=['POST'])
def menu_extract_items(id):
    get_owned_or_404(DigitalMenu, id)
    file = request.files.get('menu')
    if not file or not file.filename:
        abort(400, description='No file provided')
    if not allowed_file(file.filename):
        abort(400, description='Invalid file type. Use PNG, JPG, GIF, or WEBP.')

    category = request.form.get('category') or None
    drafts = extract_menu_items(
        file.read(),
        file.mimetype,
        endpoint=app.config['AI_EXTRACTION_URL'],
        api_key=app.config['AI_API_KEY'],
        timeout=app.config['AI_TIMEOUT'],
        category=category,
    )
    return jsonify({'success': True, 'items': drafts})


@app.route('/api/menus/<int:id>/import-items', methods=['POST'])
def menu_import_items(id):
    menu = get_owned_or_404(DigitalMenu, id)
    data = get_json_object()
    drafts = data.get('items')
    if not isinstance(drafts, list) or not drafts:
        abort(400, description='items must be a non-empty list')
    binding = get_binding_or_404(menu, safe_int(data.get('menu_category_id'), default=-1))

    start = len(binding.items)
    created = []
    for offset, draft in enumerate(drafts):
        if not isinstance(draft, dict):
            abort(400, description='Each item must be an object')
        item = MenuItem(
            digital_menu_id=menu.id,
            menu_category_id=binding.id,
            name=sanitize_name(draft.get('name'), max_length=MAX_LENGTHS['name']),
            description=sanitize_description(draft.get('description'), max_length=MAX_LENGTHS['description']),
            price=decimal_field(draft, 'price', default=to_decimal(0), min_val=0, max_val=MAX_PRICE),
            position=start + offset,
        )
        db.session.add(item)
        created.append(item)
    commit()
    logger.info('Imported %d items into menu %s', len(created), menu.id)
    return jsonify([item.to_row() for item in created]), 201


# ============================================
# ROUTES - TEMPLATES
# ============================================

TEMPLATE_ENUMS = {
    'layout_style': VALID_LAYOUT_STYLES,
    'card_style': VALID_CARD_STYLES,
    'spacing': VALID_SPACINGS,
}


def template_config_from(data, default=None):
    config = data.get('config', default)
    if config is None:
        return {}
    if not isinstance(config, dict):
        abort(400, description='config must be an object')
    for key, allowed in TEMPLATE_ENUMS.items():
        if config.get(key) is not None and config[key] not in allowed:
            abort(400, description=f'Invalid {key}: {config[key]}')
    return config


def template_snapshot_from(data):
    """Validate a snapshot payload and return it normalized for storage."""
    snapshot = data.get('snapshot') or []
    if not isinstance(snapshot, list) or not all(isinstance(entry, dict) for entry in snapshot):
        abort(400, description='snapshot must be a list of categories')

    categories = []
    for position, entry in enumerate(snapshot):
        items = entry.get('items') or []
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            abort(400, description='snapshot items must be a list of objects')
        categories.append({
            'name': required_name(entry),
            'order_index': safe_int(entry.get('order_index'), default=position, min_val=0),
            'items': [
                {
                    'name': required_name(item),
                    'description': sanitize_description(item.get('description'), max_length=MAX_LENGTHS['description']),
                    'price': str(decimal_field(item, 'price', default=to_decimal(0), min_val=0, max_val=MAX_PRICE)),
                    'image_url': sanitize_url(item.get('image_url')) or None,
                    'order_index': safe_int(item.get('order_index'), default=index, min_val=0),
                }
                for index, item in enumerate(items)
            ],
        })
    return categories


@app.route('/api/templates')
def templates_list():
    templates = (MenuTemplate.query
                 .filter_by(restaurant_id=current_restaurant_id())
                 .order_by(MenuTemplate.id)
                 .all())
    return jsonify([t.to_dict() for t in templates])


@app.route('/api/templates', methods=['POST'])
def template_add():
    data = get_json_object()
    template = MenuTemplate(
        restaurant_id=current_restaurant_id(),
        name=required_name(data),
        description=sanitize_description(data.get('description'), max_length=MAX_LENGTHS['description']),
        config=template_config_from(data, default=dict(EDITOR_DEFAULTS)),
        snapshot=template_snapshot_from(data),
    )
    db.session.add(template)
    commit()
    return jsonify(template.to_dict(full=True)), 201


@app.route('/api/templates/<int:id>')
def template_view(id):
    template = get_owned_or_404(MenuTemplate, id)
    data = template.to_dict(full=True)
    data['resolved_config'] = resolve_template_config(template.config)
    return jsonify(data)


@app.route('/api/templates/<int:id>', methods=['PUT'])
def template_edit(id):
    template = get_owned_or_404(MenuTemplate, id)
    data = get_json_object()
    if 'name' in data:
        template.name = required_name(data)
    if 'description' in data:
        template.description = sanitize_description(data.get('description'), max_length=MAX_LENGTHS['description'])
    if 'config' in data:
        template.config = template_config_from(data)
    if 'snapshot' in data:
        template.snapshot = template_snapshot_from(data)
    commit()
    return jsonify(template.to_dict(full=True))


@app.route('/api/templates/<int:id>', methods=['DELETE'])
def template_delete(id):
    template = get_owned_or_404(MenuTemplate, id)
    template.ensure_deletable()

    DigitalMenu.query.filter_by(template_id=id).update({'template_id': None})
    db.session.delete(template)
    commit()
    return '', 204


@app.route('/api/templates/<int:id>/thumbnail', methods=['POST'])
def template_upload_thumbnail(id):
    template = get_owned_or_404(MenuTemplate, id)
    template.preview_image_url = store_upload('thumbnail', 'template', template.id)
    commit()
    return jsonify(template.to_dict())


@app.route('/api/templates/seed', methods=['POST'])
def templates_seed():
    created = seed_default_templates(current_restaurant_id(), db, MenuTemplate)
    commit()
    message = 'Default templates created successfully' if created else 'Default templates already exist'
    return jsonify({'success': True, 'created': created, 'message': message})


@app.route('/api/templates/generate', methods=['POST'])
def template_generate():
    data = get_json_object()
    prompt = sanitize_text(data.get('prompt'), max_length=MAX_LENGTHS['prompt'])
    if not prompt:
        abort(400, description='prompt is required')

    brand_kit = BrandKit.query.filter_by(restaurant_id=current_restaurant_id()).first()
    style = generate_template_style(prompt, brand_kit.to_dict() if brand_kit else None)

    if not data.get('save'):
        return jsonify({'config': style})

    template = MenuTemplate(
        restaurant_id=current_restaurant_id(),
        name=sanitize_name(data.get('name') or 'AI Template', max_length=MAX_LENGTHS['name']),
        description=prompt,
        config=style,
        snapshot=[],
    )
    db.session.add(template)
    commit()
    return jsonify(template.to_dict(full=True)), 201


# ============================================
# ROUTES - BRAND KIT
# ============================================

def get_or_create_brand_kit():
    restaurant_id = current_restaurant_id()
    brand_kit = BrandKit.query.filter_by(restaurant_id=restaurant_id).first()
    if brand_kit is None:
        brand_kit = BrandKit(restaurant_id=restaurant_id, secondary_colors=[], **BRAND_KIT_DEFAULTS)
        db.session.add(brand_kit)
        commit()
    return brand_kit


@app.route('/api/brand-kit')
def brand_kit_view():
    return jsonify(get_or_create_brand_kit().to_dict())


@app.route('/api/brand-kit', methods=['PUT'])
def brand_kit_edit():
    brand_kit = get_or_create_brand_kit()
    data = get_json_object()

    if 'primary_color' in data:
        color = sanitize_hex_color(data['primary_color'])
        if color is None:
            abort(400, description='primary_color must be a #RRGGBB color')
        brand_kit.primary_color = color
    if 'secondary_colors' in data:
        colors = data['secondary_colors'] or []
        if not isinstance(colors, list):
            abort(400, description='secondary_colors must be a list')
        cleaned = [sanitize_hex_color(c) for c in colors]
        if None in cleaned:
            abort(400, description='secondary_colors must be #RRGGBB colors')
        brand_kit.secondary_colors = cleaned
    if 'logo_url' in data:
        brand_kit.logo_url = sanitize_url(data.get('logo_url'))
    for key in ('font_family_main', 'font_family_secondary'):
        if key in data:
            setattr(brand_kit, key, sanitize_text(data[key], max_length=100) or BRAND_KIT_DEFAULTS[key])
    commit()
    return jsonify(brand_kit.to_dict())


@app.route('/api/brand-kit/logo', methods=['POST'])
def brand_kit_upload_logo():
    brand_kit = get_or_create_brand_kit()
    brand_kit.logo_url = store_upload('logo', 'logo', brand_kit.restaurant_id)
    commit()
    return jsonify(brand_kit.to_dict())


# ============================================
# ROUTES - INGREDIENTS
# ============================================

def usage_counts():
    """Number of recipe lines per ingredient id."""
    rows = (db.session.query(RecipeIngredient.ingredient_id, func.count(RecipeIngredient.id))
            .group_by(RecipeIngredient.ingredient_id)
            .all())
    return dict(rows)


def recost_recipes_using(ingredient_id):
    """Recompute cost and margin of every recipe that uses an ingredient."""
    recipes = (Recipe.query
               .join(RecipeIngredient, RecipeIngredient.recipe_id == Recipe.id)
               .filter(RecipeIngredient.ingredient_id == ingredient_id)
               .distinct()
               .all())
    for recipe in recipes:
        recipe.recalculate()
    return len(recipes)


def apply_ingredient_fields(ingredient, data):
    if 'name' in data:
        ingredient.name = required_name(data)
    if 'purchase_unit' in data:
        ingredient.purchase_unit = sanitize_text(data['purchase_unit'], max_length=MAX_LENGTHS['unit']) or 'KG'
    if 'storage_unit' in data:
        ingredient.storage_unit = sanitize_text(data['storage_unit'], max_length=MAX_LENGTHS['unit']) or 'G'
    if 'purchase_unit_cost' in data:
        ingredient.purchase_unit_cost = decimal_field(data, 'purchase_unit_cost', default=to_decimal(0), max_val=MAX_PRICE)
    if 'conversion_factor' in data:
        factor = decimal_field(data, 'conversion_factor')
        if factor is None:
            abort(400, description='conversion_factor is required')
        ingredient.conversion_factor = factor
    if 'category' in data:
        name = sanitize_name(data['category'], max_length=MAX_LENGTHS['category'], default='')
        ingredient.category_id = find_or_create_category(name, 'ingredient').id if name else None
    ingredient.refresh_cost_per_unit()


@app.route('/api/ingredients')
def ingredients_list():
    ingredients = (Ingredient.query
                   .options(joinedload(Ingredient.category))
                   .filter_by(restaurant_id=current_restaurant_id())
                   .order_by(Ingredient.name)
                   .all())
    counts = usage_counts()
    result = []
    for ing in ingredients:
        row = ing.to_dict()
        row['used_in_recipes'] = counts.get(ing.id, 0)
        result.append(row)
    return jsonify(result)


@app.route('/api/ingredients', methods=['POST'])
def ingredient_add():
    data = get_json_object()
    required_name(data)
    if data.get('conversion_factor') in (None, ''):
        abort(400, description='conversion_factor is required')

    ingredient = Ingredient(restaurant_id=current_restaurant_id())
    apply_ingredient_fields(ingredient, data)
    db.session.add(ingredient)
    commit()
    logger.info('Created ingredient %s "%s" at %s per %s',
                ingredient.id, ingredient.name, ingredient.cost_per_unit, ingredient.storage_unit)
    return jsonify(ingredient.to_dict()), 201


@app.route('/api/ingredients/<int:id>', methods=['PUT'])
def ingredient_edit(id):
    ingredient = get_owned_or_404(Ingredient, id)
    apply_ingredient_fields(ingredient, get_json_object())
    db.session.flush()
    recosted = recost_recipes_using(ingredient.id)
    commit()
    data = ingredient.to_dict()
    data['recipes_recosted'] = recosted
    return jsonify(data)


@app.route('/api/ingredients/<int:id>', methods=['DELETE'])
def ingredient_delete(id):
    ingredient = get_owned_or_404(Ingredient, id)
    lines = RecipeIngredient.query.filter_by(ingredient_id=id).all()
    affected = {ri.recipe for ri in lines}

    # Removing from the collection deletes the orphaned line
    for ri in lines:
        ri.recipe.ingredients.remove(ri)
    db.session.delete(ingredient)
    for recipe in affected:
        recipe.recalculate()
    commit()
    return '', 204


# ============================================
# ROUTES - RECIPES
# ============================================

def apply_recipe_fields(recipe, data):
    if 'name' in data:
        recipe.name = required_name(data)
    if 'status' in data:
        status = (data.get('status') or 'active').lower()
        if status not in VALID_RECIPE_STATUSES:
            abort(400, description=f'Invalid recipe status: {status}')
        recipe.status = status
    if 'selling_price' in data:
        recipe.selling_price = decimal_field(data, 'selling_price', default=to_decimal(0), min_val=0, max_val=MAX_PRICE)
    if 'yield_amount' in data:
        recipe.yield_amount = decimal_field(data, 'yield_amount', default=to_decimal(1), min_val=0, max_val=MAX_QUANTITY)
    if 'yield_unit' in data:
        recipe.yield_unit = sanitize_text(data['yield_unit'], max_length=MAX_LENGTHS['unit']) or 'portion'
    if 'preparation_instructions' in data:
        recipe.preparation_instructions = sanitize_description(
            data.get('preparation_instructions'), max_length=MAX_LENGTHS['instructions']
        )
    if 'image_url' in data:
        recipe.image_url = sanitize_url(data.get('image_url')) or None
    if 'category' in data:
        name = sanitize_name(data['category'], max_length=MAX_LENGTHS['category'], default='')
        recipe.category_id = find_or_create_category(name, 'recipe').id if name else None
    if 'ingredients' in data:
        recipe.ingredients = build_recipe_lines(data['ingredients'])


def build_recipe_lines(lines):
    """Validate [{ingredient_id, quantity, unit}] and build RecipeIngredient rows."""
    if not isinstance(lines, list):
        abort(400, description='ingredients must be a list')

    ingredients = {i.id: i for i in Ingredient.query.filter_by(restaurant_id=current_restaurant_id()).all()}
    result = []
    for line in lines:
        if not isinstance(line, dict):
            abort(400, description='Each ingredient line must be an object')
        ingredient = ingredients.get(safe_int(line.get('ingredient_id') or line.get('id'), default=None))
        if ingredient is None:
            abort(400, description=f'Unknown ingredient: {line.get("ingredient_id")!r}')
        quantity = decimal_field(line, 'quantity', max_val=MAX_QUANTITY)
        if quantity is None or quantity <= 0:
            abort(400, description=f'Quantity for "{ingredient.name}" must be greater than 0')
        unit = sanitize_text(line.get('unit'), max_length=MAX_LENGTHS['unit']) or ingredient.storage_unit
        result.append(RecipeIngredient(ingredient=ingredient, quantity=quantity, unit=unit))
    return result


def load_recipe(id):
    recipe = (Recipe.query
              .options(joinedload(Recipe.ingredients).joinedload(RecipeIngredient.ingredient))
              .filter_by(id=id, restaurant_id=current_restaurant_id())
              .first())
    if recipe is None:
        abort(404, description=f'Recipe {id} not found')
    return recipe


@app.route('/api/recipes')
def recipes_list():
    recipes = (Recipe.query
               .options(joinedload(Recipe.category), joinedload(Recipe.ingredients))
               .filter_by(restaurant_id=current_restaurant_id())
               .order_by(Recipe.created_at.desc(), Recipe.id.desc())
               .all())
    return jsonify([r.to_dict() for r in recipes])


@app.route('/api/recipes', methods=['POST'])
def recipe_add():
    data = get_json_object()
    required_name(data)
    recipe = Recipe(restaurant_id=current_restaurant_id(), selling_price=0)
    apply_recipe_fields(recipe, data)
    recipe.recalculate()
    db.session.add(recipe)
    commit()
    return jsonify(recipe.to_dict(with_lines=True)), 201


@app.route('/api/recipes/<int:id>')
def recipe_view(id):
    return jsonify(load_recipe(id).to_dict(with_lines=True))


@app.route('/api/recipes/<int:id>', methods=['PUT'])
def recipe_edit(id):
    recipe = load_recipe(id)
    apply_recipe_fields(recipe, get_json_object())
    recipe.recalculate()
    commit()
    return jsonify(recipe.to_dict(with_lines=True))


@app.route('/api/recipes/<int:id>', methods=['DELETE'])
def recipe_delete(id):
    recipe = load_recipe(id)
    db.session.delete(recipe)
    commit()
    return '', 204


# ============================================
# ROUTES - COSTS
# ============================================

@app.route('/api/costs')
def cost_analysis():
    restaurant_id = current_restaurant_id()
    recipes = (Recipe.query
               .options(joinedload(Recipe.category), joinedload(Recipe.ingredients))
               .filter_by(restaurant_id=restaurant_id)
               .all())
    ingredients = (Ingredient.query
                   .options(joinedload(Ingredient.category))
                   .filter_by(restaurant_id=restaurant_id)
                   .all())
    counts = usage_counts()

    recipe_rows = [
        {
            'id': r.id,
            'name': r.name,
            'category_name': r.category.name if r.category else None,
            'cost': r.cost,
            'selling_price': r.selling_price,
            'ingredients_count': len(r.ingredients),
        }
        for r in recipes
    ]
    ingredient_rows = [
        {
            'id': i.id,
            'name': i.name,
            'category_name': i.category.name if i.category else None,
            'storage_unit': i.storage_unit,
            'cost_per_unit': i.cost_per_unit,
            'used_in_recipes': counts.get(i.id, 0),
        }
        for i in ingredients
    ]
    return jsonify(build_cost_analysis(recipe_rows, ingredient_rows))


# ============================================
# ROUTES - POS ORDERS
# ============================================

def sellable_items_query():
    return (MenuItem.query
            .join(DigitalMenu, MenuItem.digital_menu_id == DigitalMenu.id)
            .filter(DigitalMenu.restaurant_id == current_restaurant_id(),
                    MenuItem.is_available.is_(True),
                    MenuItem.price > 0))


def build_order_lines(lines):
    """Validate [{menu_item_id, quantity, notes}] and build OrderItem rows priced from the menu."""
    if not isinstance(lines, list) or not lines:
        abort(400, description='An order needs at least one item')
    if not all(isinstance(line, dict) for line in lines):
        abort(400, description='Each order item must be an object')

    ids = {safe_int(line.get('menu_item_id'), default=None) for line in lines}
    menu_items = {m.id: m for m in sellable_items_query().filter(MenuItem.id.in_(ids - {None})).all()}

    result = []
    for line in lines:
        menu_item = menu_items.get(safe_int(line.get('menu_item_id'), default=None))
        if menu_item is None:
            abort(400, description=f'Unknown or unavailable menu item: {line.get("menu_item_id")!r}')
        quantity = safe_int(line.get('quantity'), default=1)
        if quantity < 1 or quantity > MAX_QUANTITY:
            abort(400, description=f'Quantity for "{menu_item.name}" must be between 1 and {MAX_QUANTITY}')
        result.append(OrderItem(
            menu_item_id=menu_item.id,
            name=menu_item.name,
            price=menu_item.price,
            quantity=quantity,
            notes=sanitize_description(line.get('notes'), max_length=MAX_LENGTHS['description']),
        ))
    return result


def order_tax_rate():
    return to_decimal(app.config['POS_TAX_RATE'])


@app.route('/api/pos/items')
def pos_items():
    items = sellable_items_query().order_by(MenuItem.name, MenuItem.id).all()
    return jsonify([item.to_row() for item in items])


@app.route('/api/orders')
def orders_list():
    page = safe_int(request.args.get('page'), default=1, min_val=1)
    per_page = safe_int(request.args.get('per_page'), default=20, min_val=1, max_val=100)
    query = Order.query.filter_by(restaurant_id=current_restaurant_id())

    status = request.args.get('status')
    if status:
        if status not in ORDER_STATUSES:
            abort(400, description=f'Invalid order status: {status}')
        query = query.filter_by(status=status)

    total = query.count()
    orders = (query
              .options(joinedload(Order.items))
              .order_by(Order.created_at.desc(), Order.id.desc())
              .offset((page - 1) * per_page)
              .limit(per_page)
              .all())
    return jsonify({
        'orders': [o.to_dict() for o in orders],
        'pagination': paginate(total, page, per_page),
    })


@app.route('/api/orders', methods=['POST'])
def order_add():
    data = get_json_object()
    order = Order(
        restaurant_id=current_restaurant_id(),
        status='pending',
        customer_name=sanitize_name(data.get('customer_name'), max_length=MAX_LENGTHS['name'], default='') or None,
        table_number=sanitize_text(data.get('table_number'), max_length=20) or None,
        notes=sanitize_description(data.get('notes'), max_length=MAX_LENGTHS['description']),
        discount=decimal_field(data, 'discount', default=to_decimal(0), min_val=0, max_val=MAX_PRICE),
    )
    order.items = build_order_lines(data.get('items'))
    order.recalculate(order_tax_rate())
    db.session.add(order)
    commit()
    logger.info('Created order %s with %d items, total %s', order.id, len(order.items), order.total)
    return jsonify(order.to_dict(with_lines=True)), 201


@app.route('/api/orders/<int:id>')
def order_view(id):
    return jsonify(get_owned_or_404(Order, id).to_dict(with_lines=True))


@app.route('/api/orders/<int:id>/status', methods=['PUT'])
def order_status(id):
    order = get_owned_or_404(Order, id)
    status = get_json_object().get('status') or ''
    if not isinstance(status, str) or status.lower() not in ORDER_STATUSES:
        abort(400, description=f'Invalid order status: {status}')
    order.set_status(status.lower())
    commit()
    return jsonify(order.to_dict())


@app.route('/api/orders/<int:id>/payments', methods=['POST'])
def order_pay(id):
    order = get_owned_or_404(Order, id)
    data = get_json_object()
    method = data.get('method')
    if not isinstance(method, str) or method not in PAYMENT_METHODS:
        abort(400, description=f'Invalid payment method: {method}')
    amount = decimal_field(data, 'amount', default=to_decimal(order.total), min_val=0, max_val=MAX_PRICE)
    if amount < to_decimal(order.total):
        abort(400, description='Payment does not cover the order total')

    payment = order.record_payment(
        amount, method, sanitize_text(data.get('reference_number'), max_length=100) or None,
    )
    commit()
    logger.info('Recorded %s payment of %s for order %s', method, amount, order.id)
    return jsonify({'payment': payment.to_dict(), 'order': order.to_dict()}), 201


# ============================================
# ROUTES - INVENTORY
# ============================================

@app.route('/api/inventory')
def inventory_list():
    ingredients = (Ingredient.query
                   .options(joinedload(Ingredient.category))
                   .filter_by(restaurant_id=current_restaurant_id())
                   .all())
    levels = {i.id: i.stock_level.to_level() for i in ingredients if i.stock_level}
    return jsonify(inventory_levels([i.to_dict() for i in ingredients], levels))


@app.route('/api/inventory/<int:ingredient_id>', methods=['PUT'])
def inventory_threshold(ingredient_id):
    ingredient = get_owned_or_404(Ingredient, ingredient_id)
    data = get_json_object()
    threshold = decimal_field(data, 'low_stock_threshold', min_val=0, max_val=MAX_QUANTITY)

    level = ingredient.stock_level
    if level is None:
        level = StockLevel(ingredient=ingredient, quantity=0)
        db.session.add(level)
    level.low_stock_threshold = threshold
    commit()
    return jsonify(dict(level.to_level(), ingredient_id=ingredient.id))


@app.route('/api/inventory/adjustments')
def inventory_history():
    limit = safe_int(request.args.get('limit'), default=50, min_val=1, max_val=500)
    adjustments = (InventoryAdjustment.query
                   .options(joinedload(InventoryAdjustment.ingredient))
                   .filter_by(restaurant_id=current_restaurant_id())
                   .order_by(InventoryAdjustment.created_at.desc(), InventoryAdjustment.id.desc())
                   .limit(limit)
                   .all())
    return jsonify([a.to_dict() for a in adjustments])


@app.route('/api/inventory/adjustments', methods=['POST'])
def inventory_adjust():
    data = get_json_object()
    ingredient = get_owned_or_404(Ingredient, safe_int(data.get('ingredient_id'), default=-1))
    reason = data.get('reason_code')
    if not isinstance(reason, str) or reason.lower() not in VALID_ADJUSTMENT_REASONS:
        abort(400, description=f'Invalid reason code: {reason}')
    delta = decimal_field(data, 'quantity_adjusted', min_val=-MAX_QUANTITY, max_val=MAX_QUANTITY)
    if delta is None:
        abort(400, description='quantity_adjusted is required')

    level = ingredient.stock_level
    quantity = adjusted_quantity(level.quantity if level else 0, delta)
    if level is None:
        level = StockLevel(ingredient=ingredient)
        db.session.add(level)
    level.quantity = quantity

    adjustment = InventoryAdjustment(
        restaurant_id=current_restaurant_id(),
        ingredient=ingredient,
        quantity_adjusted=delta,
        reason_code=reason.lower(),
        notes=sanitize_description(data.get('notes'), max_length=MAX_LENGTHS['description']),
    )
    db.session.add(adjustment)
    commit()
    logger.info('Adjusted stock of ingredient %s by %s (%s), now %s',
                ingredient.id, delta, adjustment.reason_code, quantity)
    return jsonify({'adjustment': adjustment.to_dict(), 'level': level.to_level()}), 201


# ============================================
# ROUTES - SUPPLIERS
# ============================================

def apply_supplier_fields(supplier, data):
    if 'name' in data:
        supplier.name = required_name(data)
    if 'category' in data:
        supplier.category = sanitize_name(data['category'], max_length=MAX_LENGTHS['category'], default='') or None
    if 'email' in data:
        email = sanitize_text(data['email'], max_length=200)
        if email and '@' not in email:
            abort(400, description=f'Invalid email: {email}')
        supplier.email = email or None
    if 'phone' in data:
        supplier.phone = sanitize_text(data['phone'], max_length=50) or None
    if 'address' in data:
        supplier.address = sanitize_description(data['address'], max_length=MAX_LENGTHS['description'])
    if 'tax_id' in data:
        supplier.tax_id = sanitize_text(data['tax_id'], max_length=50) or None
    if 'status' in data:
        status = data.get('status') or 'active'
        if not isinstance(status, str) or status.lower() not in VALID_SUPPLIER_STATUSES:
            abort(400, description=f'Invalid supplier status: {status}')
        supplier.status = status.lower()


@app.route('/api/suppliers')
def suppliers_list():
    suppliers = (Supplier.query
                 .options(joinedload(Supplier.products))
                 .filter_by(restaurant_id=current_restaurant_id())
                 .order_by(Supplier.name, Supplier.id)
                 .all())
    return jsonify([s.to_dict() for s in suppliers])


@app.route('/api/suppliers', methods=['POST'])
def supplier_add():
    data = get_json_object()
    required_name(data)
    supplier = Supplier(restaurant_id=current_restaurant_id(), status='active')
    apply_supplier_fields(supplier, data)
    db.session.add(supplier)
    commit()
    return jsonify(supplier.to_dict(with_products=True)), 201


@app.route('/api/suppliers/<int:id>')
def supplier_view(id):
    return jsonify(get_owned_or_404(Supplier, id).to_dict(with_products=True))


@app.route('/api/suppliers/<int:id>', methods=['PUT'])
def supplier_edit(id):
    supplier = get_owned_or_404(Supplier, id)
    apply_supplier_fields(supplier, get_json_object())
    commit()
    return jsonify(supplier.to_dict(with_products=True))


@app.route('/api/suppliers/<int:id>', methods=['DELETE'])
def supplier_delete(id):
    supplier = get_owned_or_404(Supplier, id)
    db.session.delete(supplier)
    commit()
    return '', 204


@app.route('/api/suppliers/<int:id>/products', methods=['POST'])
def supplier_product_add(id):
    supplier = get_owned_or_404(Supplier, id)
    data = get_json_object()
    ingredient = None
    if data.get('ingredient_id') not in (None, ''):
        ingredient = Ingredient.query.filter_by(
            id=safe_int(data['ingredient_id'], default=-1), restaurant_id=current_restaurant_id()
        ).first()
        if ingredient is None:
            abort(400, description=f'Unknown ingredient: {data["ingredient_id"]!r}')

    product = SupplierProduct(
        name=required_name(data),
        sku=sanitize_text(data.get('sku'), max_length=50) or None,
        quantity=decimal_field(data, 'quantity', default=to_decimal(1), min_val=0, max_val=MAX_QUANTITY),
        unit=sanitize_text(data.get('unit'), max_length=MAX_LENGTHS['unit']) or 'KG',
        cost_per_unit=decimal_field(data, 'cost_per_unit', default=to_decimal(0), min_val=0, max_val=MAX_PRICE),
        ingredient=ingredient,
    )
    supplier.products.append(product)
    commit()
    return jsonify(product.to_dict()), 201


@app.route('/api/supplier-products/<int:id>', methods=['DELETE'])
def supplier_product_delete(id):
    product = (SupplierProduct.query
               .join(Supplier, SupplierProduct.supplier_id == Supplier.id)
               .filter(SupplierProduct.id == id, Supplier.restaurant_id == current_restaurant_id())
               .first())
    if product is None:
        abort(404, description=f'SupplierProduct {id} not found')
    db.session.delete(product)
    commit()
    return '', 204


# ============================================
# ROUTES - PUBLIC MENU
# ============================================

@app.route('/menu/<int:id>')
def public_menu(id):
    menu = db.session.get(DigitalMenu, id)
    if menu is None or menu.status == 'inactive':
        abort(404, description='Menu not found')
    view = build_menu_view(menu)
    return render_template('menu.html', **view)


@app.errorhandler(404)
def handle_not_found(e):
    if request.path.startswith('/menu/'):
        return render_template('menu_not_found.html'), 404
    return error_response(e.description, 404)


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        db.create_all()
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
