import logging

from flask import Flask, render_template, request, redirect, url_for, flash, jsonify, abort

from config import get_config
from constants import UNITS, DEFAULT_UNIT, VALID_UNITS, EDITABLE_FIELDS
from models import IngredientStore, Ingredient, IngredientNotFoundError, StoreError
from services import build_scaling_view
from utils import sanitize_ingredient_name, sanitize_amount, sanitize_portions

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(get_config())


def configure_logging(app):
    """Console logging at the configured LOG_LEVEL."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        root.addHandler(handler)


configure_logging(app)

# Sanitizer per editable ingredient field
FIELD_SANITIZERS = {
    'name': sanitize_ingredient_name,
    'amount': sanitize_amount,
    'unit': lambda value: (value or '').strip(),
}


def _log_store_change(store, change):
    logger.debug("Store change: %s (%d ingredients)", change, len(store.ingredients))


def reset_store():
    """Replace the in-memory store with a fresh one built from config defaults."""
    store = IngredientStore(
        original_portions=app.config['DEFAULT_ORIGINAL_PORTIONS'],
        desired_portions=app.config['DEFAULT_DESIRED_PORTIONS'],
    )
    store.subscribe(_log_store_change)
    app.extensions['ingredient_store'] = store
    return store


def get_store():
    store = app.extensions.get('ingredient_store')
    if store is None:
        store = reset_store()
    return store


# ============================================
# ROUTES - SCALER FORM
# ============================================

@app.route('/')
def index():
    store = get_store()
    view = build_scaling_view(store.original_portions, store.desired_portions, store.ingredients)
    return render_template('scaler.html', store=store, view=view, units=UNITS,
                           placeholder=app.config['PLACEHOLDER'])


@app.route('/portions', methods=['POST'])
def portions_update():
    store = get_store()

    if 'original' in request.form:
        store.set_original_portions(sanitize_portions(request.form['original']))
    if 'desired' in request.form:
        store.set_desired_portions(sanitize_portions(request.form['desired']))

    return redirect(url_for('index'))


@app.route('/ingredient/add', methods=['POST'])
def ingredient_add():
    get_store().add_ingredient()
    return redirect(url_for('index'))


@app.route('/ingredient/<ingredient_id>/update', methods=['POST'])
def ingredient_update(ingredient_id):
    store = get_store()

    try:
        store.get_ingredient(ingredient_id)
    except IngredientNotFoundError:
        abort(404)

    for field in EDITABLE_FIELDS:
        if field not in request.form:
            continue
        value = FIELD_SANITIZERS[field](request.form[field])
        try:
            store.update_ingredient(ingredient_id, field, value)
        except StoreError as e:
            logger.warning("Rejected %s update for ingredient %s: %s", field, ingredient_id, e)
            flash(str(e), 'danger')

    return redirect(url_for('index'))


@app.route('/ingredient/<ingredient_id>/delete', methods=['POST'])
def ingredient_delete(ingredient_id):
    store = get_store()

    try:
        removed = store.remove_ingredient(ingredient_id)
    except IngredientNotFoundError:
        abort(404)

    if not removed:
        flash('At least one ingredient is required', 'warning')

    return redirect(url_for('index'))


# ============================================
# ROUTES - JSON API
# ============================================

def _scaled_row_to_dict(row):
    data = row.ingredient.to_dict()
    data['original_amount'] = row.original_amount
    data['scaled_amount'] = row.scaled_amount if row.displayable else None
    data['scaled_display'] = row.scaled_display
    return data


@app.route('/api/scale', methods=['POST'])
def api_scale():
    """Scale a list of ingredients without touching the form's store."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400

    raw_ingredients = data.get('ingredients', [])
    if not isinstance(raw_ingredients, list):
        return jsonify({'error': 'ingredients must be a list'}), 400

    ingredients = []
    for index, raw in enumerate(raw_ingredients):
        if not isinstance(raw, dict):
            return jsonify({'error': f'Ingredient {index} must be an object'}), 400
        unit = raw.get('unit') or DEFAULT_UNIT
        if not isinstance(unit, str):
            return jsonify({'error': f'Ingredient {index} unit must be a string'}), 400
        if unit not in VALID_UNITS:
            logger.warning("Rejected unit %r in /api/scale", unit)
            return jsonify({'error': f'Unknown unit {unit!r}', 'valid_units': list(UNITS)}), 400
        ingredients.append(Ingredient(
            id=str(raw.get('id') or index),
            name=sanitize_ingredient_name(raw.get('name')),
            amount=sanitize_amount(raw.get('amount')),
            unit=unit,
        ))

    original = sanitize_portions(data.get('original', app.config['DEFAULT_ORIGINAL_PORTIONS']))
    desired = sanitize_portions(data.get('desired', app.config['DEFAULT_DESIRED_PORTIONS']))
    view = build_scaling_view(original, desired, ingredients)

    return jsonify({
        'original': original,
        'desired': desired,
        'multiplier': view.multiplier if view.multiplier_valid else None,
        'multiplier_display': view.multiplier_display,
        'ingredients': [_scaled_row_to_dict(row) for row in view.rows],
    })


@app.route('/api/state')
def api_state():
    return jsonify(get_store().to_dict())


if __name__ == '__main__':
    reset_store()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
