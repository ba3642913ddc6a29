"""
MicroBatch Engine API

Thin JSON layer over the bakery domain engine. The record-keeping UI posts
raw ingredient text and batch snapshots here and renders what comes back;
nothing is stored.
"""

import logging
from dataclasses import asdict
from datetime import datetime

from flask import Flask, Response, jsonify, request

from config import get_config
from constants import (
    VALID_SCALING_MODES, SCALING_NUMBER_KEYS, VALID_PAN_SHAPES, PAN_DIMENSION_KEYS,
    VALID_TIMELINE_FORMATS,
)
from models import (
    ParsedIngredient, ScalingInput, PackagingSpec, PackagingBatch,
    ShoppingIngredient, ShoppingBatch
)
from services import (
    parse_ingredient, parse_ingredients, format_ingredient, float_to_fraction,
    calculate_scaling_factor, scale_ingredients, calculate_pan_volume,
    calculate_packaging_needs, aggregate_shopping_list,
    list_templates, get_template, generate_timeline_from_template,
    timeline_to_events, generate_ics,
)
from utils import (
    PayloadError, safe_float, safe_int, require_mapping, require_list, require_number,
    parse_datetime, sanitize_ingredient_text, sanitize_label, configure_logging,
    format_weight, format_percentage,
)

app = Flask(__name__)
app.config.from_object(get_config())

configure_logging(app.config['LOG_LEVEL'])
logger = logging.getLogger('app')


def _jsonable(value):
    """Convert dataclass output into JSON-friendly values (ISO timestamps)."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def _record(record):
    return _jsonable(asdict(record))


def _json_body():
    """Return the request's JSON object or raise PayloadError."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise PayloadError('Request body must be a JSON object')
    return body


def _ingredient_lines(body):
    """
    Collect ingredient lines from 'lines' (list) or 'text' (newline separated).
    Lines are sanitized and blank lines dropped.
    """
    if 'lines' in body:
        raw_lines = require_list(body['lines'], 'lines')
    elif isinstance(body.get('text'), str):
        raw_lines = body['text'].splitlines()
    else:
        raise PayloadError("Provide 'lines' or 'text'")

    lines = [sanitize_ingredient_text(line) for line in raw_lines]
    lines = [line for line in lines if line]

    max_lines = app.config['MAX_INGREDIENT_LINES']
    if len(lines) > max_lines:
        raise PayloadError(f'At most {max_lines} ingredient lines per request')
    return lines


def _parsed_payload(parsed):
    payload = _record(parsed)
    payload['display_quantity'] = (
        float_to_fraction(parsed.quantity) if parsed.quantity is not None else None
    )
    payload['display_weight'] = (
        format_weight(parsed.unit_grams) if parsed.unit_grams is not None else None
    )
    payload['normalized_text'] = format_ingredient(parsed)
    return payload


def _weighed_ingredient(entry, index):
    """Build a ParsedIngredient from an already-weighed ingredient object."""
    entry = require_mapping(entry, f'ingredients[{index}]')
    name = sanitize_label(entry.get('ingredient_name'), 'ingredient_name')
    if not name:
        raise PayloadError(f"'ingredients[{index}].ingredient_name' is required")
    name = name.lower()
    unit_grams = entry.get('unit_grams')
    if unit_grams is not None:
        unit_grams = require_number(unit_grams, f'ingredients[{index}].unit_grams')
    is_flour = entry.get('is_flour')
    return ParsedIngredient(
        raw_text=name,
        quantity=None,
        unit=None,
        ingredient_name=name,
        prep_notes=None,
        unit_grams=unit_grams,
        is_flour=bool(is_flour) if is_flour is not None else 'flour' in name,
    )


def _scaling_input(body):
    scaling = require_mapping(body.get('scaling', {'mode': 'multiplier'}), 'scaling')
    mode = scaling.get('mode', 'multiplier')
    if mode not in VALID_SCALING_MODES:
        raise PayloadError(f"Unknown scaling mode '{mode}'")

    values = {}
    for key in SCALING_NUMBER_KEYS:
        value = scaling.get(key)
        values[key] = require_number(value, f'scaling.{key}') if value is not None else None
    if values['multiplier'] is not None and values['multiplier'] < 0:
        raise PayloadError("'scaling.multiplier' must not be negative")

    return ScalingInput(mode=mode, **values)


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(PayloadError)
def handle_payload_error(error):
    logger.info("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({'error': str(error)}), 400


@app.errorhandler(404)
def handle_not_found(error):
    return jsonify({'error': 'Not found'}), 404


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    return jsonify({
        'service': 'microbatch-engine',
        'timeline_templates': [template.id for template in list_templates()],
    })


# ============================================
# ROUTES - INGREDIENTS & SCALING
# ============================================

@app.route('/api/ingredients/parse', methods=['POST'])
def ingredients_parse():
    """Parse raw ingredient lines into structured records."""
    lines = _ingredient_lines(_json_body())
    parsed = parse_ingredients(lines)
    unweighed = sum(1 for item in parsed if item.unit_grams is None)
    logger.info("Parsed %d ingredient lines (%d without weight)", len(parsed), unweighed)
    return jsonify({'ingredients': [_parsed_payload(item) for item in parsed]})


@app.route('/api/recipes/scale', methods=['POST'])
def recipe_scale():
    """
    Scale a recipe into a weigh sheet.

    Ingredients come either as raw 'lines' / 'text' to be parsed, or as
    already-weighed 'ingredients' objects (ingredient_name, unit_grams,
    is_flour).
    """
    body = _json_body()
    if 'ingredients' in body:
        entries = require_list(body['ingredients'], 'ingredients',
                               max_items=app.config['MAX_INGREDIENT_LINES'])
        ingredients = [_weighed_ingredient(entry, i) for i, entry in enumerate(entries)]
    else:
        ingredients = [parse_ingredient(line) for line in _ingredient_lines(body)]

    factor = calculate_scaling_factor(_scaling_input(body))
    scaled = scale_ingredients(ingredients, factor)

    total_grams = sum(item.scaled_grams for item in scaled)
    weigh_sheet = []
    for item in scaled:
        payload = _record(item)
        payload['bakers_percentage_display'] = format_percentage(item.bakers_percentage)
        weigh_sheet.append(payload)

    return jsonify({
        'factor': factor,
        'ingredients': weigh_sheet,
        'total_grams': total_grams,
        'total_display_weight': format_weight(total_grams),
    })


@app.route('/api/pans/volume', methods=['POST'])
def pan_volume():
    """Interior volume of a pan from its shape and dimensions in cm."""
    body = _json_body()
    shape = str(body.get('shape', '')).lower().strip()
    if shape not in VALID_PAN_SHAPES:
        raise PayloadError(f"Unknown pan shape '{shape}'")

    dimensions = {}
    for key in PAN_DIMENSION_KEYS:
        if body.get(key) is not None:
            dimensions[key] = require_number(body[key], key)

    volume = calculate_pan_volume(shape, dimensions)
    return jsonify({'shape': shape, 'volume_ml': volume, 'available': volume > 0})


# ============================================
# ROUTES - PRODUCTION
# ============================================

@app.route('/api/production/packaging', methods=['POST'])
def production_packaging():
    """Packaging needed for a set of batches, against current stock."""
    body = _json_body()
    batches = []
    for i, entry in enumerate(require_list(body.get('batches'), 'batches')):
        entry = require_mapping(entry, f'batches[{i}]')
        specs = []
        for j, spec in enumerate(require_list(entry.get('packaging', []), f'batches[{i}].packaging')):
            spec = require_mapping(spec, f'batches[{i}].packaging[{j}]')
            if spec.get('packaging_type_id') is None:
                raise PayloadError(f"'batches[{i}].packaging[{j}].packaging_type_id' is required")
            specs.append(PackagingSpec(
                packaging_type_id=safe_int(spec['packaging_type_id']),
                name=sanitize_label(spec.get('name'), 'packaging_name', default='Packaging'),
                quantity_per_yield=require_number(
                    spec.get('quantity_per_yield'), f'batches[{i}].packaging[{j}].quantity_per_yield'
                ),
                current_stock=safe_int(spec.get('current_stock'), default=0),
                reorder_threshold=safe_int(spec.get('reorder_threshold'), default=0),
            ))
        batches.append(PackagingBatch(
            target_quantity=require_number(entry.get('target_quantity'), f'batches[{i}].target_quantity'),
            packaging=specs,
        ))

    needs = calculate_packaging_needs(batches)
    return jsonify({'packaging': [_record(need) for need in needs]})


@app.route('/api/production/shopping-list', methods=['POST'])
def production_shopping_list():
    """
    Consolidated shopping list for a set of batches.

    Batch ingredients may be raw lines (parsed here) or objects with
    ingredient_id, ingredient_name and unit_grams.
    """
    body = _json_body()
    batches = []
    for i, entry in enumerate(require_list(body.get('batches'), 'batches')):
        entry = require_mapping(entry, f'batches[{i}]')
        ingredients = []
        raw_ingredients = require_list(entry.get('ingredients', []), f'batches[{i}].ingredients',
                                       max_items=app.config['MAX_INGREDIENT_LINES'])
        for j, item in enumerate(raw_ingredients):
            if isinstance(item, str):
                parsed = parse_ingredient(sanitize_ingredient_text(item))
                ingredients.append(ShoppingIngredient(
                    ingredient_name=parsed.ingredient_name,
                    unit_grams=parsed.unit_grams,
                ))
                continue
            item = require_mapping(item, f'batches[{i}].ingredients[{j}]')
            name = sanitize_label(item.get('ingredient_name'), 'ingredient_name')
            if not name:
                raise PayloadError(f"'batches[{i}].ingredients[{j}].ingredient_name' is required")
            unit_grams = item.get('unit_grams')
            if unit_grams is not None:
                unit_grams = require_number(unit_grams, f'batches[{i}].ingredients[{j}].unit_grams')
            ingredient_id = item.get('ingredient_id')
            ingredients.append(ShoppingIngredient(
                ingredient_name=name,
                unit_grams=unit_grams,
                ingredient_id=safe_int(ingredient_id, default=None) if ingredient_id is not None else None,
            ))
        batches.append(ShoppingBatch(
            name=sanitize_label(entry.get('name'), 'batch_name', default=f'Batch {i + 1}'),
            scaling_factor=safe_float(entry.get('scaling_factor'), default=1.0, min_val=0),
            ingredients=ingredients,
        ))

    items = aggregate_shopping_list(batches)
    return jsonify({'items': [_record(item) for item in items]})


# ============================================
# ROUTES - TIMELINES
# ============================================

@app.route('/api/timelines')
def timelines_list():
    """All timeline templates with their steps."""
    return jsonify({'templates': [_record(template) for template in list_templates()]})


@app.route('/api/timelines/<template_id>')
def timeline_generate(template_id):
    """
    Resolve a template against ?bake_at=<ISO timestamp>.

    ?format=ics returns a text/calendar download instead of JSON;
    ?location= is added to every calendar event.
    """
    template = get_template(template_id)
    if template is None:
        return jsonify({'error': f"Unknown timeline template '{template_id}'"}), 404

    bake_at = parse_datetime(request.args.get('bake_at'), 'bake_at')
    output_format = request.args.get('format', 'json').lower()
    if output_format not in VALID_TIMELINE_FORMATS:
        raise PayloadError(f"Unknown format '{output_format}'")

    steps = generate_timeline_from_template(template, bake_at)

    if output_format == 'ics':
        location = sanitize_label(request.args.get('location'), 'location') or None
        body = generate_ics(timeline_to_events(steps, location=location),
                            prodid=app.config['ICS_PRODID'])
        return Response(
            body,
            mimetype='text/calendar',
            headers={'Content-Disposition': f'attachment; filename="{template.id}.ics"'},
        )

    return jsonify({
        'template_id': template.id,
        'name': template.name,
        'bake_at': bake_at.isoformat(),
        'steps': [_record(step) for step in steps],
    })


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
