from flask import Flask, Blueprint, current_app, jsonify, render_template, request, session
from flask_migrate import Migrate

from config import get_config
from constants import CHECKLIST_FIELDS, DINNER, VIEW_MODES
from models import db, PlanEntry
from services import (
    ChecklistStateStore, ShoppingListError, ShoppingRepository, ValidationError,
    compute_shopping_list, group_rows, make_section_rank, qty_text,
)
from services import manual_items, planning
from services.repository import persistence
from utils.logging_utils import get_logger, setup_logging
from utils.week import parse_date, start_of_week_monday, week_days

logger = get_logger(__name__)

migrate = Migrate()
bp = Blueprint('shopping', __name__)


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    setup_logging(app.config.get('LOG_LEVEL'))

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(bp)
    app.register_error_handler(ShoppingListError, handle_service_error)
    return app


def handle_service_error(e):
    if e.status_code >= 500:
        logger.error("%s on %s %s: %s", type(e).__name__, request.method, request.path, e)
    return jsonify({'error': str(e)}), e.status_code


# ============================================
# REQUEST HELPERS
# ============================================

def _payload():
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _household_id():
    return planning.resolve_household_id(session.get('user_id'))


def _int_field(data, name):
    value = data.get(name)
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a number") from None


def _plan_week(data):
    """Plan week named by plan_week_id, checked against the acting household."""
    return planning.require_plan_week(_household_id(), _int_field(data, 'plan_week_id'))


def _week_start_arg():
    raw = request.args.get('week')
    if raw is None:
        return start_of_week_monday()
    day = parse_date(raw)
    if day is None:
        raise ValidationError("week must be YYYY-MM-DD")
    return start_of_week_monday(day)


def _checklist_patch(data):
    patch = {field: data[field] for field in CHECKLIST_FIELDS if field in data}
    if not request.is_json:
        # Form fields arrive as strings
        patch = {field: manual_items.parse_flag(value) for field, value in patch.items()}
    return patch


def _row_dict(row):
    d = row.to_dict()
    d['qty_text'] = qty_text(row)
    return d


def _shopping_view():
    """Everything the shopping list page and API render, for the requested week."""
    mode = request.args.get('mode', current_app.config['SHOPPING_DEFAULT_MODE'])
    if mode not in VIEW_MODES:
        raise ValidationError(f"Unknown view mode: {mode}")
    show_cupboard = request.args.get('show_cupboard', '').lower() in ('1', 'true', 'on')
    week_start = _week_start_arg()

    plan_week = planning.find_plan_week(_household_id(), week_start)
    view = {
        'week_start': week_start.isoformat(),
        'plan_week_id': None,
        'mode': mode,
        'show_cupboard': show_cupboard,
        'dinners': 0,
        'rows': [],
        'sections': [],
    }
    if plan_week is None:
        return view

    repository = ShoppingRepository()
    rows = compute_shopping_list(plan_week.id, repository)
    rank = make_section_rank(current_app.config['SHOPPING_SECTION_ORDER'])

    view['plan_week_id'] = plan_week.id
    view['dinners'] = sum(1 for d in repository.get_dinner_entries(plan_week.id) if d.recipe_id is not None)
    view['rows'] = rows
    view['sections'] = group_rows(rows, mode, show_cupboard, rank)
    return view


# ============================================
# ROUTES - SHOPPING LIST
# ============================================

@bp.route('/shopping')
def shopping_page():
    try:
        view = _shopping_view()
    except ShoppingListError as e:
        # Page-level error, never a partial list
        return render_template('shopping.html', error=str(e), view=None, qty_text=qty_text), e.status_code
    return render_template('shopping.html', error=None, view=view, qty_text=qty_text)


@bp.route('/api/shopping-list')
def shopping_list_api():
    view = _shopping_view()
    view['rows'] = [_row_dict(r) for r in view['rows']]
    view['sections'] = [
        {'section': s['section'], 'items': [_row_dict(r) for r in s['items']]}
        for s in view['sections']
    ]
    return jsonify(view)


@bp.route('/api/shopping-list/ingredient-state', methods=['POST'])
def shopping_ingredient_state():
    data = _payload()
    plan_week = _plan_week(data)
    store = ChecklistStateStore(ShoppingRepository())
    store.set_ingredient_state(
        plan_week.id,
        _int_field(data, 'ingredient_id'),
        data.get('unit') or '',
        _checklist_patch(data),
    )
    return jsonify({'ok': True})


@bp.route('/api/shopping-list/manual-state', methods=['POST'])
def shopping_manual_state():
    data = _payload()
    plan_week = _plan_week(data)
    store = ChecklistStateStore(ShoppingRepository())
    store.set_manual_state(plan_week.id, _int_field(data, 'manual_item_id'), _checklist_patch(data))
    return jsonify({'ok': True})


@bp.route('/api/shopping-list/reset', methods=['POST'])
def shopping_reset():
    plan_week = _plan_week(_payload())
    store = ChecklistStateStore(ShoppingRepository())
    ingredient_count, manual_count = store.reset(plan_week.id)
    return jsonify({'ok': True, 'cleared': {'ingredient': ingredient_count, 'manual': manual_count}})


@bp.route('/api/shopping-list/manual-items', methods=['POST'])
def shopping_manual_add():
    data = _payload()
    plan_week = _plan_week(data)
    item = manual_items.add_manual_item(ShoppingRepository(), plan_week.id, data)
    return jsonify({'ok': True, 'item': {
        'id': item.id,
        'name': item.name,
        'category': item.category,
        'qty': item.qty,
        'unit': item.unit,
        'carry_forward': item.carry_forward,
    }}), 201


@bp.route('/api/shopping-list/manual-items/<int:item_id>', methods=['DELETE'])
def shopping_manual_delete(item_id):
    data = request.args.to_dict()
    data.update(_payload())
    plan_week = _plan_week(data)
    manual_items.delete_manual_item(ShoppingRepository(), plan_week.id, item_id)
    return jsonify({'ok': True})


# ============================================
# ROUTES - MEAL PLAN
# ============================================

@bp.route('/api/plan')
def plan_week_api():
    household_id = _household_id()
    plan_week = planning.get_or_create_plan_week(household_id, _week_start_arg())

    with persistence('load plan'):
        dinners = {
            e.entry_date: e
            for e in PlanEntry.query.filter_by(plan_week_id=plan_week.id, meal=DINNER).all()
        }
    days = []
    for day in week_days(plan_week.week_start):
        entry = dinners.get(day)
        days.append({
            'date': day.isoformat(),
            'dow': day.strftime('%a'),
            'recipe_id': entry.recipe_id if entry else None,
            'servings_override': entry.servings_override if entry else None,
        })
    return jsonify({'plan_week_id': plan_week.id, 'week_start': plan_week.week_start.isoformat(), 'days': days})


@bp.route('/api/plan/dinner', methods=['POST'])
def plan_set_dinner():
    data = _payload()
    entry_date = parse_date(data.get('entry_date'))
    if entry_date is None:
        raise ValidationError("entry_date must be YYYY-MM-DD")

    plan_week = planning.get_or_create_plan_week(_household_id(), entry_date)
    action = planning.set_dinner(
        plan_week,
        entry_date,
        recipe_id=data.get('recipe_id'),
        servings_override=data.get('servings_override'),
    )
    return jsonify({'ok': True, 'action': action, 'plan_week_id': plan_week.id})


@bp.route('/api/plan/clear', methods=['POST'])
def plan_clear():
    plan_week = planning.find_plan_week(_household_id(), _week_start_arg())
    if plan_week is None:
        return jsonify({'ok': True, 'deleted': 0})
    return jsonify({'ok': True, 'deleted': planning.clear_plan_week(plan_week)})


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
