"""Tests for the shopping list and plan HTTP endpoints."""

import pytest

from models import ManualShoppingItem

from conftest import WEEK_START, day

WEEK = WEEK_START.isoformat()


def _list(client, **params):
    params.setdefault('week', WEEK)
    resp = client.get('/api/shopping-list', query_string=params)
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()


def _set_dinner(client, offset, recipe_id, servings=None):
    resp = client.post('/api/plan/dinner', json={
        'entry_date': day(offset).isoformat(),
        'recipe_id': recipe_id,
        'servings_override': servings,
    })
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()


def test_requires_household(client, household):
    resp = client.get('/api/shopping-list', query_string={'week': WEEK})
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'No household found.'}


def test_no_plan_week_yet(logged_in, household):
    data = _list(logged_in)
    assert data['plan_week_id'] is None
    assert data['rows'] == []
    assert data['week_start'] == WEEK


def test_empty_week(logged_in, plan_week):
    data = _list(logged_in)
    assert data['plan_week_id'] == plan_week.id
    assert data['rows'] == []
    assert data['sections'] == []
    assert data['dinners'] == 0


def test_full_flow(logged_in, kitchen):
    created = _set_dinner(logged_in, 0, kitchen.omelette.id, servings=6)
    plan_week_id = created['plan_week_id']
    _set_dinner(logged_in, 2, kitchen.omelette.id)

    resp = logged_in.post('/api/shopping-list/manual-items', json={
        'plan_week_id': plan_week_id, 'name': 'Eggs', 'category': 'Dairy', 'qty': '12', 'unit': 'each',
    })
    assert resp.status_code == 201
    manual_id = resp.get_json()['item']['id']

    data = _list(logged_in)
    assert data['dinners'] == 2
    rows = {(r['kind'], r.get('ingredient_id') or r.get('manual_item_id')): r for r in data['rows']}

    # omelette: 6/2 + 2/2 = 4
    eggs = rows[('ingredient', kitchen.eggs.id)]
    assert eggs['total_qty'] == pytest.approx(12)
    assert eggs['qty_text'] == '12 each'
    assert rows[('ingredient', kitchen.onion.id)]['qty_text'] == '2 each'
    assert rows[('manual', manual_id)]['name'] == 'Eggs'
    assert [s['section'] for s in data['sections']] == ['Veg', 'Dairy']

    # tick and untick
    resp = logged_in.post('/api/shopping-list/ingredient-state', json={
        'plan_week_id': plan_week_id, 'ingredient_id': kitchen.eggs.id, 'unit': 'each', 'in_cupboard': True,
    })
    assert resp.status_code == 200
    resp = logged_in.post('/api/shopping-list/manual-state', json={
        'plan_week_id': plan_week_id, 'manual_item_id': manual_id, 'in_trolley': True,
    })
    assert resp.status_code == 200

    data = _list(logged_in, mode='shop')
    names = [(r['kind'], r['name']) for r in data['rows']]
    assert ('ingredient', 'Eggs') in names
    shown = [r['kind'] for s in data['sections'] for r in s['items'] if r['name'] == 'Eggs']
    assert shown == ['manual']

    # reset keeps manual items
    resp = logged_in.post('/api/shopping-list/reset', json={'plan_week_id': plan_week_id})
    assert resp.get_json() == {'ok': True, 'cleared': {'ingredient': 1, 'manual': 1}}
    resp = logged_in.post('/api/shopping-list/reset', json={'plan_week_id': plan_week_id})
    assert resp.get_json()['cleared'] == {'ingredient': 0, 'manual': 0}

    data = _list(logged_in)
    assert not any(r['in_cupboard'] or r['in_trolley'] for r in data['rows'])
    assert any(r['kind'] == 'manual' for r in data['rows'])

    # delete manual item
    resp = logged_in.delete(f'/api/shopping-list/manual-items/{manual_id}', query_string={'plan_week_id': plan_week_id})
    assert resp.status_code == 200
    assert ManualShoppingItem.query.count() == 0


def test_invalid_manual_item(logged_in, plan_week):
    resp = logged_in.post('/api/shopping-list/manual-items', json={
        'plan_week_id': plan_week.id, 'name': 'Milk', 'qty': 'lots',
    })
    assert resp.status_code == 400
    assert 'number' in resp.get_json()['error']

    resp = logged_in.post('/api/shopping-list/manual-items', json={'plan_week_id': plan_week.id, 'name': ''})
    assert resp.status_code == 400
    assert ManualShoppingItem.query.count() == 0


def test_manual_item_form_post(logged_in, plan_week):
    resp = logged_in.post('/api/shopping-list/manual-items', data={
        'plan_week_id': str(plan_week.id), 'name': 'Bin bags', 'carry_forward': 'on',
    })
    assert resp.status_code == 201
    assert resp.get_json()['item']['carry_forward'] is True


def test_other_households_week_is_not_found(logged_in, household, plan_week):
    resp = logged_in.post('/api/shopping-list/reset', json={'plan_week_id': plan_week.id + 100})
    assert resp.status_code == 404


def test_bad_checklist_payload(logged_in, plan_week):
    resp = logged_in.post('/api/shopping-list/ingredient-state', json={
        'plan_week_id': plan_week.id, 'ingredient_id': 1, 'unit': 'g', 'in_cupboard': 'yes',
    })
    assert resp.status_code == 400

    resp = logged_in.post('/api/shopping-list/ingredient-state', json={
        'plan_week_id': plan_week.id, 'ingredient_id': 'abc', 'in_cupboard': True,
    })
    assert resp.status_code == 400


def test_checklist_form_post(logged_in, kitchen, plan_week):
    resp = logged_in.post('/api/shopping-list/ingredient-state', data={
        'plan_week_id': str(plan_week.id), 'ingredient_id': str(kitchen.onion.id), 'unit': 'each',
        'in_cupboard': 'true', 'in_trolley': 'false',
    })
    assert resp.status_code == 200

    _set_dinner(logged_in, 0, kitchen.bolognese.id)
    onion = next(r for r in _list(logged_in)['rows'] if r['name'] == 'Onion')
    assert (onion['in_cupboard'], onion['in_trolley']) == (True, False)


def test_empty_checklist_patch_rejected(logged_in, plan_week):
    resp = logged_in.post('/api/shopping-list/ingredient-state', json={
        'plan_week_id': plan_week.id, 'ingredient_id': 1, 'unit': 'g',
    })
    assert resp.status_code == 400


def test_bad_query_params(logged_in, plan_week):
    assert logged_in.get('/api/shopping-list', query_string={'week': 'soon'}).status_code == 400
    assert logged_in.get('/api/shopping-list', query_string={'week': WEEK, 'mode': 'browse'}).status_code == 400


def test_plan_view_and_clear(logged_in, kitchen):
    _set_dinner(logged_in, 1, kitchen.bolognese.id, servings=2)

    resp = logged_in.get('/api/plan', query_string={'week': WEEK})
    plan = resp.get_json()
    assert len(plan['days']) == 7
    assert plan['days'][1]['recipe_id'] == kitchen.bolognese.id
    assert plan['days'][1]['servings_override'] == 2
    assert plan['days'][0]['recipe_id'] is None

    resp = logged_in.post('/api/plan/clear', query_string={'week': WEEK})
    assert resp.get_json() == {'ok': True, 'deleted': 1}


def test_set_dinner_unknown_recipe(logged_in, household):
    resp = logged_in.post('/api/plan/dinner', json={'entry_date': day(0).isoformat(), 'recipe_id': 4242})
    assert resp.status_code == 404


def test_shopping_page(logged_in, kitchen):
    _set_dinner(logged_in, 0, kitchen.bolognese.id)
    resp = logged_in.get('/shopping', query_string={'week': WEEK})
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert 'Beef mince' in html
    assert '500 g' in html


def test_shopping_page_error_is_page_level(client, household):
    resp = client.get('/shopping', query_string={'week': WEEK})
    assert resp.status_code == 404
    assert 'No household found.' in resp.get_data(as_text=True)
