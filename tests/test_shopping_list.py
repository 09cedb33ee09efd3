"""
Tests for /api/shopping-list.
"""

import pytest

ITEMS = [
    {'name': 'Spaghetti', 'quantity': '500', 'unit': 'g', 'category': 'Pasta', 'recipeIds': [716429]},
    {'name': 'Garlic', 'quantity': 3},
]


@pytest.fixture
def shopping_list(client, user_headers):
    response = client.post(
        '/api/shopping-list',
        json={'name': 'Weekly shop', 'recipeIds': [716429, '715538'], 'items': ITEMS},
        headers=user_headers('user-a'),
    )
    assert response.status_code == 201
    return response.get_json()


def test_create_normalizes_items(shopping_list):
    assert shopping_list['name'] == 'Weekly shop'
    assert shopping_list['recipeIds'] == [716429, 715538]
    assert shopping_list['isCompleted'] is False
    spaghetti, garlic = shopping_list['items']
    assert spaghetti == {
        'name': 'Spaghetti', 'quantity': '500', 'category': 'Pasta',
        'recipeIds': [716429], 'checked': False, 'unit': 'g',
    }
    assert garlic['quantity'] == '3'
    assert garlic['category'] == 'Other'
    assert 'unit' not in garlic


def test_create_requires_fields(client, user_headers):
    response = client.post('/api/shopping-list', json={'name': 'Shop'}, headers=user_headers())
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Name, recipe IDs array, and items are required'


def test_create_rejects_nameless_items(client, user_headers):
    response = client.post(
        '/api/shopping-list',
        json={'name': 'Shop', 'recipeIds': [], 'items': [{'quantity': '1'}]},
        headers=user_headers(),
    )
    assert response.status_code == 400


def test_list_is_newest_first(client, user_headers, shopping_list):
    headers = user_headers('user-a')
    client.post('/api/shopping-list', json={'name': 'Party', 'recipeIds': [], 'items': []}, headers=headers)

    response = client.get('/api/shopping-list', headers=headers)
    assert response.status_code == 200
    assert [entry['name'] for entry in response.get_json()] == ['Party', 'Weekly shop']


def test_update(client, user_headers, shopping_list):
    items = [dict(item, checked=True) for item in ITEMS]
    response = client.put(
        '/api/shopping-list',
        json={'id': shopping_list['id'], 'items': items, 'isCompleted': True},
        headers=user_headers('user-a'),
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body['name'] == 'Weekly shop'
    assert body['isCompleted'] is True
    assert all(item['checked'] for item in body['items'])


def test_update_requires_id(client, user_headers):
    response = client.put('/api/shopping-list', json={'name': 'x'}, headers=user_headers())
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Shopping list ID is required'


def test_delete(client, user_headers, shopping_list):
    headers = user_headers('user-a')
    response = client.delete('/api/shopping-list', json={'id': shopping_list['id']}, headers=headers)
    assert response.status_code == 204
    assert client.get('/api/shopping-list', headers=headers).get_json() == []


def test_other_users_list_is_not_found(client, user_headers, shopping_list):
    other = user_headers('user-b')
    response = client.put('/api/shopping-list', json={'id': shopping_list['id'], 'name': 'Mine'}, headers=other)
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Shopping list not found'

    response = client.delete('/api/shopping-list', json={'id': shopping_list['id']}, headers=other)
    assert response.status_code == 404

    assert client.get('/api/shopping-list', headers=other).get_json() == []


def test_oversized_id_is_not_found(client, user_headers):
    response = client.delete('/api/shopping-list', json={'id': 10 ** 20}, headers=user_headers())
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Shopping list not found'
