"""
Tests for /api/recipes/favourite.
"""

from utils.errors import QuotaExceededError, RecipeAPIError


def favourite(client, headers, recipe_id):
    return client.post('/api/recipes/favourite', json={'recipeId': recipe_id}, headers=headers)


def test_empty_favourites_skip_recipe_api(client, user_headers, recipe_api):
    response = client.get('/api/recipes/favourite', headers=user_headers())
    assert response.status_code == 200
    assert response.get_json() == {'results': []}
    assert recipe_api.calls == []


def test_add_and_list(client, user_headers, recipe_api):
    headers = user_headers()
    response = favourite(client, headers, 716429)
    assert response.status_code == 201
    body = response.get_json()
    assert body['recipeId'] == 716429
    assert body['userId'] == 'user-a'

    favourite(client, headers, '715538')

    response = client.get('/api/recipes/favourite', headers=headers)
    assert response.status_code == 200
    assert [r['id'] for r in response.get_json()['results']] == [716429, 715538]
    assert recipe_api.calls[-1] == ('get_bulk_information', ([716429, 715538],))


def test_duplicate_is_409(client, user_headers):
    headers = user_headers()
    favourite(client, headers, 716429)
    response = favourite(client, headers, 716429)
    assert response.status_code == 409
    assert response.get_json()['error'] == 'Recipe is already in favorites'


def test_same_recipe_for_two_users(client, user_headers):
    assert favourite(client, user_headers('user-a'), 716429).status_code == 201
    assert favourite(client, user_headers('user-b'), 716429).status_code == 201


def test_add_requires_recipe_id(client, user_headers):
    response = client.post('/api/recipes/favourite', json={}, headers=user_headers())
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Recipe ID is required'


def test_delete_is_idempotent(client, user_headers):
    headers = user_headers()
    favourite(client, headers, 716429)

    for _ in range(2):
        response = client.delete('/api/recipes/favourite', json={'recipeId': 716429}, headers=headers)
        assert response.status_code == 204


def test_delete_only_touches_own_favourites(client, user_headers):
    favourite(client, user_headers('user-a'), 716429)
    response = client.delete('/api/recipes/favourite', json={'recipeId': 716429}, headers=user_headers('user-b'))
    assert response.status_code == 204

    response = favourite(client, user_headers('user-a'), 716429)
    assert response.status_code == 409


def test_quota_returns_placeholders(client, user_headers, recipe_api):
    headers = user_headers()
    favourite(client, headers, 716429)
    recipe_api.error = QuotaExceededError("Your daily points limit of 150 has been reached.")

    response = client.get('/api/recipes/favourite', headers=headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body['results'][0]['id'] == 716429
    assert body['results'][0]['_apiUnavailable'] is True
    assert body['results'][0]['image'] is None
    assert 'API daily limit' in body['_message']


def test_other_upstream_failure_is_500(client, user_headers, recipe_api):
    headers = user_headers()
    favourite(client, headers, 716429)
    recipe_api.error = RecipeAPIError("Recipe API responded with 503: unavailable", upstream_status=503)

    response = client.get('/api/recipes/favourite', headers=headers)
    assert response.status_code == 500
    body = response.get_json()
    assert body['error'] == 'Recipe API request failed'
    assert '503' in body['message']


def test_recipe_id_too_large_for_database(client, user_headers):
    response = favourite(client, user_headers(), 10 ** 20)
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Recipe ID is out of range'

    response = client.delete('/api/recipes/favourite', json={'recipeId': '99999999999999999999'}, headers=user_headers())
    assert response.status_code == 400
