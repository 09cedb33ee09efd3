"""
Tests for the recipe proxy endpoints and wine pairing.
"""

import pytest

from utils.errors import QuotaExceededError


# ============================================
# Search
# ============================================

def test_search_forwards_term_page_and_filters(client, recipe_api):
    recipe_api.responses['search_recipes'] = {'results': [{'id': 1}], 'totalResults': 1}
    response = client.get(
        '/api/recipes/search?searchTerm=pasta&page=3&cuisine=italian'
        '&maxReadyTime=30&minProtein=20&addRecipeInformation=true&ignorePantry=false'
    )
    assert response.status_code == 200
    assert response.get_json() == {'results': [{'id': 1}], 'totalResults': 1}

    method, (term, page, filters) = recipe_api.calls[-1]
    assert (method, term, page) == ('search_recipes', 'pasta', 3)
    assert filters == {
        'cuisine': 'italian',
        'maxReadyTime': 30,
        'minProtein': 20,
        'addRecipeInformation': 'true',
    }


def test_search_page_defaults_to_one(client, recipe_api):
    client.get('/api/recipes/search?searchTerm=soup')
    assert recipe_api.calls[-1][1][1] == 1


def test_search_rejects_bad_numbers(client):
    response = client.get('/api/recipes/search?searchTerm=soup&maxReadyTime=soon')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'maxReadyTime must be a number'


def test_quota_maps_to_402(client, recipe_api):
    recipe_api.error = QuotaExceededError("Your daily points limit of 150 has been reached.")
    response = client.get('/api/recipes/search?searchTerm=soup')
    assert response.status_code == 402
    body = response.get_json()
    assert body['error'] == 'Recipe API limit reached'
    assert 'limit' in body['message']


# ============================================
# Autocomplete
# ============================================

def test_autocomplete_defaults(client, recipe_api):
    response = client.get('/api/recipes/autocomplete?query=ch')
    assert response.status_code == 200
    assert recipe_api.calls[-1] == ('autocomplete', ('ch', 10))


def test_autocomplete_short_query(client, recipe_api):
    response = client.get('/api/recipes/autocomplete?query=c')
    assert response.status_code == 400
    assert recipe_api.calls == []


@pytest.mark.parametrize('number', ['0', '26', 'ten'])
def test_autocomplete_number_bounds(client, number):
    response = client.get(f'/api/recipes/autocomplete?query=chicken&number={number}')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Number must be between 1 and 25'


# ============================================
# Single recipe
# ============================================

def test_summary(client, recipe_api):
    recipe_api.responses['get_summary'] = {'id': 716429, 'title': 'Pasta', 'summary': '<b>Nice</b>'}
    response = client.get('/api/recipes/716429/summary')
    assert response.status_code == 200
    assert response.get_json()['title'] == 'Pasta'
    assert recipe_api.calls[-1] == ('get_summary', ('716429',))


def test_summary_rejects_non_numeric_id(client, recipe_api):
    response = client.get('/api/recipes/abc/summary')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Valid recipe ID is required'
    assert recipe_api.calls == []


def test_information_flags(client, recipe_api):
    response = client.get('/api/recipes/716429/information?includeNutrition=true')
    assert response.status_code == 200
    assert recipe_api.calls[-1] == ('get_information', ('716429', True, False, False))


def test_similar_default(client, recipe_api):
    response = client.get('/api/recipes/716429/similar')
    assert response.status_code == 200
    assert recipe_api.calls[-1] == ('get_similar', ('716429', 10))


@pytest.mark.parametrize('number', ['0', '150'])
def test_similar_number_bounds(client, recipe_api, number):
    response = client.get(f'/api/recipes/716429/similar?number={number}')
    assert response.status_code == 400
    assert recipe_api.calls == []


def test_similar_upper_bound_is_inclusive(client, recipe_api):
    response = client.get('/api/recipes/716429/similar?number=100')
    assert response.status_code == 200
    assert recipe_api.calls[-1] == ('get_similar', ('716429', 100))


# ============================================
# Wine
# ============================================

def test_wine_pairing(client, recipe_api):
    recipe_api.responses['get_wine_pairing'] = {'pairedWines': ['merlot']}
    response = client.get('/api/food/wine/pairing?food=steak&maxPrice=50')
    assert response.status_code == 200
    assert response.get_json() == {'pairedWines': ['merlot']}
    assert recipe_api.calls[-1] == ('get_wine_pairing', ('steak', 50.0))


def test_wine_pairing_validation(client):
    response = client.get('/api/food/wine/pairing')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Food name is required'

    response = client.get('/api/food/wine/pairing?food=steak&maxPrice=-1')
    assert response.status_code == 400


def test_dishes_for_wine(client, recipe_api):
    response = client.get('/api/food/wine/dishes?wine=malbec')
    assert response.status_code == 200
    assert recipe_api.calls[-1] == ('get_dishes_for_wine', ('malbec',))

    response = client.get('/api/food/wine/dishes?wine=')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Wine type is required'
