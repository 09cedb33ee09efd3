"""
Tests for /api/meal-plan.
"""

WEEK = '2025-01-06'


def add_meal(client, headers, **overrides):
    body = {
        'weekStart': WEEK,
        'recipeId': 716429,
        'recipeTitle': 'Pasta with Garlic',
        'recipeImage': 'https://img.spoonacular.com/recipes/716429-312x231.jpg',
        'dayOfWeek': 0,
        'mealType': 'dinner',
    }
    body.update(overrides)
    return client.post('/api/meal-plan', json=body, headers=headers)


def test_add_meal_creates_week(client, user_headers):
    response = add_meal(client, user_headers())
    assert response.status_code == 201
    meal = response.get_json()
    assert meal['recipeId'] == 716429
    assert meal['dayOfWeek'] == 0
    assert meal['mealType'] == 'dinner'
    assert meal['servings'] == 1
    assert meal['order'] == 1

    response = client.get(f'/api/meal-plan?weekStart={WEEK}', headers=user_headers())
    assert response.status_code == 200
    plan = response.get_json()
    assert plan['weekStart'] == WEEK
    assert plan['userId'] == 'user-a'
    assert [m['id'] for m in plan['meals']] == [meal['id']]


def test_one_plan_per_week(client, user_headers):
    headers = user_headers()
    first = add_meal(client, headers).get_json()
    second = add_meal(client, headers, recipeId=1, recipeTitle='Salad').get_json()
    assert first['mealPlanId'] == second['mealPlanId']
    assert second['order'] == 2


def test_iso_datetime_week_start(client, user_headers):
    headers = user_headers()
    add_meal(client, headers, weekStart='2025-01-06T00:00:00.000Z')
    response = client.get(f'/api/meal-plan?weekStart={WEEK}', headers=headers)
    assert response.status_code == 200


def test_meals_are_ordered_by_day(client, user_headers):
    headers = user_headers()
    add_meal(client, headers, dayOfWeek=3, recipeId=3)
    add_meal(client, headers, dayOfWeek=1, recipeId=1)

    plan = client.get(f'/api/meal-plan?weekStart={WEEK}', headers=headers).get_json()
    assert [m['dayOfWeek'] for m in plan['meals']] == [1, 3]


def test_get_requires_week_start(client, user_headers):
    response = client.get('/api/meal-plan', headers=user_headers())
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Week start date is required'


def test_get_missing_week(client, user_headers):
    response = client.get('/api/meal-plan?weekStart=2030-01-07', headers=user_headers())
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Meal plan not found'


def test_add_meal_validation(client, user_headers):
    headers = user_headers()

    response = add_meal(client, headers, recipeTitle='')
    assert response.status_code == 400

    response = add_meal(client, headers, dayOfWeek=7)
    assert response.status_code == 400
    assert 'Day of week' in response.get_json()['error']

    response = add_meal(client, headers, mealType='brunch')
    assert response.status_code == 400
    assert 'Meal type' in response.get_json()['error']

    response = add_meal(client, headers, servings=0)
    assert response.status_code == 400


def test_meal_type_is_case_insensitive(client, user_headers):
    response = add_meal(client, user_headers(), mealType='Lunch')
    assert response.status_code == 201
    assert response.get_json()['mealType'] == 'lunch'


def test_remove_meal(client, user_headers):
    headers = user_headers()
    meal = add_meal(client, headers).get_json()

    response = client.delete('/api/meal-plan', json={'itemId': meal['id']}, headers=headers)
    assert response.status_code == 204

    response = client.delete('/api/meal-plan', json={'itemId': meal['id']}, headers=headers)
    assert response.status_code == 404


def test_remove_meal_requires_item_id(client, user_headers):
    response = client.delete('/api/meal-plan', json={}, headers=user_headers())
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Item ID is required'


def test_plans_are_private(client, user_headers):
    meal = add_meal(client, user_headers('user-a')).get_json()
    other = user_headers('user-b')

    response = client.get(f'/api/meal-plan?weekStart={WEEK}', headers=other)
    assert response.status_code == 404

    response = client.delete('/api/meal-plan', json={'itemId': meal['id']}, headers=other)
    assert response.status_code == 404

    # user-b adding to the same week gets a separate plan
    theirs = add_meal(client, other).get_json()
    assert theirs['mealPlanId'] != meal['mealPlanId']


def test_week_start_with_trailing_garbage(client, user_headers):
    headers = user_headers()
    response = client.get('/api/meal-plan?weekStart=2025-01-06garbage', headers=headers)
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Week start must be an ISO-8601 date'

    assert add_meal(client, headers, weekStart='2025-01-06garbage').status_code == 400


def test_long_image_url_is_rejected(client, user_headers):
    headers = user_headers()
    response = add_meal(client, headers, recipeImage='https://img.spoonacular.com/' + 'a' * 500)
    assert response.status_code == 400

    # Nothing was created for the week
    response = client.get(f'/api/meal-plan?weekStart={WEEK}', headers=headers)
    assert response.status_code == 404


def test_oversized_ids(client, user_headers):
    headers = user_headers()
    assert add_meal(client, headers, recipeId=10 ** 20).status_code == 400

    response = client.delete('/api/meal-plan', json={'itemId': '99999999999999999999'}, headers=headers)
    assert response.status_code == 404
