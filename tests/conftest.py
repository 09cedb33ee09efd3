"""
Pytest configuration and shared fixtures.

Every test gets a fresh app on an in-memory SQLite database, with the
recipe API client replaced by FakeRecipeAPI so nothing leaves the process.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from models import db  # noqa: E402


class FakeRecipeAPI:
    """
    Stands in for RecipeAPIClient.

    Records each call as (method, args) and answers from `responses`.
    Setting `error` makes every call raise it instead.
    """

    def __init__(self):
        self.calls = []
        self.error = None
        self.responses = {}

    def _answer(self, method, *args):
        self.calls.append((method, args))
        if self.error is not None:
            raise self.error
        return self.responses.get(method, {'method': method})

    def search_recipes(self, search_term, page=1, filters=None):
        return self._answer('search_recipes', search_term, page, filters or {})

    def autocomplete(self, query, number=10):
        return self._answer('autocomplete', query, number)

    def get_summary(self, recipe_id):
        return self._answer('get_summary', recipe_id)

    def get_information(self, recipe_id, include_nutrition=False, add_wine_pairing=False, add_taste_data=False):
        return self._answer('get_information', recipe_id, include_nutrition, add_wine_pairing, add_taste_data)

    def get_similar(self, recipe_id, number=10):
        return self._answer('get_similar', recipe_id, number)

    def get_bulk_information(self, recipe_ids):
        self.calls.append(('get_bulk_information', (list(recipe_ids),)))
        if self.error is not None:
            raise self.error
        return {'results': [{'id': recipe_id, 'title': f'Recipe {recipe_id}'} for recipe_id in recipe_ids]}

    def get_wine_pairing(self, food, max_price=None):
        return self._answer('get_wine_pairing', food, max_price)

    def get_dishes_for_wine(self, wine):
        return self._answer('get_dishes_for_wine', wine)


@pytest.fixture
def app(tmp_path):
    """Flask app on the testing config with tables created."""
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    app.extensions['recipe_api'] = FakeRecipeAPI()

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def recipe_api(app):
    """The FakeRecipeAPI installed on the app."""
    return app.extensions['recipe_api']


@pytest.fixture
def user_headers():
    """
    Build identity headers for a user.

    Usage in tests:
        def test_something(client, user_headers):
            client.get('/api/collections', headers=user_headers('user-a'))
    """
    def build(user_id='user-a'):
        return {'X-User-Id': user_id}
    return build
