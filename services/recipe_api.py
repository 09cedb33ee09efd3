"""
Recipe API Client

Thin wrapper over the Spoonacular REST API. Each method maps onto one
endpoint, forwards its parameters and returns the decoded JSON unchanged.

Several API keys may be configured (API_KEY, API_KEY_2, ...). When a key
has used up its daily allowance the same call is repeated with the next
key; once every key is exhausted QuotaExceededError is raised, which the
app maps to HTTP 402. No usage is remembered between calls.
"""

import logging

import requests
from flask import current_app

from constants.search import RECIPES_PER_PAGE
from utils.errors import QuotaExceededError, RecipeAPIError

logger = logging.getLogger(__name__)

QUOTA_STATUS = 402


def _error_message(payload, response):
    if isinstance(payload, dict) and payload.get('message'):
        return str(payload['message'])
    return (response.text or '').strip()[:500]


def is_quota_response(response, payload):
    """True when Spoonacular reports an exhausted allowance."""
    if response.status_code == QUOTA_STATUS:
        return True
    if isinstance(payload, dict):
        if payload.get('code') == QUOTA_STATUS:
            return True
        failed = payload.get('status') == 'failure' or not response.ok
        if failed and 'limit' in str(payload.get('message', '')).lower():
            return True
    return False


class RecipeAPIClient:
    """Spoonacular client bound to a list of API keys."""

    def __init__(self, api_keys, base_url='https://api.spoonacular.com', timeout=15, session=None):
        self.api_keys = [key for key in (api_keys or []) if key]
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config):
        return cls(
            config.get('RECIPE_API_KEYS', []),
            base_url=config.get('RECIPE_API_BASE_URL', 'https://api.spoonacular.com'),
            timeout=config.get('RECIPE_API_TIMEOUT', 15),
        )

    def _get(self, path, params=None):
        """
        GET `path` with each configured key until one is not over quota.

        Raises:
            RecipeAPIError: network failure, non-JSON or non-2xx response
            QuotaExceededError: every key is over its allowance
        """
        if not self.api_keys:
            raise RecipeAPIError("API Key not found")

        url = f"{self.base_url}{path}"
        last_message = None

        for index, key in enumerate(self.api_keys):
            query = dict(params or {})
            query['apiKey'] = key

            try:
                response = self.session.get(url, params=query, timeout=self.timeout)
            except requests.RequestException as exc:
                raise RecipeAPIError(f"Recipe API request failed: {exc}") from exc

            try:
                payload = response.json()
            except ValueError:
                payload = None

            if is_quota_response(response, payload):
                last_message = _error_message(payload, response)
                logger.warning(
                    "Recipe API key %d/%d reached its limit on %s",
                    index + 1, len(self.api_keys), path,
                )
                continue

            if not response.ok or (isinstance(payload, dict) and payload.get('status') == 'failure'):
                raise RecipeAPIError(
                    f"Recipe API responded with {response.status_code}: {_error_message(payload, response)}",
                    upstream_status=response.status_code,
                )

            if payload is None:
                raise RecipeAPIError("Recipe API did not return JSON")

            return payload

        logger.warning("All recipe API keys have reached their daily limit")
        raise QuotaExceededError(
            last_message or "All API keys have reached their daily limit",
            upstream_status=QUOTA_STATUS,
        )

    def search_recipes(self, search_term, page=1, filters=None):
        """complexSearch, 24 results per page (page 1 = offset 0)."""
        page = max(1, int(page or 1))
        params = {
            'query': search_term or '',
            'number': RECIPES_PER_PAGE,
            'offset': (page - 1) * RECIPES_PER_PAGE,
        }
        for name, value in (filters or {}).items():
            if value is not None:
                params[name] = value
        return self._get('/recipes/complexSearch', params)

    def autocomplete(self, query, number=10):
        return self._get('/recipes/autocomplete', {'query': query.strip(), 'number': number})

    def get_summary(self, recipe_id):
        return self._get(f'/recipes/{recipe_id}/summary')

    def get_information(self, recipe_id, include_nutrition=False, add_wine_pairing=False, add_taste_data=False):
        params = {}
        if include_nutrition:
            params['includeNutrition'] = 'true'
        if add_wine_pairing:
            params['addWinePairing'] = 'true'
        if add_taste_data:
            params['addTasteData'] = 'true'
        return self._get(f'/recipes/{recipe_id}/information', params)

    def get_similar(self, recipe_id, number=10):
        return self._get(f'/recipes/{recipe_id}/similar', {'number': number})

    def get_bulk_information(self, recipe_ids):
        """Details for several recipes, wrapped as {"results": [...]}."""
        ids = ','.join(str(recipe_id) for recipe_id in recipe_ids)
        return {'results': self._get('/recipes/informationBulk', {'ids': ids})}

    def get_wine_pairing(self, food, max_price=None):
        params = {'food': food.strip()}
        if max_price is not None:
            params['maxPrice'] = max_price
        return self._get('/food/wine/pairing', params)

    def get_dishes_for_wine(self, wine):
        return self._get('/food/wine/dishes', {'wine': wine.strip()})


def init_recipe_api(app):
    app.extensions['recipe_api'] = RecipeAPIClient.from_config(app.config)


def get_recipe_api():
    """Client registered on the current app (tests may swap it out)."""
    return current_app.extensions['recipe_api']
