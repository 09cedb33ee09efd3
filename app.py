"""
Recipe API

Flask JSON backend for the recipe discovery front end. It proxies the
Spoonacular recipe API and stores per-user favourites, collections, meal
plans, shopping lists, notes and recipe images.
"""

import logging
import os
from datetime import datetime, timezone

from flask import Flask, current_app, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from config import get_config
from models import db
from routes import register_blueprints
from services import init_recipe_api
from utils.errors import APIError

migrate = Migrate()

CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
CORS_HEADERS = ['Content-Type', 'Authorization', 'X-User-Id']

ENDPOINTS = [
    'GET /recipes/search?searchTerm=<term>&page=<page>',
    'GET /recipes/autocomplete?query=<query>&number=<1-25>',
    'GET /recipes/<recipeId>/summary',
    'GET /recipes/<recipeId>/information',
    'GET /recipes/<recipeId>/similar?number=<1-100>',
    'GET|POST|DELETE /recipes/favourite',
    'GET|POST|DELETE /recipes/notes',
    'GET|POST|DELETE /recipes/images',
    'GET|POST /collections',
    'GET|PUT|DELETE /collections/<collectionId>',
    'POST|DELETE /collections/<collectionId>/items',
    'GET|POST|DELETE /meal-plan',
    'GET|POST|PUT|DELETE /shopping-list',
    'GET /food/wine/pairing?food=<food>&maxPrice=<price>',
    'GET /food/wine/dishes?wine=<wine>',
    'POST /upload',
]


def configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )
    app.logger.setLevel(level)


def register_error_handlers(app):
    """Every failure leaves the API as {"error": ..., "message": ...}."""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        if error.status_code >= 500:
            current_app.logger.error("%s: %s", error.error, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        current_app.logger.warning("Uniqueness violation: %s", error.orig)
        return jsonify({'error': 'Resource already exists', 'message': str(error.orig)}), 409

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        messages = {
            404: 'Endpoint not found',
            405: 'Method not allowed',
            413: 'Payload too large',
        }
        body = {'error': messages.get(error.code, error.name)}
        if error.code not in messages and error.description:
            body['message'] = error.description
        response = jsonify(body)
        response.status_code = error.code
        if error.code == 405:
            allowed = error.get_headers()
            for name, value in allowed:
                if name.lower() == 'allow':
                    response.headers['Allow'] = value
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        current_app.logger.exception("Unhandled error: %s", error)
        return jsonify({'error': 'Internal server error', 'message': str(error) or 'Unknown error'}), 500


def register_health_route(app):
    prefix = (app.config.get('API_PREFIX') or '').rstrip('/')

    @app.route(prefix + '/', methods=['GET'])
    def health():
        return {
            'status': 'ok',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'endpoints': ENDPOINTS,
        }, 200


def create_app(config_name=None):
    """Build the Flask application for the given environment name."""
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.json.sort_keys = False

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)

    CORS(
        app,
        resources={r"/*": {"origins": app.config['CORS_ORIGINS']}},
        send_wildcard=True,
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        max_age=app.config['CORS_MAX_AGE'],
    )

    init_recipe_api(app)
    register_blueprints(app)
    register_health_route(app)
    register_error_handlers(app)

    if not app.config['RECIPE_API_KEYS']:
        app.logger.warning("No API_KEY found (checked API_KEY, API_KEY_2-10); recipe endpoints will fail")
    if not (app.config['AUTH0_DOMAIN'] and app.config['AUTH0_AUDIENCE']):
        app.logger.warning("Auth0 environment variables not configured, falling back to header-based auth")

    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    """Create missing tables. Schema changes go through `flask db upgrade`."""
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite'):
            # Enable SQLite foreign key enforcement
            from sqlalchemy import event

            @event.listens_for(db.engine, "connect")
            def set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        db.create_all()
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)


if __name__ == '__main__':
    application = create_app()
    init_db(application)
    # host='0.0.0.0' allows access from other devices on the network
    application.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)), use_reloader=False)
