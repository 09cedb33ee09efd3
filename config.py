"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name, default=False):
    """Read a boolean flag such as 'true', '1' or 'yes' from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _strip_quotes(value):
    return value.strip().strip('"').strip("'") if value else ''


def load_api_keys():
    """
    Collect the Spoonacular keys in priority order.

    API_KEY comes first, then API_KEY_2 .. API_KEY_10. Empty values and
    surrounding quotes (common in copied .env files) are ignored.
    """
    names = ['API_KEY'] + [f'API_KEY_{index}' for index in range(2, 11)]
    keys = []
    for name in names:
        key = _strip_quotes(os.environ.get(name))
        if key and key not in keys:
            keys.append(key)
    return keys


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    JSON_SORT_KEYS = False

    # All endpoints live under this prefix
    API_PREFIX = os.environ.get('API_PREFIX', '/api')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///recipes.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Spoonacular recipe API
    RECIPE_API_BASE_URL = os.environ.get('RECIPE_API_BASE_URL', 'https://api.spoonacular.com')
    RECIPE_API_TIMEOUT = float(os.environ.get('RECIPE_API_TIMEOUT', '15'))
    RECIPE_API_KEYS = load_api_keys()

    # Auth0 token checks
    AUTH0_DOMAIN = _strip_quotes(os.environ.get('AUTH0_DOMAIN'))
    AUTH0_AUDIENCE = _strip_quotes(os.environ.get('AUTH0_AUDIENCE'))
    AUTH_VERIFY_SIGNATURE = _env_flag('AUTH_VERIFY_SIGNATURE', False)

    # CORS settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    CORS_MAX_AGE = 86400  # 24 hours

    # Image hosting (Cloudinary); local storage is used when unset
    CLOUDINARY_CLOUD_NAME = _strip_quotes(os.environ.get('CLOUDINARY_CLOUD_NAME'))
    CLOUDINARY_API_KEY = _strip_quotes(os.environ.get('CLOUDINARY_API_KEY'))
    CLOUDINARY_API_SECRET = _strip_quotes(os.environ.get('CLOUDINARY_API_SECRET'))
    IMAGE_UPLOAD_TIMEOUT = float(os.environ.get('IMAGE_UPLOAD_TIMEOUT', '30'))

    # Upload settings
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'static', 'uploads'))
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max upload

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    AUTH_VERIFY_SIGNATURE = _env_flag('AUTH_VERIFY_SIGNATURE', True)


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RECIPE_API_KEYS = ['test-key']
    AUTH0_DOMAIN = 'example.auth0.com'
    AUTH0_AUDIENCE = 'https://recipes.example.com/api'
    AUTH_VERIFY_SIGNATURE = False
    CLOUDINARY_CLOUD_NAME = ''
    CLOUDINARY_API_KEY = ''
    CLOUDINARY_API_SECRET = ''


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
