"""
WSGI entry point.

    gunicorn wsgi:application
"""

import os

from app import create_app, init_db

application = create_app(os.environ.get('FLASK_ENV', 'production'))
init_db(application)
