# File: library_app/config.py
import os
import secrets

BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


class Config:
    """Base configuration class."""
    # Fallback secret key for signing the session cookie. Set SECRET_KEY in the
    # environment for anything that has to survive a restart.
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

    # Database configuration
    # Default to SQLite in the instance folder.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(BASE_DIR, 'instance', 'library_app.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    APP_NAME = "Library App"

    @staticmethod
    def init_app(app):
        # Create instance folder if it doesn't exist
        if not os.path.exists(app.instance_path):
            try:
                os.makedirs(app.instance_path)
                app.logger.info(f"Instance folder created at {app.instance_path}")
            except OSError as e:
                app.logger.error(f"Error creating instance folder at {app.instance_path}: {e}")


class DevelopmentConfig(Config):
    DEBUG = True
    # SQLALCHEMY_ECHO = True # Useful for debugging SQL queries


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:' # Use in-memory SQLite for tests
    WTF_CSRF_ENABLED = False # Disable CSRF for easier testing of forms
    SECRET_KEY = 'test_secret_key'


class ProductionConfig(Config):
    DEBUG = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
