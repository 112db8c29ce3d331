# File: library_app/__init__.py
import os
import logging
from logging.handlers import RotatingFileHandler
from werkzeug.middleware.proxy_fix import ProxyFix
from flask import Flask, render_template, current_app

from .config import config
from .extensions import (
    db,
    migrate,
    login_manager,
    csrf,
)
from . import auth_gate
from .session import get_session


def configure_logging(app):
    log_level_name = os.environ.get('FLASK_LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    app.logger.setLevel(log_level)

    if not app.debug and not app.testing:
        log_dir = 'logs'
        if not os.path.exists(log_dir):
            try: os.mkdir(log_dir)
            except OSError: app.logger.error(f"Init.py - configure_logging(): Could not create '{log_dir}' directory for file logging.")

        if os.path.exists(log_dir):
            file_handler = RotatingFileHandler(os.path.join(log_dir, 'library_app.log'), maxBytes=10240, backupCount=10)
            file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'))
            file_handler.setLevel(log_level)
            app.logger.addHandler(file_handler)
            app.logger.info(f"Init.py - configure_logging(): File logging configured. Level: {log_level_name}")

    return log_level_name


def register_error_handlers(app):
    @app.errorhandler(400)
    def bad_request_page(error): return render_template("errors/400.html", error=error), 400
    @app.errorhandler(404)
    def page_not_found(error): return render_template("errors/404.html", error=error), 404
    @app.errorhandler(405)
    def method_not_allowed_page(error): return render_template("errors/405.html", error=error), 405
    @app.errorhandler(500)
    def server_error_page(error): return render_template("errors/500.html"), 500


def create_app(config_name=None):
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'default')

    app = Flask(__name__, instance_relative_config=True)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    log_level_name = configure_logging(app)
    app.logger.info(f"{app.config['APP_NAME']} starting (config: {config_name}, log level: {log_level_name})")

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)

    from .routes import blueprints
    for blueprint in blueprints:
        app.register_blueprint(blueprint)

    auth_gate.init_app(app)
    register_error_handlers(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models import User
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            current_app.logger.warning(f"Init.py - load_user(): Ignoring malformed session user id {user_id!r}")
            return None

    @app.context_processor
    def inject_session_context():
        return {
            'app_name': app.config.get('APP_NAME', 'Library App'),
            'session_user': get_session().current_user(),
        }

    return app
