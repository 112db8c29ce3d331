# File: library_app/extensions.py
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

# Database
db = SQLAlchemy()

# Migrations
migrate = Migrate()

# Login Manager
login_manager = LoginManager()
# Users who are not logged in and hit a gated page are redirected here.
login_manager.login_view = 'sessions.new'
login_manager.login_message = 'Please log in to access this page.'
login_manager.login_message_category = 'info'

# CSRF Protection
csrf = CSRFProtect()
