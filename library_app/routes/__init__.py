# File: library_app/routes/__init__.py
from . import users, sessions, libraries, library_users

blueprints = (
    users.bp,
    sessions.bp,
    libraries.bp,
    library_users.bp,
)
