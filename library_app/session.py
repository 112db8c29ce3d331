# File: library_app/session.py
"""Request-scoped session context.

Flask-Login keeps the authenticated user's id in Flask's signed session
cookie; ``SessionContext`` is the one object handlers use to read or change
that identity. A new context is built for each request and cached on ``g``.
"""
from flask import g, current_app
from flask_login import login_user, logout_user, current_user


class SessionContext:

    def login(self, user):
        login_user(user)
        current_app.logger.info(f"Session.py - login(): User {user.id} logged in.")

    def logout(self):
        user = self.current_user()
        logout_user()
        if user is not None:
            current_app.logger.info(f"Session.py - logout(): User {user.id} logged out.")

    def current_user(self):
        """The logged-in User, or None when the session holds no valid id."""
        if current_user.is_authenticated:
            # Unwrap the werkzeug LocalProxy so callers get the model instance.
            return current_user._get_current_object()
        return None

    @property
    def is_authenticated(self):
        return self.current_user() is not None


def get_session():
    if 'session_context' not in g:
        g.session_context = SessionContext()
    return g.session_context
