# File: library_app/auth_gate.py
from flask import current_app, request, redirect, url_for, flash

from library_app.extensions import login_manager
from library_app.session import get_session

# Endpoints that require a logged-in user. Every other endpoint is public.
LOGIN_REQUIRED_ENDPOINTS = frozenset({
    'users.show',
    'library_users.create',
})

# POST-only gated endpoints can't be replayed as the post-login `next`; send
# the user back to the page the action lives on instead.
RETURN_PAGES = {
    'library_users.create': lambda view_args: url_for('libraries.show', id=view_args['library_id']),
}


def requires_login(endpoint):
    return endpoint in LOGIN_REQUIRED_ENDPOINTS


def require_logged_in():
    """Returns a redirect to the login page if nobody is logged in, else None."""
    if get_session().is_authenticated:
        return None
    current_app.logger.info(f"Auth_Gate.py - require_logged_in(): Anonymous request to '{request.endpoint}' redirected to login.")
    if request.method == 'GET':
        return login_manager.unauthorized()

    flash(login_manager.login_message, login_manager.login_message_category)
    return_page = RETURN_PAGES.get(request.endpoint)
    if return_page is None:
        return redirect(url_for(login_manager.login_view))
    return redirect(url_for(login_manager.login_view, next=return_page(request.view_args or {})))


def enforce_login_policy():
    if request.endpoint and requires_login(request.endpoint):
        return require_logged_in()
    return None


def init_app(app):
    app.before_request(enforce_login_policy)
