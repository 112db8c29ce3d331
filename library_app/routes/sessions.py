# File: library_app/routes/sessions.py
from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from urllib.parse import urlsplit, urljoin
from library_app.forms import LoginForm
from library_app.services import user_service
from library_app.session import get_session

bp = Blueprint('sessions', __name__)


def is_safe_url(target):
    host_url = urlsplit(request.host_url); redirect_url = urlsplit(urljoin(request.host_url, target))
    return redirect_url.scheme in ('http', 'https') and host_url.netloc == redirect_url.netloc


@bp.route('/login')
def new():
    """Display login form"""
    form = LoginForm()
    return render_template('sessions/new.html', title="Log In", form=form, next=request.args.get('next'))


@bp.route('/sessions', methods=['POST'])
def create():
    """Process login form data and start a session"""
    form = LoginForm()
    user = None
    if form.validate_on_submit():
        user = user_service.confirm({'email': (form.email.data or '').strip(),
                                     'password': form.password.data or ''})
    if user is None:
        current_app.logger.info("Sessions.py - create(): Failed login attempt.")
        flash('Invalid email or password.', 'danger')
        return redirect(url_for('sessions.new'))

    get_session().login(user)
    next_page = request.args.get('next') or request.form.get('next')
    if not next_page or not is_safe_url(next_page):
        next_page = url_for('users.show', id=user.id)
    return redirect(next_page)


@bp.route('/logout')
def destroy():
    """Logout current user"""
    get_session().logout()
    flash('You have been logged out.', 'info')
    return redirect(url_for('users.index'))
