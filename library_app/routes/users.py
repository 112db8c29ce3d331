# File: library_app/routes/users.py
from flask import Blueprint, render_template, redirect, url_for, flash
from library_app.forms import SignupForm, permitted_params
from library_app.services import user_service
from library_app.session import get_session

bp = Blueprint('users', __name__)


@bp.route('/users', endpoint='index')
# The bottom decorator registers first, so url_for('users.index') builds '/'.
@bp.route('/', endpoint='index')
def index():
    """Display list of users"""
    users = user_service.list_users()
    return render_template('users/index.html', title="Users", users=users)


@bp.route('/users/new')
def new():
    """Display the user signup form"""
    return render_template('users/new.html', title="Sign Up", form=SignupForm())


@bp.route('/users', methods=['POST'])
def create():
    """Process signup form data, create the user and log them in"""
    user_params = permitted_params(SignupForm())
    user = user_service.create_user(user_params)
    get_session().login(user)
    flash(f"Welcome, {user.first_name}!", 'success')
    return redirect(url_for('users.show', id=user.id))


@bp.route('/users/<int:id>')
def show(id):
    """Display one specific user, by id"""
    user = user_service.get_user(id)
    return render_template('users/show.html', title=user.full_name, user=user)
