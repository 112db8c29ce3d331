# File: library_app/routes/library_users.py
from flask import Blueprint, render_template, redirect, url_for, flash
from library_app.services import membership_service
from library_app.session import get_session

bp = Blueprint('library_users', __name__)


@bp.route('/users/<int:user_id>/libraries')
def index(user_id):
    """Display list of libraries that a specific user belongs to"""
    user, libraries = membership_service.user_with_libraries(user_id)
    return render_template('library_users/index.html', title=f"{user.full_name}'s Libraries",
                           user=user, libraries=libraries)


@bp.route('/libraries/<int:library_id>/users', methods=['POST'])
def create(library_id):
    """Add the logged-in user to a library"""
    # Login is enforced by the auth gate before this runs.
    user = get_session().current_user()
    library = membership_service.add_user_to_library(library_id, user)
    flash(f"You are now a member of {library.name}.", 'success')
    return redirect(url_for('users.show', id=user.id))
