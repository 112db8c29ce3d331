# File: library_app/services/user_service.py
from flask import current_app
from library_app import repositories

USER_FIELDS = ('first_name', 'last_name', 'email', 'password')


def list_users():
    return repositories.users.list()


def get_user(user_id):
    return repositories.users.get_by_id(user_id)


def create_user(fields):
    """Creates a user from the whitelisted signup fields; anything else is dropped."""
    permitted = {key: fields[key] for key in USER_FIELDS if key in fields}
    user = repositories.users.create(**permitted)
    current_app.logger.info(f"User_Service.py - create_user(): Created user {user.id} ({user.email}).")
    return user


def confirm(credentials):
    """Returns the user matching the given email and password, or None."""
    email = credentials.get('email')
    password = credentials.get('password')
    if not email or password is None:
        return None
    for user in repositories.users.list_by_email(email):
        if user.check_password(password):
            return user
    current_app.logger.info(f"User_Service.py - confirm(): No user matched credentials for '{email}'.")
    return None
