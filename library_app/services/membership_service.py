# File: library_app/services/membership_service.py
from flask import current_app
from library_app import repositories


def user_with_libraries(user_id):
    """Returns the user and the libraries they belong to."""
    user = repositories.users.get_by_id(user_id)
    return user, list(user.libraries)


def libraries_for_user(user_id):
    return user_with_libraries(user_id)[1]


def add_user_to_library(library_id, user):
    """Adds ``user`` to the library's members.

    Membership is a set: adding someone who already belongs is a no-op.
    """
    library = repositories.libraries.get_by_id(library_id)
    if user in library.users:
        current_app.logger.info(f"Membership_Service.py - add_user_to_library(): User {user.id} already belongs to library {library.id}.")
        return library
    library.users.append(user)
    repositories.libraries.commit()
    current_app.logger.info(f"Membership_Service.py - add_user_to_library(): Added user {user.id} to library {library.id}.")
    return library
