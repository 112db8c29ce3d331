# File: library_app/exceptions.py
"""Errors raised by the services and surfaced through the app's error handlers.

They are Werkzeug HTTP exceptions, so anything a route does not catch is
turned into the matching error page by the handlers registered in
``create_app``.
"""
from werkzeug.exceptions import HTTPException, BadRequest, NotFound as HTTPNotFound


class LibraryAppError(HTTPException):
    """Base class for all application errors."""


class NotFound(LibraryAppError, HTTPNotFound):
    """A lookup by id found nothing."""

    def __init__(self, entity, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} was not found.")


class MissingParameter(LibraryAppError, BadRequest):
    """Required form fields were absent or unusable."""

    def __init__(self, *fields):
        self.fields = tuple(fields)
        super().__init__(f"Missing or invalid parameter(s): {', '.join(self.fields)}")
