# File: library_app/repositories.py
"""Per-entity repositories for database access.

Routes and services go through these instead of building queries, so the
capability set each entity exposes (list, get_by_id, create) lives in one
place.
"""
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from library_app.extensions import db
from library_app.exceptions import NotFound
from library_app.models import User, Library


class Repository:
    model = None
    entity_name = None

    def list(self):
        return db.session.scalars(db.select(self.model)).all()

    def find(self, entity_id):
        """Returns the entity or None."""
        return db.session.get(self.model, entity_id)

    def get_by_id(self, entity_id):
        entity = self.find(entity_id)
        if entity is None:
            raise NotFound(self.entity_name, entity_id)
        return entity

    def create(self, **fields):
        entity = self.model(**fields)
        db.session.add(entity)
        self.commit()
        return entity

    def commit(self):
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Repositories.py - commit(): {self.entity_name} write failed: {e}", exc_info=True)
            raise


class UserRepository(Repository):
    model = User
    entity_name = 'User'

    def create(self, password=None, **fields):
        user = User(**fields)
        user.set_password(password or '')
        db.session.add(user)
        self.commit()
        return user

    def list_by_email(self, email):
        # Email is not unique, so several accounts may share one.
        return db.session.scalars(
            db.select(User).filter_by(email=email).order_by(User.id)
        ).all()


class LibraryRepository(Repository):
    model = Library
    entity_name = 'Library'


users = UserRepository()
libraries = LibraryRepository()
