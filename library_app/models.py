# File: library_app/models.py
from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import UserMixin
from library_app.extensions import db

# Many-to-many relationship table for library membership
library_users = db.Table('library_users',
    db.Column('library_id', db.Integer, db.ForeignKey('libraries.id'), primary_key=True),
    db.Column('user_id', db.Integer, db.ForeignKey('users.id'), primary_key=True)
)


class User(db.Model, UserMixin):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(255), nullable=False)
    last_name = db.Column(db.String(255), nullable=False)
    # Indexed for login lookups; uniqueness is not enforced.
    email = db.Column(db.String(255), nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    libraries = db.relationship('Library', secondary=library_users, lazy='select',
                                back_populates='users')

    def __repr__(self):
        return f'<User {self.email}>'

    # Authentication Methods
    def set_password(self, password):
        self.password_hash = generate_password_hash(password, method='pbkdf2:sha256')

    def check_password(self, password):
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()


class Library(db.Model):
    __tablename__ = 'libraries'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    floor_count = db.Column(db.Integer, nullable=False)
    floor_area = db.Column(db.Integer, nullable=False)

    users = db.relationship('User', secondary=library_users, lazy='select',
                            back_populates='libraries')

    def __repr__(self):
        return f'<Library {self.name}>'
