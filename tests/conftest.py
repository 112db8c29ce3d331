import pytest

from library_app import create_app
from library_app.extensions import db
from library_app.services import library_service, user_service


ADA = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@x.com",
    "password": "p1",
}

MAIN = {"name": "Main", "floor_count": 3, "floor_area": 1000}


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(app):
    # Service tests run inside an app context; route tests must not, so that
    # each test-client request gets its own `g` and login state.
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def _make_user(**overrides):
        fields = {**ADA, **overrides}
        with app.app_context():
            return user_service.create_user(fields).id

    return _make_user


@pytest.fixture()
def make_library(app):
    def _make_library(**overrides):
        fields = {**MAIN, **overrides}
        with app.app_context():
            return library_service.create_library(fields).id

    return _make_library


@pytest.fixture()
def login(client):
    def _login(email=ADA["email"], password=ADA["password"]):
        return client.post("/sessions", data={"email": email, "password": password})

    return _login
