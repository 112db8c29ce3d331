import pytest

from library_app.exceptions import NotFound
from library_app.services import user_service

from .conftest import ADA


def test_create_then_get_returns_matching_user(app_ctx):
    created = user_service.create_user(ADA)

    fetched = user_service.get_user(created.id)
    assert fetched.first_name == "Ada"
    assert fetched.last_name == "Lovelace"
    assert fetched.email == "ada@x.com"
    assert fetched.check_password("p1")


def test_password_is_not_stored_in_plain_text(app_ctx):
    user = user_service.create_user(ADA)
    assert user.password_hash != "p1"


def test_create_drops_fields_outside_whitelist(app_ctx):
    user = user_service.create_user({**ADA, "is_admin": True, "id": 999})
    assert user.id != 999
    assert not hasattr(user, "is_admin")


def test_list_users_returns_all(app_ctx):
    user_service.create_user(ADA)
    user_service.create_user({**ADA, "first_name": "Grace", "email": "grace@x.com"})

    names = sorted(u.first_name for u in user_service.list_users())
    assert names == ["Ada", "Grace"]


def test_get_missing_user_raises_not_found(app_ctx):
    with pytest.raises(NotFound) as exc_info:
        user_service.get_user(42)
    assert exc_info.value.code == 404
    assert exc_info.value.entity_id == 42


def test_confirm_matches_exact_credentials(app_ctx):
    ada = user_service.create_user(ADA)

    assert user_service.confirm({"email": "ada@x.com", "password": "wrong"}) is None
    assert user_service.confirm({"email": "ada@x.com", "password": "p1"}) == ada


def test_confirm_unknown_email_returns_none(app_ctx):
    user_service.create_user(ADA)
    assert user_service.confirm({"email": "nobody@x.com", "password": "p1"}) is None


def test_confirm_with_missing_fields_returns_none(app_ctx):
    user_service.create_user(ADA)
    assert user_service.confirm({"email": "ada@x.com"}) is None
    assert user_service.confirm({"password": "p1"}) is None


def test_confirm_checks_every_account_sharing_an_email(app_ctx):
    user_service.create_user(ADA)
    second = user_service.create_user({**ADA, "first_name": "Augusta", "password": "p2"})

    assert user_service.confirm({"email": "ada@x.com", "password": "p2"}) == second
