from library_app.auth_gate import LOGIN_REQUIRED_ENDPOINTS, requires_login


def test_policy_table_lists_gated_endpoints():
    assert LOGIN_REQUIRED_ENDPOINTS == {"users.show", "library_users.create"}


def test_public_endpoints_are_not_gated():
    for endpoint in ("users.index", "users.new", "users.create", "sessions.new",
                     "sessions.create", "sessions.destroy", "libraries.index",
                     "libraries.show", "libraries.new", "libraries.create",
                     "library_users.index"):
        assert not requires_login(endpoint)


def test_every_gated_endpoint_is_registered(app):
    registered = {rule.endpoint for rule in app.url_map.iter_rules()}
    assert LOGIN_REQUIRED_ENDPOINTS <= registered


def test_session_for_deleted_user_counts_as_logged_out(client, app, make_user, login):
    from library_app.extensions import db
    from library_app.models import User

    user_id = make_user()
    login()
    with app.app_context():
        db.session.delete(db.session.get(User, user_id))
        db.session.commit()

    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Log In" in resp.data
