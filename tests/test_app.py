from classbook import create_app
from classbook.config import TestConfig
from classbook.extensions import db
from classbook.models import User
from conftest import PASSWORD


def test_index_serves_single_page_app(client):
    r = client.get('/')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert '<main id="view"' in body
    assert '/static/app.js' in body

    assert client.get('/static/app.js').status_code == 200


def test_unknown_route_uses_error_envelope(client):
    r = client.get('/nope')
    assert r.status_code == 404
    assert r.get_json()['error']['code'] == 'NOT_FOUND'


def test_wrong_method_uses_error_envelope(client):
    r = client.put('/sessions')
    assert r.status_code == 405
    assert r.get_json()['error']['code'] == 'METHOD_NOT_ALLOWED'


def test_cors_headers_for_allowed_origin(client):
    r = client.get('/sessions', headers={'Origin': 'http://localhost:3000'})
    assert r.headers['Access-Control-Allow-Origin'] == 'http://localhost:3000'
    assert r.headers['Access-Control-Allow-Credentials'] == 'true'


def test_cors_preflight_needs_no_token(client):
    r = client.options('/bookings', headers={
        'Origin': 'http://localhost:3000',
        'Access-Control-Request-Method': 'GET',
        'Access-Control-Request-Headers': 'Authorization',
    })
    assert r.status_code == 200
    assert r.headers['Access-Control-Allow-Origin'] == 'http://localhost:3000'
    assert 'DELETE' in r.headers['Access-Control-Allow-Methods']
    assert 'authorization' in r.headers['Access-Control-Allow-Headers'].lower()


def test_no_cors_headers_for_unknown_origin(client):
    r = client.get('/sessions', headers={'Origin': 'https://evil.example.com'})
    assert 'Access-Control-Allow-Origin' not in r.headers


def test_unexpected_errors_become_internal_error(app, client, monkeypatch):
    from classbook.services import catalog

    def explode():
        raise RuntimeError('boom')

    monkeypatch.setattr(catalog, 'list_sessions', explode)
    r = client.get('/sessions')
    assert r.status_code == 500
    assert r.get_json()['error']['code'] == 'INTERNAL_ERROR'


def test_login_is_rate_limited():
    class LimitedConfig(TestConfig):
        RATELIMIT_ENABLED = True
        AUTH_RATE_LIMIT = '2 per minute'

    app = create_app(LimitedConfig)
    try:
        client = app.test_client()
        payload = {'email': 'nobody@example.com', 'password': PASSWORD}
        assert client.post('/auth/login', json=payload).status_code == 401
        assert client.post('/auth/login', json=payload).status_code == 401
        r = client.post('/auth/login', json=payload)
        assert r.status_code == 429
        assert r.get_json()['error']['code'] == 'RATE_LIMITED'
    finally:
        with app.app_context():
            db.drop_all()


def test_default_admin_is_ensured_at_startup():
    class SeededConfig(TestConfig):
        ADMIN_EMAIL = 'Owner@Example.com'
        ADMIN_PASSWORD = 'owner-pass'

    app = create_app(SeededConfig)
    with app.app_context():
        owner = User.query.filter_by(email='owner@example.com').first()
        assert owner is not None
        assert owner.role == 'Admin'
        db.drop_all()


def test_make_admin_command(app, user):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['make-admin', user['email']])
    assert result.exit_code == 0
    assert 'now an administrator' in result.output

    with app.app_context():
        assert User.query.filter_by(email=user['email']).first().role == 'Admin'


def test_make_admin_command_unknown_email(app):
    result = app.test_cli_runner().invoke(args=['make-admin', 'ghost@example.com'])
    assert result.exit_code != 0
    assert 'No user with email' in result.output


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=['init-db'])
    assert result.exit_code == 0


def test_cors_headers_on_error_responses(client):
    r = client.get('/bookings', headers={'Origin': 'http://localhost:3000'})
    assert r.status_code == 401
    assert r.headers['Access-Control-Allow-Origin'] == 'http://localhost:3000'


def test_session_duration_read_from_environment(monkeypatch):
    import importlib

    from classbook import config

    monkeypatch.setenv('SESSION_DURATION_HOURS', '3')
    try:
        assert importlib.reload(config).Config.SESSION_DURATION_HOURS == 3
    finally:
        monkeypatch.delenv('SESSION_DURATION_HOURS')
        importlib.reload(config)
    assert config.Config.SESSION_DURATION_HOURS == 2


def test_client_script_refreshes_user_from_server(client, app, user, user_headers):
    script = client.get('/static/app.js').get_data(as_text=True)
    assert "apiFetch('/auth/me')" in script
    assert 'refreshUser();' in script

    with app.app_context():
        User.query.filter_by(id=user['id']).update({'role': 'Admin'})
        db.session.commit()
    assert client.get('/auth/me', headers=user_headers).get_json()['role'] == 'Admin'
