from sqlalchemy.exc import OperationalError


def test_health_reports_database(client):
    r = client.get('/health')
    assert r.status_code == 200
    data = r.get_json()
    assert data['status'] == 'healthy'
    assert data['database'] == 'connected'
    assert data['environment'] == 'test'
    assert data['version'] == '1.0.0'
    assert data['uptime'] >= 0


def test_health_unhealthy_when_database_fails(client, monkeypatch):
    from classbook.extensions import db

    def broken(*args, **kwargs):
        raise OperationalError('SELECT 1', {}, Exception('database is locked'))

    monkeypatch.setattr(db.session, 'execute', broken)
    r = client.get('/health')
    assert r.status_code == 503
    data = r.get_json()
    assert data['status'] == 'unhealthy'
    assert data['database'] == 'disconnected'
    assert 'error' in data


def test_ping(client):
    r = client.get('/health/ping')
    assert r.status_code == 200
    assert r.get_json()['message'] == 'pong'
