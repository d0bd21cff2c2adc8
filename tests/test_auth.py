"""
Authentication route tests.
Login for administrators and clubs, logout and the current principal.
"""


class TestLogin:
    """Tests for POST /auth/login."""

    def test_admin_login_by_username(self, client):
        response = client.post('/auth/login', json={'identifier': 'admin', 'password': 'admin123'})
        data = response.get_json()

        assert response.status_code == 200
        assert data['success'] is True
        assert data['user']['role'] == 'admin'

    def test_club_login_by_email(self, client):
        response = client.post('/auth/login', json={
            'identifier': 'CS-Club@example.com',
            'password': 'password123'
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['user'] == {
            'id': 1,
            'role': 'club',
            'name': 'Computer Science Club',
            'email': 'cs-club@example.com',
        }

    def test_form_post_accepted(self, client):
        response = client.post('/auth/login', data={'identifier': 'admin', 'password': 'admin123'})
        assert response.status_code == 200

    def test_wrong_password(self, client):
        response = client.post('/auth/login', json={'identifier': 'admin', 'password': 'nope'})
        assert response.status_code == 401
        assert response.get_json()['success'] is False

    def test_non_text_credentials(self, client):
        response = client.post('/auth/login', json={'identifier': 123, 'password': ['admin123']})
        assert response.status_code == 401

    def test_missing_fields(self, client):
        response = client.post('/auth/login', json={'identifier': 'admin'})
        data = response.get_json()

        assert response.status_code == 400
        assert data['fields'] == ['password']

    def test_inactive_club_refused(self, app, client):
        from models.club import update_club

        with app.app_context():
            update_club(1, status='inactive')

        response = client.post('/auth/login', json={
            'identifier': 'cs-club@example.com',
            'password': 'password123'
        })
        assert response.status_code == 403

    def test_login_stamps_last_login(self, app, club_client):
        from models.club import get_club_by_id

        with app.app_context():
            assert get_club_by_id(1)['last_login'] is not None


class TestSession:
    """Tests for /auth/me and /auth/logout."""

    def test_me_requires_login(self, client):
        response = client.get('/auth/me')
        assert response.status_code == 401
        assert response.get_json()['success'] is False

    def test_me(self, club_client):
        response = club_client.get('/auth/me')
        assert response.get_json()['user']['name'] == 'Computer Science Club'

    def test_logout(self, admin_client):
        assert admin_client.post('/auth/logout').status_code == 200
        assert admin_client.get('/auth/me').status_code == 401

    def test_csrf_token_endpoint(self, client):
        response = client.get('/auth/csrf-token')
        assert response.status_code == 200
        assert response.get_json()['csrf_token']
