"""
Creator follow tests.

Covers:
  - follow then unfollow toggles state and follower count
  - follower_count on the profile tracks the follow rows
  - self-follow rejected, unknown creator → 404, guest → 401
  - anonymous status check
  - usernames normalized to lowercase URL-safe form
  - creator profile setup and the caller's own profile
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture(scope='module')
def app():
    from config import config
    config.SECRET_KEY = 'test-secret-key-follows'
    config.SQLALCHEMY_DATABASE_URI = 'sqlite://'

    from botcafe import create_app
    application = create_app(testing=True)
    yield application


def _login(client, email):
    with client.session_transaction() as sess:
        sess['_user_id'] = email
        sess['_fresh'] = True


def _sync(app, email):
    with app.app_context():
        from botcafe.auth import sync_user
        from botcafe.store import get_store
        return sync_user(get_store(), email)['id']


@pytest.fixture(scope='module')
def creator(app):
    user_id = _sync(app, 'maker@test.com')
    with app.app_context():
        from botcafe.store import get_store
        return get_store().create('creator_profiles', {
            'user_id': user_id,
            'username': 'Bot Maker',
            'display_name': 'Bot Maker',
        })


@pytest.fixture(scope='module')
def fan_client(app):
    _sync(app, 'fan@test.com')
    client = app.test_client()
    _login(client, 'fan@test.com')
    return client


class TestFollow:

    def test_username_normalized(self, creator):
        assert creator['username'] == 'bot-maker'

    def test_follow_then_unfollow(self, app, creator, fan_client):
        resp = fan_client.post('/api/creators/bot-maker/follow')
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['success'] is True
        assert data['following'] is True
        assert data['followerCount'] == 1
        assert data['message'] == 'Now following'

        with app.app_context():
            from botcafe.store import get_store
            assert get_store().find_by_id('creator_profiles', creator['id'])['follower_count'] == 1

        resp = fan_client.post('/api/creators/bot-maker/follow')
        data = resp.get_json()
        assert data['following'] is False
        assert data['followerCount'] == 0
        assert data['message'] == 'Unfollowed'

    def test_username_case_insensitive(self, creator, fan_client):
        resp = fan_client.get('/api/creators/BOT-MAKER/follow')
        assert resp.status_code == 200

    def test_self_follow_rejected(self, app, creator):
        client = app.test_client()
        _login(client, 'maker@test.com')
        resp = client.post('/api/creators/bot-maker/follow')
        assert resp.status_code == 400
        assert resp.get_json() == {'success': False, 'message': 'You cannot follow yourself'}

    def test_unknown_creator(self, fan_client):
        resp = fan_client.post('/api/creators/nobody/follow')
        assert resp.status_code == 404
        assert resp.get_json()['message'] == 'Creator not found'

    def test_guest_cannot_follow(self, app, creator):
        resp = app.test_client().post('/api/creators/bot-maker/follow')
        assert resp.status_code == 401

    def test_unsynced_identity(self, app, creator):
        client = app.test_client()
        _login(client, 'unsynced-fan@test.com')
        resp = client.post('/api/creators/bot-maker/follow')
        assert resp.status_code == 404
        assert resp.get_json()['success'] is False


class TestFollowStatus:

    def test_anonymous_status(self, app, creator, fan_client):
        fan_client.post('/api/creators/bot-maker/follow')

        resp = app.test_client().get('/api/creators/bot-maker/follow')
        assert resp.status_code == 200
        assert resp.get_json() == {'success': True, 'following': False, 'followerCount': 1}

        assert fan_client.get('/api/creators/bot-maker/follow').get_json()['following'] is True

    def test_unknown_creator_status(self, app):
        resp = app.test_client().get('/api/creators/nobody/follow')
        assert resp.status_code == 404


class TestCreatorProfile:

    def _setup(self, client, username, display_name='Someone', bio=''):
        return client.post('/api/creators', json={
            'username': username,
            'display_name': display_name,
            'bio': bio,
        })

    def test_create_then_read_own_profile(self, app, fan_client):
        _sync(app, 'newcreator@test.com')
        client = app.test_client()
        _login(client, 'newcreator@test.com')

        assert client.get('/api/creators/me').get_json() == {
            'success': True, 'creator': None, 'hasProfile': False,
        }

        resp = self._setup(client, 'New Creator', display_name='New Creator', bio='Makes bots')
        assert resp.status_code == 201
        data = resp.get_json()
        assert data['success'] is True
        assert data['creator']['username'] == 'new-creator'
        assert data['creator']['bio'] == 'Makes bots'

        me = client.get('/api/creators/me').get_json()
        assert me['hasProfile'] is True
        assert me['creator']['username'] == 'new-creator'
        assert me['creator']['display_name'] == 'New Creator'

        follow = fan_client.post('/api/creators/new-creator/follow')
        assert follow.status_code == 200
        assert follow.get_json()['followerCount'] == 1

    def test_username_taken(self, app, creator):
        _sync(app, 'copycat@test.com')
        client = app.test_client()
        _login(client, 'copycat@test.com')

        resp = self._setup(client, 'BOT MAKER')
        assert resp.status_code == 409
        assert resp.get_json() == {'success': False, 'message': 'Username is already taken'}

    def test_one_profile_per_user(self, app, creator):
        client = app.test_client()
        _login(client, 'maker@test.com')

        resp = self._setup(client, 'second-page')
        assert resp.status_code == 409
        assert resp.get_json()['message'] == 'You already have a creator profile'

    def test_missing_fields(self, app):
        _sync(app, 'incomplete@test.com')
        client = app.test_client()
        _login(client, 'incomplete@test.com')

        resp = client.post('/api/creators', json={'username': 'incomplete'})
        assert resp.status_code == 400
        assert resp.get_json()['message'] == 'Username and display name are required'
        assert client.get('/api/creators/me').get_json()['hasProfile'] is False

    def test_unsynced_identity(self, app):
        client = app.test_client()
        _login(client, 'unsynced-creator@test.com')

        assert client.get('/api/creators/me').get_json()['hasProfile'] is False
        resp = self._setup(client, 'ghost')
        assert resp.status_code == 404

    def test_guest_rejected(self, app):
        client = app.test_client()
        assert client.post('/api/creators', json={'username': 'x', 'display_name': 'X'}).status_code == 401
        assert client.get('/api/creators/me').status_code == 401
