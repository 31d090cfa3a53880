"""
Authentication package for BotCafe.
Flask-Login setup, identity loader, and Google OAuth init.

The session holds only the external identity (the email the identity
provider verified). Store user ids are looked up per request with
``resolve_store_user``.
"""

from flask import jsonify
from flask_login import LoginManager, UserMixin, current_user

from botcafe.exceptions import NotFound

login_manager = LoginManager()


class Identity(UserMixin):
    """Caller identity vouched for by the identity provider."""

    def __init__(self, email):
        self.email = email.strip().lower()

    def get_id(self):
        return self.email


def init_auth(app):
    """Initialize authentication with Flask app."""
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_identity(email):
        if not email:
            return None
        return Identity(email)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'message': 'Unauthorized'}), 401

    # Initialize Google OAuth (no-op if not configured)
    from botcafe.auth.google import init_google_oauth
    init_google_oauth(app)


def current_identity():
    """Return the authenticated Identity, or None for anonymous callers."""
    if current_user and current_user.is_authenticated:
        return current_user
    return None


def find_store_user(store, identity):
    """Return the synced users document for ``identity`` or None."""
    if identity is None:
        return None
    return store.find('users', {'email': {'equals': identity.email}}, limit=1).first()


def resolve_store_user(store, identity):
    """Map an identity to its users document, raising NotFound if not synced."""
    user = find_store_user(store, identity)
    if user is None:
        raise NotFound('User not synced yet. Please try again.')
    return user


def sync_user(store, email, name='', google_sub=None, avatar_url=None):
    """Create or refresh the users document for a verified identity."""
    email = email.strip().lower()
    existing = store.find('users', {'email': {'equals': email}}, limit=1).first()
    if existing is None:
        return store.create('users', {
            'email': email,
            'name': name or email.split('@')[0],
            'google_sub': google_sub,
            'avatar_url': avatar_url,
            'role': 'user',
            'is_active': True,
        })

    changes = {}
    if google_sub and not existing['google_sub']:
        changes['google_sub'] = google_sub
    if avatar_url and not existing['avatar_url']:
        changes['avatar_url'] = avatar_url
    if name and not existing['name']:
        changes['name'] = name
    if not changes:
        return existing
    return store.update('users', existing['id'], changes)
