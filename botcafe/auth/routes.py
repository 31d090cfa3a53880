"""
Auth Routes - current identity and logout.
"""

from flask import Blueprint, jsonify
from flask_login import login_required, logout_user

from botcafe.auth import current_identity, find_store_user
from botcafe.store import get_store

bp = Blueprint('auth', __name__)


@bp.route('/api/auth/me', methods=['GET'])
@login_required
def me():
    """Get the caller's identity and synced user record."""
    identity = current_identity()
    user = find_store_user(get_store(), identity)
    return jsonify({
        'email': identity.email,
        'synced': user is not None,
        'user': {
            'id': user['id'],
            'name': user['name'],
            'role': user['role'],
            'avatar_url': user['avatar_url'],
        } if user else None,
    })


@bp.route('/api/auth/logout', methods=['POST'])
@login_required
def logout():
    """Logout current user."""
    logout_user()
    return jsonify({'success': True})
