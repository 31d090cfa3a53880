"""
Sharing Routes - grant, list and revoke access to bots.
"""

from flask import Blueprint, jsonify, request

from botcafe.exceptions import BadRequest, BotCafeError, Forbidden, NotFound
from botcafe.routes import caller_user_id, permission_service
from botcafe.store import get_store
from botcafe.utils import coerce_id
from config import config

bp = Blueprint('sharing', __name__)


@bp.errorhandler(BotCafeError)
def handle_error(e):
    return jsonify({'success': False, 'message': e.message}), e.status_code


def _validate_resource_type(resource_type):
    if resource_type not in config.RESOURCE_TYPES:
        raise BadRequest('Invalid resource type. Must be "bot"')


@bp.route('/sharing', methods=['POST'])
def grant_access():
    """Share a resource with another creator, identified by username."""
    data = request.get_json(silent=True) or {}

    resource_type = str(data.get('resourceType') or '').strip()
    resource_id = data.get('resourceId')
    username = str(data.get('username') or '').strip().lower()
    permission = str(data.get('permission') or '').strip()

    if not resource_type or not resource_id or not username or not permission:
        raise BadRequest('Missing required fields: resourceType, resourceId, username, permission')
    _validate_resource_type(resource_type)
    if permission not in config.PERMISSIONS:
        raise BadRequest('Invalid permission. Must be "owner", "editor", or "readonly"')

    grantor_id = caller_user_id()

    profile = get_store().find('creator_profiles', {'username': {'equals': username}}, limit=1).first()
    if profile is None:
        raise NotFound(
            f'No user found with username "{username}". '
            'They need to set up a creator profile first.'
        )
    if profile['user_id'] == grantor_id:
        raise BadRequest('You cannot share with yourself')

    permission_service().grant_access(
        grantor_id, profile['user_id'], resource_type, resource_id, permission
    )
    return jsonify({
        'success': True,
        'message': f"Access granted to {profile['display_name']} (@{profile['username']})",
        'share': {
            'userId': profile['user_id'],
            'username': profile['username'],
            'displayName': profile['display_name'],
            'permission': permission,
        },
    })


@bp.route('/sharing/<resource_type>/<resource_id>', methods=['GET'])
def list_collaborators(resource_type, resource_id):
    """List everyone granted access. Owners only."""
    _validate_resource_type(resource_type)
    user_id = caller_user_id()
    service = permission_service()

    access = service.check_resource_access(user_id, resource_type, resource_id)
    if access.permission != 'owner':
        raise Forbidden('Only owners can view collaborators')

    return jsonify({
        'success': True,
        'originalCreator': service.get_original_creator(resource_type, resource_id),
        'collaborators': service.get_collaborators(resource_type, resource_id),
    })


@bp.route('/sharing/<resource_type>/<resource_id>', methods=['DELETE'])
def revoke_access(resource_type, resource_id):
    """Revoke a user's access (``?userId=``). Owners only."""
    _validate_resource_type(resource_type)
    target = request.args.get('userId', '').strip()
    if not target:
        raise BadRequest('userId query parameter is required')
    target_user_id = coerce_id(target, 'userId')

    revoker_id = caller_user_id()
    permission_service().revoke_access(revoker_id, target_user_id, resource_type, resource_id)
    return jsonify({'success': True, 'message': 'Access revoked successfully'})
