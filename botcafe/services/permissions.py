"""
Permission Service - who may do what with a shared resource.

Access comes from, in order:
  1. being the bot's creator (owner)
  2. a non-revoked access_control grant (highest grant wins)
  3. the bot being public (readonly)
"""

import logging
from datetime import datetime
from typing import NamedTuple, Optional

from botcafe.exceptions import BadRequest, Forbidden, NotFound
from botcafe.utils import coerce_id, equals

logger = logging.getLogger(__name__)

# Permission hierarchy, lowest first
PERMISSION_ORDER = ['readonly', 'editor', 'owner']

# access_control.permission_type -> permission
GRANT_TO_PERMISSION = {
    'admin': 'owner',
    'write': 'editor',
    'read': 'readonly',
}
PERMISSION_TO_GRANT = {v: k for k, v in GRANT_TO_PERMISSION.items()}

# resource type -> collection holding the resource
RESOURCE_COLLECTIONS = {
    'bot': 'bots',
}


class AccessCheck(NamedTuple):
    has_access: bool
    permission: Optional[str]
    is_original_creator: bool


NO_ACCESS = AccessCheck(False, None, False)


class PermissionService:
    """Resolve, grant and revoke access to bots."""

    def __init__(self, store):
        self.store = store

    def _resource(self, resource_type, resource_id):
        collection = RESOURCE_COLLECTIONS.get(resource_type)
        if collection is None:
            raise BadRequest(f'Invalid resource type: {resource_type}')
        return self.store.find_by_id(collection, coerce_id(resource_id, 'Resource ID'))

    def _active_grants(self, resource_type, resource_id, user_id=None, limit=100):
        fields = {
            'resource_type': resource_type,
            'resource_id': str(resource_id),
            'is_revoked': False,
        }
        if user_id is not None:
            fields['user_id'] = user_id
        return self.store.find('access_control', equals(**fields), limit=limit).docs

    def is_original_creator(self, user_id, resource_type, resource_id) -> bool:
        resource = self._resource(resource_type, resource_id)
        return resource is not None and resource['user_id'] == user_id

    def check_resource_access(self, user_id, resource_type, resource_id) -> AccessCheck:
        resource = self._resource(resource_type, resource_id)
        if resource is None:
            return NO_ACCESS

        if resource['user_id'] == user_id:
            return AccessCheck(True, 'owner', True)

        granted = {g['permission_type'] for g in self._active_grants(resource_type, resource['id'], user_id, limit=10)}
        for grant in ('admin', 'write', 'read'):
            if grant in granted:
                return AccessCheck(True, GRANT_TO_PERMISSION[grant], False)

        if resource['is_public'] or resource['sharing_visibility'] == 'public':
            return AccessCheck(True, 'readonly', False)

        return NO_ACCESS

    def can_user_access(self, user_id, resource_type, resource_id, required) -> bool:
        """True if the user holds at least ``required`` on the resource."""
        access = self.check_resource_access(user_id, resource_type, resource_id)
        if not access.has_access:
            return False
        return PERMISSION_ORDER.index(access.permission) >= PERMISSION_ORDER.index(required)

    def _require_owner(self, user_id, resource_type, resource_id, action):
        access = self.check_resource_access(user_id, resource_type, resource_id)
        if access.permission != 'owner':
            raise Forbidden(f'Only owners can {action}')

    def grant_access(self, grantor_id, target_user_id, resource_type, resource_id, permission):
        """Grant or update ``permission`` for ``target_user_id``; grantor must be owner."""
        if permission not in PERMISSION_ORDER:
            raise BadRequest('Invalid permission. Must be "owner", "editor", or "readonly"')
        resource_id = coerce_id(resource_id, 'Resource ID')
        self._require_owner(grantor_id, resource_type, resource_id, 'grant access')

        grant_type = PERMISSION_TO_GRANT[permission]
        existing = self._active_grants(resource_type, resource_id, target_user_id, limit=1)
        if existing:
            return self.store.update('access_control', existing[0]['id'], {
                'permission_type': grant_type,
            })
        return self.store.create('access_control', {
            'user_id': target_user_id,
            'granted_by_id': grantor_id,
            'resource_type': resource_type,
            'resource_id': str(resource_id),
            'permission_type': grant_type,
            'grant_method': 'direct-share',
            'is_revoked': False,
        })

    def revoke_access(self, revoker_id, target_user_id, resource_type, resource_id) -> int:
        """Revoke every active grant the target holds; returns how many."""
        resource_id = coerce_id(resource_id, 'Resource ID')
        self._require_owner(revoker_id, resource_type, resource_id, 'revoke access')
        if self.is_original_creator(target_user_id, resource_type, resource_id):
            raise Forbidden('Cannot revoke access from the original creator')

        grants = self._active_grants(resource_type, resource_id, target_user_id, limit=10)
        for grant in grants:
            self.store.update('access_control', grant['id'], {
                'is_revoked': True,
                'revoked_by_id': revoker_id,
                'revoked_at': datetime.utcnow(),
                'revoked_reason': 'Access revoked by owner',
            })
        logger.info('User %s revoked %d grant(s) of %s %s from user %s',
                    revoker_id, len(grants), resource_type, resource_id, target_user_id)
        return len(grants)

    def describe_user(self, user_id) -> dict:
        """Username and display name from the user's creator profile."""
        user = self.store.find_by_id('users', user_id) or {}
        profile = self.store.find('creator_profiles', {'user_id': {'equals': user_id}}, limit=1).first() or {}
        email = user.get('email') or ''
        return {
            'userId': user_id,
            'username': profile.get('username') or email.split('@')[0] or 'unknown',
            'displayName': profile.get('display_name') or user.get('name') or email or 'Unknown User',
        }

    def get_collaborators(self, resource_type, resource_id) -> list:
        resource_id = coerce_id(resource_id, 'Resource ID')
        collaborators = []
        for grant in self._active_grants(resource_type, resource_id):
            entry = self.describe_user(grant['user_id'])
            entry['permission'] = GRANT_TO_PERMISSION.get(grant['permission_type'], 'readonly')
            entry['grantedAt'] = grant['created_at'].isoformat() if grant['created_at'] else None
            collaborators.append(entry)
        return collaborators

    def get_original_creator(self, resource_type, resource_id) -> dict:
        resource = self._resource(resource_type, resource_id)
        if resource is None:
            raise NotFound('Resource not found')
        creator = self.describe_user(resource['user_id'])
        creator['isOriginalCreator'] = True
        return creator
