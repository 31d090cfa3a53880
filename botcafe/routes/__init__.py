"""
Routes package - Flask blueprints for BotCafe API endpoints.
"""

from botcafe.auth import current_identity, find_store_user, resolve_store_user
from botcafe.exceptions import Unauthorized
from botcafe.services import CreatorService, FollowService, InteractionService, PermissionService
from botcafe.store import get_store


def interaction_service():
    store = get_store()
    return InteractionService(store, permissions=PermissionService(store))


def permission_service():
    return PermissionService(get_store())


def follow_service():
    return FollowService(get_store())


def creator_service():
    return CreatorService(get_store())


def caller_user_id(required=True):
    """
    Store user id of the caller.

    With ``required`` the caller must be signed in and synced
    (Unauthorized / NotFound otherwise); without it, None is returned
    for anonymous or unsynced callers.
    """
    identity = current_identity()
    store = get_store()
    if not required:
        user = find_store_user(store, identity)
        return user['id'] if user else None
    if identity is None:
        raise Unauthorized()
    return resolve_store_user(store, identity)['id']
