"""
Services package - business logic over the document store.
"""

from .interactions import InteractionService, ToggleResult
from .permissions import PermissionService, AccessCheck
from .follows import FollowService
from .creators import CreatorService

__all__ = [
    'InteractionService', 'ToggleResult',
    'PermissionService', 'AccessCheck',
    'FollowService', 'CreatorService',
]
