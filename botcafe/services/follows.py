"""
Follow Service - users following creator profiles.
"""

import logging
from typing import NamedTuple, Optional

from botcafe.exceptions import BadRequest, NotFound, Unauthorized
from botcafe.models import normalize_username
from botcafe.utils import equals

logger = logging.getLogger(__name__)


class FollowResult(NamedTuple):
    following: bool
    follower_count: int


class FollowService:
    """Follow / unfollow creators and report follower counts."""

    def __init__(self, store):
        self.store = store

    def find_creator(self, username: str) -> dict:
        username = normalize_username(username)
        if not username:
            raise BadRequest('Username is required')
        creator = self.store.find('creator_profiles', {'username': {'equals': username}}, limit=1).first()
        if creator is None:
            raise NotFound('Creator not found')
        return creator

    def _follow_row(self, user_id, creator_id):
        return self.store.find(
            'creator_follows', equals(follower_id=user_id, following_id=creator_id), limit=1
        ).first()

    def follower_count(self, creator_id) -> int:
        return self.store.count('creator_follows', {'following_id': {'equals': creator_id}})

    def toggle_follow(self, user_id: Optional[int], username: str) -> FollowResult:
        """Follow the creator, or unfollow if already following."""
        if user_id is None:
            raise Unauthorized()
        creator = self.find_creator(username)
        if creator['user_id'] == user_id:
            raise BadRequest('You cannot follow yourself')

        existing = self._follow_row(user_id, creator['id'])
        if existing is not None:
            self.store.delete('creator_follows', existing['id'])
            following = False
        else:
            self.store.create('creator_follows', {
                'follower_id': user_id,
                'following_id': creator['id'],
            })
            following = True

        count = self.follower_count(creator['id'])
        self.store.update('creator_profiles', creator['id'], {'follower_count': count})
        logger.info('User %s %s @%s (%d followers)',
                    user_id, 'followed' if following else 'unfollowed', creator['username'], count)
        return FollowResult(following, count)

    def follow_status(self, user_id: Optional[int], username: str) -> FollowResult:
        creator = self.find_creator(username)
        following = False
        if user_id is not None:
            following = self._follow_row(user_id, creator['id']) is not None
        return FollowResult(following, self.follower_count(creator['id']))
