"""
Creator Service - setting up and reading creator profiles.
"""

import logging
from typing import Optional

from botcafe.exceptions import BadRequest, Conflict
from botcafe.models import normalize_username

logger = logging.getLogger(__name__)


class CreatorService:
    """One creator profile per user, addressed by a unique username."""

    def __init__(self, store):
        self.store = store

    def profile_for(self, user_id: Optional[int]) -> Optional[dict]:
        if user_id is None:
            return None
        return self.store.find('creator_profiles', {'user_id': {'equals': user_id}}, limit=1).first()

    def create_profile(self, user_id: int, username: str, display_name: str, bio: str = '') -> dict:
        """
        Create the caller's creator profile.

        Args:
            user_id: Store id of the owning user
            username: Requested username; stored lowercased and URL-safe
            display_name: Name shown on the profile page
            bio: Optional free text

        Raises:
            BadRequest: if username or display name is missing
            Conflict: if the user already has a profile or the username is taken
        """
        username = normalize_username(username)
        display_name = (display_name or '').strip()
        if not username or not display_name:
            raise BadRequest('Username and display name are required')

        if self.profile_for(user_id) is not None:
            raise Conflict('You already have a creator profile')
        taken = self.store.find('creator_profiles', {'username': {'equals': username}}, limit=1).first()
        if taken is not None:
            raise Conflict('Username is already taken')

        profile = self.store.create('creator_profiles', {
            'user_id': user_id,
            'username': username,
            'display_name': display_name,
            'bio': (bio or '').strip(),
        })
        logger.info('User %s created creator profile @%s', user_id, username)
        return profile
