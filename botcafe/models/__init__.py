"""
Models package for BotCafe.
"""

from .database import db, init_db
from .user import User
from .bot import Bot
from .bot_interaction import BotInteraction
from .creator_profile import CreatorProfile, CreatorFollow, normalize_username
from .access_control import AccessControl

__all__ = [
    'db', 'init_db', 'User', 'Bot', 'BotInteraction',
    'CreatorProfile', 'CreatorFollow', 'AccessControl', 'normalize_username',
]
