"""
Creator profile and follow models.
"""

import re
from datetime import datetime

from sqlalchemy.orm import validates

from .database import db


def normalize_username(value):
    """Lowercase and replace anything outside [a-z0-9-_] with a dash."""
    return re.sub(r'[^a-z0-9\-_]', '-', (value or '').strip().lower())


class CreatorProfile(db.Model):
    """Public creator page, addressed by a URL-safe username."""

    __tablename__ = 'creator_profiles'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    username = db.Column(db.String(60), nullable=False, unique=True, index=True)
    display_name = db.Column(db.String(120), nullable=False, default='')
    bio = db.Column(db.Text, nullable=False, default='')
    follower_count = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    @validates('username')
    def _normalize_username(self, key, value):
        return normalize_username(value)


class CreatorFollow(db.Model):
    """A user following a creator profile."""

    __tablename__ = 'creator_follows'
    __table_args__ = (
        db.UniqueConstraint('follower_id', 'following_id', name='uq_creator_follow'),
    )

    id = db.Column(db.Integer, primary_key=True)
    follower_id = db.Column(
        db.Integer,
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    following_id = db.Column(
        db.Integer,
        db.ForeignKey('creator_profiles.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
