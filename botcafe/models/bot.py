"""
Bot model - character profiles that users like and favorite.
"""

from datetime import datetime

from .database import db


class Bot(db.Model):
    """Bot profile with denormalized interaction counters."""

    __tablename__ = 'bots'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    slug = db.Column(db.String(160), nullable=False, index=True)
    description = db.Column(db.String(2000), nullable=False, default='')
    is_public = db.Column(db.Boolean, nullable=False, default=False)
    # private | shared | public
    sharing_visibility = db.Column(db.String(10), nullable=False, default='private')
    likes_count = db.Column(db.Integer, nullable=False, default=0)
    favorites_count = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    creator = db.relationship('User', backref='bots')
