"""
Bot Interaction model - one row per (user, bot) holding like/favorite flags.
"""

from datetime import datetime

from .database import db


class BotInteraction(db.Model):
    """A user's like and favorite state for a bot.

    (user_id, bot_id) is not unique at the table level; the interaction
    service looks the row up before creating it.
    """

    __tablename__ = 'bot_interactions'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    bot_id = db.Column(
        db.Integer,
        db.ForeignKey('bots.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    liked = db.Column(db.Boolean, nullable=False, default=False)
    favorited = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
