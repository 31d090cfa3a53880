"""
Bot Routes - like / favorite toggles and interaction status.
"""

import logging

from flask import Blueprint, jsonify

from botcafe.exceptions import BotCafeError
from botcafe.limiter import limiter
from botcafe.routes import caller_user_id, interaction_service
from botcafe.services.interactions import LIKE, FAVORITE
from config import config

logger = logging.getLogger(__name__)

bp = Blueprint('bots', __name__)


def _toggle(kind, bot_id, state_key, count_key):
    if not bot_id.strip():
        return jsonify({'message': 'Bot ID is required'}), 400
    try:
        result = interaction_service().toggle(kind, caller_user_id(), bot_id)
    except BotCafeError:
        raise
    except Exception as e:
        logger.exception('Error toggling %s on bot %s', kind, bot_id)
        return jsonify({'message': str(e) or f'Failed to toggle {kind}'}), 500

    return jsonify({state_key: result.active, count_key: result.new_count})


@bp.route('/bots/<bot_id>/like', methods=['POST'])
@limiter.limit(lambda: config.TOGGLE_RATE_LIMIT)
def toggle_like(bot_id):
    """Like the bot, or remove the like if already liked."""
    return _toggle(LIKE, bot_id, 'liked', 'likes_count')


@bp.route('/bots/<bot_id>/favorite', methods=['POST'])
@limiter.limit(lambda: config.TOGGLE_RATE_LIMIT)
def toggle_favorite(bot_id):
    """Favorite the bot, or remove the favorite if already favorited."""
    return _toggle(FAVORITE, bot_id, 'favorited', 'favorites_count')


@bp.route('/bots/<bot_id>/status', methods=['GET'])
def interaction_status(bot_id):
    """Caller's like/favorite state and permission. Degrades to defaults."""
    try:
        user_id = caller_user_id(required=False)
    except Exception:
        logger.exception('Error resolving caller for bot %s status', bot_id)
        user_id = None
    return jsonify(interaction_service().get_status(user_id, bot_id))
