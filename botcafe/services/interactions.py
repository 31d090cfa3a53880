"""
Interaction Service - like / favorite toggles and per-user status for bots.

Each toggle is two independent store writes: the interaction row first,
then the bot's denormalized counter. A failure between the two leaves the
row changed and the counter stale; ``recount_counters`` repairs that.
"""

import logging
from datetime import datetime
from typing import NamedTuple, Optional

from botcafe.exceptions import BadRequest, NotFound, Unauthorized
from botcafe.utils import coerce_id, equals

logger = logging.getLogger(__name__)

LIKE = 'like'
FAVORITE = 'favorite'

# kind -> (interaction field, bot counter field)
KINDS = {
    LIKE: ('liked', 'likes_count'),
    FAVORITE: ('favorited', 'favorites_count'),
}


class ToggleResult(NamedTuple):
    active: bool
    new_count: int


class InteractionService:
    """Toggle and read like/favorite state for (user, bot) pairs."""

    def __init__(self, store, permissions=None):
        self.store = store
        self.permissions = permissions

    def find_interaction(self, user_id: int, bot_id: int) -> Optional[dict]:
        return self.store.find(
            'bot_interactions', equals(user_id=user_id, bot_id=bot_id), limit=1
        ).first()

    def toggle(self, kind: str, actor_user_id: Optional[int], target_id) -> ToggleResult:
        """
        Flip the caller's like or favorite on a bot and adjust its counter.

        Args:
            kind: 'like' or 'favorite'
            actor_user_id: Store id of the caller, None when unauthenticated
            target_id: Bot id (int or numeric string)

        Returns:
            ToggleResult with the new state and the clamped counter value
        """
        if kind not in KINDS:
            raise BadRequest(f'Unknown interaction kind: {kind}')
        bot_id = coerce_id(target_id, 'Bot ID')
        if actor_user_id is None:
            raise Unauthorized()

        field, counter = KINDS[kind]

        if self.store.find_by_id('bots', bot_id) is None:
            raise NotFound('Bot not found')

        interaction = self.find_interaction(actor_user_id, bot_id)
        if interaction is not None:
            active = not interaction[field]
            self.store.update('bot_interactions', interaction['id'], {
                field: active,
                'updated_at': datetime.utcnow(),
            })
        else:
            active = True
            self.store.create('bot_interactions', {
                'user_id': actor_user_id,
                'bot_id': bot_id,
                'liked': field == 'liked',
                'favorited': field == 'favorited',
            })

        bot = self.store.find_by_id('bots', bot_id)
        if bot is None:
            raise NotFound('Bot not found')

        new_count = max(0, (bot[counter] or 0) + (1 if active else -1))
        self.store.update('bots', bot_id, {counter: new_count})

        logger.info('User %s %s bot %s: %s -> %s=%d',
                    actor_user_id, kind, bot_id, active, counter, new_count)
        return ToggleResult(active, new_count)

    def get_status(self, actor_user_id: Optional[int], target_id) -> dict:
        """Read the caller's like/favorite state and permission; never raises."""
        status = {'liked': False, 'favorited': False, 'permission': None}
        if actor_user_id is None:
            return status

        try:
            bot_id = coerce_id(target_id, 'Bot ID')
            interaction = self.find_interaction(actor_user_id, bot_id)
        except Exception:
            logger.exception('Error fetching interaction status for bot %s', target_id)
            return status

        if interaction is not None:
            status['liked'] = bool(interaction['liked'])
            status['favorited'] = bool(interaction['favorited'])

        if self.permissions is not None:
            try:
                access = self.permissions.check_resource_access(actor_user_id, 'bot', bot_id)
                status['permission'] = access.permission
            except Exception:
                logger.exception('Error checking permission for bot %s', bot_id)

        return status


def recount_counters(store) -> int:
    """Recompute every bot's counters from interaction rows.

    Returns:
        Number of bots whose counters were corrected
    """
    fixed = 0
    for bot in store.find('bots', limit=None).docs:
        actual = {
            counter: store.count('bot_interactions', equals(bot_id=bot['id'], **{field: True}))
            for field, counter in KINDS.values()
        }
        if any(bot[counter] != value for counter, value in actual.items()):
            store.update('bots', bot['id'], actual)
            logger.warning('Corrected counters for bot %s: %s', bot['id'], actual)
            fixed += 1
    return fixed
