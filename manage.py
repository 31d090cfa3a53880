#!/usr/bin/env python3
"""
BotCafe CLI - maintenance commands.

Usage:
    python manage.py init-db
    python manage.py seed-demo
    python manage.py recount

init-db     Create all tables.
seed-demo   Create a demo user, creator profile and public bot
            (BOTCAFE_DEMO_EMAIL, default demo@botcafe.local).
recount     Recompute likes_count / favorites_count from interaction rows.
"""

import os
import sys

from dotenv import load_dotenv


def init_db(app):
    """Tables are created by create_app; report what exists."""
    with app.app_context():
        from botcafe.models import db
        tables = sorted(db.metadata.tables)
        print(f"Database ready: {', '.join(tables)}")


def seed_demo(app):
    """Create demo records, reusing any that already exist."""
    email = os.getenv('BOTCAFE_DEMO_EMAIL', 'demo@botcafe.local').strip().lower()

    with app.app_context():
        from botcafe.auth import sync_user
        from botcafe.store import get_store

        store = get_store()
        user = sync_user(store, email, name='Demo Creator')

        profile = store.find('creator_profiles', {'user_id': {'equals': user['id']}}, limit=1).first()
        if profile is None:
            profile = store.create('creator_profiles', {
                'user_id': user['id'],
                'username': email.split('@')[0],
                'display_name': 'Demo Creator',
            })

        bot = store.find('bots', {'user_id': {'equals': user['id']}}, limit=1).first()
        if bot is None:
            bot = store.create('bots', {
                'user_id': user['id'],
                'name': 'Barista',
                'slug': 'barista',
                'description': 'Serves coffee and small talk.',
                'is_public': True,
                'sharing_visibility': 'public',
            })

        print(f"Demo user {user['email']} (id {user['id']}), "
              f"@{profile['username']}, bot {bot['id']} ({bot['name']})")


def recount(app):
    """Repair counter drift on every bot."""
    with app.app_context():
        from botcafe.services.interactions import recount_counters
        from botcafe.store import get_store

        fixed = recount_counters(get_store())
        print(f"Corrected counters on {fixed} bot(s)")


COMMANDS = {
    'init-db': init_db,
    'seed-demo': seed_demo,
    'recount': recount,
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        sys.exit(1)

    load_dotenv()

    from botcafe import create_app
    COMMANDS[sys.argv[1]](create_app())


if __name__ == '__main__':
    main()
