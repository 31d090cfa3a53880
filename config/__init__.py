"""
Configuration Module for BotCafe.
Centralizes all app settings with environment variable support.
"""

import hashlib
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration with sensible defaults."""

    # Paths
    BASE_DIR = Path(__file__).parent.parent
    DATABASE_PATH = BASE_DIR / 'botcafe.db'

    # Stable fallback key derived from the DB path
    _fallback_key = hashlib.sha256(
        f'botcafe-secret-{Path(__file__).parent.parent / "botcafe.db"}'.encode()
    ).hexdigest()
    SECRET_KEY = os.getenv('SECRET_KEY', _fallback_key)
    DEBUG = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', f'sqlite:///{DATABASE_PATH}')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Third-party auth
    GOOGLE_CLIENT_ID = os.getenv('GOOGLE_CLIENT_ID')
    GOOGLE_CLIENT_SECRET = os.getenv('GOOGLE_CLIENT_SECRET')
    BASE_URL = os.getenv('BOTCAFE_BASE_URL', '').rstrip('/')

    # Session cookies are HTTPS-only in production
    SESSION_COOKIE_SECURE = os.getenv('FLASK_ENV') == 'production'

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Rate limits
    TOGGLE_RATE_LIMIT = os.getenv('TOGGLE_RATE_LIMIT', '30 per minute')

    # Sharing
    RESOURCE_TYPES = ['bot']
    PERMISSIONS = ['owner', 'editor', 'readonly']


# Create default instance
config = Config()
